from __future__ import annotations
from typing import Any, ClassVar, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from validbr.errors import DocumentError, InvalidBranchNumber
from validbr.models.document import Digit, check_group, check_verifiers, coerce_digits, read_groups
from validbr.utils.checksum import CNPJ_WEIGHTS
from validbr.utils.text import join_digits


class Branch(BaseModel):
    """
    Filial do CNPJ (4 dígitos). A matriz é sempre 0001.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    digits: Tuple[Digit, ...] = Field(..., min_length=4, max_length=4)

    @field_validator("digits", mode="before")
    @classmethod
    def _digits_from_text(cls, v: Any):
        return coerce_digits(v)

    @classmethod
    def first(cls) -> "Branch":
        return cls(digits=(0, 0, 0, 1))

    @classmethod
    def new(cls, digits: Sequence[int]) -> "Branch":
        try:
            checked = check_group("CNPJ", "branch_digits", digits, 4)
        except DocumentError as e:
            raise InvalidBranchNumber(digits) from e
        return cls(digits=checked)

    @classmethod
    def from_number(cls, number: int) -> "Branch":
        """0..9999 -> Branch (ex.: 12 -> 0012)."""
        if isinstance(number, bool) or not isinstance(number, int) or not 0 <= number <= 9999:
            raise InvalidBranchNumber(number)
        return cls(digits=tuple(int(ch) for ch in f"{number:04d}"))

    @classmethod
    def parse(cls, text: str) -> "Branch":
        """Texto com exatamente 4 dígitos ASCII ("0001")."""
        s = str(text).strip()
        if len(s) != 4 or not s.isascii() or not s.isdigit():
            raise InvalidBranchNumber(text)
        return cls(digits=s)

    @property
    def number(self) -> int:
        return int(join_digits(self.digits))

    def __str__(self) -> str:
        return join_digits(self.digits)


class Cnpj(BaseModel):
    """
    CNPJ (Cadastro Nacional da Pessoa Jurídica):
    8 dígitos da empresa + 4 da filial + 2 verificadores.
    Os verificadores são calculados sobre os 12 primeiros dígitos (empresa + filial).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    DOCUMENT: ClassVar[str] = "CNPJ"
    GROUPS: ClassVar[Tuple[int, int, int]] = (8, 4, 2)

    digits: Tuple[Digit, ...] = Field(..., min_length=8, max_length=8, description="8 dígitos da empresa")
    branch_digits: Tuple[Digit, ...] = Field(..., min_length=4, max_length=4, description="4 dígitos da filial")
    verifier_digits: Tuple[Digit, ...] = Field(..., min_length=2, max_length=2, description="2 dígitos verificadores")

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any):
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {
                "digits": parsed.digits,
                "branch_digits": parsed.branch_digits,
                "verifier_digits": parsed.verifier_digits,
            }
        return data

    @field_validator("digits", "branch_digits", "verifier_digits", mode="before")
    @classmethod
    def _digits_from_text(cls, v: Any):
        return coerce_digits(v)

    @model_validator(mode="after")
    def _check_verifiers(self) -> "Cnpj":
        check_verifiers(self.DOCUMENT, self.digits + self.branch_digits, self.verifier_digits, CNPJ_WEIGHTS)
        return self

    # ---------------- Construção ----------------

    @classmethod
    def parse(cls, text: str) -> "Cnpj":
        """
        Aceita "12.345.678/0001-95" ou "12345678000195".
        Ordem dos erros: InvalidCharacter > InvalidLength > InvalidVerifierDigit.
        """
        digits, branch, verifiers = read_groups(text, cls.DOCUMENT, cls.GROUPS)
        # explícito para levantar InvalidVerifierDigit em vez de ValidationError do pydantic
        check_verifiers(cls.DOCUMENT, digits + branch, verifiers, CNPJ_WEIGHTS)
        return cls(digits=digits, branch_digits=branch, verifier_digits=verifiers)

    @classmethod
    def new(cls, digits: Sequence[int], branch_digits: Sequence[int], verifier_digits: Sequence[int]) -> "Cnpj":
        digits = check_group(cls.DOCUMENT, "digits", digits, cls.GROUPS[0])
        branch_digits = check_group(cls.DOCUMENT, "branch_digits", branch_digits, cls.GROUPS[1])
        verifier_digits = check_group(cls.DOCUMENT, "verifier_digits", verifier_digits, cls.GROUPS[2])
        check_verifiers(cls.DOCUMENT, digits + branch_digits, verifier_digits, CNPJ_WEIGHTS)
        return cls(digits=digits, branch_digits=branch_digits, verifier_digits=verifier_digits)

    # ---------------- Representação ----------------

    @property
    def branch(self) -> Branch:
        return Branch(digits=self.branch_digits)

    @property
    def is_head_office(self) -> bool:
        return self.branch_digits == (0, 0, 0, 1)

    @property
    def number(self) -> str:
        """14 dígitos sem máscara."""
        return join_digits(self.digits + self.branch_digits + self.verifier_digits)

    def format(self) -> str:
        """##.###.###/####-##"""
        n = self.number
        return f"{n[0:2]}.{n[2:5]}.{n[5:8]}/{n[8:12]}-{n[12:14]}"

    def __str__(self) -> str:
        return self.format()
