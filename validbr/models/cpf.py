from __future__ import annotations
from typing import Any, ClassVar, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from validbr.models.document import Digit, check_group, check_verifiers, coerce_digits, read_groups
from validbr.utils.checksum import CPF_WEIGHTS
from validbr.utils.text import join_digits


class Cpf(BaseModel):
    """
    CPF (Cadastro de Pessoas Físicas): 9 dígitos de identificação + 2 verificadores.

    Imutável. Toda forma de criação revalida os verificadores:
    - `Cpf.parse("123.456.789-09")` ou sem máscara;
    - `Cpf.new([1, 2, ...], [0, 9])`;
    - `Cpf(digits=..., verifier_digits=...)` / `Cpf.model_validate(...)` (deserialização).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    DOCUMENT: ClassVar[str] = "CPF"
    GROUPS: ClassVar[Tuple[int, int]] = (9, 2)

    digits: Tuple[Digit, ...] = Field(..., min_length=9, max_length=9, description="9 dígitos de identificação")
    verifier_digits: Tuple[Digit, ...] = Field(..., min_length=2, max_length=2, description="2 dígitos verificadores")

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any):
        # "123.456.789-09" vindo de JSON/campo tipado passa pelo parse completo
        if isinstance(data, str):
            parsed = cls.parse(data)
            return {"digits": parsed.digits, "verifier_digits": parsed.verifier_digits}
        return data

    @field_validator("digits", "verifier_digits", mode="before")
    @classmethod
    def _digits_from_text(cls, v: Any):
        return coerce_digits(v)

    @model_validator(mode="after")
    def _check_verifiers(self) -> "Cpf":
        check_verifiers(self.DOCUMENT, self.digits, self.verifier_digits, CPF_WEIGHTS)
        return self

    # ---------------- Construção ----------------

    @classmethod
    def parse(cls, text: str) -> "Cpf":
        """
        Aceita com/sem máscara (`.`, `-`, `/` e espaços são ignorados).
        Ordem dos erros: InvalidCharacter > InvalidLength > InvalidVerifierDigit.
        """
        digits, verifiers = read_groups(text, cls.DOCUMENT, cls.GROUPS)
        # explícito para levantar InvalidVerifierDigit em vez de ValidationError do pydantic
        check_verifiers(cls.DOCUMENT, digits, verifiers, CPF_WEIGHTS)
        return cls(digits=digits, verifier_digits=verifiers)

    @classmethod
    def new(cls, digits: Sequence[int], verifier_digits: Sequence[int]) -> "Cpf":
        """Cria a partir dos grupos já separados; levanta os mesmos erros tipados do parse."""
        digits = check_group(cls.DOCUMENT, "digits", digits, cls.GROUPS[0])
        verifier_digits = check_group(cls.DOCUMENT, "verifier_digits", verifier_digits, cls.GROUPS[1])
        check_verifiers(cls.DOCUMENT, digits, verifier_digits, CPF_WEIGHTS)
        return cls(digits=digits, verifier_digits=verifier_digits)

    # ---------------- Representação ----------------

    @property
    def number(self) -> str:
        """11 dígitos sem máscara."""
        return join_digits(self.digits + self.verifier_digits)

    def format(self) -> str:
        """###.###.###-##"""
        n = self.number
        return f"{n[0:3]}.{n[3:6]}.{n[6:9]}-{n[9:11]}"

    def __str__(self) -> str:
        return self.format()
