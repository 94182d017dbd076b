from __future__ import annotations
from typing import Optional, Sequence, Tuple


class DocumentError(ValueError):
    """Base de todos os erros de validação de documentos (CPF/CNPJ)."""

    def __init__(self, document: str, message: str):
        super().__init__(message)
        self.document = document


class InvalidCharacter(DocumentError):
    """Caractere que não é dígito nem separador (`.`, `-`, `/`, espaço)."""

    def __init__(self, document: str, character: str, position: Optional[int]):
        if position is None:
            msg = f"{document} inválido: esperado texto, recebido {character}"
        else:
            msg = f"{document} com caractere inválido {character!r} na posição {position}"
        super().__init__(document, msg)
        self.character = character
        self.position = position


class InvalidLength(DocumentError):
    def __init__(self, document: str, expected: int, actual: int):
        super().__init__(
            document,
            f"{document} com tamanho inválido: esperado {expected} dígitos, recebido {actual}",
        )
        self.expected = expected
        self.actual = actual


Mismatch = Tuple[int, int, int]  # (posição, esperado, encontrado)


class InvalidVerifierDigit(DocumentError):
    """
    Dígitos verificadores não conferem.
    `mismatches` traz (posição, esperado, encontrado) para cada posição divergente.
    """

    def __init__(self, document: str, mismatches: Sequence[Mismatch], message: Optional[str] = None):
        self.mismatches: Tuple[Mismatch, ...] = tuple(mismatches)
        if message is None:
            parts = ", ".join(
                f"{pos + 1}º esperado {exp}, encontrado {found}" for pos, exp, found in self.mismatches
            )
            message = f"{document} com dígito verificador inválido ({parts})"
        super().__init__(document, message)

    @property
    def positions(self) -> Tuple[int, ...]:
        return tuple(m[0] for m in self.mismatches)

    @property
    def expected(self) -> Tuple[int, ...]:
        return tuple(m[1] for m in self.mismatches)


class RepeatedDigitSequence(InvalidVerifierDigit):
    """Sequências de um único dígito (ex.: 111.111.111-11) passam na conta mas nunca são emitidas."""

    def __init__(self, document: str):
        super().__init__(document, (), f"{document} inválido: todos os dígitos são iguais")


class DigitsOutOfBounds(DocumentError):
    def __init__(self, document: str, group: str, values: Sequence[int]):
        super().__init__(
            document,
            f"{document} com grupo '{group}' inválido: {list(values)} (esperado dígitos de 0 a 9)",
        )
        self.group = group
        self.values = tuple(values)


class InvalidBranchNumber(ValueError):
    """Filial de CNPJ fora do intervalo 0000-9999."""

    def __init__(self, value):
        super().__init__(f"Filial de CNPJ inválida: {value!r} (esperado 0000 a 9999)")
        self.value = value
