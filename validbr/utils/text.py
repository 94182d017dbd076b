from __future__ import annotations
from typing import Any, List

from validbr.errors import InvalidCharacter

# separadores aceitos em CPF/CNPJ mascarados
SEPARATORS = frozenset(".-/")
DIGITS = "0123456789"


def is_separator(ch: str) -> bool:
    return ch in SEPARATORS or ch.isspace()


def extract_digits(text: Any, document: str) -> List[int]:
    """
    Converte o texto em lista de dígitos, na ordem em que aparecem.
    - separadores (`.`, `-`, `/` e espaços) são descartados;
    - qualquer outro caractere levanta InvalidCharacter com a posição no texto original.
    O tamanho não é verificado aqui.
    """
    if not isinstance(text, str):
        raise InvalidCharacter(document, type(text).__name__, None)

    digits: List[int] = []
    for pos, ch in enumerate(text):
        if ch in DIGITS:
            digits.append(ord(ch) - ord("0"))
        elif not is_separator(ch):
            raise InvalidCharacter(document, ch, pos)
    return digits


def join_digits(digits) -> str:
    return "".join(str(d) for d in digits)
