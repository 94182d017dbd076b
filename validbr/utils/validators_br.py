from __future__ import annotations

from validbr.errors import DocumentError
from validbr.models.cnpj import Cnpj
from validbr.models.cpf import Cpf

# ---------------- CPF ----------------

def parse_cpf(text: str) -> Cpf:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara. Levanta DocumentError (InvalidCharacter,
    InvalidLength ou InvalidVerifierDigit) se inválido.
    """
    return Cpf.parse(text)

def is_valid_cpf(text: str) -> bool:
    try:
        Cpf.parse(text)
    except DocumentError:
        return False
    return True

def format_cpf(text: str) -> str:
    return Cpf.parse(text).format()

# ---------------- CNPJ ----------------

def parse_cnpj(text: str) -> Cnpj:
    """
    Valida CNPJ com dígitos verificadores (empresa + filial).
    """
    return Cnpj.parse(text)

def is_valid_cnpj(text: str) -> bool:
    try:
        Cnpj.parse(text)
    except DocumentError:
        return False
    return True

def format_cnpj(text: str) -> str:
    return Cnpj.parse(text).format()
