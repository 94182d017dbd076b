"""validbr: estruturas e validação de CPF e CNPJ.

    >>> from validbr import parse_cpf
    >>> str(parse_cpf("12345678909"))
    '123.456.789-09'
"""
from .errors import (
    DocumentError,
    InvalidCharacter,
    InvalidLength,
    InvalidVerifierDigit,
    RepeatedDigitSequence,
    DigitsOutOfBounds,
    InvalidBranchNumber,
)
from .models import Document, Cpf, Cnpj, Branch
from .utils.validators_br import parse_cpf, parse_cnpj, is_valid_cpf, is_valid_cnpj, format_cpf, format_cnpj
from .services import random_cpf, random_cnpj, validate_series, validate_column

__version__ = "0.3.0"

__all__ = [
    "DocumentError", "InvalidCharacter", "InvalidLength", "InvalidVerifierDigit",
    "RepeatedDigitSequence", "DigitsOutOfBounds", "InvalidBranchNumber",
    "Document", "Cpf", "Cnpj", "Branch",
    "parse_cpf", "parse_cnpj", "is_valid_cpf", "is_valid_cnpj", "format_cpf", "format_cnpj",
    "random_cpf", "random_cnpj", "validate_series", "validate_column",
]
