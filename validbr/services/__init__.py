from .generator import random_cpf, random_cnpj
from .batch import validate_series, validate_column

__all__ = [
    "random_cpf",
    "random_cnpj",
    "validate_series",
    "validate_column",
]
