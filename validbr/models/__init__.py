from .document import Document
from .cpf import Cpf
from .cnpj import Branch, Cnpj

__all__ = [
    "Document",
    "Cpf",
    "Cnpj",
    "Branch",
]
