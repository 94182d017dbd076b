from .config import settings, set_settings, reset_settings, setting
from .logs import get_logger
from .text import extract_digits, join_digits
from .checksum import WeightScheme, CPF_WEIGHTS, CNPJ_WEIGHTS, verifier_digit, verifier_digits

__all__ = [
    "settings", "set_settings", "reset_settings", "setting",
    "get_logger",
    "extract_digits", "join_digits",
    "WeightScheme", "CPF_WEIGHTS", "CNPJ_WEIGHTS", "verifier_digit", "verifier_digits",
]
