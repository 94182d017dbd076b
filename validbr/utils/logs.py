from __future__ import annotations
import logging
import sys
from typing import Optional, Union

from validbr.utils.config import setting

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Union[int, str]) -> int:
    """Nome ("info", "DEBUG") ou número -> nível do logging; ValueError amigável se desconhecido."""
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name not in LEVELS:
        raise ValueError(f"Nível de log inválido: {level!r}. Use um de: {', '.join(LEVELS)}")
    return getattr(logging, name)


def get_logger(name: str = "validbr", level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Logger com um único handler em stdout; nível padrão vem de VALIDBR_LOG_LEVEL."""
    level = resolve_level(setting("VALIDBR_LOG_LEVEL") if level is None else level)
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
