from __future__ import annotations
import logging
import pytest

from validbr.utils import config
from validbr.utils.logs import get_logger

def test_defaults():
    assert config.setting("VALIDBR_LOG_LEVEL") == "INFO"
    assert config.setting("VALIDBR_CNPJ_BRANCH") == "random"
    assert config.setting("VALIDBR_RANDOM_SEED") == ""

def test_overrides_and_env_priority(monkeypatch):
    config.set_settings({"VALIDBR_CNPJ_BRANCH": " 0001 "})
    assert config.setting("VALIDBR_CNPJ_BRANCH") == "0001"
    monkeypatch.setenv("VALIDBR_CNPJ_BRANCH", "0002")
    config.settings.cache_clear()
    assert config.setting("VALIDBR_CNPJ_BRANCH") == "0002"

def test_unknown_keys():
    with pytest.raises(KeyError):
        config.setting("NAO_EXISTE")
    with pytest.raises(KeyError):
        config.set_settings({"NAO_EXISTE": "1"})

def test_logger_level_from_settings():
    config.set_settings({"VALIDBR_LOG_LEVEL": "debug"})
    log = get_logger("validbr.test")
    assert log.level == logging.DEBUG
    assert len(get_logger("validbr.test", logging.WARNING).handlers) == 1
    assert log.level == logging.WARNING

def test_logger_rejects_unknown_level():
    config.set_settings({"VALIDBR_LOG_LEVEL": "verbose"})
    with pytest.raises(ValueError, match="Nível de log inválido"):
        get_logger("validbr.test")
