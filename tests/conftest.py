from __future__ import annotations
import pytest

from validbr.services.generator import reset_default_rng
from validbr.utils import config

# ---------- FIXTURES DE DADOS BÁSICOS ----------

@pytest.fixture
def valid_cpfs() -> list[str]:
    # CPFs de teste amplamente usados (dígitos verificadores corretos)
    return ["123.456.789-09", "529.982.247-25", "261.442.230-45", "310.126.650-54"]

@pytest.fixture
def valid_cnpjs() -> list[str]:
    return ["12.345.678/0001-95", "04.252.011/0001-10", "53.871.143/0001-35"]

# ---------- AJUSTES DE AMBIENTE ----------

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Evita que variáveis VALIDBR_* do ambiente ou overrides de outro teste vazem."""
    for key in config._DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    reset_default_rng()
    yield
    config.reset_settings()
    reset_default_rng()
