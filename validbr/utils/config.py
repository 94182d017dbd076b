from __future__ import annotations
import os
from functools import lru_cache
from typing import Dict

_DEFAULTS: Dict[str, str] = {
    # Logging da CLI
    "VALIDBR_LOG_LEVEL": "INFO",
    # Gerador: filial do CNPJ quando não informada ("random" ou 4 dígitos, ex.: 0001)
    "VALIDBR_CNPJ_BRANCH": "random",
    # Gerador: semente do Random padrão (vazio = não determinístico)
    "VALIDBR_RANDOM_SEED": "",
}

# armazenamento interno para overrides em tempo de execução
_runtime_overrides: Dict[str, str] = {}


def _coerce(v: str) -> str:
    return str(v).strip()


@lru_cache(maxsize=1)
def settings() -> Dict[str, str]:
    """
    Retorna um dicionário de configurações:
    - ENV tem prioridade (chave igual ao nome exato, p.ex. VALIDBR_LOG_LEVEL)
    - overrides definidos via set_settings()
    - defaults do projeto
    """
    merged: Dict[str, str] = {}
    for k, default in _DEFAULTS.items():
        env_val = os.environ.get(k)
        if env_val:
            merged[k] = _coerce(env_val)
        elif k in _runtime_overrides:
            merged[k] = _runtime_overrides[k]
        else:
            merged[k] = default
    return dict(merged)


def set_settings(overrides: Dict[str, str]) -> None:
    """
    Define overrides em tempo de execução (útil em testes).
    Invalida o cache de settings().
    """
    unknown = set(overrides or {}) - set(_DEFAULTS)
    if unknown:
        raise KeyError(f"Configuração desconhecida: {', '.join(sorted(unknown))}")
    _runtime_overrides.update({k: _coerce(v) for k, v in (overrides or {}).items()})
    settings.cache_clear()  # type: ignore[attr-defined]


def reset_settings() -> None:
    _runtime_overrides.clear()
    settings.cache_clear()  # type: ignore[attr-defined]


def setting(key: str) -> str:
    """Atalho: settings()[key] com KeyError amigável."""
    s = settings()
    if key not in s:
        raise KeyError(f"Configuração '{key}' não existe. Chaves válidas: {', '.join(sorted(s.keys()))}")
    return s[key]
