from __future__ import annotations
import logging
import random
from typing import List, Optional

from validbr.models.cnpj import Branch, Cnpj
from validbr.models.cpf import Cpf
from validbr.utils.checksum import CNPJ_WEIGHTS, CPF_WEIGHTS, verifier_digits
from validbr.utils.config import setting

log = logging.getLogger(__name__)

_default_rng: Optional[random.Random] = None


def default_rng() -> random.Random:
    """Random compartilhado; usa VALIDBR_RANDOM_SEED quando definido."""
    global _default_rng
    if _default_rng is None:
        seed = setting("VALIDBR_RANDOM_SEED")
        _default_rng = random.Random(seed) if seed else random.Random()
    return _default_rng


def reset_default_rng() -> None:
    global _default_rng
    _default_rng = None


def _draw(rng: random.Random, n: int) -> List[int]:
    return [rng.randint(0, 9) for _ in range(n)]


def _repeated(*groups) -> bool:
    return len({d for g in groups for d in g}) == 1


def random_cpf(rng: Optional[random.Random] = None) -> Cpf:
    """CPF válido com 9 dígitos aleatórios e verificadores calculados."""
    rng = rng or default_rng()
    while True:
        digits = _draw(rng, 9)
        verifiers = verifier_digits(digits, CPF_WEIGHTS)
        if not _repeated(digits, verifiers):
            return Cpf(digits=digits, verifier_digits=verifiers)
        log.debug("random_cpf: sequência repetida sorteada, sorteando de novo")


def configured_branch() -> Optional[Branch]:
    """VALIDBR_CNPJ_BRANCH: 'random' (filial sorteada) ou 4 dígitos fixos."""
    value = setting("VALIDBR_CNPJ_BRANCH")
    if value.lower() == "random":
        return None
    return Branch.parse(value)


def random_cnpj(branch: Optional[Branch] = None, rng: Optional[random.Random] = None) -> Cnpj:
    """
    CNPJ válido com empresa aleatória. A filial vem de `branch`, senão da
    configuração (padrão: também aleatória).
    """
    rng = rng or default_rng()
    if branch is None:
        branch = configured_branch()
    while True:
        digits = _draw(rng, 8)
        branch_digits = list(branch.digits) if branch is not None else _draw(rng, 4)
        verifiers = verifier_digits(digits + branch_digits, CNPJ_WEIGHTS)
        if not _repeated(digits, branch_digits, verifiers):
            return Cnpj(digits=digits, branch_digits=branch_digits, verifier_digits=verifiers)
        log.debug("random_cnpj: sequência repetida sorteada, sorteando de novo")
