from __future__ import annotations
import random

import pytest

from validbr import Branch, Cnpj, Cpf, InvalidBranchNumber
from validbr.services.generator import default_rng, random_cnpj, random_cpf, reset_default_rng
from validbr.utils.checksum import CNPJ_WEIGHTS, CPF_WEIGHTS, verifier_digits
from validbr.utils.config import set_settings

def test_generated_cpfs_roundtrip():
    rng = random.Random(1234)
    for _ in range(300):
        cpf = random_cpf(rng=rng)
        assert verifier_digits(cpf.digits, CPF_WEIGHTS) == cpf.verifier_digits
        assert Cpf.parse(cpf.format()) == cpf

def test_generated_cnpjs_roundtrip():
    rng = random.Random(4321)
    for _ in range(300):
        cnpj = random_cnpj(rng=rng)
        assert verifier_digits(cnpj.digits + cnpj.branch_digits, CNPJ_WEIGHTS) == cnpj.verifier_digits
        assert Cnpj.parse(str(cnpj)) == cnpj

def test_random_cnpj_with_specific_branch():
    cnpj = random_cnpj(branch=Branch.from_number(12), rng=random.Random(7))
    assert cnpj.branch_digits == (0, 0, 1, 2)
    assert Cnpj.parse(cnpj.number) == cnpj

def test_branch_from_settings():
    set_settings({"VALIDBR_CNPJ_BRANCH": "0001"})
    for _ in range(20):
        assert random_cnpj().is_head_office

def test_invalid_branch_setting():
    set_settings({"VALIDBR_CNPJ_BRANCH": "matriz"})
    with pytest.raises(InvalidBranchNumber):
        random_cnpj()

def test_seed_setting_makes_default_rng_deterministic():
    set_settings({"VALIDBR_RANDOM_SEED": "42"})
    first = [random_cpf() for _ in range(5)]
    reset_default_rng()
    second = [random_cpf() for _ in range(5)]
    assert first == second
    assert default_rng() is default_rng()

def test_repeated_sequences_are_redrawn():
    class ZeroThenRandom(random.Random):
        """Primeiros 9 sorteios dão 0 (CPF 000.000.000-00), depois segue aleatório."""
        def __init__(self):
            super().__init__(99)
            self.calls = 0
        def randint(self, a, b):
            self.calls += 1
            return 0 if self.calls <= 9 else super().randint(a, b)

    rng = ZeroThenRandom()
    cpf = random_cpf(rng=rng)
    assert rng.calls > 9
    assert len(set(cpf.digits + cpf.verifier_digits)) > 1
