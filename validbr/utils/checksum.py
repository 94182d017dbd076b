from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class WeightScheme:
    """
    Pesos do módulo 11, contados a partir do dígito mais à direita.
    - `max_weight=None`: pesos 2, 3, 4, ... sem repetição (CPF: 10..2 e 11..2);
    - `max_weight=9`: pesos ciclam 2..9 (CNPJ: 5,4,3,2,9,8,...,2 e 6,5,...,2).
    """
    name: str
    max_weight: Optional[int] = None

    def weights(self, count: int) -> List[int]:
        if self.max_weight is None:
            return list(range(count + 1, 1, -1))
        span = self.max_weight - 1
        return [2 + (i % span) for i in range(count)][::-1]


CPF_WEIGHTS = WeightScheme("CPF")
CNPJ_WEIGHTS = WeightScheme("CNPJ", max_weight=9)


def verifier_digit(digits: Sequence[int], scheme: WeightScheme) -> int:
    """Um dígito verificador: soma ponderada % 11; restos 0 e 1 viram 0."""
    total = sum(d * w for d, w in zip(digits, scheme.weights(len(digits))))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def verifier_digits(digits: Sequence[int], scheme: WeightScheme) -> Tuple[int, int]:
    """Os dois verificadores: o segundo é calculado sobre os dígitos + o primeiro."""
    first = verifier_digit(digits, scheme)
    second = verifier_digit([*digits, first], scheme)
    return first, second


def mismatches(expected: Sequence[int], found: Sequence[int]) -> List[Tuple[int, int, int]]:
    """(posição, esperado, encontrado) para cada verificador divergente."""
    return [(pos, e, f) for pos, (e, f) in enumerate(zip(expected, found)) if e != f]
