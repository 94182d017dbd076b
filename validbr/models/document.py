from __future__ import annotations
import logging
from typing import Annotated, Any, List, Protocol, Sequence, Tuple, runtime_checkable

from pydantic import Field

from validbr.errors import DigitsOutOfBounds, InvalidLength, RepeatedDigitSequence, InvalidVerifierDigit
from validbr.utils.checksum import WeightScheme, mismatches, verifier_digits
from validbr.utils.text import DIGITS, extract_digits

log = logging.getLogger(__name__)

Digit = Annotated[int, Field(ge=0, le=9)]
DigitGroup = Tuple[int, ...]


@runtime_checkable
class Document(Protocol):
    """O que CPF e CNPJ têm em comum: parse do texto, número puro e forma mascarada."""

    @classmethod
    def parse(cls, text: str) -> "Document": ...

    @property
    def number(self) -> str: ...

    def format(self) -> str: ...


def coerce_digits(v: Any) -> Any:
    """Aceita um grupo como texto ("123456789"); demais formatos seguem para o pydantic."""
    if isinstance(v, str) and v and all(ch in DIGITS for ch in v):
        return [int(ch) for ch in v]
    return v


def split_groups(digits: Sequence[int], sizes: Sequence[int]) -> List[DigitGroup]:
    groups, start = [], 0
    for size in sizes:
        groups.append(tuple(digits[start:start + size]))
        start += size
    return groups


def read_groups(text: Any, document: str, sizes: Sequence[int]) -> List[DigitGroup]:
    """Normaliza o texto, confere o tamanho total e separa nos grupos do documento."""
    digits = extract_digits(text, document)
    expected = sum(sizes)
    if len(digits) != expected:
        raise InvalidLength(document, expected, len(digits))
    return split_groups(digits, sizes)


def check_group(document: str, group: str, values: Sequence[int], size: int) -> DigitGroup:
    """Usado na construção direta a partir de grupos de dígitos (fora do parse)."""
    try:
        values = tuple(values)
    except TypeError as e:
        raise DigitsOutOfBounds(document, group, (values,)) from e
    if len(values) != size:
        raise InvalidLength(document, size, len(values))
    if not all(isinstance(v, int) and 0 <= v <= 9 for v in values):
        raise DigitsOutOfBounds(document, group, values)
    return values


def check_verifiers(document: str, leading: Sequence[int], found: Sequence[int], scheme: WeightScheme) -> None:
    """
    Recalcula os verificadores sobre `leading` e compara com `found`, em ordem.
    Sequências repetidas (000..., 111...) são recusadas mesmo quando a conta fecha.
    """
    expected = verifier_digits(leading, scheme)
    diff = mismatches(expected, found)
    if diff:
        log.debug("%s: verificadores divergentes %s", document, diff)
        raise InvalidVerifierDigit(document, diff)
    if len({*leading, *found}) == 1:
        raise RepeatedDigitSequence(document)
