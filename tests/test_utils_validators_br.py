from __future__ import annotations
import pytest

from validbr import Cnpj, Cpf
from validbr.errors import DocumentError, InvalidCharacter, InvalidLength, InvalidVerifierDigit
from validbr.utils.validators_br import (
    format_cnpj,
    format_cpf,
    is_valid_cnpj,
    is_valid_cpf,
    parse_cnpj,
    parse_cpf,
)

def test_parse_cpf_examples():
    assert parse_cpf("123.456.789-09") == Cpf(digits=(1, 2, 3, 4, 5, 6, 7, 8, 9), verifier_digits=(0, 9))
    assert parse_cpf("12345678909") == parse_cpf("123.456.789-09")
    with pytest.raises(InvalidVerifierDigit):
        parse_cpf("111.111.111-11")

def test_parse_cnpj_examples():
    expected = Cnpj(digits=(1, 2, 3, 4, 5, 6, 7, 8), branch_digits=(0, 0, 0, 1), verifier_digits=(9, 5))
    assert parse_cnpj("12.345.678/0001-95") == expected
    with pytest.raises(InvalidVerifierDigit):
        parse_cnpj("12.345.678/0001-00")

@pytest.mark.parametrize("text", ["123.456.789-0x", "123_456_789_09", "cpf 12345678909", "123.456.789-09!"])
def test_symbols_other_than_separators_fail(text):
    with pytest.raises(InvalidCharacter):
        parse_cpf(text)

@pytest.mark.parametrize("text", ["1234567890", "123456789091", "1", "12.345.678/0001-95"])
def test_wrong_digit_count_fails_with_length(text):
    with pytest.raises(InvalidLength) as exc:
        parse_cpf(text)
    assert exc.value.expected == 11

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_cnpj("abc")
    assert issubclass(InvalidLength, DocumentError)

def test_error_messages_are_readable():
    with pytest.raises(InvalidLength) as exc:
        parse_cpf("123456789")
    assert str(exc.value) == "CPF com tamanho inválido: esperado 11 dígitos, recebido 9"

def test_cpf_validation_and_format(valid_cpfs):
    assert is_valid_cpf("529.982.247-25") is True
    assert is_valid_cpf("000.000.000-00") is False
    assert is_valid_cpf("529.982.247-2a") is False
    assert format_cpf("52998224725") == "529.982.247-25"
    assert all(is_valid_cpf(c) for c in valid_cpfs)

def test_cnpj_format_and_invalid():
    assert format_cnpj("04252011000110") == "04.252.011/0001-10"
    assert is_valid_cnpj("11.111.111/1111-11") is False
    assert is_valid_cnpj("04.252.011/0001-10") is True
    with pytest.raises(InvalidLength):
        format_cnpj("0425201100011")
