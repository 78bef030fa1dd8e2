from __future__ import annotations
import pytest

from pdv.models.validation import DocumentType
from pdv.utils.text import only_digits
from pdv.utils.validators_br import (
    is_valid_cpf, format_cpf, is_valid_cnpj, format_cnpj,
    validate_document, format_document,
    is_valid_phone, format_phone, is_valid_email,
)

def _mutations(doc: str):
    for i, c in enumerate(doc):
        for d in "0123456789":
            if d != c:
                yield doc[:i] + d + doc[i + 1:]

# ---------------- CPF ----------------

def test_cpf_validation_and_format():
    assert is_valid_cpf("529.982.247-25") is True  # CPF de teste amplamente usado
    assert is_valid_cpf("000.000.000-00") is False
    assert format_cpf("52998224725") == "529.982.247-25"

@pytest.mark.parametrize("d", "0123456789")
def test_cpf_repeated_digits_rejected(d):
    assert is_valid_cpf(d * 11) is False

@pytest.mark.parametrize("raw", ["", "abc", "5299822472", "529982247250", None])
def test_cpf_wrong_length(raw):
    assert is_valid_cpf(raw) is False

def test_cpf_generated_are_valid(valid_cpfs):
    assert all(is_valid_cpf(c) for c in valid_cpfs)

def test_cpf_single_digit_change_detected():
    assert not any(is_valid_cpf(m) for m in _mutations("52998224725"))

# ---------------- CNPJ ----------------

def test_cnpj_format_and_invalid():
    assert format_cnpj("04252011000110") == "04.252.011/0001-10"
    assert is_valid_cnpj("11.111.111/1111-11") is False  # repetido inválido
    assert is_valid_cnpj("11.222.333/0001-81") is True
    assert is_valid_cnpj("04.252.011/0001-10") is True

@pytest.mark.parametrize("d", "0123456789")
def test_cnpj_repeated_digits_rejected(d):
    assert is_valid_cnpj(d * 14) is False

def test_cnpj_generated_are_valid(valid_cnpjs):
    assert all(is_valid_cnpj(c) for c in valid_cnpjs)

def test_cnpj_single_digit_change_detected():
    assert not any(is_valid_cnpj(m) for m in _mutations("11222333000181"))

def test_cnpj_wrong_length():
    assert is_valid_cnpj("1122233300018") is False
    assert is_valid_cnpj("") is False

# ---------------- CPF ou CNPJ ----------------

def test_validate_document_types():
    r = validate_document("123.456.789-09")
    assert r.type == DocumentType.INDIVIDUAL and r.type == "INDIVIDUAL"
    assert r.is_valid is True and r.message == "CPF válido"

    r = validate_document("11.222.333/0001-82")
    assert r.type == DocumentType.BUSINESS
    assert r.is_valid is False and r.message == "CNPJ inválido"

    r = validate_document("12345")
    assert r.type is None and r.is_valid is False
    assert "11" in r.message and "14" in r.message

def test_format_document_routes_by_length():
    assert format_document("529.982.247-25") == "529.982.247-25"
    assert format_document("11222333000181") == "11.222.333/0001-81"
    assert format_document("1234") == "1234"

def test_format_best_effort_and_strict():
    # menos dígitos: devolve apenas os dígitos
    assert format_cpf("123.45") == "12345"
    # dígitos a mais: máscara no começo, resto anexado
    assert format_cpf("123456789012") == "123.456.789-012"
    assert format_cpf("123.45", strict=True) is None
    assert format_cnpj("112223330001", strict=True) is None
    assert format_document("52998224725", strict=True) == "529.982.247-25"

def test_format_idempotent_after_cleaning(valid_cpfs):
    for c in valid_cpfs:
        once = format_cpf(c)
        assert format_cpf(only_digits(once)) == once

# ---------------- Telefone / e-mail ----------------

def test_phone_format():
    assert format_phone("11987654321") == "(11) 98765-4321"
    assert format_phone("1133224455") == "(11) 3322-4455"
    assert format_phone("123") == "123"
    assert format_phone("tel: 12") == "tel: 12"
    assert format_phone("123", strict=True) is None

def test_phone_validity():
    assert is_valid_phone("(11) 98765-4321") is True
    assert is_valid_phone("11 3322-4455") is True
    assert is_valid_phone("123456789") is False
    assert is_valid_phone("119876543210") is False

@pytest.mark.parametrize("email,ok", [
    ("a@b.co", True),
    ("fulano.silva@loja.com.br", True),
    ("a@b", False),
    ("a.b@c", False),
    ("a @b.co", False),
    ("a@@b.co", False),
    ("", False),
    (None, False),
])
def test_email(email, ok):
    assert is_valid_email(email) is ok

def test_fullwidth_digits_are_not_documents():
    assert is_valid_cnpj("１１２２２３３３０００１８１") is False
    assert is_valid_cpf("５２９９８２２４７２５") is False
    assert format_cpf("５２９９８２２４７２５") == ""
    assert validate_document("５２９９８２２４７２５").type is None
