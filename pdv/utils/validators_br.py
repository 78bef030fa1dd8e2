from __future__ import annotations
import re
from typing import Optional

from pdv.models.validation import DocumentResult, DocumentType
from .text import only_digits

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_CPF_RE = re.compile(r"([0-9]{3})([0-9]{3})([0-9]{3})([0-9]{2})")
_CNPJ_RE = re.compile(r"([0-9]{2})([0-9]{3})([0-9]{3})([0-9]{4})([0-9]{2})")
_PHONE10_RE = re.compile(r"([0-9]{2})([0-9]{4})([0-9]{4})")
_PHONE11_RE = re.compile(r"([0-9]{2})([0-9]{5})([0-9]{4})")

# ---------------- CPF ----------------

def is_valid_cpf(cpf: str) -> bool:
    """
    Valida CPF com cálculo de dígitos verificadores.
    Aceita com/sem máscara.
    """
    n = only_digits(cpf)
    if len(n) != 11 or n == n[0] * 11:
        return False

    # 1º DV
    s1 = sum(int(n[i]) * (10 - i) for i in range(9))
    d1 = (s1 * 10) % 11 % 10

    # 2º DV
    s2 = sum(int(n[i]) * (11 - i) for i in range(10))
    d2 = (s2 * 10) % 11 % 10

    return n[-2:] == f"{d1}{d2}"

def format_cpf(cpf: str, strict: bool = False) -> Optional[str]:
    """
    Máscara 000.000.000-00. Sem `strict`, aplica a máscara no primeiro trecho
    que casar e devolve só os dígitos quando nada casa.
    Com `strict`, retorna None se não houver exatamente 11 dígitos.
    """
    n = only_digits(cpf)
    if strict and len(n) != 11:
        return None
    return _CPF_RE.sub(r"\1.\2.\3-\4", n, count=1)

# ---------------- CNPJ ----------------

# 00000000000000 ... 99999999999999
_CNPJ_DENYLIST = frozenset(str(d) * 14 for d in range(10))

def _cnpj_dv(num: str) -> int:
    pesos = [6,5,4,3,2,9,8,7,6,5,4,3,2]
    s = sum(int(num[i]) * pesos[i + (len(pesos)-len(num))] for i in range(len(num)))
    r = s % 11
    return 0 if r < 2 else 11 - r

def is_valid_cnpj(cnpj: str) -> bool:
    """
    Valida CNPJ com dígitos verificadores.
    """
    n = only_digits(cnpj)
    if len(n) != 14 or n in _CNPJ_DENYLIST:
        return False

    d1 = _cnpj_dv(n[:12])
    if d1 != int(n[12]):
        return False
    d2 = _cnpj_dv(n[:13])
    return d2 == int(n[13])

def format_cnpj(cnpj: str, strict: bool = False) -> Optional[str]:
    """Máscara 00.000.000/0000-00 (mesmas regras de format_cpf, com 14 dígitos)."""
    n = only_digits(cnpj)
    if strict and len(n) != 14:
        return None
    return _CNPJ_RE.sub(r"\1.\2.\3/\4-\5", n, count=1)

# ---------------- CPF ou CNPJ ----------------

def validate_document(document: str) -> DocumentResult:
    """Detecta CPF (11 dígitos) ou CNPJ (14 dígitos) e valida."""
    n = only_digits(document)
    if len(n) == 11:
        dtype, ok = DocumentType.INDIVIDUAL, is_valid_cpf(n)
    elif len(n) == 14:
        dtype, ok = DocumentType.BUSINESS, is_valid_cnpj(n)
    else:
        return DocumentResult(
            is_valid=False,
            type=None,
            message="Documento deve ter 11 dígitos (CPF) ou 14 dígitos (CNPJ)",
        )
    return DocumentResult(
        is_valid=ok,
        type=dtype,
        message=f"{dtype.label} {'válido' if ok else 'inválido'}",
    )

def format_document(document: str, strict: bool = False) -> Optional[str]:
    n = only_digits(document)
    if len(n) <= 11:
        return format_cpf(n, strict=strict)
    return format_cnpj(n, strict=strict)

# ---------------- Telefone / e-mail ----------------

def is_valid_phone(phone: str) -> bool:
    return 10 <= len(only_digits(phone)) <= 11

def format_phone(phone: str, strict: bool = False) -> Optional[str]:
    """
    (00) 0000-0000 para fixo, (00) 00000-0000 para celular.
    Qualquer outro tamanho devolve a entrada original (ou None com `strict`).
    """
    n = only_digits(phone)
    if len(n) == 10:
        return _PHONE10_RE.sub(r"(\1) \2-\3", n)
    if len(n) == 11:
        return _PHONE11_RE.sub(r"(\1) \2-\3", n)
    return None if strict else phone

def is_valid_email(email: str) -> bool:
    """Checagem estrutural simples (algo@dominio.ext); não consulta DNS."""
    if email is None:
        return False
    return _EMAIL_RE.fullmatch(str(email)) is not None
