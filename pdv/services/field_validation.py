from __future__ import annotations
from typing import Optional

from pdv.models.validation import FieldKind, FieldResult
from pdv.utils.currency import is_valid_currency
from pdv.utils.logs import get_logger
from pdv.utils.text import parse_float
from pdv.utils.validators_br import (
    format_document,
    format_phone,
    is_valid_email,
    is_valid_phone,
    validate_document,
)

log = get_logger("pdv.validation")

def _num_label(x: float) -> str:
    # 10 -> '10', 0.5 -> '0.5'
    x = float(x)
    return str(int(x)) if x.is_integer() else str(x)

def validate_required(value: Optional[str], field_name: str) -> FieldResult:
    ok = len((value or "").strip()) > 0
    return FieldResult(is_valid=ok, message="" if ok else f"{field_name} é obrigatório")

def validate_number(value, min_value: float = 0, max_value: Optional[float] = None) -> FieldResult:
    """
    Valida quantidade/valor numérico com limites inclusivos.
    min_value > max_value não é erro de quem digita: o resultado é inválido
    com uma mensagem que aponta a faixa mal configurada.
    """
    num = parse_float(value)
    if num is None:
        return FieldResult(is_valid=False, message="Valor deve ser um número válido")

    if max_value is not None and min_value > max_value:
        log.warning(f"Faixa numérica invertida: mínimo {min_value} > máximo {max_value}")
        return FieldResult(
            is_valid=False,
            message=f"Faixa inválida: mínimo {_num_label(min_value)} maior que máximo {_num_label(max_value)}",
        )

    if num < min_value:
        return FieldResult(is_valid=False, message=f"Valor mínimo é {_num_label(min_value)}")

    if max_value is not None and num > max_value:
        return FieldResult(is_valid=False, message=f"Valor máximo é {_num_label(max_value)}")

    return FieldResult(is_valid=True, message="")

def validate_phone(value: Optional[str]) -> FieldResult:
    ok = is_valid_phone(value)
    return FieldResult(is_valid=ok, message="" if ok else "Telefone inválido")

def validate_email(value: Optional[str]) -> FieldResult:
    ok = is_valid_email(value)
    return FieldResult(is_valid=ok, message="" if ok else "Email inválido")

def validate_currency(value: Optional[str]) -> FieldResult:
    ok = is_valid_currency(value)
    return FieldResult(is_valid=ok, message="" if ok else "Valor inválido")

def format_for_kind(value: Optional[str], kind: FieldKind | str | None) -> str:
    """Formatação enquanto o usuário digita: só documento e telefone recebem máscara."""
    value = "" if value is None else str(value)
    if kind is None:
        return value
    kind = FieldKind(kind)
    if kind is FieldKind.DOCUMENT:
        return format_document(value)
    if kind is FieldKind.PHONE:
        return format_phone(value)
    return value

def validate_field(
    value: Optional[str],
    kind: FieldKind | str | None = None,
    label: str = "Campo",
    required: bool = False,
) -> FieldResult:
    """
    Validação de um campo de formulário.
    - obrigatório e vazio -> '<label> é obrigatório'
    - opcional e vazio    -> válido
    - preenchido          -> regra do `kind`
    """
    text = "" if value is None else str(value)
    if not text.strip():
        if required:
            return FieldResult(is_valid=False, message=f"{label} é obrigatório")
        return FieldResult(is_valid=True, message="")

    if kind is None:
        return FieldResult(is_valid=True, message="")

    kind = FieldKind(kind)
    if kind is FieldKind.DOCUMENT:
        return validate_document(text)
    if kind is FieldKind.PHONE:
        return validate_phone(text)
    if kind is FieldKind.EMAIL:
        return validate_email(text)
    if kind is FieldKind.CURRENCY:
        return validate_currency(text)
    if kind is FieldKind.NUMBER:
        return validate_number(text)
    return validate_required(text, label)
