import streamlit as st

from pdv.models.validation import DocumentResult, FieldKind, FieldResult
from pdv.services.field_validation import format_for_kind, validate_field, validate_number

def validated_input(label: str, kind: FieldKind | str | None = None, required: bool = False,
                    key: str | None = None, value: str = "") -> tuple[str, FieldResult]:
    """
    Campo de texto com máscara e validação (documento, telefone, e-mail, valor...).
    Retorna (valor_formatado, resultado).
    """
    shown = f"{label} *" if required else label
    raw = st.text_input(shown, value=value, key=key)
    formatted = format_for_kind(raw, kind)
    result = validate_field(formatted, kind, label=label, required=required)

    if not result.is_valid and result.message:
        st.error(result.message)
    elif formatted and isinstance(result, DocumentResult) and result.type is not None:
        st.caption(f"✅ {result.type.label} válido")
    return formatted, result

def numeric_input(label: str, min_value: float = 0, max_value: float | None = None,
                  key: str | None = None) -> tuple[str, FieldResult]:
    """Quantidade/preço digitado como texto, com limites inclusivos."""
    raw = st.text_input(label, key=key)
    if not (raw or "").strip():
        return "", FieldResult(is_valid=True, message="")
    result = validate_number(raw, min_value=min_value, max_value=max_value)
    if not result.is_valid:
        st.error(result.message)
    return raw, result
