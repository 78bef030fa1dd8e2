from .field_validation import (
    validate_required,
    validate_number,
    validate_phone,
    validate_email,
    validate_currency,
    validate_field,
    format_for_kind,
)
from .batch_validation import validate_column, summarize_column

__all__ = [
    "validate_required",
    "validate_number",
    "validate_phone",
    "validate_email",
    "validate_currency",
    "validate_field",
    "format_for_kind",
    "validate_column",
    "summarize_column",
]
