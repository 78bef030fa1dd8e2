from .config import settings, set_settings, setting
from .logs import get_logger
from .text import only_digits, parse_float
from .validators_br import (
    is_valid_cpf, is_valid_cnpj, format_cpf, format_cnpj,
    validate_document, format_document,
    is_valid_phone, format_phone, is_valid_email,
)
from .currency import format_currency, is_valid_currency

__all__ = [
    "settings", "set_settings", "setting",
    "get_logger",
    "only_digits", "parse_float",
    "is_valid_cpf", "is_valid_cnpj", "format_cpf", "format_cnpj",
    "validate_document", "format_document",
    "is_valid_phone", "format_phone", "is_valid_email",
    "format_currency", "is_valid_currency",
]
