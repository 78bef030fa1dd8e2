"""
Formatação e validação de valores monetários.

O locale define separadores, posição do símbolo e agrupamento de milhares;
a moeda define o símbolo e a quantidade de casas decimais. Ambos podem ser
passados explicitamente; quando omitidos vêm de PDV_LOCALE / PDV_CURRENCY.

Exemplos (padrão pt_BR/BRL):
    - 1234.5   -> 'R$ 1.234,50'
    - -10      -> '-R$ 10,00'
    - 0.005    -> 'R$ 0,01'
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Dict, Optional, Union

from .config import setting
from .text import parse_float

NBSP = "\u00a0"

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class LocaleConvention:
    group_sep: str
    decimal_sep: str
    symbol_first: bool
    symbol_space: bool
    # quantidade mínima de dígitos antes do primeiro separador de milhar
    min_grouping: int = 1
    symbol_overrides: Dict[str, str] = field(default_factory=dict)


LOCALES: Dict[str, LocaleConvention] = {
    "pt_BR": LocaleConvention(".", ",", symbol_first=True, symbol_space=True,
                              symbol_overrides={"USD": "US$", "JPY": "JP¥"}),
    "en_US": LocaleConvention(",", ".", symbol_first=True, symbol_space=False),
    "es_ES": LocaleConvention(".", ",", symbol_first=False, symbol_space=True, min_grouping=2,
                              symbol_overrides={"USD": "US$"}),
}

# código -> (símbolo, casas decimais)
CURRENCIES: Dict[str, tuple[str, int]] = {
    "BRL": ("R$", 2),
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "JPY": ("¥", 0),
}


def _convention(locale: str) -> LocaleConvention:
    key = locale.replace("-", "_")
    if key not in LOCALES:
        raise ValueError(f"Locale '{locale}' não suportado. Opções: {', '.join(sorted(LOCALES))}")
    return LOCALES[key]


def _group(int_digits: str, sep: str, min_grouping: int) -> str:
    if len(int_digits) < 3 + min_grouping:
        return int_digits
    out = ""
    for i, digit in enumerate(reversed(int_digits)):
        if i > 0 and i % 3 == 0:
            out = sep + out
        out = digit + out
    return out


def format_currency(value: Number, locale: Optional[str] = None, currency: Optional[str] = None) -> str:
    """
    Formata `value` como moeda.

    Args:
        value: valor numérico (int, float ou Decimal)
        locale: 'pt_BR', 'en_US' ou 'es_ES' (default: PDV_LOCALE)
        currency: 'BRL', 'USD', 'EUR' ou 'JPY' (default: PDV_CURRENCY)

    Raises:
        ValueError: locale/moeda não suportados ou valor não numérico/finito.
    """
    conv = _convention(locale or setting("PDV_LOCALE"))
    code = (currency or setting("PDV_CURRENCY")).upper()
    if code not in CURRENCIES:
        raise ValueError(f"Moeda '{code}' não suportada. Opções: {', '.join(sorted(CURRENCIES))}")
    symbol, digits = CURRENCIES[code]
    symbol = conv.symbol_overrides.get(code, symbol)

    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ValueError(f"Valor monetário inválido: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Valor monetário inválido: {value!r}")

    # precisão cobre a parte inteira e as casas decimais
    with localcontext() as ctx:
        ctx.prec = max(len(amount.as_tuple().digits), amount.adjusted() + 1) + digits + 1
        amount = amount.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    negative = amount < 0
    int_part, _, frac_part = str(abs(amount)).partition(".")

    number = _group(int_part, conv.group_sep, conv.min_grouping)
    if digits:
        number = f"{number}{conv.decimal_sep}{frac_part}"

    space = NBSP if conv.symbol_space else ""
    text = f"{symbol}{space}{number}" if conv.symbol_first else f"{number}{space}{symbol}"
    return f"-{text}" if negative else text


def is_valid_currency(value: str) -> bool:
    """
    Aceita entradas como 'R$ 10,50' ou '1234.5': mantém dígitos, '.' e ',',
    troca a primeira vírgula por ponto e exige um número >= 0.
    """
    if value is None:
        return False
    cleaned = re.sub(r"[^0-9.,]", "", str(value)).replace(",", ".", 1)
    num = parse_float(cleaned)
    return num is not None and num >= 0
