from __future__ import annotations
import math
import re
from typing import Optional

_LEADING_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

def only_digits(s: Optional[str]) -> str:
    """Remove tudo que não for dígito (máscaras, espaços, pontuação)."""
    if s is None:
        return ""
    return re.sub(r"[^0-9]", "", str(s))

def parse_float(v) -> Optional[float]:
    """
    Lê o maior número decimal no início do texto, como um campo de formulário:
    '12abc' -> 12.0, '.5' -> 0.5, '1e3x' -> 1000.0, 'abc' -> None.
    """
    if v is None:
        return None
    if isinstance(v, bool):
        return None
    if isinstance(v, float):
        return None if math.isnan(v) else v
    if isinstance(v, int):
        try:
            return float(v)
        except OverflowError:
            return math.inf if v > 0 else -math.inf
    m = _LEADING_NUMBER.match(str(v).lstrip())
    if not m:
        return None
    return float(m.group(0))
