from __future__ import annotations
from typing import Dict, Optional

import pandas as pd

from pdv.models.validation import FieldKind
from pdv.utils.logs import get_logger
from .field_validation import validate_field

log = get_logger("pdv.batch")

def validate_column(
    df: pd.DataFrame,
    column: str,
    kind: FieldKind | str | None,
    label: Optional[str] = None,
    required: bool = False,
) -> pd.DataFrame:
    """
    Valida uma coluna inteira (ex.: CPF/CNPJ de clientes, telefones de fornecedores).
    Retorna uma cópia com as colunas '<coluna>_valido' e '<coluna>_mensagem',
    sem alterar o original.
    """
    if df is None or df.empty:
        return pd.DataFrame()
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {', '.join(map(str, df.columns))}")

    view = df.copy()
    name = label or column

    def _check(v):
        if v is None or (not isinstance(v, str) and pd.isna(v)):
            text = ""
        elif isinstance(v, float) and v.is_integer():
            # coluna numérica com vazios vira float64: 11987654321.0 -> '11987654321'
            text = str(int(v))
        else:
            text = str(v)
        return validate_field(text, kind, label=name, required=required)

    results = view[column].apply(_check)
    view[f"{column}_valido"] = results.apply(lambda r: r.is_valid).astype(bool)
    view[f"{column}_mensagem"] = results.apply(lambda r: r.message)

    summary = summarize_column(view, column)
    log.info(f"Coluna '{column}': {summary['validos']}/{summary['total']} válidos")
    return view

def summarize_column(df: pd.DataFrame, column: str) -> Dict[str, int]:
    """Contagem de válidos/inválidos de uma coluna já passada por validate_column."""
    flag = f"{column}_valido"
    if df is None or df.empty or flag not in df.columns:
        return {"total": 0, "validos": 0, "invalidos": 0}
    total = int(len(df))
    ok = int(df[flag].sum())
    return {"total": total, "validos": ok, "invalidos": total - ok}
