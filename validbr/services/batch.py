from __future__ import annotations
from typing import Dict, Optional, Tuple, Type

import pandas as pd

from validbr.errors import DocumentError
from validbr.models.cnpj import Cnpj
from validbr.models.cpf import Cpf

KINDS: Dict[str, Type] = {"cpf": Cpf, "cnpj": Cnpj}

RESULT_COLUMNS = ["valid", "formatted", "error"]


def _model_for(kind: str):
    k = (kind or "").strip().lower()
    if k not in KINDS:
        raise ValueError(f"Tipo de documento desconhecido: {kind!r}. Use: {', '.join(KINDS)}")
    return KINDS[k]


def _check_one(model, value) -> Tuple[bool, Optional[str], Optional[str]]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return False, None, "valor ausente"
    try:
        doc = model.parse(str(value))
    except DocumentError as e:
        return False, None, str(e)
    return True, doc.format(), None


def validate_series(series: pd.Series, kind: str) -> pd.DataFrame:
    """
    Valida cada valor da Series como CPF ou CNPJ.
    Retorna um DataFrame com o mesmo índice e as colunas 'valid', 'formatted', 'error'.
    """
    model = _model_for(kind)
    if series is None or series.empty:
        return pd.DataFrame(columns=RESULT_COLUMNS)
    rows = [_check_one(model, v) for v in series.tolist()]
    out = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=series.index)
    out["valid"] = out["valid"].astype(bool)
    return out


def validate_column(df: pd.DataFrame, column: str, kind: str) -> pd.DataFrame:
    """
    Copia o DataFrame acrescentando '<coluna>_valid', '<coluna>_formatted' e '<coluna>_error'.
    Não altera o original.
    """
    if column not in df.columns:
        raise KeyError(f"Coluna '{column}' não encontrada. Colunas: {', '.join(map(str, df.columns))}")
    view = df.copy()
    res = validate_series(view[column], kind)
    for c in RESULT_COLUMNS:
        view[f"{column}_{c}"] = res[c] if not res.empty else pd.Series(dtype=object)
    return view
