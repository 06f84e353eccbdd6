from __future__ import annotations

import logging
import math
from datetime import date, datetime, time
from pathlib import Path
from typing import IO, Any, Optional

import pandas as pd

from ..core.exceptions import ImportFormatError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".xlsx", ".xlsm", ".csv")


def _cell_text(value: Any) -> Optional[str]:
    """Render a cell the way the device export shows it; blank cells give None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if value.is_integer():
            return str(int(value))
    if value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    if isinstance(value, time):
        return value.strftime("%H:%M")
    text = str(value).strip()
    return text or None


def _read_frame(stream: IO[bytes], suffix: str) -> pd.DataFrame:
    if suffix == ".csv":
        return pd.read_csv(stream, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    return pd.read_excel(stream, sheet_name=0, dtype=object, engine="openpyxl")


def read_rows(stream: IO[bytes], filename: str) -> list[dict[str, str]]:
    """Parse the first sheet into label -> text maps, one per non-blank row.

    Blank cells are left out of each map, so a missing label and an empty
    cell look the same to callers.
    """
    suffix = Path(filename or "").suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ImportFormatError("Formato de arquivo não suportado. Envie um arquivo .xlsx ou .csv.")

    try:
        frame = _read_frame(stream, suffix)
    except Exception as e:
        logger.warning("Could not parse upload %s: %s", filename, e)
        raise ImportFormatError("Não foi possível processar o arquivo enviado.") from e

    labels = [str(c).strip() for c in frame.columns]
    rows: list[dict[str, str]] = []
    for values in frame.itertuples(index=False, name=None):
        row = {}
        for label, value in zip(labels, values):
            text = _cell_text(value)
            if text is not None:
                row[label] = text
        if row:
            rows.append(row)
    return rows
