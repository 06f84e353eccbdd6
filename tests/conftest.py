from __future__ import annotations

import io
from datetime import datetime

import pandas as pd
import pytest


class FixedClock:
    def __init__(self, now: datetime):
        self._now = now

    def now(self) -> datetime:
        return self._now


class SequentialIds:
    def __init__(self, prefix: str = "rec"):
        self._prefix = prefix
        self._n = 0

    def new_id(self) -> str:
        self._n += 1
        return f"{self._prefix}-{self._n}"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


def punch_row(name: str = "Ana Souza", *, schedule: str = "08:00 - 12:00 - 13:00 - 17:00", **punches) -> dict:
    """Build an uploaded row; punches given as p1="21/07/2025 08:02", ..."""
    row = {
        "Nome": name,
        "Departamento": "TI",
        "Localização": "Sede",
        "Equipamento da Última Batida": "REP001",
        "Horário contratual": schedule,
    }
    for key, value in punches.items():
        row[f"Data e Hora da Batida {int(key[1:])}"] = value
    return row


def xlsx_bytes(rows: list[dict]) -> bytes:
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, index=False, sheet_name="Planilha1")
    return out.getvalue()


@pytest.fixture
def app(tmp_path, monkeypatch, clock, ids):
    monkeypatch.setenv("APP_ENV", "testing")

    from src.timeclock.timeclock.main import create_app

    return create_app(
        {
            "STORAGE_BACKEND": "json",
            "DATA_DIR": str(tmp_path),
            "CLOCK": clock,
            "ID_PROVIDER": ids,
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()
