from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..database.json_store import JsonDocumentStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class JsonAttendanceRepository(AttendanceRepository):
    """File-backed store: {"<owner_id>": [record documents, ...]}."""

    def __init__(self, path: str | Path):
        self._store = JsonDocumentStore(path, default={})

    def list_records(self, owner_id: str) -> Sequence[AttendanceRecord]:
        docs = self._store.read().get(owner_id, [])
        return [AttendanceRecord.from_document(d) for d in docs]

    def save_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> None:
        def _replace(data: dict) -> None:
            data[owner_id] = [r.to_document() for r in records]

        self._store.update(_replace)

    def append_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0

        def _append(data: dict) -> int:
            data.setdefault(owner_id, []).extend(r.to_document() for r in records)
            return len(records)

        return self._store.update(_append)

    def clear_records(self, owner_id: str) -> int:
        def _clear(data: dict) -> int:
            return len(data.pop(owner_id, []))

        return self._store.update(_clear)
