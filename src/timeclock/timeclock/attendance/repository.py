from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_records(self, owner_id: str) -> Sequence[AttendanceRecord]:
        """All records of an owner, in insertion order."""
        raise NotImplementedError

    def save_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> None:
        """Replace the owner's whole collection."""
        raise NotImplementedError

    def append_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> int:
        """Append a batch atomically: either every record is stored or none is."""
        raise NotImplementedError

    def clear_records(self, owner_id: str) -> int:
        raise NotImplementedError
