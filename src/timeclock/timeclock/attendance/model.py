from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_iso_date
from ..core.constants import (
    COL_CONTRACTUAL,
    COL_DEPARTMENT,
    COL_EQUIPMENT,
    COL_LOCATION,
    COL_NAME,
    COL_PUNCH_TEMPLATE,
    PUNCH_FIELD_COUNT,
)
from ..core.enums import PunchStatus


def _cell(row: Mapping[str, Any], label: str) -> Optional[str]:
    value = row.get(label)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class RawRow:
    """Uma linha da planilha exportada pelo relógio de ponto."""

    name: Optional[str]
    department: Optional[str] = None
    location: Optional[str] = None
    equipment: Optional[str] = None
    contractual_schedule: Optional[str] = None
    punches: tuple[Optional[str], ...] = (None,) * PUNCH_FIELD_COUNT

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "RawRow":
        return cls(
            name=_cell(row, COL_NAME),
            department=_cell(row, COL_DEPARTMENT),
            location=_cell(row, COL_LOCATION),
            equipment=_cell(row, COL_EQUIPMENT),
            contractual_schedule=_cell(row, COL_CONTRACTUAL),
            punches=tuple(_cell(row, COL_PUNCH_TEMPLATE.format(n=n)) for n in range(1, PUNCH_FIELD_COUNT + 1)),
        )

    def punch(self, n: int) -> Optional[str]:
        """Raw "Data e Hora da Batida n" field (1-based)."""
        if n < 1 or n > len(self.punches):
            return None
        return self.punches[n - 1]


def _status_or_none(value: Optional[str]) -> Optional[PunchStatus]:
    return PunchStatus(value) if value else None


@dataclass(frozen=True)
class AttendanceRecord:
    """Entidade de domínio: registro de ponto conciliado."""

    record_id: str
    owner_id: str
    name: Optional[str]
    department: Optional[str]
    location: str
    equipment: str
    contractual_entry: Optional[str]
    contractual_exit: Optional[str]
    punch_date: date
    actual_entry: Optional[str]
    actual_exit: Optional[str]
    entry_adjusted: bool = False
    exit_adjusted: bool = False
    entry_status: Optional[PunchStatus] = None
    exit_status: Optional[PunchStatus] = None

    @property
    def entry_display(self) -> Optional[str]:
        if self.actual_entry and self.entry_adjusted:
            return f"{self.actual_entry}*"
        return self.actual_entry

    @property
    def exit_display(self) -> Optional[str]:
        if self.actual_exit and self.exit_adjusted:
            return f"{self.actual_exit}*"
        return self.actual_exit

    def to_document(self) -> dict:
        return {
            "id": self.record_id,
            "owner_id": self.owner_id,
            "name": self.name,
            "department": self.department,
            "location": self.location,
            "equipment": self.equipment,
            "contractual_entry": self.contractual_entry,
            "contractual_exit": self.contractual_exit,
            "punch_date": self.punch_date.strftime("%Y-%m-%d"),
            "actual_entry": self.actual_entry,
            "actual_exit": self.actual_exit,
            "entry_adjusted": self.entry_adjusted,
            "exit_adjusted": self.exit_adjusted,
            "entry_status": self.entry_status.value if self.entry_status else None,
            "exit_status": self.exit_status.value if self.exit_status else None,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            record_id=str(doc["id"]),
            owner_id=str(doc["owner_id"]),
            name=doc.get("name"),
            department=doc.get("department"),
            location=doc.get("location") or "",
            equipment=doc.get("equipment") or "",
            contractual_entry=doc.get("contractual_entry"),
            contractual_exit=doc.get("contractual_exit"),
            punch_date=parse_iso_date(doc["punch_date"]),
            actual_entry=doc.get("actual_entry"),
            actual_exit=doc.get("actual_exit"),
            entry_adjusted=bool(doc.get("entry_adjusted")),
            exit_adjusted=bool(doc.get("exit_adjusted")),
            entry_status=_status_or_none(doc.get("entry_status")),
            exit_status=_status_or_none(doc.get("exit_status")),
        )
