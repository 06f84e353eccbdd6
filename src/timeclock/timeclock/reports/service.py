from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.enums import PunchStatus, status_label


@dataclass(frozen=True)
class RecordFilter:
    """Filtros da tela de registros; campos vazios não filtram."""

    statuses: frozenset[PunchStatus] = frozenset()
    search: Optional[str] = None
    name: Optional[str] = None
    department: Optional[str] = None
    start: Optional[date] = None
    end: Optional[date] = None

    def matches(self, r: AttendanceRecord) -> bool:
        if self.statuses and r.entry_status not in self.statuses and r.exit_status not in self.statuses:
            return False
        if self.name and r.name != self.name:
            return False
        if self.department and r.department != self.department:
            return False
        if self.start and r.punch_date < self.start:
            return False
        if self.end and r.punch_date > self.end:
            return False
        if self.search:
            needle = self.search.lower()
            if not any(needle in str(v).lower() for v in searchable_values(r)):
                return False
        return True


@dataclass(frozen=True)
class StatusSummary:
    total: int = 0
    on_time: int = 0
    late: int = 0
    early: int = 0
    adjusted: int = 0


@dataclass(frozen=True)
class ReportData:
    records: list[AttendanceRecord]
    summary: StatusSummary
    names: list[str] = field(default_factory=list)
    departments: list[str] = field(default_factory=list)


def searchable_values(r: AttendanceRecord) -> list[str]:
    values = [
        r.name,
        r.department,
        r.location,
        r.equipment,
        r.contractual_entry,
        r.contractual_exit,
        r.punch_date.strftime("%Y-%m-%d"),
        r.actual_entry,
        r.actual_exit,
        r.entry_status.value if r.entry_status else None,
        r.exit_status.value if r.exit_status else None,
    ]
    return [v for v in values if v]


def summarize(records: Iterable[AttendanceRecord]) -> StatusSummary:
    """Count statuses over both sides of every record."""
    counts = {s: 0 for s in PunchStatus}
    total = 0
    for r in records:
        total += 1
        for status in (r.entry_status, r.exit_status):
            if status is not None:
                counts[status] += 1
    return StatusSummary(
        total=total,
        on_time=counts[PunchStatus.ON_TIME],
        late=counts[PunchStatus.LATE],
        early=counts[PunchStatus.EARLY],
        adjusted=counts[PunchStatus.ADJUSTED],
    )


def _unique_sorted(values: Iterable[Optional[str]]) -> list[str]:
    return sorted({v for v in values if v})


def unique_names(records: Iterable[AttendanceRecord]) -> list[str]:
    return _unique_sorted(r.name for r in records)


def unique_departments(records: Iterable[AttendanceRecord]) -> list[str]:
    return _unique_sorted(r.department for r in records)


class ReportService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_report(self, owner_id: str, record_filter: Optional[RecordFilter] = None) -> ReportData:
        all_records = list(self._attendance.list_records(owner_id))
        record_filter = record_filter or RecordFilter()
        rows = [r for r in all_records if record_filter.matches(r)]

        return ReportData(
            records=rows,
            summary=summarize(rows),
            names=unique_names(all_records),
            departments=unique_departments(all_records),
        )

    def build_dashboard(self, owner_id: str, *, today: date) -> dict:
        records = list(self._attendance.list_records(owner_id))
        return dashboard_metrics(records, today=today)


def dashboard_metrics(records: Sequence[AttendanceRecord], *, today: date) -> dict:
    on_time = 0
    late = 0
    classified = 0
    for r in records:
        for status in (r.entry_status, r.exit_status):
            if status is None:
                continue
            classified += 1
            if status == PunchStatus.ON_TIME:
                on_time += 1
            elif status == PunchStatus.LATE:
                late += 1

    recent = []
    for r in reversed(records[-RECENT_ACTIVITY_LIMIT:]):
        status = r.entry_status or r.exit_status or PunchStatus.ON_TIME
        recent.append(
            {
                "name": r.name,
                "time": r.actual_entry or r.actual_exit or "00:00",
                "status": status.value,
                "status_label": status_label(status),
            }
        )

    return {
        "unique_people": len({r.name for r in records}),
        "records_today": sum(1 for r in records if r.punch_date == today),
        # half-up, so 12.5% shows as 13
        "punctuality_rate": int(on_time * 100 / classified + 0.5) if classified else 0,
        "late_count": late,
        "recent_activity": recent,
    }
