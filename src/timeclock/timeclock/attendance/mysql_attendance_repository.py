from __future__ import annotations

from typing import Sequence

from ..core.enums import PunchStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = (
    "record_id, owner_id, name, department, location, equipment, "
    "contractual_entry, contractual_exit, punch_date, actual_entry, actual_exit, "
    "entry_adjusted, exit_adjusted, entry_status, exit_status"
)

_INSERT = f"""
    INSERT INTO punch_records({_COLUMNS})
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
"""


def _params(r: AttendanceRecord) -> tuple:
    return (
        r.record_id,
        r.owner_id,
        r.name,
        r.department,
        r.location,
        r.equipment,
        r.contractual_entry,
        r.contractual_exit,
        r.punch_date,
        r.actual_entry,
        r.actual_exit,
        int(r.entry_adjusted),
        int(r.exit_adjusted),
        r.entry_status.value if r.entry_status else None,
        r.exit_status.value if r.exit_status else None,
    )


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        owner_id=str(r["owner_id"]),
        name=r.get("name"),
        department=r.get("department"),
        location=r.get("location") or "",
        equipment=r.get("equipment") or "",
        contractual_entry=r.get("contractual_entry"),
        contractual_exit=r.get("contractual_exit"),
        punch_date=r["punch_date"],
        actual_entry=r.get("actual_entry"),
        actual_exit=r.get("actual_exit"),
        entry_adjusted=bool(r.get("entry_adjusted")),
        exit_adjusted=bool(r.get("exit_adjusted")),
        entry_status=PunchStatus(r["entry_status"]) if r.get("entry_status") else None,
        exit_status=PunchStatus(r["exit_status"]) if r.get("exit_status") else None,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_records(self, owner_id: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE owner_id=%s
                ORDER BY seq ASC
                """,
                (owner_id,),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def save_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM punch_records WHERE owner_id=%s", (owner_id,))
            if records:
                cur.executemany(_INSERT, [_params(r) for r in records])

    def append_records(self, owner_id: str, records: Sequence[AttendanceRecord]) -> int:
        if not records:
            return 0
        # Single transaction: db_cursor rolls back the whole batch on failure.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_INSERT, [_params(r) for r in records])
        return len(records)

    def clear_records(self, owner_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM punch_records WHERE owner_id=%s", (owner_id,))
            return int(cur.rowcount or 0)
