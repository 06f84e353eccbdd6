from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.providers import ClockProvider, IdProvider
from .database.connection import DBConfig, DatabaseConnection
from .preferences.json_preferences_repository import JsonPreferencesRepository
from .preferences.mysql_preferences_repository import MySQLPreferencesRepository
from .preferences.repository import PreferencesRepository
from .preferences.service import PreferencesService
from .reconciliation.assembler import RecordAssembler
from .reconciliation.factory import StatusStrategyFactory
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository
    preferences_repo: PreferencesRepository

    assembler: RecordAssembler
    preferences_service: PreferencesService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(
    *,
    storage: str = "mysql",
    db_config: Optional[dict] = None,
    data_dir: Optional[str | Path] = None,
    clock: Optional[ClockProvider] = None,
    ids: Optional[IdProvider] = None,
) -> Container:
    conn: Optional[DatabaseConnection] = None

    if storage == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config or {}))
        attendance_repo = MySQLAttendanceRepository(conn)
        preferences_repo = MySQLPreferencesRepository(conn)
    elif storage == "json":
        base = Path(data_dir or "instance")
        attendance_repo = JsonAttendanceRepository(base / "records.json")
        preferences_repo = JsonPreferencesRepository(base / "preferences.json")
    else:
        raise ValueError(f"Unknown storage backend: {storage!r}")

    assembler = RecordAssembler(clock=clock, ids=ids, strategy_factory=StatusStrategyFactory())
    preferences_service = PreferencesService(preferences_repo)
    attendance_service = AttendanceService(attendance_repo, preferences_service, assembler=assembler)
    report_service = ReportService(attendance_repo)

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        preferences_repo=preferences_repo,
        assembler=assembler,
        preferences_service=preferences_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
