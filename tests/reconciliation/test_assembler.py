from datetime import date

import pytest

from conftest import punch_row
from src.timeclock.timeclock.attendance.model import RawRow
from src.timeclock.timeclock.core.enums import PunchStatus
from src.timeclock.timeclock.preferences.model import ToleranceConfig
from src.timeclock.timeclock.reconciliation.assembler import RecordAssembler

TOLERANCE_5 = ToleranceConfig(general=5)


@pytest.fixture
def assembler(clock, ids):
    return RecordAssembler(clock=clock, ids=ids)


def _assemble(assembler, row: dict, tolerances=TOLERANCE_5):
    return assembler.assemble(RawRow.from_mapping(row), tolerances, owner_id="u1")


def test_entry_within_tolerance_is_on_time(assembler):
    rec = _assemble(assembler, punch_row(p1="21/07/2025 08:02"))

    assert rec.contractual_entry == "08:00"
    assert rec.contractual_exit == "17:00"
    assert rec.actual_entry == "08:02"
    assert rec.entry_status == PunchStatus.ON_TIME


def test_entry_beyond_tolerance_is_late(assembler):
    rec = _assemble(assembler, punch_row(p1="21/07/2025 08:10"))
    assert rec.entry_status == PunchStatus.LATE


def test_identity_and_pass_through_fields(assembler):
    rec = _assemble(assembler, punch_row("Bruno Lima", p1="21/07/2025 08:00"))

    assert rec.record_id == "rec-1"
    assert rec.owner_id == "u1"
    assert rec.name == "Bruno Lima"
    assert rec.department == "TI"
    assert rec.location == "Sede"
    assert rec.equipment == "REP001"
    assert rec.punch_date == date(2025, 7, 21)


def test_saturday_exit_from_punch_two_is_never_forced(assembler):
    row = punch_row(schedule="08:00 - 12:00", p1="19/07/2025 08:00", p2="19/07/2025 12:00")
    rec = _assemble(assembler, row)

    assert rec.actual_exit == "12:00"
    assert rec.exit_status == PunchStatus.ON_TIME


def test_monday_exit_prefers_punch_four(assembler):
    row = punch_row(p1="21/07/2025 08:02", p2="21/07/2025 12:00", p3="21/07/2025 13:00", p4="21/07/2025 17:05")
    rec = _assemble(assembler, row)

    assert rec.actual_exit == "17:05"
    assert rec.exit_status == PunchStatus.ON_TIME


def test_weekday_fallback_to_punch_two_is_always_early(assembler):
    # 17:30 would be late by time math; the fallback policy wins.
    row = punch_row(p1="22/07/2025 08:00", p2="22/07/2025 17:30")
    rec = _assemble(assembler, row)

    assert rec.actual_exit == "17:30"
    assert rec.exit_status == PunchStatus.EARLY


def test_sunday_has_no_exit(assembler):
    row = punch_row(p1="20/07/2025 08:00", p2="20/07/2025 12:00", p4="20/07/2025 17:00")
    rec = _assemble(assembler, row)

    assert rec.actual_exit is None
    assert rec.exit_status is None
    assert rec.entry_status == PunchStatus.ON_TIME


def test_adjusted_entry(assembler):
    rec = _assemble(assembler, punch_row(p1="21/07/2025 09:45*"))

    assert rec.actual_entry == "09:45"
    assert rec.entry_adjusted is True
    assert rec.entry_status == PunchStatus.ADJUSTED
    assert rec.entry_display == "09:45*"


def test_unparsable_date_falls_back_to_clock(assembler, fixed_now):
    rec = _assemble(assembler, punch_row(p1="31/02/2025 08:00", p4="31/02/2025 17:00"))

    assert rec.punch_date == fixed_now.date()
    assert rec.actual_entry == "08:00"
    assert rec.actual_exit is None


def test_missing_schedule_leaves_statuses_empty(assembler):
    rec = _assemble(assembler, punch_row(schedule="", p1="21/07/2025 08:00", p4="21/07/2025 17:00"))

    assert rec.contractual_entry is None
    assert rec.entry_status is None
    assert rec.exit_status is None


def test_general_tolerance_drives_classification(assembler):
    rec = _assemble(assembler, punch_row(p1="21/07/2025 08:10"), ToleranceConfig(general=15))
    assert rec.entry_status == PunchStatus.ON_TIME


def test_batch_keeps_every_row(assembler, fixed_now):
    rows = [RawRow.from_mapping(punch_row(f"P{i}", p1=f"2{i}/07/2025 08:00")) for i in range(1, 9)]
    rows.insert(2, RawRow.from_mapping(punch_row("Bad", p1="??/07/2025 08:00")))
    rows.append(RawRow.from_mapping(punch_row("Last", p1="21/07/2025 08:00")))

    records = assembler.assemble_batch(rows, TOLERANCE_5, owner_id="u1")

    assert len(records) == 10
    assert records[2].name == "Bad"
    assert records[2].punch_date == fixed_now.date()
    assert len({r.record_id for r in records}) == 10
