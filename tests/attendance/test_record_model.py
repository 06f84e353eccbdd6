from datetime import date

from src.timeclock.timeclock.attendance.model import AttendanceRecord, RawRow
from src.timeclock.timeclock.core.enums import PunchStatus


def test_raw_row_accessors():
    row = RawRow.from_mapping(
        {
            "Nome": " Ana ",
            "Horário contratual": "08:00 - 17:00",
            "Data e Hora da Batida 1": "21/07/2025 08:02",
            "Data e Hora da Batida 4": "",
        }
    )

    assert row.name == "Ana"
    assert row.department is None
    assert row.contractual_schedule == "08:00 - 17:00"
    assert row.punch(1) == "21/07/2025 08:02"
    assert row.punch(4) is None
    assert row.punch(6) is None


def test_record_document_round_trip():
    rec = AttendanceRecord(
        record_id="r1",
        owner_id="u1",
        name="Ana",
        department="TI",
        location="Sede",
        equipment="REP001",
        contractual_entry="08:00",
        contractual_exit="17:00",
        punch_date=date(2025, 7, 21),
        actual_entry="08:02",
        actual_exit="12:00",
        exit_adjusted=True,
        entry_status=PunchStatus.ON_TIME,
        exit_status=PunchStatus.ADJUSTED,
    )

    doc = rec.to_document()

    assert doc["punch_date"] == "2025-07-21"
    assert doc["exit_status"] == "adjusted"
    assert AttendanceRecord.from_document(doc) == rec
