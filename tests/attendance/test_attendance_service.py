import pytest

from conftest import punch_row
from src.timeclock.timeclock.attendance.json_attendance_repository import JsonAttendanceRepository
from src.timeclock.timeclock.attendance.service import INVALID_FILE_MESSAGE, AttendanceService
from src.timeclock.timeclock.core.enums import PunchStatus
from src.timeclock.timeclock.core.exceptions import ImportFormatError, PersistenceError
from src.timeclock.timeclock.preferences.json_preferences_repository import JsonPreferencesRepository
from src.timeclock.timeclock.preferences.model import ToleranceConfig
from src.timeclock.timeclock.preferences.service import PreferencesService
from src.timeclock.timeclock.reconciliation.assembler import RecordAssembler


class FailingRepo:
    def __init__(self):
        self.stored = []

    def list_records(self, owner_id):
        return list(self.stored)

    def append_records(self, owner_id, records):
        raise RuntimeError("connection lost")

    def clear_records(self, owner_id):
        return 0


@pytest.fixture
def prefs(tmp_path):
    return PreferencesService(JsonPreferencesRepository(tmp_path / "preferences.json"))


@pytest.fixture
def repo(tmp_path):
    return JsonAttendanceRepository(tmp_path / "records.json")


@pytest.fixture
def service(repo, prefs, clock, ids):
    return AttendanceService(repo, prefs, assembler=RecordAssembler(clock=clock, ids=ids))


def test_import_keeps_rows_with_bad_dates(service, repo, fixed_now):
    rows = [punch_row(f"Pessoa {i}", p1="21/07/2025 08:00") for i in range(10)]
    rows[3] = punch_row("Pessoa 3", p1="sem data")

    result = service.import_rows("u1", rows)

    assert result.count == 10
    assert result.message == "10 registros foram processados e salvos."
    stored = repo.list_records("u1")
    assert len(stored) == 10
    assert stored[3].punch_date == fixed_now.date()


def test_missing_name_column_rejects_whole_batch(service, repo):
    rows = [{"Departamento": "TI", "Data e Hora da Batida 1": "21/07/2025 08:00"}]

    with pytest.raises(ImportFormatError) as exc:
        service.import_rows("u1", rows)

    assert str(exc.value) == INVALID_FILE_MESSAGE
    assert repo.list_records("u1") == []


def test_empty_upload_is_rejected(service):
    with pytest.raises(ImportFormatError):
        service.import_rows("u1", [])


def test_storage_failure_raises_persistence_error(prefs, clock, ids):
    failing = FailingRepo()
    service = AttendanceService(failing, prefs, assembler=RecordAssembler(clock=clock, ids=ids))

    with pytest.raises(PersistenceError) as exc:
        service.import_rows("u1", [punch_row(p1="21/07/2025 08:00")])

    assert "Erro ao salvar no banco de dados" in str(exc.value)
    assert failing.stored == []


def test_import_uses_owner_tolerance(service, prefs):
    prefs.save_config("u1", {"tolerances": {"toleranceMinutes": 15}})

    result = service.import_rows("u1", [punch_row(p1="21/07/2025 08:10")])
    assert result.records[0].entry_status == PunchStatus.ON_TIME

    other = service.import_rows("u2", [punch_row(p1="21/07/2025 08:10")])
    assert other.records[0].entry_status == PunchStatus.LATE


def test_explicit_tolerance_overrides_preferences(service):
    result = service.import_rows("u1", [punch_row(p1="21/07/2025 08:10")], tolerances=ToleranceConfig(general=0))
    assert result.records[0].entry_status == PunchStatus.LATE


def test_imports_append_and_clear(service, repo):
    service.import_rows("u1", [punch_row("A", p1="21/07/2025 08:00")])
    service.import_rows("u1", [punch_row("B", p1="21/07/2025 08:00")])
    service.import_rows("u2", [punch_row("C", p1="21/07/2025 08:00")])

    assert [r.name for r in service.list_records("u1")] == ["A", "B"]

    assert service.clear_records("u1") == 2
    assert service.list_records("u1") == []
    assert [r.name for r in service.list_records("u2")] == ["C"]
