from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import COL_NAME
from ..core.exceptions import ImportFormatError, PersistenceError
from ..preferences.model import ToleranceConfig
from ..preferences.service import PreferencesService
from ..reconciliation.assembler import RecordAssembler
from .model import AttendanceRecord, RawRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = "Formato de arquivo inválido. Verifique se a coluna 'Nome' está presente."


@dataclass(frozen=True)
class ImportResult:
    records: list[AttendanceRecord]

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def message(self) -> str:
        return f"{self.count} registros foram processados e salvos."


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        preferences: PreferencesService,
        *,
        assembler: Optional[RecordAssembler] = None,
    ):
        self._attendance = attendance
        self._preferences = preferences
        self._assembler = assembler or RecordAssembler()

    @staticmethod
    def validate_rows(rows: Sequence[Mapping[str, Any]]) -> None:
        if not rows or COL_NAME not in rows[0]:
            raise ImportFormatError(INVALID_FILE_MESSAGE)

    def import_rows(
        self,
        owner_id: str,
        rows: Sequence[Mapping[str, Any]],
        *,
        tolerances: Optional[ToleranceConfig] = None,
    ) -> ImportResult:
        """Reconcile an uploaded sheet and append it to the owner's records.

        The batch is all-or-nothing: a missing 'Nome' column aborts before any
        record is built, and a storage failure leaves nothing committed.
        """
        self.validate_rows(rows)

        tolerances = tolerances or self._preferences.get_config(owner_id).tolerances
        records = self._assembler.assemble_batch(
            (RawRow.from_mapping(row) for row in rows),
            tolerances,
            owner_id=owner_id,
        )

        try:
            self._attendance.append_records(owner_id, records)
        except Exception as e:
            logger.exception("Failed to store %d records for owner %s", len(records), owner_id)
            raise PersistenceError(f"Erro ao salvar no banco de dados: {e}") from e

        logger.info("Imported %d records for owner %s", len(records), owner_id)
        return ImportResult(records=records)

    def list_records(self, owner_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_records(owner_id)

    def clear_records(self, owner_id: str) -> int:
        removed = self._attendance.clear_records(owner_id)
        logger.info("Cleared %d records for owner %s", removed, owner_id)
        return removed
