from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord, RawRow
from ..common.datetime_utils import day_of_week, parse_punch_date
from ..common.providers import ClockProvider, IdProvider, SystemClock, UuidIdProvider
from ..preferences.model import ToleranceConfig
from .classifier import classify
from .exit_policy import select_exit_punch
from .factory import StatusStrategyFactory
from .punch_extractor import extract_punch, punch_date_token
from .schedule_parser import parse_contractual_schedule

logger = logging.getLogger(__name__)


class RecordAssembler:
    """Build reconciled AttendanceRecords from uploaded rows.

    Pure apart from the injected clock (fallback date) and id provider.
    """

    def __init__(
        self,
        *,
        clock: Optional[ClockProvider] = None,
        ids: Optional[IdProvider] = None,
        strategy_factory: Optional[StatusStrategyFactory] = None,
    ):
        self._clock = clock or SystemClock()
        self._ids = ids or UuidIdProvider()
        self._factory = strategy_factory or StatusStrategyFactory()

    def assemble(self, row: RawRow, tolerances: ToleranceConfig, *, owner_id: str) -> AttendanceRecord:
        first_punch = row.punch(1)
        row_date = parse_punch_date(punch_date_token(first_punch))
        if row_date is None:
            # No day-of-week rule applies to the fallback date.
            punch_date = self._clock.now().date()
            day = None
            logger.debug("Row %r has no valid punch date, using %s", row.name, punch_date)
        else:
            punch_date = row_date
            day = day_of_week(row_date)

        schedule = parse_contractual_schedule(row.contractual_schedule)
        entry = extract_punch(first_punch)
        exit_selection = select_exit_punch(day, row.punches)
        exit_punch = exit_selection.punch

        entry_status = classify(schedule.entry, entry, tolerances.general, factory=self._factory)
        exit_status = classify(
            schedule.exit,
            exit_punch,
            tolerances.general,
            forced_status=exit_selection.forced_status,
            factory=self._factory,
        )

        return AttendanceRecord(
            record_id=self._ids.new_id(),
            owner_id=owner_id,
            name=row.name,
            department=row.department,
            location=row.location or "",
            equipment=row.equipment or "",
            contractual_entry=schedule.entry,
            contractual_exit=schedule.exit,
            punch_date=punch_date,
            actual_entry=entry.time,
            actual_exit=exit_punch.time,
            entry_adjusted=entry.adjusted,
            exit_adjusted=exit_punch.adjusted,
            entry_status=entry_status,
            exit_status=exit_status,
        )

    def assemble_batch(
        self,
        rows: Iterable[RawRow],
        tolerances: ToleranceConfig,
        *,
        owner_id: str,
    ) -> list[AttendanceRecord]:
        return [self.assemble(row, tolerances, owner_id=owner_id) for row in rows]
