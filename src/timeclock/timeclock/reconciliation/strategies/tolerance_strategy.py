from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import clock_minutes
from ...core.enums import PunchStatus
from ..punch_extractor import PunchTime
from .base import StatusDecision, StatusStrategy


class ToleranceStrategy(StatusStrategy):
    """Compare actual vs contractual wall-clock time; the tolerance bound is inclusive."""

    def decide(self, *, contractual: Optional[str], actual: PunchTime, tolerance_minutes: int) -> StatusDecision:
        diff = clock_minutes(actual.time) - clock_minutes(contractual)
        tolerance = max(int(tolerance_minutes), 0)

        if diff > tolerance:
            status = PunchStatus.LATE
        elif diff < -tolerance:
            status = PunchStatus.EARLY
        else:
            status = PunchStatus.ON_TIME
        return StatusDecision(status=status, diff_minutes=diff)
