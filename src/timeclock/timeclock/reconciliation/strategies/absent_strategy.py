from __future__ import annotations

from typing import Optional

from ..punch_extractor import PunchTime
from .base import StatusDecision, StatusStrategy


class AbsentStrategy(StatusStrategy):
    """Nothing to compare (no actual or no contractual time)."""

    def decide(self, *, contractual: Optional[str], actual: PunchTime, tolerance_minutes: int) -> StatusDecision:
        return StatusDecision(status=None)
