from __future__ import annotations

from typing import Optional

from ...core.enums import PunchStatus
from ..punch_extractor import PunchTime
from .base import StatusDecision, StatusStrategy


class ForcedEarlyStrategy(StatusStrategy):
    """Weekday exit taken from an intermediate punch: early by policy, no time math."""

    def decide(self, *, contractual: Optional[str], actual: PunchTime, tolerance_minutes: int) -> StatusDecision:
        return StatusDecision(status=PunchStatus.EARLY)
