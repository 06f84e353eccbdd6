from __future__ import annotations

from typing import Optional

from ...core.enums import PunchStatus
from ..punch_extractor import PunchTime
from .base import StatusDecision, StatusStrategy


class AdjustedStrategy(StatusStrategy):
    """Manually adjusted punch."""

    def decide(self, *, contractual: Optional[str], actual: PunchTime, tolerance_minutes: int) -> StatusDecision:
        return StatusDecision(status=PunchStatus.ADJUSTED)
