from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PunchStatus
from .punch_extractor import PunchTime
from .strategies.absent_strategy import AbsentStrategy
from .strategies.adjusted_strategy import AdjustedStrategy
from .strategies.base import StatusStrategy
from .strategies.early_strategy import ForcedEarlyStrategy
from .strategies.tolerance_strategy import ToleranceStrategy


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_punch(
        self,
        *,
        contractual: Optional[str],
        actual: PunchTime,
        forced_status: Optional[PunchStatus] = None,
    ) -> StatusStrategy:
        if actual.is_empty:
            return AbsentStrategy()
        if forced_status == PunchStatus.EARLY:
            return ForcedEarlyStrategy()
        if actual.adjusted:
            return AdjustedStrategy()
        if not contractual:
            return AbsentStrategy()
        return ToleranceStrategy()
