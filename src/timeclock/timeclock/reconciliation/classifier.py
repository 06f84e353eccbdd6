from __future__ import annotations

from typing import Optional

from ..core.enums import PunchStatus
from .factory import StatusStrategyFactory
from .punch_extractor import PunchTime

_default_factory = StatusStrategyFactory()


def classify(
    contractual: Optional[str],
    actual: PunchTime,
    tolerance_minutes: int,
    *,
    forced_status: Optional[PunchStatus] = None,
    factory: Optional[StatusStrategyFactory] = None,
) -> Optional[PunchStatus]:
    factory = factory or _default_factory
    strategy = factory.for_punch(contractual=contractual, actual=actual, forced_status=forced_status)
    return strategy.decide(contractual=contractual, actual=actual, tolerance_minutes=tolerance_minutes).status
