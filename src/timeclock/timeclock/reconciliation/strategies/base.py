from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import PunchStatus
from ..punch_extractor import PunchTime


@dataclass(frozen=True)
class StatusDecision:
    status: Optional[PunchStatus]
    diff_minutes: Optional[int] = None


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a punch status."""

    @abstractmethod
    def decide(self, *, contractual: Optional[str], actual: PunchTime, tolerance_minutes: int) -> StatusDecision:
        raise NotImplementedError
