from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import normalize_clock_time
from ..core.constants import ADJUSTMENT_MARKER


@dataclass(frozen=True)
class PunchTime:
    """Hora de uma batida (HH:MM) e se ela foi ajustada manualmente."""

    time: Optional[str] = None
    adjusted: bool = False

    @property
    def is_empty(self) -> bool:
        return self.time is None

    @property
    def display(self) -> Optional[str]:
        if self.time is None:
            return None
        return f"{self.time}{ADJUSTMENT_MARKER}" if self.adjusted else self.time


EMPTY_PUNCH = PunchTime()


def _tokens(value: Optional[str]) -> list[str]:
    if not value or not isinstance(value, str):
        return []
    return value.split()


def punch_date_token(value: Optional[str]) -> Optional[str]:
    """Date part ("DD/MM/YYYY") of a raw punch field, if any."""
    tokens = _tokens(value)
    return tokens[0] if tokens else None


def extract_punch(value: Optional[str]) -> PunchTime:
    """Extract the clock time of a "DD/MM/YYYY HH:MM[*]" punch field.

    Malformed values give EMPTY_PUNCH instead of raising.
    """
    tokens = _tokens(value)
    if len(tokens) < 2:
        return EMPTY_PUNCH

    candidate = tokens[-1]
    adjusted = candidate.endswith(ADJUSTMENT_MARKER)
    if adjusted:
        candidate = candidate[: -len(ADJUSTMENT_MARKER)]

    time_value = normalize_clock_time(candidate)
    if time_value is None:
        return EMPTY_PUNCH
    return PunchTime(time=time_value, adjusted=adjusted)
