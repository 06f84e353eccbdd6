from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..core.enums import PunchStatus
from .punch_extractor import EMPTY_PUNCH, PunchTime, extract_punch

SUNDAY = 0
SATURDAY = 6


@dataclass(frozen=True)
class ExitSelection:
    punch: PunchTime = EMPTY_PUNCH
    forced_status: Optional[PunchStatus] = None


NO_EXIT = ExitSelection()


def _field(punches: Sequence[Optional[str]], n: int) -> Optional[str]:
    # n is 1-based, as labelled in the export
    return punches[n - 1] if len(punches) >= n else None


def select_exit_punch(day: Optional[int], punches: Sequence[Optional[str]]) -> ExitSelection:
    """Pick the exit punch for a day of week (Sunday=0 ... Saturday=6).

    Saturday: punch 2, no fallback.
    Monday-Friday: punch 4; when empty, punch 2 forced to EARLY.
    Sunday or unknown day: no exit.
    """
    if day == SATURDAY:
        return ExitSelection(punch=extract_punch(_field(punches, 2)))

    if day is not None and 1 <= day <= 5:
        last = extract_punch(_field(punches, 4))
        if not last.is_empty:
            return ExitSelection(punch=last)

        intermediate = extract_punch(_field(punches, 2))
        if not intermediate.is_empty:
            return ExitSelection(punch=intermediate, forced_status=PunchStatus.EARLY)
        return NO_EXIT

    # TODO: Sunday exits have no rule yet; waiting on the product decision in DESIGN.md.
    return NO_EXIT
