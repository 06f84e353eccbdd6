from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import normalize_clock_time

_SCHEDULE_TIME_RE = re.compile(r"(\d{1,2}:\d{2})")


@dataclass(frozen=True)
class ContractualSchedule:
    entry: Optional[str] = None
    exit: Optional[str] = None


NO_SCHEDULE = ContractualSchedule()


def parse_contractual_schedule(text: Optional[str]) -> ContractualSchedule:
    """Extract contractual entry/exit from free text like "08:00 - 12:00 - 13:00 - 17:00".

    Entry is the first HH:MM found and exit the last one. A schedule holding a
    single time yields entry == exit.
    """
    if not text or not isinstance(text, str):
        return NO_SCHEDULE

    matches = _SCHEDULE_TIME_RE.findall(text)
    if not matches:
        return NO_SCHEDULE

    return ContractualSchedule(
        entry=normalize_clock_time(matches[0]),
        exit=normalize_clock_time(matches[-1]),
    )
