from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import PUNCH_DATE_FORMAT

# 0..23 : 00..59 with optional :00..59 seconds
CLOCK_TIME_RE = re.compile(r"^([0-1]?[0-9]|2[0-3]):([0-5][0-9])(:([0-5][0-9]))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_punch_date(value: Optional[str]) -> Optional[date]:
    """Parse a DD/MM/YYYY string; None when missing or invalid."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), PUNCH_DATE_FORMAT).date()
    except ValueError:
        return None


def normalize_clock_time(value: Optional[str]) -> Optional[str]:
    """Validate a clock time and render it as zero-padded HH:MM.

    Seconds are accepted but dropped. Anything else yields None.
    """
    if not value:
        return None
    m = CLOCK_TIME_RE.match(value.strip())
    if not m:
        return None
    return f"{int(m.group(1)):02d}:{m.group(2)}"


def clock_minutes(value: str) -> int:
    """Minutes since midnight of an HH:MM string."""
    hours, minutes = value.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def day_of_week(value: date) -> int:
    """Sunday=0 ... Saturday=6."""
    return value.isoweekday() % 7


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
