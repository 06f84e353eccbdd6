from __future__ import annotations

import uuid
from datetime import datetime
from typing import Protocol

from .datetime_utils import now_local


class ClockProvider(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class IdProvider(Protocol):
    def new_id(self) -> str:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return now_local()


class UuidIdProvider:
    def new_id(self) -> str:
        return str(uuid.uuid4())
