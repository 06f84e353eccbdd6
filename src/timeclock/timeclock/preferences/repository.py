from __future__ import annotations

from typing import Optional, Protocol

from .model import Preferences


class PreferencesRepository(Protocol):
    def get(self, owner_id: str) -> Optional[Preferences]:
        raise NotImplementedError

    def save(self, owner_id: str, preferences: Preferences) -> None:
        raise NotImplementedError

    def delete(self, owner_id: str) -> bool:
        raise NotImplementedError
