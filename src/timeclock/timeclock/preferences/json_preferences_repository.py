from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..database.json_store import JsonDocumentStore
from .model import Preferences
from .repository import PreferencesRepository


class JsonPreferencesRepository(PreferencesRepository):
    def __init__(self, path: str | Path):
        self._store = JsonDocumentStore(path, default={})

    def get(self, owner_id: str) -> Optional[Preferences]:
        doc = self._store.read().get(owner_id)
        return Preferences.from_document(doc) if doc is not None else None

    def save(self, owner_id: str, preferences: Preferences) -> None:
        def _put(data: dict) -> None:
            data[owner_id] = preferences.to_document()

        self._store.update(_put)

    def delete(self, owner_id: str) -> bool:
        return self._store.update(lambda data: data.pop(owner_id, None) is not None)
