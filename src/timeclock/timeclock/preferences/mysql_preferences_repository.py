from __future__ import annotations

import json
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Preferences
from .repository import PreferencesRepository


class MySQLPreferencesRepository(PreferencesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, owner_id: str) -> Optional[Preferences]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT document FROM user_preferences WHERE owner_id=%s", (owner_id,))
            r = fetchone(cur)
            if not r:
                return None
            return Preferences.from_document(json.loads(r["document"]))

    def save(self, owner_id: str, preferences: Preferences) -> None:
        document = json.dumps(preferences.to_document(), ensure_ascii=False)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_preferences(owner_id, document)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE document=VALUES(document)
                """,
                (owner_id, document),
            )

    def delete(self, owner_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_preferences WHERE owner_id=%s", (owner_id,))
            return cur.rowcount > 0
