from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import PersistenceError
from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import transaction
from ..subjects.model import Profile
from .codec import decode_profile, encode_profile
from .repository import ProfileRepository

_SELECT_PAYLOAD = f"SELECT payload FROM {KV_TABLE} WHERE storage_key=%s"
_UPSERT_PAYLOAD = (
    f"INSERT INTO {KV_TABLE} (storage_key, payload) VALUES (%s, %s) "
    "ON DUPLICATE KEY UPDATE payload=VALUES(payload)"
)


class MySQLProfileRepository(ProfileRepository):
    """Stores the profile blob as one row of the key-value table."""

    def __init__(self, conn_factory: DatabaseConnection, key: str = DEFAULT_STORAGE_KEY):
        self._conn_factory = conn_factory
        self._key = key

    def load(self) -> Optional[Profile]:
        try:
            with transaction(self._conn_factory) as cur:
                cur.execute(_SELECT_PAYLOAD, (self._key,))
                row = cur.fetchone()
        except (mysql.connector.Error, ValueError) as exc:
            raise PersistenceError(f"Cannot read stored profile '{self._key}'") from exc

        if not row:
            return None
        return decode_profile(row["payload"])

    def save(self, profile: Profile) -> None:
        try:
            with transaction(self._conn_factory) as cur:
                cur.execute(_UPSERT_PAYLOAD, (self._key, encode_profile(profile)))
        except (mysql.connector.Error, ValueError) as exc:
            raise PersistenceError(f"Cannot write stored profile '{self._key}'") from exc
