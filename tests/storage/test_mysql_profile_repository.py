from __future__ import annotations

import mysql.connector
import pytest

from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.storage.mysql_profile_repository import MySQLProfileRepository
from attendance_tracker.subjects.model import Profile, Subject


class FakeCursor:
    def __init__(self, db: "FakeKVDatabase"):
        self._db = db
        self._result = None

    def execute(self, sql, params=()):
        if self._db.fail:
            raise mysql.connector.Error(msg="connection lost")
        statement = " ".join(sql.split()).upper()
        if statement.startswith("SELECT"):
            key = params[0]
            self._result = {"payload": self._db.rows[key]} if key in self._db.rows else None
        elif statement.startswith("INSERT"):
            key, payload = params
            self._db.pending[key] = payload

    def fetchone(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, db: "FakeKVDatabase"):
        self._db = db

    def cursor(self, dictionary=False):
        return FakeCursor(self._db)

    def commit(self):
        self._db.rows.update(self._db.pending)
        self._db.pending.clear()

    def rollback(self):
        self._db.pending.clear()

    def close(self):
        pass


class FakeKVDatabase:
    """Stands in for DatabaseConnection: connect() returns a fake connection."""

    def __init__(self):
        self.rows: dict[str, str] = {}
        self.pending: dict[str, str] = {}
        self.fail = False

    def connect(self, *, with_database: bool = True):
        return FakeConnection(self)


def test_load_missing_key_returns_none():
    repo = MySQLProfileRepository(FakeKVDatabase())

    assert repo.load() is None


def test_save_then_load_round_trip():
    db = FakeKVDatabase()
    repo = MySQLProfileRepository(db, key="@attendance_data")
    profile = Profile(name="Alex", subjects=(Subject("Math", 3, 1),))

    repo.save(profile)

    assert set(db.rows) == {"@attendance_data"}
    assert repo.load() == profile


def test_driver_errors_become_persistence_errors():
    db = FakeKVDatabase()
    repo = MySQLProfileRepository(db)
    db.fail = True

    with pytest.raises(PersistenceError):
        repo.save(Profile(name="Alex"))
    with pytest.raises(PersistenceError):
        repo.load()
    assert db.rows == {}


def test_corrupt_row_raises_persistence_error():
    db = FakeKVDatabase()
    db.rows["@attendance_data"] = "not json"

    with pytest.raises(PersistenceError):
        MySQLProfileRepository(db).load()
