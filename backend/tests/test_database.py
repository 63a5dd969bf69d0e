"""Tests for engine setup, startup connectivity and schema initialization."""

import pytest
from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from database import make_engine, wait_for_database
from exceptions import DatabaseConnectionError
from init_db import init_database


class _FlakyConnection:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, statement):
        return None


class _FlakyEngine:
    """Engine double that refuses the first ``failures`` connections"""

    def __init__(self, failures):
        self.failures = failures
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        return _FlakyConnection()


def test_wait_for_database_first_attempt(engine):
    sleeps = []

    assert wait_for_database(engine, max_retries=3, delay=1, sleep=sleeps.append) == 1
    assert sleeps == []


def test_wait_for_database_retries_until_available():
    target = _FlakyEngine(failures=2)
    sleeps = []

    attempt = wait_for_database(target, max_retries=5, delay=3, sleep=sleeps.append)

    assert attempt == 3
    assert sleeps == [3, 3]


def test_wait_for_database_gives_up():
    target = _FlakyEngine(failures=10)
    sleeps = []

    with pytest.raises(DatabaseConnectionError) as exc_info:
        wait_for_database(target, max_retries=4, delay=2, sleep=sleeps.append)

    assert exc_info.value.attempts == 4
    assert target.attempts == 4
    # No sleep after the last attempt
    assert sleeps == [2, 2, 2]


def test_sqlite_engine_enforces_foreign_keys(engine):
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1


def test_init_database_creates_tables():
    target = make_engine("sqlite://", poolclass=StaticPool)

    init_database(target)

    tables = set(inspect(target).get_table_names())
    assert {"areas", "personas"} <= tables
    target.dispose()


def test_init_database_adds_missing_soft_delete_columns():
    target = make_engine("sqlite://", poolclass=StaticPool)
    with target.begin() as conn:
        conn.execute(text("CREATE TABLE areas (id INTEGER PRIMARY KEY, nombre VARCHAR(100) NOT NULL)"))
        conn.execute(text(
            "CREATE TABLE personas (id INTEGER PRIMARY KEY, nombre VARCHAR(200) NOT NULL, "
            "email VARCHAR(200) NOT NULL, area_id INTEGER NOT NULL REFERENCES areas(id))"
        ))

    applied = init_database(target)

    columns = {c["name"] for c in inspect(target).get_columns("areas")}
    assert {"descripcion", "deleted_at"} <= columns
    assert "deleted_at" in {c["name"] for c in inspect(target).get_columns("personas")}
    assert applied >= 3
    target.dispose()
