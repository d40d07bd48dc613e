"""Shared pytest fixtures for selectQL unit and integration tests."""
from __future__ import annotations

import sqlite3

import pytest

from selectql.dialect import MariaDBDialect, PostgresDialect
from tests.fixtures import load_ddl

EMPLOYEES = [
    (1, 1, "Ada", "active", 36, 120000.0),
    (2, 1, "Grace", "active", 45, 135000.0),
    (3, 2, "Linus", "inactive", 28, 90000.0),
    (4, 2, "Barbara", "active", 52, 150000.0),
    (5, None, "Ken", "active", 61, 99000.0),
]


@pytest.fixture(scope="session")
def pg() -> PostgresDialect:
    return PostgresDialect()


@pytest.fixture(scope="session")
def maria() -> MariaDBDialect:
    return MariaDBDialect()


@pytest.fixture()
def db() -> sqlite3.Connection:
    """In-memory SQLite database seeded with departments and employees."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.executescript(load_ddl())
    conn.executemany(
        "INSERT INTO departments VALUES (?,?)",
        [(1, "Engineering"), (2, "Research")],
    )
    conn.executemany("INSERT INTO employees VALUES (?,?,?,?,?,?)", EMPLOYEES)
    yield conn
    conn.close()
