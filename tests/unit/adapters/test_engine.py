"""Unit tests for `vfscts.adapters.db.engine`."""

from __future__ import annotations

import pytest
from sqlalchemy import text

from vfscts.adapters.db.engine import is_sqlite, is_sqlite_memory, make_engine


@pytest.mark.parametrize(
    ("url", "sqlite", "memory"),
    [
        ("sqlite://", True, True),
        ("sqlite+pysqlite:///:memory:", True, True),
        ("sqlite:///vfs.db", True, False),
        ("postgresql+psycopg://u:p@localhost/vfs", False, False),
    ],
)
def test_url_classification(url, sqlite, memory):
    assert is_sqlite(url) is sqlite
    assert is_sqlite_memory(url) is memory


def test_sqlite_file_uses_wal(sqlite_url_file: str):
    engine = make_engine(sqlite_url_file)
    try:
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    finally:
        engine.dispose()


def test_sqlite_memory_skips_wal():
    engine = make_engine("sqlite+pysqlite:///:memory:")
    try:
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "memory"
    finally:
        engine.dispose()
