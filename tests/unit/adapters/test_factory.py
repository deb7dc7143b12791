"""Unit tests for backend selection."""

from __future__ import annotations

from pathlib import Path

import pytest

from vfscts.adapters.filesystem import (
    BackendName,
    LocalFileSystem,
    MemoryFileSystem,
    SqlAlchemyFileSystem,
    UnknownBackendError,
    make_filesystem,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("memory", BackendName.MEMORY),
        (" MEM ", BackendName.MEMORY),
        ("in-memory", BackendName.MEMORY),
        ("local", BackendName.LOCAL),
        ("disk", BackendName.LOCAL),
        ("sql", BackendName.SQL),
        ("SQLAlchemy", BackendName.SQL),
        ("db", BackendName.SQL),
    ],
)
def test_from_string(raw, expected):
    assert BackendName.from_string(raw) is expected


@pytest.mark.parametrize("raw", ["", "ftp", "s3"])
def test_from_string_unknown(raw):
    with pytest.raises(UnknownBackendError):
        BackendName.from_string(raw)


def test_make_memory():
    assert isinstance(make_filesystem("memory"), MemoryFileSystem)


def test_make_local(tmp_path: Path):
    fs = make_filesystem(BackendName.LOCAL, root=tmp_path / "r")
    assert isinstance(fs, LocalFileSystem)
    assert (tmp_path / "r").is_dir()


def test_make_sql(sqlite_url_file: str):
    fs = make_filesystem("sql", db_url=sqlite_url_file)
    try:
        assert isinstance(fs, SqlAlchemyFileSystem)
    finally:
        fs.close()


@pytest.mark.parametrize("backend", ["local", "sql"])
def test_missing_target_raises(backend):
    with pytest.raises(ValueError):
        make_filesystem(backend)
