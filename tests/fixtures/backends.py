"""Fixtures providing fresh reference filesystems."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from vfscts.adapters.filesystem import (
    LocalFileSystem,
    MemoryFileSystem,
    SqlAlchemyFileSystem,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# pylint: disable=redefined-outer-name


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    """A fresh in-memory filesystem."""
    return MemoryFileSystem()


@pytest.fixture
def local_root(tmp_path: Path) -> Path:
    """Directory used as the root of `local_fs`."""
    return tmp_path / "vfs-root"


@pytest.fixture
def local_fs(local_root: Path) -> LocalFileSystem:
    """A local-directory filesystem rooted in the test's temp dir."""
    return LocalFileSystem(local_root)


@pytest.fixture
def sql_fs(sqlite_engine_file: Engine) -> Iterator[SqlAlchemyFileSystem]:
    """A SQL filesystem on a fresh SQLite file database."""
    fs = SqlAlchemyFileSystem(sqlite_engine_file)
    yield fs
    fs.close()
