"""Pytest fixtures for filesystem contract tests.

Provided fixtures
-----------------
- **fs**: Parametrized over every reference backend; returns a **fresh**
  `AbstractFileSystem` per test. Add a backend by adding its key to ``params``
  and a branch to the ``match`` below.
- **payload**: Deterministic sample bytes for quick round-trips.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from vfscts.cts.datagen import generate_test_bytes

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem


@pytest.fixture(params=["memory", "local", "sql"])
def fs(request: pytest.FixtureRequest) -> AbstractFileSystem:
    """Return a fresh filesystem for the requested backend.

    Current params:
      - ``"memory"`` → `MemoryFileSystem`
      - ``"local"``  → `LocalFileSystem` rooted in ``tmp_path``
      - ``"sql"``    → `SqlAlchemyFileSystem` on a SQLite file
    """
    match request.param:
        case "memory":
            return request.getfixturevalue("memory_fs")
        case "local":
            return request.getfixturevalue("local_fs")
        case "sql":
            return request.getfixturevalue("sql_fs")
        case _:
            raise ValueError(f"unknown backend: {request.param}")


@pytest.fixture
def payload() -> bytes:
    """Deterministic 300-byte sample (wraps around once)."""
    return generate_test_bytes(300)
