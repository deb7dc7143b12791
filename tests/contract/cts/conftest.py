"""Pytest fixtures for running the full suite against every backend."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem


@pytest.fixture(params=["memory", "local", "sql"])
def fs(request: pytest.FixtureRequest) -> AbstractFileSystem:
    """Return a fresh reference backend (see ``tests/fixtures/backends.py``)."""
    match request.param:
        case "memory":
            return request.getfixturevalue("memory_fs")
        case "local":
            return request.getfixturevalue("local_fs")
        case "sql":
            return request.getfixturevalue("sql_fs")
        case _:
            raise ValueError(f"unknown backend: {request.param}")
