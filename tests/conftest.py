"""Global pytest fixtures for VFS-CTS."""

from __future__ import annotations

import pytest

from vfscts.interfaces import AbstractFileSystem

pytest_plugins = [
    "tests.fixtures.backends",
    "tests.fixtures.sqlite",
]


# Helper to route to an existing filesystem fixture by name
@pytest.fixture
def filesystem(request: pytest.FixtureRequest) -> AbstractFileSystem:
    """Indirection fixture to parametrize over filesystem-providing fixtures.

    Example:
        ```py
        @pytest.mark.parametrize("filesystem", ["memory_fs", "sql_fs"], indirect=True)
        def test_something(filesystem): ...
        ```
    """
    return request.getfixturevalue(request.param)
