"""Configuration utilities for VFS-CTS.

Backends under test are configured from the environment so the CLI and CI
jobs can point the suite at a target without code changes.
"""

import os
from pathlib import Path

DB_URL_ENV = "VFSCTS_DB_URL"  # pragma: no mutate
LOCAL_ROOT_ENV = "VFSCTS_LOCAL_ROOT"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the VFSCTS_DB_URL environment variable is not set."""


class LocalRootNotSetError(Exception):
    """Raised when the VFSCTS_LOCAL_ROOT environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL for the ``sql`` backend from the environment.

    Returns:
        The value of the `VFSCTS_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `VFSCTS_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_local_root() -> Path:
    """Get the root directory for the ``local`` backend from the environment.

    Raises:
        LocalRootNotSetError: If `VFSCTS_LOCAL_ROOT` is not set.
    """
    if not (root := os.environ.get(LOCAL_ROOT_ENV)):
        raise LocalRootNotSetError
    return Path(root).expanduser()
