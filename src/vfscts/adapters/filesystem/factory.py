"""Backend selection for the reference filesystems.

Centralizing backend names as an Enum avoids scattering string literals
("memory", "local", "sql") through the CLI, configuration and tests.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path as FsPath
from typing import TYPE_CHECKING

from .local import LocalFileSystem
from .memory import MemoryFileSystem
from .sql import SqlAlchemyFileSystem

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

logger = logging.getLogger(__name__)


class UnknownBackendError(ValueError):
    """Raised when a backend name cannot be mapped to a reference backend."""


class BackendName(str, Enum):
    """Names of the bundled reference backends.

    Attributes:
        MEMORY: `MemoryFileSystem` (``"memory"``).
        LOCAL:  `LocalFileSystem` (``"local"``).
        SQL:    `SqlAlchemyFileSystem` (``"sql"``).
    """

    MEMORY = "memory"
    LOCAL = "local"
    SQL = "sql"

    @classmethod
    def from_string(cls, name: str) -> BackendName:
        """Normalize and convert an arbitrary backend string to BackendName.

        Accepts common aliases (e.g. ``"mem"``, ``"disk"``, ``"sqlalchemy"``,
        ``"db"``), case-insensitively.

        Raises:
            UnknownBackendError: if the name is not recognized.
        """
        raw = (name or "").strip().lower()
        if raw in {"memory", "mem", "inmemory", "in-memory"}:
            return cls.MEMORY
        if raw in {"local", "disk", "fs", "file"}:
            return cls.LOCAL
        if raw in {"sql", "sqlalchemy", "db", "database"}:
            return cls.SQL
        raise UnknownBackendError(f"Unknown backend: {name!r}")


def make_filesystem(
    backend: str | BackendName,
    *,
    root: str | FsPath | None = None,
    db_url: str | None = None,
) -> AbstractFileSystem:
    """Construct a reference backend by name.

    Args:
        backend: Backend name or alias.
        root: Root directory (required for ``local``).
        db_url: SQLAlchemy URL (required for ``sql``).

    Returns:
        A fresh `AbstractFileSystem`.

    Raises:
        UnknownBackendError: If ``backend`` is unknown.
        ValueError: If a required argument for the backend is missing.
    """
    name = backend if isinstance(backend, BackendName) else BackendName.from_string(backend)
    logger.debug("Creating %s filesystem", name.value)

    match name:
        case BackendName.MEMORY:
            return MemoryFileSystem()
        case BackendName.LOCAL:
            if root is None:
                raise ValueError("the local backend requires a root directory")
            return LocalFileSystem(root)
        case BackendName.SQL:
            if not db_url:
                raise ValueError("the sql backend requires a database URL")
            return SqlAlchemyFileSystem.from_url(db_url)
    raise UnknownBackendError(f"Unknown backend: {backend!r}")  # pragma: no cover
