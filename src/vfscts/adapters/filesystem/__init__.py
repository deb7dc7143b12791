"""Reference `AbstractFileSystem` backends.

- `MemoryFileSystem`: non-durable, RAM-only tree (tests, examples).
- `LocalFileSystem`: a directory on the local disk acts as the root.
- `SqlAlchemyFileSystem`: one table row per resource in any SQLAlchemy database.

Use `make_filesystem` to build one by name.
"""

from .factory import BackendName, UnknownBackendError, make_filesystem
from .local import LocalFileSystem
from .memory import MemoryFileSystem
from .sql import SqlAlchemyFileSystem

__all__ = [
    "BackendName",
    "LocalFileSystem",
    "MemoryFileSystem",
    "SqlAlchemyFileSystem",
    "UnknownBackendError",
    "make_filesystem",
]
