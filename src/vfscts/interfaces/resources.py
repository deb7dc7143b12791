"""Metadata and option DTOs shared by the VFS contract."""

from __future__ import annotations

import stat as stat_module
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from .path import Path

DIR_MODE = stat_module.S_IFDIR | 0o755
FILE_MODE = stat_module.S_IFREG | 0o644

ScanCallback = Callable[[Path, int, int], None]
CopiedCallback = Callable[[Path, int, int], None]
ProgressCallback = Callable[[Path, Path, int, int], None]


@dataclass
class ResourceInfo:
    """Metadata of a file or directory.

    Intentionally mutable: it is the canonical *target* for
    `AbstractFileSystem.read_attrs` and `AbstractDirCursor.scan`, which fill it
    in place.

    Attributes:
        name: Last path segment ("" for the root).
        size: Content length in bytes (0 for directories).
        mode: POSIX ``st_mode`` bits (type and permissions).
        mod_time: Last modification time, if the backend tracks it.
    """

    name: str = ""
    size: int = 0
    mode: int = FILE_MODE
    mod_time: datetime | None = None

    @property
    def is_dir(self) -> bool:
        return stat_module.S_ISDIR(self.mode)

    @property
    def is_file(self) -> bool:
        return stat_module.S_ISREG(self.mode)


@dataclass(frozen=True)
class DirEntry:
    """A resource together with its full path, as returned by recursive listings."""

    path: Path
    resource: ResourceInfo


@dataclass(frozen=True)
class CopyOptions:
    """Optional progress callbacks for `copy`.

    Every callback is independently optional; a missing callback is simply not
    invoked.

    Attributes:
        on_scan: ``(path, objects_so_far, bytes_so_far)`` while enumerating the source.
        on_copied: ``(path, objects_transferred, bytes_transferred)`` after each object.
        on_progress: ``(src, dst, bytes_so_far, total_size)`` during a single transfer.
        chunk_size: Bytes copied between two ``on_progress`` calls; must be positive.
    """

    on_scan: ScanCallback | None = None
    on_copied: CopiedCallback | None = None
    on_progress: ProgressCallback | None = None
    chunk_size: int = field(default=64 * 1024)

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
