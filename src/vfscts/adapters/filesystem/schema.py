"""Resource table used by the SQLAlchemy-backed filesystem.

One row per file or directory. The root `/` is implicit and never stored;
top-level resources have ``parent = "/"``.

| Constraint            | Purpose                                   |
|-----------------------|-------------------------------------------|
| PK(path)              | one resource per normalized path          |
| CHECK(size >= 0)      | sane sizes                                |
| INDEX(parent, name)   | sorted directory listings                 |
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Index,
    LargeBinary,
    String,
    Table,
)

from vfscts.adapters.db.metadata import metadata
from vfscts.adapters.db.sa_types import UTCDateTime

__all__ = ["vfs_resource"]

MAX_PATH_LENGTH = 1024
MAX_NAME_LENGTH = 255

vfs_resource = Table(
    "vfs_resource",
    metadata,
    Column(
        "path",
        String(MAX_PATH_LENGTH),
        primary_key=True,
        comment="Normalized absolute VFS path (e.g. /a/b.bin).",
    ),
    Column(
        "parent",
        String(MAX_PATH_LENGTH),
        nullable=False,
        comment="Normalized path of the containing directory.",
    ),
    Column(
        "name",
        String(MAX_NAME_LENGTH),
        nullable=False,
        comment="Last path segment.",
    ),
    Column("is_dir", Boolean, nullable=False, comment="True for directories."),
    Column(
        "size",
        BigInteger,
        nullable=False,
        default=0,
        comment="Content length in bytes (0 for directories).",
    ),
    Column(
        "content",
        LargeBinary,
        nullable=True,
        comment="File content; NULL for directories.",
    ),
    Column(
        "mod_time",
        UTCDateTime(),
        nullable=False,
        comment="Last modification time (UTC).",
    ),
    CheckConstraint("size >= 0", name="non_negative_size"),
    Index(None, "parent", "name"),
    comment="VFS resources, one row per file or directory.",
)
