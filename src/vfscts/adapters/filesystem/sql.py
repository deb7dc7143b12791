"""SQLAlchemy-backed VFS backend.

Stores the whole tree in the `vfs_resource` table (see `schema`), one row per
file or directory, with file content in a binary column. Every operation runs
in its own transaction, so multi-row changes (rename of a subtree, delete,
implicit parent creation) are atomic.

This backend deliberately does **not** support attribute writes:
`write_attrs` raises `UnsupportedOperationError`, the coarse capability error
the contract allows.

Usage:
    fs = SqlAlchemyFileSystem.from_url("sqlite+pysqlite:///vfs.db")
    fs.write_all("/a.bin", b"data")

Exceptions:
    SQLAlchemy `DBAPIError`s are mapped to `VfsIOError` (original chained).
"""

from __future__ import annotations

import contextlib
import io
import logging
from collections.abc import Iterator, Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, insert, select
from sqlalchemy import delete as sql_delete
from sqlalchemy import update as sql_update
from sqlalchemy.exc import DBAPIError

from vfscts.adapters.db import metadata as db_metadata
from vfscts.adapters.db.engine import make_engine
from vfscts.interfaces import (
    AbstractFileSystem,
    AbstractWriter,
    Path,
    PathLike,
    ResourceInfo,
    ResourceNotFoundError,
    UnsupportedOperationError,
    VfsIOError,
    scan_attrs,
)
from vfscts.interfaces.resources import DIR_MODE, FILE_MODE

from .cursor import IteratorDirCursor
from .schema import vfs_resource

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

__all__ = ["SqlAlchemyFileSystem"]

logger = logging.getLogger(__name__)

EMPTY = b""

_ROOT_ROW: Mapping[str, Any] = {
    "path": "/",
    "name": "",
    "is_dir": True,
    "size": 0,
    "mod_time": None,
    "content": None,
}


@contextlib.contextmanager
def _translate_db_errors(path: Path) -> Iterator[None]:
    try:
        yield
    except DBAPIError as e:
        raise VfsIOError(f"database error ({path}): {e.orig or e}", path) from e


def _subtree(path: Path):
    """SQL filter matching ``path`` and everything below it."""
    col = vfs_resource.c.path
    if path.is_root:
        return col.is_not(None)
    # exact, case-sensitive prefix match (no LIKE wildcards)
    prefix = f"{path}/"
    return (col == str(path)) | (func.substr(col, 1, len(prefix)) == prefix)


class SqlAlchemyFileSystem(AbstractFileSystem):
    """`AbstractFileSystem` persisted in a relational database.

    Args:
        engine: SQLAlchemy engine to use.
        owns_engine: If True, `close()` disposes the engine's connection pool.
            The filesystem remains usable afterwards (the pool reconnects).
        create_schema: If True, create the `vfs_resource` table if missing.
    """

    def __init__(
        self, engine: Engine, *, owns_engine: bool = False, create_schema: bool = True
    ) -> None:
        self._engine = engine
        self._owns_engine = owns_engine
        if create_schema:
            with _translate_db_errors(Path("/")):
                db_metadata.create_schema(engine)

    @classmethod
    def from_url(cls, url: str, *, echo: bool = False) -> SqlAlchemyFileSystem:
        """Build a filesystem (and engine) for ``url``; the engine is owned."""
        return cls(make_engine(url, echo=echo), owns_engine=True)

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def open_write(self, path: PathLike) -> AbstractWriter:
        p = Path(path)
        if p.is_root:
            raise VfsIOError("cannot write to the root directory", p)
        with self._transaction(p) as conn:
            row = self._fetch(conn, p)
            if row is not None and row["is_dir"]:
                raise VfsIOError(f"is a directory: {p}", p)
            self._ensure_dirs(conn, p.parent)
        return _SqlWriter(self, p)

    def open_read(self, path: PathLike) -> io.BytesIO:
        p = Path(path)
        with self._transaction(p) as conn:
            row = self._require(conn, p)
        if row["is_dir"]:
            raise VfsIOError(f"is a directory: {p}", p)
        return io.BytesIO(row["content"] or EMPTY)

    def stat(self, path: PathLike) -> ResourceInfo:
        p = Path(path)
        with self._transaction(p) as conn:
            return self._info(self._require(conn, p))

    def delete(self, path: PathLike) -> None:
        p = Path(path)
        with self._transaction(p) as conn:
            result = conn.execute(sql_delete(vfs_resource).where(_subtree(p)))
        logger.debug("Deleted %s row(s) under %s", result.rowcount, p)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        s, d = Path(src), Path(dst)
        with self._transaction(s) as conn:
            self._require(conn, s)
            if s == d:
                return
            if s.is_root or d.is_within(s) or s.is_within(d):
                raise VfsIOError(f"cannot move {s} to {d}", s)
            self._ensure_dirs(conn, d.parent)
            conn.execute(sql_delete(vfs_resource).where(_subtree(d)))
            moved = conn.execute(
                select(vfs_resource.c.path).where(_subtree(s))
            ).scalars().all()
            for old in moved:
                new = d.child("/".join(Path(old).relative_to(s)))
                conn.execute(
                    sql_update(vfs_resource)
                    .where(vfs_resource.c.path == old)
                    .values(path=str(new), parent=str(new.parent), name=new.name)
                )

    def mkdirs(self, path: PathLike) -> None:
        p = Path(path)
        with self._transaction(p) as conn:
            self._ensure_dirs(conn, p)

    def read_dir(self, path: PathLike) -> IteratorDirCursor:
        p = Path(path)
        with self._transaction(p) as conn:
            if not self._require(conn, p)["is_dir"]:
                raise VfsIOError(f"not a directory: {p}", p)
            rows = (
                conn.execute(
                    select(*self._meta_columns())
                    .where(vfs_resource.c.parent == str(p))
                    .order_by(vfs_resource.c.name.asc())
                )
                .mappings()
                .all()
            )
        return IteratorDirCursor(p, [self._info(row) for row in rows])

    def read_attrs(self, path: PathLike, target: object) -> None:
        p = Path(path)
        scan_attrs(self.stat(p), target, p)

    def write_attrs(self, path: PathLike, source: object) -> None:
        raise UnsupportedOperationError("write_attrs", Path(path))

    def close(self) -> None:
        if self._owns_engine:
            self._engine.dispose()
        logger.debug("SqlAlchemyFileSystem closed (engine disposed=%s)", self._owns_engine)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @contextlib.contextmanager
    def _transaction(self, path: Path) -> Iterator[Connection]:
        with _translate_db_errors(path), self._engine.begin() as conn:
            yield conn

    @staticmethod
    def _meta_columns():
        c = vfs_resource.c
        return (c.path, c.name, c.is_dir, c.size, c.mod_time)

    def _fetch(self, conn: Connection, path: Path) -> Mapping[str, Any] | None:
        if path.is_root:
            return _ROOT_ROW
        return (
            conn.execute(
                select(*self._meta_columns(), vfs_resource.c.content).where(
                    vfs_resource.c.path == str(path)
                )
            )
            .mappings()
            .one_or_none()
        )

    def _require(self, conn: Connection, path: Path) -> Mapping[str, Any]:
        if (row := self._fetch(conn, path)) is None:
            raise ResourceNotFoundError(path)
        return row

    def _ensure_dirs(self, conn: Connection, path: Path) -> None:
        current = Path("/")
        for segment in path.segments:
            current = current.child(segment)
            row = self._fetch(conn, current)
            if row is None:
                conn.execute(
                    insert(vfs_resource).values(
                        path=str(current),
                        parent=str(current.parent),
                        name=current.name,
                        is_dir=True,
                        size=0,
                        content=None,
                        mod_time=datetime.now(timezone.utc),
                    )
                )
            elif not row["is_dir"]:
                raise VfsIOError(f"not a directory: {current}", current)

    def _install(self, path: Path, data: bytes) -> None:
        with self._transaction(path) as conn:
            self._ensure_dirs(conn, path.parent)
            row = self._fetch(conn, path)
            if row is not None and row["is_dir"]:
                raise VfsIOError(f"is a directory: {path}", path)
            conn.execute(sql_delete(vfs_resource).where(vfs_resource.c.path == str(path)))
            conn.execute(
                insert(vfs_resource).values(
                    path=str(path),
                    parent=str(path.parent),
                    name=path.name,
                    is_dir=False,
                    size=len(data),
                    content=data,
                    mod_time=datetime.now(timezone.utc),
                )
            )

    @staticmethod
    def _info(row: Mapping[str, Any]) -> ResourceInfo:
        return ResourceInfo(
            name=row["name"],
            size=row["size"],
            mode=DIR_MODE if row["is_dir"] else FILE_MODE,
            mod_time=row["mod_time"],
        )


class _SqlWriter(AbstractWriter):
    """Stages bytes in RAM and inserts the row on close."""

    def __init__(self, fs: SqlAlchemyFileSystem, path: Path) -> None:
        self._fs = fs
        self._path = path
        self._buffer = bytearray()
        self._closed = False

    def write(self, data: bytes) -> int:
        if self._closed:
            raise ValueError(f"writer for {self._path} is closed")
        self._buffer.extend(data)
        return len(data)

    def abort(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._buffer.clear()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._fs._install(self._path, bytes(self._buffer))  # pylint: disable=protected-access
        self._buffer.clear()
