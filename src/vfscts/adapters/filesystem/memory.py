"""In-memory VFS backend.

This module provides a tiny, dependency-free filesystem meant for **tests**,
examples, and as the reference implementation the conformance suite is
validated against. The whole tree lives in RAM; there is no persistence
across process restarts.

Exports
-------
- MemoryFileSystem: Concrete `AbstractFileSystem` backed by a path-keyed dict.

Key behaviors
-------------
- **Flat index**: every resource (file or directory) is a `_Node` keyed by its
  normalized `Path`; the root `/` always exists.
- **Writer semantics**: bytes are staged in a buffer and installed atomically
  on `close()`; parent directories are created when the writer is opened.
- **Rename** moves a whole subtree and replaces an existing destination.
- **Attributes**: `write_attrs` updates `mod_time`; other fields are derived
  and read-only.
- **Thread-safety**: all mutations and lookups happen under an `RLock`.
- **close()** is a no-op; the filesystem stays usable.

Typical usage
-------------
    fs = MemoryFileSystem()
    fs.write_all("/x/5.bin", bytes(range(5)))
    assert fs.stat("/x/5.bin").size == 5
"""

from __future__ import annotations

import io
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from vfscts.interfaces import (
    AbstractFileSystem,
    AbstractWriter,
    Path,
    PathLike,
    ResourceInfo,
    ResourceNotFoundError,
    VfsIOError,
    extract_attrs,
    scan_attrs,
)
from vfscts.interfaces.resources import DIR_MODE, FILE_MODE

from .cursor import IteratorDirCursor

__all__ = ["MemoryFileSystem"]

logger = logging.getLogger(__name__)

ROOT = Path("/")


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class _Node:
    is_dir: bool
    data: bytes = b""
    mod_time: datetime = field(default_factory=_now)


class MemoryFileSystem(AbstractFileSystem):
    """In-memory `AbstractFileSystem`.

    Semantics
    ---------
    - `open_write(path)`: returns a staging writer; content becomes visible
      on `close()`. Writing to the root or onto a directory raises `VfsIOError`.
    - `open_read(path) → io.BytesIO`: snapshot of the content at call time;
      the **caller** must close it.
    - `delete(path)`: recursive and idempotent; deleting `/` empties the tree.
    - `rename(src, dst)`: requires `src`; replaces `dst`.

    Example
    -------
        fs = MemoryFileSystem()
        with fs.open_write("/a/b.bin") as w:
            w.write(b"hello")
        assert fs.stat("/a").is_dir
    """

    def __init__(self) -> None:
        self._nodes: dict[Path, _Node] = {ROOT: _Node(is_dir=True)}
        self._lock = threading.RLock()

    # ---- AbstractFileSystem ----

    def open_write(self, path: PathLike) -> AbstractWriter:
        p = Path(path)
        if p.is_root:
            raise VfsIOError("cannot write to the root directory", p)
        with self._lock:
            node = self._nodes.get(p)
            if node is not None and node.is_dir:
                raise VfsIOError(f"is a directory: {p}", p)
            self._ensure_dirs(p.parent)
        return _MemWriter(self, p)

    def open_read(self, path: PathLike) -> io.BytesIO:
        p = Path(path)
        with self._lock:
            node = self._get(p)
            if node.is_dir:
                raise VfsIOError(f"is a directory: {p}", p)
            data = node.data
        return io.BytesIO(data)

    def stat(self, path: PathLike) -> ResourceInfo:
        p = Path(path)
        with self._lock:
            return self._info(p, self._get(p))

    def delete(self, path: PathLike) -> None:
        p = Path(path)
        with self._lock:
            doomed = [key for key in self._nodes if key.is_within(p) and not key.is_root]
            for key in doomed:
                del self._nodes[key]
        logger.debug("Deleted %d node(s) under %s", len(doomed), p)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        s, d = Path(src), Path(dst)
        with self._lock:
            self._get(s)
            if s == d:
                return
            if s.is_root or d.is_within(s):
                raise VfsIOError(f"cannot move {s} into itself ({d})", s)
            if s.is_within(d):
                raise VfsIOError(f"cannot replace {d} with its own descendant {s}", d)
            self._ensure_dirs(d.parent)
            self.delete(d)
            moved = {key: node for key, node in self._nodes.items() if key.is_within(s)}
            for key, node in moved.items():
                del self._nodes[key]
                self._nodes[d.child("/".join(key.relative_to(s)))] = node

    def mkdirs(self, path: PathLike) -> None:
        with self._lock:
            self._ensure_dirs(Path(path))

    def read_dir(self, path: PathLike) -> IteratorDirCursor:
        p = Path(path)
        with self._lock:
            if not self._get(p).is_dir:
                raise VfsIOError(f"not a directory: {p}", p)
            children = sorted(
                (key, node)
                for key, node in self._nodes.items()
                if not key.is_root and key.parent == p
            )
            infos = [self._info(key, node) for key, node in children]
        return IteratorDirCursor(p, infos)

    def read_attrs(self, path: PathLike, target: object) -> None:
        p = Path(path)
        scan_attrs(self.stat(p), target, p)

    def write_attrs(self, path: PathLike, source: object) -> None:
        p = Path(path)
        values = extract_attrs(source, p)
        with self._lock:
            node = self._get(p)
            if (mod_time := values.get("mod_time")) is not None:
                node.mod_time = mod_time

    def close(self) -> None:
        logger.debug("MemoryFileSystem closed (%d node(s) retained)", len(self._nodes))

    # ---- internals ----

    def _get(self, path: Path) -> _Node:
        try:
            return self._nodes[path]
        except KeyError as e:
            raise ResourceNotFoundError(path) from e

    def _ensure_dirs(self, path: Path) -> None:
        current = ROOT
        for segment in path.segments:
            current = current.child(segment)
            node = self._nodes.get(current)
            if node is None:
                self._nodes[current] = _Node(is_dir=True)
            elif not node.is_dir:
                raise VfsIOError(f"not a directory: {current}", current)

    def _install(self, path: Path, data: bytes) -> None:
        with self._lock:
            self._ensure_dirs(path.parent)
            node = self._nodes.get(path)
            if node is not None and node.is_dir:
                raise VfsIOError(f"is a directory: {path}", path)
            self._nodes[path] = _Node(is_dir=False, data=data)

    @staticmethod
    def _info(path: Path, node: _Node) -> ResourceInfo:
        return ResourceInfo(
            name=path.name,
            size=0 if node.is_dir else len(node.data),
            mode=DIR_MODE if node.is_dir else FILE_MODE,
            mod_time=node.mod_time,
        )


class _MemWriter(AbstractWriter):
    """Writer for MemoryFileSystem; stages bytes in RAM then installs on close."""

    def __init__(self, fs: MemoryFileSystem, path: Path) -> None:
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
        # pylint: disable=protected-access
        self._fs._install(self._path, bytes(self._buffer))
        self._buffer.clear()
