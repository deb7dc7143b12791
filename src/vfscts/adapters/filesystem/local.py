"""Local-directory VFS backend.

A directory on the local disk acts as the VFS root; VFS paths map onto it
segment by segment. Writes go to a temporary file next to the target and are
moved into place with `os.replace`, so readers never see partial content.

Native `OSError`s are translated into the VFS error taxonomy:
`FileNotFoundError` becomes `ResourceNotFoundError`, anything else
`VfsIOError` (the original error is chained).
"""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path as FsPath
from typing import BinaryIO

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

from .cursor import IteratorDirCursor

__all__ = ["LocalFileSystem"]

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".vfscts-"


@contextlib.contextmanager
def _translate_errors(path: Path) -> Iterator[None]:
    try:
        yield
    except FileNotFoundError as e:
        raise ResourceNotFoundError(path) from e
    except OSError as e:
        raise VfsIOError(f"{e.strerror or e} ({path})", path) from e


class LocalFileSystem(AbstractFileSystem):
    """`AbstractFileSystem` rooted at a local directory.

    The root directory is created if it does not exist. `close()` is a no-op;
    the backend is stateless.
    """

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self._root = FsPath(root)
        self._root.mkdir(parents=True, exist_ok=True)

    # ---- AbstractFileSystem ----

    def open_write(self, path: PathLike) -> AbstractWriter:
        p = Path(path)
        if p.is_root:
            raise VfsIOError("cannot write to the root directory", p)
        target = self._resolve(p)
        with _translate_errors(p):
            if target.is_dir():
                raise IsADirectoryError(21, "Is a directory")
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=TEMP_PREFIX, dir=target.parent)
        return _LocalWriter(p, target, FsPath(tmp_name), os.fdopen(fd, "wb"))

    def open_read(self, path: PathLike) -> BinaryIO:
        p = Path(path)
        with _translate_errors(p):
            return self._resolve(p).open("rb")

    def stat(self, path: PathLike) -> ResourceInfo:
        p = Path(path)
        with _translate_errors(p):
            return self._info(p.name, self._resolve(p).stat())

    def delete(self, path: PathLike) -> None:
        p = Path(path)
        target = self._resolve(p)
        with _translate_errors(p):
            if p.is_root:
                for child in target.iterdir():
                    self._remove(child)
            elif target.exists() or target.is_symlink():
                self._remove(target)

    def rename(self, src: PathLike, dst: PathLike) -> None:
        s, d = Path(src), Path(dst)
        source, dest = self._resolve(s), self._resolve(d)
        if not source.exists():
            raise ResourceNotFoundError(s)
        if s == d:
            return
        if s.is_root or d.is_within(s) or s.is_within(d):
            raise VfsIOError(f"cannot move {s} to {d}", s)
        with _translate_errors(d):
            dest.parent.mkdir(parents=True, exist_ok=True)
            # os.replace only swaps file-for-file atomically
            if dest.exists() and (dest.is_dir() or source.is_dir()):
                self._remove(dest)
            os.replace(source, dest)

    def mkdirs(self, path: PathLike) -> None:
        p = Path(path)
        with _translate_errors(p):
            self._resolve(p).mkdir(parents=True, exist_ok=True)

    def read_dir(self, path: PathLike) -> IteratorDirCursor:
        p = Path(path)
        directory = self._resolve(p)
        with _translate_errors(p):
            names = sorted(
                entry.name
                for entry in os.scandir(directory)
                if not entry.name.startswith(TEMP_PREFIX)
            )
        return IteratorDirCursor(p, self._iter_infos(p, names))

    def read_attrs(self, path: PathLike, target: object) -> None:
        p = Path(path)
        scan_attrs(self.stat(p), target, p)

    def write_attrs(self, path: PathLike, source: object) -> None:
        p = Path(path)
        values = extract_attrs(source, p)
        mod_time: datetime | None = values.get("mod_time")
        with _translate_errors(p):
            target = self._resolve(p)
            if mod_time is None:
                target.stat()  # existence check only
                return
            timestamp = mod_time.timestamp()
            os.utime(target, (timestamp, timestamp))

    def close(self) -> None:
        logger.debug("LocalFileSystem at %s closed", self._root)

    # ---- internals ----

    def _resolve(self, path: Path) -> FsPath:
        return self._root.joinpath(*path.segments)

    def _iter_infos(self, directory: Path, names: list[str]) -> Iterator[ResourceInfo]:
        for name in names:
            child = directory.child(name)
            with _translate_errors(child):
                yield self._info(name, self._resolve(child).stat())

    @staticmethod
    def _remove(target: FsPath) -> None:
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink(missing_ok=True)

    @staticmethod
    def _info(name: str, st: os.stat_result) -> ResourceInfo:
        info = ResourceInfo(
            name=name,
            size=st.st_size,
            mode=st.st_mode,
            mod_time=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )
        if info.is_dir:
            info.size = 0
        return info


class _LocalWriter(AbstractWriter):
    """Writes to a temp file and atomically moves it over the target on close."""

    def __init__(self, path: Path, target: FsPath, tmp: FsPath, handle: BinaryIO) -> None:
        self._path = path
        self._target = target
        self._tmp = tmp
        self._handle = handle
        self._closed = False

    def write(self, data: bytes) -> int:
        if self._closed:
            raise ValueError(f"writer for {self._path} is closed")
        with _translate_errors(self._path):
            return self._handle.write(data)

    def abort(self) -> None:
        if self._closed:
            return
        self._closed = True
        with contextlib.suppress(OSError):
            self._handle.close()
        with _translate_errors(self._path):
            self._tmp.unlink(missing_ok=True)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        with _translate_errors(self._path):
            try:
                self._handle.close()
                os.replace(self._tmp, self._target)
            except OSError:
                self._tmp.unlink(missing_ok=True)
                raise
