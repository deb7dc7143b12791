"""Virtual file system (VFS) interface.

This module defines the backend-agnostic contract that the conformance suite
exercises. A backend (in-memory, local directory, database, FTP, object
store, …) implements `AbstractFileSystem`; everything else in VFS-CTS talks to
it only through this interface.

Exports
-------
Abstract interfaces
    - AbstractWriter: Buffered write session; `write()` then `close()` or `abort()`.
    - AbstractDirCursor: Sequential directory listing; `next()`, `scan()`,
      `err()`, `close()`. Usable as a context manager.
    - AbstractFileSystem: Core operations plus conveniences (`exists()`,
      `read_all()`, `write_all()`, `read_dir_recur()`, `copy()`).

Contract summary
----------------
- Paths are `Path` values (any ``str`` is normalized on entry).
- Writing a file implicitly creates its parent directories.
- `stat`/`open_read` raise `ResourceNotFoundError` for absent paths.
- `delete` is idempotent and recursive.
- `rename` requires an existing source and replaces an existing destination.
- `read_attrs`/`write_attrs`/`scan` reject values without public dataclass
  fields with `UnsupportedAttributesError`; backends without attribute writes
  may raise `UnsupportedOperationError` instead.
- `close` is advisory cleanup; stateless backends may remain usable.

Typical usage
-------------
    with fs.open_write("/x/5.bin") as w:
        w.write(b"\\x00\\x01\\x02\\x03\\x04")
    assert fs.read_all("/x/5.bin") == b"\\x00\\x01\\x02\\x03\\x04"
    assert fs.stat("/x/5.bin").size == 5

    with fs.read_dir("/") as cursor:
        while cursor.next():
            info = ResourceInfo()
            cursor.scan(info)
"""

from __future__ import annotations

import abc
from collections.abc import Iterator
from types import TracebackType
from typing import BinaryIO

from .copying import copy_resources
from .errors import ResourceNotFoundError
from .path import Path, PathLike
from .resources import CopyOptions, DirEntry, ResourceInfo


class AbstractWriter(abc.ABC):
    """Write session for a single file.

    Typical lifecycle:
        1. Obtain via `AbstractFileSystem.open_write`.
        2. Call `write` zero or more times.
        3. `close` to make the content visible (use as a context manager).
        4. Or `abort` to discard everything written so far.

    Used as a context manager, the writer commits on a clean exit and aborts
    when the block raises, so a failed write never replaces existing content.
    """

    @abc.abstractmethod
    def write(self, data: bytes) -> int:
        """Append ``data`` to the file.

        Returns:
            int: Number of bytes accepted (``len(data)`` on success).

        Raises:
            ValueError: If the writer is already closed.
            VfsIOError: Backend failures.
        """

    @abc.abstractmethod
    def abort(self) -> None:
        """Discard the written bytes and release resources without committing.

        Idempotent, and a no-op after `close`.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Commit the written bytes and release resources.

        Safe to call multiple times.
        """

    def __enter__(self) -> AbstractWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.abort()
        else:
            self.close()


class AbstractDirCursor(abc.ABC):
    """Sequential cursor over the entries of one directory.

    Cursors are scoped resources: `close` MUST be called on every exit path,
    including early returns. Use the cursor as a context manager.
    """

    @abc.abstractmethod
    def next(self) -> bool:
        """Advance to the next entry; return False at the end of the listing
        or when iteration stopped because of an error (see `err`)."""

    @abc.abstractmethod
    def scan(self, target: object) -> None:
        """Fill ``target`` with the metadata of the current entry.

        Raises:
            UnsupportedAttributesError: If ``target`` is not a supported attribute object.
            ValueError: If there is no current entry.
        """

    @abc.abstractmethod
    def err(self) -> Exception | None:
        """Return the error that terminated iteration early, if any."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release cursor resources. Idempotent."""

    def __iter__(self) -> Iterator[ResourceInfo]:
        while self.next():
            info = ResourceInfo()
            self.scan(info)
            yield info
        if (error := self.err()) is not None:
            raise error

    def __enter__(self) -> AbstractDirCursor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class AbstractFileSystem(abc.ABC):
    """Abstract VFS backend."""

    # --- Core operations ---

    @abc.abstractmethod
    def open_write(self, path: PathLike) -> AbstractWriter:
        """Open a write session that replaces the content at ``path``.

        Missing parent directories are created.

        Raises:
            VfsIOError: If ``path`` is the root, a directory, or below a file.
        """

    @abc.abstractmethod
    def open_read(self, path: PathLike) -> BinaryIO:
        """Open the file at ``path`` for reading; the caller must close it.

        Raises:
            ResourceNotFoundError: If ``path`` does not exist.
            VfsIOError: If ``path`` is a directory.
        """

    @abc.abstractmethod
    def stat(self, path: PathLike) -> ResourceInfo:
        """Return metadata for ``path``.

        Raises:
            ResourceNotFoundError: If ``path`` does not exist.
        """

    @abc.abstractmethod
    def delete(self, path: PathLike) -> None:
        """Remove ``path`` (recursively for directories).

        Deleting an absent path is not an error. Deleting the root removes all
        of its children.
        """

    @abc.abstractmethod
    def rename(self, src: PathLike, dst: PathLike) -> None:
        """Move ``src`` to ``dst``.

        An existing ``dst`` is replaced (content and size). Missing parents of
        ``dst`` are created.

        Raises:
            ResourceNotFoundError: If ``src`` does not exist.
        """

    @abc.abstractmethod
    def mkdirs(self, path: PathLike) -> None:
        """Create the directory ``path`` and any missing parents.

        Raises:
            VfsIOError: If a file occupies ``path`` or one of its parents.
        """

    @abc.abstractmethod
    def read_dir(self, path: PathLike) -> AbstractDirCursor:
        """Return a cursor over the immediate children of ``path``, sorted by name.

        Raises:
            ResourceNotFoundError: If ``path`` does not exist.
            VfsIOError: If ``path`` is not a directory.
        """

    @abc.abstractmethod
    def read_attrs(self, path: PathLike, target: object) -> None:
        """Fill ``target`` with the metadata of ``path``.

        Raises:
            UnsupportedAttributesError: If ``target`` is not a supported attribute object.
            ResourceNotFoundError: If ``path`` does not exist.
        """

    @abc.abstractmethod
    def write_attrs(self, path: PathLike, source: object) -> None:
        """Apply writable attributes from ``source`` to ``path``.

        Raises:
            UnsupportedAttributesError: If ``source`` is not a supported attribute object.
            UnsupportedOperationError: If the backend cannot write attributes.
            ResourceNotFoundError: If ``path`` does not exist.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Release backend resources. Advisory; see the module docstring."""

    # --- Convenience methods (non-abstract) ---

    def exists(self, path: PathLike) -> bool:
        """Return ``True`` if ``path`` exists."""
        try:
            self.stat(path)
        except ResourceNotFoundError:
            return False

        return True

    def read_all(self, path: PathLike) -> bytes:
        """Read the entire file into memory."""
        with self.open_read(path) as fp:
            return fp.read()

    def write_all(self, path: PathLike, data: bytes) -> int:
        """Replace the content of ``path`` with ``data``.

        Returns:
            int: Number of bytes written.
        """
        with self.open_write(path) as writer:
            return writer.write(data)

    def read_dir_recur(self, path: PathLike = "") -> list[DirEntry]:
        """Return every entry below ``path`` (depth-first, pre-order).

        The starting directory itself is not included.
        """
        root = Path(path)
        entries: list[DirEntry] = []
        with self.read_dir(root) as cursor:
            children = list(cursor)
        for info in children:
            child = root.child(info.name)
            entries.append(DirEntry(path=child, resource=info))
            if info.is_dir:
                entries.extend(self.read_dir_recur(child))
        return entries

    def copy(
        self, src: PathLike, dst: PathLike, options: CopyOptions | None = None
    ) -> None:
        """Copy a file or a directory tree from ``src`` to ``dst``.

        ``options`` is optional; without it no callbacks fire and the copy
        still completes. Existing destination files are overwritten.

        Raises:
            ResourceNotFoundError: If ``src`` does not exist.
        """
        copy_resources(self, Path(src), Path(dst), options)
