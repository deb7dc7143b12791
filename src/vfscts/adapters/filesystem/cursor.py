"""Directory cursor shared by the reference backends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from vfscts.interfaces import (
    AbstractDirCursor,
    Path,
    ResourceInfo,
    VfsError,
    scan_attrs,
)


class IteratorDirCursor(AbstractDirCursor):
    """`AbstractDirCursor` over an (optionally lazy) iterable of `ResourceInfo`.

    A `VfsError` raised by the underlying iterator stops iteration: `next()`
    returns False and the error is reported by `err()`.
    """

    def __init__(self, path: Path, entries: Iterable[ResourceInfo]) -> None:
        self._path = path
        self._entries: Iterator[ResourceInfo] = iter(entries)
        self._current: ResourceInfo | None = None
        self._error: Exception | None = None
        self._closed = False

    def next(self) -> bool:
        if self._closed or self._error is not None:
            return False
        try:
            self._current = next(self._entries)
        except StopIteration:
            self._current = None
            return False
        except VfsError as e:
            self._current = None
            self._error = e
            return False
        return True

    def scan(self, target: object) -> None:
        if self._current is None:
            raise ValueError(f"no current entry in {self._path}; call next() first")
        scan_attrs(self._current, target, str(self._path.child(self._current.name)))

    def err(self) -> Exception | None:
        return self._error

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._current = None
        close = getattr(self._entries, "close", None)
        if close is not None:
            close()
