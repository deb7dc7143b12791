"""Ambient default filesystem and free-function helpers.

Some callers prefer free functions (``read_all(path)``) over passing a
filesystem handle around. These helpers resolve against a *default
filesystem* held in a `contextvars.ContextVar`, so the binding is scoped to
the current context (thread/task) rather than being a bare module global.

Bind it for a block with `use_default`:

    with use_default(fs):
        write_all("/x/5.bin", bytes(range(5)))
        assert stat("/x/5.bin").size == 5

or persistently with `set_default` (keep the token to `reset_default`).
Calling a helper with nothing bound raises `NoDefaultFileSystemError`.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from contextvars import ContextVar, Token
from typing import BinaryIO

from vfscts.interfaces import (
    AbstractDirCursor,
    AbstractFileSystem,
    AbstractWriter,
    CopyOptions,
    DirEntry,
    PathLike,
    ResourceInfo,
)

logger = logging.getLogger(__name__)

_default: ContextVar[AbstractFileSystem | None] = ContextVar(
    "vfscts_default_filesystem", default=None
)


class NoDefaultFileSystemError(LookupError):
    """Raised when a free-function helper is used with no default filesystem bound."""

    def __init__(self) -> None:
        super().__init__("no default filesystem is bound; use use_default(fs)")


def get_default() -> AbstractFileSystem:
    """Return the bound default filesystem.

    Raises:
        NoDefaultFileSystemError: If none is bound.
    """
    if (fs := _default.get()) is None:
        raise NoDefaultFileSystemError
    return fs


def set_default(fs: AbstractFileSystem | None) -> Token[AbstractFileSystem | None]:
    """Bind ``fs`` as the default; return a token for `reset_default`."""
    return _default.set(fs)


def reset_default(token: Token[AbstractFileSystem | None]) -> None:
    """Restore the binding that was active before `set_default` returned ``token``."""
    _default.reset(token)


@contextlib.contextmanager
def use_default(fs: AbstractFileSystem) -> Iterator[AbstractFileSystem]:
    """Bind ``fs`` as the default filesystem for the duration of the block."""
    token = set_default(fs)
    logger.debug("Default filesystem bound to %s", type(fs).__name__)
    try:
        yield fs
    finally:
        reset_default(token)


# --- free functions -------------------------------------------------------


def write(path: PathLike) -> AbstractWriter:
    return get_default().open_write(path)


def read(path: PathLike) -> BinaryIO:
    return get_default().open_read(path)


def read_all(path: PathLike) -> bytes:
    return get_default().read_all(path)


def write_all(path: PathLike, data: bytes) -> int:
    return get_default().write_all(path, data)


def stat(path: PathLike) -> ResourceInfo:
    return get_default().stat(path)


def delete(path: PathLike) -> None:
    get_default().delete(path)


def rename(src: PathLike, dst: PathLike) -> None:
    get_default().rename(src, dst)


def copy(src: PathLike, dst: PathLike, options: CopyOptions | None = None) -> None:
    get_default().copy(src, dst, options)


def read_dir(path: PathLike) -> AbstractDirCursor:
    return get_default().read_dir(path)


def read_dir_recur(path: PathLike = "") -> list[DirEntry]:
    return get_default().read_dir_recur(path)


def read_attrs(path: PathLike, target: object) -> None:
    get_default().read_attrs(path, target)


def write_attrs(path: PathLike, source: object) -> None:
    get_default().write_attrs(path, source)
