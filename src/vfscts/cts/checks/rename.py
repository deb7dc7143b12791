"""Rename: source must exist, destination may exist and is replaced."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vfscts.interfaces import ErrorKind, Path, error_kind

from ..check import Check
from ..datagen import generate_test_bytes
from ..errors import CheckFailedError

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

A = Path("/a.bin")
B = Path("/b.bin")
C = Path("/c.bin")


def _assert_missing(fs: AbstractFileSystem, path: Path, label: str) -> None:
    try:
        fs.stat(path)
    except Exception as e:  # pylint: disable=broad-except
        if error_kind(e) is not ErrorKind.NOT_FOUND:
            raise CheckFailedError(f"{label} must be ResourceNotFoundError, got {e!r}") from e
        return
    raise CheckFailedError(f"{label} must be ResourceNotFoundError")


def _assert_size(fs: AbstractFileSystem, path: Path, label: str, expected: int) -> None:
    try:
        info = fs.stat(path)
    except Exception as e:  # pylint: disable=broad-except
        raise CheckFailedError(f"{label} must be available") from e
    if info.size != expected:
        raise CheckFailedError(f"{label} must be {expected} bytes long but is {info.size}")


def check_rename(fs: AbstractFileSystem) -> None:
    fs.delete(A)
    fs.delete(B)

    try:
        fs.rename(A, B)
    except Exception:  # pylint: disable=broad-except
        pass
    else:
        raise CheckFailedError("renaming of non-a to non-b must fail")

    # a exists, b does not
    fs.write_all(A, generate_test_bytes(7))
    fs.rename(A, B)
    _assert_missing(fs, A, "a")
    _assert_size(fs, B, "b", 7)

    # b exists, c exists: c is replaced
    fs.write_all(C, generate_test_bytes(13))
    fs.rename(B, C)
    _assert_missing(fs, B, "b")
    _assert_size(fs, C, "c", 7)


RENAME_CHECK = Check(
    test=check_rename,
    name="Rename",
    description="Renames and their corner cases",
)
