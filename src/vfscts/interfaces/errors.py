"""Error taxonomy for the VFS contract.

All backend failures that callers are expected to branch on are expressed as a
`VfsError` carrying an `ErrorKind`. Callers classify errors with `error_kind`
or the `unwrap_*` helpers instead of string-matching messages; both walk the
exception chain so that a backend may wrap a classified error in its own
exception (``raise MyError(...) from vfs_error``) without hiding it.

| Kind                     | Raised when                                           |
|--------------------------|-------------------------------------------------------|
| NOT_FOUND                | stat/read/rename of an absent path                    |
| UNSUPPORTED_ATTRIBUTES   | attribute target/source lacks an introspectable shape |
| UNSUPPORTED_OPERATION    | the backend lacks the capability entirely             |
| IO_FAILURE               | transport/backend-specific failure                    |
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

_E = TypeVar("_E", bound=BaseException)


class ErrorKind(str, Enum):
    """Classification of VFS failures."""

    NOT_FOUND = "not_found"
    UNSUPPORTED_ATTRIBUTES = "unsupported_attributes"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    IO_FAILURE = "io_failure"


class VfsError(Exception):
    """Base class for all classified VFS errors.

    Attributes:
        kind: The error classification.
        path: The path involved, if any.
    """

    kind: ErrorKind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ResourceNotFoundError(VfsError):
    """The requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, path: str, message: str | None = None) -> None:
        super().__init__(message or f"resource not found: {path}", path)


class UnsupportedAttributesError(VfsError):
    """An attribute target or source does not expose public dataclass fields."""

    kind = ErrorKind.UNSUPPORTED_ATTRIBUTES

    def __init__(self, value: object, path: str | None = None) -> None:
        super().__init__(
            f"unsupported attributes type {type(value).__name__!r}: "
            "expected a dataclass instance with public fields",
            path,
        )
        self.value_type = type(value)


class UnsupportedOperationError(VfsError):
    """The backend does not support the requested operation at all."""

    kind = ErrorKind.UNSUPPORTED_OPERATION

    def __init__(self, operation: str, path: str | None = None) -> None:
        super().__init__(f"unsupported operation: {operation}", path)
        self.operation = operation


class VfsIOError(VfsError):
    """Generic I/O failure reported by a backend."""

    kind = ErrorKind.IO_FAILURE


def _iter_chain(exc: BaseException | None):
    seen: set[int] = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = exc.__cause__ or exc.__context__


def _unwrap(exc: BaseException | None, wanted: type[_E]) -> _E | None:
    for item in _iter_chain(exc):
        if isinstance(item, wanted):
            return item
    return None


def error_kind(exc: BaseException | None) -> ErrorKind | None:
    """Return the kind of the first `VfsError` in ``exc``'s chain, or None."""
    if (found := _unwrap(exc, VfsError)) is not None:
        return found.kind
    return None


def unwrap_unsupported_attributes_error(
    exc: BaseException | None,
) -> UnsupportedAttributesError | None:
    """Return the `UnsupportedAttributesError` in ``exc``'s chain, if any."""
    return _unwrap(exc, UnsupportedAttributesError)


def unwrap_unsupported_operation_error(
    exc: BaseException | None,
) -> UnsupportedOperationError | None:
    """Return the `UnsupportedOperationError` in ``exc``'s chain, if any."""
    return _unwrap(exc, UnsupportedOperationError)
