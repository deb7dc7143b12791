"""Attributes: metadata targets must expose public dataclass fields.

Reading or scanning into a value without an introspectable shape (a dataclass
with only private fields, or a plain string) must raise an error classified as
`ErrorKind.UNSUPPORTED_ATTRIBUTES`. Writing from such a value may also be
refused as `ErrorKind.UNSUPPORTED_OPERATION` by backends without attribute
writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from vfscts.interfaces import (
    Path,
    ResourceInfo,
    unwrap_unsupported_attributes_error,
    unwrap_unsupported_operation_error,
)

from ..check import Check
from ..datagen import generate_test_bytes
from ..errors import CheckFailedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from vfscts.interfaces import AbstractFileSystem

C = Path("/c.bin")
PLAIN_VALUE = "hello world"


@dataclass
class _UnsupportedType:
    """Carries only a private member, so it has no attribute shape."""

    _hidden: int = field(default=0)


def _expect_unsupported_attributes(action: Callable[[], None], what: str) -> None:
    try:
        action()
    except Exception as e:  # pylint: disable=broad-except
        if unwrap_unsupported_attributes_error(e) is None:
            raise CheckFailedError(f"expected UnsupportedAttributesError but got {e!r}") from e
        return
    raise CheckFailedError(f"{what} is an error")


def check_unsupported_attributes(fs: AbstractFileSystem) -> None:
    fs.write_all(C, generate_test_bytes(13))

    fs.read_attrs(C, ResourceInfo())
    _expect_unsupported_attributes(
        lambda: fs.read_attrs(C, _UnsupportedType()),
        "reading into a type with private members and no public fields",
    )
    _expect_unsupported_attributes(
        lambda: fs.read_attrs(C, PLAIN_VALUE),
        "reading into a value type like a string",
    )

    # only the first entry is inspected; the cursor is closed on every path
    with fs.read_dir("") as cursor:
        if cursor.next():
            cursor.scan(ResourceInfo())
            _expect_unsupported_attributes(
                lambda: cursor.scan(_UnsupportedType()),
                "scanning into a type with private members and no public fields",
            )
            _expect_unsupported_attributes(
                lambda: cursor.scan(PLAIN_VALUE),
                "scanning into a value type like a string",
            )
        elif (error := cursor.err()) is not None:
            raise error
        else:
            raise CheckFailedError("expected at least 1 file to scan")

    try:
        fs.write_attrs(C, _UnsupportedType())
    except Exception as e:  # pylint: disable=broad-except
        if (
            unwrap_unsupported_attributes_error(e) is None
            and unwrap_unsupported_operation_error(e) is None
        ):
            raise CheckFailedError(
                "expected UnsupportedAttributesError or UnsupportedOperationError "
                f"but got {e!r}"
            ) from e
        return
    raise CheckFailedError(
        "writing from a type with private members and no public fields is an error"
    )


UNSUPPORTED_ATTRIBUTES_CHECK = Check(
    test=check_unsupported_attributes,
    name="Attributes",
    description="Tries to read unsupported attributes.",
)
