"""Read any: every listed file is readable and matches its reported size."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..check import Check
from ..errors import CheckFailedError

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem


def check_read_any(fs: AbstractFileSystem) -> None:
    entries = fs.read_dir_recur("")
    if not entries:
        raise CheckFailedError("expected at least 1 file")

    for entry in entries:
        if entry.resource.is_dir:
            continue
        data = fs.read_all(entry.path)
        if len(data) != entry.resource.size:
            raise CheckFailedError(
                f"expected same size of {entry.path}: expected "
                f"{entry.resource.size} bytes but got {len(data)}"
            )


READ_ANY_CHECK = Check(
    test=check_read_any,
    name="Read any",
    description="Asserts that nothing is empty and everything can be read",
)
