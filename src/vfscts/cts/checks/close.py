"""Close: the lifecycle-termination operation succeeds."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..check import Check

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem


def check_close(fs: AbstractFileSystem) -> None:
    fs.close()


CLOSE_CHECK = Check(
    test=check_close,
    name="Close",
    description=(
        "Simply checks if close succeeds. It does not mean that the FileSystem "
        "is unusable, because some are stateless"
    ),
)
