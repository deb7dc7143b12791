"""Empty: the root listing of a fresh filesystem is empty."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vfscts.interfaces import Path

from ..check import Check
from ..errors import CheckFailedError

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

logger = logging.getLogger(__name__)


def _root_names(fs: AbstractFileSystem) -> list[str]:
    with fs.read_dir("") as cursor:
        return [info.name for info in cursor]


def check_empty(fs: AbstractFileSystem) -> None:
    """Assert an empty root, clearing it once if a previous run left data behind."""
    names = _root_names(fs)
    if not names:
        return

    logger.info("Root is not empty (%d entries); clearing it", len(names))
    for name in names:
        fs.delete(Path(name))

    if _root_names(fs):
        raise CheckFailedError("FileSystem is not empty and cannot clear it")


EMPTY_CHECK = Check(
    test=check_empty,
    name="Empty",
    description="Checks the corner case of an empty FileSystem",
)
