"""The standard conformance checks, in execution order.

Each module defines one or two `Check` constants. `ALL_CHECKS` is the fixed
order used by `CTS.all`; later checks rely on files written by earlier ones
and `CLOSE_CHECK` must stay last.
"""

from .attributes import UNSUPPORTED_ATTRIBUTES_CHECK
from .close import CLOSE_CHECK
from .empty import EMPTY_CHECK
from .read import READ_ANY_CHECK
from .rename import RENAME_CHECK
from .write import WRITE_AND_READ_CHECK, WRITE_BASIC_CHECK

ALL_CHECKS = (
    EMPTY_CHECK,
    WRITE_BASIC_CHECK,
    READ_ANY_CHECK,
    WRITE_AND_READ_CHECK,
    RENAME_CHECK,
    UNSUPPORTED_ATTRIBUTES_CHECK,
    CLOSE_CHECK,
)

__all__ = [
    "ALL_CHECKS",
    "CLOSE_CHECK",
    "EMPTY_CHECK",
    "READ_ANY_CHECK",
    "RENAME_CHECK",
    "UNSUPPORTED_ATTRIBUTES_CHECK",
    "WRITE_AND_READ_CHECK",
    "WRITE_BASIC_CHECK",
]
