"""Check abstraction and result containers.

A `Check` tells whether a filesystem has a specific property. Its ``test``
callable receives the filesystem under test and raises on failure; `Check.run`
turns that into an *optional failure* (``Exception | None``) so a runner can
record it without aborting.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

logger = logging.getLogger(__name__)

CheckFunc = Callable[["AbstractFileSystem"], None]


@dataclass(frozen=True)
class Check:
    """A named, described, independently runnable verification.

    Attributes:
        test: Callable exercising the filesystem; raises on failure.
        name: Stable identifier shown in reports.
        description: Human-readable purpose.
    """

    test: CheckFunc
    name: str
    description: str

    def run(self, fs: AbstractFileSystem) -> Exception | None:
        """Execute the check and return its failure, or None if it passed."""
        try:
            self.test(fs)
        except Exception as e:  # pylint: disable=broad-except
            logger.debug("Check %r raised", self.name, exc_info=True)
            return e
        return None


@dataclass(frozen=True)
class CheckResult:
    """Connects a `Check` with the outcome of one execution."""

    check: Check
    result: Exception | None = None

    @property
    def passed(self) -> bool:
        return self.result is None


class CTSResult(Sequence[CheckResult]):
    """Ordered, immutable outcome of a CTS run (one entry per check, in execution order)."""

    def __init__(self, results: Sequence[CheckResult] = ()) -> None:
        self._results: tuple[CheckResult, ...] = tuple(results)

    @overload
    def __getitem__(self, index: int) -> CheckResult: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[CheckResult]: ...

    def __getitem__(self, index):
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[CheckResult]:
        return iter(self._results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CTSResult):
            return NotImplemented
        return self._results == other._results

    def __hash__(self) -> int:
        return hash(self._results)

    def __repr__(self) -> str:
        summary = ", ".join(
            f"{r.check.name}={'ok' if r.passed else 'failed'}" for r in self._results
        )
        return f"CTSResult({summary})"

    def __str__(self) -> str:
        # local import: report depends on this module
        from .report import render_markdown  # pylint: disable=import-outside-toplevel

        return render_markdown(self)

    @property
    def passed(self) -> bool:
        """True iff every check passed."""
        return all(r.passed for r in self._results)

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        return tuple(r for r in self._results if not r.passed)
