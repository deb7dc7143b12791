"""CTS runner: executes an ordered list of checks against one filesystem."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from vfscts.logging import check_context
from vfscts.service_layer.default import use_default

from .check import Check, CheckResult, CTSResult
from .checks import ALL_CHECKS

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

logger = logging.getLogger(__name__)


class CTS:
    """A conformance test suite.

    The suite holds an ordered list of checks. `run` executes them strictly
    in order (later checks rely on artifacts of earlier ones) and never stops
    early: every check's outcome is recorded, pass or fail.

    Args:
        checks: Initial check list. Empty by default; call `all` to load the
            standard suite.
    """

    def __init__(self, checks: Iterable[Check] = ()) -> None:
        self._checks: list[Check] = list(checks)

    @property
    def checks(self) -> tuple[Check, ...]:
        return tuple(self._checks)

    def all(self) -> None:
        """Replace the check list with the standard, fixed-order suite.

        Order: Empty, Write any, Read any, Write and Read, Rename, Attributes,
        Close. Close comes last because it may invalidate the filesystem.
        """
        self._checks = list(ALL_CHECKS)

    def run(self, fs: AbstractFileSystem) -> CTSResult:
        """Run every check against ``fs`` and return all outcomes.

        Before each check the ambient default filesystem is bound to ``fs``
        (see `vfscts.service_layer.default`); the binding is released right
        after the check so it never outlives the run. Records logged while a
        check runs are tagged with its name (`vfscts.logging.check_context`).
        """
        results: list[CheckResult] = []
        for check in self._checks:
            with check_context(check.name):
                logger.info("Running check %r", check.name)
                with use_default(fs):
                    failure = check.run(fs)
                if failure is None:
                    logger.info("Check %r passed", check.name)
                else:
                    logger.warning(
                        "Check %r failed: %s: %s", check.name, type(failure).__name__, failure
                    )
            results.append(CheckResult(check=check, result=failure))

        outcome = CTSResult(results)
        logger.info(
            "%d/%d checks passed against %s",
            len(outcome) - len(outcome.failures),
            len(outcome),
            type(fs).__name__,
        )
        return outcome
