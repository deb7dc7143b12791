"""Fixtures for end-to-end CLI tests.

Provides a test-only ``broken-suite`` command that runs a small CTS with one
deliberately failing check, so logging and flight-recorder behavior can be
observed on a real failure, plus a CliRunner and an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from vfscts.adapters.filesystem import MemoryFileSystem
from vfscts.cts import CTS, Check
from vfscts.cts.checks import EMPTY_CHECK
from vfscts.cts.errors import CheckFailedError
from vfscts.entrypoints.cli.main import vfscts

# pylint: disable=redefined-outer-name

DEMO_LOGGER = "vfscts.demo"


def _always_fails(fs) -> None:  # pylint: disable=unused-argument
    raise CheckFailedError("deliberately broken")


BROKEN_CHECK = Check(_always_fails, "Broken", "Always fails.")


@click.command()
def broken_suite():
    """Run Empty and an always-failing check against a memory filesystem."""
    logger = logging.getLogger(DEMO_LOGGER)
    logger.debug("Suite is about to start.")
    result = CTS([EMPTY_CHECK, BROKEN_CHECK]).run(MemoryFileSystem())
    if not result.passed:
        logger.error("%d check(s) failed.", len(result.failures))
    logging.getLogger("some.thirdparty").debug("Third-party debug message.")
    logging.getLogger("some.thirdparty").info("Third-party info message.")
    logger.debug("Suite has finished.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any section registries."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_broken_suite():
    """Register ``broken-suite`` on the top-level group for one test."""
    vfscts.add_command(broken_suite, name="broken-suite")
    try:
        yield
    finally:
        _remove_command_everywhere(vfscts, "broken-suite")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def isolated(runner):
    """Run the test inside ``runner.isolated_filesystem()``."""
    with runner.isolated_filesystem():
        yield
