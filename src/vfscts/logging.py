"""Logging helpers used by the VFS-CTS CLI.

Console logging goes through Rich; an in-memory "flight recorder" buffers
records at DEBUG granularity and writes them to disk when a WARNING is
emitted. The CTS runner logs every failed check at that level, so a failure
leaves the history that led up to it on disk. Each recorded line is tagged
with the check that was running (see `check_context`). Third-party records get
a short prefix on the console so library chatter is easy to tell apart.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "vfscts"

# level of the runner's "Check ... failed" records
FLIGHT_RECORDER_FLUSH_LEVEL = logging.WARNING

NO_CHECK = "-"

_current_check: ContextVar[str] = ContextVar("vfscts_current_check", default=NO_CHECK)


@contextmanager
def check_context(name: str) -> Iterator[None]:
    """Tag records logged inside the block with the name of the running check."""
    token = _current_check.set(name)
    try:
        yield
    finally:
        _current_check.reset(token)


class CheckNameFilter(logging.Filter):
    """Set ``record.check`` to the running check's name, or ``"-"`` outside a check."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.check = _current_check.get()
        return True


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    Records from loggers outside the project get ``record.prefix`` set to a
    token like ``"[sqlalchemy]"``; project records get an empty prefix. The
    filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # "sqlalchemy.engine.Engine" -> "[sqlalchemy]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in debug mode).
        debug_mode: Show logger names, timestamps and source locations.
        color: Enable color output; mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(asctime)s %(name)s: %(message)s" if debug_mode else "%(prefix)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = FLIGHT_RECORDER_FLUSH_LEVEL,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to ``capacity`` records are buffered and flushed to ``path`` when a
    record at ``flush_level`` or above arrives (or on close when
    ``flush_on_close`` is set). Records are stamped with the running check
    when they enter the buffer.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] [%(check)s] "
            "%(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    handler = MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )
    handler.addFilter(CheckNameFilter())
    return handler


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line startup summary plus DEBUG diagnostics.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level.
        handlers: Handlers attached to the root logger.
        log_path: Flight-recorder output file, or None.
        flight_recorder: Whether the flight recorder is enabled.
        flight_capacity: Flight recorder buffer capacity, or None.
        force_flush_fr: Whether the flight recorder flushes on close.
        logger_levels: Per-logger level overrides.
    """
    logger.info(
        "VFS-CTS %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            str(log_path) if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )
    else:
        logger.debug("Per-logger overrides: <none>")  # pragma: no cover
