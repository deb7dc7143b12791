"""``vfscts run`` and ``vfscts checks``.

``run`` builds one of the reference backends, runs the conformance suite
against it and prints the report: a Rich table by default, or the plain
Markdown table with ``--markdown`` (stdout only, so it can be redirected).
Status lines go to stderr. The exit code is 1 if any check failed.

Backend targets
- ``local`` needs ``--root`` (env ``VFSCTS_LOCAL_ROOT``).
- ``sql`` needs ``--db-url`` (env ``VFSCTS_DB_URL``).

Failure modes
- Missing target configuration, an invalid database URL or an unreachable
  database → ``ClickException`` with guidance (exit code 1).
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import ArgumentError

from vfscts import config
from vfscts.adapters.filesystem import BackendName, make_filesystem
from vfscts.cts import CTS, render_markdown, render_table
from vfscts.cts.checks import ALL_CHECKS
from vfscts.interfaces import AbstractFileSystem, VfsIOError

from .helpers import error, sanitize_url, success, warn

logger = logging.getLogger(__name__)

MISSING_ROOT_MSG = (
    "The local backend needs a root directory.\n\n"
    "Pass --root DIR or set it in the environment, e.g.:\n"
    "  export VFSCTS_LOCAL_ROOT=/tmp/vfscts"
)

MISSING_DB_URL_MSG = (
    "The sql backend needs a database URL.\n\n"
    "Pass --db-url URL or set it in the environment, e.g.:\n"
    "  export VFSCTS_DB_URL='sqlite+pysqlite:///vfscts.db'"
)

INVALID_URL_FORMAT_MSG = "The database URL is not a valid SQLAlchemy database URL."

CANNOT_CONNECT_MSG = (
    "The database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

_CHECKS_BY_NAME = {check.name.lower(): check for check in ALL_CHECKS}


def _select_checks(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> tuple:
    """Click callback mapping ``-c NAME`` values to checks, kept in suite order."""
    if not value:
        return ALL_CHECKS
    wanted = set()
    for name in value:
        key = name.strip().lower()
        if key not in _CHECKS_BY_NAME:
            known = ", ".join(repr(c.name) for c in ALL_CHECKS)
            raise click.BadParameter(f"Unknown check {name!r}; choose from {known}")
        wanted.add(key)
    return tuple(c for c in ALL_CHECKS if c.name.lower() in wanted)


def _resolve_root(root: Path | None) -> Path:
    if root is not None:
        return root.expanduser()
    try:
        return config.get_local_root()
    except config.LocalRootNotSetError as e:
        raise click.ClickException(MISSING_ROOT_MSG) from e


def _resolve_db_url(db_url: str | None) -> str:
    if db_url:
        return db_url
    try:
        return config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e


def _build_filesystem(
    backend: BackendName, root: Path | None, db_url: str | None
) -> AbstractFileSystem:
    match backend:
        case BackendName.LOCAL:
            resolved_root = _resolve_root(root)
            resolved_root.mkdir(parents=True, exist_ok=True)
            logger.info("Testing local backend rooted at %s", resolved_root)
            return make_filesystem(backend, root=resolved_root)
        case BackendName.SQL:
            url = _resolve_db_url(db_url)
            try:
                logger.info("Testing sql backend at %s", sanitize_url(url))
                return make_filesystem(backend, db_url=url)
            except ArgumentError as e:
                raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
            except VfsIOError as e:
                raise click.ClickException(CANNOT_CONNECT_MSG) from e
        case _:
            logger.info("Testing %s backend", backend.value)
            return make_filesystem(backend)


@click.command()
@click.option(
    "--backend",
    "-b",
    type=click.Choice([b.value for b in BackendName], case_sensitive=False),
    default=BackendName.MEMORY.value,
    show_default=True,
    help="Reference backend to test.",
)
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar=config.LOCAL_ROOT_ENV,
    show_envvar=True,
    help="Root directory for the local backend.",
)
@click.option(
    "--db-url",
    default=None,
    envvar=config.DB_URL_ENV,
    show_envvar=True,
    help="SQLAlchemy URL for the sql backend.",
)
@click.option(
    "--markdown",
    is_flag=True,
    help="Print the report as a Markdown table instead of a Rich table.",
)
@click.option(
    "--check",
    "-c",
    "selected",
    multiple=True,
    callback=_select_checks,
    help="Run only the named check (repeatable). Suite order is preserved.",
)
@click.pass_context
def run(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    backend: str,
    root: Path | None,
    db_url: str | None,
    markdown: bool,
    selected: tuple,
) -> None:
    """Run the conformance suite against a backend."""
    fs = _build_filesystem(BackendName.from_string(backend), root, db_url)

    cts = CTS(selected)
    try:
        result = cts.run(fs)
    finally:
        # the Close check may already have closed it; close is idempotent
        fs.close()

    if markdown:
        click.echo(render_markdown(result), nl=False)
    else:
        Console().print(render_table(result))

    failed = len(result.failures)
    if failed:
        for check_result in result.failures:
            warn(f"{check_result.check.name}: {check_result.result}")
        error(f"{failed}/{len(result)} checks failed.")
        ctx.exit(1)
    success(f"{len(result)}/{len(result)} checks passed.")


@click.command()
def checks() -> None:
    """List the standard checks in execution order."""
    table = Table(title="VFS conformance checks")
    table.add_column("#", justify="right")
    table.add_column("Check", style="bold")
    table.add_column("Description")
    for position, check in enumerate(ALL_CHECKS, start=1):
        table.add_row(str(position), check.name, check.description)
    Console().print(table)
