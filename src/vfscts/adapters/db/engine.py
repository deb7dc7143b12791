"""Engine construction for the SQL-backed filesystem.

`make_engine` is the only place engines are created, so every connection of
the SQL backend gets the same SQLite tuning:

- ``synchronous=NORMAL`` and ``temp_store=MEMORY`` on every SQLite database;
- ``journal_mode=WAL`` on file databases only (in-memory databases cannot
  use it and silently report ``memory``);
- ``foreign_keys=ON`` so any future relational table is enforced.

Other dialects are passed through untouched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}
MEMORY_DATABASES = {None, "", ":memory:"}

SQLITE_PRAGMAS = ("foreign_keys=ON", "synchronous=NORMAL", "temp_store=MEMORY")
FILE_ONLY_PRAGMAS = ("journal_mode=WAL",)


def is_sqlite(url: str | URL) -> bool:
    """Return True if ``url`` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def is_sqlite_memory(url: str | URL) -> bool:
    """Return True for in-memory SQLite URLs (``sqlite://`` or ``:memory:``)."""
    u = make_url(str(url))
    return is_sqlite(u) and u.database in MEMORY_DATABASES


def _pragma_listener(pragmas: tuple[str, ...]):
    def apply(dbapi_conn, conn_record) -> None:  # pylint: disable=unused-argument
        cur = dbapi_conn.cursor()
        try:
            for pragma in pragmas:
                cur.execute(f"PRAGMA {pragma};")
        finally:
            cur.close()

    return apply


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url``, tuned for SQLite when applicable.

    Args:
        url: Database connection URL.
        echo: Log every SQL statement (via the ``sqlalchemy.engine`` logger).

    Returns:
        Engine: The configured engine. No connection is opened yet.

    Raises:
        sqlalchemy.exc.ArgumentError: If ``url`` cannot be parsed.
    """
    engine = create_engine(url, echo=echo)

    if is_sqlite(url):
        pragmas = SQLITE_PRAGMAS
        if not is_sqlite_memory(url):
            pragmas += FILE_ONLY_PRAGMAS
        event.listen(engine, "connect", _pragma_listener(pragmas))
        logger.debug("SQLite engine with PRAGMAs %s", ", ".join(pragmas))

    return engine
