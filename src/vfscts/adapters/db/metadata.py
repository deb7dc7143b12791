"""Shared `MetaData` for the SQL backend and schema provisioning.

The VFS schema is small and versionless: `create_schema` issues
``CREATE TABLE IF NOT EXISTS`` for every registered table, so pointing the
SQL backend at an empty database is enough to use it.

Naming convention:
    - Primary key:   pk_<table>
    - Check:         ck_<table>_<constraint_name>
    - Indexes:       ix_<table>_<col...>
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import MetaData

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData(
    naming_convention={
        "pk": "pk_%(table_name)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    }
)


def _register_tables() -> None:
    # tables attach to `metadata` on import
    # pylint: disable=import-outside-toplevel, unused-import
    import vfscts.adapters.filesystem.schema  # noqa: F401


def create_schema(engine: Engine) -> None:
    """Create every missing VFS table on ``engine``."""
    _register_tables()
    metadata.create_all(engine, checkfirst=True)
    logger.debug("Schema ready on %s: %s", engine.url.get_backend_name(), sorted(metadata.tables))


def drop_schema(engine: Engine) -> None:
    """Drop every VFS table from ``engine`` (test teardown helper)."""
    _register_tables()
    metadata.drop_all(engine, checkfirst=True)
