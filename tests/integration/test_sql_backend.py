"""Integration tests for `SqlAlchemyFileSystem` on SQLite."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from sqlalchemy import inspect, select

from vfscts.adapters.db.metadata import create_schema, drop_schema
from vfscts.adapters.filesystem import SqlAlchemyFileSystem
from vfscts.adapters.filesystem.schema import vfs_resource
from vfscts.cts import CTS
from vfscts.interfaces import (
    ResourceInfo,
    UnsupportedOperationError,
    VfsIOError,
    unwrap_unsupported_operation_error,
)


@dataclass
class Size:
    size: int = 0


def test_schema_is_created(sqlite_engine_file):
    SqlAlchemyFileSystem(sqlite_engine_file)

    insp = inspect(sqlite_engine_file)
    assert "vfs_resource" in insp.get_table_names()
    columns = {c["name"] for c in insp.get_columns("vfs_resource")}
    assert columns == {"path", "parent", "name", "is_dir", "size", "content", "mod_time"}
    assert [ix["column_names"] for ix in insp.get_indexes("vfs_resource")] == [["parent", "name"]]


def test_rows_mirror_the_tree(sql_fs: SqlAlchemyFileSystem, sqlite_engine_file):
    sql_fs.write_all("/a/b.bin", b"bytes")

    with sqlite_engine_file.connect() as conn:
        rows = conn.execute(
            select(vfs_resource.c.path, vfs_resource.c.parent, vfs_resource.c.is_dir, vfs_resource.c.size)
            .order_by(vfs_resource.c.path)
        ).all()

    assert [tuple(r) for r in rows] == [
        ("/a", "/", True, 0),
        ("/a/b.bin", "/a", False, 5),
    ]


def test_wildcard_characters_in_names_are_literal(sql_fs: SqlAlchemyFileSystem):
    sql_fs.write_all("/a_b/x.bin", b"1")
    sql_fs.write_all("/axb/x.bin", b"2")
    sql_fs.write_all("/100%/x.bin", b"3")
    sql_fs.write_all("/1000/x.bin", b"4")

    sql_fs.delete("/a_b")
    sql_fs.delete("/100%")

    assert sql_fs.read_all("/axb/x.bin") == b"2"
    assert sql_fs.read_all("/1000/x.bin") == b"4"


def test_subtree_matching_is_case_sensitive(sql_fs: SqlAlchemyFileSystem):
    sql_fs.write_all("/Dir/x.bin", b"upper")
    sql_fs.write_all("/dir/x.bin", b"lower")

    sql_fs.delete("/Dir")
    sql_fs.rename("/dir", "/moved")

    assert not sql_fs.exists("/Dir")
    assert sql_fs.read_all("/moved/x.bin") == b"lower"


def test_write_attrs_is_unsupported(sql_fs: SqlAlchemyFileSystem):
    sql_fs.write_all("/c.bin", b"c")
    with pytest.raises(UnsupportedOperationError) as excinfo:
        sql_fs.write_attrs("/c.bin", Size(1))
    assert unwrap_unsupported_operation_error(excinfo.value) is excinfo.value


def test_read_attrs_has_utc_mod_time(sql_fs: SqlAlchemyFileSystem):
    sql_fs.write_all("/c.bin", b"c")
    info = ResourceInfo()
    sql_fs.read_attrs("/c.bin", info)
    assert info.mod_time is not None
    assert info.mod_time.utcoffset().total_seconds() == 0


def test_owned_engine_survives_close(sqlite_url_file: str):
    fs = SqlAlchemyFileSystem.from_url(sqlite_url_file)
    fs.write_all("/persist.bin", b"p")
    fs.close()

    assert fs.read_all("/persist.bin") == b"p"
    fs.close()


def test_content_persists_across_instances(sqlite_url_file: str):
    first = SqlAlchemyFileSystem.from_url(sqlite_url_file)
    first.write_all("/persist.bin", b"p")
    first.close()

    second = SqlAlchemyFileSystem.from_url(sqlite_url_file)
    try:
        assert second.read_all("/persist.bin") == b"p"
    finally:
        second.close()


def test_full_suite_on_in_memory_database():
    fs = SqlAlchemyFileSystem.from_url("sqlite+pysqlite:///:memory:")
    cts = CTS()
    cts.all()
    assert cts.run(fs).passed


def test_unreachable_database_is_io_error(tmp_path):
    url = f"sqlite+pysqlite:///{tmp_path / 'missing-dir' / 'vfs.db'}"
    with pytest.raises(VfsIOError):
        SqlAlchemyFileSystem.from_url(url)


def test_schema_helpers_are_idempotent(sqlite_engine_file):
    create_schema(sqlite_engine_file)
    create_schema(sqlite_engine_file)
    assert "vfs_resource" in inspect(sqlite_engine_file).get_table_names()

    drop_schema(sqlite_engine_file)
    drop_schema(sqlite_engine_file)
    assert "vfs_resource" not in inspect(sqlite_engine_file).get_table_names()
