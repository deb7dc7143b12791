"""Property-based tests for the reference backends.

Filesystems are created inside each example (not via fixtures) so every
Hypothesis example starts from an empty tree. The SQL backend runs on
in-memory SQLite to keep examples fast.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from vfscts.adapters.filesystem import MemoryFileSystem, SqlAlchemyFileSystem
from vfscts.interfaces import AbstractFileSystem, Path

pytestmark = [pytest.mark.property]

_PROPSET = settings(max_examples=40, deadline=None)

FACTORIES: dict[str, Callable[[], AbstractFileSystem]] = {
    "memory": MemoryFileSystem,
    "sql": lambda: SqlAlchemyFileSystem.from_url("sqlite+pysqlite:///:memory:"),
}

segment = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd"), whitelist_characters="-_."),
    min_size=1,
    max_size=12,
).filter(lambda s: s not in {".", ".."})


def _chunks(data: bytes, cuts: list[int]) -> list[bytes]:
    points = sorted({0, len(data), *(c % (len(data) + 1) for c in cuts)})
    return [data[a:b] for a, b in zip(points, points[1:])]


# 1) Round trip: what is written is read back byte for byte, and stat agrees
@pytest.mark.parametrize("backend", sorted(FACTORIES))
@_PROPSET
@given(parts=st.lists(segment, min_size=1, max_size=4), data=st.binary(max_size=16_384))
def test_write_read_round_trip(backend, parts, data):
    fs = FACTORIES[backend]()
    try:
        path = Path("/".join(parts))
        assert fs.write_all(path, data) == len(data)
        assert fs.read_all(path) == data
        assert fs.stat(path).size == len(data)
    finally:
        fs.close()


# 2) Chunk partition invariance: any split of the payload yields the same file
@pytest.mark.parametrize("backend", sorted(FACTORIES))
@_PROPSET
@given(data=st.binary(max_size=8_192), cuts=st.lists(st.integers(min_value=0), max_size=8))
def test_chunked_write_equals_single_write(backend, data, cuts):
    fs = FACTORIES[backend]()
    try:
        with fs.open_write("/chunked.bin") as writer:
            written = sum(writer.write(chunk) for chunk in _chunks(data, cuts))
        assert written == len(data)
        assert fs.read_all("/chunked.bin") == data
    finally:
        fs.close()


# 3) Rename moves content: source gone, destination holds the source bytes
@pytest.mark.parametrize("backend", sorted(FACTORIES))
@_PROPSET
@given(src=segment, dst=segment, data=st.binary(max_size=1_024), old=st.binary(max_size=64))
def test_rename_moves_content(backend, src, dst, data, old):
    fs = FACTORIES[backend]()
    try:
        fs.write_all(Path(src), data)
        if src != dst:
            fs.write_all(Path(dst), old)
        fs.rename(Path(src), Path(dst))
        assert fs.read_all(Path(dst)) == data
        assert fs.exists(Path(src)) is (src == dst)
    finally:
        fs.close()
