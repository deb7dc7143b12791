"""Unit tests for the backend-agnostic copy and its progress callbacks."""

from __future__ import annotations

import pytest

from vfscts.adapters.filesystem import MemoryFileSystem
from vfscts.interfaces import CopyOptions, Path, ResourceNotFoundError

# pylint: disable=redefined-outer-name


@pytest.fixture
def fs() -> MemoryFileSystem:
    fs = MemoryFileSystem()
    fs.write_all("/dir1/a.bin", bytes(range(10)))
    fs.write_all("/dir1/sub/b.bin", bytes(range(5)))
    fs.write_all("/dir1/sub/empty.bin", b"")
    return fs


class Recorder:
    """Collects every callback invocation."""

    def __init__(self) -> None:
        self.scanned: list[tuple[Path, int, int]] = []
        self.copied: list[tuple[Path, int, int]] = []
        self.progress: list[tuple[Path, Path, int, int]] = []

    def options(self, chunk_size: int = 64 * 1024) -> CopyOptions:
        return CopyOptions(
            on_scan=lambda *args: self.scanned.append(args),
            on_copied=lambda *args: self.copied.append(args),
            on_progress=lambda *args: self.progress.append(args),
            chunk_size=chunk_size,
        )


def test_copy_without_options_succeeds(fs):
    fs.copy("/dir1", "/dir2", None)

    assert fs.read_all("/dir2/a.bin") == bytes(range(10))
    assert fs.read_all("/dir2/sub/b.bin") == bytes(range(5))
    assert fs.read_all("/dir2/sub/empty.bin") == b""
    # source untouched
    assert fs.read_all("/dir1/a.bin") == bytes(range(10))


def test_copy_directory_fires_every_callback(fs):
    rec = Recorder()

    fs.copy("/dir1", "/dir2", rec.options())

    assert [(str(p), n, b) for p, n, b in rec.scanned] == [
        ("/dir1/a.bin", 1, 10),
        ("/dir1/sub", 2, 10),
        ("/dir1/sub/b.bin", 3, 15),
        ("/dir1/sub/empty.bin", 4, 15),
    ]
    assert [n for _, n, _ in rec.copied] == [1, 2, 3, 4]
    assert rec.copied[-1][2] == 15
    # one chunk per non-empty file
    assert [(str(s), str(d), c, t) for s, d, c, t in rec.progress] == [
        ("/dir1/a.bin", "/dir2/a.bin", 10, 10),
        ("/dir1/sub/b.bin", "/dir2/sub/b.bin", 5, 5),
    ]


def test_progress_fires_per_chunk(fs):
    rec = Recorder()

    fs.copy("/dir1/a.bin", "/single.bin", rec.options(chunk_size=4))

    assert [c for _, _, c, _ in rec.progress] == [4, 8, 10]
    assert rec.scanned == [(Path("/dir1/a.bin"), 1, 10)]
    assert rec.copied == [(Path("/dir1/a.bin"), 1, 10)]
    assert fs.read_all("/single.bin") == bytes(range(10))


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_non_positive_chunk_size_is_rejected(chunk_size):
    with pytest.raises(ValueError, match="chunk_size must be positive"):
        CopyOptions(chunk_size=chunk_size)


def test_single_byte_chunks_copy_everything(fs):
    rec = Recorder()

    fs.copy("/dir1/a.bin", "/single.bin", rec.options(chunk_size=1))

    assert [c for _, _, c, _ in rec.progress] == list(range(1, 11))
    assert fs.read_all("/single.bin") == bytes(range(10))


def test_copy_overwrites_existing_destination(fs):
    fs.copy("/dir1", "/dir2")
    fs.write_all("/dir1/a.bin", b"new")

    fs.copy("/dir1", "/dir2")

    assert fs.read_all("/dir2/a.bin") == b"new"


def test_copy_into_own_subdirectory_terminates(fs):
    fs.copy("/dir1", "/dir1/sub/nested")

    assert fs.read_all("/dir1/sub/nested/a.bin") == bytes(range(10))
    assert not fs.exists("/dir1/sub/nested/sub/nested")


def test_copy_onto_itself_is_noop(fs):
    rec = Recorder()
    fs.copy("/dir1/a.bin", "dir1/a.bin", rec.options())
    assert not rec.copied


def test_copy_missing_source_raises(fs):
    with pytest.raises(ResourceNotFoundError):
        fs.copy("/nope", "/dst")
