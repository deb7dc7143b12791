"""Behavior specific to `MemoryFileSystem`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import pytest

from vfscts.adapters.filesystem import MemoryFileSystem
from vfscts.interfaces import ResourceInfo, VfsIOError

WHEN = datetime(2020, 2, 2, tzinfo=timezone.utc)


@dataclass
class ModTime:
    mod_time: datetime | None = None


def test_write_attrs_updates_mod_time(memory_fs: MemoryFileSystem):
    memory_fs.write_all("/m.bin", b"m")

    memory_fs.write_attrs("/m.bin", ModTime(WHEN))

    assert memory_fs.stat("/m.bin").mod_time == WHEN


def test_write_attrs_ignores_derived_fields(memory_fs: MemoryFileSystem):
    memory_fs.write_all("/m.bin", b"abc")
    memory_fs.write_attrs("/m.bin", ResourceInfo(name="other", size=99))
    info = memory_fs.stat("/m.bin")
    assert (info.name, info.size) == ("m.bin", 3)


def test_content_is_invisible_until_writer_closes(memory_fs: MemoryFileSystem):
    writer = memory_fs.open_write("/pending.bin")
    writer.write(b"data")
    assert memory_fs.stat("/").is_dir
    assert not memory_fs.exists("/pending.bin")
    writer.close()
    assert memory_fs.read_all("/pending.bin") == b"data"


def test_rename_onto_ancestor_is_rejected(memory_fs: MemoryFileSystem):
    memory_fs.write_all("/up/down/f.bin", b"f")
    with pytest.raises(VfsIOError):
        memory_fs.rename("/up/down", "/up")
    assert memory_fs.read_all("/up/down/f.bin") == b"f"


def test_usable_after_close(memory_fs: MemoryFileSystem):
    memory_fs.write_all("/k.bin", b"k")
    memory_fs.close()
    assert memory_fs.read_all("/k.bin") == b"k"
