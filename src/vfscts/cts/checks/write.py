"""Write any / Write and Read: byte-exact writes across a path and length matrix."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vfscts.interfaces import CopyOptions, Path

from ..check import Check
from ..datagen import generate_test_bytes
from ..errors import CheckFailedError

if TYPE_CHECKING:
    from vfscts.interfaces import AbstractFileSystem

logger = logging.getLogger(__name__)

# root (twice), absolute single segment, absolute nested, relative nested
WRITE_BASIC_PATHS = ("", "/", "/canWrite0", "/canWrite0/subfolder", "canWrite0_1/subfolder1/subfolder2")
WRITE_AND_READ_PATHS = ("", "/", "/canWrite1", "/canWrite1/subfolder", "canWrite1_1/subfolder1/subfolder2")

# boundary sizes around typical block sizes
PAYLOAD_LENGTHS = (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 512, 1024, 4096, 4097, 8192, 8193)
LARGE_PAYLOAD_LENGTH = 128 * 1024 * 3


def _write_payload(fs: AbstractFileSystem, path: Path, payload: bytes) -> None:
    with fs.open_write(path) as writer:
        written = writer.write(payload)
    if written != len(payload):
        raise CheckFailedError(
            f"expected to write {len(payload)} bytes but just wrote {written}"
        )


def check_write_basic(fs: AbstractFileSystem) -> None:
    """Write ``<length>.bin`` below every base path and verify the write counts."""
    for base in WRITE_BASIC_PATHS:
        for length in PAYLOAD_LENGTHS:
            _write_payload(fs, Path(base).child(f"{length}.bin"), generate_test_bytes(length))


def _log_scan(path: Path, objects: int, total_bytes: int) -> None:
    logger.info("found obj # %d %s, total %d bytes", objects, path, total_bytes)


def _log_copied(path: Path, objects: int, total_bytes: int) -> None:
    logger.info("completed obj # %d %s, total %d bytes", objects, path, total_bytes)


def _log_progress(src: Path, dst: Path, copied: int, size: int) -> None:
    percent = 100.0 if size == 0 else copied / size * 100
    logger.info("copied %s -> %s %.1f%%", src, dst, percent)


LOGGING_COPY_OPTIONS = CopyOptions(
    on_scan=_log_scan, on_copied=_log_copied, on_progress=_log_progress
)


def check_write_and_read(fs: AbstractFileSystem) -> None:
    """Round-trip every payload, then exercise directory and file copies."""
    for base in WRITE_AND_READ_PATHS:
        for length in (*PAYLOAD_LENGTHS, LARGE_PAYLOAD_LENGTH):
            payload = generate_test_bytes(length)
            child = Path(base).child(f"{length}.bin")
            _write_payload(fs, child, payload)
            data = fs.read_all(child)
            if data != payload:
                raise CheckFailedError(
                    f"expected that written and read bytes of {child} are equal "
                    f"({len(payload)} bytes written, {len(data)} bytes read)"
                )

    fs.copy("canWrite1_1", "canWrite2", None)
    fs.copy("canWrite1_1", "canWrite2", LOGGING_COPY_OPTIONS)
    fs.copy("512.bin", "copy512.bin", None)


WRITE_BASIC_CHECK = Check(
    test=check_write_basic,
    name="Write any",
    description="Write some simple files with various lengths in various paths",
)

WRITE_AND_READ_CHECK = Check(
    test=check_write_and_read,
    name="Write and Read",
    description="Write some stuff and read it again",
)
