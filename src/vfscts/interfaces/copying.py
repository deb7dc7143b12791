"""Backend-agnostic recursive copy.

Implements `AbstractFileSystem.copy` purely in terms of the abstract
operations, so every backend gets a working copy for free and may override it
with a native one.

The copy runs in two phases:

1. **Scan**: the source tree is enumerated once (`read_dir_recur`) and
   ``on_scan`` fires per object with running object/byte totals.
2. **Transfer**: directories are created and files streamed chunk by chunk;
   ``on_progress`` fires per chunk and ``on_copied`` once per finished object.

The plan is captured before anything is written, so copying a directory into
one of its own subdirectories terminates.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .path import Path
from .resources import CopyOptions

if TYPE_CHECKING:
    from .filesystem import AbstractFileSystem
    from .resources import DirEntry

logger = logging.getLogger(__name__)


def copy_resources(
    fs: AbstractFileSystem, src: Path, dst: Path, options: CopyOptions | None
) -> None:
    """Copy ``src`` (file or directory) to ``dst`` within ``fs``.

    Args:
        fs: Filesystem holding both source and destination.
        src: Existing source path.
        dst: Destination path; created (or overwritten) as needed.
        options: Optional callbacks; ``None`` disables all notifications.

    Raises:
        ResourceNotFoundError: If ``src`` does not exist.
    """
    opts = options if options is not None else CopyOptions()
    info = fs.stat(src)
    if src == dst:
        logger.debug("Copy source and destination are identical (%s); nothing to do", src)
        return

    if not info.is_dir:
        if opts.on_scan:
            opts.on_scan(src, 1, info.size)
        copied = _copy_file(fs, src, dst, info.size, opts)
        if opts.on_copied:
            opts.on_copied(src, 1, copied)
        return

    plan = _scan(fs, src, opts)
    logger.debug("Copying %d object(s) from %s to %s", len(plan), src, dst)
    fs.mkdirs(dst)

    objects = 0
    transferred = 0
    for entry in plan:
        target = dst.child("/".join(entry.path.relative_to(src)))
        if entry.resource.is_dir:
            fs.mkdirs(target)
        else:
            transferred += _copy_file(fs, entry.path, target, entry.resource.size, opts)
        objects += 1
        if opts.on_copied:
            opts.on_copied(entry.path, objects, transferred)


def _scan(fs: AbstractFileSystem, src: Path, opts: CopyOptions) -> list[DirEntry]:
    plan: list[DirEntry] = []
    total_bytes = 0
    for entry in fs.read_dir_recur(src):
        if not entry.resource.is_dir:
            total_bytes += entry.resource.size
        plan.append(entry)
        if opts.on_scan:
            opts.on_scan(entry.path, len(plan), total_bytes)
    return plan


def _copy_file(
    fs: AbstractFileSystem, src: Path, dst: Path, size: int, opts: CopyOptions
) -> int:
    """Stream one file and return the number of bytes copied."""
    copied = 0
    with fs.open_read(src) as reader, fs.open_write(dst) as writer:
        for chunk in iter(lambda: reader.read(opts.chunk_size), b""):
            copied += writer.write(chunk)
            if opts.on_progress:
                opts.on_progress(src, dst, copied, size)
    return copied
