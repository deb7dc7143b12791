"""Hierarchical path value type for the VFS contract.

A `Path` is an immutable, string-like identifier. Every path is normalized to
its absolute, slash-separated form on construction, so two spellings of the
same location always compare equal:

    >>> Path("")
    '/'
    >>> Path("canWrite0_1/subfolder1/")
    '/canWrite0_1/subfolder1'
    >>> Path("/a/./b/../c")
    '/a/c'

Deriving a child (`Path.child`) returns a *new* path; the parent is never
mutated.
"""

from __future__ import annotations

from typing import TypeAlias

SEPARATOR = "/"
CURRENT_DIR = "."
PARENT_DIR = ".."


def _normalize_segments(raw: str) -> tuple[str, ...]:
    """Split ``raw`` into clean segments, resolving ``.`` and ``..``.

    ``..`` pops the previous segment and never climbs above the root.
    Whitespace is part of a segment name and is kept verbatim.
    """
    result: list[str] = []
    for segment in raw.split(SEPARATOR):
        if not segment or segment == CURRENT_DIR:
            continue
        if segment == PARENT_DIR:
            if result:
                result.pop()
            continue
        result.append(segment)
    return tuple(result)


class Path(str):
    """Immutable, normalized, absolute VFS path.

    `Path` subclasses `str`, so it can be used anywhere a string is expected
    (dict keys, logging, SQL parameters) while still offering hierarchical
    helpers.
    """

    __slots__ = ()

    def __new__(cls, value: str | Path = "") -> Path:
        if isinstance(value, Path):
            return value
        segments = _normalize_segments(str(value))
        return super().__new__(cls, SEPARATOR + SEPARATOR.join(segments))

    def __repr__(self) -> str:
        return f"Path({str.__repr__(self)})"

    @property
    def segments(self) -> tuple[str, ...]:
        """Path components without separators (empty for the root)."""
        if self.is_root:
            return ()
        return tuple(self[1:].split(SEPARATOR))

    @property
    def is_root(self) -> bool:
        return str.__eq__(self, SEPARATOR)

    @property
    def name(self) -> str:
        """Last segment, or an empty string for the root."""
        segments = self.segments
        return segments[-1] if segments else ""

    @property
    def parent(self) -> Path:
        """Containing directory; the root is its own parent."""
        return Path(SEPARATOR.join(self.segments[:-1]))

    def child(self, name: str) -> Path:
        """Return a new path one (or more, if ``name`` contains separators) level deeper.

        Args:
            name: Segment(s) to append.

        Returns:
            Path: The derived path. ``self`` is unchanged.
        """
        return Path(f"{self}{SEPARATOR}{name}")

    def is_within(self, other: str | Path) -> bool:
        """Return True if ``self`` equals ``other`` or lies below it."""
        base = Path(other)
        if base.is_root:
            return True
        return self == base or self.startswith(base + SEPARATOR)

    def relative_to(self, other: str | Path) -> tuple[str, ...]:
        """Segments of ``self`` below ``other``.

        Raises:
            ValueError: If ``self`` is not within ``other``.
        """
        base = Path(other)
        if not self.is_within(base):
            raise ValueError(f"{self!s} is not within {base!s}")
        return self.segments[len(base.segments) :]


PathLike: TypeAlias = str | Path
