"""Attribute capability rules.

Metadata is exchanged with backends through *attribute objects*. A value may
act as an attribute target (for `read_attrs`/`scan`) or source (for
`write_attrs`) only if it exposes an introspectable shape: it must be a
dataclass **instance** with at least one public field. Anything else (strings,
numbers, classes, objects that only carry private members) is rejected with
`UnsupportedAttributesError`; it is never silently ignored.

Fields are matched by name against `ResourceInfo`; target fields with no
counterpart are left untouched.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from .errors import UnsupportedAttributesError
from .resources import ResourceInfo

_RESOURCE_FIELDS = frozenset(f.name for f in dataclasses.fields(ResourceInfo))


def _public_fields(value: object) -> tuple[dataclasses.Field[Any], ...]:
    return tuple(f for f in dataclasses.fields(value) if not f.name.startswith("_"))  # type: ignore[arg-type]


def _is_frozen(value: object) -> bool:
    return bool(getattr(value, "__dataclass_params__").frozen)


def is_supported_attrs_target(value: object) -> bool:
    """Return True if ``value`` may be used as an attribute target or source."""
    if isinstance(value, type) or not dataclasses.is_dataclass(value):
        return False
    return bool(_public_fields(value))


def scan_attrs(info: ResourceInfo, target: object, path: str | None = None) -> None:
    """Copy ``info`` into the matching public fields of ``target``.

    Args:
        info: Metadata read from the backend.
        target: Attribute object to fill in place.
        path: Path the metadata belongs to (used in error messages).

    Raises:
        UnsupportedAttributesError: If ``target`` is not a supported attribute
            object, or is a frozen dataclass that cannot be filled.
    """
    if not is_supported_attrs_target(target) or _is_frozen(target):
        raise UnsupportedAttributesError(target, path)
    for f in _public_fields(target):
        if f.name in _RESOURCE_FIELDS:
            setattr(target, f.name, getattr(info, f.name))


def extract_attrs(source: object, path: str | None = None) -> dict[str, Any]:
    """Return the public fields of ``source`` that correspond to `ResourceInfo` fields.

    Raises:
        UnsupportedAttributesError: If ``source`` is not a supported attribute object.
    """
    if not is_supported_attrs_target(source):
        raise UnsupportedAttributesError(source, path)
    return {
        f.name: getattr(source, f.name)
        for f in _public_fields(source)
        if f.name in _RESOURCE_FIELDS
    }
