"""Interfaces (application boundary) for VFS-CTS.

Defines the virtual-file-system contract that every backend under test must
implement: the `Path` value type, the error taxonomy, resource metadata DTOs,
the attribute capability rules, and the `AbstractFileSystem` ABC.

Dependency rule: this package is independent; do not import from any other
`vfscts.*` modules. It may be imported by `vfscts.service_layer`,
`vfscts.adapters`, `vfscts.cts`, and `vfscts.entrypoints`.
"""

from .attributes import extract_attrs, is_supported_attrs_target, scan_attrs
from .errors import (
    ErrorKind,
    ResourceNotFoundError,
    UnsupportedAttributesError,
    UnsupportedOperationError,
    VfsError,
    VfsIOError,
    error_kind,
    unwrap_unsupported_attributes_error,
    unwrap_unsupported_operation_error,
)
from .filesystem import AbstractDirCursor, AbstractFileSystem, AbstractWriter
from .path import Path, PathLike
from .resources import CopyOptions, DirEntry, ResourceInfo

__all__ = [
    "AbstractDirCursor",
    "AbstractFileSystem",
    "AbstractWriter",
    "CopyOptions",
    "DirEntry",
    "ErrorKind",
    "Path",
    "PathLike",
    "ResourceInfo",
    "ResourceNotFoundError",
    "UnsupportedAttributesError",
    "UnsupportedOperationError",
    "VfsError",
    "VfsIOError",
    "error_kind",
    "extract_attrs",
    "is_supported_attrs_target",
    "scan_attrs",
    "unwrap_unsupported_attributes_error",
    "unwrap_unsupported_operation_error",
]
