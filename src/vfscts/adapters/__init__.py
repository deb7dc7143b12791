"""Adapters (infrastructure) for VFS-CTS.

Provide concrete implementations of the VFS contract defined in
`vfscts.interfaces` (in-memory, local directory, SQLAlchemy-backed) plus the
database wiring they need (engines, metadata, column types).

Dependency rule: may import `vfscts.interfaces`; the interfaces must not
import this package.
"""
