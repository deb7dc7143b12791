"""VFS-CTS

A conformance test suite for virtual-file-system backends. It runs an ordered
list of checks against any `AbstractFileSystem` implementation and reports
which parts of the contract (paths, byte-exact I/O, rename preconditions,
listings, attribute capability checks, copy) the backend honors.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
