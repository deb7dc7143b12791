"""Service layer for VFS-CTS.

Convenience entry points over the VFS contract, most notably the ambient
*default filesystem* and the free functions (`read_all`, `rename`, `copy`, …)
that resolve against it.

Dependency rule: may import `vfscts.interfaces`, but not `vfscts.adapters`
or `vfscts.entrypoints`.
"""
