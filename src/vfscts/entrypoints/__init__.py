"""Outer surfaces of VFS-CTS (currently only the command-line interface)."""
