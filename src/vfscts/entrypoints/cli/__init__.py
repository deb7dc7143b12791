"""The ``vfscts`` command-line interface."""
