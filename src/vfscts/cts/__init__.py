"""The conformance test suite.

Build a `CTS`, populate it with the standard ordered checks via `CTS.all()`,
run it against any `AbstractFileSystem` and render the `CTSResult`:

    cts = CTS()
    cts.all()
    result = cts.run(MemoryFileSystem())
    print(render_markdown(result))
"""

from .check import Check, CheckResult, CTSResult
from .errors import CheckFailedError
from .report import render_markdown, render_table
from .runner import CTS

__all__ = [
    "CTS",
    "CTSResult",
    "Check",
    "CheckFailedError",
    "CheckResult",
    "render_markdown",
    "render_table",
]
