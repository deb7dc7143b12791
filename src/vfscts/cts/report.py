"""Rendering of `CTSResult` for humans.

Both renderers are pure: they only read the result and produce text (or a
rich renderable). Rows follow execution order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from .check import CTSResult

PASS_MARKER = "✅"  # pragma: no mutate
FAIL_MARKER = "❗"  # pragma: no mutate

HEADER = ("CTS Check", "Result")


def render_markdown(result: CTSResult) -> str:
    """Render ``result`` as a two-column Markdown table.

    Example:
        ```
        | CTS Check | Result |
        | --------- | ------ |
        | Empty | ✅ |
        | Rename | ❗ |
        ```
    """
    lines = [
        f"| {HEADER[0]} | {HEADER[1]} |",
        f"| {'-' * len(HEADER[0])} | {'-' * len(HEADER[1])} |",
    ]
    for check_result in result:
        marker = PASS_MARKER if check_result.passed else FAIL_MARKER
        lines.append(f"| {check_result.check.name} | {marker} |")
    return "\n".join(lines) + "\n"


def render_table(result: CTSResult, *, details: bool = True) -> Table:
    """Render ``result`` as a `rich.table.Table`.

    Args:
        result: The CTS outcome.
        details: Add a third column with the failure message of failed checks.
    """
    table = Table(title="VFS conformance", show_lines=False)
    table.add_column(HEADER[0], style="bold")
    table.add_column(HEADER[1], justify="center")
    if details:
        table.add_column("Detail", overflow="fold")

    for check_result in result:
        marker = PASS_MARKER if check_result.passed else FAIL_MARKER
        row = [check_result.check.name, marker]
        if details:
            failure = check_result.result
            row.append("" if failure is None else f"{type(failure).__name__}: {failure}")
        table.add_row(*row)
    return table
