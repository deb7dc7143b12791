"""Unit tests for the report renderers."""

from __future__ import annotations

from rich.console import Console

from vfscts.cts import Check, CheckFailedError, CheckResult, CTSResult, render_markdown, render_table


def _noop(fs):  # pylint: disable=unused-argument
    return None


EMPTY = Check(test=_noop, name="Empty", description="")
RENAME = Check(test=_noop, name="Rename", description="")
CLOSE = Check(test=_noop, name="Close", description="")

RESULT = CTSResult(
    [
        CheckResult(EMPTY),
        CheckResult(RENAME, CheckFailedError("renaming of non-a to non-b must fail")),
        CheckResult(CLOSE),
    ]
)


def test_markdown_table():
    assert render_markdown(RESULT) == (
        "| CTS Check | Result |\n"
        "| --------- | ------ |\n"
        "| Empty | ✅ |\n"
        "| Rename | ❗ |\n"
        "| Close | ✅ |\n"
    )


def test_markdown_of_empty_result_has_only_header():
    assert render_markdown(CTSResult()).count("\n") == 2


def _render(table) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(table)
    return console.export_text()


def test_rich_table_includes_details():
    text = _render(render_table(RESULT))
    assert "CTS Check" in text
    assert "Detail" in text
    assert "CheckFailedError: renaming of non-a to non-b must fail" in text
    assert text.index("Empty") < text.index("Rename") < text.index("Close")


def test_rich_table_without_details():
    table = render_table(RESULT, details=False)
    assert len(table.columns) == 2
    assert "Detail" not in _render(table)
