"""OSC-8 hyperlink utilities for the VFS-CTS CLI.

Detects whether the active text stream supports OSC-8 terminal hyperlinks and
renders a URL as a clickable link, falling back to plain text otherwise.
"""

import os
import sys
from typing import TextIO

_OSC8_PROGRAMS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether ``stream`` supports OSC-8 hyperlinks.

    Returns ``False`` for anything that is not a TTY; otherwise consults a
    conservative allowlist of terminal identifiers.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    terminal_program = (os.getenv("TERM_PROGRAM") or "").lower()
    return bool(
        terminal_program in _OSC8_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return ``label`` (default: ``url``) linked to ``url`` when supported.

    Uses BEL (``\\x07``) as the OSC-8 terminator.
    """
    text = label or url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
