"""OSC-8 hyperlink utilities for the JSONCLEAN CLI.

Detects whether the active text stream can render OSC-8 terminal hyperlinks
and renders a URL as a clickable link, falling back to plain text otherwise.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.
        Piped or redirected streams never get hyperlinks.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return an OSC-8 hyperlink, or plain text when unsupported.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself. When hyperlinks are
            unsupported the URL is always shown so it stays copyable.

    Returns:
        str: ``label`` wrapped in BEL-terminated OSC-8 sequences, or the bare URL.
    """
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"
