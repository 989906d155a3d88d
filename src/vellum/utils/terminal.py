"""ANSI styling for component error diagnostics.

Colors are applied only when stdout is a TTY. ``NO_COLOR`` disables them and
``FORCE_COLOR`` re-enables them regardless of TTY detection.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_CODES = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "green": "\033[32m",
    "cyan": "\033[36m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
}

StyleName = Literal["reset", "bold", "dim", "green", "cyan", "bright_red", "bright_green"]

_ANSI_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    """Whether diagnostics are being colored in this process."""
    return _USE_COLORS


def style(text: str, *styles: StyleName) -> str:
    """Wrap ``text`` in the given ANSI styles, or return it unchanged.

    Example:
        >>> style("V-CFG-001", "bright_red", "bold")
        '\\033[91m\\033[1mV-CFG-001\\033[0m'  # when colors are enabled
    """
    if not _USE_COLORS or not styles:
        return text
    prefix = "".join(_CODES[name] for name in styles)
    return f"{prefix}{text}{_CODES['reset']}"


def strip_styles(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)


def error_code(text: str) -> str:
    return style(text, "bright_red", "bold")


def component_name(text: str) -> str:
    return style(text, "cyan")


def hint(text: str) -> str:
    return style(text, "green")


def suggestion(text: str) -> str:
    return style(text, "bright_green", "bold")


def dim_text(text: str) -> str:
    return style(text, "dim")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix ``message`` with a styled error code when one is given."""
    if code:
        return f"{error_code(code)}: {message}"
    return message
