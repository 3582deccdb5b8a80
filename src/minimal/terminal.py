"""Terminal color utilities for error diagnostics.

ANSI colors with TTY detection. Honors the NO_COLOR and FORCE_COLOR
environment variables (https://no-color.org/).
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

_COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "cyan": "\033[36m",
    "green": "\033[32m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
}

ColorName = Literal["reset", "bold", "cyan", "green", "bright_red", "bright_green"]

_ANSI_ESCAPE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _should_use_colors() -> bool:
    """Decide once whether diagnostics are colorized.

    FORCE_COLOR wins over NO_COLOR; otherwise colors are used only when
    stdout is a TTY.
    """
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def colorize(text: str, *colors: ColorName) -> str:
    """Wrap text in ANSI codes, or return it unchanged when colors are off.

    Example:
        >>> colorize("M-DSP-001", "bright_red", "bold")
        '\\033[91m\\033[1mM-DSP-001\\033[0m'  # if colors supported
    """
    if not _USE_COLORS or not colors:
        return text
    prefix = "".join(_COLORS.get(color, "") for color in colors)
    if not prefix:
        return text
    return f"{prefix}{text}{_COLORS['reset']}"


def strip_colors(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return _ANSI_ESCAPE.sub("", text)


def error_code(text: str) -> str:
    return colorize(text, "bright_red", "bold")


def name(text: str) -> str:
    """Color a helper or variable name (cyan)."""
    return colorize(text, "cyan")


def hint(text: str) -> str:
    return colorize(text, "green")


def suggestion(text: str) -> str:
    """Color a 'Did you mean?' suggestion."""
    return colorize(text, "bright_green", "bold")


def format_error_header(code: str | None, message: str) -> str:
    """Prefix a message with its colored error code, when there is one."""
    if code:
        return f"{error_code(code)}: {message}"
    return message
