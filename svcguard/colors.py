"""ANSI colour helpers for the commit report and log output."""

from __future__ import annotations

import os
import sys
from typing import TextIO

RED = "31"
YELLOW = "33"
CYAN = "36"


def use_color(stream: TextIO | None = None) -> bool:
    """Return True when ``stream`` (stdout by default) is a terminal and NO_COLOR is unset."""
    if os.environ.get("NO_COLOR"):
        return False
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


def colorize(code: str, text: str, stream: TextIO | None = None) -> str:
    if not use_color(stream):
        return text
    return f"\033[{code}m{text}\033[0m"


def red(text: str) -> str:
    return colorize(RED, text)


def yellow(text: str) -> str:
    return colorize(YELLOW, text)


def cyan(text: str) -> str:
    return colorize(CYAN, text)


__all__ = ["colorize", "cyan", "red", "use_color", "yellow"]
