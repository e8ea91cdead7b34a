# src/task_tracker/core/colors.py

"""
Terminal color helpers.

- Honors NO_COLOR for complete disable.
- Disabled when stdout is not a TTY unless FORCE_COLOR is set.
- main() may override the decision from settings via set_enabled().
"""

from __future__ import annotations

import os
import re
import sys

from colorama import Fore, Style

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _detect_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    force = os.environ.get("FORCE_COLOR", "").strip().lower() in {"1", "true", "yes", "on"}
    return force or sys.stdout.isatty()


_enabled = _detect_enabled()


def set_enabled(flag: bool) -> None:
    global _enabled
    _enabled = bool(flag)


def is_enabled() -> bool:
    return _enabled


def style(text: str, *codes: str) -> str:
    """Wrap text in the given ANSI codes and reset afterwards."""
    if not _enabled or not codes:
        return text
    return "".join(codes) + text + Style.RESET_ALL


def bold(text: str) -> str:
    return style(text, Style.BRIGHT)


def red(text: str, bold: bool = False) -> str:
    return style(text, Fore.RED, *((Style.BRIGHT,) if bold else ()))


def green(text: str, bold: bool = False) -> str:
    return style(text, Fore.GREEN, *((Style.BRIGHT,) if bold else ()))


def yellow(text: str, bold: bool = False) -> str:
    return style(text, Fore.YELLOW, *((Style.BRIGHT,) if bold else ()))


def purple(text: str, bold: bool = False) -> str:
    # Historically "purple" in this tool is the terminal's blue.
    return style(text, Fore.BLUE, *((Style.BRIGHT,) if bold else ()))


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))
