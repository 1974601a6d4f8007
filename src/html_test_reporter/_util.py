"""Shared utilities for html-test-reporter: console logging, debug output, safe reads."""

import os
import sys
from pathlib import Path
from typing import Tuple

_DEBUG = bool(os.environ.get("HTML_TEST_REPORTER_DEBUG", ""))

_PREFIX = "html-test-reporter"
_RESET = "\x1b[0m"
_COLORS = {
    "default": "\x1b[37m",
    "success": "\x1b[32m",
    "error": "\x1b[31m",
}


def debug(label: str, msg: str) -> None:
    """Print a debug message to stderr when HTML_TEST_REPORTER_DEBUG is set."""
    if _DEBUG:
        print(f"[{_PREFIX}] {label}: {msg}", file=sys.stderr)


def log_message(kind: str, msg: str) -> Tuple[str, str]:
    """Print a colored status line and return (color, line).

    Unknown kinds fall back to the default color.  Errors go to stderr.
    """
    color = _COLORS.get(kind, _COLORS["default"])
    line = f"{_PREFIX} >> {msg}"
    stream = sys.stderr if kind == "error" else sys.stdout
    print(f"{color}{line}{_RESET}", file=stream)
    return color, line


def safe_read(p: Path, label: str = "") -> str:
    """Read a text file, returning '' on permission/OS errors."""
    try:
        return p.read_text(encoding="utf-8")
    except (PermissionError, OSError) as exc:
        if label:
            debug(label, f"cannot read {p}: {exc}")
        return ""
