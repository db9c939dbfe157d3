"""Terminal notices shown to CLI users."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

NOTICE_COLOR = "\033[1;36m{}\033[0m"


def format_deprecation_warning(msg: str) -> str:
    """Return ``msg`` as a cyan/bold deprecation notice."""
    return NOTICE_COLOR.format(f"[Deprecation Notice] {msg}\n")


def print_deprecation_warning(msg: str, stream: Optional[TextIO] = None) -> None:
    """Write a colored deprecation notice to ``stream`` (stderr by default)."""
    target = stream if stream is not None else sys.stderr
    target.write(format_deprecation_warning(msg))
    target.flush()


__all__ = ["NOTICE_COLOR", "format_deprecation_warning", "print_deprecation_warning"]
