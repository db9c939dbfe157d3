"""Filesystem helpers that treat "not found" as a negative answer."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Optional

from .errors import ProjectError

_MISSING_ERRORS = (FileNotFoundError, NotADirectoryError)


def stat_path(path: Path) -> Optional[os.stat_result]:
    """Return ``path.stat()`` or None when the path does not exist.

    Any other ``OSError`` (permissions, I/O) is raised as ``ProjectError``.
    """
    try:
        return path.stat()
    except _MISSING_ERRORS:
        return None
    except OSError as exc:
        raise ProjectError(f"error while checking {path}: {exc}") from exc


def path_exists(path: Path) -> bool:
    return stat_path(path) is not None


def dir_exists(path: Path) -> bool:
    result = stat_path(path)
    return result is not None and stat.S_ISDIR(result.st_mode)


__all__ = ["dir_exists", "path_exists", "stat_path"]
