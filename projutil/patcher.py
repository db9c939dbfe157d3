"""Marker-based text insertion for scaffolded files."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import MarkerNotFoundError, MissingNewlineError, PatchIOError
from .logging import get_logger

DEFAULT_PERMISSION = 0o644

# surrogateescape round-trips bytes that are not valid UTF-8.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"

_LOGGER = get_logger("patcher")


def append_content(contents: str, marker: str, new_content: str) -> str:
    """Return ``contents`` with ``new_content`` on the line after the last ``marker``.

    The text is treated as opaque; callers pick a marker and content that keep
    the target format valid.
    """
    marker_index = contents.rfind(marker)
    if marker_index == -1:
        raise MarkerNotFoundError(f"no prior string {marker} in file contents")

    newline_index = contents.find("\n", marker_index)
    if newline_index == -1:
        raise MissingNewlineError(
            f"no new line at the end of string {contents[marker_index:]}"
        )

    index = newline_index + 1
    return contents[:index] + new_content + contents[index:]


def insert_after_marker(path: Path | str, marker: str, new_content: str) -> None:
    """Insert ``new_content`` after the last line containing ``marker`` in ``path``.

    Bytes that are not valid UTF-8 are carried through unchanged. The file is
    rewritten in place (not atomically) with mode 0644, and is left untouched
    when the marker is missing, sits on an unterminated last line, or the new
    contents cannot be encoded.
    """
    target = Path(path)
    try:
        raw = target.read_bytes()
    except OSError as exc:
        raise PatchIOError(f"error in getting contents from the file, {exc}") from exc

    modified = append_content(raw.decode(_ENCODING, _ERRORS), marker, new_content)

    try:
        data = modified.encode(_ENCODING, _ERRORS)
    except UnicodeError as exc:
        raise PatchIOError(f"error encoding modified contents, {exc}") from exc

    try:
        _write_file(target, data)
    except OSError as exc:
        raise PatchIOError(f"error writing modified contents to file, {exc}") from exc
    _LOGGER.debug("Inserted %d characters into %s", len(new_content), target)


def _write_file(path: Path, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, DEFAULT_PERMISSION)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


__all__ = ["DEFAULT_PERMISSION", "append_content", "insert_after_marker"]
