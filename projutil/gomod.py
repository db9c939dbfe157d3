"""Extract the module path declared in a go.mod file."""

from __future__ import annotations

import json
import re
from typing import List, Optional

from .errors import GoModParseError

GO_MOD_FILE = "go.mod"

# module github.com/foo/bar  |  module "github.com/foo/bar"  |  module (
_MODULE_RE = re.compile(r"^module(?:\s+(.*))?$")


def _strip_comment(line: str) -> str:
    index = line.find("//")
    if index != -1:
        line = line[:index]
    return line.strip()


def _parse_path(raw: str, filename: str, lineno: int) -> str:
    tokens = raw.split()
    if len(tokens) != 1:
        raise GoModParseError(f"{filename}:{lineno}: usage: module module/path")
    token = tokens[0]
    if token.startswith('"'):
        try:
            value = json.loads(token)
        except ValueError as exc:
            raise GoModParseError(f"{filename}:{lineno}: invalid quoted string {token}") from exc
        if not isinstance(value, str):
            raise GoModParseError(f"{filename}:{lineno}: invalid quoted string {token}")
        return value
    return token


def parse_module_path(data: str, filename: str = GO_MOD_FILE) -> str:
    """Return the module path declared in go.mod contents, or "" when absent.

    Raises:
        GoModParseError: On a malformed or repeated ``module`` directive.
    """
    found: List[str] = []
    in_block = False
    block_start: Optional[int] = None

    for lineno, raw_line in enumerate(data.splitlines(), start=1):
        line = _strip_comment(raw_line)
        if not line:
            continue

        if in_block:
            if line == ")":
                in_block = False
                continue
            found.append(_parse_path(line, filename, lineno))
            continue

        match = _MODULE_RE.match(line)
        if match is None:
            continue
        rest = (match.group(1) or "").strip()
        if rest == "(":
            in_block = True
            block_start = lineno
            continue
        if not rest:
            raise GoModParseError(f"{filename}:{lineno}: usage: module module/path")
        found.append(_parse_path(rest, filename, lineno))

    if in_block:
        raise GoModParseError(f"{filename}:{block_start}: unterminated module block")
    if len(found) > 1:
        raise GoModParseError(f"{filename}: repeated module statement")
    return found[0] if found else ""


__all__ = ["GO_MOD_FILE", "parse_module_path"]
