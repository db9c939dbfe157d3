"""Resolution of a project's Go module (import) path.

go.mod is consulted first since it usually holds the correct path verbatim.
Projects without go.mod must live under ``$GOPATH/src``; the module path is
then the working directory relative to that source root.

Example: ``github.com/example-inc/app-operator``
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .errors import ModulePathError
from .goenv import GOPATH_ENV, Environment
from .gomod import GO_MOD_FILE, parse_module_path
from .logging import get_logger
from .utils import path_exists

SRC_DIR = "src"

_LOGGER = get_logger("modpath")


def resolve_module_path(
    root: Path | str = ".", env: Optional[Environment] = None
) -> str:
    """Return the module path of the project at ``root``.

    Raises:
        GoModParseError: If go.mod exists but its module directive is malformed.
        ModulePathError: If neither go.mod nor GOPATH yields a usable path.
    """
    env = env if env is not None else Environment()
    wd = _clean(root)

    module = _module_from_gomod(wd / GO_MOD_FILE)
    if module:
        _LOGGER.debug("Module path %s read from %s", module, GO_MOD_FILE)
        return module

    gopath, present = env.lookup(GOPATH_ENV)
    if not present or not gopath:
        gopath_root = _clean(env.home_dir() / "go")
    else:
        # GOPATH may be a path list; pin it to the entry holding the project.
        gopath_root = set_wd_gopath(gopath, wd, env)

    src_root = gopath_root / SRC_DIR
    if not _is_within(wd, src_root):
        raise ModulePathError(
            "could not determine project repository path: $GOPATH not set, "
            "wd in default $HOME/go/src, or wd does not contain a go.mod"
        )
    module = wd.relative_to(src_root).as_posix().strip("/")
    if not module or module == ".":
        raise ModulePathError(f"{wd} is the GOPATH source root, not a project")
    _LOGGER.debug("Module path %s derived from %s", module, src_root)
    return module


def set_wd_gopath(
    current_gopath: str, wd: Path | str, env: Optional[Environment] = None
) -> Path:
    """Set GOPATH to the first entry of ``current_gopath`` containing ``wd``.

    Returns the selected entry. Raises ``ModulePathError`` when none match.
    """
    env = env if env is not None else Environment()
    parent = _clean(wd).parent
    for entry in current_gopath.split(os.pathsep):
        if not entry:
            continue
        candidate = _clean(entry)
        if _is_within(parent, candidate):
            env[GOPATH_ENV] = str(candidate)
            return candidate
    raise ModulePathError("project not in $GOPATH")


def _module_from_gomod(gomod: Path) -> str:
    if not path_exists(gomod):
        return ""
    try:
        data = gomod.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise ModulePathError(f"read {GO_MOD_FILE}: {exc}") from exc
    return parse_module_path(data, filename=GO_MOD_FILE)


def _clean(path: Path | str) -> Path:
    """Return an absolute path with "." and ".." segments collapsed."""
    return Path(os.path.abspath(path))


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.relative_to(parent)
    except ValueError:
        return False
    return True


__all__ = ["SRC_DIR", "resolve_module_path", "set_wd_gopath"]
