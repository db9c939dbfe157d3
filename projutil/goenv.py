"""Go toolchain environment helpers.

All reads and writes go through an injected ``Environment`` so callers (and
tests) decide whether the real process environment is touched.

Environment variables:
    GOPATH - path list of Go workspaces (default: ~/go)
    GOFLAGS - extra flags passed to every ``go`` invocation
    GO111MODULE - module mode switch (on, off, auto)
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, MutableMapping, Optional

from .errors import GoEnvError
from .logging import get_logger

GOPATH_ENV = "GOPATH"
GOFLAGS_ENV = "GOFLAGS"
GOMOD_ENV = "GO111MODULE"

_VERBOSE_FLAG = "-v"
_VERBOSE_FLAG_RE = re.compile(r"(.* )?-v(.* )?")

_GO_MODULES_HINT = (
    'using go modules requires GO111MODULE="on", "auto", or unset.'
    " More info: https://sdk.operatorframework.io/docs/golang/quickstart/#a-note-on-dependency-management"
)

_LOGGER = get_logger("goenv")


class Environment(MutableMapping[str, str]):
    """Key/value view over environment variables.

    Wraps ``os.environ`` by default; pass a plain dict to work on a private copy.
    """

    def __init__(self, values: Optional[MutableMapping[str, str]] = None) -> None:
        self._values: MutableMapping[str, str] = os.environ if values is None else values

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._values[key] = value

    def __delitem__(self, key: str) -> None:
        del self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def lookup(self, key: str) -> tuple[str, bool]:
        """Return ``(value, present)`` so unset and empty can be told apart."""
        if key in self._values:
            return self._values[key], True
        return "", False

    def home_dir(self) -> Path:
        """Return ``$HOME`` from this environment, falling back to the user's home."""
        home = self._values.get("HOME")
        if home:
            return Path(home).expanduser()
        return Path.home()


def _resolve(env: Optional[Environment]) -> Environment:
    return env if env is not None else Environment()


def set_go_verbose(env: Optional[Environment] = None) -> None:
    """Append ``-v`` to GOFLAGS unless it is already present."""
    env = _resolve(env)
    flags, present = env.lookup(GOFLAGS_ENV)
    if not present or not flags:
        env[GOFLAGS_ENV] = _VERBOSE_FLAG
    elif not _VERBOSE_FLAG_RE.search(flags):
        env[GOFLAGS_ENV] = f"{flags} {_VERBOSE_FLAG}"
    _LOGGER.debug("%s=%s", GOFLAGS_ENV, env[GOFLAGS_ENV])


def go_mod_on(env: Optional[Environment] = None) -> bool:
    """Return True when GO111MODULE leaves Go modules enabled."""
    value = _resolve(env).get(GOMOD_ENV, "")
    if value in ("", "on", "auto"):
        return True
    if value == "off":
        return False
    raise GoEnvError(f'unknown value for {GOMOD_ENV}: "{value}"')


def check_go_modules(env: Optional[Environment] = None) -> None:
    """Raise ``GoEnvError`` unless Go modules are enabled."""
    if not go_mod_on(env):
        raise GoEnvError(_GO_MODULES_HINT)


__all__ = [
    "Environment",
    "GOFLAGS_ENV",
    "GOMOD_ENV",
    "GOPATH_ENV",
    "check_go_modules",
    "go_mod_on",
    "set_go_verbose",
]
