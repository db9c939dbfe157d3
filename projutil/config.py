"""Loading of the structured PROJECT file written by the scaffolder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .logging import get_logger
from .utils import path_exists

PROJECT_FILE = "PROJECT"

VERSION_2 = "2"

_LOGGER = get_logger("config")


@dataclass
class ProjectConfig:
    """Represents the settings defined in a PROJECT file."""

    version: str = ""
    layout: str = ""
    domain: Optional[str] = None
    repo: Optional[str] = None
    project_name: Optional[str] = None
    multigroup: bool = False

    def is_v2(self) -> bool:
        return self.version == VERSION_2


def project_file_path(root: Path | str = ".") -> Path:
    return Path(root) / PROJECT_FILE


def has_project_file(root: Path | str = ".") -> bool:
    """Return True when a PROJECT file exists under ``root``."""
    return path_exists(project_file_path(root))


def load_project_config(root: Path | str = ".") -> ProjectConfig:
    """Read and parse the PROJECT file under ``root``.

    Raises:
        ConfigError: If the file is unreadable, malformed, or not a mapping.
    """
    config_file = project_file_path(root)
    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a mapping at the root")

    config = ProjectConfig(
        version=_as_str(data.get("version")) or "",
        layout=_as_str(data.get("layout")) or "",
        domain=_as_str(data.get("domain")),
        repo=_as_str(data.get("repo")),
        project_name=_as_str(data.get("projectName")),
        multigroup=bool(_as_bool(data.get("multigroup"))),
    )
    _LOGGER.debug(
        "Loaded %s (version=%r, layout=%r)", config_file, config.version, config.layout
    )
    return config


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "PROJECT_FILE",
    "ProjectConfig",
    "has_project_file",
    "load_project_config",
    "project_file_path",
]
