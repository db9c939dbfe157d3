"""Core data models shared across projutil components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:  # pragma: no cover - import for annotations only
    from .config import ProjectConfig


class ProjectType(str, Enum):
    """Operator project flavours recognised by the classifier."""

    GO = "go"
    ANSIBLE = "ansible"
    HELM = "helm"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StructuredConfig:
    """Layout evidence taken from a parsed PROJECT file."""

    config: "ProjectConfig"


@dataclass(frozen=True)
class LegacyHeuristic:
    """Layout evidence taken from conventional files under ``root``."""

    root: Path


LayoutSource = Union[StructuredConfig, LegacyHeuristic]


__all__ = ["LayoutSource", "LegacyHeuristic", "ProjectType", "StructuredConfig"]
