"""Project root detection and operator type classification."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

from .config import has_project_file, load_project_config
from .errors import NotProjectRootError
from .logging import get_logger
from .models import LayoutSource, LegacyHeuristic, ProjectType, StructuredConfig
from .utils import dir_exists, path_exists

BUILD_DOCKERFILE = Path("build") / "Dockerfile"
MAIN_FILE = Path("main.go")
MANAGER_MAIN_FILE = Path("cmd") / "manager" / "main.go"
ROLES_DIR = Path("roles")
MOLECULE_DIR = Path("molecule")
REQUIREMENTS_FILE = Path("requirements.yml")

# Checked in order; the first matching prefix wins.
_LAYOUT_PREFIXES: Tuple[Tuple[str, ProjectType], ...] = (
    ("go", ProjectType.GO),
    ("helm", ProjectType.HELM),
    ("ansible", ProjectType.ANSIBLE),
)

_LOGGER = get_logger("classifier")


def layout_prefix_to_type(layout: str) -> ProjectType:
    """Map a plugin/layout key such as ``go.kubebuilder.io/v2`` to a project type."""
    for prefix, project_type in _LAYOUT_PREFIXES:
        if layout.startswith(prefix):
            return project_type
    return ProjectType.UNKNOWN


class ProjectClassifier:
    """Answers root-ness and type questions about a project directory.

    Every call re-reads the filesystem; nothing is cached between calls.
    """

    def __init__(self, root: Path | str = ".") -> None:
        self.root = Path(root)

    def is_project_root(self) -> bool:
        """Return True if ``root`` holds a PROJECT file or a legacy build/Dockerfile."""
        if has_project_file(self.root):
            return True
        # Legacy layouts have no PROJECT file but always ship build/Dockerfile.
        return path_exists(self.root / BUILD_DOCKERFILE)

    def check_project_root(self) -> None:
        """Raise ``NotProjectRootError`` unless ``root`` is a project root."""
        if not self.is_project_root():
            raise NotProjectRootError(
                "must run command in project root dir: project structure requires "
                f"{BUILD_DOCKERFILE.as_posix()}"
            )

    def layout_source(self) -> LayoutSource:
        """Return where classification evidence should come from."""
        if has_project_file(self.root):
            return StructuredConfig(load_project_config(self.root))
        return LegacyHeuristic(self.root)

    def classify(self) -> ProjectType:
        """Return the project type of ``root``; call after ``check_project_root``."""
        source = self.layout_source()
        checks: List[Tuple[ProjectType, Callable[[LayoutSource], bool]]] = [
            (ProjectType.GO, self._is_go),
            (ProjectType.ANSIBLE, self._is_ansible),
            (ProjectType.HELM, self._is_helm),
        ]
        for project_type, check in checks:
            if check(source):
                _LOGGER.debug("Classified %s as %s", self.root, project_type)
                return project_type
        _LOGGER.debug("Could not classify %s", self.root)
        return ProjectType.UNKNOWN

    def is_go(self) -> bool:
        return self._is_go(self.layout_source())

    def is_ansible(self) -> bool:
        return self._is_ansible(self.layout_source())

    def is_helm(self) -> bool:
        return self._is_helm(self.layout_source())

    def _is_go(self, source: LayoutSource) -> bool:
        if isinstance(source, StructuredConfig):
            return (
                source.config.is_v2()
                or layout_prefix_to_type(source.config.layout) is ProjectType.GO
            )
        return path_exists(source.root / MANAGER_MAIN_FILE) or path_exists(
            source.root / MAIN_FILE
        )

    def _is_ansible(self, source: LayoutSource) -> bool:
        if isinstance(source, StructuredConfig):
            return layout_prefix_to_type(source.config.layout) is ProjectType.ANSIBLE
        return (
            dir_exists(source.root / ROLES_DIR)
            or dir_exists(source.root / MOLECULE_DIR)
            or path_exists(source.root / REQUIREMENTS_FILE)
        )

    def _is_helm(self, source: LayoutSource) -> bool:
        if isinstance(source, StructuredConfig):
            return layout_prefix_to_type(source.config.layout) is ProjectType.HELM
        return False


def is_project_root(root: Path | str = ".") -> bool:
    return ProjectClassifier(root).is_project_root()


def check_project_root(root: Path | str = ".") -> None:
    ProjectClassifier(root).check_project_root()


def classify(root: Path | str = ".") -> ProjectType:
    return ProjectClassifier(root).classify()


__all__ = [
    "ProjectClassifier",
    "check_project_root",
    "classify",
    "is_project_root",
    "layout_prefix_to_type",
]
