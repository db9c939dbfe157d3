"""Operator project detection and scaffold patching helpers."""

from .classifier import (
    ProjectClassifier,
    check_project_root,
    classify,
    is_project_root,
    layout_prefix_to_type,
)
from .config import ProjectConfig, has_project_file, load_project_config
from .errors import (
    ConfigError,
    GoEnvError,
    GoModParseError,
    MarkerNotFoundError,
    MissingNewlineError,
    ModulePathError,
    NotProjectRootError,
    PatchError,
    PatchIOError,
    ProjectError,
    UnknownProjectTypeError,
)
from .goenv import Environment, check_go_modules, go_mod_on, set_go_verbose
from .models import LayoutSource, LegacyHeuristic, ProjectType, StructuredConfig
from .modpath import resolve_module_path, set_wd_gopath
from .notices import print_deprecation_warning
from .patcher import append_content, insert_after_marker

__all__ = [
    "ConfigError",
    "Environment",
    "GoEnvError",
    "GoModParseError",
    "LayoutSource",
    "LegacyHeuristic",
    "MarkerNotFoundError",
    "MissingNewlineError",
    "ModulePathError",
    "NotProjectRootError",
    "PatchError",
    "PatchIOError",
    "ProjectClassifier",
    "ProjectConfig",
    "ProjectError",
    "ProjectType",
    "StructuredConfig",
    "UnknownProjectTypeError",
    "append_content",
    "check_go_modules",
    "check_project_root",
    "classify",
    "go_mod_on",
    "has_project_file",
    "insert_after_marker",
    "is_project_root",
    "layout_prefix_to_type",
    "load_project_config",
    "print_deprecation_warning",
    "resolve_module_path",
    "set_go_verbose",
    "set_wd_gopath",
]
