"""Exception hierarchy for projutil helpers."""

from __future__ import annotations


class ProjectError(RuntimeError):
    """Base class for failures raised by projutil helpers."""


class NotProjectRootError(ProjectError):
    """Raised when a command runs outside of a project root directory."""


class ConfigError(ProjectError):
    """Raised when the PROJECT file cannot be read or parsed."""


class ModulePathError(ProjectError):
    """Raised when no usable module path can be derived."""


class GoModParseError(ModulePathError):
    """Raised when go.mod contains a malformed module directive."""


class GoEnvError(ProjectError):
    """Raised when the Go toolchain environment is unsuitable."""


class UnknownProjectTypeError(ProjectError):
    """Raised by callers that require a recognised project type."""

    def __init__(self, project_type: str = "") -> None:
        self.project_type = project_type
        if project_type:
            message = f'unknown operator type "{project_type}"'
        else:
            message = "unknown operator type"
        super().__init__(message)


class PatchError(ProjectError):
    """Base class for text patching failures."""


class MarkerNotFoundError(PatchError):
    """Raised when the marker string does not occur in the file."""


class MissingNewlineError(PatchError):
    """Raised when the marker sits on the final, unterminated line."""


class PatchIOError(PatchError):
    """Raised when the target file cannot be read or written."""


__all__ = [
    "ConfigError",
    "GoEnvError",
    "GoModParseError",
    "MarkerNotFoundError",
    "MissingNewlineError",
    "ModulePathError",
    "NotProjectRootError",
    "PatchError",
    "PatchIOError",
    "ProjectError",
    "UnknownProjectTypeError",
]
