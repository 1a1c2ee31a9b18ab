"""Public exports for the projector package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version
from pathlib import Path

from .config import (
    RESERVED_VERBS,
    ArgumentCountMismatch,
    Environment,
    MissingEnvironmentVariable,
    ProjectorError,
    WorkingDirectoryUnavailable,
    classify_operation,
    resolve_config,
    resolve_config_path,
    resolve_working_directory,
)
from .models import (
    Add,
    Operation,
    PrintAll,
    PrintOne,
    ProjectorSettings,
    RawOptions,
    Remove,
    ResolvedConfig,
)


def _load_local_version() -> str:
    """Return the package version declared in pyproject.toml when metadata is unavailable."""
    pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
    try:
        raw_text = pyproject_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return "0.0.0"

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError:
        return "0.0.0"

    project_section = data.get("project")
    if isinstance(project_section, dict):
        version_value = project_section.get("version")
        if isinstance(version_value, str) and version_value.strip():
            return version_value.strip()
    return "0.0.0"


try:
    __version__ = pkg_version("projector")
except PackageNotFoundError:
    __version__ = _load_local_version()

__all__ = [
    "RESERVED_VERBS",
    "Add",
    "ArgumentCountMismatch",
    "Environment",
    "MissingEnvironmentVariable",
    "Operation",
    "PrintAll",
    "PrintOne",
    "ProjectorError",
    "ProjectorSettings",
    "RawOptions",
    "Remove",
    "ResolvedConfig",
    "WorkingDirectoryUnavailable",
    "__version__",
    "classify_operation",
    "resolve_config",
    "resolve_config_path",
    "resolve_working_directory",
]
