"""Shared pytest fixtures for projector."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from projector.config import Environment

from .payloads import ProjectorSettingsPayload, RawOptionsPayload

EnvironmentFactory = Callable[..., Environment]


@pytest.fixture
def config_home(tmp_path: Path) -> Path:
    """Provide a directory standing in for $XDG_CONFIG_HOME."""
    return tmp_path / "config-home"


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Provide a directory standing in for the process working directory."""
    path = tmp_path / "workdir"
    path.mkdir()
    return path


@pytest.fixture
def make_environment(config_home: Path, workdir: Path) -> EnvironmentFactory:
    """Return a factory for fake environments with overridable variables."""

    def _factory(
        variables: dict[str, str] | None = None,
        current_dir: Callable[[], Path] | None = None,
    ) -> Environment:
        env_vars = {"XDG_CONFIG_HOME": str(config_home)} if variables is None else variables
        return Environment(variables=env_vars, current_dir=current_dir or (lambda: workdir))

    return _factory


@pytest.fixture
def raw_options_payload(tmp_path: Path) -> RawOptionsPayload:
    """Provide canonical raw options for tests."""
    return {
        "args": ["add", "foo", "bar"],
        "config": tmp_path / "store.json",
        "pwd": tmp_path / "project",
    }


@pytest.fixture
def settings_payload() -> ProjectorSettingsPayload:
    """Provide overrides for the ProjectorSettings model."""
    return {
        "config_home_env": " PROJECTOR_HOME ",
        "config_dir_name": "proj",
        "config_file_name": "store.json",
        "default_output_format": "JSON",  # type: ignore[typeddict-item]
    }
