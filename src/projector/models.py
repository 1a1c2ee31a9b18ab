"""Core data models for the projector CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("text", "json")


class _FrozenModel(BaseModel):
    """Immutable base shared by every projector model."""

    model_config = ConfigDict(frozen=True)


class PrintAll(_FrozenModel):
    """Dump every key/value pair in the store."""

    kind: Literal["print_all"] = "print_all"


class PrintOne(_FrozenModel):
    """Print the value stored under a single key."""

    kind: Literal["print_one"] = "print_one"
    key: str


class Add(_FrozenModel):
    """Insert or overwrite a key."""

    kind: Literal["add"] = "add"
    key: str
    value: str


class Remove(_FrozenModel):
    """Delete a key."""

    kind: Literal["remove"] = "remove"
    key: str


Operation = Annotated[PrintAll | PrintOne | Add | Remove, Field(discriminator="kind")]


class RawOptions(_FrozenModel):
    """Unvalidated inputs captured from the command line.

    Only presence or absence is recorded here; defaults are applied during
    resolution so this model never touches the environment.
    """

    args: tuple[str, ...] = ()
    config: Path | None = None
    pwd: Path | None = None


class ResolvedConfig(_FrozenModel):
    """Validated operation together with the paths it should run against."""

    operation: Operation
    working_directory: Path
    config_path: Path


class ProjectorSettings(_FrozenModel):
    """Global tool settings used while resolving defaults."""

    config_home_env: str = Field(default="XDG_CONFIG_HOME")
    config_dir_name: str = Field(default="projector")
    config_file_name: str = Field(default="projector.json")
    default_output_format: Literal["text", "json"] = "text"

    @field_validator("config_home_env", "config_dir_name", "config_file_name")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        """Trim names and refuse blank values."""
        normalized = value.strip()
        if not normalized:
            msg = "Setting cannot be blank"
            raise ValueError(msg)
        return normalized

    @field_validator("default_output_format", mode="before")
    @classmethod
    def normalize_format(cls, value: Any) -> str:
        """Lowercase the output format before literal validation."""
        return str(value).strip().casefold()

    @property
    def default_config_relative_path(self) -> Path:
        """Return the path appended beneath the configuration root."""
        return Path(self.config_dir_name) / self.config_file_name
