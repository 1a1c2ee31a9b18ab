"""Operation classification and path resolution for projector."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from projector.models import (
    Add,
    Operation,
    PrintAll,
    PrintOne,
    ProjectorSettings,
    RawOptions,
    Remove,
    ResolvedConfig,
)

ADD_VERB: Final[str] = "add"
REMOVE_VERB: Final[str] = "remove"
PRINT_OPERATION: Final[str] = "print"

# Verbs that always win over a literal key in the first position.
RESERVED_VERBS: Final[tuple[str, ...]] = (ADD_VERB, REMOVE_VERB)

EnvMapping = Mapping[str, str]


class ProjectorError(RuntimeError):
    """Base class for failures surfaced to the user."""


class ArgumentCountMismatch(ProjectorError):
    """Raised when a verb receives the wrong number of arguments.

    Attributes:
        operation: Name of the classified operation (add, remove or print).
        expected: Accepted argument counts for the operation.
        actual: Number of arguments supplied beyond the first token.
    """

    def __init__(self, operation: str, expected: tuple[int, ...], actual: int) -> None:
        self.operation = operation
        self.expected = expected
        self.actual = actual
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.operation == PRINT_OPERATION:
            noun = "argument" if self.actual == 1 else "arguments"
            return f"operation print expects a single key but got {self.actual} extra {noun}"
        counts = " or ".join(str(count) for count in self.expected)
        return f"operation {self.operation} expects {counts} arguments but got {self.actual}"


class MissingEnvironmentVariable(ProjectorError):
    """Raised when the configuration root variable is not set."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unable to get {name}")


class WorkingDirectoryUnavailable(ProjectorError):
    """Raised when the current directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("error getting current directory")


@dataclass(frozen=True, slots=True)
class Environment:
    """Process state consulted while resolving defaults.

    Attributes:
        variables: Environment variable mapping.
        current_dir: Callable returning the current working directory.
    """

    variables: EnvMapping
    current_dir: Callable[[], Path]

    @classmethod
    def from_process(cls) -> Environment:
        """Return an accessor bound to the running process."""
        return cls(variables=os.environ, current_dir=Path.cwd)


def classify_operation(tokens: Sequence[str]) -> Operation:
    """Classify operation tokens into a single operation.

    The first token selects the verb. ``add`` and ``remove`` are matched
    exactly and in that order; anything else is treated as a key to print.

    Args:
        tokens: Positional tokens left after global options are parsed.

    Returns:
        The operation described by the tokens.

    Raises:
        ArgumentCountMismatch: If the verb received the wrong number of arguments.
    """
    values = list(tokens)
    if not values:
        return PrintAll()

    verb = values[0]
    if verb == ADD_VERB:
        _require_arguments(ADD_VERB, values, expected=(2,))
        return Add(key=values[1], value=values[2])

    if verb == REMOVE_VERB:
        _require_arguments(REMOVE_VERB, values, expected=(1,))
        return Remove(key=values[1])

    if len(values) > 1:
        raise ArgumentCountMismatch(PRINT_OPERATION, (0, 1), len(values) - 1)

    return PrintOne(key=verb)


def resolve_config_path(
    explicit: Path | None,
    *,
    environment: Environment | None = None,
    settings: ProjectorSettings | None = None,
) -> Path:
    """Return the store location, falling back to the configuration root.

    Args:
        explicit: Path supplied on the command line, used verbatim when present.
        environment: Accessor for environment variables.
        settings: Settings naming the root variable and relative path.

    Returns:
        Path to the key/value store file. Existence is not checked.

    Raises:
        MissingEnvironmentVariable: If no explicit path is given and the root variable is unset.
    """
    if explicit is not None:
        return explicit

    config = settings or ProjectorSettings()
    env = environment or Environment.from_process()
    location = env.variables.get(config.config_home_env)
    if location is None:
        raise MissingEnvironmentVariable(config.config_home_env)

    return Path(location) / config.default_config_relative_path


def resolve_working_directory(explicit: Path | None, *, environment: Environment | None = None) -> Path:
    """Return the explicit working directory or the process current directory.

    Raises:
        WorkingDirectoryUnavailable: If the current directory cannot be queried.
    """
    if explicit is not None:
        return explicit

    env = environment or Environment.from_process()
    try:
        return env.current_dir()
    except OSError as exc:
        raise WorkingDirectoryUnavailable() from exc


def resolve_config(
    options: RawOptions,
    *,
    environment: Environment | None = None,
    settings: ProjectorSettings | None = None,
) -> ResolvedConfig:
    """Resolve raw options into a validated configuration.

    Resolution runs in a fixed order (operation, config path, working
    directory) and stops at the first failure.

    Args:
        options: Raw inputs captured from the command line.
        environment: Accessor for environment variables and the current directory.
        settings: Global tool settings.

    Returns:
        The resolved configuration.

    Raises:
        ProjectorError: If any of the three resolutions fails.
    """
    env = environment or Environment.from_process()
    operation = classify_operation(options.args)
    config_path = resolve_config_path(options.config, environment=env, settings=settings)
    working_directory = resolve_working_directory(options.pwd, environment=env)

    return ResolvedConfig(
        operation=operation,
        working_directory=working_directory,
        config_path=config_path,
    )


def _require_arguments(operation: str, values: list[str], *, expected: tuple[int, ...]) -> None:
    """Raise if the tokens after the verb do not match an accepted count."""
    actual = len(values) - 1
    if actual not in expected:
        raise ArgumentCountMismatch(operation, expected, actual)
