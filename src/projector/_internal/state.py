"""CLI state management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.theme import Theme

from projector.models import ProjectorSettings

CLI_THEME: Final[Theme] = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "green",
        "text": "white",
    }
)


@dataclass(slots=True)
class CLIState:
    """State shared across a single projector invocation.

    Log lines go to ``log_console`` (stderr) so stdout stays parseable.
    """

    console: Console
    log_console: Console
    settings: ProjectorSettings
    verbose: bool

    def log(self, message: str) -> None:
        """Emit a timestamped console line when verbose output is enabled.

        Args:
            message: Rich-markup message to log.
        """
        if self.verbose:
            self.log_console.log(message)


def build_console(verbose: bool, *, stderr: bool = False) -> Console:
    """Return a Rich console configured with project-specific styling.

    Args:
        verbose: Whether to enable verbose logging with timestamps.
        stderr: Whether to write to stderr instead of stdout.

    Returns:
        Configured Console instance.
    """
    return Console(
        theme=CLI_THEME,
        highlight=False,
        soft_wrap=True,
        stderr=stderr,
        log_path=False,
        log_time=verbose,
    )
