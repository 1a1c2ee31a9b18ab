"""Typer CLI application for projector."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

import typer
from rich.markup import escape

from projector import (
    ProjectorError,
    ProjectorSettings,
    RawOptions,
    __version__,
    resolve_config,
)
from projector._internal.output.formatters import describe_operation, format_resolved_config
from projector._internal.output.renderers import render_resolved_config
from projector._internal.state import CLIState, build_console
from projector.models import OUTPUT_FORMATS

# Unknown flag-looking tokens are operation arguments, not errors, and option
# parsing stops at the first positional token so later tokens stay verbatim.
_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    pretty_exceptions_enable=False,
    help="Read and change the projector key/value store.",
)


def _version_callback(value: bool) -> None:
    """Print the installed version and exit when `--version` is given."""
    if not value:
        return
    build_console(verbose=False).print(f"[success]projector {__version__}[/success]")
    raise typer.Exit()


@app.command(context_settings=_CONTEXT_SETTINGS)
def main(
    args: list[str] | None = typer.Argument(
        None,
        help="Operation tokens: nothing, KEY, `add KEY VALUE` or `remove KEY`.",
        show_default=False,
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the store file. Defaults to $XDG_CONFIG_HOME/projector/projector.json.",
    ),
    pwd: Path | None = typer.Option(
        None,
        "--pwd",
        "-p",
        help="Working directory to operate on. Defaults to the current directory.",
    ),
    output_format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format for the resolved configuration. Supported values: text, json.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose console output."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the installed projector version and exit.",
    ),
) -> None:
    """Resolve the requested operation and print the resulting configuration.

    Options must precede the operation tokens; use `--` when the first token
    itself looks like one of projector's options.

    Args:
        args: Positional operation tokens.
        config: Explicit store file path.
        pwd: Explicit working directory.
        output_format: Preferred output format for the resolved configuration.
        verbose: Whether to enable verbose console logging.
        version: Handled eagerly by `_version_callback`.
    """
    state = _build_state(verbose)
    options = RawOptions(args=tuple(args or ()), config=config, pwd=pwd)
    state.log(f"[info]Captured operation arguments: {escape(repr(list(options.args)))}[/info]")

    format_value = output_format or state.settings.default_output_format
    normalized_format = format_value.strip().casefold()
    if normalized_format not in OUTPUT_FORMATS:
        supported = ", ".join(OUTPUT_FORMATS)
        _abort(state, f"Unsupported format '{format_value}'. Supported values: {supported}.")
        return

    try:
        resolved = resolve_config(options, settings=state.settings)
    except ProjectorError as exc:
        _abort(state, str(exc))
        return

    state.log(f"[info]Resolved operation: {escape(describe_operation(resolved.operation))}[/info]")
    state.log(f"[info]Using store {escape(str(resolved.config_path))}[/info]")

    formatted_output = format_resolved_config(resolved, normalized_format)
    if normalized_format == "text":
        render_resolved_config(state.console, resolved)
        state.console.print()
    state.console.print(formatted_output, markup=False, emoji=False)


def _build_state(verbose: bool) -> CLIState:
    """Return the CLI state for the current invocation.

    Args:
        verbose: Whether verbose logging is enabled.

    Returns:
        CLIState instance.
    """
    return CLIState(
        console=build_console(verbose),
        log_console=build_console(verbose, stderr=True),
        settings=ProjectorSettings(),
        verbose=verbose,
    )


def _abort(state: CLIState, message: str, *, exit_code: int = 1) -> None:
    """Print a styled error message and exit the CLI.

    Args:
        state: CLI state.
        message: Error message to display.
        exit_code: Exit code to use.
    """
    state.console.print(f"[error]Error:[/error] {escape(message)}")
    raise typer.Exit(code=exit_code)
