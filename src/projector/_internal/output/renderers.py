"""Rich console rendering utilities for resolved configurations."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from projector.models import Add, PrintAll, PrintOne, Remove, ResolvedConfig


def render_resolved_config(console: Console, resolved: ResolvedConfig) -> None:
    """Render a table summarizing the resolved operation and paths.

    Args:
        console: Rich console for output.
        resolved: Configuration produced by the resolver.
    """
    operation = resolved.operation
    table = Table(title="Resolved Configuration", header_style="bold", box=box.MINIMAL_DOUBLE_HEAD)
    table.add_column("Field", style="info")
    table.add_column("Value", style="text")

    table.add_row("Operation", _operation_label(operation))
    if isinstance(operation, PrintOne | Add | Remove):
        table.add_row("Key", Text(operation.key))
    if isinstance(operation, Add):
        table.add_row("Value", Text(operation.value))
    table.add_row("Config", Text(str(resolved.config_path)))
    table.add_row("Working directory", Text(str(resolved.working_directory)))

    console.print(table)


def _operation_label(operation: PrintAll | PrintOne | Add | Remove) -> str:
    """Return the verb shown in the summary table."""
    if isinstance(operation, PrintAll | PrintOne):
        return "print"
    return operation.kind
