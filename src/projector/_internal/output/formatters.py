"""Output formatting utilities for resolved configurations."""

from __future__ import annotations

import json

from projector.models import Add, Operation, PrintAll, PrintOne, Remove, ResolvedConfig


def format_resolved_config(resolved: ResolvedConfig, format_name: str) -> str:
    """Return the resolved configuration formatted according to the requested output.

    Args:
        resolved: Configuration produced by the resolver.
        format_name: Output format (text or json).

    Returns:
        Formatted configuration.

    Raises:
        ValueError: If format_name is not supported.
    """
    if format_name == "text":
        return format_resolved_config_as_text(resolved)
    if format_name == "json":
        return format_resolved_config_as_json(resolved)
    msg = f"Unsupported format: {format_name}"
    raise ValueError(msg)


def format_resolved_config_as_text(resolved: ResolvedConfig) -> str:
    """Return the resolved configuration as `name: value` lines."""
    lines = [
        f"operation: {describe_operation(resolved.operation)}",
        f"config: {resolved.config_path}",
        f"pwd: {resolved.working_directory}",
    ]
    return "\n".join(lines)


def format_resolved_config_as_json(resolved: ResolvedConfig) -> str:
    """Return the resolved configuration as a JSON object.

    Args:
        resolved: Configuration produced by the resolver.

    Returns:
        JSON document with `operation`, `config_path` and `working_directory` keys.
    """
    payload = resolved.model_dump(mode="json")
    return json.dumps(payload, indent=2, ensure_ascii=False)


def describe_operation(operation: Operation) -> str:
    """Return a short human-readable summary of an operation.

    Args:
        operation: Operation to describe.

    Returns:
        Summary such as `add foo=bar` or `print all`.
    """
    if isinstance(operation, PrintAll):
        return "print all"
    if isinstance(operation, PrintOne):
        return f"print {operation.key!r}"
    if isinstance(operation, Add):
        return f"add {operation.key!r}={operation.value!r}"
    if isinstance(operation, Remove):
        return f"remove {operation.key!r}"
    msg = f"Unknown operation: {operation!r}"
    raise ValueError(msg)
