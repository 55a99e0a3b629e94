"""Output formatters for CLI results."""

import json

from cl_gallery.cli.commands.base import CommandResult

__all__ = ["format_result"]


def format_result(result: CommandResult, json_output: bool = False) -> str:
    """Format a command result for display.

    Args:
        result: The command result.
        json_output: If True, return JSON instead of text.

    Returns:
        Formatted string.

    """
    if json_output:
        return json.dumps(result.model_dump(), indent=2)

    lines: list[str] = []
    if result.message:
        lines.append(result.message)
    if result.output_path:
        lines.append(f"Wrote: {result.output_path}")
    for key, value in result.stats.items():
        lines.append(f"  {key.replace('_', ' ')}: {value}")
    return "\n".join(lines)
