"""CLI main entry point.

This module provides the main entry point for the cl-gallery CLI.
"""

import argparse
import asyncio
import sys
import traceback

from cl_gallery.cli.commands import BuildGalleryCommand, ValidateConfigCommand
from cl_gallery.cli.formatters import format_result
from cl_gallery.cli.parser import create_parser
from cl_gallery.cli.validators import validate_args
from cl_gallery.logging_config import configure_logging, get_logger

__all__ = ["CommandDispatcher", "main"]

logger = get_logger(__name__)


class CommandDispatcher:
    """Dispatches CLI invocations to the build or validate command."""

    def __init__(self) -> None:
        self._build_cmd = BuildGalleryCommand()
        self._validate_cmd = ValidateConfigCommand()

    async def dispatch(self, args: argparse.Namespace) -> int:
        """Dispatch to the appropriate command based on arguments.

        Args:
            args: Parsed command-line arguments.

        Returns:
            Exit code (0 for success, non-zero for errors).

        """
        if getattr(args, "dry_run", False):
            result = await self._validate_cmd.execute(args)
        else:
            result = await self._build_cmd.execute(args)

        print(format_result(result, json_output=getattr(args, "json_output", False)))
        return result.exit_code


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=getattr(args, "verbose", False),
        json_output=getattr(args, "json_output", False),
    )

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        dispatcher = CommandDispatcher()
        return asyncio.run(dispatcher.dispatch(args))

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
