"""Base command class for CLI commands.

This module defines the abstract base class for CLI commands
following the Command pattern.
"""

from abc import ABC, abstractmethod
from argparse import Namespace

from pydantic import Field

from cl_gallery.models.base import BaseSchema

__all__ = ["BaseCommand", "CommandResult"]


class CommandResult(BaseSchema):
    """Result of a command execution.

    Attributes:
        exit_code: Exit code for the CLI (0 for success).
        message: Optional message to display.
        output_path: Path of the written page, if any.
        stats: Counters describing what was built or validated.

    """

    exit_code: int
    message: str | None = None
    output_path: str | None = None
    stats: dict[str, int] = Field(default_factory=dict)


class BaseCommand(ABC):
    """Abstract base class for CLI commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the command name for logging and display."""
        pass

    @abstractmethod
    async def execute(self, args: Namespace) -> CommandResult:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.

        Returns:
            CommandResult with exit code and details.

        """
        pass
