"""CLI command implementations."""

from cl_gallery.cli.commands.base import BaseCommand, CommandResult
from cl_gallery.cli.commands.build import BuildGalleryCommand
from cl_gallery.cli.commands.validate import ValidateConfigCommand

__all__ = [
    "BaseCommand",
    "BuildGalleryCommand",
    "CommandResult",
    "ValidateConfigCommand",
]
