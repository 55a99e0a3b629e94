"""CLI package for cl-gallery.

This package provides the command-line interface for building and
validating galleries. It implements the Command pattern for each operation.
"""

from cl_gallery.cli.commands import (
    BaseCommand,
    BuildGalleryCommand,
    CommandResult,
    ValidateConfigCommand,
)
from cl_gallery.cli.formatters import format_result
from cl_gallery.cli.main import CommandDispatcher, main
from cl_gallery.cli.parser import create_parser
from cl_gallery.cli.validators import validate_args

__all__ = [
    "BaseCommand",
    "BuildGalleryCommand",
    "CommandDispatcher",
    "CommandResult",
    "create_parser",
    "format_result",
    "main",
    "validate_args",
    "ValidateConfigCommand",
]
