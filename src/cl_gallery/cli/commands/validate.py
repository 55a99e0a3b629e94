"""Validate configuration command implementation.

This module implements the dry-run command that only validates a gallery
configuration file.
"""

from argparse import Namespace
from pathlib import Path

from cl_gallery.cli.commands.base import BaseCommand, CommandResult
from cl_gallery.config.exceptions import ConfigurationError
from cl_gallery.config.loader import load_gallery_config

__all__ = ["ValidateConfigCommand"]


class ValidateConfigCommand(BaseCommand):
    """Command to validate a gallery configuration."""

    @property
    def name(self) -> str:
        """Get the command name."""
        return "validate"

    async def execute(self, args: Namespace) -> CommandResult:
        """Execute the validate command.

        Args:
            args: Parsed arguments with the config path.

        Returns:
            CommandResult with validation status.

        """
        return self.validate_config(
            config_path=Path(args.config),
            verbose=getattr(args, "verbose", False),
        )

    def validate_config(self, config_path: Path, verbose: bool = False) -> CommandResult:
        """Validate a configuration file without rendering.

        Args:
            config_path: Path to the configuration file.
            verbose: Whether to print per-benchmark details.

        Returns:
            CommandResult with exit code 0 if valid, 1 otherwise.

        """
        try:
            config = load_gallery_config(config_path)
        except (ConfigurationError, FileNotFoundError) as e:
            return CommandResult(exit_code=1, message=f"Validation failed: {e}")

        if verbose:
            if config.project.title:
                print(f"Project: {config.project.title}")
            print(f"Classes: {config.target_classes} ({len(config.class_names)} named)")
            print()
            print("Benchmarks:")
            for benchmark in config.benchmarks:
                print(f"  - {benchmark.description}")
                for method in benchmark.cil_methods:
                    print(f"    {method.name}: {method.results_path}")

        methods = sum(len(b.cil_methods) for b in config.benchmarks)
        return CommandResult(
            exit_code=0,
            message=f"Validation successful: {config_path}",
            stats={
                "benchmarks": len(config.benchmarks),
                "methods": methods,
                "cells": methods * config.target_classes,
            },
        )
