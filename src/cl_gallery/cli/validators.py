"""Validation utilities for CLI arguments."""

import argparse
from pathlib import Path

from cl_gallery.config.defaults import CONFIG_SUFFIXES

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    config = getattr(args, "config", None)
    if not config:
        return "Error: --config is required"

    config_path = Path(config)
    if not config_path.exists():
        return f"Error: Configuration file not found: {config}"
    if config_path.suffix.lower() not in CONFIG_SUFFIXES:
        return (
            f"Error: Configuration file must be one of "
            f"{', '.join(CONFIG_SUFFIXES)}: {config}"
        )

    site_root = getattr(args, "site_root", None)
    if site_root is not None and not Path(site_root).is_dir():
        return f"Error: Site root is not a directory: {site_root}"

    return None
