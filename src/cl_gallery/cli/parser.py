"""CLI argument parser configuration.

This module provides the argument parser for the cl-gallery CLI.
"""

import argparse

from cl_gallery import __version__
from cl_gallery.config.defaults import DEFAULT_OUTPUT_DIR

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="cl-gallery",
        description="Render a static image gallery for benchmark comparison results.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Build site/index.html from a YAML configuration
  cl-gallery --config gallery.yaml

  # Build from the page's embedded config.js, probing images under ./public
  cl-gallery --config public/config.js --output public

  # Keep images in one place and write the page elsewhere
  cl-gallery --config gallery.yaml --output build --site-root public

  # Validate the configuration only
  cl-gallery --config gallery.yaml --dry-run --verbose
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=str,
        required=True,
        metavar="FILE",
        help="Gallery configuration (.yaml, .yml, .json or config.js embed)",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        metavar="DIR",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory for index.html (default: {DEFAULT_OUTPUT_DIR})",
    )

    parser.add_argument(
        "--site-root",
        type=str,
        metavar="DIR",
        default=None,
        help="Directory the data/ image paths are resolved against (default: --output)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the configuration without building the page",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with debug logging",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print the result as JSON instead of formatted text",
    )

    return parser
