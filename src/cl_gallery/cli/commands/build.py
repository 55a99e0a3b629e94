"""Build gallery command implementation.

This module implements the command that renders the gallery page into an
output directory.
"""

from argparse import Namespace
from pathlib import Path
from typing import Any

from cl_gallery.cli.commands.base import BaseCommand, CommandResult
from cl_gallery.config.defaults import INDEX_FILENAME
from cl_gallery.config.exceptions import ConfigurationError
from cl_gallery.config.loader import read_embedded_config
from cl_gallery.config.settings import get_settings
from cl_gallery.gallery import GalleryRenderer
from cl_gallery.logging_config import get_logger
from cl_gallery.page.template import build_default_page
from cl_gallery.rendering.probe import FileImageProbe

__all__ = ["BuildGalleryCommand"]

logger = get_logger(__name__)


class BuildGalleryCommand(BaseCommand):
    """Command to render the gallery into ``<output>/index.html``.

    A configuration that cannot be read still produces a page: the gallery
    shows its error block and the command exits with code 1.
    """

    @property
    def name(self) -> str:
        """Get the command name."""
        return "build"

    async def execute(self, args: Namespace) -> CommandResult:
        """Execute the build command.

        Args:
            args: Parsed arguments with config, output and site_root.

        Returns:
            CommandResult with the written page path and build counters.

        """
        settings = get_settings()
        output_dir = Path(args.output)
        site_root = Path(args.site_root) if getattr(args, "site_root", None) else output_dir

        config_value = self._read_config(Path(args.config))

        page = build_default_page(settings)
        gallery = GalleryRenderer(page, config_value, FileImageProbe(site_root), settings)
        success = await gallery.initialize()

        output_dir.mkdir(parents=True, exist_ok=True)
        index_path = output_dir / INDEX_FILENAME
        index_path.write_text(page.to_html(), encoding="utf-8")
        logger.info("gallery_page_written", path=str(index_path), success=success)

        stats: dict[str, int] = {}
        if success and gallery.config is not None and gallery.renderer is not None:
            stats = {
                "benchmarks": len(gallery.config.benchmarks),
                "cells": len(gallery.renderer.chains),
                "images_loaded": gallery.summary.loaded if gallery.summary else 0,
                "images_failed": gallery.summary.failed if gallery.summary else 0,
            }

        return CommandResult(
            exit_code=0 if success else 1,
            message="Gallery built" if success else settings.error_message,
            output_path=str(index_path),
            stats=stats,
        )

    def _read_config(self, path: Path) -> Any:
        """Read the raw configuration value, or None if it cannot be read."""
        try:
            return read_embedded_config(path)
        except (ConfigurationError, FileNotFoundError) as e:
            logger.error("config_read_failed", path=str(path), error=str(e))
            return None
