"""Gallery controller.

This module defines GalleryRenderer, the single controller that loads the
configuration, binds the header, sets up the modal, renders the benchmark
grids and resolves their images against a probe.
"""

from __future__ import annotations

from typing import Any

from cl_gallery.config.loader import ConfigLoader
from cl_gallery.config.settings import GallerySettings, get_settings
from cl_gallery.logging_config import get_logger
from cl_gallery.models.gallery import GalleryConfig
from cl_gallery.page.document import Page
from cl_gallery.rendering.benchmarks import BenchmarkRenderer
from cl_gallery.rendering.errors import show_error
from cl_gallery.rendering.header import HeaderBinder
from cl_gallery.rendering.modal import ModalController
from cl_gallery.rendering.probe import ImageProbe
from cl_gallery.rendering.resolver import ResolveSummary, resolve_images

__all__ = ["GalleryRenderer"]

logger = get_logger(__name__)


class GalleryRenderer:
    """Owns the modal and the benchmark container of one page.

    Initialization runs ConfigLoader, HeaderBinder, modal setup,
    BenchmarkRenderer and image resolution in sequence. Any failure aborts
    the sequence and replaces the benchmark container with an error block;
    no exception escapes ``initialize``.

    Attributes:
        config: The loaded configuration, or None before/after a failed load.
        modal: The modal controller, once set up.
        renderer: The benchmark renderer, once rendering started.
        summary: Image resolution counts, once resolved.

    Example:
        page = build_default_page()
        gallery = GalleryRenderer(page, embedded_value, FileImageProbe("site"))
        ok = await gallery.initialize()
        Path("site/index.html").write_text(page.to_html())

    """

    def __init__(
        self,
        page: Page,
        config_value: Any,
        probe: ImageProbe,
        settings: GallerySettings | None = None,
    ) -> None:
        self.page = page
        self._config_value = config_value
        self._probe = probe
        self._settings = settings or get_settings()
        self.config: GalleryConfig | None = None
        self.modal: ModalController | None = None
        self.renderer: BenchmarkRenderer | None = None
        self.summary: ResolveSummary | None = None

    async def initialize(self) -> bool:
        """Build the gallery into the page.

        Returns:
            True on success, False if initialization failed and the error
            block was shown.

        """
        try:
            self.config = ConfigLoader(self._config_value).load()
            HeaderBinder(self.config).bind(self.page)

            self.modal = ModalController(self.page, self._probe)
            self.modal.setup()

            self.renderer = BenchmarkRenderer(self.config, self.modal, self._settings)
            self.renderer.render(self.page)

            self.summary = await resolve_images(self.page, self._probe)
        except Exception as e:
            logger.error("gallery_initialization_failed", error=str(e), exc_info=True)
            self.config = None
            show_error(self.page, self._settings.error_message)
            return False

        logger.info(
            "gallery_initialized",
            benchmarks=len(self.config.benchmarks),
            cells=len(self.renderer.chains),
        )
        return True
