"""Resolves every candidate image of the page against a probe.

Each candidate is probed independently and concurrently; its outcome is
delivered as a ``load`` or ``error`` event on the image element. There is
no ordering between cells or between candidates of one cell.
"""

from __future__ import annotations

import asyncio

from cl_gallery.logging_config import get_logger
from cl_gallery.page.document import Element, Event, Page
from cl_gallery.rendering.probe import ImageProbe

__all__ = ["ResolveSummary", "resolve_images"]

logger = get_logger(__name__)


class ResolveSummary:
    """Counts of candidate outcomes after resolution."""

    def __init__(self) -> None:
        self.loaded = 0
        self.failed = 0

    @property
    def total(self) -> int:
        return self.loaded + self.failed


async def resolve_images(page: Page, probe: ImageProbe) -> ResolveSummary:
    """Probe every ``img.result-image`` and dispatch its outcome.

    Args:
        page: The rendered page.
        probe: Probe deciding whether each source loads.

    Returns:
        A ResolveSummary with loaded and failed counts.

    """
    summary = ResolveSummary()
    images = [e for e in page.get_elements_by_class_name("result-image") if e.tag == "img"]

    async def resolve(image: Element) -> None:
        src = image.get_attribute("src") or ""
        try:
            loadable = await probe.is_loadable(src)
        except Exception:
            logger.warning("image_probe_error", src=src, exc_info=True)
            loadable = False

        if loadable:
            summary.loaded += 1
            image.dispatch_event(Event("load", target=image))
        else:
            summary.failed += 1
            image.dispatch_event(Event("error", target=image))

    await asyncio.gather(*(resolve(image) for image in images))
    logger.info("images_resolved", loaded=summary.loaded, failed=summary.failed)
    return summary
