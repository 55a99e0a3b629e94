"""Binds project metadata into the fixed header regions of the page."""

from __future__ import annotations

from cl_gallery.logging_config import get_logger
from cl_gallery.models.gallery import GalleryConfig
from cl_gallery.page.document import Page

__all__ = ["HeaderBinder"]

logger = get_logger(__name__)


class HeaderBinder:
    """Copies title, authors and links into the page header.

    Each binding is independent: a missing element or field skips that
    binding only.
    """

    def __init__(self, config: GalleryConfig) -> None:
        self._config = config

    def bind(self, page: Page) -> None:
        project = self._config.project
        title_elements = page.get_elements_by_class_name("title")
        subtitle_elements = page.get_elements_by_class_name("subtitle")
        paper_link = page.get_element_by_id("paper-link")
        code_link = page.get_element_by_id("code-link")

        bound: list[str] = []

        if title_elements and project.title:
            title_elements[0].text_content = project.title
            bound.append("title")

        if subtitle_elements and project.authors:
            subtitle_elements[0].text_content = ", ".join(project.authors)
            bound.append("authors")

        if paper_link is not None and project.paper_url:
            paper_link.set_attribute("href", project.paper_url)
            bound.append("paper_url")

        if code_link is not None and project.code_url:
            code_link.set_attribute("href", project.code_url)
            bound.append("code_url")

        logger.debug("header_bound", fields=bound)
