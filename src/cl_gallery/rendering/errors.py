"""Presents initialization failures in the benchmarks container."""

from __future__ import annotations

from cl_gallery.page.document import Element, Page

__all__ = ["show_error"]


def show_error(page: Page, message: str) -> None:
    """Replace the benchmarks container contents with an error block.

    Does nothing when the page has no benchmarks container.

    Args:
        page: The hosting page.
        message: Message shown under the "Error" heading.

    """
    container = page.get_element_by_id("benchmarks-container")
    if container is None:
        return

    container.clear()
    section = container.append(Element("div", classes=["benchmark-section"]))
    block = section.append(Element("div", classes=["error-block"]))
    block.append(Element("h3", text="Error"))
    block.append(Element("p", text=message))
