"""Exceptions for page module.

This module defines exceptions raised when the hosting page does not
provide an expected element.
"""

from cl_gallery.exceptions import GalleryError

__all__ = ["ElementNotFoundError", "PageError"]


class PageError(GalleryError):
    """Base exception for page model errors."""

    pass


class ElementNotFoundError(PageError):
    """Raised when a required page element is missing."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Required page element not found: {selector}")
