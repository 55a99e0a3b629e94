"""Page model for cl-gallery.

This package provides the in-process document model the gallery renders
into and the default hosting page shell.
"""

from cl_gallery.page.document import Element, Event, EventHandler, Page
from cl_gallery.page.exceptions import ElementNotFoundError, PageError
from cl_gallery.page.template import build_default_page

__all__ = [
    "build_default_page",
    "Element",
    "ElementNotFoundError",
    "Event",
    "EventHandler",
    "Page",
    "PageError",
]
