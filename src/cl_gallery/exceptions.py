"""Base exceptions for cl-gallery.

This module defines the root exception hierarchy for the gallery. All
domain-specific exceptions should inherit from GalleryError.
"""

__all__ = ["GalleryError"]


class GalleryError(Exception):
    """Base exception for all cl-gallery errors.

    Provides a common exception type for clients to catch gallery errors.
    """

    pass
