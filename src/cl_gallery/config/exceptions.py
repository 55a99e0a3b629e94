"""Exceptions for config module.

This module defines exceptions related to configuration loading,
parsing, and validation errors.
"""

from cl_gallery.exceptions import GalleryError

__all__ = ["ConfigurationError"]


class ConfigurationError(GalleryError):
    """Raised when the gallery configuration is missing or malformed."""

    pass
