"""Configuration module for the gallery.

This module provides the configuration exceptions, defaults and
environment-driven settings. Loaders are lazily imported to avoid circular
imports with the models package.
"""

from cl_gallery.config.exceptions import ConfigurationError
from cl_gallery.config.settings import GallerySettings, get_settings


def __getattr__(name: str):
    """Lazy import for the loader API to avoid circular imports."""
    if name in ("ConfigLoader", "load_gallery_config", "read_embedded_config"):
        from cl_gallery.config import loader

        return getattr(loader, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "GallerySettings",
    "get_settings",
    "load_gallery_config",
    "read_embedded_config",
]
