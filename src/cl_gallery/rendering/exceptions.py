"""Exceptions for rendering module."""

from cl_gallery.exceptions import GalleryError

__all__ = ["ModalSetupError"]


class ModalSetupError(GalleryError):
    """Raised when the page lacks part of the modal subtree or the modal is
    used before ``setup()``."""
