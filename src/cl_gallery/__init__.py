"""cl-gallery - static image gallery for benchmark comparison results."""

__version__ = "0.1.0"

from cl_gallery.exceptions import GalleryError
from cl_gallery.gallery import GalleryRenderer

__all__ = ["__version__", "GalleryError", "GalleryRenderer"]
