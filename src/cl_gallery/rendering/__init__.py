"""Rendering components of the gallery.

- HeaderBinder: copies project metadata into the page header
- BenchmarkRenderer: benchmark sections and per-class image grids
- FallbackChain: ordered image candidates ending in a placeholder
- ModalController: the shared enlarged-image modal
- create_placeholder_image: generated bar-chart placeholder graphic
- show_error: initialization failure presenter
- FileImageProbe / resolve_images: best-effort image availability
"""

from cl_gallery.rendering.benchmarks import BenchmarkRenderer
from cl_gallery.rendering.errors import show_error
from cl_gallery.rendering.exceptions import ModalSetupError
from cl_gallery.rendering.fallback import FallbackChain
from cl_gallery.rendering.header import HeaderBinder
from cl_gallery.rendering.modal import ModalController
from cl_gallery.rendering.placeholder import create_placeholder_image
from cl_gallery.rendering.probe import FileImageProbe, ImageProbe
from cl_gallery.rendering.resolver import ResolveSummary, resolve_images

__all__ = [
    "BenchmarkRenderer",
    "create_placeholder_image",
    "FallbackChain",
    "FileImageProbe",
    "HeaderBinder",
    "ImageProbe",
    "ModalController",
    "ModalSetupError",
    "resolve_images",
    "ResolveSummary",
    "show_error",
]
