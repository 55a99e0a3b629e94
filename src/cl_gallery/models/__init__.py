"""Data models for cl-gallery."""

from cl_gallery.models.base import BaseSchema
from cl_gallery.models.enums import FallbackStatus, ModalState
from cl_gallery.models.gallery import (
    Benchmark,
    GalleryConfig,
    Method,
    ProjectInfo,
    Stat,
)

__all__ = [
    "BaseSchema",
    "Benchmark",
    "FallbackStatus",
    "GalleryConfig",
    "Method",
    "ModalState",
    "ProjectInfo",
    "Stat",
]
