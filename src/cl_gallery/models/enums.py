"""Enumeration types for cl-gallery.

This module defines the enum types used by the gallery runtime: the modal
lifecycle and the per-cell fallback chain status.
"""

from enum import Enum

__all__ = [
    "FallbackStatus",
    "ModalState",
]


class ModalState(str, Enum):
    """Visibility state of the shared image modal.

    Attributes:
        closed: Modal hidden (initial state).
        open: Modal showing an enlarged image.
    """

    closed = "closed"
    open = "open"


class FallbackStatus(str, Enum):
    """Resolution status of a cell's image fallback chain.

    Attributes:
        pending: Some candidate is still unresolved and none has loaded.
        loaded: A candidate loaded and is visible.
        exhausted: Every candidate failed; the placeholder is visible.
    """

    pending = "pending"
    loaded = "loaded"
    exhausted = "exhausted"
