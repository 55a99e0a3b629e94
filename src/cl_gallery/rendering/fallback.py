"""Per-cell image fallback chain.

Each grid cell renders one image element per candidate format plus a
terminal "No Image" placeholder. Candidates report their outcome through
``load``/``error`` events in any order; the chain shows the first candidate
not known to have failed, or the placeholder once all have failed.
"""

from __future__ import annotations

from cl_gallery.models.enums import FallbackStatus
from cl_gallery.page.document import Element, Event
from cl_gallery.state_machine import StateMachineMixin

__all__ = ["FallbackChain"]

_UNKNOWN, _LOADED, _FAILED = "unknown", "loaded", "failed"


class FallbackChain(StateMachineMixin[FallbackStatus]):
    """Ordered candidates advanced by an index, ending in a placeholder.

    Attributes:
        candidates: Image elements in preference order.
        placeholder: Element shown when every candidate failed.

    """

    _VALID_TRANSITIONS: dict[FallbackStatus, set[FallbackStatus]] = {
        FallbackStatus.pending: {FallbackStatus.loaded, FallbackStatus.exhausted},
        FallbackStatus.loaded: set(),
        FallbackStatus.exhausted: set(),
    }
    _TERMINAL_STATES: set[FallbackStatus] = {
        FallbackStatus.loaded,
        FallbackStatus.exhausted,
    }

    def __init__(self, candidates: list[Element], placeholder: Element) -> None:
        if not candidates:
            raise ValueError("FallbackChain requires at least one candidate")
        self.candidates = candidates
        self.placeholder = placeholder
        self._outcomes = [_UNKNOWN] * len(candidates)
        self._cursor = 0
        self._status = FallbackStatus.pending
        self._apply_visibility()

    @property
    def status(self) -> FallbackStatus:
        return self._status

    @property
    def cursor(self) -> int:
        """Index of the candidate currently shown (len(candidates) when exhausted)."""
        return self._cursor

    @property
    def visible_element(self) -> Element:
        if self._cursor >= len(self.candidates):
            return self.placeholder
        return self.candidates[self._cursor]

    def _get_current_state(self) -> FallbackStatus:
        return self._status

    def _set_current_state(self, state: FallbackStatus) -> None:
        self._status = state

    def attach(self) -> None:
        """Subscribe to each candidate's ``load`` and ``error`` events."""
        for index, candidate in enumerate(self.candidates):
            candidate.add_event_listener("load", self._listener(self.on_load, index))
            candidate.add_event_listener("error", self._listener(self.on_error, index))

    @staticmethod
    def _listener(callback, index: int):
        def handle(_event: Event) -> None:
            callback(index)

        return handle

    def on_load(self, index: int) -> None:
        """Record that candidate ``index`` loaded."""
        if self._outcomes[index] != _UNKNOWN:
            return
        self._outcomes[index] = _LOADED
        self._advance()

    def on_error(self, index: int) -> None:
        """Record that candidate ``index`` failed to load."""
        if self._outcomes[index] != _UNKNOWN:
            return
        self._outcomes[index] = _FAILED
        self._advance()

    def _advance(self) -> None:
        if self.is_terminal():
            return

        while self._cursor < len(self.candidates) and self._outcomes[self._cursor] == _FAILED:
            self._cursor += 1

        if self._cursor >= len(self.candidates):
            self.transition_to(FallbackStatus.exhausted)
        elif self._outcomes[self._cursor] == _LOADED:
            self.transition_to(FallbackStatus.loaded)

        self._apply_visibility()

    def _apply_visibility(self) -> None:
        for index, candidate in enumerate(self.candidates):
            candidate.display = "block" if index == self._cursor else "none"
        self.placeholder.display = (
            "flex" if self._cursor >= len(self.candidates) else "none"
        )
