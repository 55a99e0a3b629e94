"""Transition-table state machines.

The modal controller and every per-cell fallback chain keep a small
explicit state. Both declare their allowed moves as a table and go
through ``transition_to`` so an impossible move fails loudly instead of
leaving the page half updated.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Generic, TypeVar

__all__ = ["StateMachineMixin"]

StateT = TypeVar("StateT")


class StateMachineMixin(Generic[StateT]):
    """Mixin driving a state attribute through a transition table.

    Subclasses declare ``_VALID_TRANSITIONS`` (state -> reachable states)
    and ``_TERMINAL_STATES``, and expose their stored state through
    ``_get_current_state`` / ``_set_current_state``.

    Example:
        class Chain(StateMachineMixin[FallbackStatus]):
            _VALID_TRANSITIONS = {
                FallbackStatus.pending: {FallbackStatus.loaded, FallbackStatus.exhausted},
            }
            _TERMINAL_STATES = {FallbackStatus.loaded, FallbackStatus.exhausted}

    """

    _VALID_TRANSITIONS: dict[StateT, set[StateT]]
    _TERMINAL_STATES: set[StateT]

    @abstractmethod
    def _get_current_state(self) -> StateT: ...

    @abstractmethod
    def _set_current_state(self, state: StateT) -> None: ...

    def can_transition_to(self, new_state: StateT) -> bool:
        """Return True if the table allows moving to ``new_state``."""
        allowed = self._VALID_TRANSITIONS.get(self._get_current_state(), set())
        return new_state in allowed

    def is_terminal(self) -> bool:
        return self._get_current_state() in self._TERMINAL_STATES

    def transition_to(self, new_state: StateT) -> None:
        """Move to ``new_state``.

        Raises:
            ValueError: If the transition table does not allow the move.

        """
        current = self._get_current_state()
        if not self.can_transition_to(new_state):
            raise ValueError(
                f"Invalid {type(self).__name__} transition from {current} to {new_state}"
            )
        self._set_current_state(new_state)
