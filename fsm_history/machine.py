"""FSM - table-driven state machine with undo/redo over its history."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from fsm_history.config import FSMConfig
from fsm_history.history import History
from fsm_history.types import (
    ConfigurationError,
    HistoryEntry,
    InvalidStateError,
    NoTransitionError,
    TransitionCallback,
)

logger = logging.getLogger(__name__)


class FSM:
    """Finite state machine driven by an ``FSMConfig`` transition table.

    Every move of the current state (``trigger``, ``change_state``,
    ``reset``) appends a new active history entry. ``undo`` and ``redo``
    move the active marker back and forth over the recorded entries
    without consulting the transition table.

    Each undo/redo call hands the index it left to the opposite call, so a
    ``redo`` right after an ``undo`` returns to exactly the entry that was
    left, even when the two are not adjacent. ``change_state`` only sets
    the undo side of this hand-off and never truncates entries recorded
    after the active one.

    ``on_transition(old, new)`` is called after every such move.
    """

    def __init__(
        self,
        config: FSMConfig | Mapping[str, Any] | None = None,
        on_transition: TransitionCallback | None = None,
    ) -> None:
        if not config:
            raise ConfigurationError("Configuration is not passed")
        if not isinstance(config, FSMConfig):
            config = FSMConfig.from_dict(config)
        self._config = config
        self._states: list[str] = list(config.states)
        self._history = History()
        self._state: str = config.initial
        self._prev_index: int | None = None
        self._next_index: int | None = None
        self._on_transition: TransitionCallback | None = None
        self.reset()
        self._on_transition = on_transition

    @property
    def config(self) -> FSMConfig:
        return self._config

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of the history, oldest first."""
        return self._history.entries()

    def get_state(self) -> str:
        return self._state

    def get_states(self, event: str | None = None) -> list[str]:
        """Return all states, or only those with a transition for ``event``."""
        if event is None:
            return list(self._states)
        return [s for s in self._states if event in self._config.transitions(s)]

    def change_state(self, state: str) -> None:
        """Jump to ``state`` regardless of the transition table.

        Raises InvalidStateError if ``state`` is not declared.
        """
        if state not in self._states:
            raise InvalidStateError(state, f"State {state!r} does not exist")
        old = self._state
        active = self._history.active_index()
        self._history.deactivate()
        self._history.append(state)
        self._state = state
        self._prev_index = active
        logger.debug("change_state %s -> %s", old, state)
        self._notify(old, state)

    def trigger(self, event: str) -> None:
        """Follow the current state's transition for ``event``.

        Raises NoTransitionError if the current state has none.
        """
        target = self._config.transitions(self._state).get(event)
        if target is None:
            raise NoTransitionError(
                self._state,
                event,
                f"No transition for event {event!r} from state {self._state!r}",
            )
        self.change_state(target)

    def reset(self) -> None:
        """Go to the initial state. Recorded as a new history entry."""
        self.change_state(self._config.initial)

    def can_undo(self) -> bool:
        active = self._history.active_index()
        return active is not None and active >= 1

    def can_redo(self) -> bool:
        active = self._history.active_index()
        return active is not None and active < len(self._history) - 1

    def undo(self) -> bool:
        """Step back in history. Returns False if there is nothing to undo."""
        active = self._history.active_index()
        if active is None or active < 1:
            return False
        self._history.deactivate()
        target = self._prev_index if self._prev_index is not None else active - 1
        old = self._move_to(target, "undo")
        self._next_index = active
        self._prev_index = None
        self._notify(old, self._state)
        return True

    def redo(self) -> bool:
        """Step forward in history. Returns False if there is nothing to redo."""
        active = self._history.active_index()
        if active is None or active == len(self._history) - 1:
            return False
        self._history.deactivate()
        target = self._next_index if self._next_index is not None else active + 1
        old = self._move_to(target, "redo")
        self._prev_index = active
        self._next_index = None
        self._notify(old, self._state)
        return True

    def clear_history(self) -> None:
        """Forget all history entries. The current state is kept."""
        self._history.clear()
        logger.debug("clear_history (state %s kept)", self._state)

    def _move_to(self, index: int, action: str) -> str:
        """Move the active marker to ``index``. Returns the state left."""
        old = self._state
        self._state = self._history.activate(index)
        logger.debug("%s %s -> %s (entry %d)", action, old, self._state, index)
        return old

    def _notify(self, old: str, new: str) -> None:
        if self._on_transition is not None:
            self._on_transition(old, new)
