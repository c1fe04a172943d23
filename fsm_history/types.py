"""Shared types and errors for fsm-history."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

StateName = str
EventName = str

# on_transition(old_state, new_state)
TransitionCallback = Callable[[StateName, StateName], None]


@dataclass
class HistoryEntry:
    """A recorded visit to a state. Only the active entry mirrors the current state."""

    name: StateName
    active: bool = False


class FSMError(Exception):
    """Base class for all fsm-history errors."""


class ConfigurationError(FSMError, ValueError):
    """Raised when a configuration is missing or malformed."""


class InvalidStateError(FSMError, KeyError):
    """Raised when jumping to a state that is not declared."""

    def __init__(self, state: str, message: str) -> None:
        self.state = state
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])


class NoTransitionError(FSMError, KeyError):
    """Raised when the current state has no transition for an event."""

    def __init__(self, state: str, event: str, message: str) -> None:
        self.state = state
        self.event = event
        super().__init__(message)

    def __str__(self) -> str:
        return str(self.args[0])
