"""fsm-history - Table-driven finite state machine with undo/redo history."""
from __future__ import annotations

from fsm_history.config import FSMConfig, load_config
from fsm_history.history import History
from fsm_history.machine import FSM
from fsm_history.types import (
    ConfigurationError,
    FSMError,
    HistoryEntry,
    InvalidStateError,
    NoTransitionError,
)

__all__ = [
    "FSM",
    "FSMConfig",
    "History",
    "HistoryEntry",
    "FSMError",
    "ConfigurationError",
    "InvalidStateError",
    "NoTransitionError",
    "load_config",
]
