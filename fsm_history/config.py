"""FSMConfig - immutable machine description and JSON loading."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from fsm_history.types import ConfigurationError

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class FSMConfig:
    """Immutable transition configuration.

    Attributes:
        initial: Name of the starting state. Must be a key of ``states``.
        states: State name -> transition table (event name -> destination).
            Declaration order is the order reported by ``FSM.get_states()``.
    """

    initial: str
    states: Mapping[str, Mapping[str, str]]

    def __post_init__(self) -> None:
        if self.initial not in self.states:
            raise ConfigurationError(
                f"Initial state {self.initial!r} is not a declared state"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FSMConfig:
        """Build a config from ``{"initial": ..., "states": {name: {"transitions": {...}}}}``.

        A state without a ``transitions`` key has an empty table.
        Raises ConfigurationError on any structural problem.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        if "initial" not in data:
            raise ConfigurationError("Configuration is missing 'initial'")
        if "states" not in data:
            raise ConfigurationError("Configuration is missing 'states'")

        initial = data["initial"]
        if not isinstance(initial, str):
            raise ConfigurationError(
                f"'initial' must be a string, got {type(initial).__name__}"
            )
        raw_states = data["states"]
        if not isinstance(raw_states, Mapping):
            raise ConfigurationError(
                f"'states' must be a mapping, got {type(raw_states).__name__}"
            )

        states: dict[str, Mapping[str, str]] = {}
        for name, body in raw_states.items():
            if body is None:
                body = {}
            if not isinstance(body, Mapping):
                raise ConfigurationError(
                    f"State {name!r} must be a mapping, got {type(body).__name__}"
                )
            table = body.get("transitions")
            if table is None:
                table = {}
            if not isinstance(table, Mapping):
                raise ConfigurationError(
                    f"Transitions of state {name!r} must be a mapping"
                )
            for event, target in table.items():
                if not isinstance(event, str) or not isinstance(target, str):
                    raise ConfigurationError(
                        f"Transition {event!r} -> {target!r} of state {name!r} "
                        f"must map a string event to a string state"
                    )
            states[name] = MappingProxyType(dict(table))

        return cls(initial=initial, states=MappingProxyType(states))

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible document this config was loaded from."""
        return {
            "initial": self.initial,
            "states": {
                name: {"transitions": dict(table)}
                for name, table in self.states.items()
            },
        }

    def transitions(self, state: str) -> Mapping[str, str]:
        """Transition table of ``state``; empty for an unknown state."""
        return self.states.get(state, _EMPTY)

    def unknown_targets(self) -> list[tuple[str, str, str]]:
        """Return ``[(state, event, target), ...]`` for undeclared destinations."""
        missing: list[tuple[str, str, str]] = []
        for name, table in self.states.items():
            for event, target in table.items():
                if target not in self.states:
                    missing.append((name, event, target))
        return missing

    def check_targets(self) -> None:
        """Raise ConfigurationError if any transition points at an undeclared state."""
        missing = self.unknown_targets()
        if missing:
            detail = ", ".join(f"{s}.{e} -> {t}" for s, e, t in missing)
            raise ConfigurationError(f"Undeclared transition targets: {detail}")


def load_config(path: Path | str) -> FSMConfig:
    """Load an FSMConfig from a UTF-8 JSON file.

    Raises FileNotFoundError if the file does not exist and
    ConfigurationError if it is not valid JSON or not a valid config.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path}")
    with path.open("r", encoding="utf-8") as stream:
        try:
            raw = json.load(stream)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    config = FSMConfig.from_dict(raw)
    logger.debug("Loaded FSM config from %s (%d states)", path, len(config.states))
    return config
