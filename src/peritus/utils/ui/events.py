"""
Events delivered to the dashboard loop and the keyboard command map.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class InputEvent:
    """A key pressed by the operator."""

    key: str


@dataclass(frozen=True)
class TickEvent:
    """Periodic redraw request, independent of input."""


@dataclass(frozen=True)
class ErrorEvent:
    """The background event source failed; carries the exception."""

    error: BaseException = field(compare=False)


Event = Union[InputEvent, TickEvent, ErrorEvent]


class Command(Enum):
    """Operator commands recognised by the dashboard."""

    QUIT = "quit"
    GO_HOME = "go_home"
    GO_EXPERTS = "go_experts"
    ADD = "add"
    DELETE = "delete"
    NAVIGATE_DOWN = "navigate_down"
    NAVIGATE_UP = "navigate_up"


KEY_BINDINGS: Dict[str, Command] = {
    "q": Command.QUIT,
    "c-c": Command.QUIT,
    "h": Command.GO_HOME,
    "e": Command.GO_EXPERTS,
    "a": Command.ADD,
    "d": Command.DELETE,
    "down": Command.NAVIGATE_DOWN,
    "up": Command.NAVIGATE_UP,
}


def command_for_key(key: str) -> Optional[Command]:
    """Map a normalized key name to its command, or None if unbound."""
    return KEY_BINDINGS.get(key)
