"""
Keyboard input sources for the event multiplexer.

The terminal source puts stdin into raw mode through prompt_toolkit, waits on
its file descriptor with a timeout, and reports keys as normalized names:
printable characters as themselves and special keys by their prompt_toolkit
name ("up", "down", "c-c", ...).
"""

from __future__ import annotations

import select
from contextlib import AbstractContextManager
from typing import Any, List, Optional, Protocol, Union

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.keys import Keys


class KeySource(Protocol):
    """Interface the multiplexer polls for keyboard input."""

    def poll(self, timeout: float) -> List[str]:
        """
        Wait up to timeout seconds for input.

        Returns:
            Keys received, in order; empty if the wait elapsed
        """
        ...


def normalize_key(key: Union[Keys, str]) -> str:
    """Convert a prompt_toolkit key into the name used by the key bindings."""
    if isinstance(key, Keys):
        return key.value
    return str(key)


class TerminalKeySource:
    """Raw-mode keyboard reader built on prompt_toolkit input."""

    def __init__(self, input_: Optional[Input] = None) -> None:
        self._input = input_ or create_input(always_prefer_tty=True)
        self._raw_mode: Optional[AbstractContextManager[Any]] = None

    @property
    def is_open(self) -> bool:
        return self._raw_mode is not None

    def open(self) -> None:
        """Switch the terminal into raw mode."""
        if self._raw_mode is not None:
            return
        raw_mode = self._input.raw_mode()
        raw_mode.__enter__()
        self._raw_mode = raw_mode

    def close(self) -> None:
        """Restore the terminal mode captured by open()."""
        raw_mode, self._raw_mode = self._raw_mode, None
        if raw_mode is not None:
            raw_mode.__exit__(None, None, None)

    def poll(self, timeout: float) -> List[str]:
        ready, _, _ = select.select([self._input.fileno()], [], [], max(timeout, 0.0))
        if not ready:
            return []
        return [normalize_key(key_press.key) for key_press in self._input.read_keys()]

    def __enter__(self) -> "TerminalKeySource":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
