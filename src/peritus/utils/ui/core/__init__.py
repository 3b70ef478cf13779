"""Core event handling for the dashboard."""

from .key_source import KeySource, TerminalKeySource, normalize_key
from .multiplexer import EventMultiplexer

__all__ = ["EventMultiplexer", "KeySource", "TerminalKeySource", "normalize_key"]
