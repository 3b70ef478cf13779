"""
Terminal UI: event multiplexing, state, frames, and the dashboard driver.
"""

from .core import EventMultiplexer, KeySource, TerminalKeySource
from .dashboard import Dashboard
from .events import Command, ErrorEvent, InputEvent, TickEvent
from .frame import ExpertsBody, Frame, HomeBody, build_frame
from .state import RunState, SelectionCursor, ViewState
from .surface import LiveSurface, Surface
from .theme import THEME

__all__ = [
    "Command",
    "Dashboard",
    "ErrorEvent",
    "EventMultiplexer",
    "ExpertsBody",
    "Frame",
    "HomeBody",
    "InputEvent",
    "KeySource",
    "LiveSurface",
    "RunState",
    "SelectionCursor",
    "Surface",
    "TerminalKeySource",
    "THEME",
    "TickEvent",
    "ViewState",
    "build_frame",
]
