"""
Dashboard driver.

The dashboard is the single consumer of the event channel. For each event it
updates the view and cursor, touches the store when a command asks for it,
and repaints the whole screen once. It is the only code that reads or writes
the store, so the store and cursor need no locking.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from ...schemas.expert import Expert
from ...services.expert_factory import ExpertFactory
from ...store.protocol import ExpertStore
from .events import Command, ErrorEvent, Event, InputEvent, TickEvent, command_for_key
from .frame import build_frame
from .state import RunState, SelectionCursor, ViewState
from .surface import Surface

logger = logging.getLogger(__name__)


class EventChannel(Protocol):
    """Blocking source of dashboard events."""

    def get(self, timeout: Optional[float] = None) -> Event: ...


class Dashboard:
    """
    Single-threaded render loop and view state machine.

    Store errors are not handled here: they propagate out of run() and end
    the session.
    """

    def __init__(
        self,
        store: ExpertStore,
        events: EventChannel,
        surface: Surface,
        factory: Optional[Callable[[], Expert]] = None,
        cursor: Optional[SelectionCursor] = None,
        view: ViewState = ViewState.HOME,
    ) -> None:
        self.store = store
        self.events = events
        self.surface = surface
        self.factory = factory or ExpertFactory()
        self.cursor = cursor if cursor is not None else SelectionCursor()
        self.view = view
        self.run_state = RunState.RUNNING
        self.render_count = 0

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    def run(self) -> None:
        """Paint the first frame, then handle events until quit."""
        self.render()
        while self.is_running:
            event = self.events.get()
            self.handle(event)
            if not self.is_running:
                break
            self.render()
        logger.info("Dashboard loop finished after %d render(s)", self.render_count)

    def render(self) -> None:
        """Repaint the full screen from the current store contents."""
        experts = self.store.load()
        self.cursor.reconcile(len(experts))
        self.surface.paint(build_frame(self.view, experts, self.cursor.index))
        self.render_count += 1

    def handle(self, event: Event) -> None:
        """Apply one event to the dashboard state."""
        if isinstance(event, ErrorEvent):
            raise event.error
        if isinstance(event, TickEvent):
            return
        if isinstance(event, InputEvent):
            command = command_for_key(event.key)
            if command is None:
                logger.debug("Ignoring unbound key %r", event.key)
                return
            self.dispatch(command)

    def dispatch(self, command: Command) -> None:
        """Run one operator command."""
        if not self.is_running:
            return

        if command is Command.QUIT:
            self.run_state = RunState.QUITTING
        elif command is Command.GO_HOME:
            self.view = ViewState.HOME
        elif command is Command.GO_EXPERTS:
            self.view = ViewState.EXPERTS
        elif command is Command.ADD:
            expert = self.factory()
            experts = self.store.append(expert)
            logger.info("Added expert %s (%d total)", expert.name, len(experts))
        elif command is Command.DELETE:
            self._delete_selected()
        elif command is Command.NAVIGATE_DOWN:
            self.cursor.next(len(self.store.load()))
        elif command is Command.NAVIGATE_UP:
            self.cursor.previous(len(self.store.load()))

    def _delete_selected(self) -> None:
        removed_index = self.cursor.index
        if removed_index is None:
            return
        self.store.remove_at(removed_index)
        remaining = len(self.store.load())
        self.cursor.repair_after_removal(removed_index, remaining)
        logger.info(
            "Deleted expert at %d, selection now %s (%d left)",
            removed_index,
            self.cursor.index,
            remaining,
        )
