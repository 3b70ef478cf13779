"""
Rendering surfaces.

A surface accepts a Frame and paints it. LiveSurface owns the terminal's
alternate screen through rich Live; refreshing is driven entirely by paint()
calls, so every event produces exactly one redraw.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from rich.console import Console, RenderableType
from rich.layout import Layout
from rich.live import Live

from .frame import ExpertsBody, Frame
from .renderers import ExpertsRenderer, FooterRenderer, HomeRenderer, MenuRenderer

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """Anything that can paint a full frame."""

    def paint(self, frame: Frame) -> None: ...


def compose_frame(frame: Frame) -> RenderableType:
    """Build the rich layout for one frame: menu, body, footer."""
    if isinstance(frame.body, ExpertsBody):
        body = ExpertsRenderer().render(frame)
    else:
        body = HomeRenderer().render(frame)

    layout = Layout(name="root")
    layout.split_column(
        Layout(MenuRenderer().render(frame), name="menu", size=3),
        Layout(body, name="body", minimum_size=2),
        Layout(FooterRenderer().render(frame), name="footer", size=3),
    )
    return layout


class LiveSurface:
    """Full-screen surface backed by rich Live."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self._live: Optional[Live] = None

    @property
    def is_running(self) -> bool:
        return self._live is not None

    def start(self) -> None:
        """Enter the alternate screen."""
        if self._live is not None:
            return
        self._live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )
        self._live.start()
        logger.debug("Live surface started")

    def stop(self) -> None:
        """Leave the alternate screen and show the cursor again."""
        live, self._live = self._live, None
        if live is not None:
            live.stop()
            logger.debug("Live surface stopped")

    def paint(self, frame: Frame) -> None:
        renderable = compose_frame(frame)
        if self._live is None:
            self.console.print(renderable)
            return
        self._live.update(renderable, refresh=True)

    def __enter__(self) -> "LiveSurface":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
