"""
Menu tabs and footer renderers.
"""

from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ..frame import Frame
from ..theme import THEME
from .base import BaseRenderer


class MenuRenderer(BaseRenderer):
    """Tab strip with the hotkey letter of each title underlined."""

    def render(self, frame: Frame) -> RenderableType:
        tabs = Text()
        for position, title in enumerate(frame.menu_titles):
            if position:
                tabs.append(" | ", style=THEME["menu_divider"])
            if position == frame.active_menu:
                tabs.append(title, style=THEME["menu_active"])
                continue
            tabs.append(title[:1], style=THEME["menu_hotkey"])
            tabs.append(title[1:], style=THEME["text"])
        return Panel(tabs, title="Menu", title_align="left", border_style=THEME["border"])


class FooterRenderer(BaseRenderer):
    """Centered copyright line."""

    def render(self, frame: Frame) -> RenderableType:
        return Panel(
            Align.center(Text(frame.footer, style=THEME["accent"])),
            title="Copyright",
            title_align="left",
            border_style=THEME["border"],
        )
