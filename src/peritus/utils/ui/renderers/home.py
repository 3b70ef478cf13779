"""
Home view renderer.
"""

from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ..frame import Frame, HomeBody
from ..theme import APP_NAME, THEME
from .base import BaseRenderer


class HomeRenderer(BaseRenderer):
    """Welcome text centered in a bordered panel."""

    def render(self, frame: Frame) -> RenderableType:
        body = frame.body
        if not isinstance(body, HomeBody):
            raise TypeError(f"HomeRenderer cannot render {type(body).__name__}")

        content = Text(justify="center")
        for position, line in enumerate(body.lines):
            if position:
                content.append("\n")
            style = THEME["accent"] if line == APP_NAME else THEME["text"]
            content.append(line, style=style)

        return Panel(content, title="Home", title_align="left", border_style=THEME["border"])
