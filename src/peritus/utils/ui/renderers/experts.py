"""
Experts view renderer: name list on the left, detail table on the right.
"""

from __future__ import annotations

from typing import Tuple

from rich.console import RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..frame import ExpertsBody, Frame
from ..theme import DETAIL_COLUMNS, EMPTY_EXPERTS_TEXT, THEME
from .base import BaseRenderer


class ExpertsRenderer(BaseRenderer):
    """Render the experts body as a (list, detail) pair of panels."""

    def render(self, frame: Frame) -> RenderableType:
        left, right = self.render_parts(frame)
        layout = Layout(name="experts")
        layout.split_row(
            Layout(left, name="list", ratio=1),
            Layout(right, name="detail", ratio=4),
        )
        return layout

    def render_parts(self, frame: Frame) -> Tuple[RenderableType, RenderableType]:
        body = frame.body
        if not isinstance(body, ExpertsBody):
            raise TypeError(f"ExpertsRenderer cannot render {type(body).__name__}")
        return self._render_list(body), self._render_detail(body)

    def _render_list(self, body: ExpertsBody) -> RenderableType:
        if body.is_empty:
            content = Text(EMPTY_EXPERTS_TEXT, style=THEME["muted"])
        else:
            content = Text()
            for position, name in enumerate(body.names):
                if position:
                    content.append("\n")
                style = THEME["selected_row"] if position == body.selected else THEME["text"]
                content.append(name, style=style)
        return Panel(content, title="Experts", title_align="left", border_style=THEME["border"])

    def _render_detail(self, body: ExpertsBody) -> RenderableType:
        table = Table(expand=True, header_style=THEME["table_header"], box=None)
        for title, ratio in DETAIL_COLUMNS:
            table.add_column(title, ratio=ratio, no_wrap=True)

        expert = body.detail
        if expert is not None:
            table.add_row(
                str(expert.id),
                expert.name,
                expert.category,
                str(expert.age),
                expert.created_at.isoformat(),
            )

        return Panel(table, title="Detail", title_align="left", border_style=THEME["border"])
