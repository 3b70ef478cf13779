"""
Declarative frame description.

build_frame is a pure projection of dashboard state onto a Frame. A surface
turns the Frame into terminal output; nothing here touches the terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ...schemas.expert import Expert
from ...store.errors import IndexOutOfRange
from .state import ViewState
from .theme import FOOTER_TEXT, MENU_TITLES, WELCOME_LINES


@dataclass(frozen=True)
class HomeBody:
    """Welcome panel."""

    lines: Tuple[str, ...]


@dataclass(frozen=True)
class ExpertsBody:
    """Selectable list of expert names plus the detail row of the selection."""

    names: Tuple[str, ...]
    selected: Optional[int]
    detail: Optional[Expert]

    @property
    def is_empty(self) -> bool:
        return not self.names


Body = Union[HomeBody, ExpertsBody]


@dataclass(frozen=True)
class Frame:
    """One full screen: menu tabs, body, and footer."""

    menu_titles: Tuple[str, ...]
    active_menu: int
    body: Body
    footer: str


def build_frame(
    view: ViewState, experts: Sequence[Expert], selected: Optional[int]
) -> Frame:
    """
    Project the current state onto a frame.

    Args:
        view: Active top-level view
        experts: Freshly loaded store contents
        selected: Cursor index, or None when nothing is selected

    Returns:
        Frame describing the whole screen

    Raises:
        IndexOutOfRange: selected points outside experts
    """
    if selected is not None and not 0 <= selected < len(experts):
        raise IndexOutOfRange(selected, len(experts))

    body: Body
    if view is ViewState.EXPERTS:
        body = ExpertsBody(
            names=tuple(expert.name for expert in experts),
            selected=selected,
            detail=experts[selected] if selected is not None else None,
        )
    else:
        body = HomeBody(lines=WELCOME_LINES)

    return Frame(
        menu_titles=MENU_TITLES,
        active_menu=view.value,
        body=body,
        footer=FOOTER_TEXT,
    )
