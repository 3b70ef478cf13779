"""
UI Theme configuration: colors, labels, and fixed texts.
"""

from typing import Dict, Tuple

THEME: Dict[str, str] = {
    # Chrome
    "border": "white",
    "text": "white",
    "accent": "bright_cyan",
    # Menu
    "menu_hotkey": "yellow underline",
    "menu_active": "bold yellow",
    "menu_divider": "white",
    # Experts list
    "selected_row": "bold black on yellow",
    "table_header": "bold",
    "muted": "grey50",
    "error": "bold red",
}

MENU_TITLES: Tuple[str, ...] = ("Home", "Experts", "Add", "Delete", "Quit")

APP_NAME = "Peritus the Experts-CLI"

WELCOME_LINES: Tuple[str, ...] = (
    "",
    "Welcome",
    "",
    "to",
    "",
    APP_NAME,
    "",
    "Press 'e' to access experts, 'a' to add random new experts "
    "and 'd' to delete the currently selected expert.",
)

FOOTER_TEXT = "peritus-CLI 2021 - just kidding - no copyrights here"

EMPTY_EXPERTS_TEXT = "No experts yet. Press 'a' to add one."

DETAIL_COLUMNS: Tuple[Tuple[str, int], ...] = (
    ("ID", 5),
    ("Name", 20),
    ("Category", 20),
    ("Age", 5),
    ("Created At", 30),
)
