"""
State management for the UI: view selection, run state, and the selection cursor.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ViewState(Enum):
    """Top-level screen currently displayed."""

    HOME = 0
    EXPERTS = 1


class RunState(Enum):
    """Lifecycle of the dashboard loop."""

    RUNNING = "running"
    QUITTING = "quitting"


@dataclass
class SelectionCursor:
    """
    Index of the highlighted expert in the list view.

    The cursor never caches the list length: every operation takes the length
    freshly read from the store. `index` is None when nothing is selected.
    """

    index: Optional[int] = 0

    @property
    def has_selection(self) -> bool:
        return self.index is not None

    def next(self, current_len: int) -> None:
        """Move down one row, wrapping from the last row to the first."""
        if self.index is None or current_len <= 0:
            return
        if self.index >= current_len - 1:
            self.index = 0
        else:
            self.index += 1

    def previous(self, current_len: int) -> None:
        """Move up one row, wrapping from the first row to the last."""
        if self.index is None or current_len <= 0:
            return
        if self.index == 0 or self.index > current_len - 1:
            self.index = current_len - 1
        else:
            self.index -= 1

    def repair_after_removal(self, removed_index: int, remaining_len: int) -> None:
        """
        Keep the cursor valid after the row at removed_index was deleted.

        The cursor moves to the row before the removed one. Removing the first
        row clamps to 0, and an emptied list clears the selection.

        Args:
            removed_index: Position that was removed
            remaining_len: Length of the sequence after the removal
        """
        if remaining_len <= 0:
            self.index = None
            return
        self.index = min(max(removed_index - 1, 0), remaining_len - 1)

    def reconcile(self, current_len: int) -> None:
        """
        Re-validate the cursor against a freshly loaded length.

        Selects the first row when a list that had no selection is non-empty
        again, and clamps an index that points past the end.
        """
        if current_len <= 0:
            self.index = None
        elif self.index is None:
            self.index = 0
        elif self.index > current_len - 1:
            self.index = current_len - 1
