"""
Store error types.

Every failure raised by a store carries a StoreErrorKind so callers can
branch on the cause without string matching.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class StoreErrorKind(Enum):
    """Failure causes for store operations."""

    READ = "read"
    PARSE = "parse"
    WRITE = "write"
    INDEX_OUT_OF_RANGE = "index_out_of_range"


class StoreError(Exception):
    """Base class for all store failures."""

    kind: StoreErrorKind

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


class StoreReadError(StoreError):
    """The backing container is missing, unreadable, or failed mid-read."""

    kind = StoreErrorKind.READ


class StoreParseError(StoreError):
    """The container content is not a valid sequence of experts."""

    kind = StoreErrorKind.PARSE


class StoreWriteError(StoreError):
    """Persisting the updated sequence failed."""

    kind = StoreErrorKind.WRITE


class IndexOutOfRange(StoreError, IndexError):
    """A removal or lookup referenced a position outside the sequence."""

    kind = StoreErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, length: int, path: Optional[Path] = None) -> None:
        super().__init__(
            f"index {index} is out of range for {length} expert(s)", path
        )
        self.index = index
        self.length = length
