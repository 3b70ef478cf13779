"""
Expert persistence: the store protocol, its implementations, and errors.
"""

from .errors import (
    IndexOutOfRange,
    StoreError,
    StoreErrorKind,
    StoreParseError,
    StoreReadError,
    StoreWriteError,
)
from .json_store import JsonFileStore
from .memory_store import InMemoryExpertStore
from .protocol import ExpertStore

__all__ = [
    "ExpertStore",
    "JsonFileStore",
    "InMemoryExpertStore",
    "StoreError",
    "StoreErrorKind",
    "StoreReadError",
    "StoreParseError",
    "StoreWriteError",
    "IndexOutOfRange",
]
