"""
In-memory expert store.

Holds the serialized container as bytes and goes through the same codec as
the file store, so parse and round-trip behavior match exactly.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..schemas.expert import Expert
from .codec import decode_experts, encode_experts
from .errors import IndexOutOfRange, StoreReadError, StoreWriteError


class InMemoryExpertStore:
    """Expert store backed by an in-memory container."""

    def __init__(self, experts: Optional[Iterable[Expert]] = None) -> None:
        self.payload: bytes = encode_experts(list(experts or []))
        self.fail_reads = False
        self.fail_writes = False
        self.writes = 0

    @classmethod
    def from_raw(cls, payload: bytes) -> "InMemoryExpertStore":
        """Create a store over arbitrary container bytes."""
        store = cls()
        store.payload = payload
        return store

    def load(self) -> List[Expert]:
        if self.fail_reads:
            raise StoreReadError("error reading the in-memory container")
        return decode_experts(self.payload)

    def get(self, index: int) -> Expert:
        experts = self.load()
        if not 0 <= index < len(experts):
            raise IndexOutOfRange(index, len(experts))
        return experts[index]

    def append(self, expert: Expert) -> List[Expert]:
        experts = self.load()
        experts.append(expert)
        self._persist(experts)
        return experts

    def remove_at(self, index: int) -> None:
        experts = self.load()
        if not 0 <= index < len(experts):
            raise IndexOutOfRange(index, len(experts))
        del experts[index]
        self._persist(experts)

    def _persist(self, experts: List[Expert]) -> None:
        if self.fail_writes:
            raise StoreWriteError("error writing the in-memory container")
        self.payload = encode_experts(experts)
        self.writes += 1
