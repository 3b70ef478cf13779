"""
File-backed expert store.

The whole sequence lives in one JSON file. Every operation re-reads the file
and every mutation rewrites it in full, so the on-disk container is the only
source of truth. There is no locking; concurrent writers are not supported.
"""

from __future__ import annotations

import contextlib
import logging
import os
from pathlib import Path
from typing import List, Union

from ..schemas.expert import Expert
from .codec import decode_experts, encode_experts
from .errors import IndexOutOfRange, StoreReadError, StoreWriteError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Expert store persisted as a single JSON array on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def initialize(self) -> bool:
        """
        Create an empty container if none exists yet.

        Returns:
            True if a new container was written, False if one already existed

        Raises:
            StoreWriteError: Directory or file could not be created
        """
        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreWriteError("error creating the DB directory", self.path) from e
        self._persist([])
        logger.info("Created empty expert store at %s", self.path)
        return True

    def load(self) -> List[Expert]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise StoreReadError(f"error reading the DB file: {e}", self.path) from e
        return decode_experts(raw, self.path)

    def get(self, index: int) -> Expert:
        experts = self.load()
        self._check_index(index, len(experts))
        return experts[index]

    def append(self, expert: Expert) -> List[Expert]:
        experts = self.load()
        experts.append(expert)
        self._persist(experts)
        logger.debug("Appended expert id=%s, store now holds %d", expert.id, len(experts))
        return experts

    def remove_at(self, index: int) -> None:
        experts = self.load()
        self._check_index(index, len(experts))
        removed = experts.pop(index)
        self._persist(experts)
        logger.debug(
            "Removed expert id=%s at %d, store now holds %d",
            removed.id,
            index,
            len(experts),
        )

    def _check_index(self, index: int, length: int) -> None:
        if not 0 <= index < length:
            raise IndexOutOfRange(index, length, self.path)

    def _persist(self, experts: List[Expert]) -> None:
        """Write the full sequence through a temp file and an atomic replace."""
        payload = encode_experts(experts)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp_path.write_bytes(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise StoreWriteError(f"error writing the DB file: {e}", self.path) from e
