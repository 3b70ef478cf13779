"""
JSON encoding for the expert container.

Both stores go through these helpers so a file and an in-memory container
accept and produce exactly the same bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from ..schemas.expert import Expert, ExpertList
from .errors import StoreParseError


def decode_experts(raw: bytes, path: Optional[Path] = None) -> List[Expert]:
    """
    Parse a serialized container into experts.

    Args:
        raw: Full container content
        path: Container location, used in error messages

    Returns:
        Experts in stored order

    Raises:
        StoreParseError: Content is not a JSON array of valid experts
    """
    try:
        return ExpertList.validate_json(raw)
    except ValidationError as e:
        raise StoreParseError(
            f"error parsing the DB file: {e.error_count()} problem(s), "
            f"first: {e.errors()[0]['msg']}",
            path,
        ) from e


def encode_experts(experts: Sequence[Expert]) -> bytes:
    """Serialize the full sequence as one JSON array."""
    return ExpertList.dump_json(list(experts), indent=2)
