"""
Random expert generation for the "add" command.
"""

from __future__ import annotations

import random
import string
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from ..schemas.expert import Expert

MAX_EXPERT_ID = 9_999_999
NAME_LENGTH = 10
DEFAULT_AGE = 6
CATEGORIES: Sequence[str] = ("areas", "directories")

_ALPHANUMERIC = string.ascii_letters + string.digits


class ExpertFactory:
    """
    Build randomly populated experts.

    Ids are drawn uniformly from 0..MAX_EXPERT_ID and are not checked for
    collisions against the store.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def __call__(self) -> Expert:
        return self.create()

    def create(self) -> Expert:
        """Create one expert with a random id, name, and category."""
        return Expert(
            id=self._rng.randint(0, MAX_EXPERT_ID),
            name="".join(self._rng.choice(_ALPHANUMERIC) for _ in range(NAME_LENGTH)),
            category=self._rng.choice(CATEGORIES),
            age=DEFAULT_AGE,
            created_at=self._clock(),
        )
