"""
Expert record model.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Expert(BaseModel):
    """
    One persisted expert.

    Records are immutable once created; the store only ever replaces the
    whole sequence. Validation is strict, so loosely typed values in a
    container are rejected instead of converted.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: int = Field(ge=0, description="Random identifier, not guaranteed unique")
    name: str = Field(description="Display name")
    category: str = Field(description="Expert category")
    age: int = Field(ge=0, description="Age in years")
    created_at: datetime = Field(description="Creation timestamp (UTC)")


ExpertList = TypeAdapter(List[Expert])
"""Adapter used to parse and serialize a whole JSON array of experts."""
