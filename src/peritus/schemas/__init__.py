"""
Pydantic schemas for persisted records.
"""

from .expert import Expert, ExpertList

__all__ = [
    "Expert",
    "ExpertList",
]
