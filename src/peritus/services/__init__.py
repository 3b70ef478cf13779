"""
Services used by the dashboard.
"""

from .expert_factory import ExpertFactory

__all__ = ["ExpertFactory"]
