"""Renderers package exports."""

from .base import BaseRenderer
from .experts import ExpertsRenderer
from .home import HomeRenderer
from .menu import FooterRenderer, MenuRenderer

__all__ = [
    "BaseRenderer",
    "ExpertsRenderer",
    "FooterRenderer",
    "HomeRenderer",
    "MenuRenderer",
]
