"""
Base renderer class for UI components.
"""

from abc import ABC, abstractmethod

from rich.console import RenderableType

from ..frame import Frame


class BaseRenderer(ABC):
    """Abstract base class for all frame renderers."""

    @abstractmethod
    def render(self, frame: Frame) -> RenderableType:
        """Render the component for the given frame."""
        pass
