"""Base class for everything painted into a frame."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..canvas import Canvas


class Drawable(ABC):
    """A stateless layer whose appearance depends only on elapsed time."""

    @abstractmethod
    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        """
        Issue the drawing commands for this layer.

        Args:
            canvas: Surface to draw on, in logical canvas coordinates
            elapsed: Seconds into the current loop, within [0, TOTAL_DURATION)
        """
        raise NotImplementedError
