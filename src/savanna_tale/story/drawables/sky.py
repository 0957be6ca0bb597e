"""Static sky backdrop."""

from typing import TYPE_CHECKING

from ...constants import SKY_GRADIENT_STOPS
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas


class Sky(Drawable):
    """Warm vertical gradient covering the whole canvas."""

    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        gradient = canvas.create_linear_gradient(0, 0, 0, canvas.height)
        for offset, color in SKY_GRADIENT_STOPS:
            gradient.add_color_stop(offset, color)
        canvas.fill_style = gradient
        canvas.fill_rect(0, 0, canvas.width, canvas.height)
