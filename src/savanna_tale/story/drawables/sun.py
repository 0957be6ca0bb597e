"""Sun drifting up and down once per loop."""

import math
from typing import TYPE_CHECKING

from ...constants import SUN_COLOR, TOTAL_DURATION, WIDTH
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas

SUN_X = WIDTH - 120
SUN_BASE_Y = 100
SUN_DRIFT = 20
SUN_RADIUS = 55


def sun_height(elapsed: float) -> float:
    """Vertical center of the sun; one full oscillation per loop."""
    return SUN_BASE_Y + math.sin(elapsed / TOTAL_DURATION * math.tau) * SUN_DRIFT


class Sun(Drawable):
    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        canvas.fill_style = SUN_COLOR
        canvas.begin_path()
        canvas.arc(SUN_X, sun_height(elapsed), SUN_RADIUS, 0, math.tau)
        canvas.fill()
