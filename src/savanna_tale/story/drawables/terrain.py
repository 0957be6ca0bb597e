"""Savanna ground with drifting heat waves."""

import math
from typing import TYPE_CHECKING

from ...constants import GROUND_COLOR, GROUND_WAVE_COLOR, HEIGHT, WIDTH
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas

HORIZON_Y = HEIGHT * 0.65
WAVE_COUNT = 6
WAVE_SPACING = 18  # Vertical gap between wave lines
WAVE_STEP = 20  # Horizontal sampling interval
WAVE_AMPLITUDE = 4


def wave_offset(x: float, elapsed: float, index: int) -> float:
    """Vertical displacement of wave line index at horizontal position x."""
    return math.sin(x / 80 + elapsed + index) * WAVE_AMPLITUDE


class Terrain(Drawable):
    """Ground band plus six phase-shifted wavy strokes."""

    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        canvas.fill_style = GROUND_COLOR
        canvas.fill_rect(0, HORIZON_Y, WIDTH, HEIGHT - HORIZON_Y)

        canvas.stroke_style = GROUND_WAVE_COLOR
        canvas.line_width = 3
        for index in range(WAVE_COUNT):
            y = HORIZON_Y + index * WAVE_SPACING
            canvas.begin_path()
            for x in range(0, WIDTH + 1, WAVE_STEP):
                offset = wave_offset(x, elapsed, index)
                if x == 0:
                    canvas.move_to(x, y + offset)
                else:
                    canvas.line_to(x, y + offset)
            canvas.stroke()
