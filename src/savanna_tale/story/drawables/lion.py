"""The lion: resting, bristling, then lunging at the monkey."""

import math
from typing import TYPE_CHECKING

from ...constants import (
    ANGER_RAMP,
    HEIGHT,
    LION_BODY_COLOR,
    LION_FACE_COLOR,
    LION_FANG_COLOR,
    LION_FEATURE_COLOR,
    LION_HEAD_COLOR,
    LION_LEG_COLOR,
    LION_MANE_COLOR,
    LION_MUZZLE_COLOR,
    LION_TAIL_COLOR,
    POUNCE_DURATION,
    POUNCE_START,
    WARNING_START,
    WIDTH,
)
from ..easing import progress
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas

LION_BASE_X = WIDTH * 0.6
LION_BASE_Y = HEIGHT * 0.6
POUNCE_REACH_X = 120  # How far the body travels toward the monkey
POUNCE_REACH_Y = 40
HEAD_OFFSET = (120, -42)  # Mane and face center relative to the body
MANE_RUFFLES = 12
FANG_THRESHOLD = 0.4  # Mouth opening beyond which the fangs show


def lion_anger(elapsed: float) -> float:
    """Anger ramps from 0 at the warning beat to 1 eight seconds later."""
    if elapsed < WARNING_START:
        return 0.0
    return min((elapsed - WARNING_START) / ANGER_RAMP, 1.0)


def lion_pounce_progress(elapsed: float) -> float:
    return progress(elapsed, POUNCE_START, POUNCE_DURATION)


def lion_body_position(elapsed: float) -> tuple[float, float]:
    """Body center, pulled toward the monkey while pouncing."""
    pounce = lion_pounce_progress(elapsed)
    return (
        LION_BASE_X - pounce * POUNCE_REACH_X,
        LION_BASE_Y - pounce * POUNCE_REACH_Y,
    )


def mouth_opening(anger: float) -> float:
    """Mouth sag: barely open while calm, tracking anger once it passes 0.3."""
    return anger if anger > 0.3 else anger * 0.5


def tail_sway(elapsed: float, pounce: float) -> float:
    """Tail swing in [-1, 1]; dies out as the pounce completes."""
    return math.sin(elapsed * 2) * (1 - pounce)


def mane_radius(angle: float, anger: float) -> float:
    return 80 + math.sin(angle * 3 + anger * 6) * 6


class Lion(Drawable):
    """Procedural lion pose model."""

    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        anger = lion_anger(elapsed)
        pounce = lion_pounce_progress(elapsed)
        body_x, body_y = lion_body_position(elapsed)

        canvas.save()
        canvas.translate(body_x, body_y)

        # Body
        canvas.fill_style = LION_BODY_COLOR
        canvas.begin_path()
        canvas.ellipse(0, 0, 140, 100, 0)
        canvas.fill()

        # Head
        canvas.fill_style = LION_HEAD_COLOR
        canvas.begin_path()
        canvas.ellipse(120, -40, 68, 60, 0)
        canvas.fill()

        self._draw_mane(canvas, anger)
        self._draw_face(canvas, anger)
        self._draw_tail(canvas, elapsed, pounce)
        self._draw_legs(canvas, pounce)

        canvas.restore()

    def _draw_mane(self, canvas: "Canvas", anger: float) -> None:
        """Ruffled mane outline; the ruffles shift as anger builds."""
        canvas.save()
        canvas.translate(*HEAD_OFFSET)
        canvas.fill_style = LION_MANE_COLOR
        canvas.begin_path()
        for i in range(MANE_RUFFLES + 1):
            angle = i / MANE_RUFFLES * math.tau
            radius = mane_radius(angle, anger)
            x = math.cos(angle) * radius
            y = math.sin(angle) * radius
            if i == 0:
                canvas.move_to(x, y)
            else:
                canvas.line_to(x, y)
        canvas.close_path()
        canvas.fill()
        canvas.restore()

    def _draw_face(self, canvas: "Canvas", anger: float) -> None:
        canvas.save()
        canvas.translate(*HEAD_OFFSET)

        canvas.fill_style = LION_FACE_COLOR
        canvas.begin_path()
        canvas.ellipse(0, 0, 40, 36, 0)
        canvas.fill()

        # Pupils widen and the brow lifts with anger
        pupil_y = -5 - anger * 4
        pupil_radius = 5 + anger * 1.2
        canvas.fill_style = LION_FEATURE_COLOR
        canvas.begin_path()
        canvas.arc(-10, pupil_y, pupil_radius, 0, math.tau)
        canvas.arc(10, pupil_y, pupil_radius, 0, math.tau)
        canvas.fill()

        canvas.fill_style = LION_MUZZLE_COLOR
        canvas.begin_path()
        canvas.ellipse(0, 18, 22, 16, 0)
        canvas.fill()

        opening = mouth_opening(anger)
        canvas.stroke_style = LION_FEATURE_COLOR
        canvas.line_width = 4
        canvas.begin_path()
        canvas.move_to(-18, 12)
        canvas.quadratic_curve_to(0, 32 + opening * 22, 18, 12)
        canvas.stroke()

        if opening > FANG_THRESHOLD:
            fang_tip_y = 26 + opening * 14
            canvas.fill_style = LION_FANG_COLOR
            for side in (-1, 1):
                canvas.begin_path()
                canvas.move_to(side * 16, 18)
                canvas.line_to(side * 8, fang_tip_y)
                canvas.line_to(side * 4, 18)
                canvas.close_path()
                canvas.fill()

        canvas.restore()

    def _draw_tail(self, canvas: "Canvas", elapsed: float, pounce: float) -> None:
        canvas.save()
        canvas.translate(-120, -30)
        canvas.stroke_style = LION_TAIL_COLOR
        canvas.line_width = 14
        canvas.line_cap = "round"

        sway = tail_sway(elapsed, pounce)
        tip_y = -20 - sway * 18
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.quadratic_curve_to(-120, -80 - sway * 30, -200, tip_y)
        canvas.stroke()

        # Tuft
        canvas.fill_style = LION_MANE_COLOR
        canvas.begin_path()
        canvas.ellipse(-200, tip_y, 18, 24, math.pi / 4)
        canvas.fill()
        canvas.restore()

    def _draw_legs(self, canvas: "Canvas", pounce: float) -> None:
        """Four limbs; front legs reach twice as far as back legs mid-pounce."""
        front = pounce * 40
        back = pounce * 20
        legs = (
            (-100 + back, 60 - back * 0.2, 40, 120),
            (-40 + back * 0.3, 72 - back * 0.5, 36, 118),
            (60 + front, 48 - front * 0.2, 40, 124),
            (110 + front * 1.2, 60 - front * 0.3, 38, 120),
        )
        canvas.fill_style = LION_LEG_COLOR
        for x, y, width, height in legs:
            canvas.begin_path()
            canvas.round_rect(x, y, width, height, 18)
            canvas.fill()
