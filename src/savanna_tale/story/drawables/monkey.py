"""The monkey: teasing the lion's tail, startled, caught, then gone."""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ...constants import (
    AFTERMATH_DURATION,
    AFTERMATH_START,
    HEIGHT,
    MONKEY_BODY_COLOR,
    MONKEY_FACE_COLOR,
    MONKEY_FEATURE_COLOR,
    MONKEY_HEAD_COLOR,
    PLAY_DURATION,
    POUNCE_DURATION,
    POUNCE_START,
    WARNING_DURATION,
    WARNING_START,
    WIDTH,
)
from ..easing import ease_in_out, lerp, progress
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas

START_POSITION = (WIDTH * 0.25, HEIGHT * 0.62)
RETREAT_TARGET = (WIDTH * 0.42, HEIGHT * 0.58)
RETREAT_FRACTION = 0.6  # The monkey only backs off part of the way
LEAP_TARGET = (WIDTH * 0.54, HEIGHT * 0.56)
LEAP_LIFT = 20
BOB_AMPLITUDE = 6
# Below this opacity every channel rounds to fully transparent
MIN_VISIBLE_OPACITY = 0.5 / 255


@dataclass(frozen=True, slots=True)
class MonkeyPose:
    """Everything about the monkey that changes over time."""
    play: float
    warning: float
    pounce: float
    aftermath: float
    x: float
    y: float
    bob: float
    squash: float
    opacity: float

    @property
    def visible(self) -> bool:
        return self.opacity > MIN_VISIBLE_OPACITY


def tail_contact_point(elapsed: float) -> tuple[float, float]:
    """Where the monkey grabs the lion's tail, jittering as it tugs."""
    return (
        WIDTH * 0.36 + math.sin(elapsed * 2.2) * 10,
        HEIGHT * 0.38 + math.cos(elapsed * 2.4) * 6,
    )


def monkey_pose(elapsed: float) -> MonkeyPose:
    """
    Compute the monkey's pose for a point in the loop.

    Each stage interpolates from the position the previous stage produced
    at this same instant, so the tail-contact jitter carries into the
    retreat and the leap.
    """
    play = progress(elapsed, 0.0, PLAY_DURATION)
    warning = progress(elapsed, WARNING_START, WARNING_DURATION)
    pounce = progress(elapsed, POUNCE_START, POUNCE_DURATION)
    aftermath = progress(elapsed, AFTERMATH_START, AFTERMATH_DURATION)

    contact_x, contact_y = tail_contact_point(elapsed)
    eased_play = ease_in_out(play)
    play_x = lerp(START_POSITION[0], contact_x, eased_play)
    play_y = lerp(START_POSITION[1], contact_y, eased_play)

    retreat_x = lerp(play_x, RETREAT_TARGET[0], warning * RETREAT_FRACTION)
    retreat_y = lerp(play_y, RETREAT_TARGET[1], warning * RETREAT_FRACTION)

    leap_x = lerp(retreat_x, LEAP_TARGET[0], pounce)
    leap_y = lerp(retreat_y, LEAP_TARGET[1], pounce) - pounce * LEAP_LIFT

    return MonkeyPose(
        play=play,
        warning=warning,
        pounce=pounce,
        aftermath=aftermath,
        x=leap_x,
        y=leap_y,
        bob=math.sin(elapsed * 5) * (1 - pounce) * BOB_AMPLITUDE,
        squash=1 - pounce * 0.2,
        opacity=1 - aftermath,
    )


class Monkey(Drawable):
    """Procedural monkey pose model."""

    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        pose = monkey_pose(elapsed)
        if not pose.visible:
            return

        canvas.save()
        canvas.global_alpha = pose.opacity
        canvas.translate(pose.x, pose.y - pose.bob)
        canvas.scale(1, pose.squash)

        self._draw_body(canvas)
        self._draw_face(canvas, pose.warning)
        self._draw_limbs(canvas)

        canvas.restore()

    def _draw_body(self, canvas: "Canvas") -> None:
        canvas.fill_style = MONKEY_BODY_COLOR
        canvas.begin_path()
        canvas.ellipse(0, 0, 40, 30, 0)
        canvas.fill()

        canvas.fill_style = MONKEY_HEAD_COLOR
        canvas.begin_path()
        canvas.ellipse(-10, -42, 22, 24, 0)
        canvas.fill()

    def _draw_face(self, canvas: "Canvas", warning: float) -> None:
        canvas.fill_style = MONKEY_FACE_COLOR
        canvas.begin_path()
        canvas.ellipse(-10, -48, 10, 12, 0)
        canvas.fill()

        canvas.fill_style = MONKEY_FEATURE_COLOR
        canvas.begin_path()
        canvas.arc(-14, -52, 3, 0, math.tau)
        canvas.arc(-6, -52, 3, 0, math.tau)
        canvas.fill()

        # Brow arches up when the lion turns
        canvas.stroke_style = MONKEY_FEATURE_COLOR
        canvas.line_width = 2.5
        canvas.begin_path()
        canvas.move_to(-18, -40)
        canvas.quadratic_curve_to(-10, -34 - warning * 8, -2, -40)
        canvas.stroke()

    def _draw_limbs(self, canvas: "Canvas") -> None:
        # Arms
        canvas.line_width = 6
        self._stroke_curve(canvas, (20, -12), (60, 20), (40, 54))
        self._stroke_curve(canvas, (-20, -12), (-60, 20), (-40, 62))

        # Legs
        canvas.line_width = 5
        self._stroke_curve(canvas, (-18, 4), (-60, 40), (-40, 76))
        self._stroke_curve(canvas, (22, 4), (64, 44), (52, 74))

        # Tail
        canvas.stroke_style = MONKEY_HEAD_COLOR
        canvas.line_width = 6
        self._stroke_curve(canvas, (-34, -10), (-78, -40), (-64, -86))

    @staticmethod
    def _stroke_curve(
        canvas: "Canvas",
        start: tuple[float, float],
        control: tuple[float, float],
        end: tuple[float, float],
    ) -> None:
        canvas.begin_path()
        canvas.move_to(*start)
        canvas.quadratic_curve_to(*control, *end)
        canvas.stroke()
