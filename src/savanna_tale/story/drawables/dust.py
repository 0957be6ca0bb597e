"""Dust cloud kicked up by the pounce."""

import math
from typing import TYPE_CHECKING

from ...constants import DUST_COLOR, DUST_DURATION, HEIGHT, POUNCE_START, WIDTH
from ..easing import progress
from .drawable import Drawable

if TYPE_CHECKING:
    from ..canvas import Canvas

PARTICLE_COUNT = 14
CLOUD_CENTER = (WIDTH * 0.5, HEIGHT * 0.58)
CLOUD_FLATTEN = 0.4  # Vertical squash of the ring


def dust_progress(elapsed: float) -> float:
    return progress(elapsed, POUNCE_START, DUST_DURATION)


def dust_particles(elapsed: float) -> list[tuple[float, float, float, float]]:
    """
    Particle layout for a point in the loop.

    Returns:
        (x, y, radius, alpha) per particle; empty before the pounce.
        Particles have no identity: the ring is rebuilt from the angle index.
    """
    if elapsed < POUNCE_START:
        return []

    amount = dust_progress(elapsed)
    ring_radius = 40 + amount * 80
    particle_radius = 10 - amount * 6
    alpha = 0.4 - amount * 0.3

    particles = []
    for i in range(PARTICLE_COUNT):
        angle = i / PARTICLE_COUNT * math.tau
        x = CLOUD_CENTER[0] + math.cos(angle) * ring_radius
        y = CLOUD_CENTER[1] + math.sin(angle) * ring_radius * CLOUD_FLATTEN
        particles.append((x, y, particle_radius, alpha))
    return particles


class Dust(Drawable):
    def draw(self, canvas: "Canvas", elapsed: float) -> None:
        for x, y, radius, alpha in dust_particles(elapsed):
            canvas.fill_style = (*DUST_COLOR, round(alpha * 255))
            canvas.begin_path()
            canvas.arc(x, y, radius, 0, math.tau)
            canvas.fill()
