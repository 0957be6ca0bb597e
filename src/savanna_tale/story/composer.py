"""Frame composition: paint every layer back to front."""

from collections.abc import Iterator
from typing import TYPE_CHECKING

from .drawables import Drawable, Dust, Lion, Monkey, Sky, Sun, Terrain

if TYPE_CHECKING:
    from .canvas import Canvas

# Painter order, back to front
SCENE_LAYERS: tuple[Drawable, ...] = (
    Sky(),
    Sun(),
    Terrain(),
    Lion(),
    Monkey(),
    Dust(),
)


def iter_scene_layers() -> Iterator[Drawable]:
    """Yield drawables in painter order from back to front."""
    yield from SCENE_LAYERS


def compose_frame(canvas: "Canvas", elapsed: float) -> None:
    """Clear the canvas and paint the frame for elapsed seconds into the loop."""
    canvas.clear_rect(0, 0, canvas.width, canvas.height)
    for layer in iter_scene_layers():
        layer.draw(canvas, elapsed)
