"""Tests for frame composition."""

from savanna_tale.story.canvas import Canvas, FillGradientRect
from savanna_tale.story.composer import compose_frame, iter_scene_layers
from savanna_tale.story.drawables import Dust, Lion, Monkey, Sky, Sun, Terrain


def _layer_commands(elapsed: float, skip: type | None = None) -> tuple:
    """Record each layer on its own canvas and concatenate in painter order."""
    recorded = []
    for layer in iter_scene_layers():
        if skip is not None and isinstance(layer, skip):
            continue
        canvas = Canvas()
        layer.draw(canvas, elapsed)
        recorded.extend(canvas.commands)
    return tuple(recorded)


def _compose(elapsed: float, canvas: Canvas | None = None) -> Canvas:
    canvas = canvas or Canvas()
    compose_frame(canvas, elapsed)
    return canvas


def test_layers_are_painted_back_to_front():
    assert [type(layer) for layer in iter_scene_layers()] == [Sky, Sun, Terrain, Lion, Monkey, Dust]


def test_frame_starts_with_the_sky():
    assert isinstance(_compose(4).commands[0], FillGradientRect)


def test_frame_is_concatenation_of_layers_in_order():
    for elapsed in (0.0, 7.5, 12.0, 18.0):
        assert _compose(elapsed).commands == _layer_commands(elapsed)


def test_composition_is_deterministic():
    """Composing twice at the same time must record identical commands."""
    for elapsed in (0.0, 3.3, 10.01, 19.5):
        assert _compose(elapsed).commands == _compose(elapsed).commands


def test_recomposing_on_same_canvas_replaces_previous_frame():
    canvas = _compose(5.0)
    first = canvas.commands
    compose_frame(canvas, 15.0)
    compose_frame(canvas, 5.0)
    assert canvas.commands == first


def test_vanished_monkey_is_absent_from_the_frame():
    elapsed = 20 - 1e-4
    assert _compose(elapsed).commands == _layer_commands(elapsed, skip=Monkey)
