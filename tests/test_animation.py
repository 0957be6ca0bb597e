"""Tests for frame generation and animation encoding."""

from io import BytesIO

import pytest
from PIL import Image, ImageSequence

from savanna_tale.animation_pipeline import encode_animation
from savanna_tale.config import RenderSettings
from savanna_tale.output import GifOutputProvider
from savanna_tale.story.raster_animation import frames_per_loop, generate_raster_frames, render_still
from savanna_tale.story.scenes import SceneInterval

SMALL = RenderSettings(fps=2, scale=0.1)


def test_frames_per_loop():
    assert frames_per_loop(30) == 600
    assert frames_per_loop(2) == 40


def test_generates_one_loop_of_frames():
    frames = list(generate_raster_frames(SMALL))
    assert len(frames) == 40
    assert all(frame.size == (96, 54) for frame in frames)


def test_loops_and_max_frames():
    assert len(list(generate_raster_frames(SMALL.with_overrides(loops=2)))) == 80
    assert len(list(generate_raster_frames(SMALL, max_frames=5))) == 5


def test_reports_each_scene_once_per_loop():
    seen: list[SceneInterval] = []
    list(generate_raster_frames(SMALL.with_overrides(loops=2), on_scene_change=seen.append))

    assert [scene.id for scene in seen] == [
        "playful",
        "warning",
        "pounce",
        "aftermath",
    ] * 2


def test_generation_is_deterministic():
    first = [frame.tobytes() for frame in generate_raster_frames(SMALL, max_frames=4)]
    second = [frame.tobytes() for frame in generate_raster_frames(SMALL, max_frames=4)]
    assert first == second


def test_frames_change_over_time():
    frames = list(generate_raster_frames(SMALL, max_frames=3))
    assert frames[0].tobytes() != frames[2].tobytes()


def test_still_matches_generated_frame():
    settings = RenderSettings(fps=2, scale=0.25)
    frames = list(generate_raster_frames(settings, max_frames=25))
    # Frame 24 is shown at 12 seconds
    assert render_still(12.0, settings).tobytes() == frames[24].tobytes()


def test_still_wraps_past_the_loop():
    settings = RenderSettings(scale=0.1)
    assert render_still(25.0, settings).tobytes() == render_still(5.0, settings).tobytes()


@pytest.mark.parametrize("elapsed", [-0.5, float("inf"), float("nan")])
def test_still_rejects_invalid_time(elapsed):
    with pytest.raises(ValueError, match="must be a non-negative number"):
        render_still(elapsed, SMALL)


def test_generation_can_start_mid_loop():
    settings = RenderSettings(fps=2, scale=0.25)
    seen: list[SceneInterval] = []
    frames = list(generate_raster_frames(settings, max_frames=3, on_scene_change=seen.append, start_at=32.0))

    assert frames[0].tobytes() == render_still(12.0, settings).tobytes()
    assert frames[2].tobytes() == render_still(13.0, settings).tobytes()
    assert [scene.id for scene in seen] == ["pounce"]


def test_generation_rejects_invalid_start():
    with pytest.raises(ValueError, match="seek position"):
        list(generate_raster_frames(SMALL, max_frames=1, start_at=float("inf")))


def test_captions_change_the_frame():
    plain = render_still(3.0, RenderSettings(scale=0.5))
    captioned = render_still(3.0, RenderSettings(scale=0.5, captions=True))
    assert plain.size == captioned.size
    assert plain.tobytes() != captioned.tobytes()


def test_encode_animation_picks_format_from_path():
    encoded = encode_animation("tale.gif", SMALL, max_frames=3)
    assert encoded.startswith(b"GIF89")
    with Image.open(BytesIO(encoded)) as img:
        assert img.size == (96, 54)
        assert img.info["duration"] == 500


def test_encode_animation_with_explicit_provider():
    encoded = encode_animation("ignored.webp", SMALL, max_frames=2, provider=GifOutputProvider())
    assert encoded.startswith(b"GIF89")


def test_encode_animation_rejects_unknown_format():
    with pytest.raises(ValueError, match="Unsupported output format"):
        encode_animation("tale.bmp", SMALL, max_frames=1)


def _loop_length_ms(encoded: bytes) -> float:
    total = 0.0
    with Image.open(BytesIO(encoded)) as img:
        for frame in ImageSequence.Iterator(img):
            frame.load()
            total += frame.info["duration"]
    return total


@pytest.mark.parametrize(("path", "fps"), [("tale.gif", 30), ("tale.webp", 30), ("tale.png", 7)])
def test_encoded_loop_lasts_the_whole_story(path, fps):
    encoded = encode_animation(path, RenderSettings(fps=fps, scale=0.05))
    assert _loop_length_ms(encoded) == pytest.approx(20_000)


def test_encoded_loops_add_up():
    encoded = encode_animation("tale.gif", RenderSettings(fps=12, scale=0.05, loops=2))
    assert _loop_length_ms(encoded) == pytest.approx(40_000)
