"""Tests for output providers."""

from io import BytesIO

import pytest
from PIL import Image, ImageSequence

from savanna_tale.output import (
    ApngOutputProvider,
    GifOutputProvider,
    WebPOutputProvider,
    frame_durations,
    media_type_for_output_format,
    output_path_for_format,
    resolve_output_provider,
    supported_output_formats,
)


def create_test_frame(color="red"):
    """Helper to create a test frame."""
    return Image.new("RGB", (10, 10), color)


def _frames():
    return iter([create_test_frame("red"), create_test_frame("blue"), create_test_frame("green")])


def test_gif_provider_encodes_frames():
    result = GifOutputProvider("test_output.gif").encode(_frames(), frame_duration=100)

    assert result.startswith(b"GIF89")
    with Image.open(BytesIO(result)) as img:
        assert img.n_frames == 3
        assert img.info["loop"] == 0
        assert img.info["duration"] == 100


def test_webp_provider_encodes_frames():
    result = WebPOutputProvider("test_output.webp").encode(_frames(), frame_duration=50)

    assert result[:4] == b"RIFF"
    assert result[8:12] == b"WEBP"
    with Image.open(BytesIO(result)) as img:
        assert img.n_frames == 3


def test_apng_provider_encodes_animated_png():
    result = ApngOutputProvider("test_output.png").encode(_frames(), frame_duration=50)

    assert result.startswith(b"\x89PNG")
    assert b"acTL" in result
    with Image.open(BytesIO(result)) as img:
        assert img.n_frames == 3


@pytest.mark.parametrize("provider_class", [GifOutputProvider, WebPOutputProvider, ApngOutputProvider])
def test_empty_frames_encode_to_nothing(provider_class):
    assert provider_class("out").encode(iter([]), frame_duration=100) == b""


def test_frame_delay_is_at_least_one_step():
    result = GifOutputProvider().encode(_frames(), frame_duration=0)
    with Image.open(BytesIO(result)) as img:
        assert img.info["duration"] == 10


def test_frame_durations_spread_rounding_error():
    durations = frame_durations(3, 1000 / 30)
    assert durations == [33, 34, 33]
    assert sum(frame_durations(600, 1000 / 30)) == 20_000


def test_frame_durations_respect_step():
    durations = frame_durations(30, 1000 / 30, step=10)
    assert set(durations) == {30, 40}
    assert sum(durations) == 1000


def test_frame_durations_for_exact_rates():
    assert frame_durations(4, 125) == [125] * 4
    assert frame_durations(0, 125) == []


def _total_duration(encoded: bytes) -> float:
    total = 0.0
    with Image.open(BytesIO(encoded)) as img:
        for frame in ImageSequence.Iterator(img):
            frame.load()
            total += frame.info["duration"]
    return total


@pytest.mark.parametrize("provider_class", [GifOutputProvider, WebPOutputProvider, ApngOutputProvider])
def test_encoded_delays_add_up_to_the_frame_time(provider_class):
    frames = [create_test_frame((i * 8, 0, 0)) for i in range(30)]
    encoded = provider_class().encode(iter(frames), frame_duration=1000 / 30)
    assert _total_duration(encoded) == pytest.approx(1000)


@pytest.mark.parametrize(
    ("path", "provider_class"),
    [
        ("tale.gif", GifOutputProvider),
        ("tale.webp", WebPOutputProvider),
        ("tale.png", ApngOutputProvider),
        ("dir/TALE.GIF", GifOutputProvider),
    ],
)
def test_resolve_output_provider(path, provider_class):
    provider = resolve_output_provider(path)
    assert isinstance(provider, provider_class)
    assert provider.path == path


@pytest.mark.parametrize("path", ["tale.svg", "tale"])
def test_resolve_output_provider_rejects_unknown_formats(path):
    with pytest.raises(ValueError, match="Unsupported output format"):
        resolve_output_provider(path)


def test_supported_formats():
    assert supported_output_formats() == ("gif", "webp", "png")


def test_media_types():
    assert media_type_for_output_format("gif") == "image/gif"
    assert media_type_for_output_format("WEBP") == "image/webp"
    assert media_type_for_output_format("png") == "image/apng"


def test_output_path_for_format():
    assert output_path_for_format("webp") == "output.webp"
    assert output_path_for_format("gif", base_name="tale") == "tale.gif"


def test_unknown_format_name_is_rejected():
    with pytest.raises(ValueError, match="Invalid format. Choose from: gif, webp, png"):
        media_type_for_output_format("bmp")
