"""Tests for render settings."""

import pytest

from savanna_tale.config import RenderSettings
from savanna_tale.constants import DEFAULT_FPS


def test_defaults():
    settings = RenderSettings.from_env({})
    assert settings == RenderSettings(fps=DEFAULT_FPS, scale=1.0, captions=False, loops=1)
    assert settings.frame_duration == pytest.approx(1000 / 30)


def test_reads_environment():
    settings = RenderSettings.from_env(
        {
            "SAVANNA_TALE_FPS": "12",
            "SAVANNA_TALE_SCALE": "0.5",
            "SAVANNA_TALE_CAPTIONS": "yes",
            "SAVANNA_TALE_LOOPS": "2",
        }
    )
    assert settings == RenderSettings(fps=12, scale=0.5, captions=True, loops=2)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("SAVANNA_TALE_FPS", "24")
    assert RenderSettings.from_env().fps == 24


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("ON", True), ("false", False), ("0", False), ("", False)])
def test_boolean_spellings(raw, expected):
    assert RenderSettings.from_env({"SAVANNA_TALE_CAPTIONS": raw}).captions is expected


@pytest.mark.parametrize(
    ("name", "raw"),
    [("SAVANNA_TALE_FPS", "fast"), ("SAVANNA_TALE_SCALE", "big"), ("SAVANNA_TALE_CAPTIONS", "maybe")],
)
def test_malformed_values_name_the_variable(name, raw):
    with pytest.raises(ValueError, match=f"Invalid value for {name}"):
        RenderSettings.from_env({name: raw})


@pytest.mark.parametrize("field", ["fps", "scale", "loops"])
def test_rejects_non_positive_values(field):
    with pytest.raises(ValueError, match=f"{field} must be positive"):
        RenderSettings().with_overrides(**{field: 0})


def test_overrides_ignore_none():
    base = RenderSettings(fps=12, captions=True)
    assert base.with_overrides(fps=None, scale=2.0, captions=None) == RenderSettings(
        fps=12, scale=2.0, captions=True
    )


def test_frame_duration():
    assert RenderSettings(fps=10).frame_duration == 100
    assert RenderSettings(fps=8).frame_duration == 125
