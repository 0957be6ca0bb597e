"""Shared fixtures for the test suite."""

import pytest

from savanna_tale.story.canvas import Canvas
from savanna_tale.story.scheduler import SteppedFrameScheduler

# Ten frames per second keeps timestamps on exact tenths of a second
TEST_FPS = 10


@pytest.fixture
def canvas() -> Canvas:
    return Canvas()


@pytest.fixture
def scheduler() -> SteppedFrameScheduler:
    return SteppedFrameScheduler(TEST_FPS)


@pytest.fixture(autouse=True)
def clean_render_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SAVANNA_TALE_* settings from the developer's shell out of tests."""
    for name in ("SAVANNA_TALE_FPS", "SAVANNA_TALE_SCALE", "SAVANNA_TALE_CAPTIONS", "SAVANNA_TALE_LOOPS"):
        monkeypatch.delenv(name, raising=False)
