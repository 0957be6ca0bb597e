"""Raster (Pillow) frame generators built on top of the playback driver."""

import math
from typing import Iterator

from PIL import Image

from ..config import RenderSettings
from ..constants import TOTAL_DURATION
from .canvas import Canvas
from .clock import PlaybackDriver, SceneChangeCallback
from .composer import compose_frame
from .renderer import Renderer
from .scenes import SceneInterval, resolve_scene
from .scheduler import SteppedFrameScheduler


def frames_per_loop(fps: int) -> int:
    return round(TOTAL_DURATION * fps)


def generate_raster_frames(
    settings: RenderSettings,
    max_frames: int | None = None,
    on_scene_change: SceneChangeCallback | None = None,
    start_at: float = 0.0,
) -> Iterator[Image.Image]:
    """
    Play the story on a stepped scheduler and yield one image per frame.

    Args:
        settings: Frame rate, output scale, caption and loop settings
        max_frames: Stop after this many frames
        on_scene_change: Caption collaborator notified on each scene change
        start_at: Loop time in seconds shown by the first frame
    """
    canvas = Canvas()
    renderer = Renderer(canvas.width, canvas.height, scale=settings.scale)
    scheduler = SteppedFrameScheduler(settings.fps)
    driver = PlaybackDriver(canvas, scheduler, on_scene_change=on_scene_change)
    driver.seek(start_at)
    driver.start()

    total = frames_per_loop(settings.fps) * settings.loops
    if max_frames is not None:
        total = min(total, max_frames)

    for _ in range(total):
        scheduler.step()
        caption = _caption_for(driver.active_scene) if settings.captions else None
        yield renderer.render_frame(canvas, caption)

    driver.stop()


def render_still(elapsed: float, settings: RenderSettings) -> Image.Image:
    """Render the single frame shown at elapsed seconds (wrapped into the loop)."""
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValueError(f"elapsed time must be a non-negative number, got {elapsed}")
    loop_time = elapsed % TOTAL_DURATION
    canvas = Canvas()
    compose_frame(canvas, loop_time)
    caption = _caption_for(resolve_scene(loop_time)) if settings.captions else None
    return Renderer(canvas.width, canvas.height, scale=settings.scale).render_frame(canvas, caption)


def _caption_for(scene: SceneInterval | None) -> str | None:
    return scene.caption if scene is not None else None
