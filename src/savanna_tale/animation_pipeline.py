"""Shared animation orchestration used by CLI and web app entry points."""

from .config import RenderSettings
from .output import resolve_output_provider
from .output.base import OutputProvider
from .story.clock import SceneChangeCallback
from .story.raster_animation import generate_raster_frames


def encode_animation(
    output_path: str,
    settings: RenderSettings,
    *,
    max_frames: int | None = None,
    provider: OutputProvider | None = None,
    on_scene_change: SceneChangeCallback | None = None,
    start_at: float = 0.0,
) -> bytes:
    """Render the story loop, starting at start_at seconds, in the format of output_path."""
    target_provider = provider or resolve_output_provider(output_path)
    frames = generate_raster_frames(
        settings, max_frames, on_scene_change=on_scene_change, start_at=start_at
    )
    return target_provider.encode(frames, frame_duration=settings.frame_duration)
