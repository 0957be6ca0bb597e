"""Story engine: clock, timetable, pose models and frame composition."""

from .canvas import Canvas, ClearRect, DrawCommand, FillGradientRect, FillPolygon, StrokePolyline
from .clock import ClockState, PlaybackDriver, PlaybackSetupError, PlaybackState
from .composer import compose_frame, iter_scene_layers
from .drawables import Drawable, Dust, Lion, Monkey, MonkeyPose, Sky, Sun, Terrain
from .easing import clamp, ease_in_out, lerp
from .raster_animation import generate_raster_frames, render_still
from .renderer import Renderer
from .scenes import SCENES, SceneInterval, resolve_scene, scene_by_id, validate_timetable
from .scheduler import FrameScheduler, SteppedFrameScheduler

__all__ = [
    "Canvas",
    "ClearRect",
    "DrawCommand",
    "FillGradientRect",
    "FillPolygon",
    "StrokePolyline",
    "ClockState",
    "PlaybackDriver",
    "PlaybackSetupError",
    "PlaybackState",
    "compose_frame",
    "iter_scene_layers",
    "Drawable",
    "Dust",
    "Lion",
    "Monkey",
    "MonkeyPose",
    "Sky",
    "Sun",
    "Terrain",
    "clamp",
    "ease_in_out",
    "lerp",
    "generate_raster_frames",
    "render_still",
    "Renderer",
    "SCENES",
    "SceneInterval",
    "resolve_scene",
    "scene_by_id",
    "validate_timetable",
    "FrameScheduler",
    "SteppedFrameScheduler",
]
