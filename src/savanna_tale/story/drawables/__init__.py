"""Layers painted into each frame."""

from .drawable import Drawable
from .dust import Dust
from .lion import Lion
from .monkey import Monkey, MonkeyPose
from .sky import Sky
from .sun import Sun
from .terrain import Terrain

__all__ = [
    "Drawable",
    "Dust",
    "Lion",
    "Monkey",
    "MonkeyPose",
    "Sky",
    "Sun",
    "Terrain",
]
