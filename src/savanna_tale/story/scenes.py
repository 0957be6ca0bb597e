"""Narrative timetable: which story beat is playing at a given elapsed time."""

from dataclasses import dataclass
from typing import Sequence

from ..constants import AFTERMATH_START, POUNCE_START, TOTAL_DURATION, WARNING_START


@dataclass(frozen=True, slots=True)
class SceneInterval:
    """A named story beat covering the half-open interval [start, end)."""
    id: str
    label: str
    description: str
    start: float
    end: float

    def contains(self, elapsed: float) -> bool:
        return self.start <= elapsed < self.end

    @property
    def caption(self) -> str:
        """Caption text shown while this scene is active."""
        return f"{self.label}: {self.description}"


SCENES: tuple[SceneInterval, ...] = (
    SceneInterval(
        id="playful",
        label="Playful Curiosity",
        description="A sprightly monkey tugs on the lion's tail, unaware of the danger brewing.",
        start=0.0,
        end=WARNING_START,
    ),
    SceneInterval(
        id="warning",
        label="Lion's Warning",
        description="The lion bristles and turns, delivering a silent warning.",
        start=WARNING_START,
        end=POUNCE_START,
    ),
    SceneInterval(
        id="pounce",
        label="Sudden Pounce",
        description="With explosive power the lion lunges, jaws closing around its tormentor.",
        start=POUNCE_START,
        end=AFTERMATH_START,
    ),
    SceneInterval(
        id="aftermath",
        label="Savanna Silence",
        description="The dust settles. Only the lion remains, paw resting where the monkey once stood.",
        start=AFTERMATH_START,
        end=TOTAL_DURATION,
    ),
)


def validate_timetable(scenes: Sequence[SceneInterval], total: float = TOTAL_DURATION) -> None:
    """
    Check that scenes partition [0, total) contiguously.

    Raises:
        ValueError: If the timetable is empty, has gaps or overlaps,
            or does not cover the whole loop
    """
    if not scenes:
        raise ValueError("Scene timetable must contain at least one scene")

    cursor = 0.0
    for scene in scenes:
        if scene.end <= scene.start:
            raise ValueError(f"Scene '{scene.id}' has an empty interval")
        if scene.start != cursor:
            raise ValueError(
                f"Scene '{scene.id}' starts at {scene.start}s but the previous scene ends at {cursor}s"
            )
        cursor = scene.end

    if cursor != total:
        raise ValueError(f"Scene timetable ends at {cursor}s, expected {total}s")

    ids = [scene.id for scene in scenes]
    if len(set(ids)) != len(ids):
        raise ValueError("Scene ids must be unique")


def resolve_scene(elapsed: float, scenes: Sequence[SceneInterval] = SCENES) -> SceneInterval:
    """Return the scene containing elapsed, falling back to the first scene."""
    for scene in scenes:
        if scene.contains(elapsed):
            return scene
    return scenes[0]


def scene_by_id(scene_id: str, scenes: Sequence[SceneInterval] = SCENES) -> SceneInterval:
    for scene in scenes:
        if scene.id == scene_id:
            return scene
    raise KeyError(scene_id)


validate_timetable(SCENES)
