"""Playback clock: turns frame timestamps into looping elapsed time."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Sequence

from ..constants import TOTAL_DURATION
from .composer import compose_frame
from .scenes import SCENES, SceneInterval, resolve_scene

if TYPE_CHECKING:
    from .canvas import Canvas
    from .scheduler import FrameScheduler

SceneChangeCallback = Callable[[SceneInterval], None]
FrameComposer = Callable[["Canvas", float], None]


class PlaybackSetupError(Exception):
    """Raised when playback is wired without a surface or a frame scheduler."""
    pass


class PlaybackState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


@dataclass(frozen=True, slots=True)
class ClockState:
    """
    Anchor that maps frame timestamps to loop time.

    Attributes:
        epoch_ms: Timestamp that corresponds to offset_ms of playback;
            unset until the first tick after a restart or resume
        offset_ms: Playback position (unwrapped) to continue from once anchored
    """
    epoch_ms: float | None = None
    offset_ms: float = 0.0

    @property
    def anchored(self) -> bool:
        return self.epoch_ms is not None

    def anchor(self, timestamp_ms: float) -> "ClockState":
        """Pin the epoch so that timestamp_ms lands on offset_ms."""
        return ClockState(epoch_ms=timestamp_ms - self.offset_ms, offset_ms=self.offset_ms)

    def position_ms(self, timestamp_ms: float) -> float:
        """Unwrapped playback position in milliseconds."""
        if self.epoch_ms is None:
            return self.offset_ms
        return timestamp_ms - self.epoch_ms

    def paused_at(self, timestamp_ms: float) -> "ClockState":
        """Unanchored state that resumes from the position at timestamp_ms."""
        return ClockState(epoch_ms=None, offset_ms=self.position_ms(timestamp_ms))

    def elapsed_seconds(self, timestamp_ms: float) -> float:
        """Loop time in seconds, always within [0, TOTAL_DURATION)."""
        elapsed = (self.position_ms(timestamp_ms) / 1000) % TOTAL_DURATION
        # Tiny negative positions can round up to exactly TOTAL_DURATION
        if elapsed >= TOTAL_DURATION:
            return 0.0
        return elapsed


class PlaybackDriver:
    """Drives the frame composer from a frame scheduler and reports scene changes."""

    def __init__(
        self,
        surface: "Canvas | None",
        scheduler: "FrameScheduler | None",
        scenes: Sequence[SceneInterval] = SCENES,
        on_scene_change: SceneChangeCallback | None = None,
        composer: FrameComposer = compose_frame,
    ):
        """
        Initialize the driver in the stopped state.

        Args:
            surface: Canvas that every frame is composed onto
            scheduler: Source of per-frame callbacks
            scenes: Timetable used to resolve the active scene
            on_scene_change: Called with the new scene whenever it changes
            composer: Function painting one frame for an elapsed time

        Raises:
            PlaybackSetupError: If the surface or the scheduler is missing
        """
        if surface is None:
            raise PlaybackSetupError("surface unavailable")
        if scheduler is None:
            raise PlaybackSetupError("frame scheduler unavailable")

        self.surface = surface
        self.scheduler = scheduler
        self.scenes = scenes
        self.on_scene_change = on_scene_change
        self.composer = composer

        self._state = PlaybackState.STOPPED
        self._clock = ClockState()
        self._handle: int | None = None
        self._last_timestamp_ms: float | None = None
        self._elapsed_seconds = 0.0
        self._active_scene: SceneInterval | None = None

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is PlaybackState.RUNNING

    @property
    def clock(self) -> ClockState:
        return self._clock

    @property
    def elapsed_seconds(self) -> float:
        """Loop time of the most recent tick."""
        return self._elapsed_seconds

    @property
    def active_scene(self) -> SceneInterval | None:
        """Scene resolved on the most recent tick, if any tick has run."""
        return self._active_scene

    def start(self) -> None:
        """Begin or resume playback. Calling it while running does nothing."""
        if self.is_running:
            return
        self._state = PlaybackState.RUNNING
        self._arm()

    def stop(self) -> None:
        """Pause playback, keeping the current position."""
        self._disarm()
        if not self.is_running:
            return
        self._state = PlaybackState.STOPPED
        if self._clock.anchored and self._last_timestamp_ms is not None:
            self._clock = self._clock.paused_at(self._last_timestamp_ms)

    def toggle(self) -> PlaybackState:
        if self.is_running:
            self.stop()
        else:
            self.start()
        return self._state

    def restart(self) -> None:
        """Rewind to the start of the loop and play; the next tick shows elapsed time 0."""
        self._disarm()
        self._clock = ClockState()
        self._state = PlaybackState.RUNNING
        self._arm()

    def seek(self, elapsed_seconds: float) -> None:
        """
        Jump to a point in the loop; the next tick shows that time.

        Raises:
            ValueError: If elapsed_seconds is negative or not finite
        """
        if not math.isfinite(elapsed_seconds) or elapsed_seconds < 0:
            raise ValueError(f"seek position must be a non-negative number, got {elapsed_seconds}")
        self._clock = ClockState(offset_ms=(elapsed_seconds % TOTAL_DURATION) * 1000)

    def tick(self, timestamp_ms: float) -> None:
        """
        Render one frame; this is the callback handed to the scheduler.

        Exceptions raised while drawing propagate to the scheduler.
        """
        self._handle = None
        if not self.is_running:
            return

        if not self._clock.anchored:
            self._clock = self._clock.anchor(timestamp_ms)
        self._last_timestamp_ms = timestamp_ms

        elapsed = self._clock.elapsed_seconds(timestamp_ms)
        self._elapsed_seconds = elapsed
        self.composer(self.surface, elapsed)

        scene = resolve_scene(elapsed, self.scenes)
        if self._active_scene is None or scene.id != self._active_scene.id:
            self._active_scene = scene
            if self.on_scene_change is not None:
                self.on_scene_change(scene)

        if self.is_running:
            self._arm()

    def _arm(self) -> None:
        if self._handle is None:
            self._handle = self.scheduler.request_frame(self.tick)

    def _disarm(self) -> None:
        if self._handle is not None:
            self.scheduler.cancel_frame(self._handle)
            self._handle = None
