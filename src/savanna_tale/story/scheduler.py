"""Frame scheduling primitives that drive playback."""

from abc import ABC, abstractmethod
from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler(ABC):
    """Arms one-shot callbacks for the next display frame."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> int:
        """
        Schedule callback for the next frame.

        Args:
            callback: Called once with the frame timestamp in milliseconds

        Returns:
            Handle that can be passed to cancel_frame
        """
        raise NotImplementedError

    @abstractmethod
    def cancel_frame(self, handle: int) -> None:
        """Disarm a pending callback. Unknown or already-fired handles are ignored."""
        raise NotImplementedError


class SteppedFrameScheduler(FrameScheduler):
    """Deterministic scheduler that fires frames only when stepped.

    Timestamps advance by exactly 1000 / fps milliseconds per step, computed
    from the step index so long runs do not accumulate drift.
    """

    def __init__(self, fps: int, start_ms: float = 0.0):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.start_ms = start_ms
        self.frame_index = 0
        self._pending: dict[int, FrameCallback] = {}
        self._firing: dict[int, FrameCallback] = {}
        self._next_handle = 1

    @property
    def frame_interval_ms(self) -> float:
        return 1000 / self.fps

    @property
    def now_ms(self) -> float:
        """Timestamp the next step will deliver."""
        return self.start_ms + self.frame_index * self.frame_interval_ms

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)
        self._firing.pop(handle, None)

    def step(self, timestamp_ms: float | None = None) -> int:
        """
        Deliver one frame to every callback armed before this step.

        Callbacks armed while the step runs wait for the next step.

        Args:
            timestamp_ms: Override for this frame's timestamp

        Returns:
            Number of callbacks fired
        """
        timestamp = self.now_ms if timestamp_ms is None else timestamp_ms
        self._firing, self._pending = self._pending, {}
        self.frame_index += 1
        fired = 0
        while self._firing:
            callback = self._firing.pop(next(iter(self._firing)))
            callback(timestamp)
            fired += 1
        return fired
