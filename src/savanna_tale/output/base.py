"""Shared Pillow encoder for the looping animation formats."""

from io import BytesIO
from typing import ClassVar, Iterable

from PIL import Image


def frame_durations(count: int, frame_duration: float, step: int = 1) -> list[int]:
    """
    Per-frame delays for count frames shown frame_duration ms apart.

    Frame boundaries are rounded to the format's delay step, so the rounding
    error is spread over the sequence and the delays add up to
    count * frame_duration (to the nearest step). A delay never drops below
    one step.
    """
    boundaries = [round(index * frame_duration / step) * step for index in range(count + 1)]
    return [max(step, end - start) for start, end in zip(boundaries, boundaries[1:])]


class OutputProvider:
    """Writes rendered frames as one animated image that loops forever."""

    output_format: ClassVar[str]
    # Smallest frame delay the format can store, in milliseconds
    duration_step: ClassVar[int] = 1

    def __init__(self, path: str = ""):
        self.path = path

    def save_options(self) -> dict[str, object]:
        """Format-specific keyword arguments for ``Image.save``."""
        return {}

    def encode(self, frames: Iterable[Image.Image], frame_duration: float) -> bytes:
        """
        Encode frames shown frame_duration milliseconds apart.

        Returns:
            The encoded animation, or b"" when there are no frames
        """
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=frame_durations(len(frame_list), frame_duration, self.duration_step),
            loop=0,
            **self.save_options(),
        )
        return buffer.getvalue()
