"""Scalar helpers shared by every pose model."""


def clamp(value: float, lo: float, hi: float) -> float:
    """Limit value to the closed range [lo, hi]."""
    return min(max(value, lo), hi)


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation. t outside [0, 1] extrapolates."""
    return start + (end - start) * t


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out: slow start, fast middle, slow finish."""
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def progress(elapsed: float, start: float, duration: float) -> float:
    """Normalized progress of a window starting at start, clamped to [0, 1]."""
    return clamp((elapsed - start) / duration, 0.0, 1.0)
