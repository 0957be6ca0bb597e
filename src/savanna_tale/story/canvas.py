"""Immediate-mode 2D drawing surface that records device-space commands.

The API follows the HTML canvas context closely enough that pose models read
like ordinary canvas code: a transform stack, global alpha, fill and stroke
styles, path building and painting. Curves are flattened and transformed at
record time, so the recorded commands are plain data that any raster backend
can paint and that tests can compare directly.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Literal, Union

from PIL import ImageColor

from ..constants import HEIGHT, WIDTH

RGBA = tuple[int, int, int, int]
Point = tuple[float, float]
Box = tuple[float, float, float, float]
# (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
Affine = tuple[float, float, float, float, float, float]
ColorLike = Union[str, tuple[int, ...]]
LineCap = Literal["butt", "round"]

IDENTITY: Affine = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Flattening resolution
CURVE_SEGMENTS = 16
ELLIPSE_SEGMENTS = 48
CORNER_SEGMENTS = 6


def parse_color(color: ColorLike) -> RGBA:
    """
    Normalize a color to an RGBA tuple.

    Args:
        color: Any string Pillow's ImageColor understands, or an RGB/RGBA tuple

    Raises:
        ValueError: If the color cannot be parsed
    """
    if isinstance(color, str):
        channels = ImageColor.getrgb(color)
    else:
        channels = tuple(int(channel) for channel in color)

    if len(channels) == 3:
        return (channels[0], channels[1], channels[2], 255)
    if len(channels) == 4:
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"Expected an RGB or RGBA color, got {color!r}")


def _with_alpha(color: RGBA, alpha: float) -> RGBA:
    return (color[0], color[1], color[2], round(color[3] * alpha))


@dataclass(slots=True)
class LinearGradient:
    """Gradient between two points, in the coordinate space active at fill time."""
    x0: float
    y0: float
    x1: float
    y1: float
    stops: list[tuple[float, RGBA]] = field(default_factory=list)

    def add_color_stop(self, offset: float, color: ColorLike) -> None:
        if not 0.0 <= offset <= 1.0:
            raise ValueError(f"Gradient stop offset must be within [0, 1], got {offset}")
        self.stops.append((offset, parse_color(color)))
        self.stops.sort(key=lambda stop: stop[0])


@dataclass(frozen=True, slots=True)
class FillPolygon:
    points: tuple[Point, ...]
    color: RGBA


@dataclass(frozen=True, slots=True)
class StrokePolyline:
    points: tuple[Point, ...]
    color: RGBA
    width: float
    cap: LineCap
    closed: bool


@dataclass(frozen=True, slots=True)
class FillGradientRect:
    box: Box
    start: Point
    end: Point
    stops: tuple[tuple[float, RGBA], ...]


@dataclass(frozen=True, slots=True)
class ClearRect:
    box: Box


DrawCommand = Union[FillPolygon, StrokePolyline, FillGradientRect, ClearRect]


@dataclass(frozen=True, slots=True)
class _DrawState:
    transform: Affine = IDENTITY
    global_alpha: float = 1.0
    fill_style: Union[RGBA, LinearGradient] = (0, 0, 0, 255)
    stroke_style: RGBA = (0, 0, 0, 255)
    line_width: float = 1.0
    line_cap: LineCap = "butt"


@dataclass(slots=True)
class _SubPath:
    points: list[Point]
    closed: bool = False


class Canvas:
    """Records drawing commands issued against a fixed logical canvas."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._state = _DrawState()
        self._stack: list[_DrawState] = []
        self._path: list[_SubPath] = []
        self._commands: list[DrawCommand] = []

    @property
    def commands(self) -> tuple[DrawCommand, ...]:
        """Commands recorded since the last full clear, back to front."""
        return tuple(self._commands)

    # State

    @property
    def global_alpha(self) -> float:
        return self._state.global_alpha

    @global_alpha.setter
    def global_alpha(self, value: float) -> None:
        # Out-of-range values are ignored, as on an HTML canvas
        if 0.0 <= value <= 1.0:
            self._state = replace(self._state, global_alpha=value)

    @property
    def fill_style(self) -> Union[RGBA, LinearGradient]:
        return self._state.fill_style

    @fill_style.setter
    def fill_style(self, value: Union[ColorLike, LinearGradient]) -> None:
        style = value if isinstance(value, LinearGradient) else parse_color(value)
        self._state = replace(self._state, fill_style=style)

    @property
    def stroke_style(self) -> RGBA:
        return self._state.stroke_style

    @stroke_style.setter
    def stroke_style(self, value: ColorLike) -> None:
        self._state = replace(self._state, stroke_style=parse_color(value))

    @property
    def line_width(self) -> float:
        return self._state.line_width

    @line_width.setter
    def line_width(self, value: float) -> None:
        if value > 0:
            self._state = replace(self._state, line_width=value)

    @property
    def line_cap(self) -> LineCap:
        return self._state.line_cap

    @line_cap.setter
    def line_cap(self, value: LineCap) -> None:
        if value not in ("butt", "round"):
            raise ValueError(f"Unsupported line cap: {value}")
        self._state = replace(self._state, line_cap=value)

    @property
    def transform(self) -> Affine:
        return self._state.transform

    def save(self) -> None:
        self._stack.append(self._state)

    def restore(self) -> None:
        if self._stack:
            self._state = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        a, b, c, d, e, f = self._state.transform
        transform = (a, b, c, d, a * x + c * y + e, b * x + d * y + f)
        self._state = replace(self._state, transform=transform)

    def scale(self, sx: float, sy: float) -> None:
        a, b, c, d, e, f = self._state.transform
        transform = (a * sx, b * sx, c * sy, d * sy, e, f)
        self._state = replace(self._state, transform=transform)

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> LinearGradient:
        return LinearGradient(x0, y0, x1, y1)

    # Paths

    def begin_path(self) -> None:
        self._path = []

    def move_to(self, x: float, y: float) -> None:
        self._path.append(_SubPath([self._apply(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._path:
            self.move_to(x, y)
            return
        self._path[-1].points.append(self._apply(x, y))

    def quadratic_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        if not self._path:
            self.move_to(cx, cy)
        points = self._path[-1].points
        x0, y0 = points[-1]
        x1, y1 = self._apply(cx, cy)
        x2, y2 = self._apply(x, y)
        for i in range(1, CURVE_SEGMENTS + 1):
            t = i / CURVE_SEGMENTS
            u = 1 - t
            points.append(
                (
                    u * u * x0 + 2 * u * t * x1 + t * t * x2,
                    u * u * y0 + 2 * u * t * y1 + t * t * y2,
                )
            )

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        self.ellipse(x, y, radius, radius, 0.0, start_angle, end_angle)

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float = 0.0,
        end_angle: float = math.tau,
    ) -> None:
        """Add an elliptical arc as its own sub-path."""
        if radius_x < 0 or radius_y < 0:
            raise ValueError("Ellipse radii must be non-negative")

        sweep = max(-math.tau, min(math.tau, end_angle - start_angle))
        full_turn = abs(sweep) >= math.tau
        segments = max(1, math.ceil(ELLIPSE_SEGMENTS * abs(sweep) / math.tau))
        cos_r = math.cos(rotation)
        sin_r = math.sin(rotation)

        points: list[Point] = []
        for i in range(segments + 1):
            if full_turn and i == segments:
                break  # Closing the sub-path reconnects to the first point
            angle = start_angle + sweep * i / segments
            local_x = radius_x * math.cos(angle)
            local_y = radius_y * math.sin(angle)
            points.append(
                self._apply(
                    x + local_x * cos_r - local_y * sin_r,
                    y + local_x * sin_r + local_y * cos_r,
                )
            )
        self._path.append(_SubPath(points, closed=full_turn))

    def round_rect(self, x: float, y: float, width: float, height: float, radius: float) -> None:
        """Add a closed rounded rectangle sub-path."""
        if width < 0:
            x, width = x + width, -width
        if height < 0:
            y, height = y + height, -height
        r = max(0.0, min(radius, width / 2, height / 2))

        corners = (
            (x + width - r, y + r, -math.pi / 2),
            (x + width - r, y + height - r, 0.0),
            (x + r, y + height - r, math.pi / 2),
            (x + r, y + r, math.pi),
        )
        points: list[Point] = []
        for center_x, center_y, start in corners:
            for i in range(CORNER_SEGMENTS + 1):
                angle = start + (math.pi / 2) * i / CORNER_SEGMENTS
                points.append(
                    self._apply(center_x + r * math.cos(angle), center_y + r * math.sin(angle))
                )
        self._path.append(_SubPath(points, closed=True))

    def close_path(self) -> None:
        if self._path:
            self._path[-1].closed = True

    # Painting

    def fill(self) -> None:
        style = self._state.fill_style
        if isinstance(style, LinearGradient):
            raise TypeError("Gradient fills are only supported by fill_rect")
        color = _with_alpha(style, self._state.global_alpha)
        for sub_path in self._path:
            if len(sub_path.points) >= 3:
                self._commands.append(FillPolygon(tuple(sub_path.points), color))

    def stroke(self) -> None:
        color = _with_alpha(self._state.stroke_style, self._state.global_alpha)
        width = self._state.line_width * self._scale_factor()
        for sub_path in self._path:
            if len(sub_path.points) >= 2:
                self._commands.append(
                    StrokePolyline(
                        tuple(sub_path.points),
                        color,
                        width,
                        self._state.line_cap,
                        sub_path.closed,
                    )
                )

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = (
            self._apply(x, y),
            self._apply(x + width, y),
            self._apply(x + width, y + height),
            self._apply(x, y + height),
        )
        style = self._state.fill_style
        if isinstance(style, LinearGradient):
            alpha = self._state.global_alpha
            self._commands.append(
                FillGradientRect(
                    box=_bounding_box(corners),
                    start=self._apply(style.x0, style.y0),
                    end=self._apply(style.x1, style.y1),
                    stops=tuple((offset, _with_alpha(color, alpha)) for offset, color in style.stops),
                )
            )
            return
        self._commands.append(FillPolygon(corners, _with_alpha(style, self._state.global_alpha)))

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Erase a region; a full-canvas clear drops everything recorded so far."""
        covers_canvas = (
            self._state.transform == IDENTITY
            and x <= 0
            and y <= 0
            and x + width >= self.width
            and y + height >= self.height
        )
        if covers_canvas:
            self._commands.clear()
            return
        corners = (
            self._apply(x, y),
            self._apply(x + width, y),
            self._apply(x + width, y + height),
            self._apply(x, y + height),
        )
        self._commands.append(ClearRect(_bounding_box(corners)))

    def _apply(self, x: float, y: float) -> Point:
        a, b, c, d, e, f = self._state.transform
        return (a * x + c * y + e, b * x + d * y + f)

    def _scale_factor(self) -> float:
        a, b, c, d, _, _ = self._state.transform
        return math.sqrt(abs(a * d - b * c))


def _bounding_box(points: tuple[Point, ...]) -> Box:
    xs = [point[0] for point in points]
    ys = [point[1] for point in points]
    return (min(xs), min(ys), max(xs), max(ys))
