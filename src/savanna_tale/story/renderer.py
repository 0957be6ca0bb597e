"""Renderer for painting recorded canvas commands using Pillow."""

import math
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..constants import BACKGROUND_COLOR, CAPTION_BAND_COLOR, CAPTION_TEXT_COLOR, HEIGHT, WIDTH
from .canvas import (
    RGBA,
    Canvas,
    ClearRect,
    DrawCommand,
    FillGradientRect,
    FillPolygon,
    Point,
    StrokePolyline,
)


class Renderer:
    """Rasterizes canvas command lists as PIL Images."""

    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        scale: float = 1.0,
        background: tuple[int, int, int] = BACKGROUND_COLOR,
    ):
        """
        Initialize renderer.

        Args:
            width: Logical canvas width
            height: Logical canvas height
            scale: Physical pixels per logical unit
            background: Color of cleared regions
        """
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self.scale = scale
        self.background = background
        self.width = max(1, round(width * scale))
        self.height = max(1, round(height * scale))

    def render_frame(self, canvas: Canvas, caption: str | None = None) -> Image.Image:
        """
        Paint everything currently recorded on the canvas.

        Args:
            canvas: Canvas holding the frame's commands
            caption: Optional caption burned into the bottom of the frame

        Returns:
            RGB image of the frame
        """
        return self.render_commands(canvas.commands, caption)

    def render_commands(
        self, commands: Sequence[DrawCommand], caption: str | None = None
    ) -> Image.Image:
        img = Image.new("RGB", (self.width, self.height), self.background)
        # RGBA mode blends translucent ink over what is already painted
        draw = ImageDraw.Draw(img, "RGBA")

        for command in commands:
            if isinstance(command, FillPolygon):
                self._fill_polygon(draw, command)
            elif isinstance(command, StrokePolyline):
                self._stroke_polyline(img, draw, command)
            elif isinstance(command, FillGradientRect):
                self._fill_gradient(draw, command)
            elif isinstance(command, ClearRect):
                self._clear(draw, command)
            else:
                raise TypeError(f"Unsupported draw command: {command!r}")

        if caption:
            self._draw_caption(draw, caption)

        return img

    def _scaled(self, points: Sequence[Point]) -> list[Point]:
        return [(x * self.scale, y * self.scale) for x, y in points]

    def _fill_polygon(self, draw: ImageDraw.ImageDraw, command: FillPolygon) -> None:
        if command.color[3] == 0:
            return
        draw.polygon(self._scaled(command.points), fill=command.color)

    def _stroke_polyline(
        self, img: Image.Image, draw: ImageDraw.ImageDraw, command: StrokePolyline
    ) -> None:
        alpha = command.color[3]
        if alpha == 0:
            return
        points = self._scaled(command.points)
        if command.closed:
            points.append(points[0])
        width = max(1, round(command.width * self.scale))

        if alpha == 255:
            _trace_stroke(draw, points, width, command.cap, command.closed, command.color)
            return

        # Trace into a mask so joints and overlaps are blended only once
        pad = width // 2 + 2
        left = max(0, math.floor(min(x for x, _ in points)) - pad)
        top = max(0, math.floor(min(y for _, y in points)) - pad)
        right = min(img.width, math.ceil(max(x for x, _ in points)) + pad + 1)
        bottom = min(img.height, math.ceil(max(y for _, y in points)) + pad + 1)
        if right <= left or bottom <= top:
            return

        mask = Image.new("L", (right - left, bottom - top), 0)
        local = [(x - left, y - top) for x, y in points]
        _trace_stroke(ImageDraw.Draw(mask), local, width, command.cap, command.closed, alpha)
        img.paste(command.color[:3], (left, top, right, bottom), mask)

    def _fill_gradient(self, draw: ImageDraw.ImageDraw, command: FillGradientRect) -> None:
        """Paint a linear gradient one row (or column) at a time."""
        if not command.stops:
            return
        x0, y0, x1, y1 = (value * self.scale for value in command.box)
        start_x, start_y = command.start[0] * self.scale, command.start[1] * self.scale
        dx = command.end[0] * self.scale - start_x
        dy = command.end[1] * self.scale - start_y
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            return

        left, top = math.floor(x0), math.floor(y0)
        right, bottom = math.ceil(x1) - 1, math.ceil(y1) - 1
        if abs(dy) >= abs(dx):
            center_x = (x0 + x1) / 2
            for y in range(top, bottom + 1):
                t = ((center_x - start_x) * dx + (y + 0.5 - start_y) * dy) / length_sq
                draw.rectangle([left, y, right, y], fill=gradient_color(command.stops, t))
        else:
            center_y = (y0 + y1) / 2
            for x in range(left, right + 1):
                t = ((x + 0.5 - start_x) * dx + (center_y - start_y) * dy) / length_sq
                draw.rectangle([x, top, x, bottom], fill=gradient_color(command.stops, t))

    def _clear(self, draw: ImageDraw.ImageDraw, command: ClearRect) -> None:
        x0, y0, x1, y1 = (value * self.scale for value in command.box)
        draw.rectangle([x0, y0, x1, y1], fill=(*self.background, 255))

    def _draw_caption(self, draw: ImageDraw.ImageDraw, caption: str) -> None:
        """Draw the caption on a translucent band along the bottom edge."""
        font = ImageFont.load_default()
        margin = 6

        text = caption
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] > self.width - 2 * margin:
            # Fall back to the scene label when the full caption does not fit
            text = caption.split(":", 1)[0]
            bbox = draw.textbbox((0, 0), text, font=font)
        text_height = bbox[3] - bbox[1]

        band_top = self.height - text_height - 2 * margin
        draw.rectangle([0, band_top, self.width, self.height], fill=CAPTION_BAND_COLOR)
        draw.text((margin, band_top + margin - bbox[1]), text, font=font, fill=CAPTION_TEXT_COLOR)


def gradient_color(stops: Sequence[tuple[float, RGBA]], t: float) -> RGBA:
    """Interpolate the gradient color at t, holding the end colors outside the stops."""
    if t <= stops[0][0]:
        return stops[0][1]
    if t >= stops[-1][0]:
        return stops[-1][1]
    for (offset_a, color_a), (offset_b, color_b) in zip(stops, stops[1:]):
        if offset_a <= t <= offset_b:
            span = offset_b - offset_a
            ratio = 0.0 if span == 0 else (t - offset_a) / span
            return tuple(
                round(a + (b - a) * ratio) for a, b in zip(color_a, color_b)
            )  # type: ignore[return-value]
    return stops[-1][1]


def _trace_stroke(
    draw: ImageDraw.ImageDraw,
    points: Sequence[Point],
    width: int,
    cap: str,
    closed: bool,
    fill: RGBA | int,
) -> None:
    draw.line(points, fill=fill, width=width, joint="curve")
    if cap == "round" and not closed:
        radius = width / 2
        for x, y in (points[0], points[-1]):
            draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=fill)
