"""Tests for the lion pose model."""

import pytest

from savanna_tale.constants import LION_FANG_COLOR, LION_FEATURE_COLOR
from savanna_tale.story.canvas import Canvas, FillPolygon, parse_color
from savanna_tale.story.drawables.lion import (
    Lion,
    lion_anger,
    lion_body_position,
    lion_pounce_progress,
    mane_radius,
    mouth_opening,
    tail_sway,
)


def _draw_lion(elapsed: float) -> Canvas:
    canvas = Canvas()
    Lion().draw(canvas, elapsed)
    return canvas


def _fills_with_color(canvas: Canvas, color: str) -> list[FillPolygon]:
    rgba = parse_color(color)
    return [
        command
        for command in canvas.commands
        if isinstance(command, FillPolygon) and command.color == rgba
    ]


class TestLionProgress:
    """Tests for the lion's staged progress values."""

    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [(0, 0), (5.9, 0), (6, 0), (8, 0.25), (10, 0.5), (14, 1), (19.9, 1)],
    )
    def test_anger_ramp(self, elapsed: float, expected: float) -> None:
        assert lion_anger(elapsed) == pytest.approx(expected)

    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [(0, 0), (10, 0), (12, 0.5), (14, 1), (18, 1)],
    )
    def test_pounce_progress(self, elapsed: float, expected: float) -> None:
        assert lion_pounce_progress(elapsed) == pytest.approx(expected)

    def test_progress_values_never_decrease(self) -> None:
        times = [i / 10 for i in range(200)]
        for curve in (lion_anger, lion_pounce_progress):
            values = [curve(t) for t in times]
            assert values == sorted(values)
            assert all(0 <= value <= 1 for value in values)

    def test_body_lunges_toward_the_monkey(self) -> None:
        rest_x, rest_y = lion_body_position(0)
        lunge_x, lunge_y = lion_body_position(14)

        assert rest_x == pytest.approx(576)
        assert rest_y == pytest.approx(324)
        assert rest_x - lunge_x == pytest.approx(120)
        assert rest_y - lunge_y == pytest.approx(40)

    def test_mouth_opening_thresholds(self) -> None:
        assert mouth_opening(0) == 0
        assert mouth_opening(0.2) == pytest.approx(0.1)
        assert mouth_opening(0.3) == pytest.approx(0.15)
        assert mouth_opening(0.5) == 0.5

    def test_tail_sway_dies_out_after_pounce(self) -> None:
        assert tail_sway(14.5, 1.0) == 0
        assert abs(tail_sway(0.75, 0.0)) > 0.9

    def test_mane_radius_stays_near_eighty(self) -> None:
        for anger in (0, 0.5, 1):
            for step in range(12):
                assert 74 <= mane_radius(step / 12 * 6.283185307179586, anger) <= 86


class TestLionDrawing:
    """Tests for the lion's drawing commands."""

    def test_fangs_only_when_mouth_is_wide_open(self) -> None:
        assert _fills_with_color(_draw_lion(0), LION_FANG_COLOR) == []
        assert _fills_with_color(_draw_lion(8), LION_FANG_COLOR) == []

        fangs = _fills_with_color(_draw_lion(12), LION_FANG_COLOR)
        assert len(fangs) == 2
        assert all(len(fang.points) == 3 for fang in fangs)

    def test_pupils_grow_with_anger(self) -> None:
        def pupil_widths(elapsed: float) -> list[float]:
            pupils = _fills_with_color(_draw_lion(elapsed), LION_FEATURE_COLOR)
            return [max(x for x, _ in p.points) - min(x for x, _ in p.points) for p in pupils]

        assert pupil_widths(0) == pytest.approx([10, 10])
        assert pupil_widths(15) == pytest.approx([12.4, 12.4])

    def test_drawing_leaves_canvas_state_untouched(self) -> None:
        canvas = _draw_lion(11)
        assert canvas.transform == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        assert canvas.global_alpha == 1.0

    def test_same_time_same_commands(self) -> None:
        assert _draw_lion(9.25).commands == _draw_lion(9.25).commands
