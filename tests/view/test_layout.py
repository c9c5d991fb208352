import math

import pytest

from playing_cards.constants import FAN_STEP_X, FAN_STEP_Y
from playing_cards.view.layout import FanStyle, Placement, fan_layout, place


@pytest.mark.parametrize(
    "value, expected",
    [
        ("none", FanStyle.NONE),
        ("UP", FanStyle.UP),
        (" down ", FanStyle.DOWN),
        ("left", FanStyle.LEFT),
        ("right", FanStyle.RIGHT),
        ("arc", FanStyle.ARC),
        (FanStyle.ARC, FanStyle.ARC),
        (None, FanStyle.NONE),
        ("sideways", FanStyle.NONE),
        (42, FanStyle.NONE),
    ],
)
def test_parse_fan_style(value, expected):
    assert FanStyle.parse(value) is expected


def test_unknown_fan_style_is_logged(caplog):
    with caplog.at_level("WARNING"):
        FanStyle.parse("sideways")
    assert "sideways" in caplog.text


def test_empty_layout():
    for style in FanStyle:
        assert fan_layout(style, 0) == []


def test_squared_pile():
    assert fan_layout(FanStyle.NONE, 3) == [Placement()] * 3


def test_vertical_and_horizontal_cascades():
    assert [p.dy for p in fan_layout(FanStyle.UP, 3)] == [0, -FAN_STEP_Y, -2 * FAN_STEP_Y]
    assert [p.dy for p in fan_layout(FanStyle.DOWN, 3)] == [0, FAN_STEP_Y, 2 * FAN_STEP_Y]
    assert [p.dx for p in fan_layout(FanStyle.LEFT, 3)] == [0, -FAN_STEP_X, -2 * FAN_STEP_X]
    assert [p.dx for p in fan_layout(FanStyle.RIGHT, 3)] == [0, FAN_STEP_X, 2 * FAN_STEP_X]
    assert all(p.dx == 0 and p.angle == 0 for p in fan_layout(FanStyle.UP, 3))


def test_arc_is_symmetric_and_tangent():
    placements = fan_layout(FanStyle.ARC, 5)
    assert placements[2].dx == pytest.approx(0)
    assert placements[2].angle == pytest.approx(0)
    assert placements[0].dx == pytest.approx(-placements[4].dx)
    assert placements[0].dy == pytest.approx(placements[4].dy)
    assert placements[0].angle == pytest.approx(-placements[4].angle)
    angles = [p.angle for p in placements]
    assert angles == sorted(angles)
    for p in placements:
        # every card lies on one circle whose center is below the anchor
        radius = p.dx / math.sin(math.radians(p.angle)) if p.angle else None
        if radius is not None:
            assert p.dy == pytest.approx(radius * (1 - math.cos(math.radians(p.angle))))


def test_arc_span_grows_with_count():
    small = fan_layout(FanStyle.ARC, 3)
    large = fan_layout(FanStyle.ARC, 9)
    assert abs(large[0].angle) > abs(small[0].angle)
    assert fan_layout(FanStyle.ARC, 1) == [Placement()]


def test_arc_span_is_capped():
    placements = fan_layout(FanStyle.ARC, 52)
    assert placements[-1].angle - placements[0].angle == pytest.approx(120)


@pytest.mark.parametrize("style", list(FanStyle))
def test_layout_is_deterministic(style):
    assert fan_layout(style, 7) == fan_layout(style, 7)


def test_place_translates_and_rotates():
    p = place(Placement(dx=10, dy=0, angle=5), x=100, y=50, rotation=90)
    assert p.dx == pytest.approx(100)
    assert p.dy == pytest.approx(60)
    assert p.angle == pytest.approx(95)
    assert place(Placement(1, 2, 3)) == Placement(1, 2, 3)
