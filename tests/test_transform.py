from __future__ import annotations

import pytest

from geometry import Point
from transform import TransformMatrix, arrow_direction_transform


def test_identity_and_translate() -> None:
    assert TransformMatrix.identity().is_identity()
    assert not TransformMatrix.translate(1, 0).is_identity()
    assert TransformMatrix.translate(3, -2).transform_point(Point(1, 1)) == Point(4, -1)


def test_quarter_turn_is_exact() -> None:
    turn = TransformMatrix.quarter_turn(False, 0, 0)
    assert turn.transform_point(Point(1, 0)) == Point(0, 1)
    back = TransformMatrix.quarter_turn(True, 0, 0)
    assert back.transform_point(Point(0, 1)) == Point(1, 0)
    assert turn.multiply(back).is_identity()


def test_quarter_turn_about_center() -> None:
    turn = TransformMatrix.quarter_turn(False, 5, 5)
    assert turn.transform_point(Point(5, 5)) == Point(5, 5)
    assert turn.transform_point(Point(10, 5)) == Point(5, 10)


def test_mirror_x() -> None:
    mirror = TransformMatrix.mirror_x(50)
    assert mirror.transform_point(Point(0, 7)) == Point(100, 7)
    assert mirror.transform_point(Point(30, 1)) == Point(70, 1)


def test_arrow_direction_transforms() -> None:
    assert arrow_direction_transform('right', 100, 60).is_identity()
    up = arrow_direction_transform('up', 100, 60)
    assert up.transform_point(Point(100, 30)) == Point(50, 0)
    down = arrow_direction_transform('down', 100, 60)
    assert down.transform_point(Point(100, 30)) == Point(50, 100)
    left = arrow_direction_transform('left', 100, 60)
    assert left.transform_point(Point(100, 30)) == Point(0, 30)


def test_rotate_about_origin() -> None:
    turn = TransformMatrix.rotate(90)
    moved = turn.transform_point(Point(1, 0))
    assert moved.x == pytest.approx(0, abs=1e-12)
    assert moved.y == pytest.approx(1)
    assert TransformMatrix.rotate(0).is_identity()
    assert TransformMatrix.rotate(360).is_identity()


def test_rotate_about_center_keeps_center_fixed() -> None:
    turn = TransformMatrix.rotate(37, 12, -4)
    fixed = turn.transform_point(Point(12, -4))
    assert fixed.x == pytest.approx(12)
    assert fixed.y == pytest.approx(-4)


@pytest.mark.parametrize("counterclockwise,angle", [(False, 90), (True, -90)])
def test_quarter_turn_agrees_with_rotate(counterclockwise: bool, angle: float) -> None:
    exact = TransformMatrix.quarter_turn(counterclockwise, 30, 20)
    approx = TransformMatrix.rotate(angle, 30, 20)
    for attr in 'abcdef':
        assert getattr(exact, attr) == pytest.approx(getattr(approx, attr), abs=1e-9)
    assert exact.b in (1.0, -1.0) and exact.a == 0.0


def _remap(point: Point, width: float, height: float, direction: str) -> Point:
    center_x = width / 2
    center_y = height / 2
    if direction == 'up':
        return Point(center_x + (point.y - center_y), center_x - (point.x - center_x))
    if direction == 'down':
        return Point(center_x - (point.y - center_y), center_x + (point.x - center_x))
    return Point(width - point.x, point.y)


@pytest.mark.parametrize("direction", ['up', 'down', 'left'])
@pytest.mark.parametrize("size", [(20, 20), (41, 27), (62, 97), (118, 55)])
def test_arrow_transform_matches_coordinate_remap(direction: str, size: tuple) -> None:
    width, height = size
    matrix = arrow_direction_transform(direction, width, height)
    for x, y in [(0, 0), (width, height / 2), (width * 0.7, height * 0.15), (3.5, height)]:
        expected = _remap(Point(x, y), width, height, direction)
        actual = matrix.transform_point(Point(x, y))
        assert actual.x == pytest.approx(expected.x, rel=1e-12, abs=1e-12)
        assert actual.y == pytest.approx(expected.y, rel=1e-12, abs=1e-12)
