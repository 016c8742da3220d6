from __future__ import annotations
import math
from enum import Enum
from typing import NamedTuple, Optional
from geometry import Point
from transform import arrow_direction_transform

STAR_INNER_RATIO = 0.4
POLYGON_ROTATION = -math.pi / 2

DEFAULT_STAR_POINTS = 5
DEFAULT_DONUT_THICKNESS = 0.4
CROSS_THICKNESS_DIVISOR = 6

class InvalidGeometryInput(ValueError):
    pass

class UnsupportedShapeKind(ValueError):
    pass

class ShapeKind(str, Enum):
    RECTANGLE = 'rectangle'
    TRIANGLE = 'triangle'
    CIRCLE = 'circle'
    OVAL = 'oval'
    STAR = 'star'
    HEART = 'heart'
    DIAMOND = 'diamond'
    PENTAGON = 'pentagon'
    HEXAGON = 'hexagon'
    OCTAGON = 'octagon'
    CROSS = 'cross'
    ARROW = 'arrow'
    DONUT = 'donut'

    def __str__(self) -> str:
        return self.value

class ArrowDirection(str, Enum):
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    def __str__(self) -> str:
        return self.value

POLYGON_SIDES = {
    ShapeKind.TRIANGLE: 3,
    ShapeKind.PENTAGON: 5,
    ShapeKind.HEXAGON: 6,
    ShapeKind.OCTAGON: 8,
}

SHAPE_DESCRIPTIONS = {
    ShapeKind.RECTANGLE: 'Filled rectangle covering entire canvas',
    ShapeKind.TRIANGLE: 'Equilateral triangle pointing upward',
    ShapeKind.CIRCLE: 'Perfect circle',
    ShapeKind.OVAL: 'Ellipse fitting width and height',
    ShapeKind.STAR: 'Five-pointed star',
    ShapeKind.HEART: 'Heart shape',
    ShapeKind.DIAMOND: 'Diamond/rhombus shape',
    ShapeKind.PENTAGON: 'Regular five-sided polygon',
    ShapeKind.HEXAGON: 'Regular six-sided polygon',
    ShapeKind.OCTAGON: 'Regular eight-sided polygon',
    ShapeKind.CROSS: 'Plus/cross shape',
    ShapeKind.ARROW: 'Arrow pointing right',
    ShapeKind.DONUT: 'Ring/donut shape',
}

class ShapeConstraints(NamedTuple):
    min_width: int
    min_height: int
    preferred_ratio: Optional[float] = None
    notes: Optional[str] = None

_SQUARE_CONSTRAINTS = ShapeConstraints(10, 10, 1.0, 'Square dimensions recommended for best appearance')

SHAPE_CONSTRAINTS = {
    ShapeKind.RECTANGLE: ShapeConstraints(1, 1),
    ShapeKind.TRIANGLE: _SQUARE_CONSTRAINTS,
    ShapeKind.CIRCLE: _SQUARE_CONSTRAINTS,
    ShapeKind.STAR: _SQUARE_CONSTRAINTS,
    ShapeKind.HEART: _SQUARE_CONSTRAINTS,
    ShapeKind.DIAMOND: _SQUARE_CONSTRAINTS,
    ShapeKind.PENTAGON: _SQUARE_CONSTRAINTS,
    ShapeKind.HEXAGON: _SQUARE_CONSTRAINTS,
    ShapeKind.OCTAGON: _SQUARE_CONSTRAINTS,
    ShapeKind.DONUT: _SQUARE_CONSTRAINTS,
    ShapeKind.OVAL: ShapeConstraints(10, 10, None, 'Different width/height creates ellipse'),
    ShapeKind.CROSS: ShapeConstraints(20, 20, 1.0, 'Minimum size ensures cross visibility'),
    ShapeKind.ARROW: ShapeConstraints(30, 20, 1.5, 'Width should be greater than height for clarity'),
}

class ShapeOptions:
    """Per-shape parameters, checked once on construction.

    ``cross_thickness`` is in pixels; ``None`` means min(width, height) / 6
    of whatever canvas the options are applied to.
    """

    def __init__(self, star_points: int = DEFAULT_STAR_POINTS,
                 arrow_direction: str | ArrowDirection = ArrowDirection.RIGHT,
                 donut_thickness: float = DEFAULT_DONUT_THICKNESS,
                 cross_thickness: Optional[float] = None):
        if isinstance(star_points, bool) or not isinstance(star_points, int) or star_points < 3:
            raise InvalidGeometryInput(f"Star points must be an integer of at least 3, got {star_points!r}")

        try:
            direction = ArrowDirection(str(arrow_direction).strip().lower())
        except ValueError:
            choices = ', '.join(d.value for d in ArrowDirection)
            raise InvalidGeometryInput(
                f"Arrow direction must be one of {choices}, got {arrow_direction!r}") from None

        if not _is_number(donut_thickness) or not 0 < donut_thickness <= 1:
            raise InvalidGeometryInput(f"Donut thickness must be in (0, 1], got {donut_thickness!r}")

        if cross_thickness is not None and (not _is_number(cross_thickness) or cross_thickness <= 0):
            raise InvalidGeometryInput(f"Cross thickness must be a positive number, got {cross_thickness!r}")

        self._star_points = star_points
        self._arrow_direction = direction
        self._donut_thickness = float(donut_thickness)
        self._cross_thickness = None if cross_thickness is None else float(cross_thickness)

    @property
    def star_points(self) -> int:
        return self._star_points

    @property
    def arrow_direction(self) -> ArrowDirection:
        return self._arrow_direction

    @property
    def donut_thickness(self) -> float:
        return self._donut_thickness

    @property
    def cross_thickness(self) -> Optional[float]:
        return self._cross_thickness

    def resolved_cross_thickness(self, width: int, height: int) -> float:
        if self._cross_thickness is not None:
            return self._cross_thickness
        return min(width, height) / CROSS_THICKNESS_DIVISOR

    def _key(self) -> tuple:
        return (self._star_points, self._arrow_direction, self._donut_thickness, self._cross_thickness)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ShapeOptions):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (f"ShapeOptions(star_points={self._star_points}, "
                f"arrow_direction='{self._arrow_direction}', "
                f"donut_thickness={self._donut_thickness}, "
                f"cross_thickness={self._cross_thickness})")

def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)

def generate_regular_polygon(center: Point, radius: float, sides: int, rotation: float = 0) -> list[Point]:
    vertices = []
    angle_step = (2 * math.pi) / sides

    for i in range(sides):
        angle = i * angle_step + rotation
        vertices.append(Point(center.x + radius * math.cos(angle),
                              center.y + radius * math.sin(angle)))
    return vertices

def generate_star(center: Point, outer_radius: float, inner_radius: float, points: int = 5) -> list[Point]:
    vertices = []
    angle_step = math.pi / points

    for i in range(points * 2):
        angle = i * angle_step - math.pi / 2
        radius = outer_radius if i % 2 == 0 else inner_radius
        vertices.append(Point(center.x + radius * math.cos(angle),
                              center.y + radius * math.sin(angle)))
    return vertices

def generate_arrow_vertices(width: float, height: float,
                            direction: str | ArrowDirection = ArrowDirection.RIGHT) -> list[Point]:
    try:
        direction = ArrowDirection(direction)
    except ValueError:
        raise InvalidGeometryInput(f"Unknown arrow direction: {direction!r}") from None

    shaft_width = width * 0.4
    head_width = width * 0.8
    head_length = height * 0.3
    shaft_length = height - head_length

    center_y = height / 2
    shaft_top = center_y - shaft_width / 2
    shaft_bottom = center_y + shaft_width / 2
    head_top = center_y - head_width / 2
    head_bottom = center_y + head_width / 2

    vertices = [
        Point(0, shaft_top),
        Point(shaft_length, shaft_top),
        Point(shaft_length, head_top),
        Point(width, center_y),
        Point(shaft_length, head_bottom),
        Point(shaft_length, shaft_bottom),
        Point(0, shaft_bottom),
    ]

    matrix = arrow_direction_transform(direction, width, height)
    if not matrix.is_identity():
        vertices = [matrix.transform_point(v) for v in vertices]
    return vertices

def get_supported_shapes() -> list[ShapeKind]:
    return list(ShapeKind)

def is_valid_shape(name: str) -> bool:
    return name in {kind.value for kind in ShapeKind}

def get_shape_description(kind: ShapeKind) -> str:
    return SHAPE_DESCRIPTIONS.get(kind, 'Unknown shape')

def get_default_filename(kind: ShapeKind, width: int, height: int) -> str:
    return f"{kind.value}_{width}x{height}.png"

def get_shape_constraints(kind: ShapeKind) -> ShapeConstraints:
    return SHAPE_CONSTRAINTS.get(kind, ShapeConstraints(1, 1))
