from __future__ import annotations
import numpy as np
from types import MappingProxyType
from typing import Callable, Optional, Tuple
from geometry import (Point, HEART_RESOLUTION, is_point_in_circle, is_point_in_ellipse,
                      is_point_in_annulus, is_point_in_diamond, is_point_in_cross,
                      is_point_in_polygon, generate_heart_vertices)
from shapes import (ShapeKind, ShapeOptions, InvalidGeometryInput, UnsupportedShapeKind,
                    POLYGON_SIDES, POLYGON_ROTATION, STAR_INNER_RATIO,
                    generate_regular_polygon, generate_star,
                    generate_arrow_vertices)
from colors import RGBAColor, coerce_color

Predicate = Callable[[float, float], bool]

class Canvas:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rgba = np.zeros((height, width, 4), dtype=np.uint8)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        r, g, b, a = self.rgba[y, x]
        return (int(r), int(g), int(b), int(a))

    def opaque_mask(self) -> np.ndarray:
        return self.rgba[:, :, 3] == 255

    def opaque_count(self) -> int:
        return int(np.count_nonzero(self.opaque_mask()))

    def tobytes(self) -> bytes:
        return self.rgba.tobytes()

    def get_rgba_buffer(self) -> np.ndarray:
        return self.rgba.copy()

def _coerce_kind(kind) -> ShapeKind:
    if isinstance(kind, ShapeKind):
        return kind
    try:
        return ShapeKind(kind)
    except ValueError:
        raise UnsupportedShapeKind(f"No rasterizer for shape kind {kind!r}") from None

def _check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
        raise InvalidGeometryInput(f"Canvas {name} must be a positive integer, got {value!r}")
    return int(value)

class Renderer:
    """Rasterizes one shape onto a fresh transparent canvas.

    Everything that can fail (kind, dimensions, color, options) is checked in
    the constructor, so ``render`` never leaves a half-filled canvas behind.
    """

    def __init__(self, kind, width: int, height: int, color, options: Optional[ShapeOptions] = None):
        self.kind = _coerce_kind(kind)
        self.width = _check_dimension('width', width)
        self.height = _check_dimension('height', height)

        r, g, b, _ = coerce_color(color)
        self.color = RGBAColor(r, g, b, 255)

        if options is None:
            options = ShapeOptions()
        elif not isinstance(options, ShapeOptions):
            raise InvalidGeometryInput(f"Expected ShapeOptions, got {type(options).__name__}")
        self.options = options

        self.center = Point(self.width / 2, self.height / 2)
        self.canvas = None

    def render(self, use_fast_path: bool = True) -> Canvas:
        fast_fill = FAST_PATHS.get(self.kind) if use_fast_path else None
        if fast_fill is not None:
            mask = fast_fill(self)
        else:
            mask = self._generic_mask()

        self.canvas = Canvas(self.width, self.height)
        self.canvas.rgba[mask] = self.color
        return self.canvas

    def _pixel_grid(self) -> Tuple[np.ndarray, np.ndarray]:
        # (1, width) and (height, 1) offsets from the center, broadcast per row
        dx = np.arange(self.width, dtype=np.float64)[np.newaxis, :] - self.center.x
        dy = np.arange(self.height, dtype=np.float64)[:, np.newaxis] - self.center.y
        return dx, dy

    def _fill_rectangle(self) -> np.ndarray:
        return np.ones((self.height, self.width), dtype=bool)

    def _fill_circle(self) -> np.ndarray:
        radius = min(self.width, self.height) / 2
        dx, dy = self._pixel_grid()
        return dx * dx + dy * dy <= radius * radius

    def _fill_ellipse(self) -> np.ndarray:
        radius_x = self.width / 2
        radius_y = self.height / 2
        radius_x_sq = radius_x * radius_x
        radius_y_sq = radius_y * radius_y
        dx, dy = self._pixel_grid()
        return (dx * dx) / radius_x_sq + (dy * dy) / radius_y_sq <= 1

    def _fill_diamond(self) -> np.ndarray:
        size = min(self.width, self.height) / 2
        dx, dy = self._pixel_grid()
        return np.abs(dx) + np.abs(dy) <= size

    def _fill_donut(self) -> np.ndarray:
        outer_radius = min(self.width, self.height) / 2
        inner_radius = outer_radius * (1 - self.options.donut_thickness)
        dx, dy = self._pixel_grid()
        distance_sq = dx * dx + dy * dy
        return (distance_sq >= inner_radius * inner_radius) & (distance_sq <= outer_radius * outer_radius)

    def _generic_mask(self) -> np.ndarray:
        inside = containment_predicate(self.kind, self.width, self.height, self.options)
        mask = np.zeros((self.height, self.width), dtype=bool)
        for y in range(self.height):
            for x in range(self.width):
                if inside(x, y):
                    mask[y, x] = True
        return mask

FAST_PATHS = MappingProxyType({
    ShapeKind.RECTANGLE: Renderer._fill_rectangle,
    ShapeKind.CIRCLE: Renderer._fill_circle,
    ShapeKind.OVAL: Renderer._fill_ellipse,
    ShapeKind.DIAMOND: Renderer._fill_diamond,
    ShapeKind.DONUT: Renderer._fill_donut,
})

def _polygon_predicate(vertices: list[Point]) -> Predicate:
    return lambda x, y: is_point_in_polygon(Point(x, y), vertices)

def _rectangle(width: int, height: int, options: ShapeOptions) -> Predicate:
    return lambda x, y: 0 <= x < width and 0 <= y < height

def _regular_polygon(sides: int):
    def build(width: int, height: int, options: ShapeOptions) -> Predicate:
        center = Point(width / 2, height / 2)
        vertices = generate_regular_polygon(center, min(width, height) / 2, sides, POLYGON_ROTATION)
        return _polygon_predicate(vertices)
    return build

def _circle(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    radius = min(width, height) / 2
    return lambda x, y: is_point_in_circle(Point(x, y), center, radius)

def _oval(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    return lambda x, y: is_point_in_ellipse(Point(x, y), center, width / 2, height / 2)

def _star(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    outer_radius = min(width, height) / 2
    vertices = generate_star(center, outer_radius, outer_radius * STAR_INNER_RATIO, options.star_points)
    return _polygon_predicate(vertices)

def _heart(width: int, height: int, options: ShapeOptions) -> Predicate:
    # same polygon is_point_in_heart builds, sampled once instead of per pixel
    center = Point(width / 2, height / 2)
    vertices = generate_heart_vertices(center, min(width, height) / 4, HEART_RESOLUTION)
    return _polygon_predicate(vertices)

def _diamond(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    size = min(width, height) / 2
    return lambda x, y: is_point_in_diamond(Point(x, y), center, size)

def _cross(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    thickness = options.resolved_cross_thickness(width, height)
    return lambda x, y: is_point_in_cross(Point(x, y), center, width, height, thickness)

def _arrow(width: int, height: int, options: ShapeOptions) -> Predicate:
    return _polygon_predicate(generate_arrow_vertices(width, height, options.arrow_direction))

def _donut(width: int, height: int, options: ShapeOptions) -> Predicate:
    center = Point(width / 2, height / 2)
    outer_radius = min(width, height) / 2
    inner_radius = outer_radius * (1 - options.donut_thickness)
    return lambda x, y: is_point_in_annulus(Point(x, y), center, outer_radius, inner_radius)

PREDICATE_BUILDERS = MappingProxyType({
    ShapeKind.RECTANGLE: _rectangle,
    ShapeKind.TRIANGLE: _regular_polygon(POLYGON_SIDES[ShapeKind.TRIANGLE]),
    ShapeKind.CIRCLE: _circle,
    ShapeKind.OVAL: _oval,
    ShapeKind.STAR: _star,
    ShapeKind.HEART: _heart,
    ShapeKind.DIAMOND: _diamond,
    ShapeKind.PENTAGON: _regular_polygon(POLYGON_SIDES[ShapeKind.PENTAGON]),
    ShapeKind.HEXAGON: _regular_polygon(POLYGON_SIDES[ShapeKind.HEXAGON]),
    ShapeKind.OCTAGON: _regular_polygon(POLYGON_SIDES[ShapeKind.OCTAGON]),
    ShapeKind.CROSS: _cross,
    ShapeKind.ARROW: _arrow,
    ShapeKind.DONUT: _donut,
})

def containment_predicate(kind, width: int, height: int,
                          options: Optional[ShapeOptions] = None) -> Predicate:
    kind = _coerce_kind(kind)
    builder = PREDICATE_BUILDERS.get(kind)
    if builder is None:
        raise UnsupportedShapeKind(f"No containment rule for shape kind {kind!r}")
    return builder(width, height, options or ShapeOptions())

def rasterize(kind, width: int, height: int, color, options: Optional[ShapeOptions] = None) -> Canvas:
    return Renderer(kind, width, height, color, options).render()

def rasterize_generic(kind, width: int, height: int, color,
                      options: Optional[ShapeOptions] = None) -> Canvas:
    return Renderer(kind, width, height, color, options).render(use_fast_path=False)
