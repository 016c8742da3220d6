from __future__ import annotations
import math
from typing import NamedTuple, Sequence

HEART_RESOLUTION = 200

class Point(NamedTuple):
    x: float
    y: float

def distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p1.x - p2.x) ** 2 + (p1.y - p2.y) ** 2)

def distance_from_origin(point: Point) -> float:
    return math.sqrt(point.x ** 2 + point.y ** 2)

def manhattan_distance(p1: Point, p2: Point) -> float:
    return abs(p1.x - p2.x) + abs(p1.y - p2.y)

def is_point_in_circle(point: Point, center: Point, radius: float) -> bool:
    return distance(point, center) <= radius

def is_point_in_ellipse(point: Point, center: Point, radius_x: float, radius_y: float) -> bool:
    dx = point.x - center.x
    dy = point.y - center.y
    return (dx * dx) / (radius_x * radius_x) + (dy * dy) / (radius_y * radius_y) <= 1

def is_point_in_annulus(point: Point, center: Point, outer_radius: float, inner_radius: float) -> bool:
    # squared distances so the result matches the donut fast path exactly
    dx = point.x - center.x
    dy = point.y - center.y
    distance_sq = dx * dx + dy * dy
    return inner_radius * inner_radius <= distance_sq <= outer_radius * outer_radius

def is_point_in_diamond(point: Point, center: Point, size: float) -> bool:
    return manhattan_distance(point, center) <= size

def is_point_in_cross(point: Point, center: Point, width: float, height: float,
                      thickness: float) -> bool:
    dx = abs(point.x - center.x)
    dy = abs(point.y - center.y)

    in_horizontal_bar = dy <= thickness / 2 and dx <= width / 2
    in_vertical_bar = dx <= thickness / 2 and dy <= height / 2
    return in_horizontal_bar or in_vertical_bar

def is_point_in_polygon(point: Point, vertices: Sequence[Point]) -> bool:
    n = len(vertices)
    if n < 3:
        return False

    x, y = point
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = vertices[i]
        xj, yj = vertices[j]
        # short-circuit keeps horizontal edges out of the division
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i
    return inside

def generate_heart_vertices(center: Point, size: float, resolution: int = 100) -> list[Point]:
    vertices = []
    scale = size / 8

    for i in range(resolution):
        t = (i / resolution) * 2 * math.pi
        x = scale * (16 * math.sin(t) ** 3)
        y = scale * (13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
        # curve is y-up, canvas is y-down
        vertices.append(Point(center.x + x, center.y - y))
    return vertices

def is_point_in_heart(point: Point, center: Point, size: float) -> bool:
    vertices = generate_heart_vertices(center, size, HEART_RESOLUTION)
    return is_point_in_polygon(point, vertices)

def clamp(x, minx, maxx):
    return max(min(x, maxx), minx)
