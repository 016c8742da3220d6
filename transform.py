from __future__ import annotations
import math
from geometry import Point

class TransformMatrix:
    def __init__(self, a: float = 1.0, b: float = 0.0, c: float = 0.0,
                 d: float = 1.0, e: float = 0.0, f: float = 0.0):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.e = e
        self.f = f

    @staticmethod
    def identity() -> 'TransformMatrix':
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @staticmethod
    def translate(tx: float, ty: float) -> 'TransformMatrix':
        return TransformMatrix(1.0, 0.0, 0.0, 1.0, tx, ty)

    @staticmethod
    def scale(sx: float, sy: float = None) -> 'TransformMatrix':
        if sy is None:
            sy = sx
        return TransformMatrix(sx, 0.0, 0.0, sy, 0.0, 0.0)

    @staticmethod
    def rotate(angle_degrees: float, cx: float = 0.0, cy: float = 0.0) -> 'TransformMatrix':
        angle_rad = math.radians(angle_degrees)
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        r = TransformMatrix(cos_a, sin_a, -sin_a, cos_a, 0.0, 0.0)

        if cx != 0.0 or cy != 0.0:
            t1 = TransformMatrix.translate(-cx, -cy)
            t2 = TransformMatrix.translate(cx, cy)
            return t2.multiply(r).multiply(t1)
        return r

    @staticmethod
    def quarter_turn(counterclockwise: bool, cx: float = 0.0, cy: float = 0.0) -> 'TransformMatrix':
        # rotate(+-90) with exact 0/1 coefficients, math.cos(pi/2) is not zero
        s = -1.0 if counterclockwise else 1.0
        return TransformMatrix(0.0, s, -s, 0.0, cx + s * cy, cy - s * cx)

    @staticmethod
    def mirror_x(axis_x: float) -> 'TransformMatrix':
        return TransformMatrix.translate(2 * axis_x, 0.0).multiply(TransformMatrix.scale(-1.0, 1.0))

    def multiply(self, other: 'TransformMatrix') -> 'TransformMatrix':
        return TransformMatrix(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f
        )

    def is_identity(self) -> bool:
        return (abs(self.a - 1.0) < 1e-6 and abs(self.b) < 1e-6 and
                abs(self.c) < 1e-6 and abs(self.d - 1.0) < 1e-6 and
                abs(self.e) < 1e-6 and abs(self.f) < 1e-6)

    def transform_point(self, point: Point) -> Point:
        new_x = self.a * point.x + self.c * point.y + self.e
        new_y = self.b * point.x + self.d * point.y + self.f
        return Point(new_x, new_y)

def arrow_direction_transform(direction: str, width: float, height: float) -> TransformMatrix:
    center_x = width / 2
    center_y = height / 2

    # up/down land on y' = cx -/+ (x - cx), i.e. the turn is shifted by cx - cy.
    # Folding the offsets into e/f can move results by an ulp versus remapping
    # each coordinate directly; rasterized pixels are unaffected.
    if direction == 'up':
        turn = TransformMatrix.quarter_turn(True, center_x, center_y)
        return TransformMatrix.translate(0.0, center_x - center_y).multiply(turn)
    elif direction == 'down':
        turn = TransformMatrix.quarter_turn(False, center_x, center_y)
        return TransformMatrix.translate(0.0, center_x - center_y).multiply(turn)
    elif direction == 'left':
        return TransformMatrix.mirror_x(center_x)

    return TransformMatrix.identity()
