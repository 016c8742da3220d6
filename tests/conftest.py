"""Shared fixtures for the shape rasterizer tests."""

from __future__ import annotations

import pytest

from colors import RGBAColor
from shape_validation import ShapeNameTable
from shapes import ShapeKind

RED = RGBAColor(255, 0, 0, 255)
BLUE = RGBAColor(0, 0, 255, 255)
YELLOW = RGBAColor(255, 255, 0, 255)

FAST_KINDS = [ShapeKind.RECTANGLE, ShapeKind.CIRCLE, ShapeKind.OVAL, ShapeKind.DIAMOND, ShapeKind.DONUT]
GENERIC_KINDS = [kind for kind in ShapeKind if kind not in FAST_KINDS]


@pytest.fixture()
def red() -> RGBAColor:
    return RED


@pytest.fixture(scope="session")
def shape_names() -> ShapeNameTable:
    return ShapeNameTable.build()
