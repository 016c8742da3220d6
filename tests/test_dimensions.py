from __future__ import annotations

import pytest

from dimensions import MAX_DIMENSION, InvalidDimensionsError, parse_dimensions


def test_parses_valid_dimensions() -> None:
    assert parse_dimensions('10', '20') == (10, 20)
    assert parse_dimensions(' 12 ', '+3') == (12, 3)


def test_accepts_the_maximum() -> None:
    assert parse_dimensions(str(MAX_DIMENSION), '1') == (MAX_DIMENSION, 1)


@pytest.mark.parametrize("width,height", [
    ('0', '10'),
    ('10', '-1'),
    ('abc', '10'),
    ('10.5', '10'),
    ('', '10'),
])
def test_rejects_non_positive_or_non_integer(width: str, height: str) -> None:
    with pytest.raises(InvalidDimensionsError, match="positive integers"):
        parse_dimensions(width, height)


@pytest.mark.parametrize("width", [str(MAX_DIMENSION + 1), '3000000000'])
def test_rejects_oversized_dimensions(width: str) -> None:
    with pytest.raises(InvalidDimensionsError, match="Dimension too large"):
        parse_dimensions(width, '1')
