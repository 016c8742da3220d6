from __future__ import annotations
import re

MAX_DIMENSION = 10000

integer_pattern = re.compile(r'^[-+]?\d+$')

class InvalidDimensionsError(ValueError):
    pass

def parse_dimension(value: str) -> int:
    value = str(value).strip()
    if not integer_pattern.match(value):
        raise InvalidDimensionsError(f"Width and height must be positive integers, got '{value}'.")

    number = int(value)
    if number <= 0:
        raise InvalidDimensionsError(f"Width and height must be positive integers, got '{value}'.")
    if number > MAX_DIMENSION:
        raise InvalidDimensionsError(f"Dimension too large: {number} (maximum is {MAX_DIMENSION}).")
    return number

def parse_dimensions(width_str: str, height_str: str) -> tuple[int, int]:
    return (parse_dimension(width_str), parse_dimension(height_str))
