from __future__ import annotations
import re
from types import MappingProxyType
from typing import Iterable, Optional
from helpers import levenshtein_distance, first_within_distance, suggest
from shapes import ShapeKind, get_supported_shapes, get_shape_constraints

ALPHA_ONLY_PATTERN = re.compile(r'^[a-zA-Z]+$')

MAX_NAME_DISTANCE = 2
MAX_LOOKALIKE_DISTANCE = 3
RATIO_TOLERANCE = 0.5

class InvalidShapeError(ValueError):
    pass

class ShapeNameTable:
    """Lookup from user-typed shape names to ShapeKind.

    Build one with ``ShapeNameTable.build()`` at startup and hand it to
    whatever parses user input.
    """

    def __init__(self, kinds: Iterable[ShapeKind]):
        self._kinds = tuple(kinds)
        self._names = tuple(kind.value.lower() for kind in self._kinds)
        self._by_name = MappingProxyType(dict(zip(self._names, self._kinds)))

    @classmethod
    def build(cls) -> 'ShapeNameTable':
        return cls(get_supported_shapes())

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def all_names(self) -> list[str]:
        return list(self._names)

    @staticmethod
    def normalize(value: str) -> str:
        return value.strip().lower()

    def is_valid(self, value: str) -> bool:
        return self.normalize(value) in self._by_name

    def find_closest(self, value: str) -> Optional[str]:
        normalized = self.normalize(value)
        if normalized in self._by_name:
            return normalized
        return first_within_distance(normalized, self._names, MAX_NAME_DISTANCE)

    def validate(self, value: str, strict: bool = False) -> str:
        normalized = self.normalize(value)
        if normalized in self._by_name:
            return normalized

        if strict:
            raise InvalidShapeError(f"Invalid shape '{value}'. Use --help to see supported shapes.")

        closest = self.find_closest(value)
        if closest:
            return closest

        suggestion = suggest(normalized, self._names)
        if suggestion:
            raise InvalidShapeError(f"Invalid shape '{value}'. Did you mean '{suggestion}'?")
        raise InvalidShapeError(f"Invalid shape '{value}'. Supported shapes: {', '.join(self._names)}.")

    def to_kind(self, normalized_name: str) -> ShapeKind:
        kind = self._by_name.get(normalized_name)
        if kind is None:
            raise InvalidShapeError(f"Invalid shape name: {normalized_name}")
        return kind

    def parse(self, value: str, strict: bool = False) -> ShapeKind:
        return self.to_kind(self.validate(value, strict))

    def looks_like_shape_name(self, value: str) -> bool:
        normalized = self.normalize(value)
        if normalized in self._by_name:
            return True

        for name in self._names:
            if levenshtein_distance(normalized, name) <= MAX_LOOKALIKE_DISTANCE:
                return True

        return bool(ALPHA_ONLY_PATTERN.match(normalized))

    def help_text(self) -> str:
        lines = ["Supported shapes:"]
        lines.extend(f"  {name}" for name in self._names)
        return "\n".join(lines)

class DimensionReport:
    def __init__(self, kind: ShapeKind, width: int, height: int):
        self.kind = kind
        self.width = width
        self.height = height
        self.validation_errors = []
        self.validation_warnings = []
        self.validate()

    def validate(self):
        self.validation_errors = []
        self.validation_warnings = []

        constraints = get_shape_constraints(self.kind)

        if self.width < constraints.min_width or self.height < constraints.min_height:
            self.validation_errors.append(
                f"{self.kind.value} requires minimum dimensions of "
                f"{constraints.min_width}x{constraints.min_height}")

        if constraints.preferred_ratio:
            actual_ratio = self.width / self.height
            if abs(actual_ratio - constraints.preferred_ratio) > RATIO_TOLERANCE:
                self.validation_warnings.append(
                    f"{self.kind.value} looks best with aspect ratio {constraints.preferred_ratio}:1 "
                    f"(try {round(self.height * constraints.preferred_ratio)}x{self.height})")

        if constraints.notes:
            self.validation_warnings.append(constraints.notes)

    def is_valid(self) -> bool:
        return len(self.validation_errors) == 0

    def print_validation_report(self, file=None):
        if self.is_valid() and len(self.validation_warnings) == 0:
            print("Dimension check: [OK] Valid", file=file)
            return

        if not self.is_valid():
            print("Dimension check: [ERROR] Errors found:", file=file)
            for error in self.validation_errors:
                print(f"  ERROR: {error}", file=file)

        if self.validation_warnings:
            print("Dimension check: [WARNING] Warnings:", file=file)
            for warning in self.validation_warnings:
                print(f"  WARNING: {warning}", file=file)
