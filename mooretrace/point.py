# point.py
# integer 2-D point / offset value type

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def add(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def equals(self, other: Point) -> bool:
        return self.x == other.x and self.y == other.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
