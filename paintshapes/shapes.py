"""Colours and the drawable items placed on a canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

Vertex = tuple[float, float]

_CIRCLE_SEGMENTS = 60


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in the range 0..1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


@dataclass
class _Colored:
    @property
    def color(self) -> Color:
        return Color(self.r, self.g, self.b)


@dataclass
class Point(_Colored):
    """A single dot of a given colour and pixel size."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    size: int = 7


def _regular_vertices(x: float, y: float, radius: float, count: int) -> list[Vertex]:
    step = 2 * math.pi / count
    return [
        (x + radius * math.cos(k * step), y + radius * math.sin(k * step))
        for k in range(count)
    ]


@dataclass
class Circle(_Colored):
    """A filled circle centred on (x, y)."""

    x: float = 0.0
    y: float = 0.0
    radius: float = 0.1
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def vertices(self) -> list[Vertex]:
        """Outline of the circle as a polygon of evenly spaced points."""
        return _regular_vertices(self.x, self.y, self.radius, _CIRCLE_SEGMENTS)


@dataclass
class Triangle(_Colored):
    """An isosceles triangle centred on (x, y), apex pointing up."""

    x: float = 0.0
    y: float = 0.0
    base: float = 0.2
    height: float = 0.2
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def vertices(self) -> list[Vertex]:
        """Bottom-left, apex and bottom-right corners."""
        half_base = self.base / 2
        half_height = self.height / 2
        return [
            (self.x - half_base, self.y - half_height),
            (self.x, self.y + half_height),
            (self.x + half_base, self.y - half_height),
        ]


@dataclass
class Rectangle(_Colored):
    """An axis-aligned rectangle centred on (x, y)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.2
    height: float = 0.2
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def vertices(self) -> list[Vertex]:
        """Corners clockwise from the top left."""
        half_w = self.width / 2
        half_h = self.height / 2
        return [
            (self.x - half_w, self.y + half_h),
            (self.x + half_w, self.y + half_h),
            (self.x + half_w, self.y - half_h),
            (self.x - half_w, self.y - half_h),
        ]


@dataclass
class Polygon(_Colored):
    """A regular polygon centred on (x, y) with corners `length` from the centre."""

    x: float = 0.0
    y: float = 0.0
    sides: int = 5
    length: float = 0.1
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __post_init__(self) -> None:
        if self.sides < 1:
            raise ValueError(f"a polygon needs at least one side, got {self.sides}")

    def vertices(self) -> list[Vertex]:
        """One corner per side, starting on the positive x axis."""
        return _regular_vertices(self.x, self.y, self.length, self.sides)


@dataclass
class Scribble(_Colored):
    """A freehand stroke: a line through points sharing one colour and width."""

    r: float
    g: float
    b: float
    size: int
    points: list[Point] = field(default_factory=list, init=False)

    def add_point(self, x: float, y: float) -> None:
        """Extend the stroke with a point in the scribble's colour and size."""
        self.points.append(Point(x, y, self.r, self.g, self.b, self.size))

    def vertices(self) -> list[Vertex]:
        """Coordinates of the stroke in the order they were added."""
        return [(p.x, p.y) for p in self.points]