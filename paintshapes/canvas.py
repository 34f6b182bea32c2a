"""Drawing surface holding everything the user has placed on it."""

from __future__ import annotations

import math
from collections.abc import Callable
from itertools import chain
from typing import TypeVar, Union

from paintshapes.enums import Tool
from paintshapes.shapes import Circle, Point, Polygon, Rectangle, Scribble, Triangle

Drawable = Union[Scribble, Point, Circle, Triangle, Rectangle, Polygon]

_T = TypeVar("_T")


def _remove_first(items: list[_T], hit: Callable[[_T], bool]) -> _T | None:
    """Remove and return the first item for which `hit` is true."""
    for index, item in enumerate(items):
        if hit(item):
            del items[index]
            return item
    return None


class Canvas:
    """Collections of drawn items plus the order in which shapes were added."""

    def __init__(self, x: int = 0, y: int = 0, width: int = 0, height: int = 0) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.points: list[Point] = []
        self.circles: list[Circle] = []
        self.triangles: list[Triangle] = []
        self.rectangles: list[Rectangle] = []
        self.polygons: list[Polygon] = []
        self.scribbles: list[Scribble] = []
        self.shapes: list[Tool] = []

    def _items_for(self, tool: Tool) -> list:
        return {
            Tool.PENCIL: self.points,
            Tool.CIRCLE: self.circles,
            Tool.TRIANGLE: self.triangles,
            Tool.RECTANGLE: self.rectangles,
            Tool.POLYGON: self.polygons,
        }.get(tool, [])

    def add_point(self, x: float, y: float, r: float, g: float, b: float, size: int) -> Point:
        """Place a dot and record it in the undo history."""
        point = Point(x, y, r, g, b, size)
        self.points.append(point)
        self.shapes.append(Tool.PENCIL)
        return point

    def add_circle(self, x: float, y: float, radius: float, r: float, g: float, b: float) -> Circle:
        """Place a circle and record it in the undo history."""
        circle = Circle(x, y, radius, r, g, b)
        self.circles.append(circle)
        self.shapes.append(Tool.CIRCLE)
        return circle

    def add_triangle(
        self, x: float, y: float, base: float, height: float, r: float, g: float, b: float
    ) -> Triangle:
        """Place a triangle and record it in the undo history."""
        triangle = Triangle(x, y, base, height, r, g, b)
        self.triangles.append(triangle)
        self.shapes.append(Tool.TRIANGLE)
        return triangle

    def add_rectangle(
        self, x: float, y: float, width: float, height: float, r: float, g: float, b: float
    ) -> Rectangle:
        """Place a rectangle and record it in the undo history."""
        rectangle = Rectangle(x, y, width, height, r, g, b)
        self.rectangles.append(rectangle)
        self.shapes.append(Tool.RECTANGLE)
        return rectangle

    def add_polygon(
        self, x: float, y: float, sides: int, length: float, r: float, g: float, b: float
    ) -> Polygon:
        """Place a regular polygon and record it in the undo history."""
        polygon = Polygon(x, y, sides, length, r, g, b)
        self.polygons.append(polygon)
        self.shapes.append(Tool.POLYGON)
        return polygon

    def start_scribble(self, r: float, g: float, b: float, size: int) -> Scribble:
        """Begin a new freehand stroke."""
        scribble = Scribble(r, g, b, size)
        self.scribbles.append(scribble)
        return scribble

    def add_point_to_scribble(self, x: float, y: float) -> None:
        """Extend the most recent stroke; does nothing if there is none."""
        if self.scribbles:
            self.scribbles[-1].add_point(x, y)

    def undo(self) -> None:
        """Drop the latest stroke, then the latest shape recorded in the history."""
        if self.scribbles:
            self.scribbles.pop()
        if not self.shapes:
            return
        items = self._items_for(self.shapes.pop())
        if items:
            items.pop()

    def clear(self) -> None:
        """Remove everything from the canvas and forget the history."""
        for items in (
            self.scribbles,
            self.points,
            self.circles,
            self.triangles,
            self.rectangles,
            self.polygons,
            self.shapes,
        ):
            items.clear()

    def render(self) -> list[Drawable]:
        """Everything on the canvas in drawing order."""
        return list(
            chain(
                self.scribbles,
                self.points,
                self.circles,
                self.triangles,
                self.rectangles,
                self.polygons,
            )
        )

    def erase_at(self, x: float, y: float, eraser_size: float) -> Drawable | None:
        """Remove the first item the eraser touches and return it, or None."""

        def near(px: float, py: float, reach: float) -> bool:
            return math.hypot(px - x, py - y) <= reach

        def inside(x0: float, y0: float, w: float, h: float) -> bool:
            return x0 <= x <= x0 + w and y0 <= y <= y0 + h

        searches: list[tuple[list, Callable]] = [
            (
                self.scribbles,
                lambda s: any(near(p.x, p.y, eraser_size) for p in s.points),
            ),
            (self.circles, lambda c: near(c.x, c.y, eraser_size + c.radius)),
            (self.rectangles, lambda rc: inside(rc.x, rc.y, rc.width, rc.height)),
            (self.triangles, lambda t: inside(t.x, t.y, t.base, t.height)),
            (self.polygons, lambda p: near(p.x, p.y, p.length)),
        ]
        for items, hit in searches:
            removed = _remove_first(items, hit)
            if removed is not None:
                return removed
        return None