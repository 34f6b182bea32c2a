"""The paint application: wires the toolbar, palette and canvas together."""

from __future__ import annotations

import argparse
import shlex
import sys
from collections.abc import Iterable
from typing import TextIO

from paintshapes.canvas import Canvas
from paintshapes.color_selector import ColorSelector
from paintshapes.enums import Action, ColorChoice, Tool
from paintshapes.toolbar import Toolbar, ToolbarButton

WINDOW_TITLE = "Paint Application Shapes"
WINDOW_GEOMETRY = (25, 75, 400, 400)

PENCIL_SIZE = 7
ERASER_SIZE = 14
ERASER_COLOR = (1.0, 1.0, 1.0)
CIRCLE_RADIUS = 0.1
TRIANGLE_BASE = 0.2
TRIANGLE_HEIGHT = 0.2
RECTANGLE_WIDTH = 0.2
RECTANGLE_HEIGHT = 0.2
POLYGON_SIDES = 6
POLYGON_LENGTH = 0.1


class Application:
    """A window holding a toolbar, a canvas and a colour selector."""

    def __init__(self) -> None:
        self.title = WINDOW_TITLE
        self.geometry = WINDOW_GEOMETRY
        self.toolbar = Toolbar(0, 0, 50, 400, on_change=self.on_toolbar_change)
        self.canvas = Canvas(50, 0, 350, 300)
        self.color_selector = ColorSelector(50, 350, 350, 50)
        self.redraws = 0

    def _redraw(self) -> None:
        self.redraws += 1

    def _paint_stroke(self, x: float, y: float) -> bool:
        """Add a pencil or eraser dot if one of those tools is active."""
        tool = self.toolbar.tool
        if tool is Tool.PENCIL:
            color = self.color_selector.color()
            self.canvas.add_point(x, y, color.r, color.g, color.b, PENCIL_SIZE)
        elif tool is Tool.ERASER:
            self.canvas.add_point(x, y, *ERASER_COLOR, ERASER_SIZE)
        else:
            return False
        self._redraw()
        return True

    def on_canvas_mouse_down(self, x: float, y: float) -> None:
        """Apply the current tool at the pressed position."""
        if self._paint_stroke(x, y):
            return
        tool = self.toolbar.tool
        color = self.color_selector.color()
        rgb = (color.r, color.g, color.b)
        if tool is Tool.CIRCLE:
            self.canvas.add_circle(x, y, CIRCLE_RADIUS, *rgb)
        elif tool is Tool.TRIANGLE:
            self.canvas.add_triangle(x, y, TRIANGLE_BASE, TRIANGLE_HEIGHT, *rgb)
        elif tool is Tool.RECTANGLE:
            self.canvas.add_rectangle(x, y, RECTANGLE_WIDTH, RECTANGLE_HEIGHT, *rgb)
        elif tool is Tool.POLYGON:
            self.canvas.add_polygon(x, y, POLYGON_SIDES, POLYGON_LENGTH, *rgb)
        else:
            return
        self._redraw()

    def on_canvas_drag(self, x: float, y: float) -> None:
        """Continue a pencil or eraser stroke; shapes ignore dragging."""
        self._paint_stroke(x, y)

    def on_toolbar_change(self, toolbar: Toolbar) -> None:
        """Carry out the clear or undo action requested on the toolbar."""
        action = self.toolbar.action
        if action is Action.CLEAR:
            self.canvas.clear()
            self._redraw()
        if action is Action.UNDO:
            self.canvas.undo()
            self._redraw()


class CommandError(ValueError):
    """A line of input that is not a valid command."""


def _coordinates(args: list[str]) -> tuple[float, float]:
    if len(args) != 2:
        raise CommandError("expected two coordinates")
    try:
        return float(args[0]), float(args[1])
    except ValueError as exc:
        raise CommandError(f"bad coordinate: {exc}") from exc


def _execute(app: Application, line: str, out: TextIO) -> bool:
    """Run one command; return False when the session should end."""
    words = shlex.split(line)
    if not words:
        return True
    command, args = words[0].lower(), words[1:]

    if command in ("quit", "exit"):
        return False
    if command == "tool":
        if len(args) != 1:
            raise CommandError("expected one button name")
        try:
            button = ToolbarButton(args[0].lower())
        except ValueError as exc:
            raise CommandError(f"unknown button: {args[0]}") from exc
        app.toolbar.click(button)
    elif command == "color":
        if len(args) != 1:
            raise CommandError("expected one colour name")
        try:
            choice = ColorChoice[args[0].upper()]
        except KeyError as exc:
            raise CommandError(f"unknown colour: {args[0]}") from exc
        app.color_selector.select(choice)
    elif command == "down":
        app.on_canvas_mouse_down(*_coordinates(args))
    elif command == "drag":
        app.on_canvas_drag(*_coordinates(args))
    elif command == "show":
        for item in app.canvas.render():
            print(item, file=out)
    else:
        raise CommandError(f"unknown command: {command}")
    return True


def _run(app: Application, lines: Iterable[str], out: TextIO, err: TextIO) -> None:
    for line in lines:
        try:
            if not _execute(app, line, out):
                break
        except CommandError as exc:
            print(f"error: {exc}", file=err)


def main(argv: list[str] | None = None) -> int:
    """Drive the application from commands read on standard input."""
    parser = argparse.ArgumentParser(
        prog="paintshapes",
        description=(
            f"{WINDOW_TITLE}. Commands, one per line: tool NAME, color NAME, "
            "down X Y, drag X Y, show, quit."
        ),
    )
    parser.parse_args(argv)
    app = Application()
    _run(app, sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())