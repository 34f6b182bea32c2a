# paintshapes

paintshapes models a small paint program: a toolbar, a colour palette, a
canvas with undo, and an application that connects mouse events on the canvas
to the chosen tool and colour. It has no graphics layer of its own. Each shape
returns its outline as a list of vertices, so any renderer can draw the canvas.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The pieces

- `paintshapes.enums` holds `Tool` (pencil, eraser, circle, triangle,
  rectangle, polygon, select), `ColorChoice` (red, orange, yellow, green,
  blue, indigo, violet) and `Action` (none, clear, undo).
- `paintshapes.shapes` holds `Color` and the drawable items `Point`, `Circle`,
  `Triangle`, `Rectangle`, `Polygon` and `Scribble`. Every item has a `color`
  property. The shapes and `Scribble` have a `vertices()` method. A circle's
  outline has 60 points. A `Polygon` with fewer than one side raises
  `ValueError`.
- `paintshapes.canvas.Canvas` stores what has been drawn:
  - `add_point`, `add_circle`, `add_triangle`, `add_rectangle` and
    `add_polygon` place an item and record it in the undo history.
  - `start_scribble` and `add_point_to_scribble` build freehand strokes.
  - `undo()` drops the latest scribble, if there is one. It also drops the
    latest shape in the history.
  - `clear()` empties the canvas.
  - `render()` lists every item in drawing order: scribbles, points, circles,
    triangles, rectangles, then polygons.
  - `erase_at(x, y, eraser_size)` removes the first item the eraser touches
    and returns it, or returns `None`.
- `paintshapes.color_selector.ColorSelector` keeps the chosen palette entry.
  It starts on red. `select(choice)` changes the entry and `color()` returns
  it with components from 0 to 1.
- `paintshapes.toolbar.Toolbar` keeps the current tool and the action of the
  latest click. `click(button)` takes a `ToolbarButton` or its name, then calls
  the `on_change` handler if one is set. The button names are `pencil`,
  `eraser`, `circle`, `triangle`, `rectangle`, `polygon`, `clear`, `undo` and
  `mouse`. The `mouse` button switches to the select tool and collapses or
  expands the toolbar.
- `paintshapes.app.Application` puts these together. This is what each tool
  does on the canvas:
  - Pencil: on a press or a drag, adds a 7-pixel dot in the current colour.
  - Eraser: on a press or a drag, adds a 14-pixel white dot.
  - Circle, triangle, rectangle and polygon: on a press, place a shape of a
    fixed size in the current colour. The polygon is a hexagon.

  Clicking clear or undo on the toolbar clears the canvas or undoes the last
  change.

## Usage

```python
from paintshapes.app import Application
from paintshapes.enums import ColorChoice
from paintshapes.toolbar import ToolbarButton

app = Application()

# Draw with the pencil in the default colour (red).
app.on_canvas_mouse_down(0.1, 0.2)
app.on_canvas_drag(0.15, 0.25)

# Switch to the circle tool and blue, then place a circle.
app.toolbar.click(ToolbarButton.CIRCLE)
app.color_selector.select(ColorChoice.BLUE)
app.on_canvas_mouse_down(0.0, 0.0)

# Undo the last shape.
app.toolbar.click(ToolbarButton.UNDO)
```

The canvas also works on its own:

```python
from paintshapes.canvas import Canvas

canvas = Canvas()
canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 1.0, 0.0, 0.0)
canvas.add_polygon(0.5, 0.5, 6, 0.1, 0.0, 1.0, 0.0)
canvas.erase_at(0.55, 0.5, 0.05)   # removes the polygon
for item in canvas.render():
    print(item)
```

## Command line

```
paintshapes
```

This reads commands from standard input, one per line:

- `tool NAME` clicks a toolbar button, for example `tool circle` or `tool undo`.
- `color NAME` chooses a palette colour, for example `color blue`.
- `down X Y` presses the mouse on the canvas.
- `drag X Y` drags the mouse on the canvas.
- `show` prints every item on the canvas.
- `quit` or `exit` ends the session.

An invalid command prints `error: ...` to standard error, and the session
carries on.

## What it does not do

paintshapes opens no window and draws nothing on screen. You read the canvas
through `render()` and the `vertices()` methods. The eraser tool in
`Application` paints white dots. It does not call `Canvas.erase_at`, so that
method is only used when you call it yourself.