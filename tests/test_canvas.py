import pytest

from paintshapes.canvas import Canvas
from paintshapes.enums import Tool
from paintshapes.shapes import Circle, Point, Polygon, Rectangle, Scribble, Triangle


@pytest.fixture
def canvas():
    return Canvas(50, 0, 350, 300)


def test_geometry_kept(canvas):
    assert (canvas.x, canvas.y, canvas.width, canvas.height) == (50, 0, 350, 300)


def test_new_canvas_is_empty(canvas):
    assert canvas.render() == []
    assert canvas.shapes == []


def test_add_point_records_history(canvas):
    point = canvas.add_point(0.1, 0.2, 1.0, 0.0, 0.0, 7)
    assert canvas.points == [Point(0.1, 0.2, 1.0, 0.0, 0.0, 7)]
    assert point is canvas.points[0]
    assert canvas.shapes == [Tool.PENCIL]


def test_each_shape_goes_to_its_list(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 0.0, 1.0, 0.0)
    canvas.add_triangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 1.0)
    canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 1.0, 1.0, 0.0)
    canvas.add_polygon(0.0, 0.0, 6, 0.1, 1.0, 0.0, 1.0)
    assert canvas.circles == [Circle(0.0, 0.0, 0.1, 0.0, 1.0, 0.0)]
    assert canvas.triangles == [Triangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 1.0)]
    assert canvas.rectangles == [Rectangle(0.0, 0.0, 0.2, 0.2, 1.0, 1.0, 0.0)]
    assert canvas.polygons == [Polygon(0.0, 0.0, 6, 0.1, 1.0, 0.0, 1.0)]
    assert canvas.shapes == [Tool.CIRCLE, Tool.TRIANGLE, Tool.RECTANGLE, Tool.POLYGON]


def test_undo_removes_latest_shape(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    canvas.add_rectangle(0.5, 0.5, 0.2, 0.2, 0.0, 0.0, 0.0)
    canvas.undo()
    assert canvas.rectangles == []
    assert len(canvas.circles) == 1
    assert canvas.shapes == [Tool.CIRCLE]
    canvas.undo()
    assert canvas.render() == []
    assert canvas.shapes == []


def test_undo_on_empty_canvas_is_harmless(canvas):
    canvas.undo()
    assert canvas.render() == []


def test_undo_also_drops_latest_scribble(canvas):
    canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.add_point(0.1, 0.1, 0.0, 0.0, 0.0, 7)
    canvas.undo()
    assert canvas.scribbles == []
    assert canvas.points == []


def test_undo_removes_scribble_without_history(canvas):
    first = canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.start_scribble(1.0, 0.0, 0.0, 3)
    canvas.undo()
    assert canvas.scribbles == [first]


def test_scribble_points(canvas):
    canvas.add_point_to_scribble(0.3, 0.3)
    assert canvas.scribbles == []
    scribble = canvas.start_scribble(0.0, 1.0, 0.0, 4)
    canvas.add_point_to_scribble(0.1, 0.2)
    canvas.add_point_to_scribble(0.3, 0.4)
    assert scribble.vertices() == [(0.1, 0.2), (0.3, 0.4)]
    assert all(p.size == 4 for p in scribble.points)


def test_clear_empties_everything(canvas):
    canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.add_point(0.0, 0.0, 0.0, 0.0, 0.0, 7)
    canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    canvas.add_polygon(0.0, 0.0, 6, 0.1, 0.0, 0.0, 0.0)
    canvas.clear()
    assert canvas.render() == []
    assert canvas.shapes == []


def test_render_order(canvas):
    polygon = canvas.add_polygon(0.0, 0.0, 6, 0.1, 0.0, 0.0, 0.0)
    rectangle = canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 0.0)
    triangle = canvas.add_triangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 0.0)
    circle = canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    point = canvas.add_point(0.0, 0.0, 0.0, 0.0, 0.0, 7)
    scribble = canvas.start_scribble(0.0, 0.0, 0.0, 3)
    rendered = canvas.render()
    expected = [scribble, point, circle, triangle, rectangle, polygon]
    assert len(rendered) == len(expected)
    assert all(a is b for a, b in zip(rendered, expected))


def test_erase_scribble_hit(canvas):
    scribble = canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.add_point_to_scribble(0.5, 0.5)
    assert canvas.erase_at(0.5, 0.55, 0.1) is scribble
    assert canvas.scribbles == []


def test_erase_scribble_miss(canvas):
    canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.add_point_to_scribble(0.5, 0.5)
    assert canvas.erase_at(-0.5, -0.5, 0.1) is None
    assert len(canvas.scribbles) == 1


def test_erase_circle_uses_radius(canvas):
    circle = canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    assert canvas.erase_at(0.3, 0.0, 0.1) is None
    assert canvas.erase_at(0.15, 0.0, 0.1) is circle
    assert canvas.circles == []


def test_erase_leaves_history_untouched(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    canvas.erase_at(0.0, 0.0, 0.05)
    assert canvas.shapes == [Tool.CIRCLE]


def test_erase_rectangle_measured_from_corner(canvas):
    rectangle = canvas.add_rectangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 0.0)
    assert canvas.erase_at(-0.05, 0.0, 0.01) is None
    assert canvas.erase_at(0.1, 0.1, 0.01) is rectangle
    assert canvas.rectangles == []


def test_erase_triangle(canvas):
    triangle = canvas.add_triangle(0.0, 0.0, 0.2, 0.2, 0.0, 0.0, 0.0)
    assert canvas.erase_at(0.3, 0.3, 0.01) is None
    assert canvas.erase_at(0.2, 0.2, 0.01) is triangle


def test_erase_polygon_within_length(canvas):
    polygon = canvas.add_polygon(0.0, 0.0, 6, 0.1, 0.0, 0.0, 0.0)
    assert canvas.erase_at(0.2, 0.0, 0.5) is None
    assert canvas.erase_at(0.05, 0.0, 0.0) is polygon


def test_erase_removes_only_one_item(canvas):
    first = canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    second = canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    assert canvas.erase_at(0.0, 0.0, 0.1) is first
    assert len(canvas.circles) == 1
    assert canvas.circles[0] is second


def test_erase_prefers_scribbles_over_shapes(canvas):
    canvas.add_circle(0.0, 0.0, 0.1, 0.0, 0.0, 0.0)
    scribble = canvas.start_scribble(0.0, 0.0, 0.0, 3)
    canvas.add_point_to_scribble(0.0, 0.0)
    assert canvas.erase_at(0.0, 0.0, 0.1) is scribble
    assert len(canvas.circles) == 1


def test_render_returns_scribble_type(canvas):
    canvas.start_scribble(0.0, 0.0, 0.0, 3)
    assert [type(item) for item in canvas.render()] == [Scribble]