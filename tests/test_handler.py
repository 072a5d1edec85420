import io

import pygame
import pytest

from shapekit.decorators import DrawDecorator, FileDecorator
from shapekit.handler import (
    BACKGROUND_COLOR,
    MISSING_INPUT_MESSAGE,
    ShapesHandler,
    main,
    parse_circle,
    parse_rectangle,
    parse_shape,
    parse_triangle,
    read_shapes,
    render,
    write_shapes,
)
from shapekit.shapes import FILL_COLOR, Circle, Rectangle, Triangle

SAMPLE = (
    "CIRCLE: C=5,6; R=7\n"
    "RECTANGLE: P1=10,20; P2=30,50\n"
    "garbage line\n"
    "TRIANGLE: P1=1,2; P2=3,4; P3=5,6\n"
)


def test_parse_circle():
    assert parse_circle("CIRCLE: C=5,6; R=7") == Circle(7.0, 5.0, 6.0)


def test_parse_circle_without_match():
    assert parse_circle("CIRCLE: C=a,b; R=1") is None


def test_parse_circle_rejects_non_ascii_digits():
    assert parse_circle("CIRCLE: C=\u0663,4; R=1") is None


def test_parse_rectangle():
    expected = Rectangle.from_corners((10.0, 20.0), (30.0, 50.0))
    assert parse_rectangle("RECTANGLE: P1=10,20; P2=30,50") == expected


def test_parse_rectangle_reversed_corners_keeps_first_position():
    shape = parse_rectangle("RECTANGLE: P1=30,50; P2=10,20")
    assert (shape.x, shape.y) == (30.0, 50.0)
    assert shape == Rectangle.from_corners((30.0, 50.0), (10.0, 20.0))


def test_parse_rectangle_without_match():
    assert parse_rectangle("RECTANGLE: P1=1,2") is None


def test_parse_triangle():
    expected = Triangle((1.0, 2.0), (3.0, 4.0), (5.0, 6.0))
    assert parse_triangle("TRIANGLE: P1=1,2; P2=3,4; P3=5,6") == expected


def test_parse_triangle_without_match():
    assert parse_triangle("TRIANGLE: P1=1,2; P2=3,4") is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("CIRCLE: C=5,6; R=7", Circle(7.0, 5.0, 6.0)),
        (
            "RECTANGLE: P1=10,20; P2=30,50",
            Rectangle.from_corners((10.0, 20.0), (30.0, 50.0)),
        ),
        (
            "TRIANGLE: P1=1,2; P2=3,4; P3=5,6",
            Triangle((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)),
        ),
        ("SQUARE: P1=1,2; P2=3,4", None),
        ("", None),
    ],
)
def test_parse_shape_dispatch(line, expected):
    assert parse_shape(line) == expected


def test_parse_shape_circle_tag_takes_precedence():
    assert parse_shape("CIRCLE: RECTANGLE: P1=1,2; P2=3,4") is None


def test_read_shapes_wraps_and_keeps_order():
    shapes = read_shapes(io.StringIO(SAMPLE))
    assert len(shapes) == 3
    assert all(isinstance(s, FileDecorator) for s in shapes)
    assert all(isinstance(s.shape, DrawDecorator) for s in shapes)
    inner = [s.shape.shape for s in shapes]
    assert inner == [
        Circle(7.0, 5.0, 6.0),
        Rectangle.from_corners((10.0, 20.0), (30.0, 50.0)),
        Triangle((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)),
    ]


def test_read_shapes_skips_malformed_lines():
    assert read_shapes(["CIRCLE: C=1; R=2\n", "nothing\n"]) == []


def test_write_shapes_pinned_rectangle():
    out = io.StringIO()
    write_shapes(read_shapes(["RECTANGLE: P1=0,0; P2=3,4"]), out)
    assert out.getvalue() == "RECTANGLE: P=14.00; S=12.00\n"


def test_write_shapes_matches_each_shape_output():
    shapes = read_shapes(io.StringIO(SAMPLE))
    out = io.StringIO()
    write_shapes(shapes, out)
    pieces = []
    for shape in shapes:
        buffer = io.StringIO()
        shape.write_to(buffer)
        pieces.append(buffer.getvalue())
    assert out.getvalue() == "".join(pieces)
    lines = out.getvalue().splitlines()
    assert [line.split(" ")[0] for line in lines] == [
        "CIRCLE:",
        "RECTANGLE:",
        "TRIANGLE:",
    ]


def test_handler_load_appends_to_given_list():
    shapes = []
    handler = ShapesHandler(io.StringIO(SAMPLE), io.StringIO(), shapes)
    handler.load()
    assert handler.shapes is shapes
    assert len(shapes) == 3


def test_handler_write_outputs_loaded_shapes():
    out = io.StringIO()
    handler = ShapesHandler(io.StringIO("RECTANGLE: P1=0,0; P2=3,4\n"), out)
    handler.load()
    handler.write()
    assert out.getvalue() == "RECTANGLE: P=14.00; S=12.00\n"


def test_render_fills_background_and_draws_shapes():
    surface = pygame.Surface((100, 100))
    shapes = read_shapes(["RECTANGLE: P1=10,10; P2=40,40"])
    render(shapes, surface)
    assert tuple(surface.get_at((80, 80)))[:3] == tuple(BACKGROUND_COLOR)[:3]
    assert tuple(surface.get_at((20, 20)))[:3] == tuple(FILL_COLOR)


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    result = main([str(missing), str(tmp_path / "out.txt"), "--no-window"])
    assert result == 1
    assert capsys.readouterr().out == MISSING_INPUT_MESSAGE + "\n"
    assert not (tmp_path / "out.txt").exists()


def test_main_writes_output(tmp_path):
    source = tmp_path / "input.txt"
    source.write_text(SAMPLE, encoding="utf-8")
    target = tmp_path / "output.txt"
    assert main([str(source), str(target), "--no-window"]) == 0
    expected = io.StringIO()
    write_shapes(read_shapes(io.StringIO(SAMPLE)), expected)
    assert target.read_text(encoding="utf-8") == expected.getvalue()