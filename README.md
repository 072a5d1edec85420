# shapekit

shapekit reads a list of shapes from a text file. It writes the perimeter and
area of each shape to another file. Then it opens a 1000×1000 window titled
"Shapes" and draws the shapes in white.

## Input format

Each line describes one shape, and its tag says which kind. The coordinates
and the radius are non-negative whole numbers:

```
CIRCLE: C=100,100; R=50
RECTANGLE: P1=10,20; P2=110,70
TRIANGLE: P1=0,0; P2=30,0; P3=0,40
```

- A circle's `C` point is the top-left corner of its bounding box.
- A rectangle sits with its top-left corner at `P1`. Its width and height are
  the absolute differences between the coordinates of `P1` and `P2`.
- A triangle is drawn through its three points. Its area comes from Heron's
  formula.

The tags are checked in this order: `CIRCLE: `, `RECTANGLE: `, `TRIANGLE: `.
A line is skipped if it has none of these tags, or if its numbers do not match
the pattern for the first tag found.

## Output format

Each shape gets one line, and both values have two decimal places:

```
CIRCLE: P=314.16; S=7853.98
RECTANGLE: P=300.00; S=5000.00
TRIANGLE: P=120.00; S=600.00
```

## Command line

```
pip install .
shapekit [INPUT] [OUTPUT] [--no-window]
```

- `INPUT` defaults to `input.txt`.
- `OUTPUT` defaults to `output.txt`.
- Without `--no-window`, the shapes are drawn in a window after the results
  are written. Close the window to finish.
- With `--no-window`, the command only writes the results.

If the input file cannot be opened, the command prints
`Input file doesn't exist` and exits with status 1.

## Library use

```python
import io
from shapekit.handler import read_shapes, write_shapes

shapes = read_shapes(["CIRCLE: C=0,0; R=1", "RECTANGLE: P1=0,0; P2=2,3"])
out = io.StringIO()
write_shapes(shapes, out)
print(out.getvalue())
```

### `shapekit.shapes`

- Defines `Circle`, `Rectangle` and `Triangle`, all subclasses of the
  abstract `Shape`.
- Each shape has `area()`, `perimeter()`, `draw(surface)` for a pygame
  surface, `write_to(out)` and `accept(visitor)` for a `ShapeVisitor`.
- `write_to(out)` writes only the shape's label.
- `Rectangle.from_corners(first, second)` builds a rectangle from two points.
- `Triangle.side_lengths()` returns the three side lengths.

### `shapekit.decorators`

- `ShapeDecorator` passes every call on to the shape it wraps.
- `DrawDecorator` draws the wrapped shape.
- `FileDecorator` writes the full output line for the wrapped shape through
  the `Printer` visitor. `Printer` takes an optional `precision`, which
  defaults to 2.

### `shapekit.creators`

Provides `create_circle(radius, x, y)`, `create_rectangle(first, second)` and
`create_triangle(first, second, third)`.

### `shapekit.handler`

- Parsing: `parse_circle`, `parse_rectangle`, `parse_triangle` and
  `parse_shape` each return a shape or `None`.
- `read_shapes(lines)` wraps each shape it parses in a `FileDecorator`
  around a `DrawDecorator`.
- `write_shapes(shapes, out)` writes the shapes to a text stream.
- `render(shapes, surface)` clears a surface and draws the shapes on it.
- `ShapesHandler(source, out)` provides `load()`, `write()`, `show()` and
  `execute()`.
- `main(argv=None)` is the command above.

## Limitations

The window only displays the shapes. Shapes cannot be edited or moved there,
and nothing is saved from it. Only whole, non-negative numbers are accepted
in the input.

## Tests

```
pip install .[test]
pytest
```