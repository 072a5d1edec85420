"""Reading shape descriptions, writing their measurements and showing them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

import pygame

from shapekit.creators import create_circle, create_rectangle, create_triangle
from shapekit.decorators import DrawDecorator, FileDecorator
from shapekit.shapes import CIRCLE_TAG, RECTANGLE_TAG, TRIANGLE_TAG, Shape

WINDOW_SIZE = (1000, 1000)
WINDOW_TITLE = "Shapes"
BACKGROUND_RGBA = 14737632

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"
MISSING_INPUT_MESSAGE = "Input file doesn't exist"

CIRCLE_PATTERN = re.compile(r"C=(\d+),(\d+);\s+R=(\d+)", re.ASCII)
RECTANGLE_PATTERN = re.compile(r"P1=(\d+),(\d+);\s+P2=(\d+),(\d+)", re.ASCII)
TRIANGLE_PATTERN = re.compile(
    r"P1=(\d+),(\d+);\s+P2=(\d+),(\d+);\s+P3=(\d+),(\d+)", re.ASCII
)


def _rgba(value: int) -> pygame.Color:
    """Decode a packed 0xRRGGBBAA integer into a colour."""
    return pygame.Color(
        (value >> 24) & 0xFF, (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    )


BACKGROUND_COLOR = _rgba(BACKGROUND_RGBA)


def _numbers(pattern: re.Pattern[str], line: str) -> list[float] | None:
    match = pattern.search(line)
    if match is None:
        return None
    return [float(group) for group in match.groups()]


def parse_circle(line: str) -> Shape | None:
    """Build a circle from ``C=x,y; R=r``, or return None if the line has none."""
    values = _numbers(CIRCLE_PATTERN, line)
    if values is None:
        return None
    x, y, radius = values
    return create_circle(radius, x, y)


def parse_rectangle(line: str) -> Shape | None:
    """Build a rectangle from ``P1=x,y; P2=x,y``, or return None."""
    values = _numbers(RECTANGLE_PATTERN, line)
    if values is None:
        return None
    x1, y1, x2, y2 = values
    return create_rectangle((x1, y1), (x2, y2))


def parse_triangle(line: str) -> Shape | None:
    """Build a triangle from ``P1=x,y; P2=x,y; P3=x,y``, or return None."""
    values = _numbers(TRIANGLE_PATTERN, line)
    if values is None:
        return None
    x1, y1, x2, y2, x3, y3 = values
    return create_triangle((x1, y1), (x2, y2), (x3, y3))


def parse_shape(line: str) -> Shape | None:
    """Pick the parser by the first tag found in the line and apply it."""
    if CIRCLE_TAG in line:
        return parse_circle(line)
    if RECTANGLE_TAG in line:
        return parse_rectangle(line)
    if TRIANGLE_TAG in line:
        return parse_triangle(line)
    return None


def read_shapes(lines: Iterable[str]) -> list[Shape]:
    """Parse every recognisable line into a decorated shape, in order."""
    shapes: list[Shape] = []
    for line in lines:
        shape = parse_shape(line.rstrip("\n"))
        if shape is not None:
            shapes.append(FileDecorator(DrawDecorator(shape)))
    return shapes


def write_shapes(shapes: Iterable[Shape], out: TextIO) -> None:
    """Write every shape to a text stream."""
    for shape in shapes:
        shape.write_to(out)


def render(shapes: Iterable[Shape], surface: pygame.Surface) -> None:
    """Clear the surface to the background colour and draw every shape."""
    surface.fill(BACKGROUND_COLOR)
    for shape in shapes:
        shape.draw(surface)


class ShapesHandler:
    """Loads shapes from an input stream, writes them out and shows them."""

    def __init__(
        self, source: TextIO, out: TextIO, shapes: list[Shape] | None = None
    ) -> None:
        self.source = source
        self.out = out
        self.shapes = shapes if shapes is not None else []

    def load(self) -> None:
        """Read the remaining input and append the shapes found in it."""
        self.shapes.extend(read_shapes(self.source))

    def write(self) -> None:
        """Write the loaded shapes to the output stream."""
        write_shapes(self.shapes, self.out)

    def show(self) -> None:
        """Open a window and draw the shapes until the window is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                render(self.shapes, screen)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()

    def execute(self) -> None:
        """Load, write and then show the shapes."""
        self.load()
        self.write()
        self.out.flush()
        self.show()


def main(argv: Sequence[str] | None = None) -> int:
    """Read shapes from a file, write their measurements and display them."""
    parser = argparse.ArgumentParser(
        description="Measure and display shapes described in a text file."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    parser.add_argument(
        "--no-window", action="store_true", help="write the results without drawing"
    )
    args = parser.parse_args(argv)

    try:
        source = open(args.input, encoding="utf-8")
    except OSError:
        print(MISSING_INPUT_MESSAGE)
        return 1

    with source, open(args.output, "w", encoding="utf-8") as out:
        handler = ShapesHandler(source, out)
        if args.no_window:
            handler.load()
            handler.write()
        else:
            handler.execute()
    return 0


if __name__ == "__main__":
    sys.exit(main())