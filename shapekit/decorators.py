"""Decorators that wrap shapes, and a visitor that prints their measurements."""

from __future__ import annotations

from typing import TextIO

import pygame

from shapekit.shapes import Circle, Rectangle, Shape, ShapeVisitor, Triangle

PERIMETER_TAG = "P="
AREA_TAG = "; S="
DEFAULT_PRECISION = 2


class Printer(ShapeVisitor):
    """Writes one line per visited shape: its label, perimeter and area."""

    def __init__(self, out: TextIO, precision: int = DEFAULT_PRECISION) -> None:
        self.out = out
        self.precision = precision

    def _emit(self, shape: Shape) -> None:
        digits = self.precision
        self.out.write(
            f"{shape.label}{PERIMETER_TAG}{shape.perimeter():.{digits}f}"
            f"{AREA_TAG}{shape.area():.{digits}f}\n"
        )

    def visit_rectangle(self, rectangle: Rectangle) -> None:
        self._emit(rectangle)

    def visit_circle(self, circle: Circle) -> None:
        self._emit(circle)

    def visit_triangle(self, triangle: Triangle) -> None:
        self._emit(triangle)


class ShapeDecorator(Shape):
    """A shape that forwards every operation to the shape it wraps."""

    def __init__(self, shape: Shape) -> None:
        self.shape = shape

    @property
    def label(self) -> str:  # type: ignore[override]
        return self.shape.label

    def area(self) -> float:
        return self.shape.area()

    def perimeter(self) -> float:
        return self.shape.perimeter()

    def draw(self, surface: pygame.Surface) -> None:
        self.shape.draw(surface)

    def write_to(self, out: TextIO) -> None:
        self.shape.write_to(out)

    def accept(self, visitor: ShapeVisitor) -> None:
        self.shape.accept(visitor)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.shape!r})"


class DrawDecorator(ShapeDecorator):
    """Decorator responsible for painting the wrapped shape."""

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)


class FileDecorator(ShapeDecorator):
    """Decorator that writes the wrapped shape's label, perimeter and area."""

    def write_to(self, out: TextIO) -> None:
        self.shape.accept(Printer(out))