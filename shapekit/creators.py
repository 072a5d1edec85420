"""Factory functions that build shapes from parsed coordinates."""

from __future__ import annotations

from shapekit.shapes import Circle, Point, Rectangle, Shape, Triangle


def create_circle(radius: float, x: float, y: float) -> Shape:
    """Build a circle of the given radius whose bounding box starts at (x, y)."""
    return Circle(radius, x, y)


def create_rectangle(first: Point, second: Point) -> Shape:
    """Build a rectangle placed at ``first`` and spanning to ``second``."""
    return Rectangle.from_corners(first, second)


def create_triangle(first: Point, second: Point, third: Point) -> Shape:
    """Build a triangle from its three vertices."""
    return Triangle(first, second, third)