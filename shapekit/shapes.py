"""Geometric shapes: area, perimeter, drawing, labelled output and visitors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, TextIO

import pygame

Point = tuple[float, float]

CIRCLE_TAG = "CIRCLE: "
RECTANGLE_TAG = "RECTANGLE: "
TRIANGLE_TAG = "TRIANGLE: "

FILL_COLOR = (255, 255, 255)


class ShapeVisitor(ABC):
    """Operation dispatched on the concrete kind of a shape."""

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> None:
        """Handle a rectangle."""

    @abstractmethod
    def visit_circle(self, circle: Circle) -> None:
        """Handle a circle."""

    @abstractmethod
    def visit_triangle(self, triangle: Triangle) -> None:
        """Handle a triangle."""


class Shape(ABC):
    """A planar figure that can be measured, drawn and described."""

    label: ClassVar[str] = ""

    @abstractmethod
    def area(self) -> float:
        """Return the enclosed area."""

    @abstractmethod
    def perimeter(self) -> float:
        """Return the length of the boundary."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Paint the shape onto a surface."""

    @abstractmethod
    def write_to(self, out: TextIO) -> None:
        """Write the shape's label to a text stream."""

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> None:
        """Dispatch to the visitor method for this kind of shape."""


@dataclass(frozen=True)
class Circle(Shape):
    """Circle whose bounding box has its top-left corner at (x, y)."""

    radius: float
    x: float = 0.0
    y: float = 0.0

    label: ClassVar[str] = CIRCLE_TAG

    @property
    def center(self) -> Point:
        return (self.x + self.radius, self.y + self.radius)

    def area(self) -> float:
        return math.pi * self.radius**2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.circle(surface, FILL_COLOR, self.center, self.radius)

    def write_to(self, out: TextIO) -> None:
        out.write(self.label)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_circle(self)


@dataclass(frozen=True)
class Rectangle(Shape):
    """Axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float
    y: float
    width: float
    height: float

    label: ClassVar[str] = RECTANGLE_TAG

    @classmethod
    def from_corners(cls, first: Point, second: Point) -> Rectangle:
        """Place the rectangle at ``first`` and size it by the distance to ``second``."""
        (x1, y1), (x2, y2) = first, second
        return cls(x1, y1, abs(x2 - x1), abs(y2 - y1))

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)

    def draw(self, surface: pygame.Surface) -> None:
        rect = pygame.Rect(
            round(self.x), round(self.y), round(self.width), round(self.height)
        )
        pygame.draw.rect(surface, FILL_COLOR, rect)

    def write_to(self, out: TextIO) -> None:
        out.write(self.label)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_rectangle(self)


@dataclass(frozen=True)
class Triangle(Shape):
    """Triangle given by its three vertices."""

    first: Point
    second: Point
    third: Point

    label: ClassVar[str] = TRIANGLE_TAG

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.first, self.second, self.third)

    def side_lengths(self) -> tuple[float, float, float]:
        """Lengths of the sides first-second, second-third and third-first."""
        return (
            math.dist(self.first, self.second),
            math.dist(self.second, self.third),
            math.dist(self.third, self.first),
        )

    def area(self) -> float:
        semi = self.perimeter() / 2
        a, b, c = self.side_lengths()
        # Rounding can push a factor of a degenerate triangle just below zero.
        factors = (max(0.0, f) for f in (semi, semi - a, semi - b, semi - c))
        return math.prod(math.sqrt(f) for f in factors)

    def perimeter(self) -> float:
        return sum(self.side_lengths())

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.polygon(surface, FILL_COLOR, self.vertices)

    def write_to(self, out: TextIO) -> None:
        out.write(self.label)

    def accept(self, visitor: ShapeVisitor) -> None:
        visitor.visit_triangle(self)