"""Read circles, rectangles and triangles from text, report their perimeter and area, and draw them."""

__version__ = "0.1.0"

__all__ = ["shapes", "decorators", "creators", "handler"]