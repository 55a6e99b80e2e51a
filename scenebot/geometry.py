"""Basic geometry value types."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Size", "Point", "Rect"]


@dataclass
class Size:
    """Width and height of an item."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class Point:
    """A two dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """A rectangle given by its top left corner and its size."""

    top_left: Point = field(default_factory=Point)
    size: Size = field(default_factory=Size)

    @classmethod
    def from_values(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a rectangle from plain coordinates and dimensions."""
        return cls(Point(x, y), Size(width, height))