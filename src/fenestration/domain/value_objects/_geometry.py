"""Shape geometry value objects.

Each window shape is its own frozen dataclass owning exactly the dimensions
it uses. Every dimension defaults to 0 so a partially filled form still
produces a (possibly degenerate) polygon instead of an error.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ShapeType(str, Enum):
    """Window and door outline shapes."""

    RECTANGLE = "rectangle"
    RIGHT_TRIANGLE = "right-triangle"
    ISOSCELES_TRIANGLE = "isosceles-triangle"
    TRAPEZOID = "trapezoid"
    HOUSE = "house"
    PARALLELOGRAM = "parallelogram"
    HEXAGON = "hexagon"
    OCTAGON = "octagon"
    CHAMFERED_RECTANGLE = "chamfered-rectangle"


@dataclass(frozen=True)
class Point:
    """2D point in inches, origin at the shape's reference corner."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a polygon."""

    width: float = 0.0
    height: float = 0.0
    min_x: float = 0.0
    min_y: float = 0.0

    @property
    def max_x(self) -> float:
        return self.min_x + self.width

    @property
    def max_y(self) -> float:
        return self.min_y + self.height

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to preview (zero width or height)."""
        return self.width == 0 or self.height == 0

    def contains(self, point: Point) -> bool:
        return (
            self.min_x <= point.x <= self.max_x
            and self.min_y <= point.y <= self.max_y
        )


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle."""

    width: float = 0.0
    height: float = 0.0

    shape_type = ShapeType.RECTANGLE

    def vertices(self) -> list[Point]:
        w, h = self.width, self.height
        return [Point(0, 0), Point(w, 0), Point(w, h), Point(0, h)]


@dataclass(frozen=True)
class RightTriangle:
    """Right triangle with the right angle at the origin.

    Attributes:
        base_width: Horizontal bottom edge in inches.
        triangle_height: Vertical left edge in inches.
    """

    base_width: float = 0.0
    triangle_height: float = 0.0

    shape_type = ShapeType.RIGHT_TRIANGLE

    def vertices(self) -> list[Point]:
        return [
            Point(0, 0),
            Point(self.base_width, 0),
            Point(0, self.triangle_height),
        ]


@dataclass(frozen=True)
class IsoscelesTriangle:
    """Triangle with its apex centered above the base.

    Attributes:
        isosceles_base: Full horizontal span at the bottom in inches.
        isosceles_height: Bottom center to peak in inches.
    """

    isosceles_base: float = 0.0
    isosceles_height: float = 0.0

    shape_type = ShapeType.ISOSCELES_TRIANGLE

    def vertices(self) -> list[Point]:
        base = self.isosceles_base
        return [
            Point(0, 0),
            Point(base, 0),
            Point(base / 2, self.isosceles_height),
        ]


@dataclass(frozen=True)
class Trapezoid:
    """Right trapezoid with a vertical left edge.

    The intended configuration has bottom_width >= top_width, but an
    inverted trapezoid is still a valid quadrilateral and is computed as-is.
    """

    bottom_width: float = 0.0
    top_width: float = 0.0
    trapezoid_height: float = 0.0

    shape_type = ShapeType.TRAPEZOID

    def vertices(self) -> list[Point]:
        h = self.trapezoid_height
        return [
            Point(0, 0),
            Point(self.bottom_width, 0),
            Point(self.top_width, h),
            Point(0, h),
        ]


@dataclass(frozen=True)
class House:
    """Rectangle topped by a symmetric gable."""

    house_width: float = 0.0
    wall_height: float = 0.0
    gable_rise: float = 0.0

    shape_type = ShapeType.HOUSE

    def vertices(self) -> list[Point]:
        w, wall = self.house_width, self.wall_height
        return [
            Point(0, 0),
            Point(w, 0),
            Point(w, wall),
            Point(w / 2, wall + self.gable_rise),
            Point(0, wall),
        ]


@dataclass(frozen=True)
class Parallelogram:
    """Parallelogram whose top edge is shifted by a signed skew offset."""

    parallelogram_base: float = 0.0
    parallelogram_height: float = 0.0
    skew_offset: float = 0.0

    shape_type = ShapeType.PARALLELOGRAM

    def vertices(self) -> list[Point]:
        base, h, skew = (
            self.parallelogram_base,
            self.parallelogram_height,
            self.skew_offset,
        )
        return [Point(0, 0), Point(base, 0), Point(base + skew, h), Point(skew, h)]


@dataclass(frozen=True)
class Hexagon:
    """Regular hexagon with flat top and bottom.

    Attributes:
        flat_to_flat_height: Distance between the top and bottom flat sides.
    """

    flat_to_flat_height: float = 0.0

    shape_type = ShapeType.HEXAGON

    @property
    def side_length(self) -> float:
        return self.flat_to_flat_height / math.sqrt(3)

    def vertices(self) -> list[Point]:
        d = self.flat_to_flat_height
        s = self.side_length
        half_s = s / 2
        half_d = d / 2
        return [
            Point(s + half_s, 0),  # right bottom
            Point(s + s, half_d),  # right
            Point(s + half_s, d),  # right top
            Point(half_s, d),  # left top
            Point(0, half_d),  # left
            Point(half_s, 0),  # left bottom
        ]


@dataclass(frozen=True)
class Octagon:
    """Regular octagon sized by the distance between opposite flat sides."""

    octagon_flat_to_flat: float = 0.0

    shape_type = ShapeType.OCTAGON

    @property
    def side_length(self) -> float:
        return self.octagon_flat_to_flat / (1 + math.sqrt(2))

    def vertices(self) -> list[Point]:
        d = self.octagon_flat_to_flat
        s = self.side_length
        offset = s / math.sqrt(2)
        return [
            Point(offset, 0),
            Point(offset + s, 0),
            Point(d, offset),
            Point(d, offset + s),
            Point(offset + s, d),
            Point(offset, d),
            Point(0, offset + s),
            Point(0, offset),
        ]


@dataclass(frozen=True)
class ChamferedRectangle:
    """Rectangle with all four corners cut at 45 degrees."""

    chamfer_width: float = 0.0
    chamfer_height: float = 0.0
    chamfer: float = 0.0

    shape_type = ShapeType.CHAMFERED_RECTANGLE

    def vertices(self) -> list[Point]:
        w, h, c = self.chamfer_width, self.chamfer_height, self.chamfer
        return [
            Point(c, 0),
            Point(w - c, 0),
            Point(w, c),
            Point(w, h - c),
            Point(w - c, h),
            Point(c, h),
            Point(0, h - c),
            Point(0, c),
        ]


Shape = Union[
    Rectangle,
    RightTriangle,
    IsoscelesTriangle,
    Trapezoid,
    House,
    Parallelogram,
    Hexagon,
    Octagon,
    ChamferedRectangle,
]

SHAPE_CLASSES: dict[ShapeType, type] = {
    ShapeType.RECTANGLE: Rectangle,
    ShapeType.RIGHT_TRIANGLE: RightTriangle,
    ShapeType.ISOSCELES_TRIANGLE: IsoscelesTriangle,
    ShapeType.TRAPEZOID: Trapezoid,
    ShapeType.HOUSE: House,
    ShapeType.PARALLELOGRAM: Parallelogram,
    ShapeType.HEXAGON: Hexagon,
    ShapeType.OCTAGON: Octagon,
    ShapeType.CHAMFERED_RECTANGLE: ChamferedRectangle,
}
