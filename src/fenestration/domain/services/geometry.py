"""Shape geometry engine.

This module derives polygons, bounding boxes and areas for the parametric
window shapes:
- shape_from_dimensions: parse an untyped dimension mapping into a shape
- get_shape_vertices: ordered vertex list for a shape
- polygon_area: shoelace area, independent of winding order
- get_shape_bounding_box: axis-aligned extent of a vertex list

All functions are total. Missing dimensions count as 0, negative values
produce consistent (if odd looking) polygons, and an unknown shape tag
yields an empty polygon with zero area.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import fields
from typing import Any, Mapping, Sequence

from ..value_objects import SHAPE_CLASSES, BoundingBox, Point, Shape, ShapeType

logger = logging.getLogger(__name__)

__all__ = [
    "calculate_shape_area",
    "equivalent_square_side",
    "get_shape_bounding_box",
    "get_shape_vertices",
    "normalize_dimension_key",
    "parse_shape_type",
    "polygon_area",
    "preview_scale",
    "shape_from_dimensions",
]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def normalize_dimension_key(key: str) -> str:
    """Convert a camelCase form key to its snake_case field name.

    Examples:
        >>> normalize_dimension_key("flatToFlatHeight")
        'flat_to_flat_height'
        >>> normalize_dimension_key("chamfer")
        'chamfer'
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def parse_shape_type(shape: ShapeType | str) -> ShapeType | None:
    """Return the ShapeType for a tag, or None if the tag is unknown."""
    if isinstance(shape, ShapeType):
        return shape
    try:
        return ShapeType(shape)
    except ValueError:
        return None


def _as_inches(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def shape_from_dimensions(
    shape: ShapeType | str, dims: Mapping[str, Any] | None
) -> Shape | None:
    """Build a typed shape from a sparse dimension mapping.

    Only the dimensions the shape uses are read; everything else is ignored.
    Keys may be snake_case field names or the camelCase names used by form
    state. Absent, None or unparseable values become 0.

    Args:
        shape: Shape tag.
        dims: Mapping of dimension name to inches.

    Returns:
        The shape value, or None when the tag is not a known shape.
    """
    shape_type = parse_shape_type(shape)
    if shape_type is None:
        logger.debug("Unknown shape tag %r", shape)
        return None

    normalized = {
        normalize_dimension_key(key): value for key, value in (dims or {}).items()
    }
    shape_cls = SHAPE_CLASSES[shape_type]
    values = {f.name: _as_inches(normalized.get(f.name)) for f in fields(shape_cls)}
    return shape_cls(**values)


def get_shape_vertices(
    shape: ShapeType | str | Shape, dims: Mapping[str, Any] | None = None
) -> list[Point]:
    """Get the ordered vertices of a shape.

    Args:
        shape: Shape tag with a dimension mapping, or an already built shape.
        dims: Dimension mapping, ignored when ``shape`` is a shape value.

    Returns:
        A fresh vertex list; empty for an unknown or malformed shape tag.
    """
    if isinstance(shape, (str, ShapeType)):
        parsed = shape_from_dimensions(shape, dims)
        if parsed is None:
            return []
        return parsed.vertices()
    if not hasattr(shape, "vertices"):
        logger.debug("Not a shape: %r", shape)
        return []
    return shape.vertices()


def polygon_area(points: Sequence[Point]) -> float:
    """Area of a simple polygon using the shoelace formula.

    The absolute value makes the result independent of winding order.
    Self-intersecting polygons have no meaningful result.
    """
    n = len(points)
    s = 0.0
    for i in range(n):
        p1 = points[i]
        p2 = points[(i + 1) % n]
        s += p1.x * p2.y - p2.x * p1.y
    return abs(s) / 2


def calculate_shape_area(
    shape: ShapeType | str | Shape, dims: Mapping[str, Any] | None = None
) -> float:
    """Area of a shape in square inches; 0 for degenerate or unknown shapes."""
    return polygon_area(get_shape_vertices(shape, dims))


def get_shape_bounding_box(points: Sequence[Point]) -> BoundingBox:
    """Axis-aligned bounding box of a vertex list.

    Returns an all-zero box for an empty list so callers can detect
    "nothing to preview" instead of dividing by zero.
    """
    if not points:
        return BoundingBox()

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    return BoundingBox(
        width=max_x - min_x,
        height=max_y - min_y,
        min_x=min_x,
        min_y=min_y,
    )


def equivalent_square_side(area: float) -> float:
    """Side length of the square with the given area.

    Lets non-rectangular shapes be priced with width and height inputs.
    """
    if area <= 0:
        return 0.0
    return math.sqrt(area)


def preview_scale(bbox: BoundingBox, max_size: float) -> float:
    """Scale factor that fits a bounding box inside a max_size square.

    Returns 0 for an empty box, or one too small to scale up.
    """
    if bbox.is_empty:
        return 0.0
    scale = min(max_size / bbox.width, max_size / bbox.height)
    return scale if math.isfinite(scale) else 0.0
