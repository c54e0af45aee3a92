"""Domain layer - shape geometry and pricing."""

from .pricing_rules import DEFAULT_PRICING
from .services import (
    calculate_price,
    calculate_shape_area,
    get_shape_bounding_box,
    get_shape_vertices,
    polygon_area,
    shape_from_dimensions,
)
from .value_objects import (
    BoundingBox,
    LineItem,
    ModifierType,
    Point,
    PriceBreakdown,
    PriceModifier,
    PricingConfig,
    Shape,
    ShapeType,
    StackingMode,
    WindowConfig,
)

__all__ = [
    "DEFAULT_PRICING",
    "BoundingBox",
    "LineItem",
    "ModifierType",
    "Point",
    "PriceBreakdown",
    "PriceModifier",
    "PricingConfig",
    "Shape",
    "ShapeType",
    "StackingMode",
    "WindowConfig",
    "calculate_price",
    "calculate_shape_area",
    "get_shape_bounding_box",
    "get_shape_vertices",
    "polygon_area",
    "shape_from_dimensions",
]
