"""Value objects for the window configurator domain.

This module provides immutable data types used throughout the system.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Shapes and geometry
from ._geometry import (
    SHAPE_CLASSES,
    BoundingBox,
    ChamferedRectangle,
    Hexagon,
    House,
    IsoscelesTriangle,
    Octagon,
    Parallelogram,
    Point,
    Rectangle,
    RightTriangle,
    Shape,
    ShapeType,
    Trapezoid,
)

# Pricing rules and results
from ._pricing import (
    LineItem,
    ModifierType,
    PriceBreakdown,
    PriceModifier,
    PricingConfig,
    StackingMode,
)

# Window options
from ._window import (
    GlassType,
    HardwareType,
    OpeningType,
    WindowConfig,
)

__all__ = [
    "SHAPE_CLASSES",
    "BoundingBox",
    "ChamferedRectangle",
    "GlassType",
    "HardwareType",
    "Hexagon",
    "House",
    "IsoscelesTriangle",
    "LineItem",
    "ModifierType",
    "Octagon",
    "OpeningType",
    "Parallelogram",
    "Point",
    "PriceBreakdown",
    "PriceModifier",
    "PricingConfig",
    "Rectangle",
    "RightTriangle",
    "Shape",
    "ShapeType",
    "StackingMode",
    "Trapezoid",
    "WindowConfig",
]
