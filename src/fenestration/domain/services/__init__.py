"""Domain services for window geometry and pricing.

This package provides the two pure engines of the configurator:
- Shape geometry: vertices, bounding boxes and areas of window shapes
- Pricing: itemized, stacked price breakdowns from a rule table
"""

from .geometry import (
    calculate_shape_area,
    equivalent_square_side,
    get_shape_bounding_box,
    get_shape_vertices,
    normalize_dimension_key,
    parse_shape_type,
    polygon_area,
    preview_scale,
    shape_from_dimensions,
)
from .pricing import (
    calculate_price,
    collect_flats,
    collect_multipliers,
    combine_multipliers,
    fallback_grid_modifier,
    format_modifier_label,
    grid_modifier,
    lookup_grid_modifier,
    round_half_up,
    round_to_increment,
)

__all__ = [
    # Geometry
    "calculate_shape_area",
    "equivalent_square_side",
    "get_shape_bounding_box",
    "get_shape_vertices",
    "normalize_dimension_key",
    "parse_shape_type",
    "polygon_area",
    "preview_scale",
    "shape_from_dimensions",
    # Pricing
    "calculate_price",
    "collect_flats",
    "collect_multipliers",
    "combine_multipliers",
    "fallback_grid_modifier",
    "format_modifier_label",
    "grid_modifier",
    "lookup_grid_modifier",
    "round_half_up",
    "round_to_increment",
]
