"""Application commands (use cases) for window quoting."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from fenestration.domain import (
    DEFAULT_PRICING,
    PricingConfig,
    Shape,
    ShapeType,
    WindowConfig,
    calculate_price,
    get_shape_bounding_box,
    polygon_area,
    shape_from_dimensions,
)
from fenestration.domain.services import equivalent_square_side

from .dtos import QuoteOutput, ShapeOutput, square_window

logger = logging.getLogger(__name__)


class QuoteWindowCommand:
    """Command to measure a window shape and price a configuration.

    Rectangular windows are priced from their width and height. Shaped
    windows are priced as the square with the same area as the shape.
    """

    def __init__(self, pricing_config: PricingConfig | None = None) -> None:
        self.pricing_config = pricing_config or DEFAULT_PRICING

    def measure_shape(
        self,
        shape: Shape | ShapeType | str,
        dims: Mapping[str, Any] | None = None,
    ) -> ShapeOutput:
        """Compute the outline, bounding box and area of a shape.

        Args:
            shape: A shape value, or a shape tag with a dimension mapping.
            dims: Dimension mapping, used with a shape tag.

        Raises:
            ValueError: If the shape tag is not a known shape.
        """
        if isinstance(shape, (str, ShapeType)):
            parsed = shape_from_dimensions(shape, dims)
            if parsed is None:
                valid = ", ".join(s.value for s in ShapeType)
                raise ValueError(f"Unknown shape '{shape}'. Valid shapes: {valid}")
            shape = parsed

        vertices = shape.vertices()
        return ShapeOutput(
            shape_type=shape.shape_type,
            vertices=vertices,
            bounding_box=get_shape_bounding_box(vertices),
            area_sq_in=polygon_area(vertices),
        )

    def price(self, window: WindowConfig) -> QuoteOutput:
        """Price a rectangular window configuration."""
        breakdown = calculate_price(window, self.pricing_config)
        return QuoteOutput(window=window, breakdown=breakdown)

    def execute(
        self,
        window: WindowConfig,
        shape: Shape | ShapeType | str | None = None,
        dims: Mapping[str, Any] | None = None,
    ) -> QuoteOutput:
        """Execute the quote command.

        Args:
            window: Window options. Width and height are used only when no
                shape is given.
            shape: Optional outline; a shape value or a shape tag.
            dims: Dimension mapping for a shape tag.

        Returns:
            QuoteOutput with the priced configuration and breakdown.
        """
        if shape is None:
            return self.price(window)

        measured = self.measure_shape(shape, dims)
        side = equivalent_square_side(measured.area_sq_in)
        logger.debug(
            "Pricing %s as %.3f\" square (%.2f sq in)",
            measured.shape_type.value,
            side,
            measured.area_sq_in,
        )
        priced = square_window(window, side)
        return QuoteOutput(
            window=priced,
            breakdown=calculate_price(priced, self.pricing_config),
            shape=measured,
        )
