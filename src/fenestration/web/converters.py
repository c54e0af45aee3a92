"""Conversions from application outputs to response schemas."""

from fenestration.application import QuoteOutput, ShapeOutput
from fenestration.domain import PriceBreakdown
from fenestration.domain.services import preview_scale
from fenestration.web.schemas.responses import (
    BoundingBoxSchema,
    LineItemSchema,
    PointSchema,
    PriceBreakdownSchema,
    PricedWindowSchema,
    QuoteResponseSchema,
    ShapeResponseSchema,
)


def shape_output_to_schema(
    output: ShapeOutput, preview_size: float | None = None
) -> ShapeResponseSchema:
    """Convert ShapeOutput to response schema."""
    bbox = output.bounding_box
    scale = None
    if preview_size is not None:
        scale = preview_scale(bbox, preview_size)
    return ShapeResponseSchema(
        shape=output.shape_type.value,
        vertices=[PointSchema(x=p.x, y=p.y) for p in output.vertices],
        bounding_box=BoundingBoxSchema(
            width=bbox.width,
            height=bbox.height,
            min_x=bbox.min_x,
            min_y=bbox.min_y,
        ),
        area_sq_in=output.area_sq_in,
        area_sq_ft=output.area_sq_ft,
        has_preview=output.has_preview,
        preview_scale=scale,
    )


def breakdown_to_schema(breakdown: PriceBreakdown) -> PriceBreakdownSchema:
    """Convert PriceBreakdown to response schema."""
    return PriceBreakdownSchema(
        base=breakdown.base,
        multipliers=[
            LineItemSchema(label=m.label, amount=m.amount) for m in breakdown.multipliers
        ],
        flats=[LineItemSchema(label=f.label, amount=f.amount) for f in breakdown.flats],
        subtotal=breakdown.subtotal,
        total=breakdown.total,
        multiplier_factor=breakdown.multiplier_factor,
    )


def quote_output_to_schema(output: QuoteOutput) -> QuoteResponseSchema:
    """Convert QuoteOutput to response schema."""
    window = output.window
    return QuoteResponseSchema(
        window=PricedWindowSchema(
            width=window.width,
            height=window.height,
            opening_type=window.opening_type,
            glass_type=window.glass_type,
            thermal_break=window.thermal_break,
            color=window.color,
            vertical_panes=window.vertical_panes,
            horizontal_panes=window.horizontal_panes,
            hardware_type=window.hardware_type,
            screens=window.screens,
        ),
        area_sq_ft=output.area_sq_ft,
        breakdown=breakdown_to_schema(output.breakdown),
        shape=shape_output_to_schema(output.shape) if output.shape else None,
    )
