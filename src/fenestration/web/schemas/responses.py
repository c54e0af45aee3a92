"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    """Polygon vertex in inches."""

    x: float
    y: float


class BoundingBoxSchema(BaseModel):
    """Axis-aligned bounding box in inches."""

    width: float
    height: float
    min_x: float
    min_y: float


class ShapeResponseSchema(BaseModel):
    """Response for shape measurement."""

    shape: str = Field(..., description="Shape type")
    vertices: list[PointSchema] = Field(..., description="Ordered polygon vertices")
    bounding_box: BoundingBoxSchema
    area_sq_in: float = Field(..., description="Area in square inches")
    area_sq_ft: float = Field(..., description="Area in square feet")
    has_preview: bool = Field(
        ..., description="False when the outline has zero width or height"
    )
    preview_scale: float | None = Field(
        default=None, description="Scale that fits the outline in the preview box"
    )


class LineItemSchema(BaseModel):
    """One line of a price breakdown."""

    label: str
    amount: float


class PriceBreakdownSchema(BaseModel):
    """Itemized price."""

    base: float = Field(..., description="Area times base rate")
    multipliers: list[LineItemSchema] = Field(default_factory=list)
    flats: list[LineItemSchema] = Field(default_factory=list)
    subtotal: float = Field(..., description="Base after multipliers")
    total: float = Field(..., description="Rounded total with flats and minimum order")
    multiplier_factor: float = Field(..., description="Combined multiplier factor")


class PricedWindowSchema(BaseModel):
    """Window options as priced.

    Shaped windows report their equivalent-area square, which can exceed
    the request limits on width and height.
    """

    width: float
    height: float
    opening_type: str
    glass_type: str
    thermal_break: bool
    color: str
    vertical_panes: int
    horizontal_panes: int
    hardware_type: str
    screens: bool


class QuoteResponseSchema(BaseModel):
    """Response for pricing and quote requests."""

    window: PricedWindowSchema = Field(..., description="Configuration that was priced")
    area_sq_ft: float
    breakdown: PriceBreakdownSchema
    shape: ShapeResponseSchema | None = None


class ValidationResultSchema(BaseModel):
    """Validation result."""

    is_valid: bool
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: str
    error_type: str
    details: Any = None
