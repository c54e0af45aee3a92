"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fenestration.application.config import WindowConfigSchema
from fenestration.application.config.schema import MAX_DIMENSION, DimensionValue
from fenestration.domain import ShapeType


class ShapeRequest(BaseModel):
    """Request for measuring a window shape."""

    model_config = ConfigDict(allow_inf_nan=False)

    shape: ShapeType = Field(..., description="Window outline shape")
    dimensions: dict[str, DimensionValue] = Field(
        default_factory=dict,
        description="Dimensions in inches; snake_case or camelCase keys",
    )
    preview_size: float = Field(
        default=300.0,
        gt=0,
        le=MAX_DIMENSION,
        description="Preview box size used for the scale factor",
    )


class PriceRequest(BaseModel):
    """Request for pricing a rectangular window."""

    window: WindowConfigSchema = Field(
        default_factory=WindowConfigSchema, description="Window options"
    )
    pricing: dict[str, Any] | None = Field(
        default=None, description="Custom pricing table (defaults to standard rates)"
    )


class QuoteRequest(BaseModel):
    """Request for quoting a window from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full quote configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Quote configuration to validate")
