"""Pydantic schemas for the REST API."""

from fenestration.web.schemas.requests import (
    ConfigValidateRequest,
    PriceRequest,
    QuoteRequest,
    ShapeRequest,
)
from fenestration.web.schemas.responses import (
    BoundingBoxSchema,
    ErrorResponseSchema,
    LineItemSchema,
    PointSchema,
    PriceBreakdownSchema,
    PricedWindowSchema,
    QuoteResponseSchema,
    ShapeResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PriceRequest",
    "QuoteRequest",
    "ShapeRequest",
    # Responses
    "BoundingBoxSchema",
    "ErrorResponseSchema",
    "LineItemSchema",
    "PointSchema",
    "PriceBreakdownSchema",
    "PricedWindowSchema",
    "QuoteResponseSchema",
    "ShapeResponseSchema",
    "ValidationResultSchema",
]
