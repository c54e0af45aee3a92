"""Pricing endpoints."""

from typing import Any

from fastapi import APIRouter

from fenestration.application import QuoteWindowCommand
from fenestration.application.config import (
    load_pricing_config_from_dict,
    pricing_schema_to_domain,
    pricing_to_config,
    schema_to_dict,
    window_schema_to_domain,
)
from fenestration.web.converters import quote_output_to_schema
from fenestration.web.dependencies import DefaultPricingDep
from fenestration.web.schemas.requests import PriceRequest
from fenestration.web.schemas.responses import ErrorResponseSchema, QuoteResponseSchema

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.get("/defaults")
async def default_pricing(pricing: DefaultPricingDep) -> dict[str, Any]:
    """Return the standard pricing table."""
    return schema_to_dict(pricing_to_config(pricing))


@router.post(
    "",
    response_model=QuoteResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def price_window(
    request: PriceRequest,
    pricing: DefaultPricingDep,
) -> QuoteResponseSchema:
    """Price a rectangular window.

    Raises:
        ConfigError: If a custom pricing table fails validation (422).
    """
    if request.pricing is not None:
        pricing = pricing_schema_to_domain(load_pricing_config_from_dict(request.pricing))

    command = QuoteWindowCommand(pricing)
    output = command.price(window_schema_to_domain(request.window))
    return quote_output_to_schema(output)
