"""Quote endpoints."""

from fastapi import APIRouter

from fenestration.application import QuoteWindowCommand
from fenestration.application.config import (
    config_to_pricing,
    config_to_shape,
    config_to_window,
    load_config_from_dict,
)
from fenestration.web.converters import quote_output_to_schema
from fenestration.web.schemas.requests import QuoteRequest
from fenestration.web.schemas.responses import ErrorResponseSchema, QuoteResponseSchema

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post(
    "",
    response_model=QuoteResponseSchema,
    responses={422: {"model": ErrorResponseSchema}},
)
async def quote_window(request: QuoteRequest) -> QuoteResponseSchema:
    """Quote a window from a full configuration.

    A configured shape is priced by its area; otherwise the window width and
    height are used.

    Raises:
        ConfigError: If the configuration fails validation (422).
    """
    config = load_config_from_dict(request.config)
    command = QuoteWindowCommand(config_to_pricing(config))
    output = command.execute(config_to_window(config), config_to_shape(config))
    return quote_output_to_schema(output)
