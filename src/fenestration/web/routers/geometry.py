"""Shape geometry endpoints."""

from fastapi import APIRouter

from fenestration.web.converters import shape_output_to_schema
from fenestration.web.dependencies import QuoteCommandDep
from fenestration.web.schemas.requests import ShapeRequest
from fenestration.web.schemas.responses import ShapeResponseSchema

router = APIRouter(prefix="/geometry", tags=["geometry"])


@router.post("", response_model=ShapeResponseSchema)
async def measure_shape(
    request: ShapeRequest,
    command: QuoteCommandDep,
) -> ShapeResponseSchema:
    """Compute vertices, bounding box, area and preview scale of a shape.

    A shape whose outline has zero width or height is returned with
    ``has_preview`` false and a preview scale of 0.
    """
    output = command.measure_shape(request.shape, request.dimensions)
    return shape_output_to_schema(output, request.preview_size)
