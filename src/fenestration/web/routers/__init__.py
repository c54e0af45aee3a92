"""API routers for the REST API."""

from fenestration.web.routers.geometry import router as geometry_router
from fenestration.web.routers.pricing import router as pricing_router
from fenestration.web.routers.quote import router as quote_router
from fenestration.web.routers.validate import router as validate_router

__all__ = [
    "geometry_router",
    "pricing_router",
    "quote_router",
    "validate_router",
]
