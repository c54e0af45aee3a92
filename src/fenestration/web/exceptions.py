"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fenestration.application.config import ConfigError


def _json_safe_details(details: list[dict]) -> list[dict]:
    """Drop offending input values that may not be JSON serializable."""
    return [
        {key: value for key, value in detail.items() if key != "value"}
        for detail in details
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": _json_safe_details(exc.details),
            },
        )
