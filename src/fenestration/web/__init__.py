"""FastAPI REST API for window shape measurement and pricing.

Usage:
    uvicorn fenestration.web:app --reload
"""

from fenestration.web.app import app, create_app

__all__ = ["app", "create_app"]
