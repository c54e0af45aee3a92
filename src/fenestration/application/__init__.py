"""Application layer - use cases and configuration."""

from .commands import QuoteWindowCommand
from .dtos import QuoteOutput, ShapeOutput

__all__ = [
    "QuoteOutput",
    "QuoteWindowCommand",
    "ShapeOutput",
]
