"""Infrastructure layer - output formatting."""

from .formatters import (
    JsonExporter,
    PriceBreakdownFormatter,
    QuoteFormatter,
    ShapeReportFormatter,
    format_adjustment,
    format_currency,
)

__all__ = [
    "JsonExporter",
    "PriceBreakdownFormatter",
    "QuoteFormatter",
    "ShapeReportFormatter",
    "format_adjustment",
    "format_currency",
]
