"""Output formatters for shapes and price quotes."""

from __future__ import annotations

import json

from fenestration.application.dtos import QuoteOutput, ShapeOutput
from fenestration.domain import PriceBreakdown


def format_currency(amount: float) -> str:
    """Format an amount as en-US dollars with two decimals.

    Examples:
        >>> format_currency(3275)
        '$3,275.00'
        >>> format_currency(-27.5)
        '-$27.50'
    """
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_adjustment(amount: float) -> str:
    """Format a line-item adjustment with an explicit sign."""
    if amount < 0:
        return format_currency(amount)
    return f"+{format_currency(amount)}"


class ShapeReportFormatter:
    """Formats a measured shape for display."""

    def format(self, shape: ShapeOutput) -> str:
        """Format shape vertices, extent and area as a report."""
        lines = [
            f"SHAPE: {shape.shape_type.value}",
            "=" * 50,
        ]

        if not shape.has_preview:
            lines.append("Nothing to preview: the outline has zero size.")
            return "\n".join(lines)

        lines.append(f"{'#':>3}  {'X':>10}  {'Y':>10}")
        lines.append("-" * 50)
        for i, point in enumerate(shape.vertices):
            lines.append(f"{i:>3}  {point.x:>10.3f}  {point.y:>10.3f}")
        lines.append("-" * 50)

        bbox = shape.bounding_box
        lines.append(
            f'Bounding box: {bbox.width:.2f}" x {bbox.height:.2f}" '
            f"at ({bbox.min_x:.2f}, {bbox.min_y:.2f})"
        )
        lines.append(
            f"Area: {shape.area_sq_in:.2f} sq in ({shape.area_sq_ft:.2f} sq ft)"
        )
        return "\n".join(lines)


class PriceBreakdownFormatter:
    """Formats a price breakdown as a text report."""

    def format(self, breakdown: PriceBreakdown, area_sq_ft: float | None = None) -> str:
        width = 50
        lines = ["PRICE BREAKDOWN", "=" * width]
        if area_sq_ft is not None:
            lines.append(f"Estimated price for {area_sq_ft:.2f} sq ft window")
            lines.append("")

        lines.append(self._row("Base Price", format_currency(breakdown.base), width))

        if breakdown.multipliers:
            lines.append("")
            lines.append("Options:")
            for item in breakdown.multipliers:
                lines.append(
                    self._row(f"  {item.label}", format_adjustment(item.amount), width)
                )

        if breakdown.flats:
            lines.append("")
            lines.append("Add-ons:")
            for item in breakdown.flats:
                lines.append(
                    self._row(f"  {item.label}", format_adjustment(item.amount), width)
                )

        lines.append("-" * width)
        lines.append(
            self._row(
                f"Subtotal (x{breakdown.multiplier_factor:.3f})",
                format_currency(breakdown.subtotal),
                width,
            )
        )
        lines.append(self._row("TOTAL", format_currency(breakdown.total), width))
        return "\n".join(lines)

    @staticmethod
    def _row(label: str, value: str, width: int) -> str:
        padding = max(width - len(label) - len(value), 1)
        return f"{label}{' ' * padding}{value}"


class QuoteFormatter:
    """Formats a complete quote: shape report (if any) and price breakdown."""

    def __init__(self) -> None:
        self._shape_formatter = ShapeReportFormatter()
        self._price_formatter = PriceBreakdownFormatter()

    def format(self, output: QuoteOutput) -> str:
        parts = []
        if output.shape is not None:
            parts.append(self._shape_formatter.format(output.shape))
        parts.append(self._price_formatter.format(output.breakdown, output.area_sq_ft))
        return "\n\n".join(parts)


class JsonExporter:
    """Exports shapes and quotes as JSON."""

    def export(self, output: QuoteOutput | ShapeOutput) -> str:
        """Export a quote or measured shape as a JSON string."""
        return json.dumps(output.to_dict(), indent=2)
