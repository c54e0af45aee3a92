"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from fenestration.domain import BoundingBox, Point, PriceBreakdown, ShapeType, WindowConfig

SQ_IN_PER_SQ_FT = 144


@dataclass
class ShapeOutput:
    """Measured shape: outline, extent and area."""

    shape_type: ShapeType
    vertices: list[Point]
    bounding_box: BoundingBox
    area_sq_in: float

    @property
    def area_sq_ft(self) -> float:
        return self.area_sq_in / SQ_IN_PER_SQ_FT

    @property
    def has_preview(self) -> bool:
        """False when the outline collapses to a point or a line."""
        return not self.bounding_box.is_empty

    def to_dict(self) -> dict[str, Any]:
        bbox = self.bounding_box
        return {
            "shape": self.shape_type.value,
            "vertices": [{"x": p.x, "y": p.y} for p in self.vertices],
            "bounding_box": {
                "width": bbox.width,
                "height": bbox.height,
                "min_x": bbox.min_x,
                "min_y": bbox.min_y,
            },
            "area_sq_in": self.area_sq_in,
            "area_sq_ft": self.area_sq_ft,
            "has_preview": self.has_preview,
        }


@dataclass
class QuoteOutput:
    """Output DTO for a priced window.

    Attributes:
        window: The configuration that was priced. For shaped windows this is
            the equivalent-area square, not the user's original width/height.
        breakdown: Itemized price.
        shape: Measured shape, when the quote was for a shaped window.
    """

    window: WindowConfig
    breakdown: PriceBreakdown
    shape: ShapeOutput | None = None

    @property
    def area_sq_ft(self) -> float:
        return self.window.area_sq_ft

    def to_dict(self) -> dict[str, Any]:
        window = self.window
        data: dict[str, Any] = {
            "window": {
                "width": window.width,
                "height": window.height,
                "opening_type": window.opening_type,
                "glass_type": window.glass_type,
                "thermal_break": window.thermal_break,
                "color": window.color,
                "vertical_panes": window.vertical_panes,
                "horizontal_panes": window.horizontal_panes,
                "hardware_type": window.hardware_type,
                "screens": window.screens,
            },
            "area_sq_ft": self.area_sq_ft,
            "breakdown": self.breakdown.to_dict(),
        }
        if self.shape is not None:
            data["shape"] = self.shape.to_dict()
        return data


def square_window(window: WindowConfig, side: float) -> WindowConfig:
    """Copy of ``window`` resized to a side x side square."""
    return replace(window, width=side, height=side)
