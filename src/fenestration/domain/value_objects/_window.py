"""Window configuration value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OpeningType(str, Enum):
    """Opening mechanisms offered by the configurator."""

    IN_SWING = "in-swing"
    OUT_SWING = "out-swing"
    DOUBLE_HUNG = "double-hung"
    SINGLE_HUNG = "single-hung"


class GlassType(str, Enum):
    """Glazing options."""

    DOUBLE_PANE = "double-pane"
    TRIPLE_PANE = "triple-pane"


class HardwareType(str, Enum):
    """Hardware finish tiers."""

    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


@dataclass(frozen=True)
class WindowConfig:
    """The pricing-relevant part of a window configuration.

    Codes are kept as plain strings so that a value unknown to the rate table
    can still be represented; it simply contributes no adjustment.

    Attributes:
        width: Opening width in inches.
        height: Opening height in inches.
        opening_type: Opening mechanism code (see OpeningType).
        glass_type: Glazing code (see GlassType).
        thermal_break: Whether the frame has a thermal break.
        color: Frame color name; anything other than white is a premium color.
        vertical_panes: Pane divisions across.
        horizontal_panes: Pane divisions down.
        hardware_type: Hardware tier code (see HardwareType).
        screens: Whether screens are included.
    """

    width: float = 48.0
    height: float = 60.0
    opening_type: str = OpeningType.IN_SWING.value
    glass_type: str = GlassType.DOUBLE_PANE.value
    thermal_break: bool = False
    color: str = "white"
    vertical_panes: int = 1
    horizontal_panes: int = 1
    hardware_type: str = HardwareType.STANDARD.value
    screens: bool = False

    @property
    def area_sq_in(self) -> float:
        return self.width * self.height

    @property
    def area_sq_ft(self) -> float:
        return self.area_sq_in / 144

    @property
    def total_panes(self) -> int:
        return self.vertical_panes * self.horizontal_panes
