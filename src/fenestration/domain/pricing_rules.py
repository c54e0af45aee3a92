"""Default pricing rule table.

Process-wide, read-only configuration. Callers pass it explicitly to the
pricing engine; nothing in the domain reaches for it implicitly.
"""

from __future__ import annotations

from .value_objects import PriceModifier, PricingConfig, StackingMode

_DEFAULT_MODIFIERS = (
    # Opening type
    PriceModifier.multiplier("double-hung", "Double Hung", 0),
    PriceModifier.multiplier("single-hung", "Single Hung", -0.05),
    PriceModifier.multiplier("in-swing", "In-Swing", 0.10),
    PriceModifier.multiplier("out-swing", "Out-Swing", 0.12),
    # Glass type
    PriceModifier.multiplier("triple-pane", "Triple Pane Glass", 0.25),
    PriceModifier.multiplier("double-pane", "Double Pane Glass", 0),
    # Frame options
    PriceModifier.multiplier("thermal-break", "Thermal Break", 0.15),
    PriceModifier.multiplier("color-premium", "Premium Color", 0.08),
    # Grid patterns
    PriceModifier.multiplier("grid-2-panes", "Grid Pattern (2 panes)", 0.05),
    PriceModifier.multiplier("grid-3-panes", "Grid Pattern (3 panes)", 0.10),
    PriceModifier.multiplier("grid-4-panes", "Grid Pattern (4 panes)", 0.15),
    PriceModifier.multiplier("grid-6-panes", "Grid Pattern (6 panes)", 0.20),
    PriceModifier.multiplier("grid-9-panes", "Grid Pattern (9 panes)", 0.25),
    # Hardware
    PriceModifier.flat("hardware-standard", "Standard Hardware", 0),
    PriceModifier.flat("hardware-premium", "Premium Hardware", 150),
    PriceModifier.flat("hardware-luxury", "Luxury Hardware", 350),
    # Accessories
    PriceModifier.flat("screens", "Window Screens", 125),
)

DEFAULT_PRICING = PricingConfig(
    base_rate_sq_ft=45.00,
    stacking_mode=StackingMode.GEOMETRIC,
    round_to=1.00,
    min_order=500,
    max_multiplier=2.0,
    modifiers={modifier.code: modifier for modifier in _DEFAULT_MODIFIERS},
)
