"""Pricing engine for window configurations.

Turns a WindowConfig and a PricingConfig rule table into an itemized
PriceBreakdown:

1. Base price from area (square feet) times the base rate.
2. Applicable multipliers (opening, glass, thermal break, color, grid)
   combined per the stacking mode and capped by max_multiplier.
3. Applicable flat adds (hardware, screens).
4. Total rounded to the configured increment and floored at min_order.

Lookups that miss the rule table contribute nothing; the engine never
raises for an unknown code. All rounding is half-up, matching the
storefront display.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..value_objects import (
    LineItem,
    ModifierType,
    PriceBreakdown,
    PriceModifier,
    PricingConfig,
    StackingMode,
    WindowConfig,
)

logger = logging.getLogger(__name__)

__all__ = [
    "GRID_FALLBACK_CAP",
    "GRID_FALLBACK_PCT_PER_PANE",
    "calculate_price",
    "collect_flats",
    "collect_multipliers",
    "combine_multipliers",
    "fallback_grid_modifier",
    "format_modifier_label",
    "grid_modifier",
    "lookup_grid_modifier",
    "round_half_up",
    "round_to_increment",
]

SQ_IN_PER_SQ_FT = 144

# Surcharge per extra pane when a pane count has no table entry
GRID_FALLBACK_PCT_PER_PANE = 0.05
GRID_FALLBACK_CAP = 0.30


def round_half_up(value: float, places: int = 0) -> float:
    """Round to ``places`` decimals with halves going up.

    Python's round() uses banker's rounding; prices shown to customers
    round 0.5 up. Non-finite values are returned unchanged.
    """
    scale = 10**places
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / scale


def round_to_increment(value: float, increment: float | None) -> float:
    """Round to the nearest multiple of ``increment``.

    No-op if the increment is not positive or the value is not finite.
    """
    if not increment or increment <= 0:
        return value
    steps = value / increment
    if not math.isfinite(steps):
        return value
    return math.floor(steps + 0.5) * increment


def _lookup(
    pricing: PricingConfig, code: str, expected: ModifierType | None = None
) -> PriceModifier | None:
    modifier = pricing.get_modifier(code)
    if modifier is None:
        logger.debug("No pricing rule for %r", code)
        return None
    if expected is not None and modifier.type != expected:
        logger.debug(
            "Pricing rule %r is a %s, expected %s",
            code,
            modifier.type.value,
            expected.value,
        )
        return None
    return modifier


def lookup_grid_modifier(
    total_panes: int, pricing: PricingConfig
) -> PriceModifier | None:
    """Exact table entry for a pane count, keyed ``grid-{N}-panes``."""
    return pricing.get_modifier(f"grid-{total_panes}-panes")


def fallback_grid_modifier(total_panes: int) -> PriceModifier:
    """Synthesized grid surcharge for pane counts missing from the table.

    5% per pane beyond the first, capped at 30%.
    """
    pct = min(GRID_FALLBACK_PCT_PER_PANE * (total_panes - 1), GRID_FALLBACK_CAP)
    return PriceModifier.multiplier(
        code=f"grid-{total_panes}",
        label=f"Grid Pattern ({total_panes} panes)",
        pct=pct,
    )


def grid_modifier(total_panes: int, pricing: PricingConfig) -> PriceModifier | None:
    """Grid surcharge for a pane count, or None for a single pane."""
    if total_panes <= 1:
        return None
    modifier = lookup_grid_modifier(total_panes, pricing)
    if modifier is None:
        modifier = fallback_grid_modifier(total_panes)
        logger.debug(
            "No grid rule for %d panes, using fallback %.2f", total_panes, modifier.pct
        )
    return modifier


def collect_multipliers(
    config: WindowConfig, pricing: PricingConfig
) -> list[PriceModifier]:
    """Multiplier modifiers that apply to a configuration, in display order."""
    applied: list[PriceModifier] = []

    for code in (config.opening_type, config.glass_type):
        modifier = _lookup(pricing, code, ModifierType.MULTIPLIER)
        if modifier is not None:
            applied.append(modifier)

    if config.thermal_break:
        modifier = _lookup(pricing, "thermal-break")
        if modifier is not None:
            applied.append(modifier)

    if config.color.lower() != "white":
        modifier = _lookup(pricing, "color-premium")
        if modifier is not None:
            applied.append(modifier)

    modifier = grid_modifier(config.total_panes, pricing)
    if modifier is not None:
        applied.append(modifier)

    return applied


def collect_flats(config: WindowConfig, pricing: PricingConfig) -> list[PriceModifier]:
    """Flat add-on modifiers that apply to a configuration."""
    applied: list[PriceModifier] = []

    modifier = _lookup(pricing, f"hardware-{config.hardware_type}", ModifierType.FLAT)
    if modifier is not None:
        applied.append(modifier)

    if config.screens:
        modifier = _lookup(pricing, "screens")
        if modifier is not None:
            applied.append(modifier)

    return applied


def combine_multipliers(
    modifiers: Sequence[PriceModifier],
    stacking_mode: StackingMode,
    max_multiplier: float | None = None,
) -> float:
    """Combine multiplier percentages into a single factor.

    Geometric stacking compounds, additive stacking sums. The result is
    capped from above by ``max_multiplier``; there is no lower bound, so
    discounts survive.
    """
    pcts = [m.pct or 0.0 for m in modifiers]
    if stacking_mode == StackingMode.GEOMETRIC:
        factor = 1.0
        for pct in pcts:
            factor *= 1 + pct
    else:
        factor = 1 + sum(pcts)

    if max_multiplier is not None and factor > max_multiplier:
        logger.debug("Multiplier factor %.4f capped at %.4f", factor, max_multiplier)
        factor = max_multiplier
    return factor


def format_modifier_label(modifier: PriceModifier) -> str:
    """Label annotated with the signed percentage, e.g. "Thermal Break (+15.0%)"."""
    pct = modifier.pct or 0.0
    sign = "+" if pct >= 0 else ""
    return f"{modifier.label} ({sign}{pct * 100:.1f}%)"


def calculate_price(config: WindowConfig, pricing: PricingConfig) -> PriceBreakdown:
    """Calculate the itemized price of a window configuration.

    Args:
        config: Window configuration (dimensions in inches).
        pricing: Rule table; pass DEFAULT_PRICING for the standard rates.

    Returns:
        A fresh PriceBreakdown. Display fields are rounded half-up: currency
        to 2 decimals, multiplier_factor to 3.
    """
    area_ft2 = (config.width * config.height) / SQ_IN_PER_SQ_FT
    base = area_ft2 * pricing.base_rate_sq_ft

    multipliers = collect_multipliers(config, pricing)
    flats = collect_flats(config, pricing)

    factor = combine_multipliers(
        multipliers, pricing.stacking_mode, pricing.max_multiplier
    )
    price_after_multipliers = base * factor
    flat_sum = sum(m.amount or 0.0 for m in flats)

    total = round_to_increment(price_after_multipliers + flat_sum, pricing.round_to)
    if pricing.min_order is not None and total < pricing.min_order:
        total = pricing.min_order

    logger.debug(
        "Priced %.2f sq ft: base=%.2f factor=%.4f flats=%.2f total=%.2f",
        area_ft2,
        base,
        factor,
        flat_sum,
        total,
    )

    return PriceBreakdown(
        base=round_half_up(base, 2),
        multipliers=tuple(
            LineItem(
                label=format_modifier_label(m),
                amount=round_half_up(base * (m.pct or 0.0), 2),
            )
            for m in multipliers
            if (m.pct or 0.0) != 0
        ),
        flats=tuple(
            LineItem(label=m.label, amount=m.amount or 0.0)
            for m in flats
            if (m.amount or 0.0) != 0
        ),
        subtotal=round_half_up(price_after_multipliers, 2),
        total=round_half_up(total, 2),
        multiplier_factor=round_half_up(factor, 3),
    )
