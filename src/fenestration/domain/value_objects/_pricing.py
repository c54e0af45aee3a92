"""Pricing rule and price breakdown value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class ModifierType(str, Enum):
    """How a price modifier is applied."""

    MULTIPLIER = "multiplier"
    FLAT = "flat"


class StackingMode(str, Enum):
    """Policy for combining several proportional adjustments.

    - GEOMETRIC: factor = product of (1 + pct), adjustments compound
    - ADDITIVE: factor = 1 + sum of pct, adjustments add linearly
    """

    GEOMETRIC = "geometric"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class PriceModifier:
    """A named price adjustment from the rule table.

    Attributes:
        code: Unique lookup key (e.g. "thermal-break", "hardware-premium").
        label: Display text.
        type: Whether the modifier scales the base price or adds to it.
        pct: Fractional adjustment for multipliers (0.15 = +15%, may be
            negative for discounts).
        amount: Currency amount for flat adds.
    """

    code: str
    label: str
    type: ModifierType
    pct: float | None = None
    amount: float | None = None

    @property
    def is_multiplier(self) -> bool:
        return self.type == ModifierType.MULTIPLIER

    @property
    def is_flat(self) -> bool:
        return self.type == ModifierType.FLAT

    @classmethod
    def multiplier(cls, code: str, label: str, pct: float) -> "PriceModifier":
        return cls(code=code, label=label, type=ModifierType.MULTIPLIER, pct=pct)

    @classmethod
    def flat(cls, code: str, label: str, amount: float) -> "PriceModifier":
        return cls(code=code, label=label, type=ModifierType.FLAT, amount=amount)


@dataclass(frozen=True)
class PricingConfig:
    """Complete pricing rule table.

    Swapping this value changes every computed price without touching the
    engine. The modifiers mapping is wrapped read-only so a shared instance
    can be used from any thread.

    Attributes:
        base_rate_sq_ft: Price per square foot before adjustments.
        stacking_mode: How multipliers combine.
        round_to: Rounding increment for the total (0 disables rounding).
        min_order: Minimum total, applied after rounding.
        max_multiplier: Upper bound on the combined multiplier factor.
        modifiers: Modifier code to PriceModifier.
    """

    base_rate_sq_ft: float
    stacking_mode: StackingMode = StackingMode.GEOMETRIC
    round_to: float = 1.0
    min_order: float | None = None
    max_multiplier: float | None = None
    modifiers: Mapping[str, PriceModifier] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "modifiers", MappingProxyType(dict(self.modifiers))
        )

    def get_modifier(self, code: str) -> PriceModifier | None:
        return self.modifiers.get(code)


@dataclass(frozen=True)
class LineItem:
    """One displayed line of a price breakdown."""

    label: str
    amount: float


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized result of a price calculation.

    Multiplier line amounts are each computed against the un-multiplied
    base, so under geometric stacking they do not sum to subtotal - base.
    """

    base: float
    multipliers: tuple[LineItem, ...]
    flats: tuple[LineItem, ...]
    subtotal: float
    total: float
    multiplier_factor: float

    def to_dict(self) -> dict:
        return {
            "base": self.base,
            "multipliers": [
                {"label": m.label, "amount": m.amount} for m in self.multipliers
            ],
            "flats": [{"label": f.label, "amount": f.amount} for f in self.flats],
            "subtotal": self.subtotal,
            "total": self.total,
            "multiplier_factor": self.multiplier_factor,
        }
