"""Pydantic configuration schema models for window quotes.

This module defines the configuration schema for JSON-based quote files and
pricing rule tables. It uses Pydantic v2 for validation and serialization.

Enums are reused from the domain layer to ensure consistency and avoid
duplication.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from fenestration.domain.value_objects import (
    GlassType,
    HardwareType,
    ModifierType,
    OpeningType,
    ShapeType,
    StackingMode,
)

# Supported schema versions for configuration files
# Version 1.0: Window options, optional shape and pricing table
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Upper bound on any length in inches (about 830 ft) and on currency amounts.
# Keeps every computed area and price finite.
MAX_DIMENSION: float = 10_000.0
MAX_AMOUNT: float = 1_000_000_000.0

DimensionValue = Annotated[
    float, Field(ge=-MAX_DIMENSION, le=MAX_DIMENSION, allow_inf_nan=False)
]


class PriceModifierConfig(BaseModel):
    """A single rule in a pricing table.

    Attributes:
        code: Lookup key; must match the key the rule is stored under
        label: Display text for the price breakdown
        type: "multiplier" (percentage of base) or "flat" (currency amount)
        pct: Fractional adjustment for multipliers, may be negative
        amount: Currency amount for flat adds
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    code: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    type: ModifierType
    pct: float | None = Field(default=None, ge=-1.0, le=100.0)
    amount: float | None = Field(default=None, ge=-MAX_AMOUNT, le=MAX_AMOUNT)

    @model_validator(mode="after")
    def validate_value_for_type(self) -> "PriceModifierConfig":
        """Multipliers need a pct and flats need an amount."""
        if self.type == ModifierType.MULTIPLIER and self.pct is None:
            raise ValueError(f"Multiplier '{self.code}' requires 'pct'")
        if self.type == ModifierType.FLAT and self.amount is None:
            raise ValueError(f"Flat modifier '{self.code}' requires 'amount'")
        return self


class PricingConfigSchema(BaseModel):
    """Pricing rule table.

    Attributes:
        base_rate_sq_ft: Price per square foot (must be positive)
        stacking_mode: "geometric" (compounding) or "additive"
        round_to: Rounding increment for the total, 0 disables rounding
        min_order: Minimum order total (optional)
        max_multiplier: Cap on the combined multiplier factor (optional)
        modifiers: Rules keyed by their code
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    base_rate_sq_ft: float = Field(..., gt=0, le=MAX_AMOUNT)
    stacking_mode: StackingMode = StackingMode.GEOMETRIC
    round_to: float = Field(default=1.0, ge=0, le=MAX_AMOUNT)
    min_order: float | None = Field(default=None, ge=0, le=MAX_AMOUNT)
    max_multiplier: float | None = Field(default=None, gt=0)
    modifiers: dict[str, PriceModifierConfig] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_modifier_keys(self) -> "PricingConfigSchema":
        """Each modifier must be stored under its own code."""
        for key, modifier in self.modifiers.items():
            if key != modifier.code:
                raise ValueError(
                    f"Modifier key '{key}' does not match its code '{modifier.code}'"
                )
        return self


class ShapeConfig(BaseModel):
    """Window outline shape and its dimensions.

    Dimension keys may be snake_case (``flat_to_flat_height``) or camelCase
    (``flatToFlatHeight``). Keys the shape does not use are ignored.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    type: ShapeType = ShapeType.RECTANGLE
    dimensions: dict[str, DimensionValue] = Field(default_factory=dict)


class WindowConfigSchema(BaseModel):
    """Window options that drive the price.

    Opening, glass and hardware codes are free-form strings so that new
    catalog entries can be priced by adding a rule to the table.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    width: float = Field(
        default=48.0, ge=0, le=MAX_DIMENSION, description="Width in inches"
    )
    height: float = Field(
        default=60.0, ge=0, le=MAX_DIMENSION, description="Height in inches"
    )
    opening_type: str = OpeningType.IN_SWING.value
    glass_type: str = GlassType.DOUBLE_PANE.value
    thermal_break: bool = False
    color: str = "white"
    vertical_panes: int = Field(default=1, ge=1, le=20)
    horizontal_panes: int = Field(default=1, ge=1, le=20)
    hardware_type: str = HardwareType.STANDARD.value
    screens: bool = False

    @field_validator("opening_type", "glass_type", "hardware_type", "color")
    @classmethod
    def strip_codes(cls, v: str) -> str:
        return v.strip()


class QuoteConfiguration(BaseModel):
    """Root configuration model for a window quote.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        window: Window options
        shape: Optional non-rectangular outline; when present the window is
            priced by the shape's area
        pricing: Optional custom pricing table; defaults to the standard rates

    Example:
        >>> config = QuoteConfiguration(
        ...     schema_version="1.0",
        ...     window=WindowConfigSchema(width=36, height=48),
        ... )
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    window: WindowConfigSchema = Field(default_factory=WindowConfigSchema)
    shape: ShapeConfig | None = Field(
        default=None, description="Window outline (optional)"
    )
    pricing: PricingConfigSchema | None = Field(
        default=None, description="Custom pricing table (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


def schema_to_dict(model: BaseModel) -> dict[str, Any]:
    """Dump a schema model to JSON-compatible data, dropping unset optionals."""
    return model.model_dump(mode="json", exclude_none=True)
