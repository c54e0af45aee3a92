"""Adapter to convert QuoteConfiguration into domain objects.

This module provides conversion functions between the Pydantic schema
models used for JSON files and API payloads and the frozen domain values
consumed by the geometry and pricing engines.
"""

from fenestration.application.config.schema import (
    PriceModifierConfig,
    PricingConfigSchema,
    QuoteConfiguration,
    ShapeConfig,
    WindowConfigSchema,
)
from fenestration.domain.pricing_rules import DEFAULT_PRICING
from fenestration.domain.services import shape_from_dimensions
from fenestration.domain.value_objects import (
    PriceModifier,
    PricingConfig,
    Shape,
    WindowConfig,
)


def window_schema_to_domain(window: WindowConfigSchema) -> WindowConfig:
    """Convert a window schema to the domain WindowConfig."""
    return WindowConfig(**window.model_dump())


def config_to_window(config: QuoteConfiguration) -> WindowConfig:
    """Extract the window options of a quote configuration."""
    return window_schema_to_domain(config.window)


def shape_schema_to_domain(shape: ShapeConfig) -> Shape:
    """Convert a shape schema to a typed shape value.

    The schema has already restricted ``type`` to a known ShapeType, so the
    parse cannot come back empty.
    """
    parsed = shape_from_dimensions(shape.type, shape.dimensions)
    if parsed is None:
        raise ValueError(f"Unknown shape type: {shape.type}")
    return parsed


def config_to_shape(config: QuoteConfiguration) -> Shape | None:
    """Extract the optional shape of a quote configuration."""
    if config.shape is None:
        return None
    return shape_schema_to_domain(config.shape)


def pricing_schema_to_domain(pricing: PricingConfigSchema) -> PricingConfig:
    """Convert a pricing table schema to the domain PricingConfig."""
    return PricingConfig(
        base_rate_sq_ft=pricing.base_rate_sq_ft,
        stacking_mode=pricing.stacking_mode,
        round_to=pricing.round_to,
        min_order=pricing.min_order,
        max_multiplier=pricing.max_multiplier,
        modifiers={
            code: PriceModifier(
                code=modifier.code,
                label=modifier.label,
                type=modifier.type,
                pct=modifier.pct,
                amount=modifier.amount,
            )
            for code, modifier in pricing.modifiers.items()
        },
    )


def config_to_pricing(config: QuoteConfiguration) -> PricingConfig:
    """Pricing table of a quote configuration, or the default table."""
    if config.pricing is None:
        return DEFAULT_PRICING
    return pricing_schema_to_domain(config.pricing)


def pricing_to_config(pricing: PricingConfig) -> PricingConfigSchema:
    """Convert a domain PricingConfig back to its schema form.

    Used to dump the default rate table as an editable JSON file.
    """
    return PricingConfigSchema(
        base_rate_sq_ft=pricing.base_rate_sq_ft,
        stacking_mode=pricing.stacking_mode,
        round_to=pricing.round_to,
        min_order=pricing.min_order,
        max_multiplier=pricing.max_multiplier,
        modifiers={
            code: PriceModifierConfig(
                code=modifier.code,
                label=modifier.label,
                type=modifier.type,
                pct=modifier.pct,
                amount=modifier.amount,
            )
            for code, modifier in pricing.modifiers.items()
        },
    )
