"""Unit tests for configuration schema models.

These tests verify:
- Window option defaults and range limits
- Pricing rule validation (pct for multipliers, amount for flats)
- Modifier keys must match their codes
- Unknown fields are rejected (extra="forbid")
- Schema version pattern and forward-compatible minor versions
"""

from typing import Any

import pytest
from pydantic import ValidationError as PydanticValidationError

from fenestration.application.config import (
    MAX_DIMENSION,
    SUPPORTED_VERSIONS,
    PriceModifierConfig,
    PricingConfigSchema,
    QuoteConfiguration,
    ShapeConfig,
    WindowConfigSchema,
    schema_to_dict,
)
from fenestration.domain.value_objects import ModifierType, ShapeType, StackingMode


class TestWindowConfigSchema:
    """Tests for WindowConfigSchema model."""

    def test_defaults(self) -> None:
        """The default window is a 48x60 in-swing, double-pane, white unit."""
        window = WindowConfigSchema()
        assert window.width == 48.0
        assert window.height == 60.0
        assert window.opening_type == "in-swing"
        assert window.glass_type == "double-pane"
        assert window.color == "white"
        assert window.hardware_type == "standard"
        assert window.vertical_panes == 1
        assert window.horizontal_panes == 1
        assert window.thermal_break is False
        assert window.screens is False

    def test_zero_dimensions_allowed(self) -> None:
        window = WindowConfigSchema(width=0, height=0)
        assert window.width == 0

    def test_negative_width_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            WindowConfigSchema(width=-1)

    @pytest.mark.parametrize("width", [1e200, float("inf"), float("nan")])
    def test_oversized_or_non_finite_width_rejected(self, width: float) -> None:
        with pytest.raises(PydanticValidationError):
            WindowConfigSchema(width=width)

    def test_largest_dimension_allowed(self) -> None:
        assert WindowConfigSchema(height=MAX_DIMENSION).height == MAX_DIMENSION


    @pytest.mark.parametrize("panes", [0, 21])
    def test_pane_count_limits(self, panes: int) -> None:
        with pytest.raises(PydanticValidationError):
            WindowConfigSchema(vertical_panes=panes)

    def test_codes_are_stripped(self) -> None:
        window = WindowConfigSchema(opening_type=" casement ", color=" Bronze")
        assert window.opening_type == "casement"
        assert window.color == "Bronze"

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            WindowConfigSchema(depth=4)  # type: ignore[call-arg]
        assert "extra" in str(exc_info.value).lower()


class TestPriceModifierConfig:
    """Tests for PriceModifierConfig model."""

    def test_multiplier(self) -> None:
        rule = PriceModifierConfig(
            code="thermal-break", label="Thermal Break", type="multiplier", pct=0.15
        )
        assert rule.type == ModifierType.MULTIPLIER
        assert rule.amount is None

    def test_multiplier_requires_pct(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            PriceModifierConfig(code="x", label="X", type="multiplier")
        assert "requires 'pct'" in str(exc_info.value)

    def test_flat_requires_amount(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            PriceModifierConfig(code="screens", label="Screens", type="flat")
        assert "requires 'amount'" in str(exc_info.value)

    def test_discount_allowed(self) -> None:
        rule = PriceModifierConfig(code="promo", label="Promo", type="multiplier", pct=-0.1)
        assert rule.pct == -0.1

    def test_discount_below_minus_one_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PriceModifierConfig(code="promo", label="Promo", type="multiplier", pct=-1.5)

    def test_invalid_type_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            PriceModifierConfig(code="x", label="X", type="percent", pct=0.1)


class TestPricingConfigSchema:
    """Tests for PricingConfigSchema model."""

    def test_minimal(self) -> None:
        pricing = PricingConfigSchema(base_rate_sq_ft=45)
        assert pricing.stacking_mode == StackingMode.GEOMETRIC
        assert pricing.round_to == 1.0
        assert pricing.min_order is None
        assert pricing.max_multiplier is None
        assert pricing.modifiers == {}

    @pytest.mark.parametrize("rate", [0, -10])
    def test_base_rate_must_be_positive(self, rate: float) -> None:
        with pytest.raises(PydanticValidationError):
            PricingConfigSchema(base_rate_sq_ft=rate)

    def test_zero_round_to_allowed(self) -> None:
        assert PricingConfigSchema(base_rate_sq_ft=45, round_to=0).round_to == 0

    def test_modifier_key_must_match_code(self) -> None:
        data: dict[str, Any] = {
            "base_rate_sq_ft": 45,
            "modifiers": {
                "screens": {
                    "code": "screen",
                    "label": "Screens",
                    "type": "flat",
                    "amount": 125,
                }
            },
        }
        with pytest.raises(PydanticValidationError) as exc_info:
            PricingConfigSchema.model_validate(data)
        assert "does not match" in str(exc_info.value)

    def test_additive_mode(self) -> None:
        pricing = PricingConfigSchema(base_rate_sq_ft=45, stacking_mode="additive")
        assert pricing.stacking_mode == StackingMode.ADDITIVE


class TestShapeConfig:
    def test_defaults_to_rectangle(self) -> None:
        shape = ShapeConfig()
        assert shape.type == ShapeType.RECTANGLE
        assert shape.dimensions == {}

    def test_unknown_shape_rejected(self) -> None:
        with pytest.raises(PydanticValidationError):
            ShapeConfig(type="circle")

    def test_camel_case_keys_kept(self) -> None:
        shape = ShapeConfig(type="hexagon", dimensions={"flatToFlatHeight": 24})
        assert shape.dimensions == {"flatToFlatHeight": 24.0}

    def test_negative_skew_allowed(self) -> None:
        shape = ShapeConfig(type="parallelogram", dimensions={"skewOffset": -12})
        assert shape.dimensions == {"skewOffset": -12.0}

    @pytest.mark.parametrize("value", [1e200, -1e200, float("inf"), float("nan")])
    def test_oversized_or_non_finite_dimension_rejected(self, value: float) -> None:
        with pytest.raises(PydanticValidationError):
            ShapeConfig(type="rectangle", dimensions={"width": value})



class TestQuoteConfiguration:
    """Tests for the root QuoteConfiguration model."""

    def test_minimal(self) -> None:
        config = QuoteConfiguration(schema_version="1.0")
        assert config.window == WindowConfigSchema()
        assert config.shape is None
        assert config.pricing is None

    def test_supported_versions(self) -> None:
        assert "1.0" in SUPPORTED_VERSIONS

    def test_newer_minor_version_accepted(self) -> None:
        assert QuoteConfiguration(schema_version="1.3").schema_version == "1.3"

    def test_unsupported_major_version_rejected(self) -> None:
        with pytest.raises(PydanticValidationError) as exc_info:
            QuoteConfiguration(schema_version="2.0")
        assert "Unsupported schema version" in str(exc_info.value)

    @pytest.mark.parametrize("version", ["1", "v1.0", "1.0.0", ""])
    def test_version_pattern(self, version: str) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration(schema_version=version)

    def test_schema_version_required(self) -> None:
        with pytest.raises(PydanticValidationError):
            QuoteConfiguration.model_validate({"window": {}})

    def test_schema_to_dict_drops_unset_optionals(self) -> None:
        data = schema_to_dict(QuoteConfiguration(schema_version="1.0"))
        assert "shape" not in data
        assert "pricing" not in data
        assert data["window"]["width"] == 48.0
