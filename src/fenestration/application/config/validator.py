"""Validation structures and dimension advisory checks.

Structural validation is handled by the Pydantic schema. This module adds
the advisory checks a configurator shows next to its inputs: recommended
size ranges, shape proportions that look wrong, and option codes that the
pricing table does not know about. None of these stop a quote from being
computed; they are reported so the user can fix them.
"""

from dataclasses import dataclass, field
from typing import Any

from fenestration.application.config.adapter import (
    config_to_pricing,
    config_to_shape,
)
from fenestration.application.config.schema import QuoteConfiguration
from fenestration.domain.services import (
    calculate_shape_area,
    get_shape_bounding_box,
    get_shape_vertices,
)
from fenestration.domain.value_objects import (
    ChamferedRectangle,
    ModifierType,
    Rectangle,
    Trapezoid,
)

# Recommended window size range in inches
MIN_RECOMMENDED_SIZE: float = 12.0
MAX_RECOMMENDED_SIZE: float = 120.0


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "window.width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def _check_range(result: ValidationResult, path: str, value: float) -> None:
    if value < MIN_RECOMMENDED_SIZE or value > MAX_RECOMMENDED_SIZE:
        result.add_warning(
            path=path,
            message=(
                f"{value:g}\" is outside the recommended range of "
                f"{MIN_RECOMMENDED_SIZE:g}\" - {MAX_RECOMMENDED_SIZE:g}\""
            ),
        )


def check_dimension_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check window dimensions against the recommended size range.

    When a shape is configured its dimensions drive the price, so the
    window width and height are only checked for plain rectangular quotes.
    """
    result = ValidationResult()
    shape = config_to_shape(config)

    if shape is None:
        _check_range(result, "window.width", config.window.width)
        _check_range(result, "window.height", config.window.height)
        if config.window.width * config.window.height == 0:
            result.add_error(
                path="window",
                message="Window area is zero; nothing can be quoted",
                value={"width": config.window.width, "height": config.window.height},
            )
    elif isinstance(shape, Rectangle):
        _check_range(result, "shape.dimensions.width", shape.width)
        _check_range(result, "shape.dimensions.height", shape.height)

    return result


def check_shape_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check shape proportions.

    Advisories checked:
    - Trapezoid bottom width smaller than its top width
    - Chamfer larger than half the shorter side
    - Degenerate outline (zero-size bounding box)
    """
    result = ValidationResult()
    shape = config_to_shape(config)
    if shape is None:
        return result

    if isinstance(shape, Trapezoid) and shape.bottom_width < shape.top_width:
        result.add_warning(
            path="shape.dimensions",
            message=(
                f"Bottom width {shape.bottom_width:g}\" is less than top width "
                f"{shape.top_width:g}\""
            ),
            suggestion="Bottom width should be greater than or equal to top width",
        )

    if isinstance(shape, ChamferedRectangle):
        limit = min(shape.chamfer_width / 2, shape.chamfer_height / 2)
        if shape.chamfer > limit:
            result.add_warning(
                path="shape.dimensions.chamfer",
                message=f"Chamfer of {shape.chamfer:g}\" is too large for the dimensions",
                suggestion=f"Use a chamfer of at most {limit:g}\"",
            )

    bbox = get_shape_bounding_box(get_shape_vertices(shape))
    if bbox.is_empty:
        result.add_warning(
            path="shape.dimensions",
            message=f"{shape.shape_type.value} has zero size; nothing to preview",
            suggestion="Enter the dimensions this shape uses",
        )
    elif calculate_shape_area(shape) == 0:
        result.add_error(
            path="shape.dimensions",
            message="Shape area is zero; nothing can be quoted",
        )

    return result


def check_pricing_advisories(config: QuoteConfiguration) -> ValidationResult:
    """Check that the selected options are present in the pricing table.

    Unknown codes are priced as "no adjustment", which is usually not what
    the user intended.
    """
    result = ValidationResult()
    pricing = config_to_pricing(config)
    window = config.window

    lookups = (
        ("window.opening_type", window.opening_type, ModifierType.MULTIPLIER),
        ("window.glass_type", window.glass_type, ModifierType.MULTIPLIER),
        (
            "window.hardware_type",
            f"hardware-{window.hardware_type}",
            ModifierType.FLAT,
        ),
    )
    for path, code, expected in lookups:
        modifier = pricing.get_modifier(code)
        if modifier is None:
            result.add_warning(
                path=path,
                message=f"No pricing rule for '{code}'; it adds nothing to the price",
            )
        elif modifier.type != expected:
            result.add_warning(
                path=path,
                message=(
                    f"Pricing rule '{code}' is a {modifier.type.value} modifier, "
                    f"expected {expected.value}; it is ignored"
                ),
            )

    return result


def validate_config(config: QuoteConfiguration) -> ValidationResult:
    """Perform full advisory validation of a quote configuration.

    Args:
        config: A QuoteConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()
    result.merge(check_dimension_advisories(config))
    result.merge(check_shape_advisories(config))
    result.merge(check_pricing_advisories(config))
    return result
