"""Configuration schema and loading system for window quotes.

This package provides JSON-based configuration loading and validation for
quote files and pricing rule tables. It includes Pydantic models for schema
validation, a configuration loader with comprehensive error handling,
adapters to domain values, and dimension advisory checks.

Example:
    >>> from pathlib import Path
    >>> from fenestration.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bay-window.json"))
    ...     print(f"Window: {config.window.width}x{config.window.height}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from fenestration.application.config.adapter import (
    config_to_pricing,
    config_to_shape,
    config_to_window,
    pricing_schema_to_domain,
    pricing_to_config,
    shape_schema_to_domain,
    window_schema_to_domain,
)
from fenestration.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_pricing_config,
    load_pricing_config_from_dict,
)
from fenestration.application.config.schema import (
    MAX_AMOUNT,
    MAX_DIMENSION,
    SUPPORTED_VERSIONS,
    PriceModifierConfig,
    PricingConfigSchema,
    QuoteConfiguration,
    ShapeConfig,
    WindowConfigSchema,
    schema_to_dict,
)
from fenestration.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "MAX_AMOUNT",
    "MAX_DIMENSION",
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "PriceModifierConfig",
    "PricingConfigSchema",
    "QuoteConfiguration",
    "ShapeConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "WindowConfigSchema",
    "config_to_pricing",
    "config_to_shape",
    "config_to_window",
    "load_config",
    "load_config_from_dict",
    "load_pricing_config",
    "load_pricing_config_from_dict",
    "pricing_schema_to_domain",
    "pricing_to_config",
    "schema_to_dict",
    "shape_schema_to_domain",
    "validate_config",
    "window_schema_to_domain",
]
