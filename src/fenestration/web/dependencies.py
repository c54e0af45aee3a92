"""FastAPI dependency injection for quoting services."""

from typing import Annotated

from fastapi import Depends

from fenestration.application import QuoteWindowCommand
from fenestration.domain import DEFAULT_PRICING, PricingConfig


def get_default_pricing() -> PricingConfig:
    """Dependency for the standard pricing table."""
    return DEFAULT_PRICING


def get_quote_command(
    pricing: Annotated[PricingConfig, Depends(get_default_pricing)],
) -> QuoteWindowCommand:
    """Dependency for a QuoteWindowCommand on the standard rates."""
    return QuoteWindowCommand(pricing)


# Type aliases for cleaner endpoint signatures
DefaultPricingDep = Annotated[PricingConfig, Depends(get_default_pricing)]
QuoteCommandDep = Annotated[QuoteWindowCommand, Depends(get_quote_command)]
