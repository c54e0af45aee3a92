"""Pytest configuration and shared fixtures for configurator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from fenestration.domain import DEFAULT_PRICING, PricingConfig, WindowConfig

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON configuration fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def default_pricing() -> PricingConfig:
    """The standard pricing table."""
    return DEFAULT_PRICING


@pytest.fixture
def plain_window() -> WindowConfig:
    """36" x 48" double-hung window with no paid options."""
    return WindowConfig(
        width=36,
        height=48,
        opening_type="double-hung",
        glass_type="double-pane",
        thermal_break=False,
        color="white",
        vertical_panes=1,
        horizontal_panes=1,
        hardware_type="standard",
        screens=False,
    )


@pytest.fixture
def loaded_window() -> WindowConfig:
    """60" x 80" window with every premium option selected."""
    return WindowConfig(
        width=60,
        height=80,
        opening_type="out-swing",
        glass_type="triple-pane",
        thermal_break=True,
        color="black",
        vertical_panes=2,
        horizontal_panes=2,
        hardware_type="premium",
        screens=True,
    )
