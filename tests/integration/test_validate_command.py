"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Dimension and pricing advisories are displayed as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fenestration.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_rectangle(self, runner: CliRunner) -> None:
        """A plain in-range rectangle passes with exit code 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_rectangle.json")])

        assert result.exit_code == 0
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_full_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_full.json")])

        assert result.exit_code == 0

    def test_valid_hexagon(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "valid_hexagon.json")])

        assert result.exit_code == 0

    def test_inverted_trapezoid_warns(self, runner: CliRunner) -> None:
        """An inverted trapezoid is valid but reported."""
        result = runner.invoke(
            app, ["validate", str(FIXTURES_PATH / "inverted_trapezoid.json")]
        )

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "less than top width" in result.output
        assert "Suggestion:" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_unknown_options_warn(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "custom_pricing.json")])

        assert result.exit_code == 2
        assert "No pricing rule for 'casement'" in result.output
        assert "Validation passed with 2 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1 and show the position."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "malformed.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line" in result.output

    def test_invalid_pricing_rule(self, runner: CliRunner) -> None:
        """A flat rule without an amount is a schema error."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_pricing.json")])

        assert result.exit_code == 1
        assert "pricing.modifiers.screens" in result.output
        assert "Validation failed." in result.output

    def test_unsupported_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_version.json")])

        assert result.exit_code == 1
        assert "schema_version" in result.output

    def test_zero_area_window(self, runner: CliRunner, tmp_path: Path) -> None:
        """A window with no area validates but cannot be quoted."""
        config_path = tmp_path / "empty.json"
        config_path.write_text(
            '{"schema_version": "1.0", "window": {"width": 0, "height": 0}}'
        )
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Window area is zero" in result.output
        assert "Validation failed: 1 error(s)" in result.output
