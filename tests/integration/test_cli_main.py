#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests the command group, global options, and utility commands.
"""

import pytest
from click.testing import CliRunner

from expenses import __version__
from expenses.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Expense Tracker" in result.output
        for command in ["add", "list", "update", "delete", "summary", "breakdown", "info", "config", "version"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert f"Expense Tracker v{__version__}" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, store_path):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert f"Expense File: {store_path}" in result.output
        assert "Log Level:" in result.output

    def test_verbose_flag_prints_environment(self, store_path):
        result = self.runner.invoke(main, ["--verbose", "list"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert f"Expense file: {store_path}" in result.output

    def test_config_env_override_changes_environment(self):
        result = self.runner.invoke(main, ["--config-env", "test", "config"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output

    def test_debug_flag(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")

        result = self.runner.invoke(main, ["--debug", "version"])

        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output


@pytest.mark.integration
class TestInfoCommand:
    """Test the info command."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_info_before_first_expense(self, store_path):
        result = self.runner.invoke(main, ["info"])

        assert result.exit_code == 0
        assert f"Expense file: {store_path}" in result.output
        assert "not created yet" in result.output

    def test_info_after_adding(self):
        self.runner.invoke(main, ["add", "--description", "coffee", "--amount", "4.50"])

        result = self.runner.invoke(main, ["info"])

        assert result.exit_code == 0
        assert "Expenses: 1 recorded, $4.50 total" in result.output
        assert "0 days ago" in result.output
