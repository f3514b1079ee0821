"""Tests for ``two-sum-mcp tools`` CLI command."""

from __future__ import annotations

from unittest.mock import patch

from click.testing import CliRunner

from twosum_mcp.cli import main
from twosum_mcp.tools.registry import ToolRegistry


class TestToolsList:
    def test_table(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list"])

        assert result.exit_code == 0
        assert "two_sum" in result.output
        assert "Registered Tools" in result.output

    def test_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["tools", "list", "--json"])

        assert result.exit_code == 0
        assert '"two_sum"' in result.output
        assert '"inputSchema"' in result.output
        assert '"outputSchema"' in result.output

    def test_empty_registry(self) -> None:
        with patch("twosum_mcp.tools.registry.default_registry", return_value=ToolRegistry([])):
            runner = CliRunner()
            result = runner.invoke(main, ["tools", "list"])

            assert result.exit_code == 0
            assert "No tools registered" in result.output
