"""Unit tests for Typer-based CLI interface."""

import os
from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from typed_values_linter.domain.entities import LinterResult
from typed_values_linter.infrastructure.services.guidance_service import GuidanceService
from typed_values_linter.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _make_mock_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies with a mock adapter and the packaged registry."""
    defaults: dict = {
        "pylint_adapter": Mock(),
        "guidance_service": GuidanceService(),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


class TestResolveTargetPath:
    """Test path resolution logic."""

    def test_resolve_with_explicit_path(self) -> None:
        assert CLIAppFactory.resolve_target_path(Path("custom/path")) == "custom/path"

    def test_resolve_defaults_to_src_when_exists(self, tmp_path: Path) -> None:
        (tmp_path / "src").mkdir()
        original_cwd = Path.cwd()
        try:
            os.chdir(tmp_path)
            assert CLIAppFactory.resolve_target_path(None) == "src"
        finally:
            os.chdir(original_cwd)

    def test_resolve_defaults_to_current_dir(self, tmp_path: Path) -> None:
        with patch("typed_values_linter.interface.cli.Path.cwd", return_value=tmp_path):
            assert CLIAppFactory.resolve_target_path(Path(".")) == "."


class TestCheckCommand:
    """Test the check command."""

    def test_check_reports_violations_and_fails(self) -> None:
        adapter = Mock()
        adapter.gather_results.return_value = [
            LinterResult(
                code="E9704",
                symbol="value-class-direct-construction",
                message="Instantiation of class shop.values.Money is forbidden",
                location="src/shop/orders.py:40",
            )
        ]
        app = CLIAppFactory.create_app(_make_mock_deps(pylint_adapter=adapter))

        result = runner.invoke(app, ["check", "src/shop"])

        assert result.exit_code == 1
        adapter.gather_results.assert_called_once_with("src/shop")
        assert (
            "src/shop/orders.py:40: E9704: Instantiation of class shop.values.Money is "
            "forbidden (value-class-direct-construction)"
        ) in result.output
        assert "1 value class violation(s) found." in result.output

    def test_check_clean_run_succeeds(self) -> None:
        adapter = Mock()
        adapter.gather_results.return_value = []
        app = CLIAppFactory.create_app(_make_mock_deps(pylint_adapter=adapter))

        result = runner.invoke(app, ["check", "src/shop"])

        assert result.exit_code == 0
        assert "No value class violations found." in result.output


class TestRulesCommand:
    def test_rules_lists_every_rule(self) -> None:
        app = CLIAppFactory.create_app(_make_mock_deps())

        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0
        headers = [line for line in result.output.splitlines() if not line.startswith(" ")]
        assert len(headers) == 5
        assert headers[0].startswith("typed-values.E9701  value-class-not-final")
        assert "value-class-direct-construction" in headers[3]

    def test_rules_show_manual_instructions_and_references(self) -> None:
        app = CLIAppFactory.create_app(_make_mock_deps())

        result = runner.invoke(app, ["rules"])

        lines = result.output.splitlines()
        final_at = next(i for i, line in enumerate(lines) if "value-class-not-final" in line)
        assert "@final" in lines[final_at + 1]
        assert lines[final_at + 1].startswith("    ")
        assert lines[final_at + 2] == (
            "    see https://docs.python.org/3/library/typing.html#typing.final"
        )
