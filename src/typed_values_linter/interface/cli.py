"""CLI entry points for typed-values - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from pathlib import Path

import typer

from typed_values_linter.domain.protocols import GuidanceServiceProtocol, LinterAdapterProtocol


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    pylint_adapter: LinterAdapterProtocol
    guidance_service: GuidanceServiceProtocol


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_path(path: Path | None) -> str:
        """Resolve target path: explicit path, else src/ if exists, else '.'."""
        if path and str(path) != ".":
            return str(path)
        src_dir = Path.cwd() / "src"
        if src_dir.exists() and src_dir.is_dir():
            return "src"
        return "."

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="typed-values",
            help="Check value classes: final, readonly, private constructor, factory-only construction.",
            add_completion=False,
        )

        @app.command()
        def check(
            path: Path | None = typer.Argument(None, help="Path to check (default: src/ or .)"),  # noqa: B008
        ) -> None:
            """Run pylint with the typed-values plugin and list every violation."""
            target_path = CLIAppFactory.resolve_target_path(path)
            results = deps.pylint_adapter.gather_results(target_path)
            for result in results:
                typer.echo(result.to_line())
            if results:
                typer.echo(f"\n{len(results)} value class violation(s) found.")
                sys.exit(1)
            typer.echo("No value class violations found.")
            sys.exit(0)

        @app.command()
        def rules() -> None:
            """List the rules with their code, symbol and name, then how to fix each one."""
            for rule in deps.guidance_service.get_catalog():
                typer.echo(f"{rule.rule_id}  {rule.symbol}  {rule.display_name}")
                if rule.manual_instructions:
                    typer.echo(f"    {rule.manual_instructions}")
                for reference in rule.references:
                    typer.echo(f"    see {reference}")

        return app
