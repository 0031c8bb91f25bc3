"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from typed_values_linter.infrastructure.di.container import TypedValuesContainer
from typed_values_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = TypedValuesContainer.get_instance()
    deps = CLIDependencies(
        pylint_adapter=container.get_pylint_adapter(),
        guidance_service=container.get_guidance_service(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
