"""
Pylint plugin entry point - composition root for the checker plugin.

Load with ``pylint --load-plugins=typed_values_linter.checker``.
"""

from pylint.lint import PyLinter

from typed_values_linter.infrastructure.di.container import TypedValuesContainer
from typed_values_linter.use_cases.checks.value_classes import (
    ConstructionGuardChecker,
    ValueClassChecker,
)


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = TypedValuesContainer.get_instance()
    config_loader = container.get_config_loader()
    ast_gateway = container.get_astroid_gateway()
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(ValueClassChecker(
        linter, ast_gateway=ast_gateway, config_loader=config_loader, registry=registry))
    linter.register_checker(ConstructionGuardChecker(
        linter, ast_gateway=ast_gateway, config_loader=config_loader, registry=registry))
