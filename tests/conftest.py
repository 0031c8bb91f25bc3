"""Pytest configuration.

Run pytest from this project's root. pythonpath in pyproject.toml puts src/,
tests/ and the project root on sys.path so helpers import as
``tests.unit.value_class_fixtures`` and ``linter_test_utils``.
"""

import pytest

from typed_values_linter.infrastructure.di.container import TypedValuesContainer
from typed_values_linter.infrastructure.services.guidance_service import GuidanceService


@pytest.fixture(autouse=True)
def _reset_container():
    """Each test builds its own container."""
    TypedValuesContainer.reset()
    yield
    TypedValuesContainer.reset()


@pytest.fixture(scope="session")
def registry():
    return GuidanceService().get_registry()
