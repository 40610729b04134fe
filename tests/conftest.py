"""Root conftest — shared test configuration and fixtures."""

import os

import pytest

# Pin the library version before settings are first loaded
os.environ.setdefault("TEST_RESOURCES_VERSION", "1.0.0-test")

from testresources.config import get_settings  # noqa: E402
from testresources.core.dependency_coordinate import DependencyCoordinate  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings rebuilt from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dep():
    """Factory: dep("group:artifact[:version]") -> DependencyCoordinate."""
    return DependencyCoordinate.parse
