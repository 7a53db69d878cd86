"""Test configuration."""

import os
from typing import List
from unittest.mock import MagicMock

import pytest
from pytest import Config, Item

from spatial_geocoder.core.geometry import GeometryFactory
from spatial_geocoder.core.http import HttpTransport
from spatial_geocoder.core.logging import configure_logging

fixture = pytest.fixture
mark = pytest.mark


pytest_plugins: List[str] = [
    "tests.fixtures.responses",
]


@fixture
def factory() -> GeometryFactory:
    """WGS84 geometry factory."""
    return GeometryFactory(4326)


@fixture
def web_mercator() -> GeometryFactory:
    """Web Mercator geometry factory."""
    return GeometryFactory(3857)


@fixture
def transport() -> MagicMock:
    """Transport double; set ``get_json.return_value`` per test."""
    return MagicMock(spec=HttpTransport)


def pytest_configure(config: Config) -> None:
    """Configure pytest.

    Args:
        config: Pytest configuration object
    """
    # Configure logging for test environment
    configure_logging(testing=True)
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test against live services"
    )


def pytest_collection_modifyitems(config: Config, items: List[Item]) -> None:
    """Skip live-service tests unless explicitly enabled.

    Args:
        config: Pytest configuration object
        items: List of test items to be executed
    """
    if os.getenv("RUN_INTEGRATION_TESTS", "false").lower() == "true":
        return

    skip_integration = mark.skip(reason="set RUN_INTEGRATION_TESTS=true to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
