"""Test configuration and fixtures."""

import os

import pytest

from registry_v2_client import RegistryClient
from tests.helpers import REGISTRY_HOST, FakeTransport, load_cassette


@pytest.fixture
def transport():
    """Empty transport double; tests register the responses they need."""
    return FakeTransport()


@pytest.fixture
def cassette():
    """Load a recorded scenario by name."""
    return load_cassette


@pytest.fixture
def make_client():
    """Build a client for registry.test.lan bound to a transport double."""

    def _make(transport, username=None, password=None, use_tls=False):
        return RegistryClient(
            REGISTRY_HOST,
            use_tls=use_tls,
            username=username,
            password=password,
            transport=transport,
        )

    return _make


@pytest.fixture(scope="session")
def registry_host():
    """Live registry host for integration tests."""
    return os.getenv("REGISTRY_HOST", "localhost:15000")


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring registry"
    )
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    # Skip integration tests if no registry
    skip_integration = pytest.mark.skip(reason="Registry not available")

    for item in items:
        if (
            "integration" in item.keywords
            and os.getenv("REGISTRY_AVAILABLE", "false").lower() != "true"
        ):
            item.add_marker(skip_integration)
