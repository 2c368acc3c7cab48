"""Real integration tests with an actual registry:2 container."""

import os

import pytest

from registry_v2_client import (
    NotFoundError,
    RegistryClient,
    check_registry_connectivity,
    get_catalog,
)

pytestmark = pytest.mark.integration  # Mark all tests in this file as integration

USERNAME = os.getenv("REGISTRY_USERNAME")
PASSWORD = os.getenv("REGISTRY_PASSWORD")


@pytest.mark.asyncio
async def test_registry_connectivity(registry_host):
    """Test the /v2/ check against the live registry."""
    assert await check_registry_connectivity(
        registry_host, username=USERNAME, password=PASSWORD
    )


@pytest.mark.asyncio
async def test_catalog_entries_have_tags(registry_host):
    catalog = await get_catalog(registry_host, username=USERNAME, password=PASSWORD)

    for entry in catalog:
        assert set(entry) == {"name", "tags"}
        assert isinstance(entry["tags"], list)


@pytest.mark.asyncio
async def test_missing_manifest(registry_host):
    async with RegistryClient(
        registry_host, username=USERNAME, password=PASSWORD
    ) as client:
        with pytest.raises(NotFoundError):
            await client.manifest("does-not-exist/at-all", "missing")
