"""Tests for manifest, catalog and delete operations against recorded scenarios."""

import pytest

from registry_v2_client.exceptions import (
    AuthorizationError,
    CredentialsMissingError,
    NotFoundError,
    RegistryError,
    RegistryProtocolError,
    ValidationError,
)
from tests.helpers import DIGEST, REGISTRY_HOST

pytestmark = pytest.mark.asyncio

USERNAME = "flavio"
PASSWORD = "this is a test"


class TestAuthentication:
    """Authentication handshake through the client."""

    async def test_obtains_token(self, cassette, make_client):
        transport = cassette("successful_authentication")
        async with make_client(transport, USERNAME, PASSWORD) as client:
            result = await client.perform("")

        assert result.status_code == 200
        assert len(transport.requests) == 3

    async def test_wrong_credentials(self, cassette, make_client):
        transport = cassette("wrong_authentication")
        client = make_client(transport, USERNAME, "wrong password")

        with pytest.raises(AuthorizationError):
            await client.perform("")

    async def test_missing_credentials(self, cassette, make_client):
        transport = cassette("missing_credentials")
        client = make_client(transport)

        with pytest.raises(CredentialsMissingError):
            await client.perform("")

        assert transport.calls_to("portus.test.lan") == []

    async def test_check_connectivity(self, cassette, make_client):
        client = make_client(cassette("successful_authentication"), USERNAME, PASSWORD)
        assert await client.check_connectivity() is True

    async def test_check_connectivity_propagates_auth_errors(self, cassette, make_client):
        client = make_client(cassette("missing_credentials"))
        with pytest.raises(CredentialsMissingError):
            await client.check_connectivity()

    async def test_check_connectivity_on_server_error(self, transport, make_client):
        transport.add("GET", f"http://{REGISTRY_HOST}/v2/", 503, "down")
        assert await make_client(transport).check_connectivity() is False


class TestManifest:
    """Fetching image manifests."""

    async def test_fetches_manifest(self, cassette, make_client):
        client = make_client(cassette("get_image_manifest"), USERNAME, PASSWORD)

        manifest = await client.manifest("foo/busybox", "1.0.0")

        assert manifest["name"] == "foo/busybox"
        assert manifest["tag"] == "1.0.0"
        assert manifest["schemaVersion"] == 1
        assert manifest["fsLayers"][0]["blobSum"] == DIGEST

    async def test_missing_tag(self, cassette, make_client):
        client = make_client(cassette("get_missing_image_manifest"), USERNAME, PASSWORD)

        with pytest.raises(NotFoundError, match="MANIFEST_UNKNOWN") as exc_info:
            await client.manifest("foo/busybox", "2.0.0")

        assert exc_info.value.code == "MANIFEST_UNKNOWN"

    async def test_unexpected_status(self, transport, make_client):
        transport.add(
            "GET", f"http://{REGISTRY_HOST}/v2/foo/busybox/manifests/2.0.0", 500, "BOOM"
        )
        client = make_client(transport, USERNAME, PASSWORD)

        with pytest.raises(RegistryProtocolError) as exc_info:
            await client.manifest("foo/busybox", "2.0.0")

        assert exc_info.value.status_code == 500
        assert exc_info.value.body == "BOOM"

    async def test_non_json_manifest(self, transport, make_client):
        transport.add(
            "GET", f"http://{REGISTRY_HOST}/v2/foo/busybox/manifests/1.0.0", 200, "oops"
        )
        with pytest.raises(RegistryProtocolError):
            await make_client(transport).manifest("foo/busybox", "1.0.0")

    async def test_invalid_repository_name(self, transport, make_client):
        with pytest.raises(ValidationError):
            await make_client(transport).manifest("Foo/../busybox", "1.0.0")
        assert transport.requests == []


class TestCatalog:
    """Listing the repository catalog."""

    async def test_returns_catalog(self, cassette, make_client):
        client = make_client(cassette("get_registry_catalog"), "portus", "portus-secret")

        catalog = await client.catalog()

        assert len(catalog) == 1
        assert catalog[0]["name"] == "busybox"
        assert catalog[0]["tags"] == ["latest"]

    async def test_missing_catalog_endpoint(self, cassette, make_client):
        client = make_client(cassette("get_missing_catalog_endpoint"), USERNAME, PASSWORD)

        with pytest.raises(NotFoundError):
            await client.catalog()

    async def test_unexpected_status(self, transport, make_client):
        transport.add("GET", f"http://{REGISTRY_HOST}/v2/_catalog", 500, "BOOM")

        with pytest.raises(RegistryProtocolError):
            await make_client(transport, USERNAME, PASSWORD).catalog()

    async def test_keeps_catalog_order(self, transport, make_client):
        base = f"http://{REGISTRY_HOST}/v2"
        transport.add("GET", f"{base}/_catalog", 200, '{"repositories": ["zeta", "alpha", "foo/mid"]}')
        transport.add("GET", f"{base}/zeta/tags/list", 200, '{"name": "zeta", "tags": ["1"]}')
        transport.add("GET", f"{base}/alpha/tags/list", 200, '{"name": "alpha", "tags": null}')
        transport.add("GET", f"{base}/foo/mid/tags/list", 200, '{"name": "foo/mid", "tags": ["a", "b"]}')

        catalog = await make_client(transport).catalog()

        assert catalog == [
            {"name": "zeta", "tags": ["1"]},
            {"name": "alpha", "tags": []},
            {"name": "foo/mid", "tags": ["a", "b"]},
        ]

    async def test_tag_failure_fails_whole_catalog(self, transport, make_client):
        base = f"http://{REGISTRY_HOST}/v2"
        transport.add("GET", f"{base}/_catalog", 200, '{"repositories": ["one", "two"]}')
        transport.add("GET", f"{base}/one/tags/list", 200, '{"tags": ["latest"]}')
        transport.add(
            "GET",
            f"{base}/two/tags/list",
            404,
            '{"errors": [{"code": "NAME_UNKNOWN", "message": "repository name not known to registry"}]}',
        )

        with pytest.raises(NotFoundError, match="NAME_UNKNOWN"):
            await make_client(transport).catalog()

    async def test_empty_catalog(self, transport, make_client):
        transport.add("GET", f"http://{REGISTRY_HOST}/v2/_catalog", 200, '{"repositories": []}')
        assert await make_client(transport).catalog() == []


class TestDelete:
    """Deleting blobs."""

    async def test_deletes_blob(self, cassette, make_client):
        transport = cassette("delete_blob")
        client = make_client(transport, "portus", "portus-secret")

        assert await client.delete("busybox", DIGEST) is True
        assert transport.requests[-1].method == "DELETE"
        assert transport.requests[-1].headers["Authorization"] == "Bearer delete-token"

    async def test_missing_blob(self, cassette, make_client):
        client = make_client(cassette("delete_missing_blob"), "portus", "portus-secret")

        with pytest.raises(NotFoundError, match="BLOB_UNKNOWN"):
            await client.delete("busybox", DIGEST)

    async def test_deletion_disabled(self, cassette, make_client):
        client = make_client(cassette("delete_disabled"), "portus", "portus-secret")

        with pytest.raises(NotFoundError, match="UNSUPPORTED"):
            await client.delete("busybox", DIGEST)

    async def test_bad_request(self, cassette, make_client):
        client = make_client(cassette("invalid_delete_blob"), "portus", "portus-secret")

        with pytest.raises(RegistryError) as exc_info:
            await client.delete("busybox", DIGEST)

        assert type(exc_info.value) is RegistryProtocolError
        assert exc_info.value.status_code == 400

    async def test_invalid_digest(self, transport, make_client):
        with pytest.raises(ValidationError, match="Invalid digest"):
            await make_client(transport).delete("busybox", "sha256:nothex")
        assert transport.requests == []
