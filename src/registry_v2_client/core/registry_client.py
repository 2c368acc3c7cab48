"""Docker Registry API v2 async client with Bearer token authentication."""

from typing import Any

from ..operations.blobs import delete_blob
from ..operations.manifests import get_manifest
from ..operations.repositories import get_catalog, list_tags
from .connectivity import check_connectivity
from .executor import RequestExecutor
from .transport import AiohttpTransport, Transport
from .types import Credentials, RegistryConfig, RequestResult


class RegistryClient:
    """Docker Registry API v2 async client.

    Registries that answer 401 with a Bearer challenge are handled by
    exchanging the configured credentials for a token and retrying the
    request once. Tokens are not cached between calls.
    """

    def __init__(
        self,
        host: str,
        use_tls: bool = False,
        username: str | None = None,
        password: str | None = None,
        timeout: float = 10,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the registry client.

        Args:
            host: Registry host, optionally with port (e.g. registry.test.lan:5000)
            use_tls: Talk HTTPS instead of HTTP
            username: Account used at the token endpoint
            password: Password used at the token endpoint
            timeout: Request timeout in seconds
            transport: Transport to send requests through; an
                AiohttpTransport is created when omitted
        """
        credentials = Credentials(username, password or "") if username else None
        self.config = RegistryConfig(
            host=host, use_tls=use_tls, credentials=credentials, timeout=timeout
        )
        self._owns_transport = transport is None
        self.transport = transport or AiohttpTransport(timeout=timeout)
        self.executor = RequestExecutor(self.config, self.transport)

    @classmethod
    def from_config(
        cls, config: RegistryConfig, transport: Transport | None = None
    ) -> "RegistryClient":
        """Create a client from an existing configuration."""
        credentials = config.credentials
        return cls(
            config.host,
            use_tls=config.use_tls,
            username=credentials.username if credentials else None,
            password=credentials.password if credentials else None,
            timeout=config.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "RegistryClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, AiohttpTransport):
            await self.transport.close()

    async def perform(self, path: str, method: str = "GET") -> RequestResult:
        """Send a request to ``/v2/<path>``, authenticating when challenged.

        The response is returned whatever its status, except 401 which is
        turned into an authentication error.
        """
        return await self.executor.perform(path, method=method)

    async def check_connectivity(self) -> bool:
        """Check if the registry answers on ``/v2/``."""
        return await check_connectivity(self.executor)

    async def manifest(self, repository: str, tag: str) -> dict[str, Any]:
        """Retrieve the manifest of ``repository:tag``."""
        return await get_manifest(self.executor, repository, tag)

    async def list_tags(self, repository: str) -> list[str]:
        """List tags for a repository."""
        return await list_tags(self.executor, repository)

    async def catalog(self) -> list[dict[str, Any]]:
        """List every repository with its tags, in catalog order."""
        return await get_catalog(self.executor)

    async def delete(self, repository: str, digest: str) -> bool:
        """Delete a blob by digest."""
        return await delete_blob(self.executor, repository, digest)
