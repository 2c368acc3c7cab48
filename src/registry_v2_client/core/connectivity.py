"""Registry liveness check."""

import logging
from collections.abc import Mapping

from ..exceptions import (
    NotFoundError,
    RegistryConnectionError,
    RegistryProtocolError,
)
from .classifier import classify_error
from .executor import RequestExecutor
from .types import RequestResult

logger = logging.getLogger(__name__)

API_VERSION_HEADER = "Docker-Distribution-Api-Version"


def check_api_version_header(headers: Mapping[str, str]) -> bool:
    """Check that the registry announces API version ``registry/2.0``."""
    return headers.get(API_VERSION_HEADER) == "registry/2.0"


def validate_connectivity_response(result: RequestResult) -> None:
    """Raise the classified error if the ``/v2/`` check did not succeed."""
    if not result.ok:
        raise classify_error(result, "Registry v2 API check failed")


async def check_connectivity(executor: RequestExecutor) -> bool:
    """Check ``GET /v2/``.

    Returns:
        True if the registry answers 2xx, False on transport errors or
        any other status

    Raises:
        RegistryAuthError: If the authentication handshake fails
    """
    try:
        result = await executor.perform("")
        validate_connectivity_response(result)
    except RegistryConnectionError as e:
        logger.debug("Registry %s unreachable: %s", executor.config.base_url, e)
        return False
    except (NotFoundError, RegistryProtocolError) as e:
        logger.debug("Registry %s check failed: %s", executor.config.base_url, e)
        return False
    return True
