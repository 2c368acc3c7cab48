"""Repository catalog and tag listing."""

import logging
from typing import Any

from ..core.classifier import classify_error
from ..core.executor import RequestExecutor
from ..core.session import parse_json_response
from ..core.types import RequestResult
from ..exceptions import RegistryProtocolError
from ..utils.validator import validate_repository_name

logger = logging.getLogger(__name__)


def _json_object(result: RequestResult, context: str) -> dict[str, Any]:
    payload = parse_json_response(result.text)
    if not isinstance(payload, dict):
        raise RegistryProtocolError(
            f"{context}: response is not a JSON object",
            status_code=result.status_code,
            body=result.text,
        )
    return payload


async def list_repositories(executor: RequestExecutor) -> list[str]:
    """List repository names from ``/v2/_catalog`` in registry order.

    Raises:
        NotFoundError: If the registry does not implement the catalog endpoint
        RegistryProtocolError: On any other failure
    """
    context = "Failed to list repositories"
    result = await executor.perform("_catalog")
    if not result.ok:
        raise classify_error(result, context)
    return list(_json_object(result, context).get("repositories") or [])


async def list_tags(executor: RequestExecutor, repository: str) -> list[str]:
    """List the tags of a repository.

    Raises:
        NotFoundError: If the repository does not exist
        RegistryProtocolError: On any other failure
    """
    validate_repository_name(repository)

    context = f"Failed to list tags of {repository}"
    result = await executor.perform(f"{repository}/tags/list")
    if not result.ok:
        raise classify_error(result, context)
    # registry:2 answers "tags": null for a repository whose tags were deleted
    return list(_json_object(result, context).get("tags") or [])


async def get_catalog(executor: RequestExecutor) -> list[dict[str, Any]]:
    """Build ``[{"name": ..., "tags": [...]}]`` for every repository.

    Entries follow the catalog order. Any tag listing failure fails the
    whole call.
    """
    catalog = []
    for name in await list_repositories(executor):
        tags = await list_tags(executor, name)
        logger.debug("Repository %s has %d tags", name, len(tags))
        catalog.append({"name": name, "tags": tags})
    return catalog
