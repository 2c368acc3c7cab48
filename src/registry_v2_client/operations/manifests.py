"""Manifest retrieval."""

from typing import Any

from ..core.classifier import classify_error
from ..core.executor import RequestExecutor
from ..core.session import parse_json_response
from ..exceptions import RegistryProtocolError
from ..utils.validator import validate_reference, validate_repository_name


async def get_manifest(
    executor: RequestExecutor, repository: str, tag: str
) -> dict[str, Any]:
    """Fetch the manifest of ``repository:tag``.

    Args:
        executor: Request executor bound to a registry
        repository: Repository name
        tag: Tag or digest reference

    Returns:
        The manifest document with all of its fields

    Raises:
        NotFoundError: If the repository or tag does not exist
        RegistryProtocolError: On any other failure
    """
    validate_repository_name(repository)
    validate_reference(tag)

    context = f"Failed to get manifest {repository}:{tag}"
    result = await executor.perform(f"{repository}/manifests/{tag}")
    if not result.ok:
        raise classify_error(result, context)

    manifest = parse_json_response(result.text)
    if not isinstance(manifest, dict):
        raise RegistryProtocolError(
            f"{context}: response is not a JSON object",
            status_code=result.status_code,
            body=result.text,
        )
    return manifest
