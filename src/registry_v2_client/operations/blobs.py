"""Blob deletion."""

from ..core.classifier import classify_error
from ..core.executor import RequestExecutor
from ..exceptions import ValidationError
from ..utils.digest import validate_digest
from ..utils.validator import validate_repository_name


async def delete_blob(executor: RequestExecutor, repository: str, digest: str) -> bool:
    """Delete a blob from a repository.

    Args:
        executor: Request executor bound to a registry
        repository: Repository name
        digest: Blob digest (e.g. ``sha256:abc...``)

    Returns:
        True once the registry accepted the deletion

    Raises:
        ValidationError: If the digest is malformed
        NotFoundError: If the blob is unknown or deletion is disabled
            (codes ``BLOB_UNKNOWN`` and ``UNSUPPORTED``)
        RegistryProtocolError: On any other failure

    Note:
        The registry must run with REGISTRY_STORAGE_DELETE_ENABLED=true.
    """
    validate_repository_name(repository)
    if not validate_digest(digest):
        raise ValidationError(f"Invalid digest format: {digest}")

    result = await executor.perform(f"{repository}/blobs/{digest}", method="DELETE")
    if not result.ok:
        raise classify_error(result, f"Failed to delete blob {repository}@{digest}")
    return True
