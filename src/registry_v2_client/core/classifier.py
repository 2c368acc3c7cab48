"""Map failed registry responses to typed errors."""

from ..exceptions import NotFoundError, RegistryError, RegistryProtocolError
from .session import parse_json_response
from .types import RegistryErrorDetail, RequestResult


def parse_error_body(text: str) -> list[RegistryErrorDetail]:
    """Parse ``{"errors": [{"code": ..., "message": ...}]}``.

    Returns an empty list for anything that does not follow that shape.
    """
    payload = parse_json_response(text)
    if not isinstance(payload, dict):
        return []
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []

    details = []
    for entry in errors:
        if not isinstance(entry, dict) or "code" not in entry:
            continue
        details.append(
            RegistryErrorDetail(
                code=str(entry["code"]), message=str(entry.get("message") or "")
            )
        )
    return details


def error_message(text: str) -> tuple[str, str | None]:
    """Return ``(message, code)`` from the first error entry or the raw body."""
    details = parse_error_body(text)
    if not details:
        return text, None
    first = details[0]
    return f"{first.code}: {first.message}", first.code


def classify_error(result: RequestResult, context: str) -> RegistryError:
    """Build the error for a non-2xx response.

    Args:
        result: Response that was not successful
        context: Short description of the operation, used as message prefix

    Returns:
        NotFoundError for 404, RegistryProtocolError for anything else
    """
    body = result.text
    if result.status_code == 404:
        message, code = error_message(body)
        return NotFoundError(f"{context}: {message}", code=code, body=body)
    return RegistryProtocolError(
        f"{context}: unexpected HTTP {result.status_code}: {body}",
        status_code=result.status_code,
        body=body,
    )
