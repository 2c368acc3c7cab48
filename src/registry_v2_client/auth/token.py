"""Bearer token acquisition from a challenge realm."""

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import aiohttp

from ..core.session import parse_json_response
from ..core.transport import Transport
from ..core.types import AuthChallenge, Credentials, Token, TransportRequest
from ..exceptions import AuthorizationError, ValidationError

logger = logging.getLogger(__name__)


def build_token_url(challenge: AuthChallenge, credentials: Credentials) -> str:
    """Append ``service``, ``account`` and ``scope`` to the realm URL.

    Query parameters already present on the realm are preserved.
    """
    parts = urlsplit(challenge.realm)
    query = parse_qsl(parts.query, keep_blank_values=True)
    if challenge.service:
        query.append(("service", challenge.service))
    query.append(("account", credentials.username))
    if challenge.scope:
        query.append(("scope", challenge.scope))
    return urlunsplit(parts._replace(query=urlencode(query)))


def basic_auth_header(credentials: Credentials) -> str:
    """Encode credentials as an HTTP Basic ``Authorization`` value in UTF-8.

    Raises:
        ValidationError: If the username contains a colon
    """
    try:
        auth = aiohttp.BasicAuth(
            credentials.username, credentials.password, encoding="utf-8"
        )
    except ValueError as e:
        raise ValidationError(f"Invalid username for Basic auth: {e}") from e
    return auth.encode()


async def acquire_token(
    transport: Transport, challenge: AuthChallenge, credentials: Credentials
) -> Token:
    """Exchange credentials for a bearer token.

    Args:
        transport: Transport used to reach the realm
        challenge: Parsed Bearer challenge
        credentials: Username/password sent with HTTP Basic auth

    Returns:
        Token valid for the retried request

    Raises:
        AuthorizationError: If the endpoint rejects the credentials or
            answers without a ``token`` field
    """
    request = TransportRequest(
        method="GET",
        url=build_token_url(challenge, credentials),
        headers={"Authorization": basic_auth_header(credentials)},
    )
    logger.debug("Requesting token from %s", challenge.realm)
    result = await transport.send(request)

    if not result.ok:
        raise AuthorizationError(
            f"Token endpoint {challenge.realm} rejected the credentials "
            f"of {credentials.username!r} (HTTP {result.status_code})"
        )

    payload = parse_json_response(result.text)
    if not isinstance(payload, dict):
        raise AuthorizationError(
            f"Token endpoint {challenge.realm} returned a non-JSON body"
        )
    value = payload.get("token")
    if not isinstance(value, str) or not value:
        raise AuthorizationError(
            f"Token endpoint {challenge.realm} returned no token"
        )
    return Token(value=value)
