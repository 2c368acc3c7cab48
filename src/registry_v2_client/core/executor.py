"""Request execution with the Bearer token handshake.

A call moves through SENDING, CHALLENGED, RETRYING and DONE. The original
request is sent at most twice: once anonymously and, after a 401 with a
usable Bearer challenge, once more with the acquired token. Non-2xx answers
other than 401 are returned untouched for the caller to classify.
"""

import enum
import logging

from ..auth.challenge import parse_www_authenticate
from ..auth.token import acquire_token
from ..exceptions import (
    AuthorizationError,
    CredentialsMissingError,
    NoBearerRealmError,
)
from .transport import Transport
from .types import RegistryConfig, RequestResult, TransportRequest

logger = logging.getLogger(__name__)

UNAUTHORIZED = 401


class ExecutorState(enum.Enum):
    SENDING = "sending"
    CHALLENGED = "challenged"
    RETRYING = "retrying"
    DONE = "done"


class RequestExecutor:
    """Send registry requests, answering one Bearer challenge per call.

    The executor keeps no state between calls, so one instance can serve
    concurrent operations.
    """

    def __init__(self, config: RegistryConfig, transport: Transport) -> None:
        self.config = config
        self.transport = transport

    def _request(
        self, method: str, path: str, headers: dict[str, str] | None = None
    ) -> TransportRequest:
        return TransportRequest(
            method=method.upper(),
            url=self.config.url_for(path),
            headers=dict(headers or {}),
        )

    async def perform(
        self,
        path: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
    ) -> RequestResult:
        """Send ``method`` on ``/v2/<path>``, authenticating if challenged.

        Args:
            path: Path below ``/v2/``; an empty path targets ``/v2/`` itself
            method: HTTP method
            headers: Extra headers sent with both attempts

        Returns:
            The response of the last attempt; any status except 401

        Raises:
            NoBearerRealmError: If the 401 carries no Bearer challenge with a realm
            CredentialsMissingError: If challenged while no credentials are set
            AuthorizationError: If token acquisition fails or the retry gets 401
            RegistryConnectionError: If the transport fails
        """
        state = ExecutorState.SENDING
        request = self._request(method, path, headers)
        logger.debug("%s: %s %s", state.value, request.method, request.url)
        result = await self.transport.send(request)

        if result.status_code != UNAUTHORIZED:
            logger.debug(
                "%s: %s %s -> %d",
                ExecutorState.DONE.value,
                request.method,
                request.url,
                result.status_code,
            )
            return result

        # Challenges may arrive on separate header lines
        header = ", ".join(result.headers.getall("WWW-Authenticate", []))
        challenge = parse_www_authenticate(header)
        if challenge is None:
            logger.warning("401 from %s without a Bearer realm", request.url)
            raise NoBearerRealmError(
                f"{request.url} requires authentication but sent no Bearer realm"
            )

        credentials = self.config.credentials
        if not credentials:
            raise CredentialsMissingError(
                f"{self.config.host} requires authentication but no credentials are set"
            )

        state = ExecutorState.CHALLENGED
        logger.debug(
            "%s: realm=%s service=%s scope=%s",
            state.value,
            challenge.realm,
            challenge.service,
            challenge.scope,
        )
        token = await acquire_token(self.transport, challenge, credentials)

        state = ExecutorState.RETRYING
        retry = self._request(method, path, headers)
        retry.headers["Authorization"] = token.authorization_header
        logger.debug("%s: %s %s", state.value, retry.method, retry.url)
        result = await self.transport.send(retry)

        if result.status_code == UNAUTHORIZED:
            logger.warning(
                "%s rejected the bearer token for %s",
                self.config.host,
                credentials.username,
            )
            raise AuthorizationError(
                f"{self.config.host} rejected the token issued to "
                f"{credentials.username!r}"
            )

        logger.debug(
            "%s: %s %s -> %d",
            ExecutorState.DONE.value,
            retry.method,
            retry.url,
            result.status_code,
        )
        return result
