"""Custom exceptions for Registry API v2 client."""


class RegistryError(Exception):
    """Base exception for all registry-related errors."""

    pass


class ValidationError(RegistryError):
    """Raised when caller input is rejected before any request is sent."""

    pass


class RegistryConnectionError(RegistryError):
    """Raised when unable to connect to the registry."""

    pass


class RegistryTimeoutError(RegistryConnectionError):
    """Raised when a request to the registry times out."""

    pass


class RegistryAuthError(RegistryError):
    """Base exception for authentication handshake failures."""

    pass


class CredentialsMissingError(RegistryAuthError):
    """Raised when the registry demands a token but no credentials are set."""

    pass


class NoBearerRealmError(RegistryAuthError):
    """Raised when a 401 response carries no usable Bearer challenge."""

    pass


NoBearerRealmException = NoBearerRealmError


class AuthorizationError(RegistryAuthError):
    """Raised when the token endpoint or the registry rejects the credentials."""

    pass


class NotFoundError(RegistryError):
    """Raised when the registry answers 404."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.body = body
        self.status_code = 404


class RegistryProtocolError(RegistryError):
    """Raised when the registry answers with an unexpected status code."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
