"""Registry V2 Client - Async Python client for Docker Registry API v2."""

__version__ = "0.1.0"

from .auth.challenge import parse_www_authenticate
from .auth.token import acquire_token
from .core.classifier import classify_error, parse_error_body
from .core.executor import RequestExecutor
from .core.registry_client import RegistryClient
from .core.transport import AiohttpTransport, Transport
from .core.types import (
    AuthChallenge,
    Credentials,
    RegistryConfig,
    RegistryErrorDetail,
    RequestResult,
    Token,
    TransportRequest,
)
from .exceptions import (
    AuthorizationError,
    CredentialsMissingError,
    NoBearerRealmError,
    NoBearerRealmException,
    NotFoundError,
    RegistryAuthError,
    RegistryConnectionError,
    RegistryError,
    RegistryProtocolError,
    RegistryTimeoutError,
    ValidationError,
)
from .registry import (
    check_registry_connectivity,
    delete_blob,
    get_catalog,
    get_manifest,
    list_tags,
    perform_request,
)

__all__ = [
    "RegistryClient",
    "RequestExecutor",
    "Transport",
    "AiohttpTransport",
    "RegistryConfig",
    "Credentials",
    "AuthChallenge",
    "Token",
    "TransportRequest",
    "RequestResult",
    "RegistryErrorDetail",
    "parse_www_authenticate",
    "acquire_token",
    "classify_error",
    "parse_error_body",
    "check_registry_connectivity",
    "perform_request",
    "get_manifest",
    "list_tags",
    "get_catalog",
    "delete_blob",
    "RegistryError",
    "ValidationError",
    "RegistryConnectionError",
    "RegistryTimeoutError",
    "RegistryAuthError",
    "CredentialsMissingError",
    "NoBearerRealmError",
    "NoBearerRealmException",
    "AuthorizationError",
    "NotFoundError",
    "RegistryProtocolError",
]
