"""Data types shared by the client modules."""

from dataclasses import dataclass, field
from typing import Any

from multidict import CIMultiDict


@dataclass(frozen=True)
class Credentials:
    """Username/password pair exchanged for a bearer token."""

    username: str
    password: str

    def __bool__(self) -> bool:
        return bool(self.username)


@dataclass(frozen=True)
class RegistryConfig:
    """Connection settings for a single registry.

    The URL scheme comes only from ``use_tls``; it is never guessed from the
    host or port.
    """

    host: str
    use_tls: bool = False
    credentials: Credentials | None = None
    timeout: float = 10

    @property
    def scheme(self) -> str:
        return "https" if self.use_tls else "http"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host.rstrip('/')}"

    def url_for(self, path: str) -> str:
        """Build the absolute URL of a path below ``/v2/``."""
        return f"{self.base_url}/v2/{path.lstrip('/')}"


@dataclass(frozen=True)
class AuthChallenge:
    """Parsed ``WWW-Authenticate`` challenge."""

    scheme: str
    realm: str
    service: str | None = None
    scope: str | None = None
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Token:
    """Bearer token scoped to a single retried request."""

    value: str

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.value}"

    def __repr__(self) -> str:
        return "Token(value='***')"


@dataclass
class TransportRequest:
    """Request handed to the transport."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    data: bytes | None = None


@dataclass
class RequestResult:
    """Uniform response shape returned by every transport."""

    status_code: int
    headers: CIMultiDict | dict[str, str] = field(default_factory=CIMultiDict)
    data: bytes | None = None
    json_data: Any = None

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CIMultiDict):
            self.headers = CIMultiDict(self.headers)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        if not self.data:
            return ""
        return self.data.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class RegistryErrorDetail:
    """One entry of a registry error body."""

    code: str
    message: str
