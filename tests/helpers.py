"""Test helper transport replaying canned registry responses."""

import json
from collections import defaultdict, deque
from pathlib import Path
from urllib.parse import parse_qsl, urlsplit

from registry_v2_client.core.types import RequestResult, TransportRequest

CASSETTE_DIR = Path(__file__).parent / "cassettes"

REGISTRY_HOST = "registry.test.lan"
DIGEST = "sha256:a3ed95caeb02ffe68cdd9fd84406680ae93d633cb16422d00e8a7c22955b46d4"


def request_key(method: str, url: str) -> tuple:
    """Match key ignoring the order of query parameters."""
    parts = urlsplit(url)
    query = tuple(sorted(parse_qsl(parts.query, keep_blank_values=True)))
    return method.upper(), parts.scheme, parts.netloc, parts.path, query


def make_result(status: int, body: str | bytes = b"", headers: dict | None = None):
    data = body.encode("utf-8") if isinstance(body, str) else body
    return RequestResult(status_code=status, headers=headers or {}, data=data)


class FakeTransport:
    """Transport double matching requests by method and URL.

    Responses registered for the same request are returned in order.
    Every request received is kept in ``requests``.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple, deque] = defaultdict(deque)
        self.requests: list[TransportRequest] = []

    def add(
        self,
        method: str,
        url: str,
        status: int,
        body: str | bytes = b"",
        headers: dict | None = None,
    ) -> "FakeTransport":
        self.responses[request_key(method, url)].append(
            make_result(status, body, headers)
        )
        return self

    async def send(self, request: TransportRequest) -> RequestResult:
        self.requests.append(request)
        queue = self.responses.get(request_key(request.method, request.url))
        if not queue:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return queue.popleft()

    def calls_to(self, host: str) -> list[TransportRequest]:
        return [r for r in self.requests if urlsplit(r.url).hostname == host]

    @property
    def pending(self) -> int:
        return sum(len(queue) for queue in self.responses.values())


def load_cassette(name: str) -> FakeTransport:
    """Build a FakeTransport from ``tests/cassettes/<name>.json``."""
    recorded = json.loads((CASSETTE_DIR / f"{name}.json").read_text())
    transport = FakeTransport()
    for interaction in recorded["interactions"]:
        request = interaction["request"]
        response = interaction["response"]
        body = response.get("body", "")
        if not isinstance(body, str):
            body = json.dumps(body)
        transport.add(
            request["method"],
            request["url"],
            response["status"],
            body,
            response.get("headers"),
        )
    return transport
