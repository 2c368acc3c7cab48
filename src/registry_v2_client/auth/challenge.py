"""``WWW-Authenticate`` challenge parsing.

Grammar accepted::

    header    = item *( "," item )
    item      = scheme [ 1*SP param ] | param
    param     = key "=" ( quoted-string | bare-value )

A ``param`` following a scheme belongs to that scheme's challenge. Parameters
that appear before any scheme (``service=foo,Bearer realm=...``) are kept
aside and used as defaults for the selected Bearer challenge.
"""

from dataclasses import dataclass, field

from ..core.types import AuthChallenge

BEARER_SCHEME = "bearer"

_TOKEN_DELIMITERS = frozenset(' \t,="')


@dataclass
class _RawChallenge:
    scheme: str | None
    params: dict[str, str] = field(default_factory=dict)


class _ChallengeScanner:
    """Single-pass scanner producing raw challenges in header order."""

    def __init__(self, header: str) -> None:
        self.text = header
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip_whitespace(self) -> None:
        while self._peek() in (" ", "\t"):
            self.pos += 1

    def _skip_separators(self) -> None:
        while self._peek() in (" ", "\t", ","):
            self.pos += 1

    def _read_token(self) -> str:
        start = self.pos
        while (
            self.pos < len(self.text)
            and self.text[self.pos] not in _TOKEN_DELIMITERS
        ):
            self.pos += 1
        return self.text[start : self.pos]

    def _read_quoted(self) -> str:
        # Opening quote already consumed; backslash escapes the next char.
        chars = []
        while self.pos < len(self.text):
            char = self.text[self.pos]
            self.pos += 1
            if char == "\\" and self.pos < len(self.text):
                chars.append(self.text[self.pos])
                self.pos += 1
            elif char == '"':
                break
            else:
                chars.append(char)
        return "".join(chars)

    def _read_bare(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] != ",":
            self.pos += 1
        return self.text[start : self.pos].strip()

    def _read_value(self) -> str:
        self._skip_whitespace()
        if self._peek() == '"':
            self.pos += 1
            return self._read_quoted()
        return self._read_bare()

    def scan(self) -> list[_RawChallenge]:
        challenges: list[_RawChallenge] = []
        current = _RawChallenge(scheme=None)
        while True:
            self._skip_separators()
            if self.pos >= len(self.text):
                break
            token = self._read_token()
            if not token:
                # Stray delimiter such as a lone '=' or '"'.
                self.pos += 1
                continue
            self._skip_whitespace()
            if self._peek() == "=":
                self.pos += 1
                current.params.setdefault(token.lower(), self._read_value())
                continue
            if current.scheme is not None or current.params:
                challenges.append(current)
            current = _RawChallenge(scheme=token)
        if current.scheme is not None or current.params:
            challenges.append(current)
        return challenges


def parse_challenges(header: str) -> list[tuple[str | None, dict[str, str]]]:
    """Split a header value into ``(scheme, params)`` pairs in header order.

    Leading parameters with no scheme come back with a ``None`` scheme.
    """
    return [(raw.scheme, raw.params) for raw in _ChallengeScanner(header or "").scan()]


def parse_www_authenticate(header: str | None) -> AuthChallenge | None:
    """Parse a ``WWW-Authenticate`` value into a Bearer challenge.

    Args:
        header: Raw header value, may be None

    Returns:
        The first Bearer challenge carrying a realm, or None if there is none
    """
    if not header:
        return None

    defaults: dict[str, str] = {}
    for scheme, params in parse_challenges(header):
        if scheme is None:
            defaults.update(params)
            continue
        if scheme.lower() != BEARER_SCHEME or not params.get("realm"):
            continue
        merged = {**defaults, **params}
        return AuthChallenge(
            scheme=scheme,
            realm=merged["realm"],
            service=merged.get("service"),
            scope=merged.get("scope"),
            params=merged,
        )
    return None
