"""aiohttp session helpers."""

import json
from typing import Any

import aiohttp


async def create_session(timeout: float = 10) -> aiohttp.ClientSession:
    """Create an aiohttp session with a total request timeout.

    Args:
        timeout: Request timeout in seconds

    Returns:
        New client session; the caller is responsible for closing it
    """
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))


def parse_json_response(text: str) -> Any:
    """Parse a JSON response body, returning None when it is not JSON."""
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None
