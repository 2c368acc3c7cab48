"""Digest format validation."""

import re

# algorithm:hex, e.g. sha256:a3ed95ca...
DIGEST_PATTERN = re.compile(r"^(?P<algorithm>[a-z0-9]+):(?P<hex>[a-f0-9]+)$")

# Hex length expected for each supported algorithm
DIGEST_HEX_LENGTHS = {"sha256": 64, "sha384": 96, "sha512": 128}


def split_digest(digest: str) -> tuple[str, str]:
    """Split a digest into ``(algorithm, hex)``.

    Raises:
        ValueError: If the digest is not ``algorithm:hex``
    """
    match = DIGEST_PATTERN.match(digest) if isinstance(digest, str) else None
    if match is None:
        raise ValueError(f"Invalid digest format: {digest}")
    return match.group("algorithm"), match.group("hex")


def validate_digest(digest: str) -> bool:
    """Validate digest format.

    Args:
        digest: Digest string to validate

    Returns:
        True if the algorithm is supported and the hex part has its length
    """
    try:
        algorithm, hex_part = split_digest(digest)
    except ValueError:
        return False
    return DIGEST_HEX_LENGTHS.get(algorithm) == len(hex_part)
