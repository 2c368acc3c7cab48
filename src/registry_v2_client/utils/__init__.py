"""Utility functions for Registry API v2 client."""

from .digest import split_digest, validate_digest
from .validator import validate_reference, validate_repository_name

__all__ = [
    "split_digest",
    "validate_digest",
    "validate_reference",
    "validate_repository_name",
]
