"""Input validation for repository names and references."""

import re

from ..exceptions import ValidationError
from .digest import validate_digest

# Path component grammar of the distribution reference format
_COMPONENT = r"[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*"
REPOSITORY_PATTERN = re.compile(rf"^{_COMPONENT}(?:/{_COMPONENT})*$")
TAG_PATTERN = re.compile(r"^[\w][\w.-]{0,127}$")


def is_valid_repository_name(name: str) -> bool:
    """Check a repository name such as ``nginx`` or ``foo/busybox``."""
    return isinstance(name, str) and bool(REPOSITORY_PATTERN.match(name))


def is_valid_tag(tag: str) -> bool:
    return isinstance(tag, str) and bool(TAG_PATTERN.match(tag))


def validate_repository_name(name: str) -> None:
    """Raise ValidationError for a malformed repository name."""
    if not is_valid_repository_name(name):
        raise ValidationError(f"Invalid repository name: {name!r}")


def validate_reference(reference: str) -> None:
    """Raise ValidationError unless ``reference`` is a tag or a digest."""
    if not (is_valid_tag(reference) or validate_digest(reference)):
        raise ValidationError(f"Invalid tag or digest: {reference!r}")
