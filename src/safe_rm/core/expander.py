"""Glob expansion of configuration lines."""

from __future__ import annotations

import glob
import re

from safe_rm.core.normalizer import trim_trailing
from safe_rm.errors import GlobError

# Same metacharacters the glob module treats as magic.
_MAGIC_CHECK = re.compile(r"[*?[]")


def has_magic(pattern: str) -> bool:
    """Check whether ``pattern`` contains glob metacharacters."""
    return _MAGIC_CHECK.search(pattern) is not None


def validate_pattern(pattern: str) -> None:
    """
    Reject patterns that cannot be globbed.

    An unterminated ``[`` is not an error: like glob(3), it matches a
    literal bracket.

    Raises:
        GlobError: On an embedded NUL character
    """
    if "\0" in pattern:
        raise GlobError(pattern, "embedded NUL character")


def expand_pattern(pattern: str) -> list[str]:
    """
    Expand one configuration line into concrete paths.

    Literal lines come back unchanged even when nothing exists at that path.
    A glob that matches nothing yields an empty list.

    Args:
        pattern: Configuration line with trailing whitespace already removed

    Returns:
        Sorted list of matching paths, trailing slashes trimmed

    Raises:
        GlobError: If the pattern is malformed
    """
    if not pattern:
        return []

    validate_pattern(pattern)

    if not has_magic(pattern):
        return [trim_trailing(pattern)]

    matches = glob.glob(pattern, recursive=False)
    return sorted({trim_trailing(match) for match in matches})
