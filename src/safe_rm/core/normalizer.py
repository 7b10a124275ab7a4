"""Path normalization used before comparing against the blacklist."""

from __future__ import annotations

import os
import stat


def trim_trailing(value: str, chars: str = "/") -> str:
    """Strip ``chars`` from the right of ``value``, never emptying it.

    ``"/"`` and ``"///"`` both become ``"/"``.
    """
    trimmed = value.rstrip(chars)
    return trimmed if trimmed else value[:1]


def is_symlink(path: str) -> bool:
    """Check the entry itself, without following it."""
    try:
        mode = os.lstat(path).st_mode
    except (OSError, ValueError):
        return False
    return stat.S_ISLNK(mode)


def normalize_path(raw: str) -> str:
    """
    Return the canonical string used for blacklist comparison.

    Symbolic links are not resolved, so a link pointing into a protected
    directory is still checked by its own path. Anything that cannot be
    resolved (missing, permission denied) is compared as given and left for
    rm to report.

    Args:
        raw: Argument as supplied on the command line

    Returns:
        Resolved path with trailing slashes trimmed
    """
    if not raw:
        return raw

    resolved = raw
    if not is_symlink(raw):
        try:
            resolved = os.path.realpath(raw, strict=True)
        except (OSError, ValueError):
            resolved = raw

    return trim_trailing(resolved)
