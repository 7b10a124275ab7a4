"""Protected path definitions to prevent accidental deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

# Used only when no configuration file contributed a single path.
DEFAULT_PROTECTED_DIRS: tuple[str, ...] = (
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/initrd",
    "/lib",
    "/lib32",
    "/lib64",
    "/proc",
    "/root",
    "/sbin",
    "/sys",
    "/usr",
    "/usr/bin",
    "/usr/include",
    "/usr/lib",
    "/usr/local",
    "/usr/local/bin",
    "/usr/local/include",
    "/usr/local/sbin",
    "/usr/local/share",
    "/usr/sbin",
    "/usr/share",
    "/usr/src",
    "/var",
)


class ProtectedPaths:
    """Set of concrete protected path strings.

    Lookup is exact string equality. Wildcards are expanded before paths are
    added, never at lookup time.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self._paths: set[str] = set(paths)

    def update(self, paths: Iterable[str]) -> None:
        self._paths.update(paths)

    def is_protected(self, path: str) -> bool:
        """Return True if ``path`` is exactly one of the protected paths."""
        return path in self._paths

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._paths))

    def __len__(self) -> int:
        return len(self._paths)

    def __bool__(self) -> bool:
        return bool(self._paths)

    def __repr__(self) -> str:
        return f"ProtectedPaths({len(self._paths)} paths)"
