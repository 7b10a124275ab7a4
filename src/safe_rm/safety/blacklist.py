"""Blacklist assembled from the configuration layers or the built-in defaults."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from safe_rm.config import ConfigPaths, get_config_paths, load_config_file
from safe_rm.safety.protected import DEFAULT_PROTECTED_DIRS, ProtectedPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Blacklist:
    """Protected paths for one invocation. Built once, then only queried."""

    paths: ProtectedPaths
    sources: tuple[Path, ...] = ()
    uses_defaults: bool = False

    @classmethod
    def build(
        cls,
        environ: Mapping[str, str] | None = None,
        config_paths: ConfigPaths | None = None,
    ) -> "Blacklist":
        """
        Load every configuration layer and merge the results.

        All three files are read; the result is their union. The built-in
        defaults apply only when that union is empty, so a single configured
        entry disables all of them.

        Args:
            environ: Environment used to locate the per-user files
            config_paths: Explicit file locations, mostly for tests

        Returns:
            The assembled Blacklist

        Raises:
            ConfigError: If any configuration line is a broken pattern
        """
        if config_paths is None:
            config_paths = get_config_paths(environ)

        paths = ProtectedPaths()
        sources: list[Path] = []
        for config_file in config_paths:
            loaded = load_config_file(config_file)
            if loaded:
                sources.append(config_file)
            paths.update(loaded)

        uses_defaults = not paths
        if uses_defaults:
            logger.debug("No protected paths configured, using built-in defaults")
            paths.update(DEFAULT_PROTECTED_DIRS)

        return cls(
            paths=paths,
            sources=tuple(sources),
            uses_defaults=uses_defaults,
        )

    @classmethod
    def from_paths(cls, paths: list[str] | tuple[str, ...]) -> "Blacklist":
        """Create a Blacklist from already-concrete paths."""
        return cls(paths=ProtectedPaths(paths))

    def is_protected(self, normalized: str) -> bool:
        return self.paths.is_protected(normalized)

    def __contains__(self, normalized: object) -> bool:
        return normalized in self.paths

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)
