"""Configuration file locations and loading for safe-rm."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from safe_rm import TOOL_NAME
from safe_rm.core.expander import expand_pattern
from safe_rm.errors import ConfigError, GlobError
from safe_rm.safety.protected import DEFAULT_PROTECTED_DIRS

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_FILE = Path(f"/etc/{TOOL_NAME}.conf")

# Characters stripped from the end of every configuration line
LINE_TRAILING_CHARS = "\n\r\t "


def _environ(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def _join(base: str, name: str) -> str:
    # Plain string join: an empty HOME still yields an absolute "/name".
    return f"{base}/{name}"


def get_home(environ: Mapping[str, str] | None = None) -> str:
    """Get the home directory from HOME, or an empty string if unset."""
    return _environ(environ).get("HOME") or ""


def get_xdg_config_home(environ: Mapping[str, str] | None = None) -> str:
    """Get XDG config home, respecting environment variable."""
    env = _environ(environ)
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return xdg
    return _join(get_home(env), ".config")


@dataclass(frozen=True)
class ConfigPaths:
    """The three configuration files, in load order."""

    global_file: Path
    legacy_file: Path
    user_file: Path

    def __iter__(self) -> Iterator[Path]:
        return iter((self.global_file, self.legacy_file, self.user_file))

    def labelled(self) -> list[tuple[str, Path]]:
        """Return ``(label, path)`` pairs for display."""
        return [
            ("Global", self.global_file),
            ("Legacy", self.legacy_file),
            ("User", self.user_file),
        ]


def get_config_paths(environ: Mapping[str, str] | None = None) -> ConfigPaths:
    """
    Get config file paths in load order.

    Returns:
        ConfigPaths with the global, legacy per-user and XDG per-user files
    """
    env = _environ(environ)
    return ConfigPaths(
        global_file=GLOBAL_CONFIG_FILE,
        legacy_file=Path(_join(get_home(env), f".{TOOL_NAME}")),
        user_file=Path(_join(get_xdg_config_home(env), TOOL_NAME)),
    )


def _read_lines(path: Path) -> list[str] | None:
    """Read all lines of ``path``, or None if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape") as f:
            return f.readlines()
    except FileNotFoundError:
        return None
    except OSError as e:
        logger.warning(
            "Could not open configuration file %s: %s", path, e.strerror or e
        )
        return None


def load_config_file(path: Path) -> list[str]:
    """
    Load protected paths from one configuration file.

    Each line is a glob pattern. A missing file is normal and contributes
    nothing; an unreadable file is reported and contributes nothing.

    Args:
        path: Configuration file to read

    Returns:
        All paths the file's patterns expand to

    Raises:
        ConfigError: If any line is not a valid glob pattern
    """
    lines = _read_lines(path)
    if lines is None:
        return []

    results: list[str] = []
    for line in lines:
        pattern = line.rstrip(LINE_TRAILING_CHARS)
        try:
            results.extend(expand_pattern(pattern))
        except GlobError as e:
            raise ConfigError(f"{e} in {path}") from e

    logger.debug("Loaded %d protected paths from %s", len(results), path)
    return results


# Template for `safe-rm-config init`. The format has no comment syntax, so
# the template is the default list, keeping it active once entries are added.
DEFAULT_CONFIG_TEMPLATE = "\n".join(DEFAULT_PROTECTED_DIRS) + "\n"
