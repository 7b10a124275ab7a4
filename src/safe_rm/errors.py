"""Exceptions raised by safe-rm and the exit codes they map to."""

from __future__ import annotations

EXIT_CONFIG_ERROR = 1
EXIT_SELF_INVOCATION = 1
EXIT_EXEC_FAILED = 2


class SafeRmError(Exception):
    """Base error; ``exit_code`` is what the interceptor exits with."""

    exit_code: int = 1


class GlobError(SafeRmError, ValueError):
    """A configuration line could not be used as a glob pattern."""

    exit_code = EXIT_CONFIG_ERROR

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Cannot glob() for line {line} ({reason})")
        self.line = line
        self.reason = reason


class ConfigError(SafeRmError, ValueError):
    """A configuration file contains a broken pattern."""

    exit_code = EXIT_CONFIG_ERROR


class RealCommandNotFound(SafeRmError):
    """The real rm binary could not be located or executed."""

    exit_code = EXIT_EXEC_FAILED


class SelfInvocationError(SafeRmError):
    """The resolved real command is safe-rm itself."""

    exit_code = EXIT_SELF_INVOCATION
