"""Locating the real rm and handing the filtered arguments over to it."""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import NoReturn

from rich.console import Console

from safe_rm import TOOL_NAME
from safe_rm.core.filter import FilterResult, filter_arguments
from safe_rm.errors import (
    EXIT_EXEC_FAILED,
    RealCommandNotFound,
    SafeRmError,
    SelfInvocationError,
)
from safe_rm.safety.blacklist import Blacklist
from safe_rm.ui.console import create_console, print_error, print_skipped

logger = logging.getLogger(__name__)

REAL_RM_ENV = "SAFE_RM_REAL_RM"
ECHO_TEST_ENV = "SAFE_RM_ECHO_TEST"

REAL_RM_CANDIDATES: tuple[str, ...] = ("/bin/rm", "/usr/bin/rm")
ECHO_CANDIDATES: tuple[str, ...] = ("/bin/echo", "/usr/bin/echo")

# Replaces the current process on success; returns only by raising OSError.
Executor = Callable[[str, Sequence[str]], NoReturn]


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def _first_executable(candidates: Sequence[str]) -> str | None:
    for candidate in candidates:
        if _is_executable(candidate):
            return candidate
    return None


def resolve_real_rm(environ: Mapping[str, str] | None = None) -> str:
    """
    Find the rm binary that receives the filtered arguments.

    Raises:
        RealCommandNotFound: If no usable rm exists
    """
    env = os.environ if environ is None else environ

    override = env.get(REAL_RM_ENV)
    if override:
        if not os.path.isabs(override) or not _is_executable(override):
            raise RealCommandNotFound(
                f'{REAL_RM_ENV}={override} is not an executable absolute path'
            )
        return override

    found = _first_executable(REAL_RM_CANDIDATES)
    if found is None:
        raise RealCommandNotFound('Cannot find the real "rm" binary')
    return found


def resolve_echo() -> str:
    """Find the echo binary used by the echo test hook."""
    found = _first_executable(ECHO_CANDIDATES)
    if found is None:
        raise RealCommandNotFound('Cannot find the "echo" binary')
    return found


def resolve_self(argv0: str, environ: Mapping[str, str] | None = None) -> str:
    """Resolve how this program was invoked to a canonical path."""
    if os.sep not in argv0:
        env = os.environ if environ is None else environ
        found = shutil.which(argv0, path=env.get("PATH"))
        if found:
            argv0 = found
    return os.path.realpath(argv0)


def check_not_self(
    real_rm: str, argv0: str, environ: Mapping[str, str] | None = None
) -> None:
    """
    Make sure ``real_rm`` is not safe-rm itself.

    Raises:
        SelfInvocationError: If both resolve to the same file
    """
    if os.path.realpath(real_rm) == resolve_self(argv0, environ):
        raise SelfInvocationError(
            f'cannot find the real "rm" binary ({real_rm} is {TOOL_NAME} itself)'
        )


@dataclass
class Invocation:
    """The program to execute and its full argument vector."""

    program: str
    real_rm: str
    argv: list[str]
    result: FilterResult


def prepare(
    arguments: Sequence[str],
    blacklist: Blacklist,
    environ: Mapping[str, str] | None = None,
) -> Invocation:
    """Resolve the programs to run and filter ``arguments``."""
    env = os.environ if environ is None else environ

    real_rm = resolve_real_rm(env)
    leading = [real_rm]
    program = real_rm
    if env.get(ECHO_TEST_ENV):
        program = resolve_echo()
        leading.insert(0, program)

    result = filter_arguments(arguments, blacklist, leading=leading)
    return Invocation(
        program=program, real_rm=real_rm, argv=result.forwarded, result=result
    )


def run(
    argv: Sequence[str],
    environ: Mapping[str, str] | None = None,
    execute: Executor = os.execv,
    console: Console | None = None,
    blacklist: Blacklist | None = None,
) -> int:
    """
    Filter ``argv`` and replace this process with the real rm.

    Only returns when something went wrong; the return value is the exit
    code to use.

    Args:
        argv: Full command line, program name first
        environ: Environment for configuration and resolution
        execute: Process replacement, ``os.execv`` unless testing
        console: Diagnostic console, stderr by default
        blacklist: Prebuilt blacklist, loaded from configuration if omitted

    Returns:
        Exit code for a failed run
    """
    console = console or create_console(stderr=True)
    env = os.environ if environ is None else environ
    argv0, arguments = (argv[0], list(argv[1:])) if argv else ("", [])

    try:
        if blacklist is None:
            blacklist = Blacklist.build(env)
        invocation = prepare(arguments, blacklist, env)

        for skipped in invocation.result.skipped:
            print_skipped(console, skipped)

        check_not_self(invocation.real_rm, argv0, env)
    except SafeRmError as e:
        print_error(console, f"{TOOL_NAME}: {e}")
        return e.exit_code

    logger.debug(
        "Executing %s with %d arguments", invocation.program, len(invocation.argv) - 1
    )
    try:
        execute(invocation.program, invocation.argv)
    except OSError as e:
        print_error(
            console,
            f'{TOOL_NAME}: Cannot execute the real "rm" binary: {e.strerror or e}',
        )
        return EXIT_EXEC_FAILED
    return 0
