"""Argument filtering against the blacklist."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from safe_rm.core.normalizer import normalize_path
from safe_rm.safety.blacklist import Blacklist


@dataclass
class Candidate:
    """One command-line argument and its normalized form."""

    original: str
    normalized: str
    protected: bool = False


@dataclass
class FilterResult:
    """Outcome of filtering one argument list."""

    forwarded: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    candidates: list[Candidate] = field(default_factory=list)


def classify(
    argument: str,
    blacklist: Blacklist,
    normalize: Callable[[str], str] = normalize_path,
) -> Candidate:
    """Normalize ``argument`` and look it up in ``blacklist``."""
    normalized = normalize(argument)
    return Candidate(
        original=argument,
        normalized=normalized,
        protected=blacklist.is_protected(normalized),
    )


def filter_arguments(
    arguments: Iterable[str],
    blacklist: Blacklist,
    leading: Iterable[str] = (),
    normalize: Callable[[str], str] = normalize_path,
) -> FilterResult:
    """
    Split arguments into the ones to forward and the ones to skip.

    Every argument is tested verbatim, flags included. Forwarded arguments
    keep their relative order and are passed on in normalized form; skipped
    ones are reported by their original spelling.

    Args:
        arguments: Arguments after the program name
        blacklist: Protected paths to test against
        leading: Entries placed before the arguments without being checked
        normalize: Normalization applied before lookup

    Returns:
        FilterResult with forwarded and skipped arguments
    """
    result = FilterResult(forwarded=list(leading))

    for argument in arguments:
        candidate = classify(argument, blacklist, normalize)
        result.candidates.append(candidate)
        if candidate.protected:
            result.skipped.append(candidate.original)
        else:
            result.forwarded.append(candidate.normalized)

    return result
