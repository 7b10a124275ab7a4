"""Safety mechanisms to prevent accidental deletion of important files."""

from __future__ import annotations

from .protected import DEFAULT_PROTECTED_DIRS, ProtectedPaths

__all__ = ["DEFAULT_PROTECTED_DIRS", "ProtectedPaths"]
