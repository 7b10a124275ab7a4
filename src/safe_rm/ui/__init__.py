"""UI components for console output."""

from __future__ import annotations

from .console import create_console, print_banner, print_error, print_skipped

__all__ = ["create_console", "print_banner", "print_error", "print_skipped"]
