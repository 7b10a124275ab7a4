"""Safe-rm - a wrapper around rm that refuses to delete protected paths."""

from __future__ import annotations

__version__ = "1.1.0"

TOOL_NAME = "safe-rm"
