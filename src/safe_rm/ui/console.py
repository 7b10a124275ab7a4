"""Rich console utilities for output formatting."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from safe_rm import TOOL_NAME, __version__


def create_console(stderr: bool = False) -> Console:
    """Create a configured Rich console."""
    # Paths are printed verbatim, so ":name:" must not become an emoji
    return Console(stderr=stderr, highlight=False, emoji=False)


def print_banner(console: Console) -> None:
    """Print the safe-rm banner."""
    banner_text = Text()
    banner_text.append("SAFE", style="bold green")
    banner_text.append("-RM", style="bold red")

    tagline = Text("rm that refuses to delete protected paths", style="dim italic")

    panel = Panel(
        Text.assemble(banner_text, "\n", tagline),
        border_style="blue",
        padding=(0, 2),
        subtitle=f"v{__version__}",
        subtitle_align="right",
    )

    console.print(panel)
    console.print()


def print_skipped(console: Console, path: str) -> None:
    """Announce a protected path that will not be passed to rm."""
    console.print(f"{TOOL_NAME}: skipping {escape(path)}", soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    """Print an error message."""
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)

