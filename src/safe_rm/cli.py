"""Safe-rm CLI - interceptor entry point and configuration helper."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from safe_rm import TOOL_NAME, __version__
from safe_rm.config import DEFAULT_CONFIG_TEMPLATE, ConfigPaths, get_config_paths
from safe_rm.core.filter import filter_arguments
from safe_rm.core.runner import run
from safe_rm.errors import ConfigError
from safe_rm.safety.blacklist import Blacklist
from safe_rm.ui.console import create_console, print_banner


def main() -> None:
    """Entry point for the ``safe-rm`` command.

    Arguments are read straight from ``sys.argv`` so that every option is
    passed through to rm untouched.
    """
    sys.exit(run(sys.argv))


config_app = typer.Typer(
    name=f"{TOOL_NAME}-config",
    help="Inspect the paths safe-rm protects.",
    no_args_is_help=True,
)
console = create_console()
err_console = create_console(stderr=True)


def _load_blacklist() -> Blacklist:
    """Build the blacklist, exit with error on a broken configuration."""
    try:
        return Blacklist.build()
    except ConfigError as e:
        err_console.print(f"[red]Config error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _print_config_locations(config_paths: ConfigPaths) -> None:
    """Print config file locations and their status, in load order."""
    console.print("[bold]Config file locations (load order):[/bold]\n")
    for label, path in config_paths.labelled():
        status = "[green]exists[/green]" if path.exists() else "[dim]not found[/dim]"
        console.print(f"  {label + ':':<8} {escape(str(path))}")
        console.print(f"           {status}\n")


@config_app.command("path")
def config_path() -> None:
    """Show configuration file locations and status."""
    _print_config_locations(get_config_paths())


@config_app.command("show")
def config_show() -> None:
    """Display the active protected paths and where they come from."""
    blacklist = _load_blacklist()

    if blacklist.uses_defaults:
        source_text = "[dim]built-in defaults (no configured paths)[/dim]"
    else:
        source_text = ", ".join(escape(str(p)) for p in blacklist.sources)
    console.print(Panel.fit(f"[bold]Active source:[/bold] {source_text}", title="Blacklist"))

    table = Table(show_header=True)
    table.add_column("Protected path", style="cyan")
    for path in blacklist:
        table.add_row(escape(path))
    console.print(table)

    console.print(f"\n{len(blacklist)} protected paths")


@config_app.command(
    "check",
    context_settings={"ignore_unknown_options": True},
)
def config_check(
    arguments: list[str] = typer.Argument(
        ...,
        help="Arguments as they would be passed to safe-rm",
    ),
) -> None:
    """Show which arguments safe-rm would skip, without deleting anything."""
    blacklist = _load_blacklist()
    result = filter_arguments(arguments, blacklist)

    table = Table(show_header=True)
    table.add_column("Argument")
    table.add_column("Normalized", style="dim")
    table.add_column("Action")
    for candidate in result.candidates:
        action = "[red]skip[/red]" if candidate.protected else "[green]forward[/green]"
        table.add_row(escape(candidate.original), escape(candidate.normalized), action)
    console.print(table)

    console.print(
        f"\n{len(result.forwarded)} forwarded, {len(result.skipped)} skipped"
    )


@config_app.command("init")
def config_init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing config file",
    ),
) -> None:
    """Write a user config file containing the built-in defaults."""
    target: Path = get_config_paths().user_file

    if target.exists() and not force:
        console.print(f"[yellow]Config already exists: {escape(str(target))}[/yellow]")
        console.print("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(DEFAULT_CONFIG_TEMPLATE)
    except OSError as e:
        console.print(f"[red]Permission denied: {escape(str(target))}[/red]")
        console.print(f"[dim]Check write permissions for {escape(str(target.parent))}[/dim]")
        raise typer.Exit(1) from e

    console.print(f"[green]Created user config:[/green] {escape(str(target))}")
    console.print(
        "[dim]Any configured path disables the built-in defaults; "
        "keep the listed ones you still want protected.[/dim]"
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{TOOL_NAME} v{__version__}")
        raise typer.Exit(0)


@config_app.callback()
def config_main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        is_eager=True,
        callback=_version_callback,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log configuration loading details",
    ),
    banner: bool = typer.Option(
        False,
        "--banner",
        help="Print the banner before the command output",
    ),
) -> None:
    """Safe-rm configuration helper."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )

    if banner:
        print_banner(console)


if __name__ == "__main__":
    main()
