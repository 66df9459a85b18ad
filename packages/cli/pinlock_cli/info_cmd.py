"""Info commands - Version and effective settings."""

import typer
from rich.table import Table

from pinlock_common import PINLOCK_VERSION
from pinlock_sdk import root_layout

from .utils import console, get_state, handle_error


def version():
    """Show the pinlock version."""
    console.print(f"pinlock [bold cyan]{PINLOCK_VERSION}[/bold cyan]")


def settings(ctx: typer.Context):
    """Show the effective settings after merging pinlock.yaml and options."""
    state = get_state(ctx)
    try:
        resolved = state.build_settings()
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)

    layout = root_layout(resolved)
    table = Table(title="pinlock settings", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("canonical lock", str(layout.canonical_lock))
    table.add_row("generated lock", str(layout.generated_lock))
    table.add_row("configurations", ", ".join(resolved.configurations))
    table.add_row("include transitives", str(resolved.include_transitives))
    table.add_row("override file", resolved.override_file or "-")
    table.add_row("inline overrides", resolved.override or "-")
    table.add_row("ignore", str(resolved.ignore))
    table.add_row("use generated lock", str(resolved.use_generated_lock))
    table.add_row("subprojects", ", ".join(resolved.subprojects) or "-")
    table.add_row("commit message", resolved.commit.message)
    table.add_row("remote retries", str(resolved.commit.remote_retries))
    console.print(table)
