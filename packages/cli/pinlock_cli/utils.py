"""Console helpers shared by CLI commands."""

from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from pinlock_common import PinlockError, configure_logging
from pinlock_schema import LockSettings
from pinlock_sdk import load_settings

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def info(message: str) -> None:
    console.print(f"[cyan]ℹ[/cyan] {message}")


def warning(message: str) -> None:
    err_console.print(f"[bold yellow]⚠[/bold yellow] {message}")


def error(message: str) -> None:
    err_console.print(f"[bold red]✗[/bold red] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print an error; pinlock errors show their code, others a traceback when verbose."""
    if isinstance(e, PinlockError):
        error(f"{escape(e.message)} [dim]({e.code})[/dim]")
    else:
        error(f"Unexpected error: {escape(str(e))}")
    if verbose:
        err_console.print_exception()


class CliState:
    """
    Global options collected by the main callback.

    Settings are built on demand so commands that do not need them (version)
    never read the settings file.
    """

    def __init__(self, settings_file: Optional[str] = None, project_dir: Optional[str] = None,
                 verbose: bool = False, **options: Any):
        self.settings_file = settings_file
        self.project_dir = project_dir
        self.verbose = verbose
        self.options: Dict[str, Any] = options

    def build_settings(self, **extra: Any) -> LockSettings:
        return load_settings(
            settings_file=self.settings_file,
            project_dir=self.project_dir,
            **{**self.options, **extra},
        )


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:
        state = CliState()
        ctx.obj = state
    return state


def setup_logging(verbose: bool) -> None:
    configure_logging("debug" if verbose else "warning")
