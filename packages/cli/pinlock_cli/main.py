"""pinlock CLI - Main entry point."""

from typing import List, Optional

import typer

from . import forces_cmd, info_cmd, lock_cmd
from .utils import CliState, setup_logging

app = typer.Typer(
    name="pinlock",
    help="pinlock - Pin dependency versions with lock files and overrides",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    project_dir: Optional[str] = typer.Option(
        None, "--project-dir", "-C", help="Root project directory (default: current directory)"
    ),
    config: Optional[str] = typer.Option(
        None, "--config", help="Settings file (default: pinlock.yaml in the project directory)"
    ),
    lock_file: Optional[str] = typer.Option(None, "--lock-file", help="Lock file name"),
    build_dir: Optional[str] = typer.Option(None, "--build-dir", help="Build output directory"),
    configurations: Optional[List[str]] = typer.Option(
        None, "--configuration", "-c", help="Configuration to lock (repeatable)"
    ),
    include_transitives: Optional[bool] = typer.Option(
        None,
        "--include-transitives/--no-include-transitives",
        help="Record transitive dependencies in generated locks",
    ),
    override_file: Optional[str] = typer.Option(
        None, "--override-file", help="Override file in lock format"
    ),
    override: Optional[str] = typer.Option(
        None, "--override", help="Inline overrides: group:artifact:version[,...]"
    ),
    ignore: bool = typer.Option(
        False, "--ignore", help="Ignore lock and override behavior entirely"
    ),
    use_generated_lock: bool = typer.Option(
        False, "--use-generated-lock", help="Apply the generated lock instead of the canonical one"
    ),
    report: Optional[str] = typer.Option(
        None, "--report", help="Dependency report used to generate locks"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
):
    """Global options shared by every command."""
    setup_logging(verbose)
    ctx.obj = CliState(
        settings_file=config,
        project_dir=project_dir,
        verbose=verbose,
        lock_file=lock_file,
        build_dir=build_dir,
        configurations=configurations or None,
        include_transitives=include_transitives,
        override_file=override_file,
        override=override,
        ignore=ignore or None,
        use_generated_lock=use_generated_lock or None,
        report_file=report,
    )


# Register all commands
app.command()(forces_cmd.forces)
app.command()(lock_cmd.generate)
app.command()(lock_cmd.save)
app.command()(lock_cmd.commit)
app.command()(lock_cmd.lock)
app.command()(info_cmd.settings)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
