"""Forces command - Show and apply the forces derived from lock and overrides."""

import json

import typer
from rich.table import Table

from pinlock_sdk import Mode, apply_dependency_lock, forces_file_strategies

from .utils import console, get_state, handle_error, info, success, warning


def forces(
    ctx: typer.Context,
    generating: bool = typer.Option(
        False,
        "--generating",
        help="Compute forces as used while regenerating the lock (overrides only)",
    ),
    write: bool = typer.Option(
        True,
        "--write/--no-write",
        help="Write force lists for each configuration under the build dir",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print forces as JSON",
    ),
):
    """
    Compute the forced dependency versions for this build.

    With a lock file present, every locked version is forced and overrides
    take precedence. Without one (or with --generating) only overrides are
    forced. --ignore disables both.

    Examples:
        pinlock forces
        pinlock --override com.example:foo:1.2.0 forces
        pinlock forces --no-write --json
    """
    state = get_state(ctx)
    try:
        settings = state.build_settings()
        strategies = forces_file_strategies(settings) if write else []
        plan = apply_dependency_lock(settings, strategies, generating=generating)
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)

    if as_json:
        payload = {
            "mode": plan.mode.value,
            "lock": str(plan.lock_path) if plan.lock_path else None,
            "forces": [f.notation for f in plan.forces],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    if plan.mode is Mode.IGNORE:
        info("Dependency lock and overrides ignored; nothing forced")
        return

    if plan.mode is Mode.APPLY_LOCK:
        info(f"Using {plan.lock_path.name} to lock dependencies")
    else:
        info("No lock applied; forcing overrides only")

    for coordinate, version in plan.shadowed.items():
        warning(f"Override {coordinate}:{version} targets an unlocked entry and was not applied")

    if not plan.forces:
        info("No forces")
        return

    table = Table(title="Forced dependencies")
    table.add_column("Coordinate", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("Source")
    for directive in plan.forces:
        source = "override" if directive.coordinate in plan.overrides else "lock"
        table.add_row(directive.coordinate, directive.version, source)
    console.print(table)

    if write:
        success(f"Applied {len(plan.forces)} force(s) to {len(strategies)} configuration(s)")
