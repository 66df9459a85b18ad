"""Lock commands - Generate, save and commit dependency lock files."""

from typing import Optional

import typer

from pinlock_sdk import GitScm, LockLifecycle, ReportResolver, SaveStatus, report_path
from pinlock_sdk.lifecycle import COMMIT, GENERATE, SAVE

from .utils import CliState, error, get_state, handle_error, info, success


def _lifecycle(state: CliState, with_scm: bool = False, push: bool = True,
               **commit_options) -> LockLifecycle:
    settings = state.build_settings(**commit_options)
    scm = None
    if with_scm:
        scm = GitScm.detect(settings.project_dir, push=push)
        if scm is None:
            error(
                f"Source control integration not available: "
                f"{settings.project_dir} is not a git work tree"
            )
            raise typer.Exit(1)
    return LockLifecycle(settings, ReportResolver(report_path(settings)), scm=scm)


def _report_save(status: SaveStatus, path) -> None:
    if status is SaveStatus.UP_TO_DATE:
        info(f"Lock up to date: {path}")
    else:
        success(f"Saved lock: {path}")


def generate(ctx: typer.Context):
    """
    Generate a lock from the build's dependency report.

    The lock is written under the build directory; overrides are honored.
    Use 'pinlock save' to promote it.

    Examples:
        pinlock generate
        pinlock -c compileClasspath -c runtimeClasspath --include-transitives generate
    """
    state = get_state(ctx)
    try:
        lifecycle = _lifecycle(state)
        path = lifecycle.generate()
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)
    success(f"Generated lock: {path}")


def save(ctx: typer.Context):
    """
    Copy the generated lock to the project's canonical lock.

    Does nothing when both locks already have identical content.
    """
    state = get_state(ctx)
    try:
        result = _lifecycle(state).save()
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)
    _report_save(result.status, result.canonical_lock)


def commit(
    ctx: typer.Context,
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Commit message"),
    tag: Optional[str] = typer.Option(None, "--tag", help="Tag to create with the commit"),
    create_tag: Optional[bool] = typer.Option(
        None, "--create-tag/--no-create-tag", help="Create a LockCommit-<timestamp> tag"
    ),
    remote_retries: Optional[int] = typer.Option(
        None, "--remote-retries", min=0, help="Retries for the remote push"
    ),
    push: bool = typer.Option(True, "--push/--no-push", help="Push the commit to the remote"),
):
    """
    Commit the canonical lock files of the project and its sub-projects.

    Only available inside a git work tree.

    Examples:
        pinlock commit
        pinlock commit -m "Update locks" --tag locks-2024.1
    """
    state = get_state(ctx)
    try:
        lifecycle = _lifecycle(
            state,
            with_scm=True,
            push=push,
            commit_message=message,
            commit_tag=tag,
            create_tag=create_tag,
            remote_retries=remote_retries,
        )
        result = lifecycle.commit()
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)

    if not result.paths:
        info("No lock files to commit")
        return
    success(f"Committed {len(result.paths)} lock file(s)")
    if result.tag:
        info(f"Tagged: {result.tag}")


def lock(
    ctx: typer.Context,
    with_commit: bool = typer.Option(
        False, "--commit", help="Commit the saved locks (requires a git work tree)"
    ),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Commit message"),
    tag: Optional[str] = typer.Option(None, "--tag", help="Tag to create with the commit"),
    push: bool = typer.Option(True, "--push/--no-push", help="Push the commit to the remote"),
):
    """
    Generate and save the lock, optionally committing it.

    Stops at the first failing stage.

    Examples:
        pinlock lock
        pinlock lock --commit -m "Update dependency locks"
    """
    state = get_state(ctx)
    stages = [GENERATE, SAVE] + ([COMMIT] if with_commit else [])
    try:
        lifecycle = _lifecycle(
            state,
            with_scm=with_commit,
            push=push,
            commit_message=message,
            commit_tag=tag,
        )
        result = lifecycle.run(stages)
    except typer.Exit:
        raise
    except Exception as e:
        handle_error(e, state.verbose)
        raise typer.Exit(1)

    success(f"Generated lock: {result.generated_lock}")
    _report_save(result.save.status, result.save.canonical_lock)
    if result.commit is not None:
        success(f"Committed {len(result.commit.paths)} lock file(s)")
