"""
Applying Locks and Overrides
============================

Entry point used by a build before it resolves dependencies. The caller
decides the mode once:

- IGNORE: lock and override behavior disabled; nothing is applied
- APPLY_LOCK: a lock exists and the lock is not being regenerated; force the
  lock's versions, with overrides taking precedence
- APPLY_OVERRIDES_ONLY: no lock, or the lock is being regenerated; force the
  overrides only
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pinlock_common import get_logger
from pinlock_schema import ForceDirective, LockSettings

from ..collaborators.protocols import ResolutionStrategy
from ..layout import root_layout
from ..lock.store import LockStore
from ..overrides.loader import OverrideMap, load_overrides
from .force import resolve_with_lock, resolve_without_lock, shadowed_overrides

logger = get_logger(__name__)


class Mode(str, Enum):
    """How forces are derived for the current invocation."""

    APPLY_LOCK = "apply_lock"
    APPLY_OVERRIDES_ONLY = "apply_overrides_only"
    IGNORE = "ignore"


def select_mode(settings: LockSettings, lock_exists: bool, generating: bool = False) -> Mode:
    """
    Pick the mode for an invocation.

    Args:
        settings: Active settings (``ignore`` wins over everything)
        lock_exists: Whether the lock to apply exists on disk
        generating: Whether this invocation regenerates the lock
    """
    if settings.ignore:
        return Mode.IGNORE
    if lock_exists and not generating:
        return Mode.APPLY_LOCK
    return Mode.APPLY_OVERRIDES_ONLY


@dataclass
class ForcePlan:
    """Forces computed for one invocation, with what they were derived from."""

    mode: Mode
    forces: List[ForceDirective] = field(default_factory=list)
    lock_path: Optional[Path] = None
    overrides: Dict[str, str] = field(default_factory=dict)
    shadowed: Dict[str, str] = field(default_factory=dict)


def override_file_path(settings: LockSettings) -> Optional[Path]:
    if not settings.override_file:
        return None
    return settings.project_dir / settings.override_file


def load_settings_overrides(settings: LockSettings, store: Optional[LockStore] = None) -> OverrideMap:
    """Load the overrides named by ``settings``."""
    return load_overrides(
        override_file=override_file_path(settings),
        inline_overrides=settings.override,
        ignore=settings.ignore,
        store=store,
    )


def _report_override_sources(settings: LockSettings) -> None:
    if settings.override_file:
        logger.info(f"Using override file {settings.override_file} to lock dependencies")
    if settings.override:
        logger.info(f"Using command line overrides {settings.override}")


def compute_forces(
    settings: LockSettings,
    generating: bool = False,
    store: Optional[LockStore] = None,
    overrides: Optional[OverrideMap] = None,
) -> ForcePlan:
    """
    Compute the forces for an invocation.

    Args:
        settings: Active settings
        generating: Whether this invocation regenerates the lock
        store: Lock store (defaults to the filesystem store)
        overrides: Pre-loaded overrides; loaded from ``settings`` when None

    Raises:
        MalformedLockError: If the lock or override file is invalid
        InvalidOverrideError: If an inline override is malformed
    """
    store = store or LockStore()
    lock_path = root_layout(settings).effective_lock(settings.use_generated_lock)
    if settings.use_generated_lock:
        logger.info(f"Using generated lock {lock_path}")

    mode = select_mode(settings, store.exists(lock_path), generating)
    if mode is Mode.IGNORE:
        logger.info("Dependency lock and overrides ignored")
        return ForcePlan(mode=mode)

    if overrides is None:
        overrides = load_settings_overrides(settings, store)
    _report_override_sources(settings)

    if mode is Mode.APPLY_LOCK:
        logger.info(f"Using {lock_path.name} to lock dependencies")
        lock = store.read(lock_path)
        forces = resolve_with_lock(lock, overrides)
        shadowed = shadowed_overrides(lock, overrides)
        for coordinate, version in shadowed.items():
            logger.warning(
                "Override not applied to unlocked lock entry",
                coordinate=coordinate,
                version=version,
            )
        plan = ForcePlan(mode, forces, lock_path, dict(overrides), shadowed)
    else:
        plan = ForcePlan(mode, resolve_without_lock(overrides), None, dict(overrides))

    logger.debug("Forces computed", forces=[f.notation for f in plan.forces])
    return plan


def apply_forces(strategies: Iterable[ResolutionStrategy], forces: List[ForceDirective]) -> None:
    """Hand the same forces to every resolution context."""
    for strategy in strategies:
        strategy.apply_forces(list(forces))


def apply_dependency_lock(
    settings: LockSettings,
    strategies: Iterable[ResolutionStrategy],
    generating: bool = False,
    store: Optional[LockStore] = None,
) -> ForcePlan:
    """
    Compute forces and apply them to every strategy.

    In IGNORE mode no strategy is called.
    """
    plan = compute_forces(settings, generating=generating, store=store)
    if plan.mode is not Mode.IGNORE:
        apply_forces(strategies, plan.forces)
    return plan
