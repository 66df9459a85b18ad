"""
Lock Lifecycle
==============

Generate -> Save -> Commit.

- generate: resolve the selected configurations (honoring override forces)
  and write the result to the generated lock. Never reads the canonical lock.
- save: promote the generated lock to the canonical location. A no-op
  ("up to date") when both files exist with identical content.
- commit: hand the canonical locks of the root project and every sub-project
  that has one to the SCM collaborator. Only offered when an SCM is present.

Each stage can run on its own; ``run`` executes a selection of stages in
lifecycle order and stops at the first failure.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from pinlock_common import CommitError, MissingGeneratedLockError, StageUnavailableError, get_logger
from pinlock_schema import ForceDirective, LockSettings

from ..collaborators.protocols import Resolver, Scm
from ..layout import root_layout, subproject_layouts
from ..lock.store import LockStore
from ..resolution.apply import compute_forces

logger = get_logger(__name__)

GENERATE = "generate"
SAVE = "save"
COMMIT = "commit"

STAGE_ORDER: Tuple[str, ...] = (GENERATE, SAVE, COMMIT)


class LockState(str, Enum):
    """Last completed lifecycle stage."""

    PENDING = "pending"
    GENERATED = "generated"
    SAVED = "saved"
    COMMITTED = "committed"


class SaveStatus(str, Enum):
    SAVED = "saved"
    UP_TO_DATE = "up_to_date"


@dataclass
class SaveResult:
    status: SaveStatus
    generated_lock: Path
    canonical_lock: Path


@dataclass
class CommitResult:
    paths: List[str]
    message: str
    tag: Optional[str] = None
    retries: int = 0


@dataclass
class PipelineResult:
    """Outcome of ``LockLifecycle.run``."""

    stages: List[str] = field(default_factory=list)
    generated_lock: Optional[Path] = None
    save: Optional[SaveResult] = None
    commit: Optional[CommitResult] = None


class LockLifecycle:
    """
    Coordinates lock generation, promotion and commit.

    Args:
        settings: Active settings
        resolver: Resolver collaborator used by generate
        store: Lock store (defaults to the filesystem store)
        scm: SCM collaborator; without one the commit stage is not offered
        clock: Returns "now" for generated tag names

    Examples:
        >>> lifecycle = LockLifecycle(settings, ReportResolver(report), scm=GitScm(root))
        >>> lifecycle.run()
    """

    def __init__(
        self,
        settings: LockSettings,
        resolver: Resolver,
        store: Optional[LockStore] = None,
        scm: Optional[Scm] = None,
        clock=datetime.now,
    ):
        self.settings = settings
        self.resolver = resolver
        self.store = store or LockStore()
        self.scm = scm
        self.layout = root_layout(settings)
        self.state = LockState.PENDING
        self._clock = clock

    @property
    def stages(self) -> Tuple[str, ...]:
        """Stages offered by this lifecycle, in order."""
        if self.scm is None:
            return (GENERATE, SAVE)
        return STAGE_ORDER

    # ------------------------------------------------------------------
    # Generate
    # ------------------------------------------------------------------

    def generate(self, forces: Optional[List[ForceDirective]] = None) -> Path:
        """
        Resolve and write the generated lock.

        Args:
            forces: Forces to honor; defaults to the configured overrides

        Returns:
            Path of the generated lock
        """
        if forces is None:
            forces = compute_forces(self.settings, generating=True, store=self.store).forces

        lock = self.resolver.resolve(
            set(self.settings.configurations),
            self.settings.include_transitives,
            list(forces),
        )
        path = self.store.write(self.layout.generated_lock, lock)
        self.state = LockState.GENERATED
        logger.info("Generated lock", path=str(path), entries=len(lock))
        return path

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def is_up_to_date(self) -> bool:
        """True when generated and canonical locks both exist with equal content."""
        generated = self.layout.generated_lock
        canonical = self.layout.canonical_lock
        if not (self.store.exists(generated) and self.store.exists(canonical)):
            return False
        return self.store.read_raw(generated) == self.store.read_raw(canonical)

    def save(self) -> SaveResult:
        """
        Copy the generated lock to the canonical location.

        Raises:
            MissingGeneratedLockError: If the generated lock does not exist
        """
        generated = self.layout.generated_lock
        canonical = self.layout.canonical_lock
        if not self.store.exists(generated):
            raise MissingGeneratedLockError(str(generated))

        if self.is_up_to_date():
            status = SaveStatus.UP_TO_DATE
            logger.info("Lock up to date", path=str(canonical))
        else:
            self.store.copy(generated, canonical)
            status = SaveStatus.SAVED
            logger.info("Saved lock", path=str(canonical))

        self.state = LockState.SAVED
        return SaveResult(status=status, generated_lock=generated, canonical_lock=canonical)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit_paths(self) -> List[str]:
        """
        Lock files to commit, relative to the root project directory.

        Projects without a lock file on disk are left out.
        """
        root = self.settings.project_dir
        use_generated = self.settings.use_generated_lock
        paths: List[str] = []
        for layout in [self.layout] + subproject_layouts(self.settings):
            lock_path = layout.effective_lock(use_generated)
            if not self.store.exists(lock_path):
                logger.debug("No lock file to commit", path=str(lock_path))
                continue
            try:
                relative = lock_path.resolve().relative_to(root.resolve()).as_posix()
            except ValueError:
                relative = lock_path.resolve().as_posix()
            if relative not in paths:
                paths.append(relative)
        logger.info("Lock files to commit", paths=paths)
        return paths

    def commit(self) -> CommitResult:
        """
        Commit the canonical locks through the SCM collaborator.

        Raises:
            StageUnavailableError: If no SCM collaborator is configured
            CommitError: If the SCM could not complete the commit
        """
        if self.scm is None:
            raise StageUnavailableError(COMMIT, "no source control integration configured")

        commit_settings = self.settings.commit
        result = CommitResult(
            paths=self.commit_paths(),
            message=commit_settings.message,
            tag=commit_settings.resolve_tag(self._clock()),
            retries=commit_settings.remote_retries,
        )

        ok = self.scm.commit(result.paths, result.message, result.tag, result.retries)
        if not ok:
            raise CommitError(result.retries, getattr(self.scm, "last_error", None))

        self.state = LockState.COMMITTED
        return result

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def run(self, stages: Optional[Iterable[str]] = None) -> PipelineResult:
        """
        Run stages in lifecycle order; the first failure aborts the rest.

        Args:
            stages: Stage names to run (defaults to every offered stage)

        Raises:
            ValueError: If a stage name is unknown
            StageUnavailableError: If commit is requested without an SCM
        """
        requested = list(stages) if stages is not None else list(self.stages)
        unknown = [name for name in requested if name not in STAGE_ORDER]
        if unknown:
            raise ValueError(f"Unknown lifecycle stage(s): {', '.join(unknown)}")
        if COMMIT in requested and COMMIT not in self.stages:
            raise StageUnavailableError(COMMIT, "no source control integration configured")

        result = PipelineResult()
        for name in STAGE_ORDER:
            if name not in requested:
                continue
            if name == GENERATE:
                result.generated_lock = self.generate()
            elif name == SAVE:
                result.save = self.save()
            else:
                result.commit = self.commit()
            result.stages.append(name)
        return result

    def describe(self) -> Dict[str, str]:
        return {
            "state": self.state.value,
            "generated_lock": str(self.layout.generated_lock),
            "canonical_lock": str(self.layout.canonical_lock),
            "stages": ",".join(self.stages),
        }
