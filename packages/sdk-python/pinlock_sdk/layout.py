"""
Project Layout
==============

Where lock files live for the root project and its sub-projects:

- canonical lock: ``<project_dir>/<lock_file>`` (checked in)
- generated lock: ``<project_dir>/<build_dir>/<lock_file>`` (build output)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from pinlock_common import LockDefaults
from pinlock_schema import LockSettings


@dataclass(frozen=True)
class ProjectLayout:
    """Lock file locations for one project directory."""

    project_dir: Path
    build_dir: str
    lock_file: str

    @classmethod
    def from_settings(cls, settings: LockSettings, project_dir: Optional[Path] = None) -> "ProjectLayout":
        return cls(
            project_dir=Path(project_dir) if project_dir is not None else settings.project_dir,
            build_dir=settings.build_dir,
            lock_file=settings.lock_file,
        )

    @property
    def canonical_lock(self) -> Path:
        return self.project_dir / self.lock_file

    @property
    def generated_lock(self) -> Path:
        return self.project_dir / self.build_dir / self.lock_file

    @property
    def build_path(self) -> Path:
        return self.project_dir / self.build_dir

    def effective_lock(self, use_generated_lock: bool) -> Path:
        """The lock consulted when applying: generated or canonical."""
        return self.generated_lock if use_generated_lock else self.canonical_lock


def root_layout(settings: LockSettings) -> ProjectLayout:
    return ProjectLayout.from_settings(settings)


def report_path(settings: LockSettings) -> Path:
    """Dependency report location: explicit ``report_file`` or the build dir default."""
    if settings.report_file:
        return settings.project_dir / settings.report_file
    return root_layout(settings).build_path / LockDefaults.REPORT_FILE


def subproject_layouts(settings: LockSettings) -> List[ProjectLayout]:
    """Layouts for each configured sub-project, relative to the root project."""
    return [
        ProjectLayout.from_settings(settings, settings.project_dir / subproject)
        for subproject in settings.subprojects
    ]
