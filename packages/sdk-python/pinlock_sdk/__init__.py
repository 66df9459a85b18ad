"""pinlock SDK - dependency lock files with overrides.

This package provides tools for:
- Reading and writing lock files (LockStore)
- Loading overrides from a file and inline strings
- Computing the forces that pin a build's dependency versions
- Generating, saving and committing lock files

Example:
    >>> from pinlock_sdk import load_settings, apply_dependency_lock, forces_file_strategies
    >>> settings = load_settings(project_dir=".")
    >>> plan = apply_dependency_lock(settings, forces_file_strategies(settings))

Package Structure:
    pinlock_sdk/
    ├── lock/           - Lock file store
    ├── overrides/      - Override loading and merging
    ├── resolution/     - Force precedence engine and apply pipeline
    ├── lifecycle/      - Generate -> save -> commit
    └── collaborators/  - Resolver, strategy and SCM interfaces and adapters
"""

from .collaborators import (
    ForcesFileStrategy,
    GitScm,
    ReportResolver,
    ResolutionStrategy,
    Resolver,
    Scm,
    forces_file_strategies,
)
from .config import load_settings, read_settings_file
from .layout import ProjectLayout, report_path, root_layout, subproject_layouts
from .lifecycle import (
    CommitResult,
    LockLifecycle,
    LockState,
    PipelineResult,
    SaveResult,
    SaveStatus,
)
from .lock import LockStore, lock_exists, parse_lock, read_lock, serialize_lock, write_lock
from .overrides import load_overrides, merge_overrides, parse_inline_overrides
from .resolution import (
    ForcePlan,
    Mode,
    apply_dependency_lock,
    apply_forces,
    compute_forces,
    resolve_with_lock,
    resolve_without_lock,
    select_mode,
    shadowed_overrides,
)

__version__ = "0.1.0"

__all__ = [
    # Settings
    "load_settings",
    "read_settings_file",
    # Layout
    "ProjectLayout",
    "report_path",
    "root_layout",
    "subproject_layouts",
    # Lock store
    "LockStore",
    "lock_exists",
    "parse_lock",
    "read_lock",
    "serialize_lock",
    "write_lock",
    # Overrides
    "load_overrides",
    "merge_overrides",
    "parse_inline_overrides",
    # Resolution
    "ForcePlan",
    "Mode",
    "apply_dependency_lock",
    "apply_forces",
    "compute_forces",
    "resolve_with_lock",
    "resolve_without_lock",
    "select_mode",
    "shadowed_overrides",
    # Lifecycle
    "CommitResult",
    "LockLifecycle",
    "LockState",
    "PipelineResult",
    "SaveResult",
    "SaveStatus",
    # Collaborators
    "ForcesFileStrategy",
    "GitScm",
    "ReportResolver",
    "ResolutionStrategy",
    "Resolver",
    "Scm",
    "forces_file_strategies",
]
