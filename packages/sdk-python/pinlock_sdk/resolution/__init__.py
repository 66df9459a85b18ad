"""
Force Resolution
================

- force: the precedence engine (lock + overrides -> force directives)
- apply: mode selection and application to resolution strategies
"""

from .apply import (
    ForcePlan,
    Mode,
    apply_dependency_lock,
    apply_forces,
    compute_forces,
    load_settings_overrides,
    override_file_path,
    select_mode,
)
from .force import resolve_with_lock, resolve_without_lock, shadowed_overrides

__all__ = [
    "resolve_with_lock",
    "resolve_without_lock",
    "shadowed_overrides",
    "ForcePlan",
    "Mode",
    "apply_dependency_lock",
    "apply_forces",
    "compute_forces",
    "load_settings_overrides",
    "override_file_path",
    "select_mode",
]
