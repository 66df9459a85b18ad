"""Lock lifecycle: generate -> save -> commit."""

from .pipeline import (
    COMMIT,
    GENERATE,
    SAVE,
    STAGE_ORDER,
    CommitResult,
    LockLifecycle,
    LockState,
    PipelineResult,
    SaveResult,
    SaveStatus,
)

__all__ = [
    "COMMIT",
    "GENERATE",
    "SAVE",
    "STAGE_ORDER",
    "CommitResult",
    "LockLifecycle",
    "LockState",
    "PipelineResult",
    "SaveResult",
    "SaveStatus",
]
