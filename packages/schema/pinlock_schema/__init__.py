"""
pinlock Schema Package

Typed models shared by the SDK and CLI:
- LockEntry / Lock: the lock and override file format
- ForceDirective: a coordinate pinned to a version
- LockSettings / CommitSettings: the explicit configuration surface

Usage:
    from pinlock_schema import LockSettings, lock_from_data

    lock = lock_from_data({"com.example:foo": {"locked": "1.0.0"}})
"""

from .lockfile import (
    LOCK_ADAPTER,
    ForceDirective,
    Lock,
    LockEntry,
    lock_from_data,
    lock_to_data,
)
from .settings import CommitSettings, LockSettings

__all__ = [
    "LOCK_ADAPTER",
    "ForceDirective",
    "Lock",
    "LockEntry",
    "lock_from_data",
    "lock_to_data",
    "CommitSettings",
    "LockSettings",
]
