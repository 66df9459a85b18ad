"""
pinlock Common Package

Shared primitives used across all pinlock packages.

This package provides:
- Exception classes for consistent error handling
- Constants for defaults (namespaced)
- A structured logger

Usage:
    from pinlock_common import MalformedLockError, LockDefaults, get_logger

    lock_name = LockDefaults.LOCK_FILE
"""

# Error classes
from .errors import (
    PinlockError,
    ValidationError,
    MalformedLockError,
    InvalidOverrideError,
    MissingGeneratedLockError,
    StageUnavailableError,
    ResolutionError,
    CommitError,
)

# Constants - Namespaced classes (recommended)
from .constants import (
    VersionInfo,
    LockDefaults,
    CommitDefaults,
    Patterns,
    LOG_LEVELS,
    PINLOCK_VERSION,
)

# Logger
from .logger import (
    PinlockLogger,
    get_logger,
    configure_logging,
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    "PinlockError",
    "ValidationError",
    "MalformedLockError",
    "InvalidOverrideError",
    "MissingGeneratedLockError",
    "StageUnavailableError",
    "ResolutionError",
    "CommitError",
    # Namespaced constants
    "VersionInfo",
    "LockDefaults",
    "CommitDefaults",
    "Patterns",
    # Convenience aliases
    "LOG_LEVELS",
    "PINLOCK_VERSION",
    # Logger
    "PinlockLogger",
    "get_logger",
    "configure_logging",
]
