"""
pinlock Error Classes

Every fatal condition raised by pinlock packages derives from PinlockError so
callers (the CLI in particular) can catch one base class and still report a
stable machine-readable code.

Taxonomy:
- Malformed input: MalformedLockError, InvalidOverrideError, ValidationError
- Missing precondition: MissingGeneratedLockError, StageUnavailableError
- Collaborator failure: ResolutionError, CommitError

Usage:
    from pinlock_common.errors import MalformedLockError

    raise MalformedLockError("dependencies.lock", cause=exc)
"""

from typing import Any, Dict, Optional


class PinlockError(Exception):
    """
    Base exception for all pinlock errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
    """

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for structured output (CLI --json, logs)."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(PinlockError):
    """Raised when settings or a settings file fail validation."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class MalformedLockError(PinlockError):
    """
    Raised when a lock or override file is unreadable or is not a JSON object.

    Attributes:
        file_name: Name of the offending file
        cause: Underlying parse/IO error, if any
    """

    def __init__(self, file_name: str, cause: Optional[BaseException] = None):
        self.file_name = file_name
        self.cause = cause
        message = f"{file_name} is unreadable or invalid json, terminating run"
        if cause is not None:
            message += f"\nError: {cause}"
        super().__init__(message, code="MALFORMED_LOCK")


class InvalidOverrideError(PinlockError):
    """Raised when an inline override entry is not a group:artifact:version triple."""

    def __init__(self, entry: str, reason: str = "expected group:artifact:version"):
        self.entry = entry
        super().__init__(
            f"Invalid dependency override '{entry}': {reason}",
            code="INVALID_OVERRIDE",
        )


class MissingGeneratedLockError(PinlockError):
    """Raised when saving a lock that was never generated."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"Generated lock not found: {path}\n"
            f"Run 'pinlock generate' before saving the lock.",
            code="MISSING_GENERATED_LOCK",
        )


class StageUnavailableError(PinlockError):
    """Raised when a lifecycle stage is requested but not offered."""

    def __init__(self, stage: str, reason: str):
        self.stage = stage
        super().__init__(f"Stage '{stage}' is not available: {reason}", code="STAGE_UNAVAILABLE")


class ResolutionError(PinlockError):
    """Raised by resolver adapters when a dependency report cannot be used."""

    def __init__(self, message: str):
        super().__init__(message, code="RESOLUTION_ERROR")


class CommitError(PinlockError):
    """
    Raised when committing lock files fails after all remote retries.

    Attributes:
        retries: Number of retries the SCM was allowed
        last_error: Final underlying error reported by the SCM
    """

    def __init__(self, retries: int, last_error: Optional[str] = None):
        self.retries = retries
        self.last_error = last_error
        message = f"Failed to commit dependency locks after {retries} retries"
        if last_error:
            message += f"\nError: {last_error}"
        super().__init__(message, code="COMMIT_ERROR")
