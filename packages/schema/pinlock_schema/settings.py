"""
pinlock Settings Schema

Pydantic models for the explicit configuration built once at the process
boundary (CLI callback or ``pinlock_sdk.load_settings``) and passed into the
override loader, the apply pipeline and the lock lifecycle.

Usage:
    from pinlock_schema import LockSettings

    settings = LockSettings.model_validate({"lock_file": "deps.lock"})
"""

from datetime import datetime
from pathlib import Path, PurePath
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pinlock_common import CommitDefaults, LockDefaults, ValidationError


class CommitSettings(BaseModel):
    """Settings for committing canonical locks to source control."""

    message: str = CommitDefaults.MESSAGE
    tag: Optional[str] = None
    create_tag: bool = CommitDefaults.CREATE_TAG
    remote_retries: int = CommitDefaults.REMOTE_RETRIES

    model_config = ConfigDict(extra="forbid")

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValidationError("Commit message cannot be empty")
        return v

    @field_validator("remote_retries")
    @classmethod
    def validate_remote_retries(cls, v: int) -> int:
        if v < 0:
            raise ValidationError(f"remote_retries must be >= 0, got {v}")
        return v

    def resolve_tag(self, now: Optional[datetime] = None) -> Optional[str]:
        """
        Tag name to create, or None when tagging is disabled.

        An explicit tag name implies tagging.

        Falls back to ``LockCommit-<yyyyMMddHHmmss>`` when tagging is enabled
        without an explicit name.
        """
        if self.tag:
            return self.tag
        if not self.create_tag:
            return None
        stamp = (now or datetime.now()).strftime(CommitDefaults.TAG_TIMESTAMP_FORMAT)
        return f"{CommitDefaults.TAG_PREFIX}-{stamp}"


class LockSettings(BaseModel):
    """
    Complete pinlock configuration.

    Paths other than ``project_dir`` are relative: ``lock_file`` to each
    project directory, ``build_dir`` to each project directory,
    ``override_file`` and ``subprojects`` to the root project directory.
    """

    project_dir: Path = Path(".")
    build_dir: str = LockDefaults.BUILD_DIR
    lock_file: str = LockDefaults.LOCK_FILE
    configurations: List[str] = Field(default_factory=lambda: list(LockDefaults.CONFIGURATIONS))
    include_transitives: bool = LockDefaults.INCLUDE_TRANSITIVES
    override_file: Optional[str] = None
    override: Optional[str] = None
    ignore: bool = False
    use_generated_lock: bool = False
    subprojects: List[str] = Field(default_factory=list)
    report_file: Optional[str] = None
    commit: CommitSettings = Field(default_factory=CommitSettings)

    model_config = ConfigDict(extra="forbid")

    @field_validator("lock_file", "build_dir")
    @classmethod
    def validate_relative(cls, v: str, info) -> str:
        if not v or not v.strip():
            raise ValidationError(f"{info.field_name} cannot be empty")
        if PurePath(v).is_absolute():
            raise ValidationError(
                f"{info.field_name} must be relative to the project directory, got '{v}'"
            )
        return v

    @field_validator("configurations")
    @classmethod
    def validate_configurations(cls, v: List[str]) -> List[str]:
        names: List[str] = []
        for name in v:
            name = name.strip()
            if not name:
                raise ValidationError("Configuration names cannot be empty")
            if name not in names:
                names.append(name)
        if not names:
            raise ValidationError("At least one configuration must be selected")
        return names

    @field_validator("override")
    @classmethod
    def normalize_override(cls, v: Optional[str]) -> Optional[str]:
        # Syntax is checked by the override loader so errors name the entry
        if v is not None and not v.strip():
            return None
        return v
