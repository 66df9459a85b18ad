"""
Tests for pinlock schema models

Tests cover:
- LockEntry forceability and lossless dumps
- Lock validation
- ForceDirective notation
- LockSettings and CommitSettings validation
"""

from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from pinlock_common import ValidationError
from pinlock_schema import (
    CommitSettings,
    ForceDirective,
    LockEntry,
    LockSettings,
    lock_from_data,
    lock_to_data,
)

# ============================================================================
# Lock Models
# ============================================================================


class TestLockEntry:
    """Tests for LockEntry."""

    def test_locked_entry_is_forceable(self):
        entry = LockEntry(locked="1.0.0")
        assert entry.is_forceable

    def test_entry_without_locked_is_not_forceable(self):
        assert not LockEntry().is_forceable
        assert not LockEntry(requested="1.+").is_forceable

    def test_empty_locked_is_not_forceable(self):
        assert not LockEntry(locked="").is_forceable

    def test_extra_fields_are_preserved(self):
        entry = LockEntry.model_validate({"locked": "1.0.0", "transitive": ["a:b"]})
        assert entry.to_json_dict() == {"locked": "1.0.0", "transitive": ["a:b"]}

    def test_unset_fields_are_not_dumped(self):
        entry = LockEntry.model_validate({"project": True})
        assert entry.to_json_dict() == {"project": True}

    def test_explicit_null_is_kept(self):
        entry = LockEntry.model_validate({"locked": None})
        assert entry.to_json_dict() == {"locked": None}
        assert not entry.is_forceable

    def test_non_string_locked_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            LockEntry.model_validate({"locked": 1})


class TestLock:
    """Tests for lock validation helpers."""

    def test_lock_preserves_order(self, sample_lock_data):
        lock = lock_from_data(sample_lock_data)
        assert list(lock) == ["com.example:foo", "com.example:internal", "com.example:bar"]

    def test_lock_round_trips_to_data(self, sample_lock_data):
        assert lock_to_data(lock_from_data(sample_lock_data)) == sample_lock_data

    def test_non_object_entry_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            lock_from_data({"com.example:foo": "1.0.0"})

    def test_non_object_lock_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            lock_from_data(["com.example:foo"])


class TestForceDirective:
    """Tests for ForceDirective."""

    def test_notation(self):
        directive = ForceDirective("com.example:foo", "1.2.0")
        assert directive.notation == "com.example:foo:1.2.0"
        assert str(directive) == "com.example:foo:1.2.0"

    def test_directives_compare_by_value(self):
        assert ForceDirective("a:b", "1") == ForceDirective("a:b", "1")
        assert ForceDirective("a:b", "1") != ForceDirective("a:b", "2")


# ============================================================================
# Settings Models
# ============================================================================


class TestLockSettings:
    """Tests for LockSettings."""

    def test_defaults(self):
        settings = LockSettings()
        assert settings.lock_file == "dependencies.lock"
        assert settings.build_dir == "build"
        assert settings.configurations == ["testRuntime"]
        assert settings.include_transitives is False
        assert settings.ignore is False
        assert settings.use_generated_lock is False
        assert settings.project_dir == Path(".")
        assert settings.commit.remote_retries == 3

    def test_absolute_lock_file_is_rejected(self):
        with pytest.raises(ValidationError, match="relative"):
            LockSettings(lock_file="/tmp/dependencies.lock")

    def test_empty_build_dir_is_rejected(self):
        with pytest.raises(ValidationError, match="build_dir"):
            LockSettings(build_dir=" ")

    def test_configurations_are_deduplicated(self):
        settings = LockSettings(configurations=["compile", " runtime ", "compile"])
        assert settings.configurations == ["compile", "runtime"]

    def test_empty_configurations_are_rejected(self):
        with pytest.raises(ValidationError):
            LockSettings(configurations=[])

    def test_blank_override_becomes_none(self):
        assert LockSettings(override="  ").override is None

    def test_unknown_field_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            LockSettings.model_validate({"lockfile": "x.lock"})


class TestCommitSettings:
    """Tests for CommitSettings."""

    def test_no_tag_by_default(self):
        assert CommitSettings().resolve_tag() is None

    def test_explicit_tag_implies_tagging(self):
        commit = CommitSettings(tag="locks-1")
        assert commit.resolve_tag() == "locks-1"

    def test_generated_tag_uses_timestamp(self):
        commit = CommitSettings(create_tag=True)
        tag = commit.resolve_tag(datetime(2024, 3, 5, 14, 7, 9))
        assert tag == "LockCommit-20240305140709"

    def test_negative_retries_rejected(self):
        with pytest.raises(ValidationError, match="remote_retries"):
            CommitSettings(remote_retries=-1)

    def test_empty_message_rejected(self):
        with pytest.raises(ValidationError):
            CommitSettings(message="")
