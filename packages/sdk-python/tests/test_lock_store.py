"""Tests for the lock store."""

import json

import pytest

from pinlock_common import MalformedLockError
from pinlock_schema import lock_from_data
from pinlock_sdk.lock import (
    LockStore,
    lock_exists,
    parse_lock,
    read_lock,
    serialize_lock,
    write_lock,
)


class TestReadLock:
    """Tests for reading lock files."""

    def test_read_preserves_file_order(self, tmp_path):
        path = tmp_path / "dependencies.lock"
        path.write_text('{"z:z": {"locked": "1"}, "a:a": {"locked": "2"}}')
        lock = read_lock(path)
        assert list(lock) == ["z:z", "a:a"]
        assert lock["a:a"].locked == "2"

    def test_invalid_json_names_file(self, tmp_path):
        path = tmp_path / "dependencies.lock"
        path.write_text("{not json")
        with pytest.raises(MalformedLockError) as exc_info:
            read_lock(path)
        assert exc_info.value.file_name == "dependencies.lock"
        assert "dependencies.lock" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)

    def test_non_object_is_malformed(self, tmp_path):
        path = tmp_path / "deps.lock"
        path.write_text('["com.example:foo"]')
        with pytest.raises(MalformedLockError, match="deps.lock"):
            read_lock(path)

    def test_non_object_entry_is_malformed(self):
        with pytest.raises(MalformedLockError, match="override.lock"):
            parse_lock('{"com.example:foo": "1.0.0"}', file_name="override.lock")

    def test_non_string_locked_is_malformed(self):
        with pytest.raises(MalformedLockError):
            parse_lock('{"com.example:foo": {"locked": 1}}')

    def test_missing_file_is_malformed(self, tmp_path):
        with pytest.raises(MalformedLockError, match="missing.lock"):
            read_lock(tmp_path / "missing.lock")

    def test_empty_object_is_valid(self):
        assert parse_lock("{}") == {}


class TestWriteLock:
    """Tests for writing lock files."""

    def test_write_creates_parent_directories(self, tmp_path):
        path = tmp_path / "build" / "nested" / "dependencies.lock"
        write_lock(path, lock_from_data({"a:b": {"locked": "1.0"}}))
        assert path.is_file()

    def test_write_is_sorted_and_stable(self, tmp_path):
        lock = lock_from_data(
            {"z:z": {"requested": "1.+", "locked": "1.0"}, "a:a": {"locked": "2.0"}}
        )
        first = write_lock(tmp_path / "one.lock", lock).read_bytes()
        second = write_lock(tmp_path / "two.lock", lock).read_bytes()
        assert first == second
        text = first.decode()
        assert text.index('"a:a"') < text.index('"z:z"')
        assert text.index('"locked"') < text.index('"requested"')
        assert text.endswith("}\n")

    def test_round_trip_is_byte_identical(self, tmp_path):
        lock = lock_from_data(
            {
                "com.example:foo": {"locked": "1.0.0", "requested": "1.+"},
                "com.example:internal": {"project": True},
                "com.example:bar": {"locked": "2.0", "transitive": ["com.example:foo"]},
            }
        )
        path = write_lock(tmp_path / "dependencies.lock", lock)
        original = path.read_bytes()
        write_lock(path, read_lock(path))
        assert path.read_bytes() == original

    def test_extra_fields_survive_round_trip(self, tmp_path):
        path = tmp_path / "dependencies.lock"
        path.write_text('{"a:b": {"locked": "1", "viaPlatform": "bom"}}')
        write_lock(path, read_lock(path))
        assert json.loads(path.read_text()) == {"a:b": {"locked": "1", "viaPlatform": "bom"}}

    def test_no_temporary_files_left_behind(self, tmp_path):
        write_lock(tmp_path / "dependencies.lock", {})
        assert [p.name for p in tmp_path.iterdir()] == ["dependencies.lock"]

    def test_serialize_empty_lock(self):
        assert serialize_lock({}) == "{}\n"


class TestLockStore:
    """Tests for the LockStore facade."""

    def test_exists(self, tmp_path):
        store = LockStore()
        path = tmp_path / "dependencies.lock"
        assert not store.exists(path)
        store.write(path, lock_from_data({"a:b": {"locked": "1"}}))
        assert store.exists(path)
        assert lock_exists(path)
        assert store.read(path)["a:b"].locked == "1"

    def test_directory_is_not_a_lock(self, tmp_path):
        assert not lock_exists(tmp_path)

    def test_copy_is_byte_identical(self, tmp_path):
        store = LockStore()
        source = store.write(tmp_path / "build" / "dependencies.lock", lock_from_data({"a:b": {"locked": "1"}}))
        target = store.copy(source, tmp_path / "dependencies.lock")
        assert store.read_raw(target) == store.read_raw(source)
