"""
Lock Store
==========

Reads and writes the lock file format: one JSON object mapping
``group:artifact`` coordinates to resolution records.

Guarantees:
- Reads fail with MalformedLockError naming the file; nothing is retried
- Writes are stable (sorted keys, fixed indent, trailing newline) so two
  writes of the same lock are byte-identical
- Writes go to a temporary sibling and are renamed into place, so a lock file
  is either the previous complete file or the new complete file
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError as PydanticValidationError

from pinlock_common import MalformedLockError, Patterns, get_logger
from pinlock_schema import Lock, lock_from_data, lock_to_data

logger = get_logger(__name__)

PathLike = Union[str, Path]


def serialize_lock(lock: Lock) -> str:
    """Serialize a lock to its canonical text form."""
    return json.dumps(lock_to_data(lock), indent=Patterns.JSON_INDENT, sort_keys=True) + "\n"


def parse_lock(raw: str, file_name: str = "<lock>") -> Lock:
    """
    Parse lock text.

    Args:
        raw: File content
        file_name: Name reported in errors

    Raises:
        MalformedLockError: If the content is not JSON, not an object, or an
            entry is not an object with string ``locked``/``requested`` fields
    """
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.debug("Unreadable json file", file=file_name, content=raw[:200])
        raise MalformedLockError(file_name, cause=e) from e

    if not isinstance(payload, dict):
        raise MalformedLockError(
            file_name,
            cause=TypeError(f"expected a JSON object, got {type(payload).__name__}"),
        )

    try:
        return lock_from_data(payload)
    except PydanticValidationError as e:
        raise MalformedLockError(file_name, cause=e) from e


def read_lock(path: PathLike) -> Lock:
    """Read and parse a lock file."""
    lock_path = Path(path)
    try:
        raw = lock_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Lock file unreadable", path=str(lock_path))
        raise MalformedLockError(lock_path.name, cause=e) from e
    return parse_lock(raw, file_name=lock_path.name)


def write_text_atomic(path: PathLike, content: str) -> Path:
    """Write text to ``path`` via a temporary sibling and an atomic rename."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return target


def write_lock(path: PathLike, lock: Lock) -> Path:
    """Serialize ``lock`` to ``path``, creating parent directories."""
    target = write_text_atomic(path, serialize_lock(lock))
    logger.debug("Lock written", path=str(target), entries=len(lock))
    return target


def lock_exists(path: PathLike) -> bool:
    return Path(path).is_file()


class LockStore:
    """
    Lock file operations bundled for injection into the lifecycle.

    Examples:
        >>> store = LockStore()
        >>> store.write("build/dependencies.lock", lock)
        >>> store.read("build/dependencies.lock") == lock
        True
    """

    def read(self, path: PathLike) -> Lock:
        return read_lock(path)

    def write(self, path: PathLike, lock: Lock) -> Path:
        return write_lock(path, lock)

    def exists(self, path: PathLike) -> bool:
        return lock_exists(path)

    def read_raw(self, path: PathLike) -> bytes:
        """Exact bytes of a lock file, without parsing."""
        return Path(path).read_bytes()

    def copy(self, source: PathLike, target: PathLike) -> Path:
        """Copy a lock file byte-for-byte, atomically replacing ``target``."""
        return write_text_atomic(target, self.read_raw(source).decode("utf-8"))
