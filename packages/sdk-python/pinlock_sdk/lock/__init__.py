"""Lock file reading and writing."""

from .store import (
    LockStore,
    lock_exists,
    parse_lock,
    read_lock,
    serialize_lock,
    write_lock,
    write_text_atomic,
)

__all__ = [
    "LockStore",
    "lock_exists",
    "parse_lock",
    "read_lock",
    "serialize_lock",
    "write_lock",
    "write_text_atomic",
]
