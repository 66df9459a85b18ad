"""
pinlock Lock File Schema

Pydantic models for the lock/override file format and the force directives
produced from it.

Format (one JSON object keyed by coordinate):

    {
      "com.example:foo": {"locked": "1.0.0", "requested": "1.+"},
      "com.example:internal": {"project": true}
    }

Design Principles:
- Pure validation: receives parsed data, returns typed objects
- No file I/O: reading and writing is the SDK's LockStore responsibility
- Unknown entry fields are preserved so round-trips are lossless
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

from pinlock_common.constants import Patterns


class LockEntry(BaseModel):
    """
    Resolution record for one coordinate.

    ``locked`` is the version to force. Entries without it (internal/project
    references) are kept for bookkeeping but never forced. ``requested`` is
    informational only.
    """

    locked: Optional[str] = None
    requested: Optional[str] = None

    model_config = ConfigDict(extra="allow")

    @property
    def is_forceable(self) -> bool:
        """True when the entry carries a non-empty locked version."""
        return bool(self.locked)

    def to_json_dict(self) -> Dict[str, Any]:
        """Dump only the fields that were present, extras included."""
        return self.model_dump(mode="json", exclude_unset=True)


Lock = Dict[str, LockEntry]
"""Mapping of coordinate -> LockEntry, in file order."""

LOCK_ADAPTER: TypeAdapter = TypeAdapter(Dict[str, LockEntry])


def lock_from_data(data: Any) -> Lock:
    """Validate parsed JSON into a Lock (raises pydantic.ValidationError)."""
    return LOCK_ADAPTER.validate_python(data)


def lock_to_data(lock: Lock) -> Dict[str, Dict[str, Any]]:
    return {coordinate: entry.to_json_dict() for coordinate, entry in lock.items()}


@dataclass(frozen=True)
class ForceDirective:
    """Instruction to pin a coordinate to a version during resolution."""

    coordinate: str
    version: str

    @property
    def notation(self) -> str:
        """group:artifact:version, as understood by resolution strategies."""
        return f"{self.coordinate}{Patterns.COORDINATE_SEPARATOR}{self.version}"

    def __str__(self) -> str:
        return self.notation
