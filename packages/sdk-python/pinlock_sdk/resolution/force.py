"""
Force Resolution
================

Combines a lock (optional) with an override map into the ordered list of
force directives handed to the resolver or resolution strategy.

Resolution Rules (with a lock):
1. Every forceable lock entry is forced, in lock order. An override for the
   same coordinate replaces the locked version.
2. Every override whose coordinate is absent from the lock is forced after
   the lock-derived directives, in override order.
3. Lock entries without a locked version are never forced. An override that
   targets such an entry is dropped (see ``shadowed_overrides``).

Without a lock every override is forced, in override order.

These functions are pure: no I/O and no logging.
"""

from typing import Dict, List

from pinlock_schema import ForceDirective, Lock


def _require(value, name: str) -> None:
    if value is None:
        raise TypeError(f"{name} must not be None")


def resolve_with_lock(lock: Lock, overrides: Dict[str, str]) -> List[ForceDirective]:
    """
    Produce force directives from a lock and overrides.

    Examples:
        >>> lock = lock_from_data({"g:a": {"locked": "1.0"}, "g:p": {}})
        >>> resolve_with_lock(lock, {"g:b": "2.0"})
        [ForceDirective(coordinate='g:a', version='1.0'), ForceDirective(coordinate='g:b', version='2.0')]
    """
    _require(lock, "lock")
    _require(overrides, "overrides")

    forces: List[ForceDirective] = []
    for coordinate, entry in lock.items():
        if not entry.is_forceable:
            continue
        version = overrides[coordinate] if coordinate in overrides else entry.locked
        forces.append(ForceDirective(coordinate, version))

    for coordinate, version in overrides.items():
        if coordinate not in lock:
            forces.append(ForceDirective(coordinate, version))

    return forces


def resolve_without_lock(overrides: Dict[str, str]) -> List[ForceDirective]:
    """Produce one force directive per override, in override order."""
    _require(overrides, "overrides")
    return [ForceDirective(coordinate, version) for coordinate, version in overrides.items()]


def shadowed_overrides(lock: Lock, overrides: Dict[str, str]) -> Dict[str, str]:
    """Overrides targeting lock entries that carry no locked version."""
    _require(lock, "lock")
    _require(overrides, "overrides")
    return {
        coordinate: version
        for coordinate, version in overrides.items()
        if coordinate in lock and not lock[coordinate].is_forceable
    }
