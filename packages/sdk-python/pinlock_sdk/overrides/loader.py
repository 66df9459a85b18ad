"""
Override Loading
================

Builds the override map (coordinate -> version) from two sources:

1. An override file, in lock file format. Each entry's ``locked`` version is
   taken; entries without one are skipped.
2. An inline override string: ``group:artifact:version`` entries separated by
   commas, as given on the command line.

Precedence: file first, inline second; an inline entry replaces a file entry
for the same coordinate. When ``ignore`` is set neither source is read.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from pinlock_common import InvalidOverrideError, Patterns, get_logger

from ..lock.store import LockStore

logger = get_logger(__name__)

OverrideMap = Dict[str, str]


def parse_inline_overrides(spec: str) -> OverrideMap:
    """
    Parse an inline override string.

    Args:
        spec: e.g. "com.example:foo:1.2.0,com.example:bar:3.0.0"

    Returns:
        Override map in entry order (a repeated coordinate keeps its last version)

    Raises:
        InvalidOverrideError: If an entry is not exactly group:artifact:version

    Examples:
        >>> parse_inline_overrides("com.example:foo:1.2.0")
        {'com.example:foo': '1.2.0'}
    """
    overrides: OverrideMap = {}
    for raw_entry in spec.split(Patterns.OVERRIDE_SEPARATOR):
        entry = raw_entry.strip()
        if not entry:
            continue
        fields = [part.strip() for part in entry.split(Patterns.COORDINATE_SEPARATOR)]
        if len(fields) != 3:
            raise InvalidOverrideError(
                entry, f"expected group:artifact:version, got {len(fields)} field(s)"
            )
        if not all(fields):
            raise InvalidOverrideError(entry, "group, artifact and version must be non-empty")
        group, artifact, version = fields
        overrides[f"{group}{Patterns.COORDINATE_SEPARATOR}{artifact}"] = version
        logger.debug("Override added", entry=entry)
    return overrides


def load_override_file(path: Union[str, Path], store: Optional[LockStore] = None) -> OverrideMap:
    """Project an override file's locked versions into an override map."""
    lock = (store or LockStore()).read(path)
    overrides = {
        coordinate: entry.locked
        for coordinate, entry in lock.items()
        if entry.is_forceable
    }
    logger.debug("Override file loaded", path=str(path), overrides=len(overrides))
    return overrides


def merge_overrides(file_overrides: OverrideMap, inline_overrides: OverrideMap) -> OverrideMap:
    """
    Merge the two override sources.

    File entries are applied first and inline entries second, so inline wins
    on collision. Key order: file entries, then inline-only entries.
    """
    merged: OverrideMap = dict(file_overrides)
    merged.update(inline_overrides)
    return merged


def load_overrides(
    override_file: Optional[Union[str, Path]] = None,
    inline_overrides: Optional[str] = None,
    ignore: bool = False,
    store: Optional[LockStore] = None,
) -> OverrideMap:
    """
    Load and merge overrides.

    Args:
        override_file: Path to an override file in lock format
        inline_overrides: Comma-separated group:artifact:version entries
        ignore: Return an empty map without reading either source
        store: Lock store used to read the override file

    Returns:
        Merged override map

    Raises:
        MalformedLockError: If the override file is unreadable or invalid
        InvalidOverrideError: If an inline entry is malformed
    """
    if ignore:
        return {}

    file_overrides: OverrideMap = {}
    if override_file is not None:
        file_overrides = load_override_file(override_file, store=store)

    inline: OverrideMap = {}
    if inline_overrides:
        inline = parse_inline_overrides(inline_overrides)

    return merge_overrides(file_overrides, inline)
