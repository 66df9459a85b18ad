"""Override loading and merging."""

from .loader import (
    OverrideMap,
    load_override_file,
    load_overrides,
    merge_overrides,
    parse_inline_overrides,
)

__all__ = [
    "OverrideMap",
    "load_override_file",
    "load_overrides",
    "merge_overrides",
    "parse_inline_overrides",
]
