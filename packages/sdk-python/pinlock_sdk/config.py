"""
Settings Loading
================

Builds the LockSettings used by every other component. Sources, lowest to
highest precedence:

1. Defaults from pinlock_common.constants
2. ``pinlock.yaml`` in the project directory (or an explicit settings file)
3. Explicit keyword overrides (CLI options); None means "not given"

Example pinlock.yaml:

    lock_file: dependencies.lock
    configurations: [compileClasspath, runtimeClasspath]
    include_transitives: true
    subprojects: [core, web]
    commit:
      message: Update dependency locks
      remote_retries: 5
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from pinlock_common import LockDefaults, ValidationError, get_logger
from pinlock_schema import LockSettings

logger = get_logger(__name__)

# CLI-style flat keys that live under ``commit`` in the settings model
_COMMIT_KEYS = {
    "commit_message": "message",
    "commit_tag": "tag",
    "create_tag": "create_tag",
    "remote_retries": "remote_retries",
}


def read_settings_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML settings file.

    Raises:
        ValidationError: If the file is missing, not valid YAML, or not a mapping
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise ValidationError(
            f"Settings file not found: {path}\n"
            f"Make sure the file exists and the path is correct."
        )
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(
            f"Invalid YAML in settings file: {path}\n"
            f"Error: {str(e)}\n"
            f"Please check the YAML syntax."
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(
            f"Settings file must contain a mapping, got {type(data).__name__}: {path}"
        )
    return data


def _format_errors(error: PydanticValidationError) -> str:
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "settings"
        lines.append(f"  - {location}: {item['msg']}")
    return "\n".join(lines)


def load_settings(
    settings_file: Optional[Union[str, Path]] = None,
    project_dir: Optional[Union[str, Path]] = None,
    **overrides: Any,
) -> LockSettings:
    """
    Build validated settings.

    Args:
        settings_file: Explicit settings file; must exist when given
        project_dir: Root project directory (defaults to the settings file's
            directory, else the current directory)
        **overrides: Field values that win over the file; None values ignored.
            Commit fields may be given flat (commit_message, commit_tag,
            create_tag, remote_retries).

    Returns:
        LockSettings

    Raises:
        ValidationError: If the file or the merged values are invalid
    """
    if project_dir is not None:
        root = Path(project_dir)
    elif settings_file is not None:
        root = Path(settings_file).parent
    else:
        root = Path.cwd()

    data: Dict[str, Any] = {}
    source: Optional[Path] = None
    if settings_file is not None:
        source = Path(settings_file)
    elif (root / LockDefaults.SETTINGS_FILE).is_file():
        source = root / LockDefaults.SETTINGS_FILE
    if source is not None:
        data = read_settings_file(source)
        logger.debug("Settings file loaded", path=str(source))

    commit = data.get("commit") or {}
    if not isinstance(commit, dict):
        raise ValidationError(
            f"'commit' in settings file {source} must be a mapping, "
            f"got {type(commit).__name__}"
        )
    commit = dict(commit)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in _COMMIT_KEYS:
            commit[_COMMIT_KEYS[key]] = value
        else:
            data[key] = value
    if commit:
        data["commit"] = commit
    data["project_dir"] = root

    try:
        return LockSettings.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid pinlock settings:\n{_format_errors(e)}") from e
