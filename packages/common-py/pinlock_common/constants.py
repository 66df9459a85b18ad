"""
pinlock Shared Constants

Single source of truth for defaults shared by the schema, SDK and CLI packages.
Grouped into namespaced classes; module-level aliases are kept for the values
that are imported most often.

Usage:
    from pinlock_common.constants import LockDefaults

    lock_name = LockDefaults.LOCK_FILE
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================


class VersionInfo:
    """Version information for pinlock."""

    PINLOCK_VERSION = "0.1.0"
    """Current pinlock version"""


# =============================================================================
# LOCK DEFAULTS
# =============================================================================


class LockDefaults:
    """Defaults for lock generation and application."""

    LOCK_FILE = "dependencies.lock"
    """Lock file name, relative to each project directory"""

    BUILD_DIR = "build"
    """Build output directory holding the generated lock"""

    CONFIGURATIONS = ["testRuntime"]
    """Dependency configurations included when generating a lock"""

    INCLUDE_TRANSITIVES = False
    """Whether transitive dependencies are recorded in generated locks"""

    SETTINGS_FILE = "pinlock.yaml"
    """Optional settings file looked up in the project directory"""

    FORCES_DIR = "forces"
    """Directory under the build dir where force lists are written"""

    REPORT_FILE = "dependency-report.json"
    """Dependency report read by the report resolver, under the build dir"""


# =============================================================================
# COMMIT DEFAULTS
# =============================================================================


class CommitDefaults:
    """Defaults for committing canonical locks to source control."""

    MESSAGE = "Committing dependency lock files"
    """Default commit message"""

    CREATE_TAG = False
    """Whether a tag is created alongside the commit"""

    TAG_PREFIX = "LockCommit"
    """Prefix of generated tag names (LockCommit-<timestamp>)"""

    TAG_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
    """strftime format of the generated tag suffix"""

    REMOTE_RETRIES = 3
    """Retries for the remote push before the commit is considered failed"""


# =============================================================================
# FORMATS
# =============================================================================


class Patterns:
    """Separators used by coordinate and override notations."""

    COORDINATE_SEPARATOR = ":"
    """Separator between group, artifact and version"""

    OVERRIDE_SEPARATOR = ","
    """Separator between inline override entries"""

    JSON_INDENT = 2
    """Indentation used when serializing lock files"""


LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log levels for the CLI"""


# =============================================================================
# CONVENIENCE ALIASES
# =============================================================================

PINLOCK_VERSION = VersionInfo.PINLOCK_VERSION
