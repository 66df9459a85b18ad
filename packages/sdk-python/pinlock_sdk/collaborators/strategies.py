"""
Resolution Strategies
=====================

Strategy adapters that hand forces to the build. The build tool reads one
force list per configuration from ``<build_dir>/forces/<configuration>.txt``,
one ``group:artifact:version`` per line.
"""

from pathlib import Path
from typing import List

from pinlock_common import LockDefaults, get_logger
from pinlock_schema import ForceDirective, LockSettings

from ..layout import root_layout
from ..lock.store import write_text_atomic

logger = get_logger(__name__)


class ForcesFileStrategy:
    """Writes the forces for one configuration to a text file."""

    def __init__(self, forces_dir: Path, configuration: str):
        self.configuration = configuration
        self.path = Path(forces_dir) / f"{configuration}.txt"

    def apply_forces(self, forces: List[ForceDirective]) -> None:
        content = "".join(f"{directive.notation}\n" for directive in forces)
        write_text_atomic(self.path, content)
        logger.debug("Forces written", configuration=self.configuration, path=str(self.path))

    def __repr__(self) -> str:
        return f"ForcesFileStrategy(configuration={self.configuration!r}, path={str(self.path)!r})"


def forces_file_strategies(settings: LockSettings) -> List[ForcesFileStrategy]:
    """One strategy per configured resolution context."""
    forces_dir = root_layout(settings).build_path / LockDefaults.FORCES_DIR
    return [ForcesFileStrategy(forces_dir, name) for name in settings.configurations]
