"""
Dependency Report Resolver
==========================

Resolver backed by a dependency report written by the build tool. The report
records, per configuration, what the build resolved:

    {
      "configurations": {
        "testRuntime": [
          {"coordinate": "com.example:foo", "requested": "1.+", "resolved": "1.2.0"},
          {"coordinate": "com.example:bar", "resolved": "2.0.1",
           "transitive": true, "via": ["com.example:foo"]},
          {"coordinate": "com.example:internal", "project": true}
        ]
      }
    }

Lock entries produced:
- first-level dependency: {"locked", "requested"}
- transitive dependency (only with include_transitives): adds
  "transitive": [sorted parent coordinates]
- project dependency: {"project": true}, never carries a locked version

Forces replace the resolved version of the coordinates they name. When a
coordinate appears in several configurations, configurations are visited in
sorted order and the last visited version is kept.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from pinlock_common import ResolutionError, get_logger
from pinlock_schema import ForceDirective, Lock, LockEntry

logger = get_logger(__name__)


class ReportEntry(BaseModel):
    """One resolved dependency in a configuration."""

    coordinate: str
    requested: Optional[str] = None
    resolved: Optional[str] = None
    transitive: bool = False
    project: bool = False
    via: List[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class DependencyReport(BaseModel):
    """Resolution results keyed by configuration name."""

    configurations: Dict[str, List[ReportEntry]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")


def load_report(path: Union[str, Path]) -> DependencyReport:
    """
    Read a dependency report.

    Raises:
        ResolutionError: If the report is missing or invalid
    """
    report_path = Path(path)
    try:
        data = json.loads(report_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ResolutionError(
            f"Dependency report not found: {report_path}\n"
            f"Run the build's dependency report task first."
        ) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ResolutionError(f"Invalid dependency report {report_path}: {e}") from e

    try:
        return DependencyReport.model_validate(data)
    except PydanticValidationError as e:
        raise ResolutionError(f"Invalid dependency report {report_path}: {e}") from e


class ReportResolver:
    """
    Resolver reading a dependency report.

    Examples:
        >>> resolver = ReportResolver("build/dependency-report.json")
        >>> lock = resolver.resolve({"testRuntime"}, False, [])
    """

    def __init__(self, report_path: Union[str, Path]):
        self.report_path = Path(report_path)

    def resolve(
        self,
        configuration_names: Set[str],
        include_transitives: bool,
        forces: List[ForceDirective],
    ) -> Lock:
        report = load_report(self.report_path)

        missing = sorted(set(configuration_names) - set(report.configurations))
        if missing:
            raise ResolutionError(
                f"Configuration(s) not found in dependency report: {', '.join(missing)}\n"
                f"Available: {', '.join(sorted(report.configurations)) or 'none'}"
            )

        forced = {directive.coordinate: directive.version for directive in forces}
        records: Dict[str, Dict[str, object]] = {}
        parents: Dict[str, Set[str]] = {}
        direct: Set[str] = set()

        for name in sorted(configuration_names):
            for item in report.configurations[name]:
                if item.project:
                    records[item.coordinate] = {"project": True}
                    continue
                if item.transitive and not include_transitives:
                    continue

                version = forced.get(item.coordinate, item.resolved)
                if not version:
                    raise ResolutionError(
                        f"Dependency '{item.coordinate}' in configuration '{name}' was not resolved"
                    )

                record: Dict[str, object] = {"locked": version}
                if item.requested is not None:
                    record["requested"] = item.requested
                records[item.coordinate] = record

                if item.transitive:
                    parents.setdefault(item.coordinate, set()).update(item.via)
                else:
                    direct.add(item.coordinate)

        lock: Lock = {}
        for coordinate in sorted(records):
            record = records[coordinate]
            if coordinate in parents and coordinate not in direct and "locked" in record:
                record["transitive"] = sorted(parents[coordinate])
            lock[coordinate] = LockEntry.model_validate(record)

        logger.info(
            "Resolved dependency report",
            report=str(self.report_path),
            configurations=",".join(sorted(configuration_names)),
            entries=len(lock),
        )
        return lock
