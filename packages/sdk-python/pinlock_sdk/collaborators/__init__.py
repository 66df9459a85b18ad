"""
Collaborators
=============

Interfaces for the components pinlock drives but does not implement, plus the
adapters shipped with the CLI:

- ReportResolver: resolves from a build tool's dependency report
- ForcesFileStrategy: hands forces to the build as text files
- GitScm: commits lock files with git
"""

from .git import GitScm
from .protocols import ResolutionStrategy, Resolver, Scm
from .report import DependencyReport, ReportEntry, ReportResolver, load_report
from .strategies import ForcesFileStrategy, forces_file_strategies

__all__ = [
    "Resolver",
    "ResolutionStrategy",
    "Scm",
    "DependencyReport",
    "ReportEntry",
    "ReportResolver",
    "load_report",
    "ForcesFileStrategy",
    "forces_file_strategies",
    "GitScm",
]
