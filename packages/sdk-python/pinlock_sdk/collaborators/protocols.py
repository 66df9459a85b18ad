"""
Collaborator Interfaces
=======================

pinlock does not resolve dependency graphs, apply forces to a build, or talk
to source control itself. These protocols describe the collaborators that do.
"""

from typing import List, Optional, Protocol, Set, runtime_checkable

from pinlock_schema import ForceDirective, Lock


@runtime_checkable
class Resolver(Protocol):
    """Resolves the selected configurations, honoring forces, into a Lock."""

    def resolve(
        self,
        configuration_names: Set[str],
        include_transitives: bool,
        forces: List[ForceDirective],
    ) -> Lock:
        ...


@runtime_checkable
class ResolutionStrategy(Protocol):
    """Receives forces for one dependency-resolution context."""

    def apply_forces(self, forces: List[ForceDirective]) -> None:
        ...


@runtime_checkable
class Scm(Protocol):
    """
    Commits files to source control.

    Remote operations are retried up to ``retries`` times; returns False when
    the commit could not be completed.
    """

    def commit(
        self,
        paths: List[str],
        message: str,
        tag: Optional[str],
        retries: int,
    ) -> bool:
        ...
