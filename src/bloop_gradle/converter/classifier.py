"""Partition resolved artifacts into external and project-produced ones."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from bloop_gradle.schemas import ProjectDependency, ResolvedArtifact


@dataclass(frozen=True)
class ClassifiedArtifacts:
    """Disjoint split of a configuration's resolved artifacts."""

    external: tuple[ResolvedArtifact, ...]
    project_artifacts: tuple[ResolvedArtifact, ...]


def is_project_artifact(
    artifact: ResolvedArtifact, project_dependencies: Iterable[ProjectDependency]
) -> bool:
    """Return ``True`` when a project dependency has exactly the artifact's coordinates."""
    return any(dep.coordinates == artifact.coordinates for dep in project_dependencies)


def classify_artifacts(
    artifacts: Iterable[ResolvedArtifact],
    project_dependencies: Iterable[ProjectDependency],
) -> ClassifiedArtifacts:
    """Split artifacts into external ones and those built by sibling projects.

    Matching is exact on ``(group, name, version)``; an artifact whose version
    differs from the declared project dependency stays external.

    Parameters
    ----------
    artifacts : Iterable[ResolvedArtifact]
        Resolved artifacts of the compile configuration, in discovery order.
    project_dependencies : Iterable[ProjectDependency]
        Declared inter-project dependencies of the same configuration.

    Returns
    -------
    ClassifiedArtifacts
        External and project artifacts, each in discovery order.
    """
    project_coordinates = {dep.coordinates for dep in project_dependencies}
    external: list[ResolvedArtifact] = []
    produced: list[ResolvedArtifact] = []
    for artifact in artifacts:
        if artifact.coordinates in project_coordinates:
            produced.append(artifact)
        else:
            external.append(artifact)
    return ClassifiedArtifacts(external=tuple(external), project_artifacts=tuple(produced))
