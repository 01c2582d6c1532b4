"""Unit tests for dependency classification."""

from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from bloop_gradle.converter.classifier import classify_artifacts, is_project_artifact
from bloop_gradle.schemas import ProjectDependency, ResolvedArtifact


def _artifact(group: str, name: str, version: str) -> ResolvedArtifact:
    return ResolvedArtifact(
        group=group,
        name=name,
        version=version,
        file=Path(f"/cache/{group}/{name}-{version}.jar"),
    )


def _dependency(group: str, name: str, version: str) -> ProjectDependency:
    return ProjectDependency(group=group, name=name, version=version, project=f":{name}")


_coordinates = st.tuples(
    st.sampled_from(["com.example", "org.acme"]),
    st.sampled_from(["lib", "core", "util", "api"]),
    st.sampled_from(["1.0", "1.1", "2.0"]),
)


def test_exact_coordinates_are_project_artifacts() -> None:
    """Classify an artifact as project-produced only on an exact triple match."""
    artifacts = [_artifact("com.example", "lib", "1.0"), _artifact("com.google", "guava", "31.1")]
    result = classify_artifacts(artifacts, [_dependency("com.example", "lib", "1.0")])

    assert [a.name for a in result.project_artifacts] == ["lib"]
    assert [a.name for a in result.external] == ["guava"]


def test_version_mismatch_stays_external() -> None:
    """Treat an artifact with a different version as a distinct external artifact."""
    artifact = _artifact("com.example", "lib", "0.9")
    result = classify_artifacts([artifact], [_dependency("com.example", "lib", "1.0")])

    assert result.external == (artifact,)
    assert result.project_artifacts == ()
    assert not is_project_artifact(artifact, [_dependency("com.example", "lib", "1.0")])


def test_no_project_dependencies_keeps_discovery_order() -> None:
    """Keep every artifact external and in discovery order."""
    artifacts = [_artifact("b", "b", "1"), _artifact("a", "a", "1")]
    result = classify_artifacts(artifacts, [])
    assert list(result.external) == artifacts


@given(
    artifacts=st.lists(_coordinates, unique=True, max_size=8),
    dependencies=st.lists(_coordinates, unique=True, max_size=5),
)
def test_classification_is_total_and_disjoint(
    artifacts: list[tuple[str, str, str]], dependencies: list[tuple[str, str, str]]
) -> None:
    """Every artifact lands in exactly one partition; matches never stay external."""
    resolved = [_artifact(*coords) for coords in artifacts]
    declared = [_dependency(*coords) for coords in dependencies]

    result = classify_artifacts(resolved, declared)

    assert len(result.external) + len(result.project_artifacts) == len(resolved)
    assert set(result.external).isdisjoint(result.project_artifacts)
    for artifact in result.external:
        assert artifact.coordinates not in set(dependencies)
    for artifact in result.project_artifacts:
        assert artifact.coordinates in set(dependencies)
