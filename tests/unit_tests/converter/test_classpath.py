"""Unit tests for dependency-name and classpath assembly."""

from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from bloop_gradle.converter.classpath import (
    assemble_classpath,
    assemble_dependency_names,
)
from bloop_gradle.schemas import ResolvedArtifact


def _artifact(name: str) -> ResolvedArtifact:
    return ResolvedArtifact(
        group="org.acme", name=name, version="1.0", file=Path(f"/cache/{name}.jar")
    )


def test_strict_names_come_first_without_duplicates() -> None:
    """Keep strict names in front and drop inferred duplicates."""
    names = assemble_dependency_names(["lib-test", "lib"], ["lib", "core"])
    assert names == ("lib-test", "lib", "core")


def test_external_files_precede_project_outputs() -> None:
    """Order external artifacts before project classes directories."""
    classpath = assemble_classpath(
        [_artifact("guava"), _artifact("cats")],
        [Path("/workspace/lib/build/classes/scala/main")],
    )
    assert classpath == (
        Path("/cache/guava.jar"),
        Path("/cache/cats.jar"),
        Path("/workspace/lib/build/classes/scala/main"),
    )


def test_repeated_paths_appear_once() -> None:
    """Collapse repeated artifact files and project directories."""
    classes = Path("/workspace/lib/build/classes/scala/main")
    classpath = assemble_classpath([_artifact("guava"), _artifact("guava")], [classes, classes])
    assert classpath == (Path("/cache/guava.jar"), classes)


@given(
    external=st.lists(st.sampled_from(["a", "b", "c", "d", "e"]), unique=True),
    projects=st.lists(st.sampled_from(["lib", "core", "api"]), unique=True),
)
def test_classpath_holds_one_path_per_input(external: list[str], projects: list[str]) -> None:
    """Contain exactly |A ∪ P| paths for disjoint external and project inputs."""
    dirs = [Path(f"/workspace/{name}/build/classes/scala/main") for name in projects]

    classpath = assemble_classpath([_artifact(name) for name in external], dirs)

    assert len(classpath) == len(external) + len(projects)
    assert set(classpath) == {Path(f"/cache/{n}.jar") for n in external} | set(dirs)


@given(
    strict=st.lists(st.sampled_from(["x", "y", "z"])),
    inferred=st.lists(st.sampled_from(["y", "z", "w"])),
)
def test_dependency_names_are_an_idempotent_union(
    strict: list[str], inferred: list[str]
) -> None:
    """Always include every strict name and never repeat a name."""
    names = assemble_dependency_names(strict, inferred)

    assert len(names) == len(set(names))
    assert set(names) == set(strict) | set(inferred)
    assert names[: len(dict.fromkeys(strict))] == tuple(dict.fromkeys(strict))
    assert assemble_dependency_names(names, inferred) == names
