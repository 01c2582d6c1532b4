"""Dependency-name and classpath assembly."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from bloop_gradle.schemas import ResolvedArtifact


def _unique[T](items: Iterable[T]) -> tuple[T, ...]:
    return tuple(dict.fromkeys(items))


def assemble_dependency_names(
    strict: Iterable[str], inferred: Iterable[str]
) -> tuple[str, ...]:
    """Union of strict and inferred project names, strict names first."""
    return _unique([*strict, *inferred])


def assemble_classpath(
    external: Iterable[ResolvedArtifact], project_classes_dirs: Iterable[Path]
) -> tuple[Path, ...]:
    """Build the compile classpath.

    External artifact files come first in discovery order, followed by the
    classes directories of referenced projects. Each path appears once.
    """
    return _unique([*(artifact.file for artifact in external), *project_classes_dirs])
