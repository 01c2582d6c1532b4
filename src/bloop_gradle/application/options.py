"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_TARGET_DIR = Path(".bloop")


@dataclass(frozen=True)
class ConverterParameters:
    """Parameters that would come from the user's ``bloop { }`` block.

    Parameters
    ----------
    target_dir : Path
        Directory receiving the generated ``<project>.json`` files.
    main_source_set : str
        Source set whose configuration keeps the bare project name.
    std_lib_name : str
        Artifact name of the Scala standard library.
    compiler_name : str
        Compiler artifact name recorded in the Scala configuration.
    toolchain_dir_name : str
        Directory name under ``<build>/classes`` receiving compiled classes.
    scala_source_extension : str
        Extension identifying Scala sources for the java-only fallback.
    strict_dependencies : Mapping[str, tuple[str, ...]]
        Project path to dependency names that cannot be inferred from the
        host model (e.g. test-on-test dependencies).
    """

    target_dir: Path = DEFAULT_TARGET_DIR
    main_source_set: str = "main"
    std_lib_name: str = "scala-library"
    compiler_name: str = "scala-compiler"
    toolchain_dir_name: str = "scala"
    scala_source_extension: str = ".scala"
    strict_dependencies: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def strict_dependencies_for(self, project_path: str) -> tuple[str, ...]:
        return tuple(self.strict_dependencies.get(project_path, ()))
