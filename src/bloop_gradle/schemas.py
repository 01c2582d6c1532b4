"""Pydantic schemas for runtime validation of build snapshots and settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bloop_gradle.types import Coordinates, ProjectPath, SourceSetName


class _Snapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ResolvedArtifact(_Snapshot):
    """Dependency coordinate already resolved to a file by the host."""

    group: str
    name: str
    version: str
    classifier: str | None = None
    file: Path

    @property
    def coordinates(self) -> Coordinates:
        return (self.group, self.name, self.version)


class ProjectDependency(_Snapshot):
    """Declared dependency on another project of the same build.

    ``group``/``name``/``version`` are the coordinates the host resolves the
    dependency to; ``project`` is the owning project's path.
    """

    group: str
    name: str
    version: str
    project: ProjectPath
    source_set: SourceSetName = "main"

    @property
    def coordinates(self) -> Coordinates:
        return (self.group, self.name, self.version)


class ResolvedConfiguration(_Snapshot):
    """Resolved dependency configuration (e.g. ``compileClasspath``)."""

    name: str
    artifacts: tuple[ResolvedArtifact, ...] = ()
    project_dependencies: tuple[ProjectDependency, ...] = ()
    resolution_error: str | None = None


class ScalaCompileOptions(_Snapshot):
    """Subset of Gradle's ``ScalaCompileOptions`` used to derive scalac flags."""

    deprecation: bool = True
    unchecked: bool = True
    optimize: bool = False
    debug_level: str | None = None
    encoding: str | None = None
    logging_phases: tuple[str, ...] | None = None
    additional_parameters: tuple[str, ...] = ()


class ScalaCompileTask(_Snapshot):
    """Scala compile task of a source set with its resolved compiler classpath."""

    options: ScalaCompileOptions = ScalaCompileOptions()
    scala_classpath: tuple[Path, ...] = ()


class JavaCompileOptions(_Snapshot):
    """Subset of Gradle's ``CompileOptions`` relevant to javac main options."""

    source_compatibility: str | None = None
    target_compatibility: str | None = None
    release: int | None = Field(default=None, ge=6)
    destination_dir: Path | None = None
    encoding: str | None = None
    debug: bool = True
    debug_level: str | None = None
    warnings: bool = True
    deprecation: bool = False
    verbose: bool = False
    boot_classpath: tuple[Path, ...] | None = None
    extension_dirs: str | None = None
    annotation_processor_path: tuple[Path, ...] | None = None
    generated_sources_dir: Path | None = None
    header_output_dir: Path | None = None
    compiler_args: tuple[str, ...] = ()


class JavaCompileTask(_Snapshot):
    """Java compile task of a source set."""

    options: JavaCompileOptions = JavaCompileOptions()


class SourceSetSnapshot(_Snapshot):
    """Named group of sources with its compile configuration name."""

    name: SourceSetName
    sources: tuple[Path, ...] = ()
    compile_configuration: str

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("source set name cannot be empty.")
        return value


class ProjectSnapshot(_Snapshot):
    """Read-only view of one project of the build."""

    path: ProjectPath
    name: str
    project_dir: Path
    build_dir: Path
    source_sets: tuple[SourceSetSnapshot, ...] = ()
    configurations: dict[str, ResolvedConfiguration] = Field(default_factory=dict)
    scala_compile_tasks: dict[str, ScalaCompileTask] = Field(default_factory=dict)
    java_compile_tasks: dict[str, JavaCompileTask] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _validate_source_sets(self) -> ProjectSnapshot:
        seen: set[str] = set()
        for source_set in self.source_sets:
            if source_set.name in seen:
                raise ValueError(
                    f"duplicate source set '{source_set.name}' in project {self.path}."
                )
            seen.add(source_set.name)
            if source_set.compile_configuration not in self.configurations:
                raise ValueError(
                    f"source set '{source_set.name}' of project {self.path} uses "
                    f"unknown configuration '{source_set.compile_configuration}'."
                )
        return self

    def source_set(self, name: SourceSetName) -> SourceSetSnapshot | None:
        for source_set in self.source_sets:
            if source_set.name == name:
                return source_set
        return None


class BuildSnapshot(_Snapshot):
    """Immutable snapshot of every project taking part in the conversion."""

    root_dir: Path | None = None
    projects: tuple[ProjectSnapshot, ...] = ()

    @model_validator(mode="after")
    def _validate_references(self) -> BuildSnapshot:
        by_path: dict[str, ProjectSnapshot] = {}
        for project in self.projects:
            if project.path in by_path:
                raise ValueError(f"duplicate project path '{project.path}'.")
            by_path[project.path] = project

        for project in self.projects:
            for configuration in project.configurations.values():
                for dependency in configuration.project_dependencies:
                    owner = by_path.get(dependency.project)
                    if owner is None:
                        raise ValueError(
                            f"project {project.path} depends on unknown project "
                            f"'{dependency.project}'."
                        )
                    if owner.source_set(dependency.source_set) is None:
                        raise ValueError(
                            f"project {project.path} depends on missing source set "
                            f"'{dependency.source_set}' of {dependency.project}."
                        )
        return self

    def project(self, path: ProjectPath) -> ProjectSnapshot:
        for project in self.projects:
            if project.path == path:
                return project
        raise KeyError(path)


class ConverterSettings(BaseModel):
    """Validated converter settings loaded from a TOML table."""

    model_config = ConfigDict(extra="forbid")

    target_dir: Path | None = None
    main_source_set: str = "main"
    std_lib_name: str = "scala-library"
    compiler_name: str = "scala-compiler"
    strict_dependencies: dict[ProjectPath, list[str]] = Field(default_factory=dict)

    @field_validator("main_source_set", "std_lib_name", "compiler_name")
    @classmethod
    def _validate_non_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("setting cannot be empty.")
        return value
