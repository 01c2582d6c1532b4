"""Assembly of a (project, source set) pair into a Bloop configuration file."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from bloop_gradle.application.options import ConverterParameters
from bloop_gradle.application.ports import JavaArgumentsBuilder
from bloop_gradle.application.results import (
    ConversionFailure,
    Err,
    FailureReason,
    Ok,
    Result,
)
from bloop_gradle.converter.classifier import classify_artifacts
from bloop_gradle.converter.classpath import (
    assemble_classpath,
    assemble_dependency_names,
)
from bloop_gradle.converter.java import resolve_java_config
from bloop_gradle.converter.test_frameworks import DEFAULT_TEST_CONFIG
from bloop_gradle.converter.toolchain import compile_task_name, resolve_scala_config
from bloop_gradle.project_config import (
    LATEST_VERSION,
    Artifact,
    ConfigFile,
    Module,
    ProjectConfig,
    Resolution,
)
from bloop_gradle.schemas import (
    BuildSnapshot,
    ProjectDependency,
    ProjectSnapshot,
    ResolvedArtifact,
    SourceSetSnapshot,
)


def project_name(name: str, source_set_name: str, main_source_set: str = "main") -> str:
    """Return ``name`` for the main source set, ``name-<sourceSet>`` otherwise."""
    if source_set_name == main_source_set:
        return name
    return f"{name}-{source_set_name}"


def classes_dir(build_dir: Path, source_set_name: str, toolchain: str = "scala") -> Path:
    """Return ``<buildDir>/classes/<toolchain>/<sourceSet>``.

    Java classes of the source set are compiled into the same directory.
    """
    return build_dir / "classes" / toolchain / source_set_name


def analysis_out(target_dir: Path, name: str, derived_name: str) -> Path:
    """Return ``<targetDir>/<projectName>/<derivedName>-analysis.bin``."""
    return target_dir / name / f"{derived_name}-analysis.bin"


def artifact_to_module(artifact: ResolvedArtifact) -> Module:
    """Record an external artifact in the resolution section."""
    return Module(
        organization=artifact.group,
        name=artifact.name,
        version=artifact.version,
        configurations=None,
        artifacts=(
            Artifact(
                name=artifact.name,
                classifier=artifact.classifier,
                checksum=None,
                path=artifact.file,
            ),
        ),
    )


def _reference_targets(
    snapshot: BuildSnapshot,
    dependencies: Iterable[ProjectDependency],
    params: ConverterParameters,
) -> tuple[list[str], list[Path]]:
    names: list[str] = []
    dirs: list[Path] = []
    for dependency in dependencies:
        owner = snapshot.project(dependency.project)
        names.append(project_name(owner.name, dependency.source_set, params.main_source_set))
        dirs.append(
            classes_dir(owner.build_dir, dependency.source_set, params.toolchain_dir_name)
        )
    return names, dirs


def to_bloop_config(
    snapshot: BuildSnapshot,
    project: ProjectSnapshot,
    source_set: SourceSetSnapshot,
    params: ConverterParameters,
    java_arguments_builder: JavaArgumentsBuilder,
    strict_dependencies: Iterable[str] = (),
) -> Result[ConfigFile]:
    """Convert one source set of a project into a Bloop configuration file.

    Output classes go to ``<buildDir>/classes/scala/<sourceSet>`` and the
    analysis file to ``<targetDir>/<project>/<name>-analysis.bin``.

    Parameters
    ----------
    snapshot : BuildSnapshot
        Whole-build snapshot used to resolve project dependencies.
    project : ProjectSnapshot
        Project owning ``source_set``.
    source_set : SourceSetSnapshot
        Source set to convert.
    params : ConverterParameters
        Converter parameters.
    java_arguments_builder : JavaArgumentsBuilder
        Builder producing javac main options.
    strict_dependencies : Iterable[str], default=()
        Dependency names the host model cannot infer; they take precedence
        over inferred project dependencies.

    Returns
    -------
    Result[ConfigFile]
        The versioned configuration file or the first failure met.
    """
    configuration = project.configurations[source_set.compile_configuration]
    if configuration.resolution_error is not None:
        return Err(
            ConversionFailure(
                reason=FailureReason.ARTIFACT_RESOLUTION,
                message=(
                    f"could not resolve {configuration.name} of "
                    f"{project.name}/{source_set.name}: {configuration.resolution_error}"
                ),
                project=project.path,
                source_set=source_set.name,
            )
        )

    artifacts = configuration.artifacts
    classified = classify_artifacts(artifacts, configuration.project_dependencies)
    inferred_names, project_dirs = _reference_targets(
        snapshot, configuration.project_dependencies, params
    )

    scala_result = resolve_scala_config(project, source_set, artifacts, params)
    if isinstance(scala_result, Err):
        return scala_result

    java_task = project.java_compile_tasks.get(compile_task_name(source_set.name, "java"))
    derived_name = project_name(project.name, source_set.name, params.main_source_set)
    bloop_project = ProjectConfig(
        name=derived_name,
        directory=project.project_dir,
        sources=source_set.sources,
        dependencies=assemble_dependency_names(strict_dependencies, inferred_names),
        classpath=assemble_classpath(classified.external, project_dirs),
        out=project.build_dir,
        analysis_out=analysis_out(params.target_dir, project.name, derived_name),
        classes_dir=classes_dir(
            project.build_dir, source_set.name, params.toolchain_dir_name
        ),
        scala=scala_result.value,
        java=resolve_java_config(java_task, java_arguments_builder),
        test=DEFAULT_TEST_CONFIG,
        resolution=Resolution(
            modules=tuple(artifact_to_module(a) for a in classified.external)
        ),
    )
    return Ok(ConfigFile(version=LATEST_VERSION, project=bloop_project))
