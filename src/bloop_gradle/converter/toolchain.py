"""Scala toolchain configuration with a java-only fallback."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from bloop_gradle.application.options import ConverterParameters
from bloop_gradle.application.results import (
    ConversionFailure,
    Err,
    FailureReason,
    Ok,
    Result,
)
from bloop_gradle.project_config import EMPTY_SCALA_CONFIG, ScalaConfig
from bloop_gradle.schemas import (
    ProjectSnapshot,
    ResolvedArtifact,
    ScalaCompileOptions,
    SourceSetSnapshot,
)
from bloop_gradle.types import CompilerLanguage

logger = logging.getLogger(__name__)


def compile_task_name(source_set_name: str, language: CompilerLanguage) -> str:
    """Return Gradle's compile task name, e.g. ``compileScala``/``compileTestJava``."""
    suffix = language.capitalize()
    if source_set_name == "main":
        return f"compile{suffix}"
    return f"compile{source_set_name[:1].upper()}{source_set_name[1:]}{suffix}"


def is_java_only(sources: Iterable[Path], scala_extension: str = ".scala") -> bool:
    """Return ``True`` when no source file carries the Scala extension."""
    return not any(path.name.endswith(scala_extension) for path in sources)


def merge_encoding_option(values: Sequence[str]) -> list[str]:
    """Collapse ``-encoding <value>`` token pairs into a single token.

    Other tokens, including a trailing lone ``-encoding``, pass through
    unchanged and keep their relative order.

    Examples
    --------
    >>> merge_encoding_option(["-Ydebug", "-encoding", "UTF-8", "-foo"])
    ['-Ydebug', '-encoding UTF-8', '-foo']
    """
    merged: list[str] = []
    index = 0
    while index < len(values):
        value = values[index]
        if value == "-encoding" and index + 1 < len(values):
            merged.append(f"-encoding {values[index + 1]}")
            index += 2
        else:
            merged.append(value)
            index += 1
    return merged


def _if_enabled(enabled: bool, value: str) -> str | None:
    return value if enabled else None


def derive_compiler_options(options: ScalaCompileOptions) -> tuple[str, ...]:
    """Translate Scala compile options into scalac flags.

    Mirrors Gradle's zinc argument generation. Declarative options come
    first, then ``-Ylog`` phases, then the merged additional parameters;
    duplicates collapse to their first occurrence.
    """
    debug_level = options.debug_level
    base = [
        _if_enabled(options.deprecation, "-deprecation"),
        _if_enabled(options.unchecked, "-unchecked"),
        _if_enabled(options.optimize, "-optimize"),
        _if_enabled(debug_level == "verbose", "-verbose"),
        _if_enabled(debug_level == "debug", "-Ydebug"),
        f"-encoding {options.encoding}" if options.encoding is not None else None,
        f"-g:{debug_level}" if debug_level is not None else None,
    ]
    logging_phases = [f"-Ylog:{phase}" for phase in options.logging_phases or ()]
    additional = merge_encoding_option(options.additional_parameters)

    collected = [option for option in base if option is not None]
    collected.extend(logging_phases)
    collected.extend(additional)
    return tuple(dict.fromkeys(collected))


def _find_std_lib(
    artifacts: Iterable[ResolvedArtifact], std_lib_name: str
) -> ResolvedArtifact | None:
    for artifact in artifacts:
        if artifact.name == std_lib_name:
            return artifact
    return None


def _scala_config(
    project: ProjectSnapshot,
    source_set: SourceSetSnapshot,
    artifacts: Sequence[ResolvedArtifact],
    params: ConverterParameters,
) -> Result[ScalaConfig]:
    std_lib = _find_std_lib(artifacts, params.std_lib_name)
    if std_lib is None:
        present = "\n".join(sorted({artifact.name for artifact in artifacts}))
        return Err(
            ConversionFailure(
                reason=FailureReason.TOOLCHAIN_LIBRARY_MISSING,
                message=(
                    f"{params.std_lib_name} is not added as dependency to "
                    f"{project.name}/{source_set.name}. Artifacts: {present}"
                ),
                project=project.path,
                source_set=source_set.name,
            )
        )

    task_name = compile_task_name(source_set.name, "scala")
    task = project.scala_compile_tasks.get(task_name)
    if task is None:
        return Err(
            ConversionFailure(
                reason=FailureReason.COMPILE_TASK_MISSING,
                message=f"{task_name} task is missing from {project.name}/{source_set.name}",
                project=project.path,
                source_set=source_set.name,
            )
        )

    return Ok(
        ScalaConfig(
            organization=std_lib.group,
            name=params.compiler_name,
            version=std_lib.version,
            options=derive_compiler_options(task.options),
            jars=task.scala_classpath,
        )
    )


def resolve_scala_config(
    project: ProjectSnapshot,
    source_set: SourceSetSnapshot,
    artifacts: Sequence[ResolvedArtifact],
    params: ConverterParameters,
) -> Result[ScalaConfig]:
    """Resolve the Scala configuration of a source set.

    The compiler organization and version come from the Scala standard
    library found among ``artifacts``; options and compiler jars come from
    the source set's Scala compile task.

    Parameters
    ----------
    project : ProjectSnapshot
        Project owning the source set.
    source_set : SourceSetSnapshot
        Source set being converted.
    artifacts : Sequence[ResolvedArtifact]
        All resolved artifacts of the compile configuration.
    params : ConverterParameters
        Converter parameters (standard library and compiler names).

    Returns
    -------
    Result[ScalaConfig]
        The populated configuration, ``EMPTY_SCALA_CONFIG`` for java-only
        source sets that cannot resolve a toolchain, or the failure.
    """
    result = _scala_config(project, source_set, artifacts, params)
    if isinstance(result, Err) and is_java_only(
        source_set.sources, params.scala_source_extension
    ):
        logger.debug(
            "using empty scala config for java-only %s/%s: %s",
            project.name,
            source_set.name,
            result.failure,
        )
        return Ok(EMPTY_SCALA_CONFIG)
    return result
