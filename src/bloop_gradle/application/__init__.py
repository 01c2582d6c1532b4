"""Application-layer use-cases and option objects."""

from __future__ import annotations

from bloop_gradle.application.options import ConverterParameters
from bloop_gradle.application.ports import ConfigWriter, JavaArgumentsBuilder
from bloop_gradle.application.results import (
    BuildReport,
    ConversionFailure,
    Err,
    FailureReason,
    Ok,
    PairResult,
)
from bloop_gradle.schemas import BuildSnapshot


def convert_source_set(
    snapshot: BuildSnapshot,
    project_path: str,
    source_set_name: str,
    params: ConverterParameters,
    *,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
) -> PairResult:
    """Convert one (project, source set) pair via lazy use-case import."""
    from bloop_gradle.application.use_cases import convert_source_set as _impl

    return _impl(
        snapshot,
        project_path,
        source_set_name,
        params,
        java_arguments_builder=java_arguments_builder,
    )


def convert_build(
    snapshot: BuildSnapshot,
    params: ConverterParameters,
    *,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
    max_workers: int = 1,
) -> BuildReport:
    """Convert every pair of the snapshot via lazy use-case import."""
    from bloop_gradle.application.use_cases import convert_build as _impl

    return _impl(
        snapshot,
        params,
        java_arguments_builder=java_arguments_builder,
        max_workers=max_workers,
    )


def install_build(
    snapshot: BuildSnapshot,
    params: ConverterParameters,
    *,
    writer: ConfigWriter | None = None,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
    max_workers: int = 1,
    dry_run: bool = False,
) -> BuildReport:
    """Convert and write configuration files via lazy use-case import."""
    from bloop_gradle.application.use_cases import install_build as _impl

    return _impl(
        snapshot,
        params,
        writer=writer,
        java_arguments_builder=java_arguments_builder,
        max_workers=max_workers,
        dry_run=dry_run,
    )


__all__ = [
    "BuildReport",
    "ConversionFailure",
    "ConverterParameters",
    "Err",
    "FailureReason",
    "Ok",
    "PairResult",
    "convert_build",
    "convert_source_set",
    "install_build",
]
