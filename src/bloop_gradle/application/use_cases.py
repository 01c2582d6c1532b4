"""Application use-cases orchestrating configuration generation."""

from __future__ import annotations

import logging
from concurrent import futures
from dataclasses import replace

from bloop_gradle.adapters.java_arguments import GradleJavaArgumentsBuilder
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
from bloop_gradle.converter.core import project_name, to_bloop_config
from bloop_gradle.errors import SnapshotError
from bloop_gradle.infrastructure.config_writer import JsonConfigWriter
from bloop_gradle.schemas import BuildSnapshot, ProjectSnapshot, SourceSetSnapshot
from bloop_gradle.types import PairId

logger = logging.getLogger(__name__)


def _convert_pair(
    snapshot: BuildSnapshot,
    project: ProjectSnapshot,
    source_set: SourceSetSnapshot,
    params: ConverterParameters,
    builder: JavaArgumentsBuilder,
) -> PairResult:
    result = to_bloop_config(
        snapshot,
        project,
        source_set,
        params,
        java_arguments_builder=builder,
        strict_dependencies=params.strict_dependencies_for(project.path),
    )
    if not result.ok:
        logger.warning(
            "conversion failed for %s/%s: %s",
            project.path,
            source_set.name,
            result.failure,
        )
    return PairResult(
        project=project.path,
        source_set=source_set.name,
        name=project_name(project.name, source_set.name, params.main_source_set),
        result=result,
    )


def _reject_name_collisions(results: tuple[PairResult, ...]) -> tuple[PairResult, ...]:
    """Fail every pair whose configuration name an earlier pair already uses.

    Configuration files and analysis files are keyed by name, so two pairs
    sharing one would overwrite each other on install.
    """
    owners: dict[str, PairId] = {}
    checked: list[PairResult] = []
    for item in results:
        owner = owners.setdefault(item.name, item.pair_id)
        if owner != item.pair_id:
            failure = ConversionFailure(
                reason=FailureReason.NAME_COLLISION,
                message=(
                    f"configuration name '{item.name}' is already used by "
                    f"{owner[0]}/{owner[1]}"
                ),
                project=item.project,
                source_set=item.source_set,
            )
            logger.warning(
                "conversion failed for %s/%s: %s", item.project, item.source_set, failure
            )
            item = replace(item, result=Err(failure))
        checked.append(item)
    return tuple(checked)


def convert_source_set(
    snapshot: BuildSnapshot,
    project_path: str,
    source_set_name: str,
    params: ConverterParameters,
    *,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
) -> PairResult:
    """Use-case: convert a single (project, source set) pair.

    Raises
    ------
    SnapshotError
        If the project or source set is not part of the snapshot.
    """
    try:
        project = snapshot.project(project_path)
    except KeyError as exc:
        raise SnapshotError(f"Unknown project '{project_path}'.") from exc
    source_set = project.source_set(source_set_name)
    if source_set is None:
        raise SnapshotError(
            f"Project {project_path} has no source set '{source_set_name}'."
        )
    builder = java_arguments_builder or GradleJavaArgumentsBuilder()
    return _convert_pair(snapshot, project, source_set, params, builder)


def convert_build(
    snapshot: BuildSnapshot,
    params: ConverterParameters,
    *,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
    max_workers: int = 1,
) -> BuildReport:
    """Use-case: convert every (project, source set) pair of the snapshot.

    Pairs share no mutable state, so with ``max_workers > 1`` they are
    converted on a thread pool. Results keep snapshot order either way and
    a failed pair never prevents the others from converting. A pair whose
    configuration name was already taken by an earlier pair fails with
    ``FailureReason.NAME_COLLISION``.
    """
    builder = java_arguments_builder or GradleJavaArgumentsBuilder()
    pairs = [
        (project, source_set)
        for project in snapshot.projects
        for source_set in project.source_sets
    ]

    def convert(pair: tuple[ProjectSnapshot, SourceSetSnapshot]) -> PairResult:
        project, source_set = pair
        return _convert_pair(snapshot, project, source_set, params, builder)

    if max_workers > 1 and len(pairs) > 1:
        with futures.ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = tuple(executor.map(convert, pairs))
    else:
        results = tuple(convert(pair) for pair in pairs)
    results = _reject_name_collisions(results)

    logger.info(
        "converted %d source sets (%d failed)",
        len(results),
        sum(1 for item in results if not item.result.ok),
    )
    return BuildReport(results=results)


def install_build(
    snapshot: BuildSnapshot,
    params: ConverterParameters,
    *,
    writer: ConfigWriter | None = None,
    java_arguments_builder: JavaArgumentsBuilder | None = None,
    max_workers: int = 1,
    dry_run: bool = False,
) -> BuildReport:
    """Use-case: convert the build and write one file per successful pair."""
    report = convert_build(
        snapshot,
        params,
        java_arguments_builder=java_arguments_builder,
        max_workers=max_workers,
    )
    if dry_run:
        return report

    writer = writer or JsonConfigWriter()
    written = [
        writer.write(item.result.value, params.target_dir)
        for item in report.results
        if isinstance(item.result, Ok)
    ]
    return BuildReport(results=report.results, written=tuple(written))
