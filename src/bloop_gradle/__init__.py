"""Top-level API for Gradle-to-Bloop configuration generation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bloop_gradle.application.options import ConverterParameters
    from bloop_gradle.application.results import BuildReport, PairResult
    from bloop_gradle.schemas import BuildSnapshot

__version__ = "0.1.0"


def convert_source_set(
    snapshot: BuildSnapshot,
    project_path: str,
    source_set_name: str,
    params: ConverterParameters | None = None,
) -> PairResult:
    """Convert one source set of a project.

    Parameters
    ----------
    snapshot : BuildSnapshot
        Validated build snapshot.
    project_path : str
        Project path, e.g. ``":lib"``.
    source_set_name : str
        Source set name, e.g. ``"main"``.
    params : ConverterParameters | None, default=None
        Converter parameters; defaults when omitted.

    Returns
    -------
    PairResult
        The pair's derived name and its success-or-failure result.
    """
    from .application.options import ConverterParameters
    from .application.use_cases import convert_source_set as _impl

    return _impl(snapshot, project_path, source_set_name, params or ConverterParameters())


def convert_build(
    snapshot: BuildSnapshot,
    params: ConverterParameters | None = None,
    *,
    max_workers: int = 1,
) -> BuildReport:
    """Convert every (project, source set) pair of a build snapshot."""
    from .application.options import ConverterParameters
    from .application.use_cases import convert_build as _impl

    return _impl(snapshot, params or ConverterParameters(), max_workers=max_workers)


def install_from_snapshot_file(
    snapshot_path: Path,
    target_dir: Path | None = None,
    *,
    settings_path: Path | None = None,
    max_workers: int = 1,
) -> BuildReport:
    """Generate configuration files from a snapshot file.

    Parameters
    ----------
    snapshot_path : Path
        JSON build snapshot exported by the host.
    target_dir : Path | None, default=None
        Output directory; falls back to settings, then ``.bloop``.
    """
    from .api import install_from_snapshot_file as _impl

    return _impl(
        snapshot_path=snapshot_path,
        target_dir=target_dir,
        settings_path=settings_path,
        max_workers=max_workers,
    )


__all__ = [
    "convert_build",
    "convert_source_set",
    "install_from_snapshot_file",
]
