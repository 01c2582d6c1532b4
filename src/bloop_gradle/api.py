"""Public file-based API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from bloop_gradle.adapters.snapshot_loader import load_build_snapshot
from bloop_gradle.application.results import BuildReport
from bloop_gradle.application.use_cases import install_build
from bloop_gradle.settings import load_settings


def install_from_snapshot_file(
    snapshot_path: Path,
    target_dir: Path | None = None,
    settings_path: Path | None = None,
    strict_dependencies: dict[str, list[str]] | None = None,
    max_workers: int = 1,
    dry_run: bool = False,
) -> BuildReport:
    """Generate configuration files for every source set of a snapshot file."""
    params = load_settings(
        settings_path,
        target_dir=target_dir,
        strict_dependencies=strict_dependencies,
    )
    snapshot = load_build_snapshot(snapshot_path)
    return install_build(snapshot, params, max_workers=max_workers, dry_run=dry_run)
