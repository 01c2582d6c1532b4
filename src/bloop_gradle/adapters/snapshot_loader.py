"""Build snapshot loading adapter."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from bloop_gradle.errors import SnapshotError
from bloop_gradle.schemas import BuildSnapshot

logger = logging.getLogger(__name__)


def parse_build_snapshot(payload: str | bytes) -> BuildSnapshot:
    """Validate a JSON build snapshot payload.

    Raises
    ------
    SnapshotError
        If the payload is not a valid snapshot.
    """
    try:
        return BuildSnapshot.model_validate_json(payload)
    except ValidationError as exc:
        raise SnapshotError(f"Invalid build snapshot: {exc}") from exc


def load_build_snapshot(path: Path) -> BuildSnapshot:
    """Read and validate the build snapshot exported by the host.

    Relative ``project_dir``/``build_dir`` entries are kept as exported.

    Parameters
    ----------
    path : Path
        JSON file written by the host build.

    Returns
    -------
    BuildSnapshot
        Validated, immutable snapshot.

    Raises
    ------
    SnapshotError
        If the file cannot be read or fails validation.
    """
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise SnapshotError(f"Unable to read build snapshot {path}: {exc}") from exc
    snapshot = parse_build_snapshot(payload)
    logger.info("loaded build snapshot %s with %d projects", path, len(snapshot.projects))
    return snapshot
