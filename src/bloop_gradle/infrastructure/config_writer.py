"""Configuration file writer implementation."""

from __future__ import annotations

import logging
from pathlib import Path

from bloop_gradle.errors import ConfigWriteError
from bloop_gradle.project_config import ConfigFile

logger = logging.getLogger(__name__)


class JsonConfigWriter:
    """Write configuration files as ``<target_dir>/<project-name>.json``."""

    def __init__(self, indent: int = 4) -> None:
        self.indent = indent

    def write(self, config: ConfigFile, target_dir: Path) -> Path:
        """Serialize ``config`` and write it atomically.

        Parameters
        ----------
        config : ConfigFile
            Configuration to persist.
        target_dir : Path
            Directory receiving the file; created when missing.

        Returns
        -------
        Path
            Written file path.

        Raises
        ------
        ConfigWriteError
            If the file cannot be written. No temporary file is left behind.
        """
        output_path = target_dir / f"{config.project.name}.json"
        tmp_path = output_path.with_suffix(".json.tmp")
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(config.to_json(indent=self.indent) + "\n", encoding="utf-8")
            tmp_path.replace(output_path)
        except OSError as exc:
            if tmp_path.exists():
                tmp_path.unlink()
            raise ConfigWriteError(f"Unable to write {output_path}: {exc}") from exc
        logger.info("wrote %s", output_path)
        return output_path
