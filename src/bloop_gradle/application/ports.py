"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from bloop_gradle.project_config import ConfigFile
from bloop_gradle.schemas import JavaCompileOptions


class JavaArgumentsBuilder(Protocol):
    """Build javac arguments from compile options (main options only)."""

    def build(self, options: JavaCompileOptions) -> list[str]:
        """Return ordered javac arguments without classpath or sources."""


class ConfigWriter(Protocol):
    """Persist a generated configuration file."""

    def write(self, config: ConfigFile, target_dir: Path) -> Path:
        """Write configuration and return the written path."""
