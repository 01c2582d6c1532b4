"""Exception hierarchy for snapshot conversion."""

from __future__ import annotations


class BloopGradleError(Exception):
    """Base error for configuration generation failures."""

    exit_code = 1


class SnapshotError(BloopGradleError):
    """Raised when a build snapshot cannot be read or is malformed."""

    exit_code = 2


class SettingsError(BloopGradleError):
    """Raised when converter settings cannot be loaded."""

    exit_code = 2


class ConfigWriteError(BloopGradleError):
    """Raised when a generated configuration file cannot be written."""

    exit_code = 3


class ProjectConversionError(BloopGradleError):
    """Raised when a failed conversion result is unwrapped."""

    exit_code = 4

    def __init__(
        self, reason: str, message: str, *, project: str = "", source_set: str = ""
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.project = project
        self.source_set = source_set
