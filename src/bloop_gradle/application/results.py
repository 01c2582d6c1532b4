"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from bloop_gradle.errors import ProjectConversionError
from bloop_gradle.project_config import ConfigFile
from bloop_gradle.types import PairId


class FailureReason(StrEnum):
    """Reason codes of a failed (project, source set) conversion."""

    TOOLCHAIN_LIBRARY_MISSING = "toolchain-library-missing"
    COMPILE_TASK_MISSING = "compile-task-missing"
    ARTIFACT_RESOLUTION = "artifact-resolution"
    NAME_COLLISION = "name-collision"


@dataclass(frozen=True)
class ConversionFailure:
    """Typed failure carrying a human-readable diagnostic.

    ``project`` is the project path and ``source_set`` the source set name
    of the pair that failed.
    """

    reason: FailureReason
    message: str
    project: str
    source_set: str

    def __str__(self) -> str:
        return f"[{self.reason}] {self.message}"


@dataclass(frozen=True)
class Ok[T]:
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    failure: ConversionFailure

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        failure = self.failure
        raise ProjectConversionError(
            str(failure.reason),
            f"{failure.project}/{failure.source_set}: {failure.message}",
            project=failure.project,
            source_set=failure.source_set,
        )


type Result[T] = Ok[T] | Err


@dataclass(frozen=True)
class PairResult:
    """Outcome of converting one (project, source set) pair."""

    project: str
    source_set: str
    name: str
    result: Result[ConfigFile]

    @property
    def pair_id(self) -> PairId:
        return (self.project, self.source_set)


@dataclass(frozen=True)
class BuildReport:
    """Outcome of converting every pair of a build snapshot."""

    results: tuple[PairResult, ...] = ()
    written: tuple[Path, ...] = ()

    @property
    def successes(self) -> list[PairResult]:
        return [item for item in self.results if item.result.ok]

    @property
    def failures(self) -> list[PairResult]:
        return [item for item in self.results if not item.result.ok]

    @property
    def ok(self) -> bool:
        return not self.failures
