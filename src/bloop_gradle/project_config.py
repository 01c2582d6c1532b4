"""Immutable project configuration record consumed by the Bloop compile server."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

LATEST_VERSION = "1.4.0"


class _Record(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Artifact(_Record):
    name: str
    classifier: str | None = None
    checksum: str | None = None
    path: Path


class Module(_Record):
    """One external dependency retained in the resolution record."""

    organization: str
    name: str
    version: str
    configurations: tuple[str, ...] | None = None
    artifacts: tuple[Artifact, ...]


class Resolution(_Record):
    modules: tuple[Module, ...] = ()


class ScalaConfig(_Record):
    """Compiler identity, options and classpath for the Scala toolchain."""

    organization: str
    name: str
    version: str
    options: tuple[str, ...]
    jars: tuple[Path, ...]

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_SCALA_CONFIG


EMPTY_SCALA_CONFIG = ScalaConfig(
    organization="",
    name="",
    version="",
    options=(),
    jars=(),
)


class JavaConfig(_Record):
    options: tuple[str, ...] = ()


class TestFramework(_Record):
    """Runner class names; any one present at runtime counts as a match."""

    names: tuple[str, ...]


class TestArgument(_Record):
    args: tuple[str, ...]
    framework: TestFramework | None = None


class TestOptions(_Record):
    excludes: tuple[str, ...] = ()
    arguments: tuple[TestArgument, ...] = ()


class TestConfig(_Record):
    frameworks: tuple[TestFramework, ...]
    options: TestOptions


class JvmConfig(_Record):
    home: Path | None = None
    options: tuple[str, ...] = ()


class Platform(_Record):
    name: Literal["jvm"] = "jvm"
    config: JvmConfig = JvmConfig()
    main_class: tuple[str, ...] = ()


class CompileSetup(_Record):
    order: Literal["mixed", "java->scala", "scala->java"] = "mixed"
    add_library_to_boot_classpath: bool = True
    add_compiler_to_classpath: bool = False
    add_extra_jars_to_classpath: bool = False
    manage_boot_classpath: bool = True
    filter_library_from_classpath: bool = True


DEFAULT_PLATFORM = Platform()
DEFAULT_COMPILE_SETUP = CompileSetup()


class ProjectConfig(_Record):
    """Configuration of a single (project, source set) pair."""

    name: str
    directory: Path
    sources: tuple[Path, ...]
    dependencies: tuple[str, ...]
    classpath: tuple[Path, ...]
    out: Path
    analysis_out: Path
    classes_dir: Path
    scala: ScalaConfig
    java: JavaConfig
    test: TestConfig
    platform: Platform = DEFAULT_PLATFORM
    compile_setup: CompileSetup = DEFAULT_COMPILE_SETUP
    resolution: Resolution = Resolution()


class ConfigFile(_Record):
    """Versioned wrapper written to ``<target-dir>/<project>.json``."""

    version: str = LATEST_VERSION
    project: ProjectConfig

    def to_json(self, indent: int = 4) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
