"""Converter settings loading (TOML file + explicit overrides)."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from bloop_gradle.application.options import DEFAULT_TARGET_DIR, ConverterParameters
from bloop_gradle.errors import SettingsError
from bloop_gradle.schemas import ConverterSettings


def _settings_table(data: Mapping[str, object]) -> Mapping[str, object]:
    tool = data.get("tool")
    if isinstance(tool, Mapping) and isinstance(tool.get("bloop"), Mapping):
        return tool["bloop"]
    table = data.get("bloop")
    if isinstance(table, Mapping):
        return table
    return {}


def read_settings_file(path: Path) -> ConverterSettings:
    """Read the ``[bloop]`` (or ``[tool.bloop]``) table of a TOML file.

    A relative ``target_dir`` is resolved against the file's directory.

    Raises
    ------
    SettingsError
        If the file cannot be read, parsed or validated.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise SettingsError(f"Unable to read settings from {path}: {exc}") from exc

    try:
        settings = ConverterSettings.model_validate(dict(_settings_table(data)))
    except ValidationError as exc:
        raise SettingsError(f"Invalid settings in {path}: {exc}") from exc

    if settings.target_dir is not None and not settings.target_dir.is_absolute():
        settings = settings.model_copy(
            update={"target_dir": path.parent / settings.target_dir}
        )
    return settings


def load_settings(
    path: Path | None = None,
    *,
    target_dir: Path | None = None,
    main_source_set: str | None = None,
    std_lib_name: str | None = None,
    compiler_name: str | None = None,
    strict_dependencies: Mapping[str, list[str]] | None = None,
) -> ConverterParameters:
    """Build converter parameters from defaults, a settings file and overrides.

    Explicit keyword overrides win over the settings file, which wins over
    the defaults. Strict dependencies from both sources are merged per
    project, file entries first.

    Parameters
    ----------
    path : Path | None, default=None
        Optional TOML settings file.
    target_dir, main_source_set, std_lib_name, compiler_name : optional
        Explicit overrides, usually from CLI flags.
    strict_dependencies : Mapping[str, list[str]] | None, default=None
        Extra strict dependency names keyed by project path.

    Returns
    -------
    ConverterParameters
        Frozen parameters for a conversion run.
    """
    settings = read_settings_file(path) if path is not None else ConverterSettings()

    merged: dict[str, tuple[str, ...]] = {
        project: tuple(names) for project, names in settings.strict_dependencies.items()
    }
    for project, names in (strict_dependencies or {}).items():
        merged[project] = tuple(dict.fromkeys([*merged.get(project, ()), *names]))

    return ConverterParameters(
        target_dir=target_dir or settings.target_dir or DEFAULT_TARGET_DIR,
        main_source_set=main_source_set or settings.main_source_set,
        std_lib_name=std_lib_name or settings.std_lib_name,
        compiler_name=compiler_name or settings.compiler_name,
        strict_dependencies=merged,
    )
