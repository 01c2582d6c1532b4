#!/usr/bin/env python3
"""
bloop_gradle.cli.app

Typer-based CLI generating Bloop configuration files from a Gradle build
snapshot.

Examples
--------
Install core + CLI:

    uv pip install -e ".[cli]"

Generate ``.bloop/*.json`` for every source set of the build:

    bloop-gradle install build-snapshot.json --target-dir .bloop
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from bloop_gradle.errors import BloopGradleError

app = typer.Typer(
    name="bloop-gradle",
    help="Generate Bloop project configuration from a Gradle build snapshot.",
    no_args_is_help=True,
)

SNAPSHOT_HELP = "JSON build snapshot exported by the Gradle build."
CONFIG_HELP = "TOML settings file ([bloop] or [tool.bloop] table)."


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while generating configuration.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _parse_strict_dependencies(items: list[str] | None) -> dict[str, list[str]]:
    """Parse repeated PROJECT=NAME strict dependency entries."""
    parsed: dict[str, list[str]] = {}
    for item in items or []:
        if "=" not in item:
            raise typer.BadParameter(
                f"Invalid strict dependency '{item}'. Use PROJECT=NAME format."
            )
        project, name = item.split("=", 1)
        project = project.strip()
        name = name.strip()
        if not project or not name:
            raise typer.BadParameter("Strict dependency project and name cannot be empty.")
        parsed.setdefault(project, []).append(name)
    return parsed


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr."),
) -> None:
    """Initialize shared CLI state."""
    from bloop_gradle.logging_utils import configure_logging

    configure_logging(logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING)
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("install")
def install_cmd(
    ctx: typer.Context,
    snapshot_path: Path = typer.Argument(
        ..., exists=True, readable=True, dir_okay=False, help=SNAPSHOT_HELP
    ),
    target_dir: Path | None = typer.Option(
        None, "--target-dir", help="Directory for generated files (default: .bloop)."
    ),
    config: Path | None = typer.Option(
        None, "--config", exists=True, readable=True, dir_okay=False, help=CONFIG_HELP
    ),
    strict_dependency: list[str] | None = typer.Option(
        None,
        "--strict-dependency",
        help="Extra dependency PROJECT=NAME that cannot be inferred (repeatable).",
    ),
    workers: int = typer.Option(1, "--workers", min=1, help="Parallel conversion workers."),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Convert without writing any file."
    ),
) -> None:
    """Generate one configuration file per (project, source set) pair.

    Every failed pair is reported; successful pairs are still written and
    the command exits non-zero when anything failed.
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    strict = _parse_strict_dependencies(strict_dependency)

    try:
        from bloop_gradle.api import install_from_snapshot_file

        report = install_from_snapshot_file(
            snapshot_path=snapshot_path,
            target_dir=target_dir,
            settings_path=config,
            strict_dependencies=strict,
            max_workers=workers,
            dry_run=dry_run,
        )
    except BloopGradleError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    for path in report.written:
        typer.echo(f"[green]✓ Wrote:[/green] {path}")
    if dry_run:
        for item in report.successes:
            typer.echo(f"[green]✓ Converted:[/green] {item.name}")
    for item in report.failures:
        typer.echo(
            f"[red]✗ {item.project}/{item.source_set}:[/red] {item.result.failure}",
            err=True,
        )
    if not report.ok:
        typer.echo(f"{len(report.failures)} of {len(report.results)} source sets failed.", err=True)
        raise typer.Exit(code=1)


@app.command("show")
def show_cmd(
    ctx: typer.Context,
    snapshot_path: Path = typer.Argument(
        ..., exists=True, readable=True, dir_okay=False, help=SNAPSHOT_HELP
    ),
    project: str = typer.Argument(..., help="Project path, e.g. :lib"),
    source_set: str = typer.Option("main", "--source-set", help="Source set name."),
    config: Path | None = typer.Option(
        None, "--config", exists=True, readable=True, dir_okay=False, help=CONFIG_HELP
    ),
) -> None:
    """Print the configuration of a single source set as JSON."""
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from bloop_gradle.adapters.snapshot_loader import load_build_snapshot
        from bloop_gradle.application.use_cases import convert_source_set
        from bloop_gradle.settings import load_settings

        params = load_settings(config)
        snapshot = load_build_snapshot(snapshot_path)
        outcome = convert_source_set(snapshot, project, source_set, params)
        config_file = outcome.result.unwrap()
    except BloopGradleError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    typer.echo(config_file.to_json())


@app.command("frameworks")
def frameworks_cmd(
    runner: list[str] | None = typer.Option(
        None, "--runner", help="Detected runner class name (repeatable)."
    ),
) -> None:
    """List supported test frameworks, or the one matching detected runners."""
    from bloop_gradle.converter.test_frameworks import (
        DEFAULT_TEST_OPTIONS,
        TEST_FRAMEWORKS,
        match_framework,
    )

    if runner:
        framework = match_framework(set(runner))
        if framework is None:
            typer.echo("No supported test framework matches.", err=True)
            raise typer.Exit(code=1)
        typer.echo(", ".join(framework.names))
        return

    for framework in TEST_FRAMEWORKS:
        typer.echo(", ".join(framework.names))
    for argument in DEFAULT_TEST_OPTIONS.arguments:
        typer.echo(f"default arguments: {' '.join(argument.args)}")


if __name__ == "__main__":
    app()
