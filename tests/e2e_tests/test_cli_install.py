"""End-to-end tests of the install command against a snapshot file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from bloop_gradle.cli import cli as cli_module

runner = CliRunner()


def test_install_generates_files(tmp_path: Path, build_payload: dict[str, Any]) -> None:
    """Generate every configuration file and report each written path."""
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(json.dumps(build_payload), encoding="utf-8")
    target_dir = tmp_path / ".bloop"

    result = runner.invoke(
        cli_module.app,
        ["install", str(snapshot), "--target-dir", str(target_dir), "--workers", "2"],
    )

    assert result.exit_code == 0, result.output
    assert result.output.count("Wrote") == 4
    assert (target_dir / "lib-test.json").exists()


def test_install_lists_every_failure(tmp_path: Path, build_payload: dict[str, Any]) -> None:
    """Exit non-zero, list all failures and still write successful pairs."""
    build_payload["projects"][0]["scala_compile_tasks"] = {}
    build_payload["projects"][2]["scala_compile_tasks"] = {}
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text(json.dumps(build_payload), encoding="utf-8")
    target_dir = tmp_path / ".bloop"

    result = runner.invoke(
        cli_module.app, ["install", str(snapshot), "--target-dir", str(target_dir)]
    )

    assert result.exit_code == 1
    assert "compileScala task is missing from lib/main" in result.output
    assert "compileTestScala task is missing from lib/test" in result.output
    assert "compileScala task is missing from app/main" in result.output
    assert "3 of 4 source sets failed." in result.output
    assert [path.name for path in target_dir.glob("*.json")] == ["util.json"]
