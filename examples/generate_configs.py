#!/usr/bin/env python3
"""Generate Bloop files for the bundled multi-project snapshot.

Run from the repository root; files land in ``outputs/.bloop``.
"""

from __future__ import annotations

from pathlib import Path

from bloop_gradle.adapters.snapshot_loader import load_build_snapshot
from bloop_gradle.application import ConverterParameters, install_build

SNAPSHOT = Path(__file__).with_name("multi_project_snapshot.json")
TARGET_DIR = Path("outputs/.bloop")


def main() -> None:
    snapshot = load_build_snapshot(SNAPSHOT)
    params = ConverterParameters(
        target_dir=TARGET_DIR,
        strict_dependencies={":service": ("core-test",)},
    )
    report = install_build(snapshot, params, max_workers=2)

    for path in report.written:
        print(f"wrote {path}")
    for item in report.failures:
        print(f"failed {item.project}/{item.source_set}: {item.result.failure}")
    if not report.ok:
        raise SystemExit(f"FAIL: {len(report.failures)} source sets failed.")
    print(f"PASS: {len(report.written)} files in {TARGET_DIR}")


if __name__ == "__main__":
    main()
