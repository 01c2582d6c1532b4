#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/bloop_gradle"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    for layer in ("application", "converter"):
        for path in (PACKAGE / layer).glob("*.py"):
            _assert_no_imports(
                path,
                [
                    "import typer",
                    "from typer",
                    "from bloop_gradle.cli",
                ],
            )

    # The conversion core stays pure: no filesystem writes or snapshot loading.
    for path in (PACKAGE / "converter").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "bloop_gradle.infrastructure",
                "bloop_gradle.adapters",
                "bloop_gradle.application.use_cases",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
