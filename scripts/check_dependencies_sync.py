#!/usr/bin/env python3
"""Ensure requirements.txt is exactly what generate_requirements.py renders."""

from __future__ import annotations

import difflib

from generate_requirements import (
    REQUIREMENTS,
    collect_requirements,
    render_requirements,
)


def main() -> None:
    """Diff the committed requirements.txt against a fresh rendering."""
    expected = render_requirements(collect_requirements())
    actual = REQUIREMENTS.read_text(encoding="utf-8") if REQUIREMENTS.exists() else ""
    if actual != expected:
        diff = difflib.unified_diff(
            actual.splitlines(keepends=True),
            expected.splitlines(keepends=True),
            fromfile="requirements.txt",
            tofile="generated",
        )
        raise SystemExit(
            "requirements.txt is out of sync with pyproject.toml.\n"
            "Run: uv run python scripts/generate_requirements.py\n" + "".join(diff)
        )
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
