#!/usr/bin/env python3
"""Render requirements.txt from the runtime dependencies in pyproject.toml.

The runtime profile is the base dependencies plus the ``cli`` extra, i.e.
what ``bloop-gradle`` needs to run. The ``test`` extra stays out.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
RUNTIME_EXTRAS = ("cli",)


def collect_requirements() -> list[str]:
    pyproject = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    project = pyproject["project"]
    deps = set(project.get("dependencies", []))
    optional = project.get("optional-dependencies", {})
    for extra in RUNTIME_EXTRAS:
        if extra not in optional:
            raise SystemExit(f"pyproject.toml has no '{extra}' extra.")
        deps.update(optional[extra])
    return sorted({dep.strip() for dep in deps if dep.strip()}, key=str.lower)


def render_requirements(reqs: list[str]) -> str:
    """Return the requirements.txt text for ``reqs``."""
    header = [
        f"# Generated from pyproject.toml (base + extras: {', '.join(RUNTIME_EXTRAS)})",
        "# Do not edit manually; run: uv run python scripts/generate_requirements.py",
    ]
    return "\n".join(header) + "\n\n" + "\n".join(reqs) + "\n"


def main() -> None:
    """Regenerate requirements.txt."""
    reqs = collect_requirements()
    REQUIREMENTS.write_text(render_requirements(reqs), encoding="utf-8")
    print(f"Wrote {len(reqs)} requirements to {REQUIREMENTS.name}")


if __name__ == "__main__":
    main()
