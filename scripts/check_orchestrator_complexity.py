#!/usr/bin/env python3
"""Complexity guard for the batch use-cases and the configuration assembler."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/bloop_gradle"
TARGETS = (
    PACKAGE / "application/use_cases.py",
    PACKAGE / "converter/core.py",
)
# Counted recursively; nested function bodies count towards their parent.
MAX_STATEMENTS = 20


def _statement_count(node: ast.FunctionDef) -> int:
    return sum(1 for child in ast.walk(node) if isinstance(child, ast.stmt)) - 1


def main() -> None:
    """Fail when an orchestrating function grows past the statement threshold."""
    violations: list[str] = []
    for target in TARGETS:
        tree = ast.parse(target.read_text(encoding="utf-8"))
        for node in tree.body:
            if not isinstance(node, ast.FunctionDef):
                continue
            count = _statement_count(node)
            if count > MAX_STATEMENTS:
                violations.append(
                    f"{target.relative_to(ROOT)}::{node.name}: {count} statements"
                )
    if violations:
        raise SystemExit(
            "Split these functions into converter helpers:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
