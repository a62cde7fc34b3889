#!/usr/bin/env python3
"""Layering and complexity checks for the ibconv package."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/ibconv"
MAX_USE_CASE_STATEMENTS = 25

# Pillow belongs to adapters; Typer belongs to the CLI.
BANNED_IMPORTS: dict[str, tuple[str, ...]] = {
    "application": ("PIL", "typer"),
    "infrastructure": ("PIL", "typer"),
    "cli": ("PIL",),
}


def _imported_roots(path: Path) -> set[str]:
    roots: set[str] = set()
    for node in ast.walk(ast.parse(path.read_text(encoding="utf-8"))):
        if isinstance(node, ast.Import):
            roots.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            roots.add(node.module.split(".")[0])
    return roots


def _layer_violations() -> list[str]:
    violations: list[str] = []
    for layer, banned in BANNED_IMPORTS.items():
        for path in sorted((PACKAGE / layer).glob("*.py")):
            found = _imported_roots(path) & set(banned)
            violations.extend(
                f"{path.relative_to(ROOT)} imports {name}" for name in sorted(found)
            )
    return violations


def _complexity_violations() -> list[str]:
    path = PACKAGE / "application/use_cases.py"
    tree = ast.parse(path.read_text(encoding="utf-8"))
    return [
        f"{node.name}: {len(node.body)} statements"
        for node in tree.body
        if isinstance(node, ast.FunctionDef) and len(node.body) > MAX_USE_CASE_STATEMENTS
    ]


def main() -> None:
    """Run repository architecture checks."""
    violations = _layer_violations() + _complexity_violations()
    if violations:
        raise SystemExit(
            "Architecture checks failed:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
