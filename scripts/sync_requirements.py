#!/usr/bin/env python3
"""Generate or verify requirements.txt from pyproject.toml dependencies."""

from __future__ import annotations

import argparse
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
SYNC_EXTRAS = ("test",)
HEADER = [
    f"# Generated from pyproject.toml (base + extras: {','.join(SYNC_EXTRAS)})",
    "# Do not edit manually; run: uv run python scripts/sync_requirements.py",
    "",
]


def _declared() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    deps = set(project.get("dependencies", []))
    for extra in SYNC_EXTRAS:
        deps.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(dep.strip() for dep in deps if dep.strip())


def _pinned() -> list[str]:
    lines = REQUIREMENTS.read_text(encoding="utf-8").splitlines()
    entries = (line.split("#", 1)[0].strip() for line in lines)
    return sorted(entry for entry in entries if entry)


def main() -> None:
    """Rewrite requirements.txt, or with ``--check`` fail when it has drifted."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--check", action="store_true", help="Only verify, do not write.")
    args = parser.parse_args()

    declared = _declared()
    if not args.check:
        REQUIREMENTS.write_text("\n".join(HEADER + declared) + "\n", encoding="utf-8")
        print(f"Wrote {len(declared)} requirements to {REQUIREMENTS.name}")
        return

    pinned = _pinned()
    if pinned != declared:
        missing = sorted(set(declared) - set(pinned))
        unknown = sorted(set(pinned) - set(declared))
        parts = [f"{REQUIREMENTS.name} is out of sync with pyproject.toml."]
        parts.extend(f"- missing: {entry}" for entry in missing)
        parts.extend(f"- unexpected: {entry}" for entry in unknown)
        raise SystemExit("\n".join(parts))
    print("Dependency sync check passed.")


if __name__ == "__main__":
    main()
