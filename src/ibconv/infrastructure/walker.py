"""Deterministic recursive enumeration of an input tree."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from ibconv.errors import WalkError


def _sorted_entries(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        raise WalkError(f"Error walking directory {directory}: {exc}") from exc


def iter_files(root: Path) -> Iterator[Path]:
    """Yield regular files under ``root`` depth-first.

    Entries of each directory are visited in lexicographic name order, with
    files and subdirectories interleaved. Directories are descended into but
    never yielded; symlinked directories are not followed.

    Raises
    ------
    WalkError
        If any directory in the tree cannot be listed.
    """
    for entry in _sorted_entries(root):
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from iter_files(path)
        elif entry.is_file():
            yield path


def is_eligible(path: Path, suffixes: frozenset[str]) -> bool:
    """Return whether ``path`` has one of ``suffixes`` (case-insensitive)."""
    return path.suffix.lower() in suffixes
