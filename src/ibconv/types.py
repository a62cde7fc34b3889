"""Shared type aliases and constants for converter modules."""

from __future__ import annotations

from typing import TypeAlias

Dimensions: TypeAlias = tuple[int, int]

TARGET_FORMATS: tuple[str, ...] = ("jpg", "png")

# Suffixes (lowercase, with dot) of files picked up by the directory walk.
ELIGIBLE_SUFFIXES: frozenset[str] = frozenset({".jpg", ".jpeg", ".png", ".gif"})

# Pillow plugin names accepted when decoding sources.
DECODE_FORMATS: tuple[str, ...] = ("JPEG", "PNG", "GIF")
