"""Parsing of ``W,H`` resolution strings."""

from __future__ import annotations

import re

from ibconv.errors import (
    InvalidDimensionError,
    InvalidResolutionFormatError,
    NonPositiveDimensionError,
)
from ibconv.types import Dimensions

# Optional sign followed by ASCII digits; no whitespace or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")
# Pillow stores image sizes as C ints.
MAX_DIMENSION = 2**31 - 1


def _parse_dimension(raw: str, label: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise InvalidDimensionError(f"invalid {label}: {raw!r} is not an integer")
    value = int(raw)
    if abs(value) > MAX_DIMENSION:
        raise InvalidDimensionError(f"invalid {label}: {raw!r} is out of range")
    return value


def parse_resolution(value: str) -> Dimensions:
    """Parse a ``"W,H"`` string into a ``(width, height)`` pair.

    Parameters
    ----------
    value : str
        Resolution string such as ``"280,180"``.

    Returns
    -------
    tuple[int, int]
        Positive width and height.

    Raises
    ------
    InvalidResolutionFormatError
        If the string does not split into exactly two fields.
    InvalidDimensionError
        If either field is not an integer or exceeds ``MAX_DIMENSION``.
    NonPositiveDimensionError
        If either dimension is zero or negative.
    """
    parts = value.split(",")
    if len(parts) != 2:
        raise InvalidResolutionFormatError("invalid format, expected 'W,H'")

    width = _parse_dimension(parts[0], "width")
    height = _parse_dimension(parts[1], "height")

    if width <= 0 or height <= 0:
        raise NonPositiveDimensionError("width and height must be positive")
    return width, height
