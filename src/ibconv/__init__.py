"""Bulk image converter: resize and re-encode every image in a folder tree."""

from __future__ import annotations

from pathlib import Path

from ibconv.application.results import RunSummary
from ibconv.resolution import parse_resolution

__version__ = "0.2.0"


def convert_folder(
    input_folder: Path | str = "./source",
    output_folder: Path | str = "./sink",
    resolution: str = "280,180",
    target_format: str = "jpg",
    verbose: bool = False,
) -> RunSummary:
    """Convert an image tree.

    Parameters
    ----------
    input_folder : Path | str, default="./source"
        Root of the tree to scan for ``.jpg``, ``.jpeg``, ``.png`` and
        ``.gif`` files.
    output_folder : Path | str, default="./sink"
        Root of the mirrored output tree; created if missing.
    resolution : str, default="280,180"
        Target size as ``"W,H"``. Images are stretched to exactly this size.
    target_format : str, default="jpg"
        ``"jpg"`` or ``"png"`` (case-insensitive).
    verbose : bool, default=False
        Log scanning and per-file progress at INFO level.

    Returns
    -------
    RunSummary
        Per-file outcomes in walk order.
    """
    from .api import convert_folder as _impl

    return _impl(
        input_folder=input_folder,
        output_folder=output_folder,
        resolution=resolution,
        target_format=target_format,
        verbose=verbose,
    )


def convert_image(
    source_path: Path,
    destination_path: Path,
    resolution: str = "280,180",
    target_format: str = "jpg",
) -> Path:
    """Convert a single image file.

    Parameters
    ----------
    source_path : Path
        JPEG, PNG or GIF image to read.
    destination_path : Path
        Output file; parent folders are created as needed.
    resolution : str, default="280,180"
        Target size as ``"W,H"``.
    target_format : str, default="jpg"
        ``"jpg"`` or ``"png"`` (case-insensitive).

    Returns
    -------
    Path
        Path to the written image.
    """
    from .api import convert_image as _impl

    return _impl(
        source_path=source_path,
        destination_path=destination_path,
        resolution=resolution,
        target_format=target_format,
    )


__all__ = [
    "RunSummary",
    "convert_folder",
    "convert_image",
    "parse_resolution",
]
