"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ibconv.application.options import EncodeOptions
from ibconv.application.results import RunSummary
from ibconv.application.use_cases import build_config
from ibconv.application.use_cases import convert_single_image
from ibconv.application.use_cases import run_conversion
from ibconv.adapters.pillow_processor import PillowImageProcessor


def convert_folder(
    input_folder: Path | str = "./source",
    output_folder: Path | str = "./sink",
    resolution: str = "280,180",
    target_format: str = "jpg",
    verbose: bool = False,
    encode_options: Optional[EncodeOptions] = None,
) -> RunSummary:
    """Convert every eligible image under ``input_folder`` into ``output_folder``."""
    config = build_config(
        input_folder=input_folder,
        output_folder=output_folder,
        resolution=resolution,
        target_format=target_format,
        verbose=verbose,
    )
    return run_conversion(config, processor=PillowImageProcessor(encode_options))


def convert_image(
    source_path: Path,
    destination_path: Path,
    resolution: str = "280,180",
    target_format: str = "jpg",
    encode_options: Optional[EncodeOptions] = None,
) -> Path:
    """Convert a single image file, creating the destination's parent folders."""
    config = build_config(resolution=resolution, target_format=target_format)
    return convert_single_image(
        Path(source_path),
        Path(destination_path),
        config,
        processor=PillowImageProcessor(encode_options),
    )
