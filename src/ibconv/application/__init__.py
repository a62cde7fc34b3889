"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from ibconv.application.options import EncodeOptions
from ibconv.application.ports import ImageProcessor
from ibconv.application.results import (
    ConversionTask,
    RunSummary,
    TaskOutcome,
    TaskStatus,
)
from ibconv.schemas import ConversionConfig


def build_config(
    *,
    input_folder: Path | str = "./source",
    output_folder: Path | str = "./sink",
    resolution: str = "280,180",
    target_format: str = "jpg",
    verbose: bool = False,
    show_help: bool = False,
) -> ConversionConfig:
    """Build validated configuration via lazy use-case import."""
    from ibconv.application.use_cases import build_config as _impl

    return _impl(
        input_folder=input_folder,
        output_folder=output_folder,
        resolution=resolution,
        target_format=target_format,
        verbose=verbose,
        show_help=show_help,
    )


def run_conversion(
    config: ConversionConfig,
    *,
    processor: ImageProcessor | None = None,
) -> RunSummary:
    """Convert an input tree via lazy use-case import."""
    from ibconv.application.use_cases import run_conversion as _impl

    return _impl(config, processor=processor)


__all__ = [
    "ConversionTask",
    "EncodeOptions",
    "RunSummary",
    "TaskOutcome",
    "TaskStatus",
    "build_config",
    "run_conversion",
]
