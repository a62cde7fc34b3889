"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ibconv.adapters.pillow_processor import PillowImageProcessor
from ibconv.application.ports import ImageProcessor
from ibconv.application.results import (
    ConversionTask,
    RunSummary,
    TaskOutcome,
    TaskStatus,
)
from ibconv.errors import (
    ConfigurationError,
    InputNotADirectoryError,
    InputNotFoundError,
    OutputCreateError,
    ProcessingError,
    UnsupportedFormatError,
)
from ibconv.infrastructure.walker import is_eligible, iter_files
from ibconv.resolution import parse_resolution
from ibconv.schemas import ConversionConfig
from ibconv.types import ELIGIBLE_SUFFIXES, TARGET_FORMATS

logger = logging.getLogger(__name__)


def build_config(
    *,
    input_folder: Path | str = "./source",
    output_folder: Path | str = "./sink",
    resolution: str = "280,180",
    target_format: str = "jpg",
    verbose: bool = False,
    show_help: bool = False,
) -> ConversionConfig:
    """Build a validated configuration from raw flag values.

    Raises
    ------
    ResolutionError
        If ``resolution`` is not a valid ``W,H`` pair.
    UnsupportedFormatError
        If ``target_format`` is not ``jpg`` or ``png`` (case-insensitive).
    """
    width, height = parse_resolution(resolution)

    normalized_format = target_format.lower()
    if normalized_format not in TARGET_FORMATS:
        raise UnsupportedFormatError("Invalid format. Must be 'jpg' or 'png'.")

    try:
        return ConversionConfig(
            input_folder=Path(input_folder),
            output_folder=Path(output_folder),
            target_format=normalized_format,
            target_width=width,
            target_height=height,
            verbose=verbose,
            show_help=show_help,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion parameters: {exc}") from exc


def _prepare_folders(config: ConversionConfig) -> None:
    source = config.input_folder
    if not source.exists():
        raise InputNotFoundError(f"Input folder '{source}' does not exist.")
    if not source.is_dir():
        raise InputNotADirectoryError(f"Input path '{source}' is a file, not a folder.")
    try:
        config.output_folder.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputCreateError(f"Failed to create output directory: {exc}") from exc


def plan_task(source_path: Path, config: ConversionConfig) -> ConversionTask:
    """Pair ``source_path`` with its mirrored destination under the output root.

    Raises
    ------
    ValueError
        If ``source_path`` is not located under ``config.input_folder``.
    """
    relative = source_path.relative_to(config.input_folder)
    destination = config.output_folder / relative.with_suffix(config.suffix)
    return ConversionTask(source_path=source_path, destination_path=destination)


def _convert_one(
    source_path: Path,
    config: ConversionConfig,
    processor: ImageProcessor,
) -> TaskOutcome:
    try:
        task = plan_task(source_path, config)
    except ValueError as exc:
        logger.warning("Could not get relative path for %s: %s", source_path, exc)
        return TaskOutcome(source_path, TaskStatus.SKIPPED, reason=str(exc))

    try:
        task.destination_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning(
            "Could not create sub-directory for %s: %s", task.destination_path, exc
        )
        return TaskOutcome(
            source_path, TaskStatus.SKIPPED, task.destination_path, reason=str(exc)
        )

    try:
        processor.process(task.source_path, task.destination_path, config)
    except ProcessingError as exc:
        logger.warning("Failed to process %s: %s", source_path, exc)
        return TaskOutcome(
            source_path, TaskStatus.FAILED, task.destination_path, reason=str(exc)
        )

    if config.verbose:
        logger.info("Converted: %s -> %s", task.source_path, task.destination_path)
    return TaskOutcome(source_path, TaskStatus.CONVERTED, task.destination_path)


def run_conversion(
    config: ConversionConfig,
    *,
    processor: ImageProcessor | None = None,
) -> RunSummary:
    """Use-case: convert every eligible image under the input folder.

    A failure on one file is logged and recorded in the summary; it never
    aborts the run.

    Raises
    ------
    SetupError
        If the input folder is missing or not a directory, the output folder
        cannot be created, or the tree cannot be walked.
    """
    processor = processor or PillowImageProcessor()
    _prepare_folders(config)

    if config.verbose:
        logger.info("Scanning folder: %s", config.input_folder)

    outcomes = [
        _convert_one(path, config, processor)
        for path in iter_files(config.input_folder)
        if is_eligible(path, ELIGIBLE_SUFFIXES)
    ]
    return RunSummary(outcomes=tuple(outcomes))


def convert_single_image(
    source_path: Path,
    destination_path: Path,
    config: ConversionConfig,
    *,
    processor: ImageProcessor | None = None,
) -> Path:
    """Use-case: convert one image outside of a tree walk."""
    processor = processor or PillowImageProcessor()
    destination_path.parent.mkdir(parents=True, exist_ok=True)
    return processor.process(source_path, destination_path, config)
