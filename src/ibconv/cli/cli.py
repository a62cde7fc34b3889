#!/usr/bin/env python3
"""
ibconv.cli.cli

Typer-based CLI for bulk image conversion.

Every invocation prints the version banner. Invalid settings, a missing input
folder, or an output folder that cannot be created end the run with a
non-zero exit status. Images that fail individually are reported as warnings
and do not affect the exit status.

Examples
--------
Convert ./source into ./sink at 280x180 JPEG:

    ibconv

Convert a photo library to 800x600 PNG with progress output:

    ibconv -i ~/Pictures -o ./thumbs -r 800,600 -f png -v
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from ibconv.application import build_config, run_conversion
from ibconv.errors import IbconvError, ResolutionError
from ibconv.schemas import ConversionConfig

VERSION = "v0.2"
AUTHOR = "Bugra Coskun"
LICENSE = "GPLv3"
BANNER = f"\n[ ibconv {VERSION} ]\nAuthor: {AUTHOR}\nLICENSE: {LICENSE}\n"

HELP_TEXT = """Usage: ibconv [OPTIONS]...

  A simple bulk image converter.

  The program converts all images (jpg, png, gif) from an input
  folder, resizes them, and saves them to an output folder in
  the specified format.

  Default behavior (no arguments):
    Converts images from ./source to ./sink at 280x180 resolution
    in 'jpg' format.

  Options:
    -i, --input <folder>       Path to the input source folder.
                               (default: ./source, env: IBCONV_INPUT)

    -o, --output <folder>      Path to the output sink folder.
                               (default: ./sink, env: IBCONV_OUTPUT)

    -r, --resolution <W,H>     Target resolution (Width,Height) to resize
                               images to, e.g. "800,600".
                               (default: 280,180, env: IBCONV_RESOLUTION)

    -f, --format <format>      Target output format. Can be 'jpg' or 'png'.
                               (default: jpg, env: IBCONV_FORMAT)

    -v, --verbose              Enable verbose output, showing processing details.

    -h, --help                 Print this help and usage message.

    --debug                    Show full tracebacks on fatal errors.
"""

app = typer.Typer(
    name="ibconv",
    help="Resize and re-encode every image in a folder tree.",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    """Route ``ibconv`` log records to stderr for this invocation.

    Parameters
    ----------
    verbose : bool
        Emit INFO progress records when ``True``; warnings only otherwise.
    """
    logger = logging.getLogger("ibconv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)


def _print_fatal_error(exc: Exception, debug: bool, message: str | None = None) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.
    message : str | None, default=None
        Replacement for ``str(exc)`` in the printed line.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {message or exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _describe_config(config: ConversionConfig) -> str:
    return "\n".join(
        [
            "Starting ibconv...",
            f"Input Folder: {config.input_folder}",
            f"Output Folder: {config.output_folder}",
            f"Target Size: {config.target_width}x{config.target_height}",
            f"Target Format: {config.target_format}",
        ]
    )


@app.command(add_help_option=False)
def convert_cmd(
    input_folder: Path = typer.Option(
        Path("./source"),
        "-i",
        "--input",
        envvar="IBCONV_INPUT",
        help="Path of input folder.",
    ),
    output_folder: Path = typer.Option(
        Path("./sink"),
        "-o",
        "--output",
        envvar="IBCONV_OUTPUT",
        help="Path of output folder.",
    ),
    resolution: str = typer.Option(
        "280,180",
        "-r",
        "--resolution",
        envvar="IBCONV_RESOLUTION",
        help="Image size W,H (e.g. '280,180').",
    ),
    target_format: str = typer.Option(
        "jpg",
        "-f",
        "--format",
        envvar="IBCONV_FORMAT",
        help="Output format (jpg or png).",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose output."),
    show_help: bool = typer.Option(False, "-h", "--help", help="Print help output."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert all images in a folder tree to a fixed size and format.

    Parameters
    ----------
    input_folder : Path
        Root of the tree scanned for ``.jpg``, ``.jpeg``, ``.png`` and ``.gif``.
    output_folder : Path
        Root of the mirrored output tree.
    resolution : str
        Target size as ``W,H``.
    target_format : str
        ``jpg`` or ``png``, case-insensitive.
    verbose : bool
        Print the resolved configuration and per-file progress.
    show_help : bool
        Print usage and exit without converting.
    debug : bool
        Print tracebacks for fatal errors.

    Notes
    -----
    - Settings are validated before ``-h`` is honoured.
    """
    typer.echo(BANNER)
    _configure_logging(verbose)

    try:
        config = build_config(
            input_folder=input_folder,
            output_folder=output_folder,
            resolution=resolution,
            target_format=target_format,
            verbose=verbose,
            show_help=show_help,
        )
    except ResolutionError as exc:
        raise typer.Exit(
            code=_print_fatal_error(
                exc, debug, f"Invalid resolution format. Must be W,H. Error: {exc}"
            )
        )
    except IbconvError as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    if config.verbose:
        typer.echo(_describe_config(config))

    if config.show_help:
        typer.echo(HELP_TEXT)
        return

    try:
        run_conversion(config)
    except IbconvError as exc:
        raise typer.Exit(code=_print_fatal_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_fatal_error(exc, debug))

    typer.echo("Conversion complete.")


if __name__ == "__main__":
    app()
