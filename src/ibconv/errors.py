"""Exception hierarchy for image conversion.

Errors come in two severities. Fatal errors (``recoverable = False``) abort a
run and map to a non-zero exit status. Processing errors
(``recoverable = True``) affect a single file and are reported as warnings
while the run continues.
"""

from __future__ import annotations

from pathlib import Path


class IbconvError(Exception):
    """Base class for all ibconv errors."""

    exit_code: int = 1
    recoverable: bool = False


# -----------------------------
# Fatal: configuration
# -----------------------------
class ConfigurationError(IbconvError):
    """Invalid command-line or API configuration."""


class ResolutionError(ConfigurationError, ValueError):
    """Resolution string could not be parsed into positive dimensions."""


class InvalidResolutionFormatError(ResolutionError):
    """Resolution string does not have exactly two comma-separated fields."""


class InvalidDimensionError(ResolutionError):
    """A resolution field is not a valid integer."""


class NonPositiveDimensionError(ResolutionError):
    """A resolution field is zero or negative."""


class UnsupportedFormatError(ConfigurationError):
    """Requested output format is not one of the supported targets."""


# -----------------------------
# Fatal: run setup
# -----------------------------
class SetupError(IbconvError):
    """The conversion run cannot start or continue."""


class InputNotFoundError(SetupError):
    """Input folder does not exist."""


class InputNotADirectoryError(SetupError):
    """Input path exists but is not a directory."""


class OutputCreateError(SetupError):
    """Output folder could not be created."""


class WalkError(SetupError):
    """Directory traversal failed structurally."""


# -----------------------------
# Recoverable: per-file processing
# -----------------------------
class ProcessingError(IbconvError):
    """A single image could not be converted."""

    recoverable = True

    def __init__(self, source_path: Path, message: str) -> None:
        super().__init__(message)
        self.source_path = source_path


class OpenError(ProcessingError):
    """Source file could not be opened for reading."""


class DecodeError(ProcessingError):
    """Source file could not be decoded as a supported image."""

    def __init__(self, source_path: Path, message: str, detected_format: str) -> None:
        super().__init__(source_path, message)
        self.detected_format = detected_format


class CreateError(ProcessingError):
    """Destination file could not be created."""


class EncodeError(ProcessingError):
    """Resized image could not be encoded to the destination."""


class UnsupportedTargetFormatError(ProcessingError):
    """Processor was asked to encode a format it has no encoder for."""
