"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ibconv.schemas import ConversionConfig


class ImageProcessor(Protocol):
    """Decode, resize and re-encode a single image file."""

    def process(
        self,
        source_path: Path,
        destination_path: Path,
        config: ConversionConfig,
    ) -> Path:
        """Write the converted image and return its path.

        Raises ``ProcessingError`` subclasses on per-file failures.
        """
