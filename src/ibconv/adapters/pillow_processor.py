"""Pillow-backed image processor implementing the application port."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from PIL import Image

from ibconv.application.options import EncodeOptions
from ibconv.errors import (
    CreateError,
    DecodeError,
    EncodeError,
    OpenError,
    UnsupportedTargetFormatError,
)
from ibconv.schemas import ConversionConfig
from ibconv.types import DECODE_FORMATS

_DECODE_FAILURES = (OSError, SyntaxError, ValueError, Image.DecompressionBombError)
# Pillow raises OverflowError and MemoryError for sizes it cannot allocate.
_RESIZE_FAILURES = (OSError, ValueError, OverflowError, MemoryError)
_ENCODERS = {"jpg": "JPEG", "png": "PNG"}
_PNG_MODES = frozenset({"L", "LA", "RGB", "RGBA"})


def _decode(handle: BinaryIO, source_path: Path) -> Image.Image:
    detected = "unknown"
    try:
        image = Image.open(handle, formats=DECODE_FORMATS)
        detected = image.format or detected
        image.load()
    except _DECODE_FAILURES as exc:
        raise DecodeError(
            source_path,
            f"could not decode image (format {detected}): {exc}",
            detected_format=detected,
        ) from exc
    return image


def _working_copy(image: Image.Image, target_format: str) -> Image.Image:
    """Convert ``image`` to a mode the target encoder accepts."""
    if target_format == "jpg":
        return image.convert("L" if image.mode == "L" else "RGB")
    if image.mode in _PNG_MODES:
        return image.copy()
    if image.mode in {"P", "PA", "La"} or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


class PillowImageProcessor:
    """Decode, resize and re-encode one image file with Pillow."""

    def __init__(self, options: EncodeOptions | None = None) -> None:
        self.options = options or EncodeOptions()

    def _encoder(
        self, source_path: Path, target_format: str
    ) -> tuple[str, dict[str, object]]:
        encoder_name = _ENCODERS.get(target_format)
        if encoder_name is None:
            raise UnsupportedTargetFormatError(
                source_path, f"unknown target format: {target_format}"
            )
        if encoder_name == "JPEG":
            return encoder_name, {"quality": self.options.jpeg_quality}
        return encoder_name, {}

    def process(
        self,
        source_path: Path,
        destination_path: Path,
        config: ConversionConfig,
    ) -> Path:
        """Convert ``source_path`` and write it to ``destination_path``.

        Parameters
        ----------
        source_path : Path
            JPEG, PNG or GIF file to read. Only the first GIF frame is used.
        destination_path : Path
            File to create or truncate. Its parent must already exist.
        config : ConversionConfig
            Supplies the target size and format.

        Returns
        -------
        Path
            ``destination_path``.

        Notes
        -----
        - The image is stretched to exactly ``config.size``; aspect ratio is
          not preserved.
        - A destination left behind by a failed encode is not removed.
        """
        encoder_name, params = self._encoder(source_path, config.target_format)

        try:
            handle = source_path.open("rb")
        except OSError as exc:
            raise OpenError(source_path, f"could not open file: {exc}") from exc

        with handle:
            with _decode(handle, source_path) as image:
                try:
                    working = _working_copy(image, config.target_format)
                    resized = working.resize(config.size, Image.Resampling.LANCZOS)
                except _RESIZE_FAILURES as exc:
                    raise EncodeError(
                        source_path,
                        f"could not prepare {image.mode} image for {encoder_name}: {exc}",
                    ) from exc

        try:
            out = destination_path.open("wb")
        except OSError as exc:
            raise CreateError(source_path, f"could not create output file: {exc}") from exc
        with out:
            try:
                resized.save(out, format=encoder_name, **params)
            except (OSError, ValueError, KeyError) as exc:
                raise EncodeError(
                    source_path, f"could not encode {encoder_name}: {exc}"
                ) from exc
        return destination_path
