"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ibconv.types import TARGET_FORMATS, Dimensions

DEFAULT_INPUT_FOLDER = Path("./source")
DEFAULT_OUTPUT_FOLDER = Path("./sink")


class ConversionConfig(BaseModel):
    """Validated, immutable settings for one conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_folder: Path = DEFAULT_INPUT_FOLDER
    output_folder: Path = DEFAULT_OUTPUT_FOLDER
    target_format: Literal["jpg", "png"] = "jpg"
    target_width: int = Field(default=280, gt=0)
    target_height: int = Field(default=180, gt=0)
    verbose: bool = False
    show_help: bool = False

    @field_validator("target_format", mode="before")
    @classmethod
    def _normalize_format(cls, value: object) -> object:
        if isinstance(value, str):
            lowered = value.lower()
            if lowered not in TARGET_FORMATS:
                raise ValueError("target_format must be 'jpg' or 'png'.")
            return lowered
        return value

    @property
    def size(self) -> Dimensions:
        """Target ``(width, height)`` in pixels."""
        return self.target_width, self.target_height

    @property
    def suffix(self) -> str:
        """File suffix, with leading dot, for converted outputs."""
        return f".{self.target_format}"
