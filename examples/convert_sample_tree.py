#!/usr/bin/env python3
"""Build a small sample tree and convert it with the public API."""

from __future__ import annotations

import logging
from pathlib import Path
from tempfile import TemporaryDirectory

from PIL import Image

from ibconv import convert_folder


def _write_samples(root: Path) -> None:
    (root / "portraits").mkdir(parents=True)
    (root / "icons" / "small").mkdir(parents=True)
    Image.new("RGB", (300, 600), "steelblue").save(root / "portraits" / "tall.jpg")
    Image.new("RGBA", (64, 64), (255, 0, 0, 128)).save(root / "icons" / "badge.png")
    Image.new("P", (16, 16)).save(root / "icons" / "small" / "dot.GIF")
    (root / "icons" / "broken.png").write_bytes(b"not an image")
    (root / "notes.txt").write_text("ignored")


def main() -> None:
    """Convert the sample tree to 120x80 PNG and print the outcome of each file."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    with TemporaryDirectory(prefix="ibconv-") as tmp:
        source = Path(tmp) / "source"
        sink = Path(tmp) / "sink"
        _write_samples(source)

        summary = convert_folder(source, sink, resolution="120,80", target_format="png", verbose=True)
        for outcome in summary.outcomes:
            print(f"{outcome.status.value:>9}  {outcome.source_path.relative_to(source)}")
        for path in sorted(sink.rglob("*.png")):
            with Image.open(path) as image:
                print(f"{path.relative_to(sink)}: {image.size[0]}x{image.size[1]} {image.mode}")


if __name__ == "__main__":
    main()
