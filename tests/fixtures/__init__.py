"""Test fixtures for cl-gallery tests.

This package provides image-writing helpers and fake probes with
controllable outcomes for unit tests.
"""

import asyncio
from pathlib import Path

from PIL import Image

__all__ = [
    "GatedProbe",
    "StaticProbe",
    "SVG_CONTENT",
    "write_image",
]

SVG_CONTENT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
    '<rect width="10" height="10" fill="#4a90e2"/></svg>\n'
)


def write_image(path: Path, color: str = "#4a90e2") -> Path:
    """Write a small valid image; the format follows the file suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".svg":
        path.write_text(SVG_CONTENT, encoding="utf-8")
        return path
    image_format = "JPEG" if suffix in (".jpg", ".jpeg") else "PNG"
    Image.new("RGB", (8, 8), color).save(path, format=image_format)
    return path


class StaticProbe:
    """Probe answering from a fixed set of loadable sources."""

    def __init__(self, loadable: set[str] | None = None) -> None:
        self.loadable = set(loadable or ())
        self.calls: list[str] = []

    async def is_loadable(self, src: str) -> bool:
        self.calls.append(src)
        return src.startswith("data:") or src in self.loadable


class GatedProbe:
    """Probe whose answers are released manually, one source at a time."""

    def __init__(self) -> None:
        self._gates: dict[str, asyncio.Event] = {}
        self._answers: dict[str, bool] = {}

    def _gate(self, src: str) -> asyncio.Event:
        return self._gates.setdefault(src, asyncio.Event())

    def release(self, src: str, loadable: bool) -> None:
        self._answers[src] = loadable
        self._gate(src).set()

    async def is_loadable(self, src: str) -> bool:
        await self._gate(src).wait()
        return self._answers[src]
