"""Image availability probes.

A probe answers whether an image source can be loaded. Probing is
best-effort: it only decides which fallback is displayed.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

from PIL import Image, UnidentifiedImageError

from cl_gallery.logging_config import get_logger

__all__ = ["FileImageProbe", "ImageProbe"]

logger = get_logger(__name__)

# SVG sniffing reads at most this many bytes
_SVG_SNIFF_BYTES = 4096


@runtime_checkable
class ImageProbe(Protocol):
    """Answers whether an image source can be loaded."""

    async def is_loadable(self, src: str) -> bool:
        """Return True if the image at ``src`` loads."""
        ...


class FileImageProbe:
    """Probe that resolves image sources against a site root directory.

    ``data:`` URIs are always loadable. Sources that resolve outside the
    site root are not. Raster images must be decodable by Pillow; SVG files
    must contain an ``<svg`` root tag.

    Example:
        probe = FileImageProbe(Path("site"))
        ok = await probe.is_loadable("data/ewc/class_0.png")

    """

    def __init__(self, site_root: Path | str) -> None:
        self._site_root = Path(site_root)

    @property
    def site_root(self) -> Path:
        return self._site_root

    async def is_loadable(self, src: str) -> bool:
        if src.startswith("data:"):
            return True
        if not src or "://" in src:
            logger.debug("image_probe_skipped", src=src)
            return False
        return await asyncio.to_thread(self._check, src)

    def _check(self, src: str) -> bool:
        root = self._site_root.resolve()
        path = (root / src).resolve()
        if not path.is_relative_to(root):
            logger.debug("image_probe_outside_site_root", src=src)
            return False
        if not path.is_file():
            return False
        if path.suffix.lower() == ".svg":
            return self._check_svg(path)
        try:
            with Image.open(path) as image:
                image.verify()
        except (OSError, UnidentifiedImageError, SyntaxError, ValueError) as e:
            logger.debug("image_probe_failed", path=str(path), error=str(e))
            return False
        return True

    def _check_svg(self, path: Path) -> bool:
        try:
            with path.open("rb") as f:
                head = f.read(_SVG_SNIFF_BYTES)
        except OSError as e:
            logger.debug("image_probe_failed", path=str(path), error=str(e))
            return False
        return b"<svg" in head.lower()
