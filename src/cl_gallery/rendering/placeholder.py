"""Generated placeholder graphic.

Draws a small illustrative bar chart used when an enlarged image cannot be
loaded, and returns it as an embeddable data URI.
"""

from __future__ import annotations

import base64
import io
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from cl_gallery.config.defaults import PLACEHOLDER_HEIGHT, PLACEHOLDER_WIDTH

__all__ = ["create_placeholder_image", "render_placeholder_png"]

_BACKGROUND = "#f3f4f6"
_AXIS = "#6b7280"
_BAR = "#4a90e2"
_TEXT = "#374151"

_CAPTION = "Attack Success Rate Comparison"
_BASELINE = 250
# (left x, top y) of each bar; every bar is 30px wide and ends on the baseline
_BARS = [(80, 150), (140, 120), (200, 100), (260, 130), (320, 110)]
_LABELS = ["Method A", "Method B", "Method C", "Method D", "Method E"]

_FONT_CANDIDATES = {
    True: ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf"),
    False: ("DejaVuSans.ttf", "Arial.ttf", "arial.ttf"),
}


def _load_font(size: int, bold: bool = False) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    """Load a TrueType font, falling back to Pillow's built-in font."""
    for name in _FONT_CANDIDATES[bold]:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def _draw_centered(
    draw: ImageDraw.ImageDraw,
    center_x: float,
    baseline_y: float,
    text: str,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
) -> None:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = center_x - (right - left) / 2
    y = baseline_y - (bottom - top)
    draw.text((x, y), text, fill=_TEXT, font=font)


def render_placeholder_png() -> bytes:
    """Render the placeholder bar chart as PNG bytes."""
    image = Image.new("RGB", (PLACEHOLDER_WIDTH, PLACEHOLDER_HEIGHT), _BACKGROUND)
    draw = ImageDraw.Draw(image)

    # axes
    draw.line([(50, _BASELINE), (350, _BASELINE)], fill=_AXIS, width=2)
    draw.line([(50, 50), (50, _BASELINE)], fill=_AXIS, width=2)

    for left, top in _BARS:
        draw.rectangle([left, top, left + 29, _BASELINE - 1], fill=_BAR)

    _draw_centered(draw, PLACEHOLDER_WIDTH / 2, 30, _CAPTION, _load_font(16, bold=True))

    label_font = _load_font(12)
    for (left, _), label in zip(_BARS, _LABELS):
        _draw_centered(draw, left + 15, 270, label, label_font)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG", optimize=True)
    return buffer.getvalue()


@lru_cache(maxsize=1)
def create_placeholder_image() -> str:
    """Return the placeholder bar chart as a ``data:image/png`` URI."""
    encoded = base64.b64encode(render_placeholder_png()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
