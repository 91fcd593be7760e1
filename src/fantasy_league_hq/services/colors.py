"""Color math for team swatches and headers."""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")

PLACEHOLDER_COLOR = "#cccccc"
PLACEHOLDER_LABEL = "N/A"


@dataclass(frozen=True)
class TextPalette:
    dark: str
    light: str


PLAIN_TEXT = TextPalette(dark="#000000", light="#ffffff")
BRANDED_TEXT = TextPalette(dark="#0b1f3a", light="#ffffff")


@dataclass(frozen=True)
class ColorSwatch:
    background: str
    label: str
    text_color: str


def _linearize(channel: int) -> float:
    c = channel / 255
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_color: str) -> float:
    """Gamma-corrected sRGB luminance of a ``#RRGGBB`` color, in [0, 1]."""
    match = _HEX_RE.match(hex_color.strip())
    if match is None:
        raise ValueError(f"Not a #RRGGBB color: {hex_color!r}")
    digits = match.group(1)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_text_color(hex_color: str | None, palette: TextPalette = PLAIN_TEXT) -> str:
    """Pick readable text for a background: dark when luminance > 0.5, otherwise light.

    A luminance of exactly 0.5 gets light text. A missing or unparseable color
    gets dark text.
    """
    if not hex_color:
        return palette.dark
    try:
        luminance = relative_luminance(hex_color)
    except ValueError:
        logger.debug("Unparseable color %r, using dark text", hex_color)
        return palette.dark
    return palette.dark if luminance > 0.5 else palette.light


def color_swatch(
    hex_color: str | None,
    palette: TextPalette = PLAIN_TEXT,
    placeholder: str = PLACEHOLDER_COLOR,
) -> ColorSwatch:
    if not hex_color:
        return ColorSwatch(background=placeholder, label=PLACEHOLDER_LABEL, text_color=palette.dark)
    return ColorSwatch(background=hex_color, label=hex_color, text_color=contrast_text_color(hex_color, palette))
