import colorsys
import math
import re
from collections import namedtuple

Color = namedtuple("Color", ["hex", "rgb", "hsl", "luminance"])

HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)

# WCAG 2.0 minimum contrast
MIN_NORMAL_TEXT_CONTRAST = 4.5
MIN_LARGE_TEXT_CONTRAST = 3.0


class FormatError(ValueError):
    """Raised when a string is not a 6-digit hex color."""


def _round_channel(value):
    # Round half up, like Math.round
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color, strict=True):
    """Parse ``#rrggbb`` (the ``#`` is optional) into an ``(r, g, b)`` tuple.

    With ``strict=False`` a malformed string yields ``(0, 0, 0)`` instead of
    raising, which is how the browser app treated bad input.
    """
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        if strict:
            raise FormatError(f"Not a 6-digit hex color: {hex_color!r}")
        return (0, 0, 0)
    return tuple(int(group, 16) for group in match.groups())


def rgb_to_hex(r, g, b):
    r, g, b = _round_channel(r), _round_channel(g), _round_channel(b)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(hex_color):
    """Return the canonical lowercase ``#rrggbb`` form."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def rgb_to_hsl(r, g, b):
    """Hue in degrees [0, 360), saturation and lightness in percent."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (h * 360, s * 100, l * 100)


def hsl_to_rgb(h, s, l):
    h, s, l = (h % 360) / 360, s / 100, l / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return (_round_channel(r * 255), _round_channel(g * 255), _round_channel(b * 255))


def hex_to_hsl(hex_color):
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def color_distance(a, b):
    """Euclidean distance between two RGB triples."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = hex_to_rgb(hex_color)
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(hex1, hex2):
    """Calculate contrast ratio between two colors"""
    lum1 = relative_luminance(hex1)
    lum2 = relative_luminance(hex2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def is_accessible(foreground, background, large_text=False):
    """Check whether text in ``foreground`` is readable on ``background``."""
    ratio = contrast_ratio(foreground, background)
    threshold = MIN_LARGE_TEXT_CONTRAST if large_text else MIN_NORMAL_TEXT_CONTRAST
    return ratio >= threshold


def contrast_table(colors):
    """Contrast ratio of every color against every other color in a palette.

    Args:
        colors: Sequence of hex strings

    Returns:
        dict: ``{hex: {other_hex: ratio}}``, skipping each color's own position
    """
    colors = [normalize_hex(c) for c in colors]
    table = {}
    for i, first in enumerate(colors):
        row = table.setdefault(first, {})
        for j, second in enumerate(colors):
            if i != j:
                row[second] = contrast_ratio(first, second)
    return table


def create_color(r, g, b):
    """Create a Color namedtuple with all representations"""
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    hex_color = rgb_to_hex(r, g, b)
    rgb = hex_to_rgb(hex_color)
    return Color(
        hex=hex_color,
        rgb=rgb,
        hsl=rgb_to_hsl(*rgb),
        luminance=relative_luminance(hex_color),
    )


def _hue_family(h):
    if h < 30 or h >= 330:
        return "Red"
    if h < 60:
        return "Orange"
    if h < 90:
        return "Yellow"
    if h < 150:
        return "Green"
    if h < 210:
        return "Cyan"
    if h < 270:
        return "Blue"
    return "Purple"


def color_name(hex_color):
    """Short name such as "Dark Blue" or "Light Gray", as the assistant uses in replies.

    Lightness below 15 or above 85 is Black or White whatever the hue.
    See display_color_name for the swatch-label variant.
    """
    h, s, l = hex_to_hsl(hex_color)

    # Lightness-based names
    if l < 15:
        return "Black"
    if l > 85:
        return "White"

    # Saturation-based names
    if s < 15:
        if l < 30:
            return "Dark Gray"
        if l < 70:
            return "Gray"
        return "Light Gray"

    name = _hue_family(h)

    if l < 30:
        return f"Dark {name}"
    if l > 70:
        return f"Light {name}"
    return name


def display_color_name(hex_color):
    """Swatch label such as "Light Grayish Red".

    Low-saturation colors (below 20%) collapse to Black, White or Gray;
    20-40% saturation adds "Grayish". Dark/Light cut at 20% and 80% lightness.
    """
    h, s, l = hex_to_hsl(hex_color)

    if s < 20:
        if l < 20:
            return "Black"
        if l > 80:
            return "White"
        return "Gray"

    parts = []
    if l < 20:
        parts.append("Dark")
    elif l > 80:
        parts.append("Light")
    if s < 40:
        parts.append("Grayish")
    parts.append(_hue_family(h))
    return " ".join(parts)
