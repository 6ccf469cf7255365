"""Palette generation, image color extraction and harmony scoring."""

from .color import (
    Color,
    FormatError,
    color_distance,
    color_name,
    contrast_ratio,
    contrast_table,
    create_color,
    display_color_name,
    hex_to_rgb,
    hsl_to_rgb,
    is_accessible,
    normalize_hex,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from .extract import cluster, extract_palette, extract_palette_from_image, sample_pixels
from .feedback import HarmonyFeedback, score
from .palette import generate_by_aesthetic, generate_by_scheme
from .random_source import RandomSource

__version__ = "0.1.0"

__all__ = [
    "Color",
    "FormatError",
    "HarmonyFeedback",
    "RandomSource",
    "cluster",
    "color_distance",
    "color_name",
    "contrast_ratio",
    "contrast_table",
    "create_color",
    "display_color_name",
    "extract_palette",
    "extract_palette_from_image",
    "generate_by_aesthetic",
    "generate_by_scheme",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_accessible",
    "normalize_hex",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "sample_pixels",
    "score",
]
