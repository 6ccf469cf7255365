from .editing import regenerate_palette, resize_palette
from .generator import (
    COLOR_SCHEMES,
    PALETTE_AESTHETICS,
    generate_by_aesthetic,
    generate_by_scheme,
    monochromatic_palette,
    random_color,
)
from .loader import load_palette_from_json
from .naming import PaletteEntry, explore_palette, palette_name, palette_tags

__all__ = [
    "COLOR_SCHEMES",
    "PALETTE_AESTHETICS",
    "PaletteEntry",
    "explore_palette",
    "generate_by_aesthetic",
    "generate_by_scheme",
    "load_palette_from_json",
    "monochromatic_palette",
    "palette_name",
    "palette_tags",
    "random_color",
    "regenerate_palette",
    "resize_palette",
]
