import uuid
from collections import namedtuple

from ..random_source import resolve_rng
from .generator import PALETTE_AESTHETICS, generate_by_aesthetic

PaletteEntry = namedtuple("PaletteEntry", ["id", "name", "colors", "tags", "aesthetic"])

NAMES_BY_AESTHETIC = {
    "pastel": (
        "Cotton Candy Dreams",
        "Soft Whispers",
        "Pastel Paradise",
        "Gentle Morning",
        "Sweet Macarons",
        "Dreamy Pastels",
    ),
    "warm": ("Autumn Sunset", "Desert Heat", "Spice Market", "Cozy Fireplace", "Golden Hour", "Warm Embrace"),
    "cool": ("Ocean Depths", "Winter Frost", "Twilight Sky", "Cool Breeze", "Midnight Blues", "Arctic Chill"),
    "moody": (
        "Stormy Weather",
        "Midnight Mystery",
        "Dark Elegance",
        "Shadowy Corners",
        "Moody Blues",
        "Dramatic Dusk",
    ),
    "neutral": (
        "Minimalist Haven",
        "Subtle Sophistication",
        "Timeless Neutrals",
        "Urban Concrete",
        "Natural Linen",
        "Quiet Elegance",
    ),
    "monochromatic": (
        "Shades of Serenity",
        "Monochrome Magic",
        "Single Spectrum",
        "Gradient Flow",
        "Tonal Harmony",
        "One Hue Wonder",
    ),
    "vibrant": (
        "Electric Dreams",
        "Carnival Colors",
        "Vivid Vision",
        "Bold Statement",
        "Color Explosion",
        "Vibrant Voyage",
    ),
    "earthy": (
        "Forest Floor",
        "Terracotta Sunset",
        "Natural Elements",
        "Woodland Retreat",
        "Earthy Embrace",
        "Organic Palette",
    ),
    "retro": (
        "Vintage Vibes",
        "Retro Revival",
        "Nostalgic Notes",
        "Throwback Thursday",
        "Classic Comeback",
        "Disco Days",
    ),
    "random": (
        "Serendipity",
        "Unexpected Harmony",
        "Random Radiance",
        "Chance Encounter",
        "Lucky Mix",
        "Surprise Spectrum",
    ),
}

COMMON_TAGS = ("color", "palette", "design")

TAGS_BY_AESTHETIC = {
    "pastel": ("soft", "light", "gentle", "delicate", "sweet", "dreamy"),
    "warm": ("cozy", "autumn", "sunset", "golden", "spice", "comfort"),
    "cool": ("fresh", "winter", "ocean", "calm", "serene", "tranquil"),
    "moody": ("dark", "dramatic", "mysterious", "intense", "deep", "shadowy"),
    "neutral": ("minimal", "clean", "subtle", "sophisticated", "timeless", "versatile"),
    "monochromatic": ("single-hue", "gradient", "tonal", "shades", "simple", "elegant"),
    "vibrant": ("bold", "bright", "energetic", "lively", "dynamic", "striking"),
    "earthy": ("natural", "organic", "rustic", "grounded", "woodland", "nature"),
    "retro": ("vintage", "nostalgic", "classic", "throwback", "70s", "80s", "90s"),
    "random": ("eclectic", "diverse", "mixed", "varied", "assorted", "unique"),
}


def _check_aesthetic(aesthetic):
    if aesthetic not in PALETTE_AESTHETICS:
        raise ValueError(f"Unknown palette aesthetic {aesthetic!r}")


def palette_name(aesthetic, rng=None):
    _check_aesthetic(aesthetic)
    return resolve_rng(rng).choice(NAMES_BY_AESTHETIC[aesthetic])


def palette_tags(aesthetic, rng=None):
    """The aesthetic itself, then 2-3 common tags and 1-3 aesthetic-specific tags."""
    _check_aesthetic(aesthetic)
    rng = resolve_rng(rng)

    common = rng.shuffled(COMMON_TAGS)[: 2 + rng.next_int(2)]
    specific = rng.shuffled(TAGS_BY_AESTHETIC[aesthetic])[: 1 + rng.next_int(3)]
    return [aesthetic, *common, *specific]


def explore_palette(aesthetic=None, count=5, rng=None):
    """Build a named, tagged palette for browsing.

    Args:
        aesthetic: One of PALETTE_AESTHETICS, or None to pick one at random
        count: Number of colors
        rng: Seed or RandomSource

    Returns:
        PaletteEntry
    """
    rng = resolve_rng(rng)
    if aesthetic is None:
        aesthetic = rng.choice(PALETTE_AESTHETICS)
    colors = generate_by_aesthetic(aesthetic, count, rng=rng)
    return PaletteEntry(
        id=str(uuid.uuid4()),
        name=palette_name(aesthetic, rng),
        colors=colors,
        tags=palette_tags(aesthetic, rng),
        aesthetic=aesthetic,
    )
