import logging

from ..color import hex_to_hsl, hsl_to_hex, rgb_to_hex
from ..random_source import resolve_rng

logger = logging.getLogger(__name__)

COLOR_SCHEMES = (
    "random",
    "monochromatic",
    "analogous",
    "complementary",
    "triadic",
    "tetradic",
)

PALETTE_AESTHETICS = (
    "pastel",
    "warm",
    "cool",
    "moody",
    "neutral",
    "monochromatic",
    "vibrant",
    "earthy",
    "retro",
    "random",
)

# Saturation/lightness bands for hue-relationship schemes: base + [0, span)
SCHEME_SATURATION = (70, 30)
SCHEME_LIGHTNESS = (40, 20)

ANALOGOUS_RANGE = 30  # degrees either side of the base hue

MONO_LIGHTNESS_MIN = 20
MONO_LIGHTNESS_MAX = 80
MONO_SATURATION = (30, 60)

# Aesthetic bands: (hue candidates or None for any hue, hue jitter, saturation band, lightness band)
AESTHETIC_BANDS = {
    "pastel": (None, 0, (25, 35), (80, 12)),
    "warm": ((0, 30, 60, 330, 300), 15, (55, 40), (40, 40)),
    "cool": ((180, 210, 240, 270), 15, (40, 50), (40, 40)),
    "moody": (None, 0, (20, 40), (15, 35)),
    "neutral": (None, 0, (5, 15), (30, 60)),
    "vibrant": (None, 0, (80, 20), (45, 25)),
    "earthy": ((30, 60, 90, 120, 180), 10, (30, 40), (30, 40)),
}

# Retro colors from 70s, 80s, 90s
RETRO_POOL = (
    # 70s
    "#ff6b35", "#f7c59f", "#efefd0", "#004e89", "#1a659e",
    # 80s neon
    "#ff00ff", "#00ffff", "#ffff00", "#ff0000", "#0000ff",
    # 90s purple
    "#7b68ee", "#9370db", "#8a2be2", "#9932cc", "#ba55d3",
    # misc
    "#e55137", "#f6c683", "#6a7b76", "#2f4858", "#33658a",
)


def _check_count(count):
    if count < 0:
        raise ValueError(f"Palette size must be non-negative, got {count}")


def _band(rng, band):
    """Continuous draw from a (start, span) band."""
    start, span = band
    return start + rng.next_float() * span


def _int_band(rng, band):
    """Whole-number draw from a (start, span) band."""
    start, span = band
    return start + rng.next_int(span)


def _spread(i, count, low, high):
    """Position i of count evenly spaced values from low to high."""
    if count < 2:
        return low
    return low + i * (high - low) / (count - 1)


def random_color(rng=None):
    rng = resolve_rng(rng)
    return rgb_to_hex(rng.next_int(256), rng.next_int(256), rng.next_int(256))


def monochromatic_palette(count, hue, saturation):
    """Single hue, lightness evenly distributed from 20% to 80%."""
    return [
        hsl_to_hex(hue, saturation, _spread(i, count, MONO_LIGHTNESS_MIN, MONO_LIGHTNESS_MAX))
        for i in range(count)
    ]


def _analogous(count, base_hue, rng):
    palette = []
    for i in range(count):
        offset = _spread(i, count, -ANALOGOUS_RANGE, ANALOGOUS_RANGE) if count > 1 else 0
        h = (base_hue + offset + 360) % 360
        s = _band(rng, SCHEME_SATURATION)
        l = _band(rng, SCHEME_LIGHTNESS)
        palette.append(hsl_to_hex(h, s, l))
    return palette


def _complementary(count, base_hue):
    # Odd counts put the extra color on the base side
    base_count = (count + 1) // 2
    sides = ((base_hue, base_count), ((base_hue + 180) % 360, count - base_count))

    palette = []
    for h, side_count in sides:
        for i in range(side_count):
            s = 70 + (i * 30) / side_count
            l = 30 + (i * 40) / side_count
            palette.append(hsl_to_hex(h, s, l))
    return palette


def _round_robin(count, base_hue, offsets, rng):
    hues = [(base_hue + offset) % 360 for offset in offsets]
    palette = []
    for i in range(count):
        h = hues[i % len(hues)]
        s = _band(rng, SCHEME_SATURATION)
        l = _band(rng, SCHEME_LIGHTNESS)
        palette.append(hsl_to_hex(h, s, l))
    return palette


def generate_by_scheme(scheme, count=5, base_color=None, rng=None):
    """Generate a palette following a color-wheel relationship.

    Args:
        scheme: One of COLOR_SCHEMES
        count: Number of colors to return
        base_color: Optional hex color whose hue (and, for monochromatic,
            saturation) anchors the palette. A random hue is used otherwise.
        rng: Seed or RandomSource

    Returns:
        list of lowercase ``#rrggbb`` strings, exactly ``count`` long
    """
    if scheme not in COLOR_SCHEMES:
        raise ValueError(f"Unknown color scheme {scheme!r}; expected one of {COLOR_SCHEMES}")
    _check_count(count)
    rng = resolve_rng(rng)

    if base_color is not None:
        base_hue, base_saturation, _ = hex_to_hsl(base_color)
    else:
        base_hue = rng.next_int(360)
        base_saturation = None

    logger.debug("Generating %d %s colors around hue %.1f", count, scheme, base_hue)

    if scheme == "monochromatic":
        if base_saturation is None:
            base_saturation = _band(rng, MONO_SATURATION)
        return monochromatic_palette(count, base_hue, base_saturation)
    if scheme == "analogous":
        return _analogous(count, base_hue, rng)
    if scheme == "complementary":
        return _complementary(count, base_hue)
    if scheme == "triadic":
        return _round_robin(count, base_hue, (0, 120, 240), rng)
    if scheme == "tetradic":
        return _round_robin(count, base_hue, (0, 90, 180, 270), rng)
    return [random_color(rng) for _ in range(count)]


def _banded_palette(aesthetic, count, rng):
    hues, jitter, saturation, lightness = AESTHETIC_BANDS[aesthetic]
    palette = []
    for i in range(count):
        if hues is None:
            h = rng.next_int(360)
        else:
            h = hues[i % len(hues)] + rng.next_int(2 * jitter) - jitter
        s = _int_band(rng, saturation)
        l = _int_band(rng, lightness)
        palette.append(hsl_to_hex((h + 360) % 360, s, l))
    return palette


def _retro_palette(count, rng):
    if count > len(RETRO_POOL):
        raise ValueError(
            f"Retro palettes hold at most {len(RETRO_POOL)} distinct colors, got {count}"
        )
    return [RETRO_POOL[i] for i in rng.sample_indices(len(RETRO_POOL), count)]


def generate_by_aesthetic(aesthetic, count=5, rng=None):
    """Generate a palette with the mood of a named aesthetic.

    ``random`` picks one of the other aesthetics uniformly and delegates to it.
    """
    if aesthetic not in PALETTE_AESTHETICS:
        raise ValueError(
            f"Unknown palette aesthetic {aesthetic!r}; expected one of {PALETTE_AESTHETICS}"
        )
    _check_count(count)
    rng = resolve_rng(rng)

    if aesthetic == "random":
        aesthetic = rng.choice(PALETTE_AESTHETICS[:-1])
        logger.debug("Random aesthetic resolved to %s", aesthetic)

    if aesthetic == "retro":
        return _retro_palette(count, rng)
    if aesthetic == "monochromatic":
        hue = rng.next_int(360)
        return monochromatic_palette(count, hue, _band(rng, MONO_SATURATION))
    return _banded_palette(aesthetic, count, rng)
