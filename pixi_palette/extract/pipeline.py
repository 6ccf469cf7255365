import logging

from ..color import color_distance, hex_to_rgb, rgb_to_hex, rgb_to_hsl
from ..palette.generator import random_color
from ..random_source import resolve_rng
from .kmeans import BACKENDS
from .sampling import load_rgba_pixels, sample_pixels

logger = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 15  # RGB distance below which two colors count as duplicates
MIN_LIGHTNESS = 5
MAX_LIGHTNESS = 95
MIN_SATURATION = 3


def too_similar(color1, color2, threshold=SIMILARITY_THRESHOLD):
    return color_distance(hex_to_rgb(color1), hex_to_rgb(color2)) < threshold


def distinct_colors(colors, limit, threshold=SIMILARITY_THRESHOLD):
    """Greedily keep colors that are not too similar to an already kept one."""
    kept = []
    for color in colors:
        if not any(too_similar(existing, color, threshold) for existing in kept):
            kept.append(color)
        if len(kept) >= limit:
            break
    return kept


def vivid_colors(colors, limit):
    """Drop near-black, near-white and near-gray colors, stopping at ``limit``."""
    kept = []
    for color in colors:
        _, s, l = rgb_to_hsl(*hex_to_rgb(color))
        if l < MIN_LIGHTNESS or l > MAX_LIGHTNESS:
            continue
        if s < MIN_SATURATION:
            continue
        kept.append(color)
        if len(kept) >= limit:
            break
    return kept


def extract_palette(
    pixels,
    target_count=5,
    rng=None,
    similarity_threshold=SIMILARITY_THRESHOLD,
    lightness_cap=None,
    backend="lloyd",
):
    """Reduce sampled RGB pixels to exactly ``target_count`` hex colors.

    Args:
        pixels: Sequence of (r, g, b) pixels, as produced by sample_pixels
        target_count: Number of colors to return
        rng: Seed or RandomSource
        similarity_threshold: Minimum RGB distance between kept colors
        lightness_cap: How many colors the lightness/saturation filter keeps.
            Defaults to ``target_count``; pass 5 to reproduce the browser app.
        backend: "lloyd" or "sklearn"

    Returns:
        list of lowercase hex strings, always ``target_count`` long
    """
    if target_count < 0:
        raise ValueError(f"target_count must be non-negative, got {target_count}")
    if backend not in BACKENDS:
        raise ValueError(f"Unknown clustering backend {backend!r}; expected one of {sorted(BACKENDS)}")
    if target_count == 0:
        return []
    rng = resolve_rng(rng)
    if lightness_cap is None:
        lightness_cap = target_count

    # Ask for extra clusters so filtering has headroom
    centroids = BACKENDS[backend](pixels, target_count * 2, rng=rng)
    hex_colors = [rgb_to_hex(*c) for c in centroids]

    unique = distinct_colors(hex_colors, target_count, similarity_threshold)
    final = vivid_colors(unique, lightness_cap)

    if len(final) < target_count:
        for color in hex_colors:
            if color not in final:
                final.append(color)
            if len(final) >= target_count:
                break

    final = final[:target_count]

    if len(final) < target_count:
        logger.warning(
            "Only %d distinct colors found, padding with %d random colors",
            len(final),
            target_count - len(final),
        )
    while len(final) < target_count:
        final.append(random_color(rng))

    logger.info("Extracted %d colors from %d pixels", len(final), len(pixels))
    return final


def extract_palette_from_image(image_path, target_count=5, rng=None, **kwargs):
    """Decode, sample and cluster an image file. Extra kwargs go to extract_palette."""
    pixels = sample_pixels(load_rgba_pixels(image_path))
    return extract_palette(pixels, target_count, rng=rng, **kwargs)
