"""
Local palette critique: summary statistics, a four-level harmony rating and
canned advice. Pure functions, no network.
"""
from collections import namedtuple
from itertools import combinations

from ..color import color_distance, hex_to_rgb

HarmonyFeedback = namedtuple("HarmonyFeedback", ["message", "suggestions", "harmony"])
PaletteStats = namedtuple("PaletteStats", ["avg_brightness", "avg_saturation", "avg_variance"])

HARMONY_LEVELS = ("excellent", "good", "fair", "poor")

# Average pairwise RGB distance thresholds
HIGH_VARIANCE = 300
LOW_VARIANCE = 80
BALANCED_VARIANCE = (120, 250)
# Saturation/brightness limits that keep a palette out of "excellent"
OVER_SATURATED = 0.8
WASHED_OUT_SATURATION = 0.2
WASHED_OUT_BRIGHTNESS = 200

EXCELLENT_FEEDBACK = (
    "Your palette has a wonderful balance! The colors work harmoniously together while "
    "maintaining visual interest.",
    (
        "This palette would work well for both primary and accent colors in a design",
        "Consider using the brighter colors for call-to-action elements",
    ),
)

GOOD_VIBRANT_FEEDBACK = (
    "You have a diverse and vibrant palette with good contrast between colors.",
    (
        "Consider adding a neutral tone to balance the vibrant colors",
        "This palette would work well for a bold, energetic design",
    ),
)

GOOD_COHESIVE_FEEDBACK = (
    "Your palette has a nice cohesive feel with colors that complement each other well.",
    (
        "You might want to add one contrasting accent color for highlights",
        "This palette would work well for a harmonious, balanced design",
    ),
)

FAIR_HIGH_CONTRAST_FEEDBACK = (
    "Your palette has high contrast between colors, which can create visual interest but "
    "might be challenging to balance.",
    (
        "Consider adding transitional colors to bridge the gap between contrasting hues",
        "Try using the most contrasting colors sparingly as accents",
    ),
)

FAIR_SIMILAR_FEEDBACK = (
    "Your colors are quite similar to each other, creating a very cohesive but potentially "
    "monotonous palette.",
    (
        "Consider adding one contrasting color to create focal points",
        "Try varying the brightness or saturation more between colors",
    ),
)

FAIR_SATURATED_FEEDBACK = (
    "Your palette uses highly saturated colors, which can be vibrant but potentially overwhelming.",
    (
        "Consider balancing with some less saturated or neutral tones",
        "Use the most saturated colors sparingly for emphasis",
    ),
)

FAIR_GENERIC_FEEDBACK = (
    "Your palette has potential but might benefit from some adjustments for better harmony.",
    (
        "Try exploring related color schemes like analogous or complementary",
        "Consider adjusting the brightness balance between your colors",
    ),
)

EMPTY_FEEDBACK = (
    "There are no colors to evaluate yet.",
    ("Generate a palette or extract colors from an image to get started",),
)


def palette_statistics(colors):
    """Average brightness (0-255), saturation (0-1) and pairwise RGB distance."""
    rgb_colors = [hex_to_rgb(c) for c in colors]
    if not rgb_colors:
        return PaletteStats(0.0, 0.0, 0.0)

    total_brightness = 0.0
    total_saturation = 0.0
    for r, g, b in rgb_colors:
        high = max(r, g, b)
        low = min(r, g, b)
        total_brightness += (r * 299 + g * 587 + b * 114) / 1000
        total_saturation += 0 if high == 0 else (high - low) / high

    distances = [color_distance(a, b) for a, b in combinations(rgb_colors, 2)]
    avg_variance = sum(distances) / (len(distances) or 1)

    return PaletteStats(
        avg_brightness=total_brightness / len(rgb_colors),
        avg_saturation=total_saturation / len(rgb_colors),
        avg_variance=avg_variance,
    )


def classify_harmony(stats):
    if stats.avg_variance > HIGH_VARIANCE:
        harmony = "fair"  # clashing
    elif stats.avg_variance < LOW_VARIANCE:
        harmony = "fair"  # too similar
    elif BALANCED_VARIANCE[0] <= stats.avg_variance <= BALANCED_VARIANCE[1]:
        harmony = "excellent"
    else:
        harmony = "good"

    if harmony == "excellent":
        over_saturated = stats.avg_saturation > OVER_SATURATED
        washed_out = (
            stats.avg_saturation < WASHED_OUT_SATURATION
            and stats.avg_brightness > WASHED_OUT_BRIGHTNESS
        )
        if over_saturated or washed_out:
            harmony = "good"

    return harmony


def _select_feedback(harmony, stats):
    if harmony == "excellent":
        return EXCELLENT_FEEDBACK
    if harmony == "good":
        if stats.avg_variance > BALANCED_VARIANCE[1]:
            return GOOD_VIBRANT_FEEDBACK
        return GOOD_COHESIVE_FEEDBACK
    if stats.avg_variance > HIGH_VARIANCE:
        return FAIR_HIGH_CONTRAST_FEEDBACK
    if stats.avg_variance < LOW_VARIANCE:
        return FAIR_SIMILAR_FEEDBACK
    if stats.avg_saturation > OVER_SATURATED:
        return FAIR_SATURATED_FEEDBACK
    return FAIR_GENERIC_FEEDBACK


def score(colors):
    """Rate a palette and explain the rating.

    Args:
        colors: Sequence of hex strings

    Returns:
        HarmonyFeedback with a message, up to two suggestions and a harmony level
    """
    if len(colors) == 0:
        message, suggestions = EMPTY_FEEDBACK
        return HarmonyFeedback(message, list(suggestions), "fair")

    stats = palette_statistics(colors)
    harmony = classify_harmony(stats)
    message, suggestions = _select_feedback(harmony, stats)
    return HarmonyFeedback(message, list(suggestions), harmony)
