from ..color import color_name
from ..random_source import resolve_rng
from .scorer import score

RESPONSE_EVENTS = (
    "palette_feedback",
    "image_extraction",
    "scheme_change",
    "color_change",
    "idle_analysis",
)

IMAGE_EXTRACTION_RESPONSES = (
    "Nice colors from that image! Images are a great source of harmonious color combinations.",
    "I like these extracted colors! Images often have naturally balanced color relationships.",
    "Great palette from your image! These colors already have a natural harmony to them.",
    "These extracted colors capture the essence of your image nicely.",
)

COLOR_CHANGE_RESPONSES = (
    "I like where you're going with these color adjustments!",
    "These color modifications are coming together nicely.",
    "Good eye for detail! These adjustments are refining your palette.",
    "Nice tweaking of the colors. Small changes can make a big difference.",
)

SCHEME_RESPONSES = {
    "monochromatic": (
        "Monochromatic schemes create a cohesive look with different shades of the same color.",
        "Monochromatic palettes are elegant and create a sense of harmony and stability.",
        "This monochromatic approach will give your design a sophisticated, unified feel.",
    ),
    "analogous": (
        "Analogous colors sit next to each other on the color wheel, creating a harmonious feel.",
        "Analogous schemes like this one create a serene and comfortable design.",
        "These analogous colors flow nicely from one to the next, creating visual comfort.",
    ),
    "complementary": (
        "Complementary colors create strong contrast and visual vibrance.",
        "This complementary scheme balances warm and cool tones for visual interest.",
        "Complementary colors like these create energy through their natural contrast.",
    ),
    "triadic": (
        "Triadic color schemes use three colors equally spaced on the color wheel for balance and richness.",
        "This triadic palette gives you good contrast while maintaining color harmony.",
        "Triadic schemes like this offer vibrant contrast even when using paler or unsaturated colors.",
    ),
    "tetradic": (
        "Tetradic schemes use four colors arranged in two complementary pairs for rich, balanced designs.",
        "This tetradic palette gives you plenty of colors to work with while maintaining harmony.",
        "Tetradic color schemes like this one work well when you let one color dominate and use the "
        "others as accents.",
    ),
    "random": (
        "This custom palette gives you flexibility to create your own unique look.",
        "I like this custom color combination - it has an interesting character.",
        "Custom palettes like this one let you express your unique design vision.",
    ),
}

UNKNOWN_SCHEME_RESPONSE = "This color scheme has a really interesting visual quality to it."
EMPTY_PALETTE_RESPONSE = "Your palette is looking good! The colors work well together."


def _palette_feedback(colors, rng):
    names = [color_name(c) for c in colors]
    if not names:
        return EMPTY_PALETTE_RESPONSE

    # Short palettes reuse the last name rather than indexing past the end
    def name_at(i):
        return names[min(i, len(names) - 1)]

    templates = (
        f"I like this combination! The {names[0]} works nicely with the {names[-1]}.",
        f"This palette has a nice balance of tones. The {name_at(1)} adds a good focal point.",
        f"Nice palette! The contrast between {names[0]} and {name_at(2)} creates visual interest.",
        f"These colors work well together. I particularly like the {rng.choice(names)}.",
    )
    return rng.choice(templates)


def local_response(event, colors, scheme=None, rng=None):
    """Pick a canned assistant reply for a user action.

    Args:
        event: One of RESPONSE_EVENTS
        colors: Current palette as hex strings
        scheme: Scheme name, used by "scheme_change"
        rng: Seed or RandomSource

    Returns:
        str
    """
    if event not in RESPONSE_EVENTS:
        raise ValueError(f"Unknown response event {event!r}; expected one of {RESPONSE_EVENTS}")
    rng = resolve_rng(rng)

    if event == "palette_feedback":
        return _palette_feedback(colors, rng)
    if event == "image_extraction":
        return rng.choice(IMAGE_EXTRACTION_RESPONSES)
    if event == "scheme_change":
        options = SCHEME_RESPONSES.get(scheme)
        return rng.choice(options) if options else UNKNOWN_SCHEME_RESPONSE
    if event == "color_change":
        return rng.choice(COLOR_CHANGE_RESPONSES)
    return score(colors).message
