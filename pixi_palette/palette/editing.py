from ..color import normalize_hex
from .generator import generate_by_scheme


def _check_locks(colors, locked):
    if len(locked) != len(colors):
        raise ValueError(f"Got {len(locked)} lock flags for {len(colors)} colors")


def regenerate_palette(colors, locked, scheme="random", rng=None):
    """Replace every unlocked color, keeping locked ones in place.

    The first locked color anchors the new palette's hue. When every color is
    locked the palette comes back unchanged.
    """
    _check_locks(colors, locked)
    colors = [normalize_hex(c) for c in colors]
    if all(locked):
        return colors

    base_color = next((c for c, is_locked in zip(colors, locked) if is_locked), None)
    fresh = generate_by_scheme(scheme, len(colors), base_color=base_color, rng=rng)
    return [c if is_locked else fresh[i] for i, (c, is_locked) in enumerate(zip(colors, locked))]


def resize_palette(colors, locked, new_count, scheme="random", rng=None):
    """Grow or shrink a palette.

    Growing appends freshly generated colors. Shrinking keeps all locked colors
    plus the earliest unlocked ones, falling back to the first ``new_count``
    colors when more colors are locked than fit.

    Returns:
        tuple: (colors, locked) for the resized palette
    """
    _check_locks(colors, locked)
    if new_count < 0:
        raise ValueError(f"Palette size must be non-negative, got {new_count}")
    colors = [normalize_hex(c) for c in colors]
    locked = list(locked)

    if new_count >= len(colors):
        extra = generate_by_scheme(scheme, new_count - len(colors), rng=rng)
        return colors + extra, locked + [False] * len(extra)

    locked_count = sum(1 for flag in locked if flag)
    if locked_count > new_count:
        return colors[:new_count], locked[:new_count]

    unlocked_to_keep = new_count - locked_count
    kept_colors, kept_locks = [], []
    for color, is_locked in zip(colors, locked):
        if is_locked:
            kept_colors.append(color)
            kept_locks.append(True)
        elif unlocked_to_keep > 0:
            kept_colors.append(color)
            kept_locks.append(False)
            unlocked_to_keep -= 1
    return kept_colors, kept_locks
