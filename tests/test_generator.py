import pytest

from pixi_palette.color import hex_to_hsl
from pixi_palette.palette.generator import (
    AESTHETIC_BANDS,
    COLOR_SCHEMES,
    PALETTE_AESTHETICS,
    RETRO_POOL,
    generate_by_aesthetic,
    generate_by_scheme,
)
from pixi_palette.random_source import RandomSource

from .conftest import is_hex

BASE = "#3366cc"  # hue 220


def hue_gap(a, b):
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


@pytest.mark.parametrize("scheme", COLOR_SCHEMES)
@pytest.mark.parametrize("count", range(3, 8))
def test_scheme_returns_requested_count(scheme, count):
    for seed in range(5):
        palette = generate_by_scheme(scheme, count, rng=seed)
        assert len(palette) == count
        assert all(is_hex(c) for c in palette)


@pytest.mark.parametrize("scheme", COLOR_SCHEMES)
def test_scheme_with_base_color(scheme, rng):
    palette = generate_by_scheme(scheme, 5, base_color=BASE, rng=rng)
    assert len(palette) == 5
    assert all(is_hex(c) for c in palette)


def test_unknown_scheme_raises():
    with pytest.raises(ValueError):
        generate_by_scheme("pentadic", 5)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        generate_by_scheme("triadic", -1)


def test_zero_count_is_empty():
    assert generate_by_scheme("analogous", 0, rng=1) == []
    assert generate_by_aesthetic("pastel", 0, rng=1) == []


def test_same_seed_same_palette():
    assert generate_by_scheme("triadic", 5, rng=7) == generate_by_scheme("triadic", 5, rng=7)
    assert generate_by_aesthetic("warm", 5, rng=7) == generate_by_aesthetic("warm", 5, rng=7)


@pytest.mark.parametrize("count", range(2, 8))
def test_monochromatic_shares_hue_and_spans_lightness(count):
    palette = generate_by_scheme("monochromatic", count, base_color=BASE, rng=3)
    hsl = [hex_to_hsl(c) for c in palette]

    assert all(hue_gap(h, 220) <= 2 for h, _, _ in hsl)
    assert hsl[0][2] == pytest.approx(20, abs=1)
    assert hsl[-1][2] == pytest.approx(80, abs=1)
    lightness = [l for _, _, l in hsl]
    assert lightness == sorted(lightness)


def test_monochromatic_single_color():
    palette = generate_by_scheme("monochromatic", 1, base_color=BASE, rng=3)
    assert len(palette) == 1
    assert hex_to_hsl(palette[0])[2] == pytest.approx(20, abs=1)


def test_monochromatic_keeps_base_saturation():
    palette = generate_by_scheme("monochromatic", 5, base_color=BASE)
    middle = hex_to_hsl(palette[2])
    assert middle[1] == pytest.approx(60, abs=2)


def test_analogous_spans_thirty_degrees_each_side():
    palette = generate_by_scheme("analogous", 5, base_color=BASE, rng=11)
    hues = [hex_to_hsl(c)[0] for c in palette]
    expected = [190, 205, 220, 235, 250]
    for hue, target in zip(hues, expected):
        assert hue_gap(hue, target) <= 2


def test_complementary_splits_base_and_opposite():
    palette = generate_by_scheme("complementary", 5, base_color="#ff0000")
    hsl = [hex_to_hsl(c) for c in palette]

    assert all(hue_gap(h, 0) <= 2 for h, _, _ in hsl[:3])
    assert all(hue_gap(h, 180) <= 2 for h, _, _ in hsl[3:])
    # Lightness climbs within each side
    assert hsl[0][2] < hsl[1][2] < hsl[2][2]
    assert hsl[3][2] < hsl[4][2]
    assert hsl[0][2] == pytest.approx(30, abs=1)


def test_complementary_is_deterministic_for_a_base():
    assert generate_by_scheme("complementary", 4, base_color=BASE, rng=1) == generate_by_scheme(
        "complementary", 4, base_color=BASE, rng=2
    )


@pytest.mark.parametrize(
    "scheme, offsets",
    [("triadic", (0, 120, 240)), ("tetradic", (0, 90, 180, 270))],
)
def test_round_robin_hues(scheme, offsets):
    palette = generate_by_scheme(scheme, 7, base_color="#ff0000", rng=5)
    for i, color in enumerate(palette):
        hue = hex_to_hsl(color)[0]
        assert hue_gap(hue, offsets[i % len(offsets)]) <= 2


def test_scheme_saturation_and_lightness_bands():
    palette = generate_by_scheme("triadic", 7, rng=21)
    for color in palette:
        _, s, l = hex_to_hsl(color)
        assert 68 <= s <= 100
        assert 39 <= l <= 61


def test_random_scheme_uses_independent_channels(scripted):
    # First draw is the unused base hue
    source = scripted(ints=[0, 255, 0, 0, 0, 255, 0, 0, 0, 255])
    assert generate_by_scheme("random", 3, rng=source) == ["#ff0000", "#00ff00", "#0000ff"]


@pytest.mark.parametrize("aesthetic", PALETTE_AESTHETICS)
@pytest.mark.parametrize("count", range(3, 8))
def test_aesthetic_returns_requested_count(aesthetic, count):
    for seed in range(5):
        palette = generate_by_aesthetic(aesthetic, count, rng=seed)
        assert len(palette) == count
        assert all(is_hex(c) for c in palette)


def test_unknown_aesthetic_raises():
    with pytest.raises(ValueError):
        generate_by_aesthetic("gothic", 5)


def test_pastel_is_light():
    palette = generate_by_aesthetic("pastel", 50, rng=2)
    assert all(79 <= hex_to_hsl(c)[2] <= 93 for c in palette)


def test_moody_is_dark():
    palette = generate_by_aesthetic("moody", 50, rng=2)
    assert all(14 <= hex_to_hsl(c)[2] <= 51 for c in palette)


def test_vibrant_band():
    palette = generate_by_aesthetic("vibrant", 50, rng=2)
    for color in palette:
        _, s, l = hex_to_hsl(color)
        assert s >= 78
        assert 44 <= l <= 71


def test_neutral_is_muted():
    palette = generate_by_aesthetic("neutral", 50, rng=2)
    assert all(hex_to_hsl(c)[1] < 25 for c in palette)


@pytest.mark.parametrize("aesthetic", ["warm", "cool", "earthy"])
def test_hue_candidates_with_jitter(aesthetic):
    hues, jitter, _, _ = AESTHETIC_BANDS[aesthetic]
    palette = generate_by_aesthetic(aesthetic, 20, rng=4)
    for i, color in enumerate(palette):
        assert hue_gap(hex_to_hsl(color)[0], hues[i % len(hues)]) <= jitter + 2


def test_monochromatic_aesthetic_shares_hue():
    palette = generate_by_aesthetic("monochromatic", 5, rng=9)
    hues = [hex_to_hsl(c)[0] for c in palette]
    assert all(hue_gap(h, hues[2]) <= 4 for h in hues)


def test_retro_draws_without_replacement(scripted):
    # A source that only ever yields index 0 must still finish
    palette = generate_by_aesthetic("retro", 3, rng=scripted())
    assert len(set(palette)) == 3
    assert set(palette) <= set(RETRO_POOL)


def test_retro_is_reproducible():
    assert generate_by_aesthetic("retro", 6, rng=5) == generate_by_aesthetic("retro", 6, rng=5)


def test_retro_uses_whole_pool_once():
    palette = generate_by_aesthetic("retro", len(RETRO_POOL), rng=RandomSource(8))
    assert sorted(palette) == sorted(RETRO_POOL)


def test_retro_rejects_more_than_pool():
    with pytest.raises(ValueError):
        generate_by_aesthetic("retro", len(RETRO_POOL) + 1)


def test_random_aesthetic_delegates(scripted):
    # Index 8 of the non-random aesthetics is "retro"
    palette = generate_by_aesthetic("random", 3, rng=scripted(ints=[8]))
    assert len(set(palette)) == 3
    assert set(palette) <= set(RETRO_POOL)
