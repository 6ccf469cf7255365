import pytest

from pixi_palette.feedback import (
    FallbackFeedbackProvider,
    HarmonyFeedback,
    LocalFeedbackProvider,
    local_response,
    score,
)
from pixi_palette.feedback.responses import (
    COLOR_CHANGE_RESPONSES,
    IMAGE_EXTRACTION_RESPONSES,
    SCHEME_RESPONSES,
    UNKNOWN_SCHEME_RESPONSE,
)

PALETTE = ["#ff0000", "#00ff00", "#0000ff"]


class BrokenProvider:
    def feedback(self, colors):
        raise ConnectionError("provider unreachable")

    def respond(self, event, colors, scheme=None):
        raise TimeoutError("provider timed out")


class CannedProvider:
    def __init__(self, result, text="Looks great!"):
        self.result = result
        self.text = text

    def feedback(self, colors):
        return self.result

    def respond(self, event, colors, scheme=None):
        return self.text


def test_palette_feedback_mentions_color_names(scripted):
    text = local_response("palette_feedback", PALETTE, rng=scripted(ints=[0, 0]))
    assert text == "I like this combination! The Red works nicely with the Blue."


def test_palette_feedback_short_palette_does_not_fail(rng):
    for _ in range(20):
        assert local_response("palette_feedback", ["#336699"], rng=rng)


def test_palette_feedback_empty_palette():
    assert local_response("palette_feedback", [], rng=1)


def test_image_extraction_response(rng):
    assert local_response("image_extraction", PALETTE, rng=rng) in IMAGE_EXTRACTION_RESPONSES


def test_color_change_response(rng):
    assert local_response("color_change", PALETTE, rng=rng) in COLOR_CHANGE_RESPONSES


@pytest.mark.parametrize("scheme", sorted(SCHEME_RESPONSES))
def test_scheme_change_response(scheme, rng):
    assert local_response("scheme_change", PALETTE, scheme=scheme, rng=rng) in SCHEME_RESPONSES[scheme]


def test_scheme_change_unknown_scheme(rng):
    assert local_response("scheme_change", PALETTE, scheme="pentadic", rng=rng) == UNKNOWN_SCHEME_RESPONSE


def test_scheme_change_without_scheme(rng):
    assert local_response("scheme_change", PALETTE, rng=rng) == UNKNOWN_SCHEME_RESPONSE


def test_idle_analysis_uses_scorer():
    assert local_response("idle_analysis", PALETTE) == score(PALETTE).message


def test_unknown_event_raises():
    with pytest.raises(ValueError):
        local_response("dance", PALETTE)


def test_local_provider():
    provider = LocalFeedbackProvider(rng=3)
    assert provider.feedback(PALETTE) == score(PALETTE)
    assert provider.respond("image_extraction", PALETTE) in IMAGE_EXTRACTION_RESPONSES


def test_seeded_local_provider_replays_one_sequence():
    first = LocalFeedbackProvider(rng=3)
    second = LocalFeedbackProvider(rng=3)
    replies = [first.respond("color_change", PALETTE) for _ in range(30)]

    assert len(set(replies)) > 1
    assert replies == [second.respond("color_change", PALETTE) for _ in range(30)]


def test_fallback_when_primary_fails(caplog):
    provider = FallbackFeedbackProvider(BrokenProvider())
    with caplog.at_level("WARNING"):
        feedback = provider.feedback(PALETTE)
    assert feedback == score(PALETTE)
    assert "using local analysis" in caplog.text

    assert provider.respond("color_change", PALETTE) in COLOR_CHANGE_RESPONSES


def test_fallback_accepts_mapping_from_primary():
    provider = FallbackFeedbackProvider(
        CannedProvider({"message": "Lovely", "suggestions": ["Add gray"], "harmony": "excellent"})
    )
    assert provider.feedback(PALETTE) == HarmonyFeedback("Lovely", ["Add gray"], "excellent")
    assert provider.respond("color_change", PALETTE) == "Looks great!"


def test_fallback_on_malformed_primary_result():
    provider = FallbackFeedbackProvider(CannedProvider({"message": "Hmm", "harmony": "amazing"}, text=""))
    assert provider.feedback(PALETTE) == score(PALETTE)
    assert provider.respond("color_change", PALETTE) in COLOR_CHANGE_RESPONSES
