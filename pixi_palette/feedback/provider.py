import logging

from ..random_source import resolve_rng
from .responses import local_response
from .scorer import HARMONY_LEVELS, HarmonyFeedback, score

logger = logging.getLogger(__name__)


class FeedbackProvider:
    """Source of palette critiques and assistant replies."""

    def feedback(self, colors):
        raise NotImplementedError

    def respond(self, event, colors, scheme=None):
        raise NotImplementedError


class LocalFeedbackProvider(FeedbackProvider):
    """Local heuristics; never fails and never touches the network."""

    def __init__(self, rng=None):
        self.rng = resolve_rng(rng)

    def feedback(self, colors):
        return score(colors)

    def respond(self, event, colors, scheme=None):
        return local_response(event, colors, scheme=scheme, rng=self.rng)


def _coerce_feedback(result):
    """Accept a HarmonyFeedback or a mapping with the same keys."""
    if isinstance(result, HarmonyFeedback):
        feedback = result
    else:
        feedback = HarmonyFeedback(
            message=result["message"],
            suggestions=list(result.get("suggestions") or []),
            harmony=result["harmony"],
        )
    if feedback.harmony not in HARMONY_LEVELS:
        raise ValueError(f"Unknown harmony level {feedback.harmony!r}")
    return feedback


class FallbackFeedbackProvider(FeedbackProvider):
    """Ask ``primary`` first and answer locally whenever it fails.

    ``primary`` is any object with ``feedback``/``respond`` methods, typically a
    client for a remote text-generation service.
    """

    def __init__(self, primary, fallback=None):
        self.primary = primary
        self.fallback = fallback or LocalFeedbackProvider()

    def feedback(self, colors):
        try:
            return _coerce_feedback(self.primary.feedback(colors))
        except Exception as e:
            logger.warning("Primary feedback provider failed, using local analysis: %s", e)
            return self.fallback.feedback(colors)

    def respond(self, event, colors, scheme=None):
        try:
            text = self.primary.respond(event, colors, scheme=scheme)
            if not text:
                raise ValueError("empty response")
            return text
        except Exception as e:
            logger.warning("Primary response provider failed, using canned reply: %s", e)
            return self.fallback.respond(event, colors, scheme=scheme)
