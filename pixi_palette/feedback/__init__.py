from .provider import FallbackFeedbackProvider, FeedbackProvider, LocalFeedbackProvider
from .responses import RESPONSE_EVENTS, local_response
from .scorer import (
    HARMONY_LEVELS,
    HarmonyFeedback,
    PaletteStats,
    classify_harmony,
    palette_statistics,
    score,
)

__all__ = [
    "FallbackFeedbackProvider",
    "FeedbackProvider",
    "HARMONY_LEVELS",
    "HarmonyFeedback",
    "LocalFeedbackProvider",
    "PaletteStats",
    "RESPONSE_EVENTS",
    "classify_harmony",
    "local_response",
    "palette_statistics",
    "score",
]
