"""
Keyword-based mood detection for chat messages.
"""

from .content import CRISIS_KEYWORDS, MOOD_KEYWORDS
from .models import MoodLabel


def _mentions_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def classify(text: str) -> MoodLabel:
    """
    Detect the mood expressed in a message.

    Crisis keywords are checked first and win over anything else in the text.
    The remaining categories are tried in declaration order and the first one
    with a matching substring is returned.

    Args:
        text: The raw message text

    Returns:
        The detected MoodLabel, ``neutral`` when nothing matches
    """
    lowered = text.lower()

    if _mentions_any(lowered, CRISIS_KEYWORDS):
        return MoodLabel.CRISIS

    for label, keywords in MOOD_KEYWORDS:
        if _mentions_any(lowered, keywords):
            return label

    return MoodLabel.NEUTRAL
