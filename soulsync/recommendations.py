"""
Mood suggestion cards and personalized task recommendations.
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from .content import MOOD_SUGGESTIONS, RECOMMENDATIONS
from .models import MoodEntry, MoodLabel


class SuggestionCard(BaseModel):
    """Quick suggestions shown after a mood is detected in chat."""

    mood: MoodLabel
    title: str
    suggestions: list[str]


class Recommendation(BaseModel):
    """Task focus derived from the user's recent mood log."""

    recent_mood: str | None = Field(None, description="Most recent logged mood")
    average_intensity: float | None = Field(
        None, description="Mean intensity across the entries"
    )
    focus: str
    activities: list[str]


def suggestions_for(mood: MoodLabel) -> SuggestionCard | None:
    """Return the suggestion card for a mood, if it has one."""
    card = MOOD_SUGGESTIONS.get(mood)
    if card is None:
        return None

    title, suggestions = card
    return SuggestionCard(mood=mood, title=title, suggestions=list(suggestions))


def recommend(entries: Sequence[MoodEntry]) -> Recommendation:
    """
    Recommend a task focus from mood entries ordered newest first.

    Moods without a dedicated bundle get the general wellness bundle.
    """
    recent_mood = entries[0].mood if entries else None
    focus, activities = RECOMMENDATIONS.get(recent_mood, RECOMMENDATIONS["neutral"])

    average = None
    if entries:
        average = sum(entry.intensity for entry in entries) / len(entries)

    return Recommendation(
        recent_mood=recent_mood,
        average_intensity=average,
        focus=focus,
        activities=list(activities),
    )
