"""
Mood dashboard statistics.
"""

from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone

from pydantic import BaseModel, Field

from .models import MoodEntry

DAYS_SHOWN = 7

# Reported for days without entries
NEUTRAL_INTENSITY = 5.0


class DayStats(BaseModel):
    """Mood summary for one calendar day."""

    day: date
    weekday: str = Field(..., description="Short weekday name, e.g. Mon")
    average_intensity: float = Field(
        ..., description="Mean intensity, 5 when nothing was logged"
    )
    count: int


class MoodStats(BaseModel):
    """Aggregates shown on the mood dashboard."""

    total_entries: int
    average_intensity: float = Field(
        ..., description="Mean intensity over all entries, 0 when empty"
    )
    mood_counts: dict[str, int]
    last_7_days: list[DayStats] = Field(..., description="Oldest day first")


def entry_date(entry: MoodEntry) -> date:
    """The UTC calendar day an entry was logged on."""
    return datetime.fromtimestamp(entry.created_at, tz=timezone.utc).date()


def mood_stats(entries: Sequence[MoodEntry], today: date | None = None) -> MoodStats:
    """
    Summarize mood entries for the dashboard.

    Args:
        entries: Mood entries in any order
        today: The last day of the weekly window, defaults to today in UTC

    Returns:
        MoodStats with per-day averages for the last seven days
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    by_day: dict[date, list[int]] = {}
    for entry in entries:
        by_day.setdefault(entry_date(entry), []).append(entry.intensity)

    last_7_days = []
    for offset in range(DAYS_SHOWN - 1, -1, -1):
        day = today - timedelta(days=offset)
        intensities = by_day.get(day, [])
        average = (
            sum(intensities) / len(intensities) if intensities else NEUTRAL_INTENSITY
        )
        last_7_days.append(
            DayStats(
                day=day,
                weekday=day.strftime("%a"),
                average_intensity=round(average, 1),
                count=len(intensities),
            )
        )

    total = len(entries)
    overall = sum(entry.intensity for entry in entries) / total if total else 0.0

    return MoodStats(
        total_entries=total,
        average_intensity=round(overall, 1),
        mood_counts=dict(Counter(entry.mood for entry in entries)),
        last_7_days=last_7_days,
    )
