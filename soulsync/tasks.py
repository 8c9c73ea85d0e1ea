"""
Wellness tasks built from mood recommendations.
"""

from collections.abc import Iterable
from datetime import date, datetime, timezone

from .content import ACTIVITY_TASKS
from .models import Task
from .recommendations import Recommendation


def tasks_from_recommendation(recommendation: Recommendation) -> list[Task]:
    """
    Turn a recommendation's activities into tasks.

    Activities without a task template are skipped.
    """
    mood_target = [recommendation.recent_mood] if recommendation.recent_mood else []

    tasks = []
    for activity in recommendation.activities:
        template = ACTIVITY_TASKS.get(activity)
        if template is None:
            continue

        category, description, minutes = template
        tasks.append(
            Task(
                title=activity,
                description=description,
                category=category,
                duration_minutes=minutes,
                mood_target=mood_target,
            )
        )
    return tasks


def filter_tasks(tasks: Iterable[Task], category: str = "all") -> list[Task]:
    """Keep tasks in a category; "all" keeps everything."""
    if category == "all":
        return list(tasks)
    return [task for task in tasks if task.category == category]


def completed_on(tasks: Iterable[Task], day: date | None = None) -> int:
    """Count tasks completed on a UTC calendar day, today by default."""
    if day is None:
        day = datetime.now(timezone.utc).date()

    count = 0
    for task in tasks:
        if not task.completed or task.completed_at is None:
            continue
        if datetime.fromtimestamp(task.completed_at, tz=timezone.utc).date() == day:
            count += 1
    return count
