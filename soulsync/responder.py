"""
Mood-adaptive response selection.

Each detected mood maps to a canned reply. Non-crisis replies may be replaced
by generated text when a generator is supplied; crisis replies never are.
"""

import logging
from collections.abc import Awaitable, Callable

from .content import DEFAULT_RESPONSE, PROMPT_TEMPLATE, RESPONSE_TEMPLATES
from .models import MoodEntry, MoodLabel, ResponseBundle

logger = logging.getLogger(__name__)

GenerateText = Callable[[str], Awaitable[str]]

# Fixed intensities recorded for chat-detected moods
CRISIS_INTENSITY = 1
DEFAULT_INTENSITY = 5


def canned_response(mood: MoodLabel) -> ResponseBundle:
    """Return the canned bundle for a mood, or the default bundle."""
    message, is_crisis, music = RESPONSE_TEMPLATES.get(mood, DEFAULT_RESPONSE)
    return ResponseBundle(
        message_text=message,
        is_crisis=is_crisis,
        music_suggestions=list(music) if music is not None else None,
    )


def build_prompt(mood: MoodLabel, original_text: str) -> str:
    """Build the generation prompt for a user message and its mood."""
    return PROMPT_TEMPLATE.format(text=original_text, mood=mood.value)


async def select_response(
    mood: MoodLabel,
    original_text: str,
    generate: GenerateText | None = None,
) -> ResponseBundle:
    """
    Choose the reply for a detected mood.

    Crisis replies are returned straight from the canned table. For every
    other mood a single generation attempt is made when ``generate`` is given;
    any failure or empty result falls back to the canned bundle.

    Args:
        mood: The detected mood
        original_text: The user's message, embedded in the prompt
        generate: Optional async text-generation callable

    Returns:
        The ResponseBundle to send back
    """
    bundle = canned_response(mood)

    if mood is MoodLabel.CRISIS or generate is None:
        return bundle

    try:
        generated = await generate(build_prompt(mood, original_text))
    except Exception:
        logger.exception("Text generation failed for mood %s", mood.value)
        return bundle

    if not isinstance(generated, str) or not generated.strip():
        logger.warning("Text generation returned no usable text for mood %s", mood.value)
        return bundle

    return ResponseBundle(message_text=generated, is_crisis=False)


def mood_entry_for(mood: MoodLabel, text: str) -> MoodEntry | None:
    """
    Build the mood-tracking entry a chat turn should record.

    Neutral turns record nothing. Crisis is logged as ``very_sad``.
    """
    if mood is MoodLabel.NEUTRAL:
        return None

    if mood is MoodLabel.CRISIS:
        return MoodEntry(
            mood="very_sad",
            intensity=CRISIS_INTENSITY,
            notes=text,
            triggers=["other"],
        )

    return MoodEntry(
        mood=mood.value,
        intensity=DEFAULT_INTENSITY,
        notes=text,
        triggers=["other"],
    )
