"""
Tests for mood-adaptive response selection.
"""

import asyncio

from soulsync.content import DEFAULT_RESPONSE, RESPONSE_TEMPLATES
from soulsync.models import MoodLabel
from soulsync.responder import (
    build_prompt,
    canned_response,
    mood_entry_for,
    select_response,
)


class RecordingGenerator:
    """Async generator stub that records prompts."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    async def __call__(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class TestSelectResponse:
    """Test suite for select_response."""

    async def test_crisis_never_calls_generator(self):
        """Test that crisis replies are canned and skip generation."""
        generate = RecordingGenerator(reply="generated")

        bundle = await select_response(MoodLabel.CRISIS, "I want to die", generate)

        assert len(generate.prompts) == 0
        assert bundle.is_crisis is True
        assert bundle.message_text == RESPONSE_TEMPLATES[MoodLabel.CRISIS][0]
        assert bundle.music_suggestions is None

    async def test_failing_generator_falls_back_to_canned_text(self):
        """Test that a raising generator yields the canned sad bundle verbatim."""
        generate = RecordingGenerator(error=RuntimeError("service down"))

        bundle = await select_response(MoodLabel.SAD, "I feel sad", generate)

        assert len(generate.prompts) == 1
        assert bundle.message_text == RESPONSE_TEMPLATES[MoodLabel.SAD][0]
        assert bundle.is_crisis is False
        assert bundle.music_suggestions == [
            "Here Comes the Sun - The Beatles",
            "Good as Hell - Lizzo",
            "Happy - Pharrell Williams",
        ]

    async def test_timeout_falls_back_to_canned_text(self):
        """Test that a timed-out generation is handled like any other failure."""
        generate = RecordingGenerator(error=asyncio.TimeoutError())

        bundle = await select_response(MoodLabel.ANXIOUS, "so nervous", generate)

        assert bundle.message_text == RESPONSE_TEMPLATES[MoodLabel.ANXIOUS][0]

    async def test_empty_generation_falls_back(self):
        """Test that blank generated text is ignored."""
        generate = RecordingGenerator(reply="   ")

        bundle = await select_response(MoodLabel.HAPPY, "great day", generate)

        assert bundle.message_text == RESPONSE_TEMPLATES[MoodLabel.HAPPY][0]
        assert bundle.music_suggestions is not None

    async def test_generated_text_replaces_canned_message(self):
        """Test that successful generation replaces text and drops music."""
        generate = RecordingGenerator(reply="Rest up, you deserve it.")

        bundle = await select_response(MoodLabel.TIRED, "so sleepy", generate)

        assert bundle.message_text == "Rest up, you deserve it."
        assert bundle.is_crisis is False
        assert bundle.music_suggestions is None

    async def test_prompt_embeds_text_and_mood(self):
        """Test that the prompt carries the user's words and the mood."""
        generate = RecordingGenerator(reply="ok")

        await select_response(MoodLabel.SAD, "my cat ran away", generate)

        prompt = generate.prompts[0]
        assert '"my cat ran away"' in prompt
        assert "Their detected mood seems to be: sad" in prompt
        assert prompt == build_prompt(MoodLabel.SAD, "my cat ran away")

    async def test_without_generator_passes_canned_text_through(self):
        """Test that disabled generation returns the canned text unchanged."""
        for mood in MoodLabel:
            bundle = await select_response(mood, "anything")
            assert bundle == canned_response(mood)

    async def test_moods_without_template_use_default(self):
        """Test the default bundle for neutral, stressed and angry."""
        for mood in (MoodLabel.NEUTRAL, MoodLabel.STRESSED, MoodLabel.ANGRY):
            bundle = await select_response(mood, "hello")
            assert bundle.message_text == DEFAULT_RESPONSE[0]
            assert bundle.is_crisis is False
            assert bundle.music_suggestions is None


class TestMoodEntryFor:
    """Test suite for the chat mood-tracking entry."""

    def test_neutral_records_nothing(self):
        assert mood_entry_for(MoodLabel.NEUTRAL, "hi") is None

    def test_crisis_is_logged_as_very_sad(self):
        entry = mood_entry_for(MoodLabel.CRISIS, "I want to end it all")
        assert entry.mood == "very_sad"
        assert entry.intensity == 1
        assert entry.notes == "I want to end it all"
        assert entry.triggers == ["other"]

    def test_other_moods_use_fixed_intensity(self):
        for mood in (MoodLabel.SAD, MoodLabel.HAPPY, MoodLabel.ANGRY, MoodLabel.TIRED):
            entry = mood_entry_for(mood, "text")
            assert entry.mood == mood.value
            assert entry.intensity == 5
