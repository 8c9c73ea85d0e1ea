"""
Chat pipeline for the SoulSync companion.

A chat turn persists the user's message, detects its mood, picks a reply,
persists the reply and records a mood entry. Storage failures are logged and
never block the reply; if the turn itself fails, the user still gets a
connection-trouble notice.
"""

import asyncio
import logging

from pydantic import BaseModel, Field

from .classifier import classify
from .content import CONNECTION_TROUBLE_MESSAGE, WELCOME_MESSAGE
from .models import Message, MoodLabel, ResponseBundle, Sender
from .responder import GenerateText, mood_entry_for, select_response
from .store import MessageStore, MoodEntryStore

logger = logging.getLogger(__name__)


class ChatReply(BaseModel):
    """Outcome of a chat turn."""

    message: Message = Field(..., description="The agent's reply message")
    mood: MoodLabel | None = Field(None, description="Mood detected in the turn")
    response: ResponseBundle | None = Field(
        None, description="The chosen response bundle, absent on failure"
    )


class ChatService:
    """Runs chat turns against the message and mood stores."""

    def __init__(
        self,
        messages: MessageStore,
        moods: MoodEntryStore,
        generate: GenerateText | None = None,
        timeout: float | None = 15.0,
    ) -> None:
        self.messages = messages
        self.moods = moods
        self._generate = generate
        self._timeout = timeout

    async def open_session(self, session_id: str) -> list[Message]:
        """
        Return a session's history, or an unsaved welcome message if empty.
        """
        try:
            history = await self.messages.list(session_id)
        except Exception:
            logger.exception("Failed to load messages for session %s", session_id)
            history = []

        if history:
            return history

        return [Message(text=WELCOME_MESSAGE, sender=Sender.AGENT, session_id=session_id)]

    async def send(self, session_id: str, text: str) -> ChatReply:
        """
        Run one chat turn.

        Args:
            session_id: The chat session
            text: The user's message

        Returns:
            The ChatReply holding the agent message

        Raises:
            ValueError: If the message is blank
        """
        if not text.strip():
            raise ValueError("Message text must not be empty")

        try:
            await self.messages.create(text=text, sender=Sender.USER, session_id=session_id)
        except Exception:
            logger.exception("Failed to save user message for session %s", session_id)

        try:
            mood = classify(text)
            response = await select_response(mood, text, self._bounded_generate())
        except Exception:
            logger.exception("Failed to process message for session %s", session_id)
            return ChatReply(
                message=Message(
                    text=CONNECTION_TROUBLE_MESSAGE,
                    sender=Sender.AGENT,
                    session_id=session_id,
                )
            )

        reply = await self._save_reply(session_id, response.message_text, mood)
        await self._record_mood(mood, text)

        return ChatReply(message=reply, mood=mood, response=response)

    def _bounded_generate(self) -> GenerateText | None:
        """Wrap the generator with the configured timeout."""
        if self._generate is None:
            return None

        generate = self._generate
        timeout = self._timeout

        async def bounded(prompt: str) -> str:
            return await asyncio.wait_for(generate(prompt), timeout=timeout)

        return bounded

    async def _save_reply(self, session_id: str, text: str, mood: MoodLabel) -> Message:
        try:
            return await self.messages.create(
                text=text,
                sender=Sender.AGENT,
                session_id=session_id,
                detected_mood=mood,
            )
        except Exception:
            logger.exception("Failed to save agent message for session %s", session_id)
            return Message(
                text=text,
                sender=Sender.AGENT,
                session_id=session_id,
                detected_mood=mood,
            )

    async def _record_mood(self, mood: MoodLabel, text: str) -> None:
        entry = mood_entry_for(mood, text)
        if entry is None:
            return

        try:
            await self.moods.create(entry)
        except Exception:
            logger.exception("Failed to save mood entry for mood %s", mood.value)
