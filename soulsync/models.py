"""
Shared data models for the SoulSync service.

This module defines the core domain models used across multiple layers
of the application (classification, responses, geo filtering, stores, API).
"""

import time
import uuid
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class MoodLabel(str, Enum):
    """Mood detected from a chat message."""

    NEUTRAL = "neutral"
    SAD = "sad"
    ANXIOUS = "anxious"
    STRESSED = "stressed"
    ANGRY = "angry"
    HAPPY = "happy"
    TIRED = "tired"
    CRISIS = "crisis"


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    AGENT = "agent"


# Vocabulary of the mood log, which is wider than the chat labels
LoggedMood = Literal[
    "very_happy",
    "happy",
    "excited",
    "neutral",
    "anxious",
    "stressed",
    "sad",
    "very_sad",
    "angry",
    "tired",
]

Trigger = Literal[
    "work",
    "studies",
    "relationships",
    "family",
    "health",
    "finances",
    "social_media",
    "other",
]


def _new_id() -> str:
    return uuid.uuid4().hex


class Message(BaseModel):
    """A single chat turn. Messages never change once sent."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id, description="Message identifier")
    text: str = Field(..., description="The message body")
    sender: Sender = Field(..., description="Who wrote the message")
    session_id: str = Field(..., description="Chat session the message belongs to")
    detected_mood: MoodLabel | None = Field(
        None, description="Mood detected for the user turn this message answers"
    )
    created_at: float = Field(
        default_factory=time.time, description="Unix timestamp of creation"
    )


class MoodEntry(BaseModel):
    """A mood-tracking entry, logged manually or derived from chat."""

    id: str = Field(default_factory=_new_id, description="Entry identifier")
    mood: LoggedMood = Field(..., description="The logged mood")
    intensity: int = Field(5, ge=1, le=10, description="Intensity from 1 to 10")
    notes: str = Field("", description="Free-form notes")
    triggers: list[Trigger] = Field(
        default_factory=list, description="What set the mood off"
    )
    created_at: float = Field(
        default_factory=time.time, description="Unix timestamp of creation"
    )


class ResponseBundle(BaseModel):
    """The supportive reply chosen for a detected mood."""

    message_text: str = Field(..., description="Text sent back to the user")
    is_crisis: bool = Field(False, description="Whether crisis resources apply")
    music_suggestions: list[str] | None = Field(
        None, description="Ordered music suggestions, if any"
    )


class GeoPoint(BaseModel):
    """A user coordinate in degrees."""

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class ProviderLocation(BaseModel):
    """Where a provider practices. Coordinates are taken as given."""

    model_config = ConfigDict(frozen=True)

    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    lat: float
    lng: float


class ProviderRecord(BaseModel):
    """A therapist listed in the provider directory."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    name: str
    credentials: str = ""
    specialties: list[str] = Field(default_factory=list)
    bio: str = ""
    location: ProviderLocation
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    insurance_accepted: list[str] = Field(default_factory=list)
    rating: float = 0.0
    session_fee: float = 0
    online: bool = False
    in_person: bool = True
    languages: list[str] = Field(default_factory=list)


class GeoQuery(BaseModel):
    """Filter criteria for a therapist search."""

    search_text: str = Field("", description="Matched against name, specialty, city")
    specialty: str = Field("all", description='Required specialty, or "all"')
    max_distance_km: float = Field(50, ge=0, description="Distance cap in km")
    origin: GeoPoint | None = Field(None, description="User location, if known")


class RankedResult(BaseModel):
    """A provider that passed the filters, with its distance when known."""

    provider: ProviderRecord
    distance_km: float | None = None


TaskCategory = Literal[
    "mindfulness", "physical", "creative", "social", "learning", "self_care"
]

Difficulty = Literal["easy", "medium", "hard"]


class Task(BaseModel):
    """A wellness task on the user's list."""

    id: str = Field(default_factory=_new_id)
    title: str
    description: str = ""
    category: TaskCategory
    difficulty: Difficulty = "easy"
    duration_minutes: int = Field(10, ge=1)
    mood_target: list[str] = Field(default_factory=list)
    ai_generated: bool = False
    completed: bool = False
    created_at: float = Field(default_factory=time.time)
    completed_at: float | None = Field(
        None, description="Unix timestamp of completion"
    )


BlogCategory = Literal[
    "mental_health", "wellness", "lifestyle", "research", "stories", "tips"
]


class BlogPost(BaseModel):
    """An article in the wellness blog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""
    author: str = ""
    tags: list[str] = Field(default_factory=list)
    category: BlogCategory
    reading_time: int = Field(5, ge=1, description="Minutes to read")
    published: bool = True
    created_at: float = Field(default_factory=time.time)
