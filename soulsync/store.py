"""
In-memory storage for the SoulSync service.

These stores stand in for the hosted entity layer: chat messages per session,
mood entries with real-time streaming to subscribers, the therapist
directory, wellness tasks and blog posts. The interfaces allow replacement
with a persistent backend later.
"""

import asyncio
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from .content import SAMPLE_POSTS
from .models import (
    BlogPost,
    Message,
    MoodEntry,
    MoodLabel,
    ProviderLocation,
    ProviderRecord,
    Sender,
    Task,
)


class MessageStore:
    """Chat messages kept in creation order."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._lock = asyncio.Lock()

    async def create(
        self,
        text: str,
        sender: Sender,
        session_id: str,
        detected_mood: MoodLabel | None = None,
    ) -> Message:
        """
        Persist a new chat message.

        Args:
            text: The message body
            sender: Who wrote the message
            session_id: The chat session
            detected_mood: Mood detected for the turn, if any

        Returns:
            The stored Message with id and timestamp
        """
        async with self._lock:
            message = Message(
                text=text,
                sender=sender,
                session_id=session_id,
                detected_mood=detected_mood,
            )
            self._messages.append(message)
            return message

    async def list(self, session_id: str, newest_first: bool = False) -> list[Message]:
        """Return the messages of one session in creation order."""
        async with self._lock:
            messages = [m for m in self._messages if m.session_id == session_id]

        if newest_first:
            messages.reverse()
        return messages


class MoodEntryStore:
    """
    Mood log with real-time streaming capabilities.

    New entries are announced to subscribers through a condition variable
    and an update counter, so slow subscribers never queue up stale data.
    """

    def __init__(self) -> None:
        self._entries: list[MoodEntry] = []
        self._condition = asyncio.Condition()
        self._update_counter = 0

    async def create(self, entry: MoodEntry) -> MoodEntry:
        """Record a mood entry and notify all subscribers."""
        async with self._condition:
            self._entries.append(entry)
            self._update_counter += 1
            self._condition.notify_all()
            return entry

    async def list(self, limit: int | None = None) -> list[MoodEntry]:
        """Return entries newest first, optionally capped at ``limit``."""
        async with self._condition:
            entries = list(reversed(self._entries))

        if limit is not None:
            entries = entries[:limit]
        return entries

    @asynccontextmanager
    async def stream(self) -> AsyncGenerator[AsyncGenerator[MoodEntry, None], None]:
        """
        Stream new mood entries to a subscriber.

        The subscription starts when the context is entered; only entries
        created after that are yielded. When several entries land between
        wake-ups, all of them are yielded in order.

        Yields:
            An async generator of MoodEntry objects
        """
        async with self._condition:
            subscribed_at = self._update_counter

        async def entry_generator() -> AsyncGenerator[MoodEntry, None]:
            last_seen_counter = subscribed_at

            try:
                while True:
                    async with self._condition:
                        await self._condition.wait_for(
                            lambda: self._update_counter > last_seen_counter
                        )
                        missed = self._update_counter - last_seen_counter
                        fresh = self._entries[-missed:]
                        last_seen_counter = self._update_counter

                    for entry in fresh:
                        yield entry

            except (asyncio.CancelledError, GeneratorExit):
                return

        yield entry_generator()


SAMPLE_PROVIDERS: tuple[ProviderRecord, ...] = (
    ProviderRecord(
        name="Dr. Anjali Sharma",
        credentials="PhD, Clinical Psychologist (RCI Licensed)",
        specialties=["anxiety", "depression", "stress management"],
        bio=(
            "Specializing in Cognitive Behavioral Therapy (CBT) for young adults. "
            "Helps clients navigate academic pressure and career uncertainty."
        ),
        location=ProviderLocation(
            address="101, Wellness Clinic, Bandra West",
            city="Mumbai",
            state="MH",
            zip="400050",
            lat=19.0760,
            lng=72.8777,
        ),
        phone="+91 98765 43210",
        email="dr.anjali@soulsync.in",
        insurance_accepted=["HDFC Ergo", "ICICI Lombard", "Bajaj Allianz"],
        rating=4.9,
        session_fee=2500,
        online=True,
        in_person=True,
        languages=["English", "Hindi", "Marathi"],
    ),
    ProviderRecord(
        name="Rohan Desai",
        credentials="M.Phil, Counseling Psychologist",
        specialties=["relationships", "family therapy", "addiction"],
        bio=(
            "Experienced in helping Gen Z with relationship conflicts and addiction "
            "issues using a person-centered approach. 8+ years of practice."
        ),
        location=ProviderLocation(
            address="A-23, Mindful Living Center, Koramangala",
            city="Bengaluru",
            state="KA",
            zip="560034",
            lat=12.9279,
            lng=77.6271,
        ),
        phone="+91 87654 32109",
        email="rohan.desai@soulsync.in",
        insurance_accepted=["Star Health", "Max Bupa"],
        rating=4.8,
        session_fee=1800,
        online=True,
        in_person=True,
        languages=["English", "Kannada"],
    ),
    ProviderRecord(
        name="Dr. Priya Verma",
        credentials="MD, Psychiatrist",
        specialties=["depression", "adhd", "eating disorders"],
        bio=(
            "A psychiatrist with expertise in medication management and therapy "
            "for severe depression and ADHD. Focuses on a holistic treatment plan."
        ),
        location=ProviderLocation(
            address="Suite 5, Healing Hub, Saket",
            city="New Delhi",
            state="DL",
            zip="110017",
            lat=28.5273,
            lng=77.2177,
        ),
        phone="+91 76543 21098",
        email="dr.priya@soulsync.in",
        website="www.drpriyaverma.com",
        insurance_accepted=["Aetna", "Cigna TTK"],
        rating=4.9,
        session_fee=3000,
        online=True,
        in_person=True,
        languages=["English", "Hindi"],
    ),
)


class ProviderDirectory:
    """Read-mostly therapist directory, seeded with samples when empty."""

    def __init__(
        self, providers: list[ProviderRecord] | None = None, seed: bool = True
    ) -> None:
        self._providers: list[ProviderRecord] = list(providers or [])
        self._seed = seed
        self._lock = asyncio.Lock()

    async def add(self, provider: ProviderRecord) -> ProviderRecord:
        """Add a provider to the directory."""
        async with self._lock:
            self._providers.append(provider)
            return provider

    async def seed_samples(self) -> None:
        """Fill an empty directory with the sample providers."""
        async with self._lock:
            if not self._providers:
                self._providers.extend(SAMPLE_PROVIDERS)

    async def list(self) -> list[ProviderRecord]:
        """Return all providers in insertion order."""
        if self._seed:
            await self.seed_samples()

        async with self._lock:
            return list(self._providers)


class TaskStore:
    """Wellness tasks, pending and completed."""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = asyncio.Lock()

    async def create(self, task: Task) -> Task:
        """Add a task to the list."""
        async with self._lock:
            self._tasks[task.id] = task
            return task

    async def list(self, completed: bool | None = None) -> list[Task]:
        """
        Return tasks newest first.

        Args:
            completed: Only completed (True) or pending (False) tasks; all if None
        """
        async with self._lock:
            tasks = list(reversed(self._tasks.values()))

        if completed is not None:
            tasks = [t for t in tasks if t.completed is completed]
        return tasks

    async def complete(self, task_id: str) -> Task:
        """
        Mark a task as completed.

        Completing a task twice keeps the first completion time.

        Raises:
            KeyError: If no task has that id
        """
        async with self._lock:
            task = self._tasks[task_id]
            if not task.completed:
                task = task.model_copy(
                    update={"completed": True, "completed_at": time.time()}
                )
                self._tasks[task_id] = task
            return task


def _sample_post(row: tuple) -> BlogPost:
    title, slug, excerpt, author, tags, category, minutes, content = row
    return BlogPost(
        title=title,
        slug=slug,
        excerpt=excerpt,
        author=author,
        tags=list(tags),
        category=category,
        reading_time=minutes,
        content=content,
    )


class BlogStore:
    """Blog posts, seeded with sample articles when empty."""

    def __init__(self, posts: list[BlogPost] | None = None, seed: bool = True) -> None:
        self._posts: list[BlogPost] = list(posts or [])
        self._seed = seed
        self._lock = asyncio.Lock()

    async def create(self, post: BlogPost) -> BlogPost:
        """Publish a post."""
        async with self._lock:
            self._posts.append(post)
            return post

    async def seed_samples(self) -> None:
        """Fill an empty blog with the sample posts."""
        async with self._lock:
            if not self._posts:
                self._posts.extend(_sample_post(row) for row in SAMPLE_POSTS)

    async def list(self) -> list[BlogPost]:
        """Return published posts newest first."""
        if self._seed:
            await self.seed_samples()

        async with self._lock:
            return [p for p in reversed(self._posts) if p.published]

    async def get(self, slug: str) -> BlogPost | None:
        """Find a published post by slug."""
        for post in await self.list():
            if post.slug == slug:
                return post
        return None
