"""
FastAPI server for the SoulSync service.

This module implements the HTTP API for chat turns, mood classification and
logging, Server-Sent Events streaming of new mood entries, recommendations,
the therapist finder, the mood dashboard, wellness tasks and the blog.
"""

import asyncio
import json
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from . import __version__
from .blog import filter_posts
from .chat import ChatReply, ChatService
from .classifier import classify
from .config import Settings
from .content import BLOG_CATEGORIES, TASK_CATEGORIES
from .dashboard import MoodStats, mood_stats
from .geo import filter_providers
from .llm import TextGenerator
from .models import (
    BlogPost,
    GeoPoint,
    GeoQuery,
    Message,
    MoodEntry,
    MoodLabel,
    RankedResult,
    Task,
)
from .recommendations import Recommendation, SuggestionCard, recommend, suggestions_for
from .store import BlogStore, MessageStore, MoodEntryStore, ProviderDirectory, TaskStore
from .tasks import completed_on, filter_tasks, tasks_from_recommendation

logger = logging.getLogger(__name__)


# API Request/Response Schemas
class TextPayload(BaseModel):
    """Payload carrying a user's message."""

    text: str = Field(..., description="The message text")


class ClassifyResponse(BaseModel):
    """Response model for the classify endpoint."""

    mood: MoodLabel = Field(..., description="The detected mood")


class MessagesResponse(BaseModel):
    """Response model for a session's history."""

    messages: list[Message] = Field(..., description="Messages in creation order")


class MoodEntriesResponse(BaseModel):
    """Response model for the mood log."""

    entries: list[MoodEntry] = Field(..., description="Entries, newest first")


class TherapistsResponse(BaseModel):
    """Response model for therapist searches."""

    results: list[RankedResult] = Field(..., description="Matching providers")


class TasksResponse(BaseModel):
    """Response model for task listings."""

    tasks: list[Task] = Field(..., description="Tasks, newest first")


class TaskStatsResponse(BaseModel):
    """Response model for task progress."""

    pending: int = Field(..., description="Tasks not yet completed")
    completed: int = Field(..., description="Tasks completed overall")
    completed_today: int = Field(..., description="Tasks completed today (UTC)")


class PostsResponse(BaseModel):
    """Response model for blog listings."""

    posts: list[BlogPost] = Field(..., description="Matching posts, newest first")


def create_app(
    messages: MessageStore,
    moods: MoodEntryStore,
    providers: ProviderDirectory,
    generator: TextGenerator | None = None,
    generation_timeout: float | None = 15.0,
    tasks: TaskStore | None = None,
    posts: BlogStore | None = None,
) -> FastAPI:
    """
    Create a FastAPI application around the given stores.

    Args:
        messages: Store for chat messages
        moods: Store for mood entries
        providers: The therapist directory
        generator: Optional text generator for non-crisis replies
        generation_timeout: Seconds to wait for a generated reply
        tasks: Store for wellness tasks, a fresh one if omitted
        posts: Store for blog posts, a fresh seeded one if omitted

    Returns:
        Configured FastAPI application
    """
    tasks = tasks if tasks is not None else TaskStore()
    posts = posts if posts is not None else BlogStore()

    chat = ChatService(
        messages,
        moods,
        generate=generator.generate if generator is not None else None,
        timeout=generation_timeout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Lifespan context manager for FastAPI application."""
        yield
        if generator is not None:
            await generator.aclose()

    app = FastAPI(
        title="SoulSync",
        description="Mood-adaptive chat companion and therapist finder",
        version=__version__,
        lifespan=lifespan,
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok", "service": "soulsync"}

    @app.post("/classify")
    async def classify_text(payload: TextPayload) -> ClassifyResponse:
        """Detect the mood of a piece of text."""
        return ClassifyResponse(mood=classify(payload.text))

    @app.get("/chat/{session_id}/messages")
    async def get_messages(session_id: str) -> MessagesResponse:
        """
        Get a session's history.

        An empty session answers with the welcome message, which is not stored.
        """
        return MessagesResponse(messages=await chat.open_session(session_id))

    @app.post("/chat/{session_id}/messages")
    async def send_message(session_id: str, payload: TextPayload) -> ChatReply:
        """
        Send a user message and get the companion's reply.

        Args:
            session_id: The chat session
            payload: The user's message

        Returns:
            The reply message, detected mood and response bundle
        """
        try:
            return await chat.send(session_id, payload.text)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.get("/moods")
    async def list_moods(
        limit: int | None = Query(None, ge=1, description="Maximum entries"),
    ) -> MoodEntriesResponse:
        """Get the mood log, newest first."""
        return MoodEntriesResponse(entries=await moods.list(limit=limit))

    @app.post("/moods")
    async def log_mood(entry: MoodEntry) -> MoodEntry:
        """Log a mood entry manually."""
        try:
            return await moods.create(entry)
        except Exception as e:
            raise HTTPException(
                status_code=500, detail=f"Failed to log mood: {str(e)}"
            )

    @app.get("/moods/recommendations")
    async def get_recommendations() -> Recommendation:
        """Recommend a task focus from the mood log."""
        return recommend(await moods.list())

    @app.get("/moods/stream")
    async def stream_moods() -> StreamingResponse:
        """
        Stream new mood entries via Server-Sent Events.

        A ``ready`` event is sent once the subscription is live. Every entry
        logged after that, manually or from chat, is sent as one event.

        Returns:
            StreamingResponse with text/event-stream content type
        """

        async def event_generator() -> AsyncGenerator[str, None]:
            """Generate SSE events for new mood entries."""
            try:
                async with moods.stream() as entry_stream:
                    yield "event: ready\ndata: {}\n\n"
                    async for entry in entry_stream:
                        data = json.dumps(entry.model_dump())
                        yield f"data: {data}\n\n"
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.exception("Mood stream failed")
                error_data = json.dumps({"error": str(e)})
                yield f"event: error\ndata: {error_data}\n\n"

        return StreamingResponse(
            event_generator(),
            media_type="text/event-stream",
            headers={
                "Cache-Control": "no-cache",
                "Connection": "keep-alive",
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Headers": "*",
            },
        )

    @app.get("/suggestions/{mood}")
    async def get_suggestions(mood: MoodLabel) -> SuggestionCard | None:
        """Get the quick suggestion card for a mood, or null if it has none."""
        return suggestions_for(mood)

    @app.get("/therapists")
    async def search_therapists(
        q: str = Query("", description="Text matched against name, specialty, city"),
        specialty: str = Query("all", description='Required specialty, or "all"'),
        max_distance: float = Query(50, ge=0, description="Distance cap in km"),
        lat: float | None = Query(None, ge=-90, le=90),
        lng: float | None = Query(None, ge=-180, le=180),
    ) -> TherapistsResponse:
        """
        Search the therapist directory.

        Distance filtering and ranking apply only when both ``lat`` and ``lng``
        are given.
        """
        if (lat is None) != (lng is None):
            raise HTTPException(
                status_code=422, detail="lat and lng must be given together"
            )

        origin = GeoPoint(lat=lat, lng=lng) if lat is not None else None
        query = GeoQuery(
            search_text=q,
            specialty=specialty,
            max_distance_km=max_distance,
            origin=origin,
        )
        return TherapistsResponse(
            results=filter_providers(await providers.list(), query)
        )


    @app.get("/moods/stats")
    async def get_mood_stats() -> MoodStats:
        """Get dashboard aggregates: totals, averages and the last seven days."""
        return mood_stats(await moods.list())

    @app.get("/tasks")
    async def list_tasks(
        category: str = Query("all", description='Task category, or "all"'),
        completed: bool | None = Query(None, description="Filter by completion"),
    ) -> TasksResponse:
        """List tasks, newest first."""
        if category not in TASK_CATEGORIES:
            raise HTTPException(status_code=422, detail=f"Unknown category: {category}")
        return TasksResponse(
            tasks=filter_tasks(await tasks.list(completed=completed), category)
        )

    @app.post("/tasks")
    async def create_task(task: Task) -> Task:
        """Add a task manually."""
        return await tasks.create(task)

    @app.post("/tasks/recommended")
    async def create_recommended_tasks() -> TasksResponse:
        """
        Create tasks from the recommendation for the current mood log.

        Returns:
            The newly created tasks
        """
        recommendation = recommend(await moods.list())
        created = [
            await tasks.create(task)
            for task in tasks_from_recommendation(recommendation)
        ]
        return TasksResponse(tasks=created)

    @app.post("/tasks/{task_id}/complete")
    async def complete_task(task_id: str) -> Task:
        """Mark a task as completed."""
        try:
            return await tasks.complete(task_id)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown task: {task_id}")

    @app.get("/tasks/stats")
    async def get_task_stats() -> TaskStatsResponse:
        """Get task progress, including tasks completed today."""
        all_tasks = await tasks.list()
        done = [task for task in all_tasks if task.completed]
        return TaskStatsResponse(
            pending=len(all_tasks) - len(done),
            completed=len(done),
            completed_today=completed_on(done),
        )

    @app.get("/blog")
    async def list_posts(
        q: str = Query("", description="Text matched against title, excerpt, tags"),
        category: str = Query("all", description='Post category, or "all"'),
    ) -> PostsResponse:
        """Search the blog."""
        if category not in BLOG_CATEGORIES:
            raise HTTPException(status_code=422, detail=f"Unknown category: {category}")
        return PostsResponse(posts=filter_posts(await posts.list(), q, category))

    @app.get("/blog/{slug}")
    async def get_post(slug: str) -> BlogPost:
        """Get one post by slug."""
        post = await posts.get(slug)
        if post is None:
            raise HTTPException(status_code=404, detail=f"Unknown post: {slug}")
        return post

    return app


def create_app_from_settings(settings: Settings) -> FastAPI:
    """Create the application with in-memory stores and configured generation."""
    return create_app(
        MessageStore(),
        MoodEntryStore(),
        ProviderDirectory(seed=settings.seed_providers),
        generator=TextGenerator.from_settings(settings),
        generation_timeout=settings.llm_timeout,
        tasks=TaskStore(),
        posts=BlogStore(seed=settings.seed_posts),
    )


# Default app instance for ASGI servers; reads the process environment only
app = create_app_from_settings(Settings.from_env(load_dotenv_file=False))


def main() -> None:
    """Main entry point for the server."""
    import uvicorn

    settings = Settings.from_env(load_dotenv_file=True)
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        create_app_from_settings(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
