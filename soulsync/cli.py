"""
Command-line interface tools for the SoulSync service.
"""

import asyncio
import json
from collections.abc import Coroutine
from datetime import datetime
from typing import Any

import httpx
import typer
from httpx_sse import ServerSentEvent, aconnect_sse

from .classifier import classify
from .models import MoodEntry, RankedResult

DEFAULT_BASE_URL = "http://localhost:8000"

app = typer.Typer(help="SoulSync CLI tools")


# MARK: - Commands


@app.command("classify")
def classify_text(
    text: str = typer.Argument(..., help="The text to classify"),
) -> None:
    """Detect the mood of a message locally, without a server."""
    print(classify(text).value)


@app.command()
def chat(
    text: str = typer.Argument(..., help="The message to send"),
    session_id: str = typer.Option(
        "cli", "--session", "-s", help="Chat session identifier"
    ),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the SoulSync service"
    ),
) -> None:
    """Send a chat message and print the companion's reply."""

    async def _chat() -> None:
        async with httpx.AsyncClient(timeout=30.0) as client:
            response = await client.post(
                f"{base_url}/chat/{session_id}/messages", json={"text": text}
            )
            response.raise_for_status()
            result = response.json()

            mood = result.get("mood")
            if mood:
                print(f"[{mood}]")
            print(result["message"]["text"])

            bundle = result.get("response") or {}
            for song in bundle.get("music_suggestions") or []:
                print(f"  ♪ {song}")

    _run_with_error_handling(_chat(), base_url)


@app.command()
def therapists(
    query: str = typer.Option("", "--query", "-q", help="Name, specialty or city"),
    specialty: str = typer.Option("all", "--specialty", help="Required specialty"),
    max_distance: float = typer.Option(50, "--max-distance", help="Distance cap in km"),
    lat: float | None = typer.Option(None, "--lat", help="Your latitude"),
    lng: float | None = typer.Option(None, "--lng", help="Your longitude"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the SoulSync service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Search the therapist directory."""
    params: dict[str, Any] = {
        "q": query,
        "specialty": specialty,
        "max_distance": max_distance,
    }
    if lat is not None and lng is not None:
        params["lat"] = lat
        params["lng"] = lng

    async def _therapists() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{base_url}/therapists", params=params)
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            results = [RankedResult.model_validate(r) for r in result["results"]]
            if not results:
                print("No therapists found")
            for ranked in results:
                print(_format_result(ranked))

    _run_with_error_handling(_therapists(), base_url)


@app.command()
def stream(
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the SoulSync service"
    ),
) -> None:
    """Stream new mood entries in real-time."""

    async def _stream() -> None:
        print(f"Streaming from {base_url}/moods/stream... (Ctrl+C to stop)")

        async with httpx.AsyncClient(timeout=None) as client:
            async with aconnect_sse(
                client, "GET", f"{base_url}/moods/stream"
            ) as event_source:
                async for sse in event_source.aiter_sse():
                    _handle_sse_event(sse)

    _run_with_error_handling(_stream(), base_url)


# MARK: - Private Helpers


def _format_result(ranked: RankedResult) -> str:
    """Format a ranked provider as one line."""
    provider = ranked.provider
    line = f"{provider.name} ({provider.location.city}) ★{provider.rating}"
    if ranked.distance_km is not None:
        line += f" - {ranked.distance_km:.1f} km"
    return line


def _format_entry(entry: MoodEntry) -> str:
    """Format a mood entry with its timestamp."""
    timestamp = datetime.fromtimestamp(entry.created_at).strftime("%H:%M:%S")
    return f"{timestamp} > {entry.mood} ({entry.intensity}/10)"


def _handle_sse_event(sse: ServerSentEvent) -> None:
    """Handle a single SSE event."""
    try:
        if sse.event == "ready":
            return

        if sse.event == "error":
            error_data = json.loads(sse.data)
            print(f"Server error: {error_data.get('error', 'Unknown error')}")
            return

        entry = MoodEntry.model_validate(json.loads(sse.data))
        print(_format_entry(entry))

    except json.JSONDecodeError as e:
        print(f"Warning: Could not parse SSE data: {sse.data} - {e}")
    except Exception as e:
        print(f"Warning: Error processing mood entry: {e}")


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
