"""
HTTP client for the text-generation service.

Talks to any OpenAI-compatible ``/chat/completions`` endpoint. Generation is a
best-effort enhancement: callers are expected to fall back on failure.
"""

import logging

import httpx

from .config import Settings

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the generation service fails or answers with junk."""


class TextGenerator:
    """
    Async text generator backed by an httpx client.

    The generator does not own a client it was given; otherwise it creates
    one on first use and closes it in ``aclose``.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.model = model
        self._owns_client = client is None
        self._client = client
        self._timeout = timeout
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._headers = {"Authorization": f"Bearer {api_key}"}

    @classmethod
    def from_settings(cls, settings: Settings) -> "TextGenerator | None":
        """Create a generator, or None when no API key is configured."""
        if not settings.generation_enabled:
            logger.info("No LLM API key configured; using canned responses only")
            return None

        return cls(
            base_url=settings.llm_base_url,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            timeout=settings.llm_timeout,
        )

    async def generate(self, prompt: str) -> str:
        """
        Generate a reply for a prompt.

        Args:
            prompt: The natural-language prompt

        Returns:
            The generated text, stripped of surrounding whitespace

        Raises:
            GenerationError: On transport errors, HTTP errors or a malformed payload
        """
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            response = await self._get_client().post(
                self._url, json=payload, headers=self._headers
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise GenerationError(
                f"Generation service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise GenerationError(f"Generation request failed: {e}") from e
        except ValueError as e:
            raise GenerationError("Generation service returned invalid JSON") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise GenerationError("Generation response has no message content") from e

        if not isinstance(content, str):
            raise GenerationError("Generation response content is not text")

        return content.strip()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
