"""
Runtime configuration for the SoulSync service.

Settings are read from ``SOULSYNC_*`` environment variables, with a local
``.env`` file loaded first when present.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "SOULSYNC_"


class Settings(BaseModel):
    """Service settings."""

    host: str = Field("0.0.0.0", description="Bind address for the HTTP server")
    port: int = Field(8000, description="Bind port for the HTTP server")
    log_level: str = Field("info", description="Log level for the service")
    llm_base_url: str = Field(
        "https://api.openai.com/v1", description="OpenAI-compatible API root"
    )
    llm_api_key: str | None = Field(
        None, description="API key; generation is disabled without one"
    )
    llm_model: str = Field("gpt-4o-mini", description="Chat completion model")
    llm_timeout: float = Field(
        15.0, gt=0, description="Seconds to wait for a generated reply"
    )
    seed_providers: bool = Field(
        True, description="Seed an empty therapist directory with samples"
    )
    seed_posts: bool = Field(True, description="Seed an empty blog with sample posts")

    @property
    def generation_enabled(self) -> bool:
        return bool(self.llm_api_key)

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "Settings":
        """
        Build settings from the environment.

        Args:
            load_dotenv_file: Whether to load a ``.env`` file first

        Returns:
            Validated Settings
        """
        if load_dotenv_file:
            load_dotenv()

        values = {}
        for name in cls.model_fields:
            raw = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw != "":
                values[name] = raw

        return cls.model_validate(values)
