"""Deployment settings read from the Lambda environment."""

import os
from functools import lru_cache

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_ELEVENLABS_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_GROQ_MODEL,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_PERSONA,
    OrchestratorKind,
)


class Settings(BaseModel):
    default_persona: str = DEFAULT_PERSONA
    gemini_model: str = DEFAULT_GEMINI_MODEL
    groq_model: str = DEFAULT_GROQ_MODEL
    openai_model: str = DEFAULT_OPENAI_MODEL
    claude_model: str = DEFAULT_CLAUDE_MODEL
    elevenlabs_model: str = DEFAULT_ELEVENLABS_MODEL
    # None leaves the timeout to the hosting platform.
    upstream_timeout_seconds: float | None = Field(default=None, gt=0)
    orchestrator: OrchestratorKind = "direct"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        timeout = os.getenv("STUDIO_UPSTREAM_TIMEOUT_SECONDS", "").strip()
        return cls(
            default_persona=os.getenv("STUDIO_DEFAULT_PERSONA", DEFAULT_PERSONA),
            gemini_model=os.getenv("STUDIO_GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            groq_model=os.getenv("STUDIO_GROQ_MODEL", DEFAULT_GROQ_MODEL),
            openai_model=os.getenv("STUDIO_OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
            claude_model=os.getenv("STUDIO_CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
            elevenlabs_model=os.getenv("STUDIO_ELEVENLABS_MODEL", DEFAULT_ELEVENLABS_MODEL),
            upstream_timeout_seconds=float(timeout) if timeout else None,
            orchestrator=os.getenv("STUDIO_ORCHESTRATOR", "direct"),
            log_level=os.getenv("STUDIO_LOG_LEVEL", "INFO").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
