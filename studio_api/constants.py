"""Shared constants and literal types for the studio proxy Lambda."""

from typing import Literal

DEFAULT_PERSONA = "You are an expert YouTube content strategist."
MAX_OUTPUT_TOKENS = 4000

GEMINI_ENDPOINT_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
)
GROQ_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
ANTHROPIC_ENDPOINT = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"

DEFAULT_GEMINI_MODEL = "gemini-1.5-flash"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_CLAUDE_MODEL = "claude-opus-4-6"

OLLAMA_UNSUPPORTED_MESSAGE = "Ollama is local-only and cannot be used on Vercel."

YOUTUBE_SEARCH_ENDPOINT = "https://www.googleapis.com/youtube/v3/search"
YOUTUBE_VIDEOS_ENDPOINT = "https://www.googleapis.com/youtube/v3/videos"
YOUTUBE_SEARCH_PART = "snippet"
YOUTUBE_STATS_PART = "statistics,contentDetails,snippet"
YOUTUBE_SEARCH_ORDER = "viewCount"
DEFAULT_MAX_RESULTS = 12
MAX_SEARCH_RESULTS = 50

ELEVENLABS_ENDPOINT_TEMPLATE = "https://api.elevenlabs.io/v1/text-to-speech/{voice_id}"
DEFAULT_ELEVENLABS_MODEL = "eleven_monolingual_v1"
AUDIO_MIME_TYPE = "audio/mpeg"

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"
MISSING_API_KEY_MESSAGE = "No API key provided"
MISSING_YOUTUBE_KEY_MESSAGE = "YouTube API key required"
MISSING_ELEVENLABS_KEY_MESSAGE = "ElevenLabs API key required"

ProviderId = Literal["gemini", "groq", "openai", "claude", "ollama"]
AuthStyle = Literal["query-param", "bearer-header", "api-key-header", "none"]
RequestShape = Literal["single-shot", "chat-completion", "anthropic-messages", "local-only"]
SearchResultType = Literal["video", "channel"]
OrchestratorKind = Literal["direct", "langgraph"]
