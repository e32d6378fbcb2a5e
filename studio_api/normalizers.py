"""Builders that turn provider-agnostic requests into upstream wire requests.

Every builder is pure: the same inputs always yield an equal ``WireRequest``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from .constants import (
    ANTHROPIC_VERSION,
    AUDIO_MIME_TYPE,
    ELEVENLABS_ENDPOINT_TEMPLATE,
    MAX_OUTPUT_TOKENS,
    YOUTUBE_SEARCH_ENDPOINT,
    YOUTUBE_SEARCH_ORDER,
    YOUTUBE_SEARCH_PART,
    YOUTUBE_STATS_PART,
    YOUTUBE_VIDEOS_ENDPOINT,
)
from .provider_registry import ProviderConfig
from .schemas import SpeechRequest, VideoSearchRequest, VideoStatsRequest


@dataclass(frozen=True)
class WireRequest:
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Mapping[str, str | int] = field(default_factory=dict)
    json_body: Any = None


@dataclass(frozen=True)
class PromptInput:
    credential: str
    prompt: str
    system: str


def build_gemini_request(config: ProviderConfig, prompt_input: PromptInput) -> WireRequest:
    # generateContent has no system role; the persona is prepended to the prompt.
    return WireRequest(
        method="POST",
        url=config.endpoint,
        headers={"Content-Type": "application/json"},
        params={"key": prompt_input.credential},
        json_body={
            "contents": [{"parts": [{"text": f"{prompt_input.system}\n\n{prompt_input.prompt}"}]}]
        },
    )


def build_chat_completion_request(
    config: ProviderConfig, prompt_input: PromptInput
) -> WireRequest:
    return WireRequest(
        method="POST",
        url=config.endpoint,
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {prompt_input.credential}",
        },
        json_body={
            "model": config.model,
            "max_tokens": MAX_OUTPUT_TOKENS,
            "messages": [
                {"role": "system", "content": prompt_input.system},
                {"role": "user", "content": prompt_input.prompt},
            ],
        },
    )


def build_anthropic_request(config: ProviderConfig, prompt_input: PromptInput) -> WireRequest:
    return WireRequest(
        method="POST",
        url=config.endpoint,
        headers={
            "Content-Type": "application/json",
            "x-api-key": prompt_input.credential,
            "anthropic-version": ANTHROPIC_VERSION,
        },
        json_body={
            "model": config.model,
            "max_tokens": MAX_OUTPUT_TOKENS,
            "system": prompt_input.system,
            "messages": [{"role": "user", "content": prompt_input.prompt}],
        },
    )


def build_video_search_request(request: VideoSearchRequest) -> WireRequest:
    params: dict[str, str | int] = {
        "part": YOUTUBE_SEARCH_PART,
        "q": request.query,
        "maxResults": request.max_results,
        "type": request.result_type,
        "key": request.yt_key,
        "order": YOUTUBE_SEARCH_ORDER,
    }
    if request.published_after:
        params["publishedAfter"] = request.published_after
    return WireRequest(method="GET", url=YOUTUBE_SEARCH_ENDPOINT, params=params)


def build_video_stats_request(request: VideoStatsRequest) -> WireRequest:
    return WireRequest(
        method="GET",
        url=YOUTUBE_VIDEOS_ENDPOINT,
        params={
            "part": YOUTUBE_STATS_PART,
            "id": ",".join(request.video_ids),
            "key": request.yt_key,
        },
    )


def build_speech_request(request: SpeechRequest, model_id: str) -> WireRequest:
    body: dict[str, Any] = {"text": request.text, "model_id": model_id}
    if request.voice_settings is not None:
        body["voice_settings"] = request.voice_settings.model_dump(exclude_unset=True)
    return WireRequest(
        method="POST",
        url=ELEVENLABS_ENDPOINT_TEMPLATE.format(voice_id=quote(request.voice_id, safe="")),
        headers={
            "xi-api-key": request.el_key,
            "Content-Type": "application/json",
            "Accept": AUDIO_MIME_TYPE,
        },
        json_body=body,
    )
