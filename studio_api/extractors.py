"""Readers for upstream responses.

This module is the only place that knows each upstream's response schema.
Success bodies are validated against explicit pydantic models so a changed or
malformed payload fails with ``UnexpectedResponseShapeError`` instead of a
``KeyError`` deep inside a handler.
"""

import logging
from collections.abc import Sequence
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from .errors import UnexpectedResponseShapeError, UpstreamError, UpstreamNoDetailError

logger = logging.getLogger(__name__)

GOOGLE_STYLE_ERROR_PATH = ("error", "message")
ELEVENLABS_ERROR_PATH = ("detail", "message")


class GeminiPart(BaseModel):
    text: str


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = Field(min_length=1)


class GeminiCandidate(BaseModel):
    content: GeminiContent


class GeminiResponse(BaseModel):
    candidates: list[GeminiCandidate] = Field(min_length=1)


class ChatCompletionMessage(BaseModel):
    content: str


class ChatCompletionChoice(BaseModel):
    message: ChatCompletionMessage


class ChatCompletionResponse(BaseModel):
    choices: list[ChatCompletionChoice] = Field(min_length=1)


class AnthropicContentBlock(BaseModel):
    type: str = "text"
    text: str


class AnthropicResponse(BaseModel):
    content: list[AnthropicContentBlock] = Field(min_length=1)


def _read_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _lookup(body: Any, path: Sequence[str]) -> Any:
    value = body
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def raise_for_upstream_error(
    response: httpx.Response, label: str, error_path: Sequence[str] = GOOGLE_STYLE_ERROR_PATH
) -> None:
    """Raise an ``UpstreamError`` carrying the upstream status when the call failed."""
    if response.is_success:
        return

    message = _lookup(_read_json(response), error_path)
    if isinstance(message, str) and message:
        raise UpstreamError(message, status_code=response.status_code, upstream=label)

    logger.warning(
        "Upstream error without detail",
        extra={"upstream": label, "upstream_status": response.status_code},
    )
    raise UpstreamNoDetailError(
        f"{label} error", status_code=response.status_code, upstream=label
    )


def _parse(model: type[BaseModel], response: httpx.Response, label: str) -> Any:
    try:
        return model.model_validate(response.json())
    except ValidationError as e:
        raise UnexpectedResponseShapeError(
            f"Unexpected {label} response shape: {e.error_count()} validation error(s)"
        ) from e


def extract_gemini_text(response: httpx.Response, label: str) -> str:
    parsed: GeminiResponse = _parse(GeminiResponse, response, label)
    return parsed.candidates[0].content.parts[0].text


def extract_chat_completion_text(response: httpx.Response, label: str) -> str:
    parsed: ChatCompletionResponse = _parse(ChatCompletionResponse, response, label)
    return parsed.choices[0].message.content


def extract_anthropic_text(response: httpx.Response, label: str) -> str:
    parsed: AnthropicResponse = _parse(AnthropicResponse, response, label)
    return parsed.content[0].text


def extract_json_payload(response: httpx.Response) -> Any:
    """YouTube payloads are relayed unchanged; the client reads upstream field names."""
    return response.json()


def extract_audio(response: httpx.Response) -> bytes:
    return response.content
