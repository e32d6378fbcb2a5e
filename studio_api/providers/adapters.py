"""Closed mapping from request shape to normalizer/extractor pairs."""

from collections.abc import Mapping

from studio_api.extractors import (
    extract_anthropic_text,
    extract_chat_completion_text,
    extract_gemini_text,
)
from studio_api.normalizers import (
    build_anthropic_request,
    build_chat_completion_request,
    build_gemini_request,
)
from studio_api.provider_registry import ProviderConfig

from .base import ProviderAdapter, RequestBuilder, TextExtractor

WIRE_FAMILIES: dict[str, tuple[RequestBuilder, TextExtractor]] = {
    "single-shot": (build_gemini_request, extract_gemini_text),
    "chat-completion": (build_chat_completion_request, extract_chat_completion_text),
    "anthropic-messages": (build_anthropic_request, extract_anthropic_text),
}


def build_provider_adapters(
    configs: Mapping[str, ProviderConfig],
) -> dict[str, ProviderAdapter]:
    """Pair every callable provider with its wire family; local-only providers get none."""
    adapters: dict[str, ProviderAdapter] = {}
    for provider_id, config in configs.items():
        if not config.supported:
            continue
        build_request, extract_text = WIRE_FAMILIES[config.request_shape]
        adapters[provider_id] = ProviderAdapter(
            config=config, build_request=build_request, extract_text=extract_text
        )
    return adapters
