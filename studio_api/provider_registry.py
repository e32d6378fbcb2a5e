"""Text-generation provider registry."""

from collections.abc import Mapping
from dataclasses import dataclass

from .constants import (
    ANTHROPIC_ENDPOINT,
    GEMINI_ENDPOINT_TEMPLATE,
    GROQ_ENDPOINT,
    OLLAMA_UNSUPPORTED_MESSAGE,
    OPENAI_ENDPOINT,
    AuthStyle,
    ProviderId,
    RequestShape,
)
from .errors import UnknownProviderError
from .settings import Settings


@dataclass(frozen=True)
class ProviderConfig:
    id: ProviderId
    label: str
    endpoint_template: str
    auth_style: AuthStyle
    request_shape: RequestShape
    response_shape: RequestShape
    model: str = ""
    unsupported_reason: str | None = None

    @property
    def supported(self) -> bool:
        return self.unsupported_reason is None

    @property
    def endpoint(self) -> str:
        return self.endpoint_template.format(model=self.model)


def build_provider_configs(settings: Settings) -> dict[str, ProviderConfig]:
    return {
        "gemini": ProviderConfig(
            id="gemini",
            label="Gemini",
            endpoint_template=GEMINI_ENDPOINT_TEMPLATE,
            auth_style="query-param",
            request_shape="single-shot",
            response_shape="single-shot",
            model=settings.gemini_model,
        ),
        "groq": ProviderConfig(
            id="groq",
            label="Groq",
            endpoint_template=GROQ_ENDPOINT,
            auth_style="bearer-header",
            request_shape="chat-completion",
            response_shape="chat-completion",
            model=settings.groq_model,
        ),
        "openai": ProviderConfig(
            id="openai",
            label="OpenAI",
            endpoint_template=OPENAI_ENDPOINT,
            auth_style="bearer-header",
            request_shape="chat-completion",
            response_shape="chat-completion",
            model=settings.openai_model,
        ),
        "claude": ProviderConfig(
            id="claude",
            label="Claude",
            endpoint_template=ANTHROPIC_ENDPOINT,
            auth_style="api-key-header",
            request_shape="anthropic-messages",
            response_shape="anthropic-messages",
            model=settings.claude_model,
        ),
        # Listed so clients can offer it, but never called from the hosted proxy.
        "ollama": ProviderConfig(
            id="ollama",
            label="Ollama",
            endpoint_template="",
            auth_style="none",
            request_shape="local-only",
            response_shape="local-only",
            unsupported_reason=OLLAMA_UNSUPPORTED_MESSAGE,
        ),
    }


def resolve_provider(provider_id: object, configs: Mapping[str, ProviderConfig]) -> ProviderConfig:
    if not isinstance(provider_id, str) or provider_id not in configs:
        raise UnknownProviderError(provider_id)
    return configs[provider_id]
