"""Provider adapter record used for text-generation dispatch."""

from collections.abc import Callable
from dataclasses import dataclass

import httpx

from studio_api.normalizers import PromptInput, WireRequest
from studio_api.provider_registry import ProviderConfig

RequestBuilder = Callable[[ProviderConfig, PromptInput], WireRequest]
TextExtractor = Callable[[httpx.Response, str], str]


@dataclass(frozen=True)
class ProviderAdapter:
    config: ProviderConfig
    build_request: RequestBuilder
    extract_text: TextExtractor

    def wire_request(self, prompt_input: PromptInput) -> WireRequest:
        return self.build_request(self.config, prompt_input)

    def text_from(self, response: httpx.Response) -> str:
        return self.extract_text(response, self.config.label)
