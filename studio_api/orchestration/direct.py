"""Direct normalize, call, extract orchestration."""

from collections.abc import Callable

import httpx

from studio_api.extractors import raise_for_upstream_error
from studio_api.infra.runtime import send_upstream
from studio_api.normalizers import PromptInput
from studio_api.orchestration.base import GenerationOrchestrator
from studio_api.providers.base import ProviderAdapter


class DirectGenerationOrchestrator(GenerationOrchestrator):
    def __init__(self, get_http_client: Callable[[], httpx.Client]) -> None:
        self._get_http_client = get_http_client

    def run(self, adapter: ProviderAdapter, prompt_input: PromptInput) -> str:
        label = adapter.config.label
        response = send_upstream(
            self._get_http_client(), adapter.wire_request(prompt_input), upstream=label
        )
        raise_for_upstream_error(response, label)
        return adapter.text_from(response)
