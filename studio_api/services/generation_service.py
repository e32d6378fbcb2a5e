"""Application service for text-generation requests."""

import logging
from collections.abc import Mapping

from studio_api.constants import MISSING_API_KEY_MESSAGE
from studio_api.errors import BadRequestError, UnsupportedProviderError
from studio_api.normalizers import PromptInput
from studio_api.orchestration.base import GenerationOrchestrator
from studio_api.provider_registry import ProviderConfig, resolve_provider
from studio_api.providers.base import ProviderAdapter
from studio_api.schemas import GenerationRequest, GenerationResponse

logger = logging.getLogger(__name__)


class GenerationService:
    def __init__(
        self,
        provider_configs: Mapping[str, ProviderConfig],
        adapters: Mapping[str, ProviderAdapter],
        orchestrator: GenerationOrchestrator,
        default_persona: str,
    ) -> None:
        self._provider_configs = provider_configs
        self._adapters = adapters
        self._orchestrator = orchestrator
        self._default_persona = default_persona

    def resolve_callable_provider(self, provider_id: object) -> ProviderConfig:
        """Resolve a provider and refuse local-only ones; needs no other request field."""
        config = resolve_provider(provider_id, self._provider_configs)
        if not config.supported:
            raise UnsupportedProviderError(config.unsupported_reason or f"{config.label} unsupported")
        return config

    def handle_generation(self, request: GenerationRequest) -> GenerationResponse:
        logger.info(
            "Generation request received",
            extra={"provider": request.provider, "prompt_length": len(request.prompt)},
        )

        config = self.resolve_callable_provider(request.provider)
        if not request.api_key:
            raise BadRequestError(MISSING_API_KEY_MESSAGE)
        if not request.prompt:
            raise BadRequestError("Prompt required")

        system = request.system if request.system is not None else self._default_persona
        text = self._orchestrator.run(
            self._adapters[config.id],
            PromptInput(credential=request.api_key, prompt=request.prompt, system=system),
        )
        logger.info(
            "Generation response relayed",
            extra={"provider": config.id, "model": config.model, "response_length": len(text)},
        )
        return GenerationResponse(text=text)
