import unittest
from unittest.mock import Mock

from studio_api.constants import DEFAULT_PERSONA, OLLAMA_UNSUPPORTED_MESSAGE
from studio_api.errors import BadRequestError, UnknownProviderError, UnsupportedProviderError
from studio_api.provider_registry import build_provider_configs
from studio_api.providers.adapters import build_provider_adapters
from studio_api.schemas import GenerationRequest
from studio_api.services.generation_service import GenerationService
from studio_api.settings import Settings


class GenerationServiceTests(unittest.TestCase):
    def setUp(self) -> None:
        configs = build_provider_configs(Settings())
        self.adapters = build_provider_adapters(configs)
        self.orchestrator = Mock()
        self.orchestrator.run.return_value = "generated"
        self.service = GenerationService(
            provider_configs=configs,
            adapters=self.adapters,
            orchestrator=self.orchestrator,
            default_persona=DEFAULT_PERSONA,
        )

    def test_delegates_to_orchestrator_with_provider_adapter(self) -> None:
        request = GenerationRequest(provider="groq", apiKey="gsk", prompt="hi", system="Brief.")

        response = self.service.handle_generation(request)

        self.assertEqual(response.text, "generated")
        self.orchestrator.run.assert_called_once()
        adapter, prompt_input = self.orchestrator.run.call_args.args
        self.assertIs(adapter, self.adapters["groq"])
        self.assertEqual(prompt_input.credential, "gsk")
        self.assertEqual(prompt_input.prompt, "hi")
        self.assertEqual(prompt_input.system, "Brief.")

    def test_missing_system_uses_configured_persona(self) -> None:
        service = GenerationService(
            provider_configs=build_provider_configs(Settings()),
            adapters=self.adapters,
            orchestrator=self.orchestrator,
            default_persona="Channel analyst.",
        )

        service.handle_generation(GenerationRequest(provider="gemini", apiKey="k", prompt="hi"))

        _, prompt_input = self.orchestrator.run.call_args.args
        self.assertEqual(prompt_input.system, "Channel analyst.")

    def test_missing_api_key_rejected_before_dispatch(self) -> None:
        with self.assertRaisesRegex(BadRequestError, "No API key provided"):
            self.service.handle_generation(GenerationRequest(provider="openai", prompt="hi"))

        self.orchestrator.run.assert_not_called()

    def test_empty_prompt_rejected_before_dispatch(self) -> None:
        with self.assertRaisesRegex(BadRequestError, "Prompt required"):
            self.service.handle_generation(GenerationRequest(provider="openai", apiKey="sk"))

        self.orchestrator.run.assert_not_called()

    def test_ollama_rejected_regardless_of_other_fields(self) -> None:
        with self.assertRaises(UnsupportedProviderError) as ctx:
            self.service.handle_generation(GenerationRequest(provider="ollama"))

        self.assertEqual(ctx.exception.message, OLLAMA_UNSUPPORTED_MESSAGE)
        self.orchestrator.run.assert_not_called()

    def test_unknown_provider_rejected(self) -> None:
        with self.assertRaisesRegex(UnknownProviderError, "Unknown provider: cohere"):
            self.service.handle_generation(
                GenerationRequest(provider="cohere", apiKey="k", prompt="hi")
            )

        self.orchestrator.run.assert_not_called()


if __name__ == "__main__":
    unittest.main()
