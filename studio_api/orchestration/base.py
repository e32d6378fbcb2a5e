"""Orchestration interfaces for text-generation execution."""

from typing import Protocol

from studio_api.normalizers import PromptInput
from studio_api.providers.base import ProviderAdapter


class GenerationOrchestrator(Protocol):
    def run(self, adapter: ProviderAdapter, prompt_input: PromptInput) -> str:
        """Execute one generation call against the adapter's upstream and return its text."""
