"""LangGraph-based orchestration strategy for text generation."""

from collections.abc import Callable
from typing import NotRequired, TypedDict, cast

import httpx
from langgraph.graph import END, START, StateGraph

from studio_api.extractors import raise_for_upstream_error
from studio_api.infra.runtime import send_upstream
from studio_api.normalizers import PromptInput, WireRequest
from studio_api.providers.base import ProviderAdapter

from .base import GenerationOrchestrator


class GenerationGraphState(TypedDict):
    adapter: ProviderAdapter
    prompt_input: PromptInput
    wire_request: NotRequired[WireRequest]
    response: NotRequired[httpx.Response]
    text: NotRequired[str]


class LangGraphGenerationOrchestrator(GenerationOrchestrator):
    def __init__(self, get_http_client: Callable[[], httpx.Client]) -> None:
        self._get_http_client = get_http_client
        graph = StateGraph(GenerationGraphState)
        graph.add_node("build_request", self._build_request)
        graph.add_node("call_upstream", self._call_upstream)
        graph.add_node("extract_text", self._extract_text)
        graph.add_edge(START, "build_request")
        graph.add_edge("build_request", "call_upstream")
        graph.add_edge("call_upstream", "extract_text")
        graph.add_edge("extract_text", END)
        self._graph = graph.compile()

    def _build_request(self, state: GenerationGraphState) -> dict[str, WireRequest]:
        return {"wire_request": state["adapter"].wire_request(state["prompt_input"])}

    def _call_upstream(self, state: GenerationGraphState) -> dict[str, httpx.Response]:
        label = state["adapter"].config.label
        response = send_upstream(self._get_http_client(), state["wire_request"], upstream=label)
        return {"response": response}

    def _extract_text(self, state: GenerationGraphState) -> dict[str, str]:
        adapter = state["adapter"]
        response = state["response"]
        raise_for_upstream_error(response, adapter.config.label)
        return {"text": adapter.text_from(response)}

    def run(self, adapter: ProviderAdapter, prompt_input: PromptInput) -> str:
        initial_state: GenerationGraphState = {"adapter": adapter, "prompt_input": prompt_input}
        result = cast("GenerationGraphState", self._graph.invoke(initial_state))
        text = result.get("text")
        if text is None:
            raise RuntimeError("LangGraph execution did not return generated text")
        return text
