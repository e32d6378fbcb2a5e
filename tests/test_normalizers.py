import json
import unittest

from studio_api.normalizers import (
    PromptInput,
    build_speech_request,
    build_video_search_request,
    build_video_stats_request,
)
from studio_api.provider_registry import build_provider_configs
from studio_api.providers.adapters import build_provider_adapters
from studio_api.schemas import SpeechRequest, VideoSearchRequest, VideoStatsRequest
from studio_api.settings import Settings


class GenerationNormalizerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.configs = build_provider_configs(Settings())
        self.adapters = build_provider_adapters(self.configs)
        self.prompt_input = PromptInput(
            credential="secret", prompt="Write 20 titles", system="Title optimizer."
        )

    def test_every_provider_forwards_prompt_and_system_verbatim(self) -> None:
        for provider_id, adapter in self.adapters.items():
            with self.subTest(provider=provider_id):
                payload = json.dumps(adapter.wire_request(self.prompt_input).json_body)

                self.assertIn("Write 20 titles", payload)
                self.assertIn("Title optimizer.", payload)

    def test_builders_are_deterministic(self) -> None:
        for provider_id, adapter in self.adapters.items():
            with self.subTest(provider=provider_id):
                self.assertEqual(
                    adapter.wire_request(self.prompt_input),
                    adapter.wire_request(self.prompt_input),
                )

    def test_gemini_sends_key_as_query_param_and_merges_system(self) -> None:
        wire = self.adapters["gemini"].wire_request(self.prompt_input)

        self.assertEqual(wire.params, {"key": "secret"})
        self.assertNotIn("Authorization", wire.headers)
        self.assertTrue(wire.url.endswith("/models/gemini-1.5-flash:generateContent"))
        self.assertEqual(
            wire.json_body,
            {"contents": [{"parts": [{"text": "Title optimizer.\n\nWrite 20 titles"}]}]},
        )

    def test_chat_completion_builds_role_tagged_messages(self) -> None:
        for provider_id, model in (("groq", "llama-3.3-70b-versatile"), ("openai", "gpt-4o-mini")):
            with self.subTest(provider=provider_id):
                wire = self.adapters[provider_id].wire_request(self.prompt_input)

                self.assertEqual(wire.headers["Authorization"], "Bearer secret")
                self.assertEqual(wire.json_body["model"], model)
                self.assertEqual(wire.json_body["max_tokens"], 4000)
                self.assertEqual(
                    wire.json_body["messages"],
                    [
                        {"role": "system", "content": "Title optimizer."},
                        {"role": "user", "content": "Write 20 titles"},
                    ],
                )

    def test_anthropic_puts_system_at_top_level(self) -> None:
        wire = self.adapters["claude"].wire_request(self.prompt_input)

        self.assertEqual(wire.headers["x-api-key"], "secret")
        self.assertEqual(wire.headers["anthropic-version"], "2023-06-01")
        self.assertEqual(wire.json_body["system"], "Title optimizer.")
        self.assertEqual(
            wire.json_body["messages"], [{"role": "user", "content": "Write 20 titles"}]
        )

    def test_configured_model_overrides_default(self) -> None:
        configs = build_provider_configs(Settings(openai_model="gpt-4.1-mini"))
        wire = build_provider_adapters(configs)["openai"].wire_request(self.prompt_input)

        self.assertEqual(wire.json_body["model"], "gpt-4.1-mini")


class YouTubeNormalizerTests(unittest.TestCase):
    def test_search_omits_published_after_when_absent(self) -> None:
        wire = build_video_search_request(VideoSearchRequest(yt_key="yt", query="ai"))

        self.assertEqual(wire.method, "GET")
        self.assertEqual(
            wire.params,
            {
                "part": "snippet",
                "q": "ai",
                "maxResults": 12,
                "type": "video",
                "key": "yt",
                "order": "viewCount",
            },
        )

    def test_search_includes_recency_filter(self) -> None:
        request = VideoSearchRequest(
            yt_key="yt",
            query="ai",
            max_results=5,
            result_type="channel",
            published_after="2025-01-01T00:00:00Z",
        )
        wire = build_video_search_request(request)

        self.assertEqual(wire.params["publishedAfter"], "2025-01-01T00:00:00Z")
        self.assertEqual(wire.params["type"], "channel")
        self.assertEqual(wire.params["maxResults"], 5)

    def test_search_rejects_non_iso_timestamp(self) -> None:
        with self.assertRaises(ValueError):
            VideoSearchRequest(yt_key="yt", query="ai", published_after="last week")

    def test_stats_joins_ids_in_order(self) -> None:
        request = VideoStatsRequest.from_query("yt", "c, a,,b")
        wire = build_video_stats_request(request)

        self.assertEqual(request.video_ids, ["c", "a", "b"])
        self.assertEqual(wire.params["id"], "c,a,b")
        self.assertEqual(wire.params["key"], "yt")


class SpeechNormalizerTests(unittest.TestCase):
    def test_credential_travels_in_header(self) -> None:
        request = SpeechRequest(
            el_key="xi-secret",
            voice_id="21m00Tcm4TlvDq8ikWAM",
            text="Hello creators",
            voice_settings={"stability": 0.5, "similarity_boost": 0.75, "speed": 1.0},
        )
        wire = build_speech_request(request, "eleven_monolingual_v1")

        self.assertEqual(wire.headers["xi-api-key"], "xi-secret")
        self.assertEqual(wire.headers["Accept"], "audio/mpeg")
        self.assertTrue(wire.url.endswith("/text-to-speech/21m00Tcm4TlvDq8ikWAM"))
        self.assertNotIn("xi-secret", json.dumps(wire.json_body))
        self.assertEqual(
            wire.json_body,
            {
                "text": "Hello creators",
                "model_id": "eleven_monolingual_v1",
                "voice_settings": {"stability": 0.5, "similarity_boost": 0.75, "speed": 1.0},
            },
        )

    def test_voice_settings_forwarded_as_sent(self) -> None:
        request = SpeechRequest(
            el_key="el", voice_id="v", text="hi", voice_settings={"stability": 0.3, "style": 0.2}
        )
        wire = build_speech_request(request, "eleven_monolingual_v1")

        self.assertEqual(wire.json_body["voice_settings"], {"stability": 0.3, "style": 0.2})

    def test_voice_settings_omitted_when_not_given(self) -> None:
        wire = build_speech_request(
            SpeechRequest(el_key="el", voice_id="v", text="hi"), "eleven_monolingual_v1"
        )

        self.assertNotIn("voice_settings", wire.json_body)


if __name__ == "__main__":
    unittest.main()
