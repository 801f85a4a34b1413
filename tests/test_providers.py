"""Tests for provider adapters against a local aiohttp server."""

import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from geoscan.config import AnthropicConfig, GeoScanConfig, OpenAIConfig, PerplexityConfig
from geoscan.models import ProviderAnswer, Sentiment
from geoscan.providers import (
    ChatGPTProvider,
    ClaudeProvider,
    PerplexityProvider,
    build_providers,
)

BUSINESS = "Bakkerij de Korrel"


def _chat_completion(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


def _serve(handler, ask):
    """Run ``ask(url)`` while ``handler`` answers POSTs on /v1"""

    async def scenario():
        app = web.Application()
        app.router.add_post("/v1", handler)
        async with LocalServer(app) as server:
            return await ask(str(server.make_url("/v1")))

    return asyncio.run(scenario())


class TestPayloads:
    def test_chatgpt_has_dutch_system_prompt(self):
        provider = ChatGPTProvider(OpenAIConfig(api_key="k", model="gpt-4o-mini"))
        payload = provider.build_payload("Wie is de beste bakker?")

        assert payload["model"] == "gpt-4o-mini"
        assert payload["messages"][0]["role"] == "system"
        assert "Nederlandse" in payload["messages"][0]["content"]
        assert payload["messages"][1] == {"role": "user", "content": "Wie is de beste bakker?"}
        assert payload["max_tokens"] == 300
        assert payload["temperature"] == 0.7

    def test_perplexity_sends_single_user_turn(self):
        provider = PerplexityProvider(PerplexityConfig(api_key="k"))
        payload = provider.build_payload("Wie is de beste bakker?")

        assert payload["messages"] == [{"role": "user", "content": "Wie is de beste bakker?"}]
        assert payload["max_tokens"] == 300

    def test_claude_uses_system_field(self):
        provider = ClaudeProvider(AnthropicConfig(api_key="k"))
        payload = provider.build_payload("Vraag")

        assert "Nederlandse" in payload["system"]
        assert payload["messages"] == [{"role": "user", "content": "Vraag"}]

    def test_claude_headers(self):
        provider = ClaudeProvider(AnthropicConfig(api_key="secret"))
        headers = provider._get_headers()
        assert headers["x-api-key"] == "secret"
        assert headers["anthropic-version"] == "2023-06-01"


class TestExtractAnswer:
    def test_chat_completion_content(self):
        provider = ChatGPTProvider(OpenAIConfig(api_key="k"))
        assert provider.extract_answer(_chat_completion("Hallo")) == "Hallo"

    def test_missing_choices_is_empty(self):
        provider = PerplexityProvider(PerplexityConfig(api_key="k"))
        assert provider.extract_answer({}) == ""
        assert provider.extract_answer({"choices": []}) == ""

    def test_claude_joins_text_blocks(self):
        provider = ClaudeProvider(AnthropicConfig(api_key="k"))
        data = {"content": [{"type": "text", "text": "Een "}, {"type": "text", "text": "antwoord"}]}
        assert provider.extract_answer(data) == "Een antwoord"


class TestAsk:
    def test_successful_answer_is_classified(self):
        async def handler(request):
            body = await request.json()
            assert request.headers["Authorization"] == "Bearer test-key"
            assert body["messages"][-1]["content"] == "Vraag"
            return web.json_response(_chat_completion(f"{BUSINESS} is uitstekend en betrouwbaar"))

        async def ask(url):
            provider = ChatGPTProvider(OpenAIConfig(api_key="test-key", endpoint=url))
            return await provider.ask("Vraag", BUSINESS)

        answer = _serve(handler, ask)

        assert answer.mentioned is True
        assert answer.sentiment == Sentiment.POSITIVE
        assert answer.answer_text.startswith(BUSINESS)

    def test_non_success_status_degrades_to_empty(self):
        async def handler(request):
            return web.json_response({"error": "rate limited"}, status=429)

        async def ask(url):
            provider = PerplexityProvider(PerplexityConfig(api_key="k", endpoint=url))
            return await provider.ask("Vraag", BUSINESS)

        assert _serve(handler, ask) == ProviderAnswer.empty()

    def test_malformed_json_degrades_to_empty(self):
        async def handler(request):
            return web.Response(text="not json", content_type="application/json")

        async def ask(url):
            provider = ChatGPTProvider(OpenAIConfig(api_key="k", endpoint=url))
            return await provider.ask("Vraag", BUSINESS)

        assert _serve(handler, ask) == ProviderAnswer.empty()

    def test_unexpected_shape_degrades_to_empty(self):
        async def handler(request):
            return web.json_response(["not", "an", "object"])

        async def ask(url):
            provider = ClaudeProvider(AnthropicConfig(api_key="k", endpoint=url))
            return await provider.ask("Vraag", BUSINESS)

        assert _serve(handler, ask) == ProviderAnswer.empty()

    def test_timeout_degrades_to_empty(self):
        async def handler(request):
            await asyncio.sleep(1)
            return web.json_response(_chat_completion(BUSINESS))

        async def ask(url):
            provider = ChatGPTProvider(OpenAIConfig(api_key="k", endpoint=url), request_timeout=0.1)
            return await provider.ask("Vraag", BUSINESS)

        assert _serve(handler, ask) == ProviderAnswer.empty()

    def test_connection_error_degrades_to_empty(self):
        # Nothing listens on port 9 locally
        provider = ChatGPTProvider(OpenAIConfig(api_key="k", endpoint="http://127.0.0.1:9/v1"))
        answer = asyncio.run(provider.ask("Vraag", BUSINESS))
        assert answer == ProviderAnswer.empty()

    def test_unconfigured_provider_skips_request(self, monkeypatch):
        provider = ChatGPTProvider(OpenAIConfig(api_key=""))

        async def fail(question):
            raise AssertionError("request should not be sent")

        monkeypatch.setattr(provider, "_request_answer", fail)
        assert asyncio.run(provider.ask("Vraag", BUSINESS)) == ProviderAnswer.empty()


def test_build_providers_registry():
    config = GeoScanConfig(
        openai=OpenAIConfig(api_key="a"),
        anthropic=AnthropicConfig(api_key=""),
        perplexity=PerplexityConfig(api_key="c"),
    )
    registry = build_providers(config)

    assert set(registry) == {"chatgpt", "claude", "perplexity"}
    assert registry["chatgpt"].provider_id == "chatgpt"
    assert registry["chatgpt"].is_configured
    assert not registry["claude"].is_configured
    assert registry["perplexity"].request_timeout == config.scan.request_timeout


@pytest.mark.parametrize("provider_cls,config_cls", [
    (ChatGPTProvider, OpenAIConfig),
    (ClaudeProvider, AnthropicConfig),
    (PerplexityProvider, PerplexityConfig),
])
def test_provider_ids_match_registry_keys(provider_cls, config_cls):
    provider = provider_cls(config_cls(api_key="k"))
    assert provider.provider_id in {"chatgpt", "claude", "perplexity"}
