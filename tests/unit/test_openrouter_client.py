"""OpenRouterClient against an httpx.MockTransport."""

import json

import httpx
import pytest
from pydantic import SecretStr

from fedsearch.core.config import get_settings
from fedsearch.domain.exceptions import LanguageModelError, LanguageModelNotConfiguredError
from fedsearch.infrastructure.external.llm.openrouter_client import OpenRouterClient


def _settings(api_key: str | None = "test-key"):
    return get_settings().model_copy(
        update={"openrouter_api_key": SecretStr(api_key) if api_key else None}
    )


def _reply(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _client(handler, api_key: str | None = "test-key") -> OpenRouterClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenRouterClient(http, _settings(api_key))


MESSAGES = [{"role": "system", "content": "parse"}, {"role": "user", "content": "vinyl"}]


async def test_returns_parsed_json_and_sends_expected_request() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["headers"] = request.headers
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_reply('{"dataTypes": ["files"], "keywords": ["vinyl"]}'))

    payload = await _client(handler).complete_json(MESSAGES)

    assert payload == {"dataTypes": ["files"], "keywords": ["vinyl"]}
    assert seen["headers"]["Authorization"] == "Bearer test-key"
    assert seen["headers"]["X-Title"]
    assert seen["body"]["messages"] == MESSAGES
    assert seen["body"]["temperature"] == 0.3
    assert seen["body"]["max_tokens"] == 500
    assert seen["body"]["response_format"] == {"type": "json_object"}


async def test_code_fenced_json_is_accepted() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_reply('```json\n{"sortBy": "date"}\n```'))

    assert await _client(handler).complete_json(MESSAGES) == {"sortBy": "date"}


async def test_missing_api_key_raises_not_configured() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(LanguageModelNotConfiguredError):
        await _client(handler, api_key=None).complete_json(MESSAGES)


async def test_non_2xx_raises_with_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"error": "rate limited"})

    with pytest.raises(LanguageModelError) as exc_info:
        await _client(handler).complete_json(MESSAGES)
    assert exc_info.value.details == {"reason": "unexpected status", "status_code": 429}


async def test_timeout_raises_model_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(LanguageModelError) as exc_info:
        await _client(handler).complete_json(MESSAGES)
    assert exc_info.value.details["reason"] == "timeout"


@pytest.mark.parametrize(
    "body",
    [
        {"choices": []},
        {"unexpected": True},
        _reply(None),
        _reply("not json at all"),
        _reply('["files"]'),
    ],
)
async def test_malformed_replies_raise_model_error(body: dict) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(LanguageModelError):
        await _client(handler).complete_json(MESSAGES)
