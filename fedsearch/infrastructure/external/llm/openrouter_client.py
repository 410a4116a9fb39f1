"""OpenRouter chat-completions client returning the model's JSON reply.

Single request per call, no retries. All HTTP calls use the shared
httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

import httpx

from fedsearch.domain.exceptions import LanguageModelError, LanguageModelNotConfiguredError
from fedsearch.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from fedsearch.core.config import Settings

logger = get_logger(__name__)

# Models sometimes wrap the JSON object in a markdown code fence.
_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def _strip_fences(text: str) -> str:
    text = text.strip()
    match = _FENCE.match(text)
    return match.group(1) if match else text


class OpenRouterClient:
    """ILanguageModelClient for the OpenRouter chat-completions API."""

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http = http_client
        self.settings = settings

    def _headers(self) -> dict[str, str]:
        if not self.settings.llm_configured:
            raise LanguageModelNotConfiguredError()
        return {
            "Authorization": f"Bearer {self.settings.openrouter_api_key.get_secret_value()}",
            "HTTP-Referer": self.settings.openrouter_referer,
            "X-Title": self.settings.openrouter_title,
            "Content-Type": "application/json",
        }

    async def complete_json(self, messages: list[dict[str, str]]) -> dict[str, Any]:
        """Send messages and return the JSON object in the first choice.

        Raises:
            LanguageModelNotConfiguredError: If no API key is configured.
            LanguageModelError: On timeout, transport error, non-2xx status,
                missing content, or a reply that is not a JSON object.
        """
        headers = self._headers()
        body = {
            "model": self.settings.openrouter_model,
            "messages": messages,
            "temperature": self.settings.openrouter_temperature,
            "max_tokens": self.settings.openrouter_max_tokens,
            "top_p": self.settings.openrouter_top_p,
            "response_format": {"type": "json_object"},
        }
        try:
            resp = await self._http.post(
                self.settings.openrouter_url,
                headers=headers,
                json=body,
                timeout=self.settings.openrouter_timeout_seconds,
            )
        except httpx.TimeoutException as e:
            raise LanguageModelError("timeout") from e
        except httpx.HTTPError as e:
            raise LanguageModelError(f"transport error: {e.__class__.__name__}") from e

        if not resp.is_success:
            logger.warning("OpenRouter returned HTTP %s", resp.status_code)
            raise LanguageModelError("unexpected status", status_code=resp.status_code)

        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise LanguageModelError("response missing message content") from e
        if not isinstance(content, str) or not content.strip():
            raise LanguageModelError("empty message content")

        try:
            parsed = json.loads(_strip_fences(content))
        except ValueError as e:
            raise LanguageModelError("malformed JSON") from e
        if not isinstance(parsed, dict):
            raise LanguageModelError("reply is not a JSON object")
        return parsed
