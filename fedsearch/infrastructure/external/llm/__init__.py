"""Language-model provider clients."""

from fedsearch.infrastructure.external.llm.openrouter_client import OpenRouterClient

__all__ = ["OpenRouterClient"]
