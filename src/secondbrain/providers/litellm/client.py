# src/secondbrain/providers/litellm/client.py
"""LiteLLM client implementations for generation and embedding APIs."""

from typing import Any

import litellm

from secondbrain.providers.base import EmbeddingClient, LLMClient
from secondbrain.providers.litellm.models import ChatModels, EmbeddingModels


class LiteLLMClient(LLMClient):
    """LiteLLM-based client for answer generation.

    Supports any model available through LiteLLM (Gemini, OpenAI,
    Anthropic, Ollama, etc.).

    Example:
        from secondbrain.providers.litellm import LiteLLMClient, ChatModels

        client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH_LITE)
        response = client.complete([{"role": "user", "content": "Hello"}])

        # With retry for rate-limited APIs
        client = LiteLLMClient(model=ChatModels.GEMINI_25_FLASH_LITE, num_retries=3)
    """

    def __init__(
        self,
        model: str = ChatModels.GEMINI_25_FLASH_LITE,
        num_retries: int = 0,
        timeout: float | None = None,
    ) -> None:
        """Initialize the LiteLLM client.

        Args:
            model: LiteLLM model identifier.
                   Examples: "gemini/gemini-2.5-flash-lite", "openai/gpt-5-mini"
            num_retries: Number of retries on rate limit errors. LiteLLM handles
                        exponential backoff automatically. Default: 0.
            timeout: Request timeout in seconds. None uses the LiteLLM default.
        """
        self.model = model
        self.num_retries = num_retries
        self.timeout = timeout

    def _completion_kwargs(self, messages: list[dict], temperature: float | None) -> dict:
        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "drop_params": True,
            "num_retries": self.num_retries,
        }
        if temperature is not None:
            completion_kwargs["temperature"] = temperature
        if self.timeout is not None:
            completion_kwargs["timeout"] = self.timeout
        return completion_kwargs

    def _extract_content(self, response: Any) -> str:
        if not response.choices:
            raise ValueError(f"LLM returned no choices for model {self.model}")
        content = response.choices[0].message.content
        if content is None:
            raise ValueError(f"LLM returned None content for model {self.model}")
        return str(content)

    def complete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM."""
        response = litellm.completion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)

    async def acomplete(
        self,
        messages: list[dict],
        temperature: float | None = None,
    ) -> str:
        """Generate a completion using LiteLLM (async)."""
        response = await litellm.acompletion(**self._completion_kwargs(messages, temperature))
        return self._extract_content(response)


class LiteLLMEmbeddingClient(EmbeddingClient):
    """LiteLLM-based embedding client.

    Each call embeds exactly one text; callers that need many vectors make
    one call per text.

    Example:
        from secondbrain.providers.litellm import LiteLLMEmbeddingClient, EmbeddingModels

        client = LiteLLMEmbeddingClient(model=EmbeddingModels.GEMINI_004)
        vector = client.embed("Hello world")
    """

    def __init__(
        self,
        model: str = EmbeddingModels.GEMINI_004,
        num_retries: int = 0,
        timeout: float | None = None,
    ) -> None:
        """Initialize the LiteLLM embedding client.

        Args:
            model: LiteLLM embedding model identifier.
                   Examples: "gemini/text-embedding-004", "openai/text-embedding-3-small"
            num_retries: Number of retries on rate limit errors. Default: 0.
            timeout: Request timeout in seconds. None uses the LiteLLM default.
        """
        self.model = model
        self.num_retries = num_retries
        self.timeout = timeout

    def _embedding_kwargs(self, text: str) -> dict:
        embedding_kwargs: dict[str, Any] = {
            "model": self.model,
            "input": [text],
            "num_retries": self.num_retries,
        }
        if self.timeout is not None:
            embedding_kwargs["timeout"] = self.timeout
        return embedding_kwargs

    def _extract_vector(self, response: Any) -> list[float]:
        if not response.data:
            raise ValueError(f"Embedding model {self.model} returned no data")
        return list(response.data[0]["embedding"])

    def embed(self, text: str) -> list[float]:
        """Generate an embedding using LiteLLM."""
        response = litellm.embedding(**self._embedding_kwargs(text))
        return self._extract_vector(response)

    async def aembed(self, text: str) -> list[float]:
        """Generate an embedding using LiteLLM (async)."""
        response = await litellm.aembedding(**self._embedding_kwargs(text))
        return self._extract_vector(response)
