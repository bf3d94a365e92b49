"""Shared pytest fixtures."""

import pytest

ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def letter_vector(text: str) -> list[float]:
    """Deterministic embedding: letter counts plus a constant component."""
    lowered = text.lower()
    return [float(lowered.count(c)) for c in ALPHABET] + [1.0]


@pytest.fixture
def fake_embedding_client():
    """Create an embedding client that records every text it embeds."""
    from secondbrain.providers import EmbeddingClient

    class FakeEmbeddingClient(EmbeddingClient):
        def __init__(self) -> None:
            self.calls: list[str] = []

        def embed(self, text: str) -> list[float]:
            self.calls.append(text)
            return letter_vector(text)

    return FakeEmbeddingClient()


@pytest.fixture
def failing_embedding_client():
    """Create an embedding client that always errors."""
    from secondbrain.providers import EmbeddingClient

    class FailingEmbeddingClient(EmbeddingClient):
        def embed(self, text: str) -> list[float]:
            raise TimeoutError("embedding service timed out")

    return FailingEmbeddingClient()


@pytest.fixture
def fake_llm_client():
    """Create an LLM client that answers with a fixed string and keeps the prompts."""
    from secondbrain.providers import LLMClient

    class FakeLLMClient(LLMClient):
        def __init__(self) -> None:
            self.prompts: list[str] = []

        def complete(self, messages: list[dict], temperature: float | None = None) -> str:
            self.prompts.append(messages[-1]["content"])
            return "Generated answer."

    return FakeLLMClient()


@pytest.fixture
def failing_llm_client():
    """Create an LLM client that always errors."""
    from secondbrain.providers import LLMClient

    class FailingLLMClient(LLMClient):
        def complete(self, messages: list[dict], temperature: float | None = None) -> str:
            raise ConnectionError("model unavailable")

    return FailingLLMClient()


@pytest.fixture
def embedder(fake_embedding_client):
    from secondbrain.embedder import ClientEmbedder

    return ClientEmbedder(embedding_client=fake_embedding_client)


@pytest.fixture
def store():
    from secondbrain.stores import InMemoryCorpusStore

    return InMemoryCorpusStore()


@pytest.fixture
def make_provider():
    """Build a provider from an embedding client and an optional LLM client.

    The provider satisfies the ProviderConfig protocol without LiteLLM.
    """
    from dataclasses import dataclass
    from typing import Any

    from secondbrain.embedder import ClientEmbedder

    @dataclass(frozen=True)
    class MockProvider:
        embedding_client: Any
        llm_client: Any = None

        def build_embedder(self, settings: Any) -> Any:
            return ClientEmbedder(embedding_client=self.embedding_client)

        def build_llm_client(self, settings: Any) -> Any:
            return self.llm_client

    return MockProvider


@pytest.fixture
def brain(make_provider, fake_embedding_client, fake_llm_client):
    """A SecondBrain over fake clients with a fresh in-memory store."""
    from secondbrain import SecondBrain

    return SecondBrain(provider=make_provider(fake_embedding_client, fake_llm_client))
