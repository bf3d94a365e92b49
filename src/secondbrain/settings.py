# src/secondbrain/settings.py
"""Configuration management for SecondBrain.

Behavioral settings apply regardless of which provider is used. They are
passed programmatically; the library does not read environment variables.
Applications that want env or file based config read it at the
application layer (see secondbrain.config) and pass values explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# The demo deployment serves a single fixed tenant.
DEMO_USER_ID = 1

DEFAULT_SYSTEM_PROMPT = """You are a personal AI assistant that acts as a "second brain".
You are given the user's question and some context snippets from their own data.
Answer concisely in natural language using ONLY the provided context.
If the answer is not in the context, say you don't know."""

DEFAULT_FALLBACK_PREFIX = (
    "I had an issue calling the AI model, but here are the most relevant notes I found:"
)


class Settings(BaseModel):
    """Behavioral settings for SecondBrain.

    Example:
        settings = Settings(default_k=3, max_concurrent_embeddings=4)
    """

    # Tenant
    user_id: int = DEMO_USER_ID

    # Chunking: a slice holds about chunk_max_tokens * chars_per_token characters
    chunk_max_tokens: int = Field(default=500, gt=0)
    chars_per_token: int = Field(default=4, gt=0)

    # Retrieval
    default_k: int = Field(default=5, gt=0)

    # Async ingestion fan-out (1 = embed chunks one at a time)
    max_concurrent_embeddings: int = Field(default=1, gt=0)

    # Retries handed to LiteLLM (0 = fail on first error)
    num_retries: int = Field(default=0, ge=0)

    # Synthesis
    synthesis_system_prompt: str = DEFAULT_SYSTEM_PROMPT
    synthesis_temperature: float | None = 0.3
    fallback_prefix: str = DEFAULT_FALLBACK_PREFIX

    @property
    def chunk_size_chars(self) -> int:
        """Character window used by the chunker."""
        return self.chunk_max_tokens * self.chars_per_token
