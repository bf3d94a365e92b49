# src/secondbrain/providers/litellm/models.py
"""Curated model constants for the LiteLLM provider.

Any valid LiteLLM model string works; these only help IDE autocomplete.
"""


class ChatModels:
    """Chat models for answer generation (via LiteLLMClient)."""

    # Google Gemini
    GEMINI_25_FLASH_LITE = "gemini/gemini-2.5-flash-lite"
    GEMINI_25_FLASH = "gemini/gemini-2.5-flash"

    # OpenAI
    GPT_5_MINI = "openai/gpt-5-mini"
    GPT_5_NANO = "openai/gpt-5-nano"

    # Anthropic
    CLAUDE_HAIKU_45 = "anthropic/claude-haiku-4-5-20251001"

    # Local
    OLLAMA_LLAMA32 = "ollama/llama3.2"


class EmbeddingModels:
    """Embedding models for LiteLLMEmbeddingClient / ClientEmbedder."""

    # Google Gemini (768 dimensions)
    GEMINI_004 = "gemini/text-embedding-004"
    GEMINI_EMBEDDING_001 = "gemini/gemini-embedding-001"

    # OpenAI
    TEXT_3_SMALL = "openai/text-embedding-3-small"
    TEXT_3_LARGE = "openai/text-embedding-3-large"

    # Local
    OLLAMA_NOMIC = "ollama/nomic-embed-text"
