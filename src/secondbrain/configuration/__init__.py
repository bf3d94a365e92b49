# src/secondbrain/configuration/__init__.py
"""Configuration objects for SecondBrain.

Instead of factory methods, you pass a provider configuration that knows
how to build the embedding and generation components.

Example:
    from secondbrain import SecondBrain, LiteLLMProvider

    brain = SecondBrain(provider=LiteLLMProvider(embedding="gemini/text-embedding-004"))
"""

from secondbrain.configuration.base import ProviderConfig
from secondbrain.configuration.providers import LiteLLMProvider

__all__ = ["ProviderConfig", "LiteLLMProvider"]
