# src/secondbrain/configuration/providers/__init__.py
"""Provider configurations."""

from secondbrain.configuration.providers.litellm import LiteLLMProvider

__all__ = ["LiteLLMProvider"]
