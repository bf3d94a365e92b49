# src/secondbrain/stores/__init__.py
"""Storage abstractions for SecondBrain."""

from secondbrain.stores.base import CorpusStore
from secondbrain.stores.memory import InMemoryCorpusStore

__all__ = ["CorpusStore", "InMemoryCorpusStore"]
