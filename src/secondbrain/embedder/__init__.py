# src/secondbrain/embedder/__init__.py
"""Embedding gateway for SecondBrain."""

from secondbrain.embedder.base import Embedder
from secondbrain.embedder.client import ClientEmbedder

__all__ = ["Embedder", "ClientEmbedder"]
