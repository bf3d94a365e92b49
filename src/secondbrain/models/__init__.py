# src/secondbrain/models/__init__.py
"""Data models for SecondBrain."""

from secondbrain.models.chunk import Chunk, NewChunk
from secondbrain.models.results import IngestResult, QueryResponse, RankedChunk, Synthesis
from secondbrain.models.source import DEFAULT_TITLE, Modality, NewSource, Source

__all__ = [
    "DEFAULT_TITLE",
    "Modality",
    "NewSource",
    "Source",
    "NewChunk",
    "Chunk",
    "RankedChunk",
    "Synthesis",
    "IngestResult",
    "QueryResponse",
]
