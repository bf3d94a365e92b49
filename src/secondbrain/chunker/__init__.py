# src/secondbrain/chunker/__init__.py
"""Text chunking for SecondBrain.

This module exports:
- Chunker: Abstract base class for chunkers
- FixedSizeChunker: Character-window chunker sized from a token budget
- chunk_text: The raw offset-based split
- prepare_chunks: Trim slices and drop empty ones before embedding
"""

from secondbrain.chunker.base import Chunker
from secondbrain.chunker.fixed import FixedSizeChunker, chunk_text, prepare_chunks

__all__ = ["Chunker", "FixedSizeChunker", "chunk_text", "prepare_chunks"]
