# src/secondbrain/stores/base.py
"""Abstract base class for corpus storage."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from secondbrain.models import Chunk, NewChunk, NewSource, Source


class CorpusStore(ABC):
    """Append-only collection of sources and their embedded chunks.

    There is no update or delete API; the corpus is rebuilt
    by re-ingesting.
    """

    @abstractmethod
    def add_source(self, source: NewSource) -> int:
        """Store a source, assigning the next id. Returns the id."""
        ...

    @abstractmethod
    def add_chunk(self, chunk: NewChunk) -> Chunk:
        """Store a chunk, assigning the next id. Returns the stored chunk."""
        ...

    @abstractmethod
    def add_source_with_chunks(
        self, source: NewSource, chunks: Sequence[tuple[str, list[float]]]
    ) -> int:
        """Store a source and its (content, embedding) pairs in one step.

        Chunks inherit user_id, created_at and content_time from the source.
        Either everything is stored or nothing is. Returns the source id.
        """
        ...

    @abstractmethod
    def chunks_for_user(self, user_id: int) -> list[Chunk]:
        """Get all chunks for a tenant, in insertion order."""
        ...

    @abstractmethod
    def sources_for_user(self, user_id: int) -> list[Source]:
        """Get all sources for a tenant, in insertion order."""
        ...

    @abstractmethod
    def count_sources(self) -> int:
        """Count the total number of sources in the store."""
        ...

    @abstractmethod
    def count_chunks(self) -> int:
        """Count the total number of chunks in the store."""
        ...
