# src/secondbrain/stores/memory.py
"""In-memory implementation of the corpus store."""

import threading
from collections.abc import Sequence

from secondbrain.exceptions import DimensionMismatchError, UnknownSourceError
from secondbrain.models import Chunk, NewChunk, NewSource, Source
from secondbrain.stores.base import CorpusStore


class InMemoryCorpusStore(CorpusStore):
    """Process-local corpus store.

    State is two append-only lists plus two id counters starting at 1.
    Appends are serialized by a lock, so concurrent ingestions are safe;
    reads return a copy taken under the same lock. Nothing survives the
    process, and growth is unbounded.

    Example:
        store = InMemoryCorpusStore()
        source_id = store.add_source_with_chunks(new_source, [("text", vector)])
        chunks = store.chunks_for_user(1)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sources: list[Source] = []
        self._chunks: list[Chunk] = []
        self._source_ids: set[int] = set()
        self._next_source_id = 1
        self._next_chunk_id = 1
        self._dimension: int | None = None

    @property
    def dimension(self) -> int | None:
        """Embedding dimensionality of stored chunks (None while empty)."""
        return self._dimension

    def _check_dimension(self, dimension: int, expected: int | None) -> None:
        if expected is not None and dimension != expected:
            raise DimensionMismatchError(expected, dimension)

    def add_source(self, source: NewSource) -> int:
        with self._lock:
            source_id = self._next_source_id
            self._next_source_id += 1
            self._sources.append(Source(id=source_id, **source.model_dump()))
            self._source_ids.add(source_id)
            return source_id

    def add_chunk(self, chunk: NewChunk) -> Chunk:
        with self._lock:
            if chunk.source_id not in self._source_ids:
                raise UnknownSourceError(chunk.source_id)
            dimension = len(chunk.embedding)
            self._check_dimension(dimension, self._dimension)

            stored = Chunk(id=self._next_chunk_id, **chunk.model_dump())
            self._next_chunk_id += 1
            self._chunks.append(stored)
            self._dimension = dimension
            return stored

    def add_source_with_chunks(
        self, source: NewSource, chunks: Sequence[tuple[str, list[float]]]
    ) -> int:
        with self._lock:
            # Build and check every record before touching state
            source_id = self._next_source_id
            stored_source = Source(id=source_id, **source.model_dump())
            expected = self._dimension
            stored_chunks = []
            for offset, (content, embedding) in enumerate(chunks):
                self._check_dimension(len(embedding), expected)
                expected = len(embedding)
                stored_chunks.append(
                    Chunk(
                        id=self._next_chunk_id + offset,
                        user_id=source.user_id,
                        source_id=source_id,
                        content=content,
                        embedding=embedding,
                        created_at=source.created_at,
                        content_time=source.content_time,
                    )
                )

            self._next_source_id += 1
            self._sources.append(stored_source)
            self._source_ids.add(source_id)
            self._next_chunk_id += len(stored_chunks)
            self._chunks.extend(stored_chunks)
            self._dimension = expected
            return source_id

    def chunks_for_user(self, user_id: int) -> list[Chunk]:
        with self._lock:
            return [chunk for chunk in self._chunks if chunk.user_id == user_id]

    def sources_for_user(self, user_id: int) -> list[Source]:
        with self._lock:
            return [source for source in self._sources if source.user_id == user_id]

    def count_sources(self) -> int:
        with self._lock:
            return len(self._sources)

    def count_chunks(self) -> int:
        with self._lock:
            return len(self._chunks)
