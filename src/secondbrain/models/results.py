# src/secondbrain/models/results.py
"""Result data models for ingestion and queries."""

from pydantic import BaseModel

from secondbrain.models.chunk import Chunk


class RankedChunk(BaseModel):
    """A chunk paired with its similarity to the query."""

    chunk: Chunk
    score: float


class Synthesis(BaseModel):
    """Answer built from ranked chunks.

    ``generated`` is False when the fallback (raw context) answer was used.
    """

    answer: str
    used_count: int
    generated: bool


class IngestResult(BaseModel):
    """Outcome of ingesting one text."""

    source_id: int
    chunks_added: int


class QueryResponse(BaseModel):
    """Full response to a user question."""

    question: str
    answer: str
    context_used_count: int
    results: list[RankedChunk]
    generated: bool
