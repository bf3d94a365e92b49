# src/secondbrain/models/chunk.py
"""Chunk data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NewChunk(BaseModel):
    """An embedded slice of a source, not yet stored."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    source_id: int
    content: str = Field(min_length=1)
    embedding: list[float]
    created_at: datetime
    content_time: datetime


class Chunk(NewChunk):
    """A retrievable unit of a source's text."""

    id: int
