# src/secondbrain/models/source.py
"""Source data model."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_TITLE = "Untitled"

# Only "text" is ingested today; the tag is kept so other modalities can be added.
Modality = Literal["text"]


class NewSource(BaseModel):
    """A document about to be stored. The store assigns the id."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    title: str = DEFAULT_TITLE
    modality: Modality = "text"
    content_time: datetime
    created_at: datetime

    @field_validator("title", mode="before")
    @classmethod
    def _default_blank_title(cls, value: str | None) -> str:
        if value is None or not str(value).strip():
            return DEFAULT_TITLE
        return value


class Source(NewSource):
    """A single ingested document."""

    id: int
