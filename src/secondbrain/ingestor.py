# src/secondbrain/ingestor.py
"""Ingestion pipeline for SecondBrain."""

import asyncio
from datetime import UTC, datetime

import structlog

from secondbrain.chunker import Chunker, prepare_chunks
from secondbrain.embedder import Embedder
from secondbrain.exceptions import DimensionMismatchError, ValidationError
from secondbrain.models import IngestResult, NewSource
from secondbrain.stores import CorpusStore

logger = structlog.get_logger()


class Ingestor:
    """Orchestrates the ingestion pipeline.

    Pipeline:
    1. Validate that the text is not blank
    2. Split it with the Chunker, trim slices, drop empty ones
    3. Embed every slice (one call per slice)
    4. Commit the Source, then its chunks in slice order

    Ingestion is all-or-nothing: nothing is written until every slice has
    been embedded, and the store checks every vector before it writes, so a
    failed request leaves the store untouched.
    """

    def __init__(
        self,
        store: CorpusStore,
        chunker: Chunker,
        embedder: Embedder,
        user_id: int,
        max_concurrent: int = 1,
    ) -> None:
        """Initialize the ingestor.

        Args:
            store: Corpus store to append to
            chunker: Component splitting text into slices
            embedder: Embedding gateway
            user_id: Tenant that owns ingested sources
            max_concurrent: Concurrent embedding calls in aingest_text()
        """
        self.store = store
        self.chunker = chunker
        self.embedder = embedder
        self.user_id = user_id
        self.max_concurrent = max_concurrent

    def _prepare(self, text: str | None) -> list[str]:
        if text is None or not text.strip():
            logger.info("ingest_rejected", reason="blank_text")
            raise ValidationError("text is required")
        return prepare_chunks(self.chunker.split(text))

    def _commit(
        self,
        contents: list[str],
        embeddings: list[list[float]],
        title: str | None,
        content_time: datetime | None,
    ) -> IngestResult:
        now = datetime.now(UTC)
        source = NewSource(
            user_id=self.user_id,
            title=title,
            content_time=content_time or now,
            created_at=now,
        )
        try:
            source_id = self.store.add_source_with_chunks(
                source, list(zip(contents, embeddings, strict=True))
            )
        except DimensionMismatchError as e:
            logger.error("ingest_dimension_mismatch", error=str(e))
            raise

        logger.info("text_ingested", source_id=source_id, chunks_added=len(contents))
        return IngestResult(source_id=source_id, chunks_added=len(contents))

    def ingest_text(
        self,
        text: str,
        title: str | None = None,
        content_time: datetime | None = None,
    ) -> IngestResult:
        """Ingest one text, embedding its slices one after another.

        Args:
            text: Raw document text (required, non-blank)
            title: Display label (default: "Untitled")
            content_time: When the content is about (default: now)

        Returns:
            IngestResult with the new source id and number of chunks added

        Raises:
            ValidationError: If text is missing or blank.
            EmbeddingUnavailable: If any embedding call fails.
            DimensionMismatchError: If the vectors disagree in length with
                each other or with the store.
        """
        contents = self._prepare(text)
        embeddings = [self.embedder.embed_text(content) for content in contents]
        return self._commit(contents, embeddings, title, content_time)

    async def aingest_text(
        self,
        text: str,
        title: str | None = None,
        content_time: datetime | None = None,
    ) -> IngestResult:
        """Ingest one text with up to max_concurrent embedding calls in flight.

        Results are committed in slice order, so chunk ids match the order
        of the text regardless of which call finishes first. The first
        failed call cancels the others.
        """
        contents = self._prepare(text)
        semaphore = asyncio.Semaphore(self.max_concurrent)

        async def embed_one(content: str) -> list[float]:
            async with semaphore:
                return await self.embedder.aembed_text(content)

        tasks = [asyncio.create_task(embed_one(content)) for content in contents]
        try:
            embeddings = await asyncio.gather(*tasks)
        except BaseException:
            # One failure aborts the request; stop the calls still in flight
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return self._commit(contents, list(embeddings), title, content_time)
