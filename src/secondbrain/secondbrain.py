# src/secondbrain/secondbrain.py
"""Central object wiring the SecondBrain pipeline together."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from secondbrain.configuration import ProviderConfig
    from secondbrain.ingestor import Ingestor
    from secondbrain.models import IngestResult, QueryResponse
    from secondbrain.providers import LLMClient
    from secondbrain.retriever import Retriever

from secondbrain.settings import Settings
from secondbrain.stores import CorpusStore, InMemoryCorpusStore


class SecondBrain:
    """Bundles the store and AI components so they are configured once.

    Each instance owns its corpus store; a fresh instance starts with an
    empty corpus.

    Example:
        from secondbrain import SecondBrain, LiteLLMProvider

        brain = SecondBrain(
            provider=LiteLLMProvider(
                llm="gemini/gemini-2.5-flash-lite",
                embedding="gemini/text-embedding-004",
            ),
        )
        brain.ingest_text("Alpha beta gamma.", title="Doc1")
        response = brain.query("What comes after beta?")
        print(response.answer)
    """

    def __init__(
        self,
        *,
        provider: ProviderConfig,
        store: CorpusStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a SecondBrain instance.

        Args:
            provider: Provider configuration (builds embedder and LLM client).
            store: Corpus store. Default: a new InMemoryCorpusStore.
            settings: Behavioral settings (chunk size, k, prompts, ...).
        """
        self._settings = settings if settings is not None else Settings()
        self.store = store if store is not None else InMemoryCorpusStore()
        self.embedder = provider.build_embedder(self._settings)
        self._llm_client = provider.build_llm_client(self._settings)

    @property
    def settings(self) -> Settings:
        return self._settings

    def ingestor(self, *, max_concurrent: int | None = None) -> Ingestor:
        """Create an Ingestor over this instance's store.

        Args:
            max_concurrent: Embedding fan-out for async ingestion.
                If None, uses settings.max_concurrent_embeddings.
        """
        from secondbrain.chunker import FixedSizeChunker
        from secondbrain.ingestor import Ingestor

        return Ingestor(
            store=self.store,
            chunker=FixedSizeChunker(
                max_tokens=self._settings.chunk_max_tokens,
                chars_per_token=self._settings.chars_per_token,
            ),
            embedder=self.embedder,
            user_id=self._settings.user_id,
            max_concurrent=(
                max_concurrent
                if max_concurrent is not None
                else self._settings.max_concurrent_embeddings
            ),
        )

    def retriever(
        self,
        *,
        llm_client: LLMClient | None = None,
        default_k: int | None = None,
    ) -> Retriever:
        """Create a Retriever over this instance's store.

        Args:
            llm_client: Override the provider's LLM client for synthesis.
            default_k: Number of chunks to use. If None, uses settings default.
        """
        from secondbrain.ranker import SimilarityRanker
        from secondbrain.retriever import Retriever
        from secondbrain.synthesizer import AnswerSynthesizer

        synthesizer = AnswerSynthesizer(
            llm_client=llm_client if llm_client is not None else self._llm_client,
            system_prompt=self._settings.synthesis_system_prompt,
            temperature=self._settings.synthesis_temperature,
            fallback_prefix=self._settings.fallback_prefix,
        )
        return Retriever(
            store=self.store,
            embedder=self.embedder,
            synthesizer=synthesizer,
            user_id=self._settings.user_id,
            ranker=SimilarityRanker(
                default_k=default_k if default_k is not None else self._settings.default_k
            ),
        )

    def ingest_text(
        self,
        text: str,
        title: str | None = None,
        content_time: datetime | None = None,
    ) -> IngestResult:
        """Ingest one text. See Ingestor.ingest_text."""
        return self.ingestor().ingest_text(text, title=title, content_time=content_time)

    async def aingest_text(
        self,
        text: str,
        title: str | None = None,
        content_time: datetime | None = None,
    ) -> IngestResult:
        """Ingest one text (async). See Ingestor.aingest_text."""
        return await self.ingestor().aingest_text(text, title=title, content_time=content_time)

    def ingest_file(self, filepath: str | Path, title: str | None = None) -> IngestResult:
        """Ingest a UTF-8 text file, titled with its file name by default.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file is not UTF-8 text.
        """
        file_path = Path(filepath)
        if not file_path.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        text = file_path.read_text(encoding="utf-8")
        return self.ingest_text(text, title=title or file_path.name)

    def query(self, question: str, k: int | None = None) -> QueryResponse:
        """Answer a question from the corpus. See Retriever.get_answer."""
        return self.retriever().get_answer(question, k=k)

    async def aquery(self, question: str, k: int | None = None) -> QueryResponse:
        """Answer a question from the corpus (async)."""
        return await self.retriever().aget_answer(question, k=k)
