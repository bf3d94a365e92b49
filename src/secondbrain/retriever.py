# src/secondbrain/retriever.py
"""Retrieval pipeline for SecondBrain."""

import structlog

from secondbrain.embedder import Embedder
from secondbrain.exceptions import EmptyCorpusError, ValidationError
from secondbrain.models import Chunk, QueryResponse, RankedChunk, Synthesis
from secondbrain.ranker import SimilarityRanker
from secondbrain.stores import CorpusStore
from secondbrain.synthesizer import AnswerSynthesizer

logger = structlog.get_logger()


class Retriever:
    """Orchestrates the query pipeline.

    Pipeline:
    1. Validate the question and check the tenant has chunks
    2. Embed the question
    3. Rank the tenant's chunks by cosine similarity, keep the top k
    4. Synthesize an answer (falls back to the raw context on model failure)
    """

    def __init__(
        self,
        store: CorpusStore,
        embedder: Embedder,
        synthesizer: AnswerSynthesizer,
        user_id: int,
        ranker: SimilarityRanker | None = None,
    ) -> None:
        """Initialize the retriever.

        Args:
            store: Corpus store to search
            embedder: Embedding gateway for questions
            synthesizer: Answer synthesizer
            user_id: Tenant whose chunks are searched
            ranker: Similarity ranker (default: SimilarityRanker with k=5)
        """
        self.store = store
        self.embedder = embedder
        self.synthesizer = synthesizer
        self.user_id = user_id
        self.ranker = ranker or SimilarityRanker()

    @property
    def default_k(self) -> int:
        return self.ranker.default_k

    def _candidates(self, question: str | None) -> list[Chunk]:
        if question is None or not question.strip():
            logger.info("query_rejected", reason="blank_question")
            raise ValidationError("question is required")
        candidates = self.store.chunks_for_user(self.user_id)
        if not candidates:
            logger.warning("query_rejected_empty_corpus", user_id=self.user_id)
            raise EmptyCorpusError(self.user_id)
        return candidates

    def _respond(
        self, question: str, ranked: list[RankedChunk], synthesis: Synthesis
    ) -> QueryResponse:
        logger.info(
            "query_answered",
            context_used_count=synthesis.used_count,
            generated=synthesis.generated,
        )
        return QueryResponse(
            question=question,
            answer=synthesis.answer,
            context_used_count=synthesis.used_count,
            results=ranked,
            generated=synthesis.generated,
        )

    def get_context(self, question: str, k: int | None = None) -> list[RankedChunk]:
        """Get the chunks most relevant to a question.

        Args:
            question: User's question
            k: Number of results to return (default: self.default_k)

        Returns:
            List of RankedChunk objects ordered by relevance

        Raises:
            ValidationError: If the question is blank.
            EmptyCorpusError: If nothing was ingested for the tenant.
            EmbeddingUnavailable: If the question cannot be embedded.
        """
        candidates = self._candidates(question)
        query_embedding = self.embedder.embed_text(question)
        return self.ranker.rank(query_embedding, candidates, k)

    async def aget_context(self, question: str, k: int | None = None) -> list[RankedChunk]:
        """Get the chunks most relevant to a question (async)."""
        candidates = self._candidates(question)
        query_embedding = await self.embedder.aembed_text(question)
        return self.ranker.rank(query_embedding, candidates, k)

    def get_answer(self, question: str, k: int | None = None) -> QueryResponse:
        """Answer a question from the tenant's corpus.

        Generation failures never raise here; the answer then carries the
        fallback prefix followed by the retrieved context.
        """
        ranked = self.get_context(question, k=k)
        synthesis = self.synthesizer.synthesize(question, ranked)
        return self._respond(question, ranked, synthesis)

    async def aget_answer(self, question: str, k: int | None = None) -> QueryResponse:
        """Answer a question from the tenant's corpus (async)."""
        ranked = await self.aget_context(question, k=k)
        synthesis = await self.synthesizer.asynthesize(question, ranked)
        return self._respond(question, ranked, synthesis)
