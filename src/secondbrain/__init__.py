"""SecondBrain - retrieval-augmented answers over a private text corpus.

Ingested text is split into fixed-size chunks, embedded, and kept in an
in-memory corpus. Questions are embedded, matched against the corpus by
cosine similarity, and answered by a language model grounded on the top
chunks. If the model is unavailable, the retrieved notes are returned.

Quick Start (LiteLLM):
    from secondbrain import SecondBrain, LiteLLMProvider

    brain = SecondBrain(
        provider=LiteLLMProvider(
            llm="gemini/gemini-2.5-flash-lite",
            embedding="gemini/text-embedding-004",
        ),
    )

    brain.ingest_text("Alpha beta gamma.", title="Doc1")
    response = brain.query("What follows beta?")
    print(response.answer, response.context_used_count)

Explicit components:
    from secondbrain import Ingestor, Retriever, InMemoryCorpusStore, FixedSizeChunker

    store = InMemoryCorpusStore()
    ingestor = Ingestor(store=store, chunker=FixedSizeChunker(), embedder=embedder, user_id=1)
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("secondbrain-rag")
except PackageNotFoundError:
    # Source tree without an installed distribution (e.g. running tests in place).
    __version__ = "unknown"

# Components
from secondbrain.chunker import Chunker, FixedSizeChunker, chunk_text

# Configuration objects
from secondbrain.configuration import LiteLLMProvider, ProviderConfig
from secondbrain.embedder import ClientEmbedder, Embedder

# Errors
from secondbrain.exceptions import (
    DimensionMismatchError,
    EmbeddingUnavailable,
    EmptyCorpusError,
    GenerationUnavailable,
    NoCandidates,
    SecondBrainError,
    UnknownSourceError,
    ValidationError,
)

# Pipelines
from secondbrain.ingestor import Ingestor

# Core models
from secondbrain.models import (
    Chunk,
    IngestResult,
    QueryResponse,
    RankedChunk,
    Source,
    Synthesis,
)

# Provider ABCs
from secondbrain.providers import EmbeddingClient, LLMClient
from secondbrain.ranker import SimilarityRanker, cosine_similarity
from secondbrain.retriever import Retriever

# Central object
from secondbrain.secondbrain import SecondBrain

# Configuration
from secondbrain.settings import Settings

# Storage
from secondbrain.stores import CorpusStore, InMemoryCorpusStore
from secondbrain.synthesizer import AnswerSynthesizer, Generated, Unavailable

__all__ = [
    # Version
    "__version__",
    # Models
    "Source",
    "Chunk",
    "RankedChunk",
    "Synthesis",
    "IngestResult",
    "QueryResponse",
    # Config
    "Settings",
    "ProviderConfig",
    "LiteLLMProvider",
    # Components
    "Chunker",
    "FixedSizeChunker",
    "chunk_text",
    "Embedder",
    "ClientEmbedder",
    "CorpusStore",
    "InMemoryCorpusStore",
    "SimilarityRanker",
    "cosine_similarity",
    "AnswerSynthesizer",
    "Generated",
    "Unavailable",
    # Provider ABCs
    "LLMClient",
    "EmbeddingClient",
    # Pipelines
    "Ingestor",
    "Retriever",
    # Central object
    "SecondBrain",
    # Errors
    "SecondBrainError",
    "ValidationError",
    "EmptyCorpusError",
    "EmbeddingUnavailable",
    "GenerationUnavailable",
    "NoCandidates",
    "DimensionMismatchError",
    "UnknownSourceError",
]
