# src/secondbrain/exceptions.py
"""Exceptions raised by the SecondBrain pipeline.

Only ``ValidationError``, ``EmptyCorpusError`` and ``EmbeddingUnavailable``
reach callers of the ingestion and query entry points.
``GenerationUnavailable`` is absorbed by the answer synthesizer, which
falls back to returning the raw retrieved context.
"""


class SecondBrainError(Exception):
    """Base class for all SecondBrain errors."""


class ValidationError(SecondBrainError, ValueError):
    """Required input is missing or blank."""


class EmptyCorpusError(SecondBrainError):
    """A query was issued before anything was ingested for the tenant."""

    def __init__(self, user_id: int) -> None:
        super().__init__("no data ingested yet")
        self.user_id = user_id


class EmbeddingUnavailable(SecondBrainError):
    """The embedding capability failed or timed out."""


class GenerationUnavailable(SecondBrainError):
    """The generation capability failed or timed out."""


class NoCandidates(SecondBrainError):
    """Ranking was asked to score an empty candidate set."""


class DimensionMismatchError(SecondBrainError, ValueError):
    """Two vectors that must share a dimensionality do not.

    Attributes:
        expected: Dimensionality already established.
        actual: Dimensionality that was offered.
    """

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Embedding dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class UnknownSourceError(SecondBrainError, LookupError):
    """A chunk references a source id the store does not hold."""

    def __init__(self, source_id: int) -> None:
        super().__init__(f"Unknown source id: {source_id}")
        self.source_id = source_id
