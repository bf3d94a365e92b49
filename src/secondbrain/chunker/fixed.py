# src/secondbrain/chunker/fixed.py
"""Fixed-size character chunker."""

from secondbrain.chunker.base import Chunker

DEFAULT_MAX_TOKENS = 500
DEFAULT_CHARS_PER_TOKEN = 4


def chunk_text(text: str, target_size_chars: int) -> list[str]:
    """Split text into contiguous slices of at most ``target_size_chars``.

    Slices are cut on raw character offsets and are not trimmed, so
    ``"".join(chunk_text(t, n)) == t`` always holds.

    Raises:
        ValueError: If target_size_chars is not positive.
    """
    if target_size_chars <= 0:
        raise ValueError(f"target_size_chars must be positive, got {target_size_chars}")
    return [text[i : i + target_size_chars] for i in range(0, len(text), target_size_chars)]


def prepare_chunks(slices: list[str]) -> list[str]:
    """Trim each slice and drop the ones left empty."""
    return [content for content in (s.strip() for s in slices) if content]


class FixedSizeChunker(Chunker):
    """Chunker that cuts text into equal character windows.

    The window is derived from a token budget with a fixed
    characters-per-token ratio (4 by default). This approximates token
    counts without a tokenizer: it is cheap and model-agnostic, and a
    window can land mid-word or mid-sentence.

    Example:
        chunker = FixedSizeChunker()           # 500 tokens -> 2000 chars
        slices = chunker.split(document_text)
    """

    def __init__(
        self,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        chars_per_token: int = DEFAULT_CHARS_PER_TOKEN,
    ) -> None:
        """Initialize the chunker.

        Args:
            max_tokens: Approximate token budget per slice.
            chars_per_token: Characters assumed per token.
        """
        if max_tokens <= 0 or chars_per_token <= 0:
            raise ValueError("max_tokens and chars_per_token must be positive")
        self.max_tokens = max_tokens
        self.chars_per_token = chars_per_token

    @property
    def target_size_chars(self) -> int:
        return self.max_tokens * self.chars_per_token

    def split(self, text: str) -> list[str]:
        """Split text into raw slices of at most target_size_chars characters."""
        return chunk_text(text, self.target_size_chars)
