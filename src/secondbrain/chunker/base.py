# src/secondbrain/chunker/base.py
"""Chunker abstract base class."""

from abc import ABC, abstractmethod


class Chunker(ABC):
    """Abstract base class for splitting text into retrievable slices."""

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Split text into raw (untrimmed) slices, preserving order."""
        ...
