"""Random byte source abstract base class."""
from __future__ import annotations
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Abstract base class for random byte sources."""

    @abstractmethod
    def generate(self, count: int) -> bytes:
        """Return exactly *count* random bytes.

        Raises ``RandomSourceError`` when the source cannot deliver.
        """
        ...

    @abstractmethod
    def get_source_name(self) -> str:
        """Return a short name identifying the source in logs."""
        ...
