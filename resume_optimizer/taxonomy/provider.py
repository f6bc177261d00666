from __future__ import annotations

from typing import Protocol


class VocabularyProvider(Protocol):
    @property
    def skills(self) -> tuple[str, ...]:
        """Known skill terms, lowercase, in vocabulary order."""

    @property
    def stop_words(self) -> frozenset[str]:
        """Tokens ignored when ranking job description keywords."""

    def importance_keywords(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """Importance tiers in evaluation order with their qualifying phrases."""

    def indicators(self, kind: str) -> tuple[str, ...]:
        """Indicator phrases that open a required or preferred skills window."""
