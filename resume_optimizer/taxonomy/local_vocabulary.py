from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .provider import VocabularyProvider

_TIER_ORDER = ("high", "medium", "low")


class LocalVocabulary(VocabularyProvider):
    def __init__(self, vocabulary_path: str | Path | None = None) -> None:
        path = Path(vocabulary_path) if vocabulary_path else Path(__file__).with_name("vocabulary.json")
        raw = self._load_vocabulary(path)
        self._skills = tuple(str(item).strip().lower() for item in raw.get("skills", []) if str(item).strip())
        self._stop_words = frozenset(str(item).strip().lower() for item in raw.get("stop_words", []))
        tiers = raw.get("importance_keywords", {})
        self._importance = tuple(
            (tier, tuple(str(item).lower() for item in tiers.get(tier, [])))
            for tier in _TIER_ORDER
        )
        self._indicators = {
            "required": tuple(str(item).lower() for item in raw.get("required_indicators", [])),
            "preferred": tuple(str(item).lower() for item in raw.get("preferred_indicators", [])),
        }

    @staticmethod
    def _load_vocabulary(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid vocabulary file '{path}': expected a top-level mapping.")
        return raw

    @property
    def skills(self) -> tuple[str, ...]:
        return self._skills

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def importance_keywords(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        return self._importance

    def indicators(self, kind: str) -> tuple[str, ...]:
        if kind not in self._indicators:
            raise ValueError("kind must be 'required' or 'preferred'")
        return self._indicators[kind]
