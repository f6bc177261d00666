from __future__ import annotations

import re
from collections import Counter

from resume_optimizer.core.config.scoring import get_scoring_value
from resume_optimizer.schemas.normalized import Importance, JobDescription
from resume_optimizer.taxonomy import VocabularyProvider, get_default_vocabulary

from .utils import dedupe

_WINDOW_END = r"(?=\n\s*(?:preferred|desired|nice|plus|responsibilities|duties|we offer)|\Z)"
_BULLET_LINE_RE = re.compile(r"[•·-]\s*[^\n]+")
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_DEFAULT_IMPORTANCE: Importance = "medium"


def _vocabulary_hits(text: str, vocabulary: VocabularyProvider) -> list[str]:
    lowered = text.lower()
    return [skill for skill in vocabulary.skills if skill in lowered]


def extract_skills(
    content: str,
    indicators: tuple[str, ...] | list[str],
    *,
    vocabulary: VocabularyProvider | None = None,
) -> list[str]:
    """Collect vocabulary skills mentioned after any indicator phrase or on bullet lines.

    Each indicator opens a window that runs to the next line starting with a
    preferred/responsibilities-style marker, or to the end of the text.
    """
    vocabulary = vocabulary or get_default_vocabulary()
    found: list[str] = []

    for indicator in indicators:
        window_re = re.compile(re.escape(indicator) + r"[\s\S]*?" + _WINDOW_END, re.IGNORECASE)
        for window in window_re.finditer(content):
            found.extend(_vocabulary_hits(window.group(0), vocabulary))

    for bullet in _BULLET_LINE_RE.findall(content):
        found.extend(_vocabulary_hits(bullet, vocabulary))

    return dedupe(found)


def extract_keywords(content: str, *, vocabulary: VocabularyProvider | None = None) -> list[str]:
    vocabulary = vocabulary or get_default_vocabulary()
    min_length = int(get_scoring_value("job_description.min_keyword_length", 4))
    min_frequency = int(get_scoring_value("job_description.min_keyword_frequency", 2))
    top_count = int(get_scoring_value("job_description.top_keyword_count", 20))

    words = [word for word in _NON_WORD_RE.sub(" ", content.lower()).split() if len(word) >= min_length]
    counts = Counter(words)
    ranked = sorted(
        (
            (word, count)
            for word, count in counts.items()
            if count >= min_frequency and word not in vocabulary.stop_words
        ),
        key=lambda item: item[1],
        reverse=True,
    )
    keywords = [word for word, _ in ranked[:top_count]]
    keywords.extend(_vocabulary_hits(content, vocabulary))
    return dedupe(keywords)


def get_skill_importance(
    skill: str,
    job_content: str,
    *,
    vocabulary: VocabularyProvider | None = None,
) -> Importance:
    vocabulary = vocabulary or get_default_vocabulary()
    lowered_content = job_content.lower()
    lowered_skill = re.escape(skill.lower())

    for importance, keywords in vocabulary.importance_keywords():
        for keyword in keywords:
            escaped = re.escape(keyword)
            pattern = re.compile(
                rf"{escaped}[\s\S]*?{lowered_skill}|{lowered_skill}[\s\S]*?{escaped}",
                re.IGNORECASE,
            )
            if pattern.search(lowered_content):
                return importance  # type: ignore[return-value]

    return _DEFAULT_IMPORTANCE


def analyze_job_description(title: str, company: str | None, content: str) -> JobDescription:
    vocabulary = get_default_vocabulary()
    return JobDescription(
        title=title,
        company=company,
        content=content,
        required_skills=extract_skills(content, vocabulary.indicators("required"), vocabulary=vocabulary),
        preferred_skills=extract_skills(content, vocabulary.indicators("preferred"), vocabulary=vocabulary),
        keywords=extract_keywords(content, vocabulary=vocabulary),
    )
