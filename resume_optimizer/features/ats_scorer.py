from __future__ import annotations

import math

from resume_optimizer.core.config.scoring import get_scoring_value
from resume_optimizer.normalize.normalize_jd import get_skill_importance
from resume_optimizer.schemas.normalized import (
    ATSAnalysis,
    Improvement,
    JobDescription,
    KeywordMatch,
    ResumeData,
)

_SUMMARY_IMPROVEMENT = (
    "Expand your professional summary to 2-3 sentences highlighting your most relevant experience and skills"
)
_SUMMARY_SUGGESTION = "Add a professional summary section highlighting your key qualifications"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _listed(matches: list[KeywordMatch]) -> str:
    limit = int(get_scoring_value("matching.max_listed_skills", 3))
    return ", ".join(match.skill for match in matches[:limit])


def _missing_by_importance(matches: list[KeywordMatch], importance: str) -> list[KeywordMatch]:
    return [match for match in matches if not match.found and match.importance == importance]


def analyze_keyword_matches(resume: ResumeData, job: JobDescription) -> list[KeywordMatch]:
    resume_content = resume.content.lower()
    return [
        KeywordMatch(
            skill=skill,
            found=skill.lower() in resume_content,
            importance=get_skill_importance(skill, job.content),
        )
        for skill in [*job.required_skills, *job.preferred_skills]
    ]


def calculate_score(matches: list[KeywordMatch], resume: ResumeData) -> int:
    weights = get_scoring_value("matching.importance_weights", {}) or {}
    bonuses = get_scoring_value("matching.section_bonuses", {}) or {}
    ceiling = float(get_scoring_value("matching.keyword_score_ceiling", 70))

    total_weight = 0
    achieved_weight = 0
    for match in matches:
        weight = int(weights.get(match.importance, 1))
        total_weight += weight
        if match.found:
            achieved_weight += weight

    score = (achieved_weight / total_weight) * ceiling if total_weight > 0 else 0.0

    sections = resume.sections
    if sections.summary:
        score += float(bonuses.get("summary", 10))
    if sections.experience:
        score += float(bonuses.get("experience", 10))
    if sections.skills:
        score += float(bonuses.get("skills", 5))
    if sections.education:
        score += float(bonuses.get("education", 5))

    # Bonuses can push the sum past 100; the clamp is what enforces the ceiling.
    return max(0, min(_round_half_up(score), 100))


def find_missing_keywords(resume: ResumeData, job: JobDescription) -> list[str]:
    limit = int(get_scoring_value("matching.max_missing_keywords", 10))
    resume_content = resume.content.lower()
    candidates = [*job.required_skills, *job.preferred_skills, *job.keywords]
    return [keyword for keyword in candidates if keyword.lower() not in resume_content][:limit]


def generate_suggestions(resume: ResumeData, matches: list[KeywordMatch]) -> list[str]:
    suggestions: list[str] = []

    missing_high = _missing_by_importance(matches, "high")
    if missing_high:
        suggestions.append(f"Add these high-priority skills: {_listed(missing_high)}")

    missing_medium = _missing_by_importance(matches, "medium")
    if missing_medium:
        suggestions.append(f"Consider including these relevant skills: {_listed(missing_medium)}")

    if not resume.sections.summary:
        suggestions.append(_SUMMARY_SUGGESTION)

    return suggestions


def generate_improvements(resume: ResumeData, matches: list[KeywordMatch]) -> list[Improvement]:
    improvements: list[Improvement] = []
    short_summary = int(get_scoring_value("matching.short_summary_chars", 100))

    missing_high = _missing_by_importance(matches, "high")
    if missing_high:
        improvements.append(
            Improvement(section="Skills", suggestion=f"Add critical skills: {_listed(missing_high)}", impact="high")
        )

    missing_medium = _missing_by_importance(matches, "medium")
    if missing_medium:
        improvements.append(
            Improvement(
                section="Skills",
                suggestion=f"Include preferred skills: {_listed(missing_medium)}",
                impact="medium",
            )
        )

    summary = resume.sections.summary
    if not summary or len(summary) < short_summary:
        improvements.append(
            Improvement(section="Professional Summary", suggestion=_SUMMARY_IMPROVEMENT, impact="medium")
        )

    return improvements


def analyze_resume(resume: ResumeData, job: JobDescription) -> ATSAnalysis:
    matches = analyze_keyword_matches(resume, job)
    return ATSAnalysis(
        score=calculate_score(matches, resume),
        matches=matches,
        suggestions=generate_suggestions(resume, matches),
        missing_keywords=find_missing_keywords(resume, job),
        improvements=generate_improvements(resume, matches),
    )
