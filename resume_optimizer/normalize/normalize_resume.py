from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any

from resume_optimizer.schemas.normalized import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    ResumeData,
    ResumeSections,
)

from .ids import generate_resume_id
from .utils import is_section_heading, non_blank_lines, strip_bullet_prefix

# Fixed ingestion timestamp so identical uploads produce identical records.
UPLOADED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)

_NAME_SEARCH_LINES = 5
_NAME_RE = re.compile(r"^[A-Z][a-zA-Z]+ [A-Z][a-zA-Z]+(\s[A-Z][a-zA-Z]+)?$")
_NAME_REJECT_MARKERS = ("@", "+", "Road", "Street")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(r"(\+\d{1,3}\s?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
_LOCATION_PATTERNS = (
    re.compile(
        r"\d+\s+[A-Za-z\s]+(?:Road|Street|Avenue|Drive|Lane|Way|Court|Place)\s+[A-Z0-9]{3,}\s+"
        r"[A-Za-z\s]+,\s*[A-Z]{2,3},?\s*[A-Z]{2,}"
    ),
    re.compile(r"[A-Za-z\s]+,\s*[A-Z]{2,3}(?:\s*[A-Z0-9]{3}\s*[A-Z0-9]{3})?\s*[A-Za-z\s]*,?\s*[A-Z]{2,}"),
    re.compile(r"[A-Z0-9]{3}\s*[A-Z0-9]{3}\s+[A-Za-z\s]+,\s*[A-Z]{2,}"),
)
_LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[\w-]+", re.IGNORECASE)

_SUMMARY_HEADER_RE = re.compile(r"^(professional\s+summary|summary|objective|profile)", re.IGNORECASE)
_SUMMARY_STOP_RE = re.compile(
    r"^(core\s+competencies|professional\s+experience|experience|education|skills|technical|awards|certifications)",
    re.IGNORECASE,
)
_SUMMARY_BUZZWORDS_RE = re.compile(
    r"\b(innovative|creative|experienced|skilled|passionate|design|technical|professional)\b",
    re.IGNORECASE,
)
_SUMMARY_FALLBACK_EXCLUDE_RE = re.compile(r"^(experience|education|skills|awards)", re.IGNORECASE)
_SUMMARY_MIN_LINE = 20
_SUMMARY_FALLBACK_MIN_LINE = 100

_SKILLS_HEADER_RE = re.compile(
    r"^(technical\s+skills|functional\s+skills|core\s+competencies|skills)",
    re.IGNORECASE,
)
_SKILLS_STOP_RE = re.compile(
    r"^(professional\s+experience|experience|education|awards|certifications|internships)",
    re.IGNORECASE,
)
_CATEGORY_LABEL_RE = re.compile(r":-|:")
_LABELLED_ITEM_SPLIT_RE = re.compile(r"[|,•·\-]")
_ITEM_SPLIT_RE = re.compile(r"[|,•·]")
_SKILL_TRIM_RE = re.compile(r"^[\s\-•·|:]+|[\s\-•·|:]+$")

_EXPERIENCE_HEADER_RE = re.compile(r"^(professional\s+experience|experience)", re.IGNORECASE)
_EXPERIENCE_STOP_RE = re.compile(
    r"^(education|internships|awards|certifications|technical|skills)",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"\d{4}")
_ENTRY_MIN_LINE = 10

_EDUCATION_HEADER_RE = re.compile(r"^education", re.IGNORECASE)
_EDUCATION_STOP_RE = re.compile(r"^(awards|certifications|technical|skills)", re.IGNORECASE)

_CERTIFICATIONS_HEADER_RE = re.compile(
    r"^(licenses?\s*(?:&|and)\s*certifications?|certifications?|licenses?)\s*:?\s*$",
    re.IGNORECASE,
)


def extract_personal_info(text: str) -> PersonalInfo:
    info = PersonalInfo()

    for line in non_blank_lines(text)[:_NAME_SEARCH_LINES]:
        if _NAME_RE.match(line) and not any(marker in line for marker in _NAME_REJECT_MARKERS):
            info.name = line
            break

    email_match = _EMAIL_RE.search(text)
    if email_match:
        info.email = email_match.group(0)

    phone_match = _PHONE_RE.search(text)
    if phone_match:
        info.phone = phone_match.group(0)

    for pattern in _LOCATION_PATTERNS:
        location_match = pattern.search(text)
        if location_match:
            info.location = location_match.group(0).strip()
            break

    linkedin_match = _LINKEDIN_RE.search(text)
    if linkedin_match:
        url = linkedin_match.group(0)
        info.linkedin = url if url.lower().startswith("http") else f"https://{url}"

    return info


def _extract_summary(lines: list[str]) -> str | None:
    parts: list[str] = []
    in_summary = False

    for line in lines:
        if _SUMMARY_HEADER_RE.match(line):
            in_summary = True
            continue

        if in_summary:
            if _SUMMARY_STOP_RE.match(line):
                break
            if len(line) > _SUMMARY_MIN_LINE:
                parts.append(line)
        elif (
            len(line) > _SUMMARY_FALLBACK_MIN_LINE
            and _SUMMARY_BUZZWORDS_RE.search(line)
            and not _SUMMARY_FALLBACK_EXCLUDE_RE.match(line)
        ):
            parts.append(line)

    summary = " ".join(parts).strip()
    return summary or None


def _split_skill_line(line: str) -> list[str]:
    if ":" in line:
        parts = _CATEGORY_LABEL_RE.split(line)
        # Only the first labelled segment carries skills, e.g. "Front-End:- HTML | CSS".
        return _LABELLED_ITEM_SPLIT_RE.split(parts[1]) if len(parts) > 1 else []
    return _ITEM_SPLIT_RE.split(line)


def _extract_skills(lines: list[str]) -> list[str] | None:
    skills: list[str] = []
    seen: set[str] = set()
    in_skills = False

    for line in lines:
        if _SKILLS_HEADER_RE.match(line):
            in_skills = True
            continue
        if not in_skills:
            continue
        if _SKILLS_STOP_RE.match(line):
            break

        for raw_skill in _split_skill_line(line):
            skill = _SKILL_TRIM_RE.sub("", raw_skill).strip()
            if 1 < len(skill) < 50 and skill not in seen:
                seen.add(skill)
                skills.append(skill)

    return skills or None


def _extract_experience(lines: list[str]) -> list[ExperienceEntry] | None:
    entries: list[ExperienceEntry] = []
    current: ExperienceEntry | None = None
    in_experience = False

    for line in lines:
        if _EXPERIENCE_HEADER_RE.match(line):
            in_experience = True
            continue
        if not in_experience:
            continue
        if _EXPERIENCE_STOP_RE.match(line):
            break

        if "–" in line or "-" in line or _YEAR_RE.search(line):
            if current is not None:
                entries.append(current)
            current = ExperienceEntry(company=line)
        elif current is not None and len(line) > _ENTRY_MIN_LINE:
            current.description.append(line)

    if current is not None:
        entries.append(current)
    return entries or None


def _extract_education(lines: list[str]) -> list[EducationEntry] | None:
    # Only the institution is captured; degree, field and dates stay empty.
    entries: list[EducationEntry] = []
    in_education = False

    for line in lines:
        if _EDUCATION_HEADER_RE.match(line):
            in_education = True
            continue
        if not in_education:
            continue
        if _EDUCATION_STOP_RE.match(line):
            break
        if len(line) > _ENTRY_MIN_LINE:
            entries.append(EducationEntry(institution=line))

    return entries or None


def _extract_certifications(lines: list[str]) -> list[str] | None:
    certifications: list[str] = []
    in_certifications = False

    for line in lines:
        if _CERTIFICATIONS_HEADER_RE.match(line):
            in_certifications = True
            continue
        if not in_certifications:
            continue
        if is_section_heading(line):
            break
        entry = strip_bullet_prefix(line)
        if len(entry) > 3 and entry not in certifications:
            certifications.append(entry)

    return certifications or None


def extract_sections(text: str) -> dict[str, Any]:
    """Split resume text into summary, skills, experience, education and certifications.

    Absent sections are simply left out of the result.
    """
    lines = non_blank_lines(text)
    sections: dict[str, Any] = {}

    summary = _extract_summary(lines)
    if summary:
        sections["summary"] = summary

    skills = _extract_skills(lines)
    if skills:
        sections["skills"] = skills

    experience = _extract_experience(lines)
    if experience:
        sections["experience"] = experience

    education = _extract_education(lines)
    if education:
        sections["education"] = education

    certifications = _extract_certifications(lines)
    if certifications:
        sections["certifications"] = certifications

    return sections


def create_resume_data(file_name: str, content: str) -> ResumeData:
    personal_info = extract_personal_info(content)
    sections = extract_sections(content)
    return ResumeData(
        id=generate_resume_id(file_name, content),
        file_name=file_name,
        content=content,
        sections=ResumeSections(personal_info=personal_info, **sections),
        uploaded_at=UPLOADED_AT,
    )
