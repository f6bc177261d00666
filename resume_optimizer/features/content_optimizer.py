"""Keyword-driven rewriting of resume text.

The optimizer never edits the caller's record: it works on a deep copy, runs
five text passes over the raw content and then grows the structured skills
list. If any text pass raises, every text edit is dropped and the original
content is kept verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from resume_optimizer.core.config.scoring import get_scoring_value
from resume_optimizer.normalize.line_classifier import (
    NAME_SEARCH_LINES,
    ClassifiedLine,
    LineRole,
    classify_document,
    classify_line,
)
from resume_optimizer.normalize.utils import dedupe, split_lines
from resume_optimizer.schemas.normalized import JobDescription, ResumeData

logger = logging.getLogger(__name__)

FALLBACK_LOG_ENTRY = "Error occurred during optimization - used original content"

_SUMMARY_HEADER_RE = re.compile(r"^[ \t]*PROFESSIONAL SUMMARY\b[ \t]*:?", re.IGNORECASE | re.MULTILINE)
_EXPERIENCE_HEADER_RE = re.compile(
    r"^[ \t]*(?:PROFESSIONAL EXPERIENCE|WORK EXPERIENCE|EXPERIENCE)[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
_TECHNICAL_HEADER_RE = re.compile(r"^[ \t]*TECHNICAL SKILLS\b[ \t]*:?", re.IGNORECASE | re.MULTILINE)
_FUNCTIONAL_HEADER_RE = re.compile(r"^[ \t]*FUNCTIONAL SKILLS\b[ \t]*:?", re.IGNORECASE | re.MULTILINE)

_RELEVANT_DOMAIN_RE = re.compile(
    r"(design|creative|visual|brand|marketing|digital|project|management|team|leadership|"
    r"innovative|strategic|analytical)",
    re.IGNORECASE,
)
_EXPERIENCE_SKILL_RE = re.compile(r"(adobe|design|project|management|marketing|digital|creative)", re.IGNORECASE)
_TECHNICAL_SKILL_RE = re.compile(
    r"(adobe|photoshop|illustrator|indesign|html|css|javascript|wordpress|design|digital|web|responsive)",
    re.IGNORECASE,
)
_FUNCTIONAL_SKILL_RE = re.compile(
    r"(project|management|communication|leadership|teamwork|collaboration|problem|analytical|"
    r"strategic|planning)",
    re.IGNORECASE,
)
_PRACTICAL_SKILL_RE = re.compile(
    r"(adobe|photoshop|illustrator|indesign|powerpoint|keynote|presentation|brand|visual|creative|"
    r"design|layout|typography|infographic|marketing|digital|social|media|content|web|responsive|"
    r"html|css|javascript|bootstrap|wordpress|github|git|project|management|collaboration|"
    r"communication|teamwork|leadership|problem|solving|analytical|organizational|time|attention|"
    r"detail|microsoft|office|word|excel|outlook|canva|figma|sketch|ui|ux|graphic|print|publishing|"
    r"advertising|campaign|strategy|planning|research|analysis|reporting|documentation|training|"
    r"client|customer|stakeholder)",
    re.IGNORECASE,
)
_VALID_SKILL_RE = re.compile(r"^[a-zA-Z\s\-&.0-9+#()/]+$")
_BULLET_LINE_RE = re.compile(r"^[ \t]*[•\-*][ \t][^\r\n]*", re.MULTILINE)

_OUTCOME_MARKERS = ("resulting in", "leading to", "contributing to")
_OUTCOME_CLAUSES = (
    "resulting in improved efficiency",
    "leading to increased client satisfaction",
    "contributing to brand recognition",
    "enhancing user experience",
    "driving project success",
)
_HEADER_REPLACEMENTS = (
    ("WORK EXPERIENCE", "PROFESSIONAL EXPERIENCE"),
    ("EMPLOYMENT HISTORY", "PROFESSIONAL EXPERIENCE"),
    ("CAREER HISTORY", "PROFESSIONAL EXPERIENCE"),
    ("SKILLS & COMPETENCIES", "CORE COMPETENCIES"),
    ("ABILITIES", "SKILLS"),
    ("QUALIFICATIONS", "SKILLS"),
)
FALLBACK_SKILLS = (
    "Adobe Creative Suite",
    "Microsoft PowerPoint",
    "Brand Guidelines",
    "Visual Communication",
    "Project Coordination",
)


@dataclass(frozen=True)
class SectionBlock:
    start: int
    body_start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end <= self.body_start


def _limit(name: str, default: int) -> int:
    return int(get_scoring_value(f"optimizer.{name}", default))


def _line_offsets(content: str) -> list[int]:
    offsets = [0]
    for line in split_lines(content)[:-1]:
        offsets.append(offsets[-1] + len(line) + 1)
    return offsets


def _body_role(line: ClassifiedLine) -> LineRole:
    # Lines inside a section are never the candidate's name.
    if line.role is LineRole.NAME:
        return classify_line(line.text, NAME_SEARCH_LINES, line.indentation)
    return line.role


def find_section_block(content: str, header_re: re.Pattern[str]) -> SectionBlock | None:
    """Locate a section from its header to the next classified section header or end of text.

    ``end`` excludes trailing whitespace, so text inserted at ``end`` lands
    directly after the last character of the section.
    """
    match = header_re.search(content)
    if match is None:
        return None

    end = len(content)
    header_index = content.count("\n", 0, match.start())
    offsets = _line_offsets(content)
    for line in classify_document(content):
        if line.index > header_index and _body_role(line) is LineRole.SECTION_HEADER:
            end = offsets[line.index]
            break

    body = content[match.end():end]
    return SectionBlock(start=match.start(), body_start=match.end(), end=match.end() + len(body.rstrip()))


def enhance_summary(content: str, job: JobDescription, changes: list[str]) -> str:
    block = find_section_block(content, _SUMMARY_HEADER_RE)
    if block is None or block.is_empty:
        return content

    summary_text = content[block.body_start:block.end].strip().lower()
    keywords = [
        keyword
        for keyword in job.keywords
        if 3 < len(keyword) < 20
        and keyword.lower() not in summary_text
        and _RELEVANT_DOMAIN_RE.search(keyword)
    ][: _limit("summary_keyword_limit", 3)]
    if not keywords:
        return content

    sentence = f" Experienced in {', '.join(keywords)} with a focus on delivering exceptional results."
    changes.append(
        f"Enhanced professional summary with {len(keywords)} relevant keywords: {', '.join(keywords)}"
    )
    return content[:block.end] + sentence + content[block.end:]


def enhance_experience(content: str, job: JobDescription, changes: list[str]) -> str:
    block = find_section_block(content, _EXPERIENCE_HEADER_RE)
    if block is None:
        return content

    body = content[block.body_start:block.end]
    bullet_limit = _limit("enhanced_bullet_limit", 2)
    targets: list[tuple[int, str]] = []
    for position, bullet in enumerate(_BULLET_LINE_RE.finditer(body)):
        if len(targets) >= bullet_limit:
            break
        if any(marker in bullet.group(0) for marker in _OUTCOME_MARKERS):
            continue
        targets.append((bullet.end(), _OUTCOME_CLAUSES[position % len(_OUTCOME_CLAUSES)]))

    for insert_at, clause in reversed(targets):
        body = f"{body[:insert_at]}, {clause}{body[insert_at:]}"
    if targets:
        changes.append(f"Enhanced {len(targets)} experience bullet points with impact statements")

    skills = [
        skill
        for skill in dedupe([*job.required_skills, *job.preferred_skills])
        if len(skill) < 20 and _EXPERIENCE_SKILL_RE.search(skill)
    ][: _limit("experience_skill_limit", 2)]
    if skills:
        cited = " and ".join(skills)
        body += f"\n• Utilized {cited} to deliver comprehensive solutions aligned with business objectives"
        changes.append(f"Added experience bullet highlighting {cited} skills")

    return content[:block.body_start] + body + content[block.end:]


def _extend_skills_block(
    content: str,
    header_re: re.Pattern[str],
    skill_re: re.Pattern[str],
    job_skills: list[str],
    label: str,
    changes: list[str],
) -> str:
    block = find_section_block(content, header_re)
    if block is None:
        return content

    existing = content[block.start:block.end].lower()
    additions = [
        skill for skill in job_skills if skill.lower() not in existing and skill_re.search(skill)
    ][: _limit("skills_section_limit", 3)]
    if not additions:
        return content

    changes.append(f"Added {len(additions)} {label} skills: {', '.join(additions)}")
    return content[:block.end] + " | " + " | ".join(additions) + content[block.end:]


def enhance_skills_sections(content: str, job_skills: list[str], changes: list[str]) -> str:
    content = _extend_skills_block(content, _TECHNICAL_HEADER_RE, _TECHNICAL_SKILL_RE, job_skills, "technical", changes)
    return _extend_skills_block(content, _FUNCTIONAL_HEADER_RE, _FUNCTIONAL_SKILL_RE, job_skills, "functional", changes)


def optimize_section_headers(content: str, changes: list[str]) -> str:
    renamed = 0
    for old, new in _HEADER_REPLACEMENTS:
        content, count = re.subn(rf"\b{re.escape(old)}\b", new, content)
        if count:
            renamed += 1
    if renamed:
        changes.append(f"Optimized {renamed} section headers for ATS compatibility")
    return content


def add_relevant_keywords(content: str, keywords: list[str], changes: list[str]) -> str:
    lowered = content.lower()
    missing = [
        keyword
        for keyword in keywords
        if 3 < len(keyword) < 25 and keyword.lower() not in lowered and _RELEVANT_DOMAIN_RE.search(keyword)
    ][: _limit("trailing_keyword_limit", 5)]
    if not missing:
        return content

    separator = "\n" if content.endswith("\n") else "\n\n"
    changes.append(
        f"Added Core Competencies section with {len(missing)} relevant keywords: {', '.join(missing)}"
    )
    return f"{content}{separator}CORE COMPETENCIES\n{' | '.join(missing)}"


def add_minimal_skills(original_skills: list[str], job_skills: list[str]) -> list[str]:
    enhanced = list(original_skills)
    existing = {skill.lower() for skill in original_skills}

    candidates = [
        skill
        for skill in job_skills
        if skill.lower() not in existing
        and len(skill) < 30
        and len(skill.split(" ")) <= 4
        and _VALID_SKILL_RE.match(skill)
        and _PRACTICAL_SKILL_RE.search(skill)
    ][: _limit("structured_skill_limit", 5)]

    if not candidates:
        candidates = [skill for skill in FALLBACK_SKILLS if skill.lower() not in existing][
            : _limit("fallback_skill_limit", 2)
        ]
        logger.debug("resume_optimizer_fallback_skills added=%s", candidates)

    enhanced.extend(candidates)
    return enhanced


def optimize_resume_content(resume: ResumeData, job: JobDescription) -> ResumeData:
    optimized = resume.model_copy(deep=True)
    job_skills = dedupe([*job.required_skills, *job.preferred_skills])
    keyword_pool = list(job.keywords[: _limit("trailing_keyword_pool", 10)])

    pass_changes: list[str] = []
    content = resume.content
    try:
        content = enhance_summary(content, job, pass_changes)
        content = enhance_experience(content, job, pass_changes)
        content = enhance_skills_sections(content, job_skills, pass_changes)
        content = optimize_section_headers(content, pass_changes)
        content = add_relevant_keywords(content, keyword_pool, pass_changes)
    except Exception:
        logger.warning("resume_optimizer_text_passes_failed resume_id=%s", resume.id, exc_info=True)
        content = resume.content
        pass_changes = [FALLBACK_LOG_ENTRY]

    optimized.content = content
    optimized.changes_log.extend(pass_changes)

    if resume.sections.skills is not None or job_skills:
        original_skills = list(resume.sections.skills or [])
        enhanced_skills = add_minimal_skills(original_skills, job_skills)
        optimized.sections.skills = enhanced_skills
        added = len(enhanced_skills) - len(original_skills)
        if added > 0:
            optimized.changes_log.append(f"Added {added} new relevant skills")

    logger.info(
        "resume_optimized resume_id=%s changes=%s original_chars=%s optimized_chars=%s",
        resume.id,
        len(optimized.changes_log),
        len(resume.content),
        len(optimized.content),
    )
    return optimized
