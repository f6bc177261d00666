from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_BULLET_PREFIX_RE = re.compile(r"^\s*[•·\-*+]\s+")
# Mixed-case header lines, optionally followed by a colon.
_NAMED_SECTION_RE = re.compile(
    r"^(professional\s+summary|summary|objective|profile|core\s+competencies|"
    r"professional\s+experience|work\s+experience|experience|employment\s+history|"
    r"education|technical\s+skills|functional\s+skills|skills|awards|certifications|"
    r"internships|projects|achievements|qualifications|training|languages|references|volunteer)"
    r"\s*:?\s*$",
    re.IGNORECASE,
)
_UPPERCASE_HEADER_RE = re.compile(r"^[A-Z][A-Z\s\-&/]+:?$")
SECTION_WORDS_RE = re.compile(
    r"(PROFESSIONAL|SUMMARY|EXPERIENCE|EDUCATION|SKILLS|COMPETENCIES|AWARDS|TECHNICAL|FUNCTIONAL|"
    r"CERTIFICATIONS|INTERNSHIPS|EMPLOYMENT|WORK|PROJECTS|ACHIEVEMENTS|QUALIFICATIONS|TRAINING|"
    r"LANGUAGES|REFERENCES|VOLUNTEER)"
)
JOB_TITLE_WORDS = ("DESIGNER", "COORDINATOR", "MANAGER", "DEVELOPER", "SPECIALIST", "ANALYST")


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> list[str]:
    """Split on LF only, keeping blank lines so positions match the raw document."""
    return text.split("\n")


def non_blank_lines(text: str) -> list[str]:
    return [line.strip() for line in split_lines(normalize_newlines(text)) if line.strip()]


def leading_whitespace(line: str) -> int:
    return len(line) - len(line.lstrip())


def normalize_line(line: str) -> str:
    return _WHITESPACE_RE.sub(" ", line).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line).strip()


def dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        unique.append(item)
    return unique


def is_section_heading(line: str) -> bool:
    """True for lines that open a resume section, e.g. 'EXPERIENCE' or 'Skills:'."""
    stripped = normalize_line(line)
    if not stripped or len(stripped) >= 60:
        return False
    if _NAMED_SECTION_RE.match(stripped):
        return True
    if not _UPPERCASE_HEADER_RE.match(stripped) or any(word in stripped for word in JOB_TITLE_WORDS):
        return False
    return bool(SECTION_WORDS_RE.search(stripped))
