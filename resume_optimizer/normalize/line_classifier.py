"""Line role classification shared by the content optimizer and document export.

Each predicate below overlaps with others (an all-caps "PROJECT MANAGER" line is
both a job title heading and a section header), so ``classify_line`` checks them
in a fixed priority order and the first match wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .utils import JOB_TITLE_WORDS, SECTION_WORDS_RE, leading_whitespace, split_lines


class LineRole(str, Enum):
    NAME = "name"
    CONTACT_INFO = "contact_info"
    JOB_TITLE_HEADING = "job_title_heading"
    SECTION_HEADER = "section_header"
    COMPANY_LINE = "company_line"
    POSITION_LINE = "position_line"
    BULLET_POINT = "bullet_point"
    STANDALONE_DATE = "standalone_date"
    SKILLS_INVENTORY = "skills_inventory"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class ClassifiedLine:
    index: int
    text: str
    indentation: int
    role: LineRole


NAME_SEARCH_LINES = 5

_NAME_RE = re.compile(r"^[A-Z][a-zA-Z]+ [A-Z][a-zA-Z]+(\s[A-Z][a-zA-Z]+)?$")
_CONTACT_RE = re.compile(
    r"(@|\.com|\+\d|^\d{3}[\-\s]?\d{3}[\-\s]?\d{4}|Road|Street|Avenue|Drive|Lane|Boulevard|ON,|CANADA|linkedin\.com)",
    re.IGNORECASE,
)
_JOB_TITLE_SHAPE_RE = re.compile(r"^[A-Z][A-Z\s&\-]+$")
_SECTION_SHAPE_RE = re.compile(r"^[A-Z][A-Z\s\-]+$")
_COMPANY_SEPARATOR_RE = re.compile(r"^[A-Z][A-Z\s&\-,.]+(\s–\s|\s-\s|\sÂ\s|\s\|\s)")
_COMPANY_SUFFIX_RE = re.compile(
    r"LTD|INC|CORP|LLC|COLLEGE|UNIVERSITY|TECHNOLOGY|MANUFACTURING|SOLUTIONS|SERVICES|GROUP|COMPANY",
    re.IGNORECASE,
)
_PAREN_YEAR_RE = re.compile(r"\(.*\d{4}.*\)")
_ROLE_WORD_RE = re.compile(
    r"coordinator|designer|manager|internship|developer|analyst|specialist|assistant|lead|senior|junior",
    re.IGNORECASE,
)
_YEAR_RANGE_RE = re.compile(r"\d{4}\s*-\s*\d{4}")
_BULLET_GLYPH_RE = re.compile(r"^[•·\-*+]\s")
_ACTION_VERB_RE = re.compile(
    r"^(Designed|Created|Assisted|Led|Managed|Developed|Collaborated|Conducted|Implemented|"
    r"Coordinated|Executed|Maintained|Optimized|Analyzed|Built|Established|Delivered)"
)
_STANDALONE_DATE_RE = re.compile(r"^\d{4}\s*-\s*\d{4}$|^\d{1,2}/\d{4}\s*-\s*\d{1,2}/\d{4}$")

SKILLS_INVENTORY_TERMS = (
    "HTML", "CSS", "JavaScript", "PHP", "MySQL", "Adobe", "Photoshop", "Illustrator", "InDesign",
    "WordPress", "jQuery", "Bootstrap", "Git", "Python", "Java", "C++", "React", "Vue", "Angular",
    "Node", "Express", "MongoDB", "SQL", "AWS", "Azure", "Google", "Microsoft", "Office", "Excel",
    "PowerPoint", "Word", "Outlook", "Slack", "Trello", "Asana", "Jira", "Figma", "Sketch", "XD",
    "Canva", "GIMP", "Final Cut", "Premiere", "After Effects", "Maya", "Blender", "Unity", "Unreal",
    "Android", "iOS", "Swift", "Kotlin", "Flutter", "React Native", "Docker", "Kubernetes",
    "Jenkins", "Travis", "GitHub", "GitLab", "Bitbucket", "Heroku", "Netlify", "Vercel",
    "DigitalOcean", "Linode", "Vultr", "Cloudflare", "Stripe", "PayPal", "Mailchimp", "SendGrid",
    "Twilio", "Zapier", "IFTTT", "Google Analytics", "Facebook Ads", "Google Ads", "SEO", "SEM",
    "SMM", "Content Marketing", "Email Marketing", "Affiliate Marketing", "Influencer Marketing",
    "Brand Management", "Social Media", "Public Relations", "Customer Service", "Sales",
    "Business Development", "Project Management", "Agile", "Scrum", "Kanban", "Lean",
    "Six Sigma", "PMP", "PRINCE2", "ITIL", "ISO", "GDPR", "HIPAA", "SOX", "PCI", "NIST", "OWASP",
    "CISSP", "CISM", "CISA", "CEH", "OSCP", "SANS", "CompTIA", "Cisco", "Amazon", "Oracle",
    "Salesforce", "HubSpot", "Marketo", "Pardot", "Eloqua", "MailChimp", "Constant Contact",
    "AWeber", "GetResponse", "ConvertKit", "ActiveCampaign", "Drip", "Infusionsoft", "Ontraport",
    "ClickFunnels", "Leadpages", "Unbounce", "Instapage", "Optimizely", "VWO", "Hotjar",
    "Crazy Egg", "Google Tag Manager", "Google Search Console", "Bing Webmaster Tools",
    "Yandex Metrica", "Adobe Analytics", "Mixpanel", "Amplitude", "Segment", "Intercom", "Drift",
    "Zendesk", "Freshdesk", "Help Scout", "Kayako", "LiveChat", "Olark", "Tawk", "Crisp",
    "Pure Chat", "Tidio", "Chatra", "Smartsupp", "Userlike", "Comm100", "Bold360", "SnapEngage",
    "Provide Support", "LiveAgent", "Help Crunch", "Groove", "Front", "Gorgias",
)
_SKILLS_INVENTORY_RE = re.compile(
    "^(?:" + "|".join(re.escape(term) for term in SKILLS_INVENTORY_TERMS) + ")"
)


def is_name(line: str, position: int) -> bool:
    if position >= NAME_SEARCH_LINES:
        return False
    if "@" in line or "+" in line or "." in line:
        return False
    return bool(_NAME_RE.match(line))


def is_contact_info(line: str) -> bool:
    return bool(_CONTACT_RE.search(line))


def is_job_title_heading(line: str) -> bool:
    if len(line) >= 80 or not _JOB_TITLE_SHAPE_RE.match(line):
        return False
    return any(word in line for word in JOB_TITLE_WORDS)


def is_section_header(line: str) -> bool:
    if len(line) >= 60 or not _SECTION_SHAPE_RE.match(line):
        return False
    return bool(SECTION_WORDS_RE.search(line))


def is_company_line(line: str) -> bool:
    if _COMPANY_SEPARATOR_RE.match(line) or _COMPANY_SUFFIX_RE.search(line):
        return True
    return " – " in line and line[:1].isascii() and line[:1].isupper()


def is_position_line(line: str, indentation: int) -> bool:
    has_paren_year = bool(_PAREN_YEAR_RE.search(line))
    if indentation <= 0 and not has_paren_year:
        return False
    return bool(_ROLE_WORD_RE.search(line) or has_paren_year or _YEAR_RANGE_RE.search(line))


def is_bullet_point(line: str, indentation: int) -> bool:
    if _BULLET_GLYPH_RE.match(line):
        return True
    return indentation > 0 and bool(_ACTION_VERB_RE.match(line))


def is_standalone_date(line: str) -> bool:
    return bool(_STANDALONE_DATE_RE.match(line))


def is_skills_inventory(line: str) -> bool:
    return bool(_SKILLS_INVENTORY_RE.match(line))


def classify_line(line: str, position: int, indentation: int | None = None) -> LineRole:
    """Classify one raw document line.

    ``position`` is the zero-based index of the line in the whole document
    (blank lines included). ``indentation`` defaults to the line's own
    leading-whitespace count.
    """
    if indentation is None:
        indentation = leading_whitespace(line)
    trimmed = line.strip()
    if not trimmed:
        return LineRole.PLAIN_TEXT

    if is_name(trimmed, position):
        return LineRole.NAME
    if is_contact_info(trimmed):
        return LineRole.CONTACT_INFO
    if is_job_title_heading(trimmed):
        return LineRole.JOB_TITLE_HEADING
    if is_section_header(trimmed):
        return LineRole.SECTION_HEADER
    if is_company_line(trimmed):
        return LineRole.COMPANY_LINE
    if is_position_line(trimmed, indentation):
        return LineRole.POSITION_LINE
    if is_bullet_point(trimmed, indentation):
        return LineRole.BULLET_POINT
    if is_standalone_date(trimmed):
        return LineRole.STANDALONE_DATE
    if is_skills_inventory(trimmed):
        return LineRole.SKILLS_INVENTORY
    return LineRole.PLAIN_TEXT


def classify_document(content: str) -> list[ClassifiedLine]:
    classified: list[ClassifiedLine] = []
    for index, line in enumerate(split_lines(content)):
        trimmed = line.strip()
        if not trimmed:
            continue
        indentation = leading_whitespace(line)
        classified.append(
            ClassifiedLine(
                index=index,
                text=trimmed,
                indentation=indentation,
                role=classify_line(line, index, indentation),
            )
        )
    return classified
