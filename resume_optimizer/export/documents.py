"""Render a resume to PDF or Word, styling each raw line by its classified role."""

from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass
from xml.sax.saxutils import escape

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from resume_optimizer.normalize.line_classifier import LineRole, classify_line
from resume_optimizer.normalize.utils import leading_whitespace, normalize_newlines, split_lines
from resume_optimizer.schemas.normalized import ResumeData

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_BLANK_LINE_SPACING = 6


@dataclass(frozen=True)
class LineStyle:
    size: int
    bold: bool = False
    indent: int = 0
    space_before: int = 0
    space_after: int = 2


_BODY_STYLE = LineStyle(size=10)
ROLE_STYLES: dict[LineRole, LineStyle] = {
    LineRole.NAME: LineStyle(size=18, bold=True, space_after=4),
    LineRole.CONTACT_INFO: LineStyle(size=10),
    LineRole.JOB_TITLE_HEADING: LineStyle(size=14, bold=True, space_after=4),
    LineRole.SECTION_HEADER: LineStyle(size=13, bold=True, space_before=8, space_after=4),
    LineRole.COMPANY_LINE: LineStyle(size=11, bold=True, space_before=4),
    LineRole.POSITION_LINE: LineStyle(size=10, bold=True),
    LineRole.STANDALONE_DATE: LineStyle(size=9),
    LineRole.BULLET_POINT: LineStyle(size=10, indent=18, space_after=1),
    LineRole.SKILLS_INVENTORY: _BODY_STYLE,
    LineRole.PLAIN_TEXT: _BODY_STYLE,
}


@dataclass(frozen=True)
class StyledLine:
    text: str
    role: LineRole
    style: LineStyle


def _clean(text: str) -> str:
    return _CONTROL_CHARS_RE.sub("", text).strip()


def _styled(text: str, role: LineRole) -> StyledLine:
    return StyledLine(text=_clean(text), role=role, style=ROLE_STYLES[role])


def _layout_from_sections(resume: ResumeData) -> list[StyledLine | None]:
    sections = resume.sections
    info = sections.personal_info
    layout: list[StyledLine | None] = []

    if info.name:
        layout.append(_styled(info.name, LineRole.NAME))
    contact = " | ".join(part for part in (info.email, info.phone, info.location, info.linkedin) if part)
    if contact:
        layout.append(_styled(contact, LineRole.CONTACT_INFO))
    if sections.summary:
        layout.extend([None, _styled("PROFESSIONAL SUMMARY", LineRole.SECTION_HEADER)])
        layout.append(_styled(sections.summary, LineRole.PLAIN_TEXT))
    if sections.skills:
        layout.extend([None, _styled("SKILLS", LineRole.SECTION_HEADER)])
        layout.append(_styled(", ".join(sections.skills), LineRole.PLAIN_TEXT))
    return layout


def layout_resume(resume: ResumeData) -> list[StyledLine | None]:
    """Return one styled entry per content line, with ``None`` for blank lines.

    Falls back to the structured sections when the raw content is blank.
    """
    content = normalize_newlines(resume.content)
    if not content.strip():
        return _layout_from_sections(resume)

    layout: list[StyledLine | None] = []
    for index, line in enumerate(split_lines(content)):
        if not line.strip():
            layout.append(None)
            continue
        role = classify_line(line, index, leading_whitespace(line))
        layout.append(_styled(line, role))
    return layout


def _pdf_style(style: LineStyle) -> ParagraphStyle:
    return ParagraphStyle(
        name=f"resume-{style.size}-{int(style.bold)}-{style.indent}",
        fontName="Helvetica-Bold" if style.bold else "Helvetica",
        fontSize=style.size,
        leading=style.size * 1.25,
        leftIndent=style.indent,
        spaceBefore=style.space_before,
        spaceAfter=style.space_after,
        alignment=TA_LEFT,
    )


def render_pdf(resume: ResumeData) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
        title=export_filename(resume, "pdf"),
    )

    styles: dict[LineStyle, ParagraphStyle] = {}
    story = []
    for item in layout_resume(resume):
        if item is None:
            story.append(Spacer(1, _BLANK_LINE_SPACING))
            continue
        if item.style not in styles:
            styles[item.style] = _pdf_style(item.style)
        story.append(Paragraph(escape(item.text), styles[item.style]))
    if not story:
        story.append(Spacer(1, _BLANK_LINE_SPACING))

    doc.build(story)
    payload = buffer.getvalue()
    logger.info("resume_export_rendered format=pdf resume_id=%s bytes=%s", resume.id, len(payload))
    return payload


def render_docx(resume: ResumeData) -> bytes:
    document = Document()
    normal = document.styles["Normal"]
    normal.font.name = "Calibri"
    normal.font.size = Pt(10)
    normal.paragraph_format.space_before = Pt(0)
    normal.paragraph_format.space_after = Pt(0)

    for item in layout_resume(resume):
        paragraph = document.add_paragraph()
        if item is None:
            paragraph.paragraph_format.space_after = Pt(_BLANK_LINE_SPACING)
            continue
        run = paragraph.add_run(item.text)
        run.bold = item.style.bold
        run.font.size = Pt(item.style.size)
        paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
        paragraph.paragraph_format.left_indent = Pt(item.style.indent)
        paragraph.paragraph_format.space_before = Pt(item.style.space_before)
        paragraph.paragraph_format.space_after = Pt(item.style.space_after)

    buffer = io.BytesIO()
    document.save(buffer)
    payload = buffer.getvalue()
    logger.info("resume_export_rendered format=docx resume_id=%s bytes=%s", resume.id, len(payload))
    return payload


def export_filename(resume: ResumeData, extension: str) -> str:
    name = resume.sections.personal_info.name.strip() or "resume"
    return f"{name}_optimized.{extension}"
