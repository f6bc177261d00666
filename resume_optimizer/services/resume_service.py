from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from resume_optimizer.core.config import settings
from resume_optimizer.export.documents import (
    DOCX_MEDIA_TYPE,
    PDF_MEDIA_TYPE,
    export_filename,
    render_docx,
    render_pdf,
)
from resume_optimizer.features.ats_scorer import analyze_resume
from resume_optimizer.features.content_optimizer import optimize_resume_content
from resume_optimizer.normalize.normalize_jd import analyze_job_description
from resume_optimizer.normalize.normalize_resume import create_resume_data
from resume_optimizer.parsing.models import SUPPORTED_SOURCE_TYPES
from resume_optimizer.parsing.parse import (
    DocumentReadError,
    UnsupportedFormatError,
    file_extension,
    parse_document,
)
from resume_optimizer.schemas.normalized import ATSAnalysis, JobDescription, ResumeData

logger = logging.getLogger(__name__)

ExportFormat = Literal["pdf", "word"]


class ResumeServiceError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class InputValidationError(ResumeServiceError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class DocumentProcessingError(ResumeServiceError):
    def __init__(self, message: str):
        super().__init__(message, status_code=500)


@dataclass(frozen=True)
class AnalysisResult:
    job_analysis: JobDescription
    ats_analysis: ATSAnalysis
    optimized_resume: ResumeData


@dataclass(frozen=True)
class ExportedDocument:
    content: bytes
    media_type: str
    filename: str


def parse_resume(file_name: str, content: bytes) -> ResumeData:
    """Validate an upload, extract its text and structure it into a resume record."""
    if not file_name:
        raise InputValidationError("No file uploaded")

    extension = file_extension(file_name)
    if extension not in SUPPORTED_SOURCE_TYPES:
        raise InputValidationError(str(UnsupportedFormatError(extension)))

    max_bytes = settings.max_upload_bytes
    if len(content) > max_bytes:
        raise InputValidationError(
            f"File size too large. Please upload files smaller than {max_bytes // (1024 * 1024)}MB."
        )

    try:
        parsed = parse_document(file_name, content)
    except DocumentReadError as exc:
        raise DocumentProcessingError(str(exc)) from exc

    resume = create_resume_data(file_name, parsed.text)
    logger.info(
        "resume_parsed resume_id=%s source_type=%s chars=%s sections=%s",
        resume.id,
        parsed.source_type,
        len(resume.content),
        sorted(resume.sections.model_dump(exclude_none=True, exclude={"personal_info"})),
    )
    return resume


def analyze_job(
    resume: ResumeData | None,
    job_title: str | None,
    company: str | None,
    job_description: str | None,
) -> AnalysisResult:
    if resume is None or not job_description:
        raise InputValidationError("Resume data and job description are required")

    min_chars = settings.min_job_description_chars
    if len(job_description) < min_chars:
        raise InputValidationError(f"Job description must be at least {min_chars} characters long")

    job = analyze_job_description(job_title or settings.default_job_title, company or "", job_description)
    analysis = analyze_resume(resume, job)
    optimized = optimize_resume_content(resume, job)

    logger.info(
        "resume_analysis_completed resume_id=%s score=%s matches=%s missing=%s changes=%s",
        resume.id,
        analysis.score,
        len(analysis.matches),
        len(analysis.missing_keywords),
        len(optimized.changes_log),
    )
    return AnalysisResult(job_analysis=job, ats_analysis=analysis, optimized_resume=optimized)


def export_resume(resume: ResumeData | None, fmt: ExportFormat) -> ExportedDocument:
    if resume is None:
        raise InputValidationError("Resume data is required")
    if fmt == "pdf":
        return ExportedDocument(
            content=render_pdf(resume),
            media_type=PDF_MEDIA_TYPE,
            filename=export_filename(resume, "pdf"),
        )
    if fmt == "word":
        return ExportedDocument(
            content=render_docx(resume),
            media_type=DOCX_MEDIA_TYPE,
            filename=export_filename(resume, "docx"),
        )
    raise InputValidationError(f"Unsupported export format '{fmt}'. Use 'pdf' or 'word'.")
