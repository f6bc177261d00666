import logging
from urllib.parse import quote

from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status
from fastapi.responses import Response

from resume_optimizer.core.config import settings
from resume_optimizer.core.rate_limit import rate_limit
from resume_optimizer.schemas.resume_api import (
    AnalysisPayload,
    AnalyzeRequest,
    AnalyzeResponse,
    ExportRequest,
    UploadResponse,
)
from resume_optimizer.services.resume_service import (
    ExportFormat,
    InputValidationError,
    analyze_job,
    export_resume,
    parse_resume,
)

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_FAILED = "Failed to process resume. Please try again."
ANALYZE_FAILED = "Failed to analyze job description. Please try again."
EXPORT_FAILED = {
    "pdf": "Failed to generate PDF. Please try again.",
    "word": "Failed to generate Word document. Please try again.",
}


def _server_error(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _content_disposition(filename: str) -> str:
    fallback = filename.encode("ascii", "ignore").decode("ascii").replace('"', "") or "resume_optimized"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


def _export(payload: ExportRequest, fmt: ExportFormat) -> Response:
    try:
        document = export_resume(payload.resume_data, fmt)
    except InputValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("resume_export_failed format=%s", fmt)
        raise _server_error(EXPORT_FAILED[fmt]) from exc

    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": _content_disposition(document.filename)},
    )


@router.post("/resume/upload", response_model=UploadResponse)
@rate_limit()
async def upload_resume(request: Request, resume: UploadFile = File(...)):
    _ = request
    file_name = resume.filename or ""
    # One byte past the limit is enough to reject oversized uploads.
    content = await resume.read(settings.max_upload_bytes + 1)
    try:
        data = parse_resume(file_name, content)
    except InputValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("resume_upload_failed file=%s", file_name)
        raise _server_error(UPLOAD_FAILED) from exc
    return UploadResponse(data=data)


@router.post("/resume/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_resume_for_job(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        result = analyze_job(payload.resume_data, payload.job_title, payload.company, payload.job_description)
    except InputValidationError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("resume_analysis_failed")
        raise _server_error(ANALYZE_FAILED) from exc

    return AnalyzeResponse(
        data=AnalysisPayload(
            job_analysis=result.job_analysis,
            ats_analysis=result.ats_analysis,
            optimized_resume=result.optimized_resume,
        )
    )


@router.post("/resume/download-pdf")
@rate_limit()
async def download_pdf(request: Request, payload: ExportRequest):
    _ = request
    return _export(payload, "pdf")


@router.post("/resume/download-word")
@rate_limit()
async def download_word(request: Request, payload: ExportRequest):
    _ = request
    return _export(payload, "word")
