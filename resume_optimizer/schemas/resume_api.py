from __future__ import annotations

from pydantic import BaseModel, Field

from resume_optimizer.schemas.normalized import ATSAnalysis, JobDescription, ResumeData


class UploadResponse(BaseModel):
    success: bool = True
    data: ResumeData


class AnalyzeRequest(BaseModel):
    resume_data: ResumeData | None = None
    job_title: str = Field(default="", max_length=300)
    company: str = Field(default="", max_length=300)
    job_description: str | None = Field(default=None, max_length=50000)


class AnalysisPayload(BaseModel):
    job_analysis: JobDescription
    ats_analysis: ATSAnalysis
    optimized_resume: ResumeData


class AnalyzeResponse(BaseModel):
    success: bool = True
    data: AnalysisPayload


class ExportRequest(BaseModel):
    resume_data: ResumeData | None = None
