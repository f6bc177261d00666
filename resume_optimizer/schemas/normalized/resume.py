from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class PersonalInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str | None = None
    portfolio: str | None = None


class ExperienceEntry(BaseModel):
    company: str
    position: str = ""
    start_date: str = ""
    end_date: str = ""
    description: list[str] = Field(default_factory=list)
    location: str | None = None


class EducationEntry(BaseModel):
    institution: str
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str | None = None
    location: str | None = None


class Project(BaseModel):
    name: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    link: str | None = None


class ResumeSections(BaseModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    summary: str | None = None
    experience: list[ExperienceEntry] | None = None
    education: list[EducationEntry] | None = None
    skills: list[str] | None = None
    certifications: list[str] | None = None
    projects: list[Project] | None = None


class ResumeData(BaseModel):
    id: str
    file_name: str
    content: str
    sections: ResumeSections = Field(default_factory=ResumeSections)
    uploaded_at: datetime
    changes_log: list[str] = Field(default_factory=list)
