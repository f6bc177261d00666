from .jd import JobDescription
from .match import ATSAnalysis, Importance, Improvement, KeywordMatch
from .resume import (
    EducationEntry,
    ExperienceEntry,
    PersonalInfo,
    Project,
    ResumeData,
    ResumeSections,
)

__all__ = [
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "Project",
    "ResumeSections",
    "ResumeData",
    "JobDescription",
    "Importance",
    "KeywordMatch",
    "Improvement",
    "ATSAnalysis",
]
