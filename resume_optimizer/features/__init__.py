from .ats_scorer import analyze_resume
from .content_optimizer import add_minimal_skills, optimize_resume_content

__all__ = ["add_minimal_skills", "analyze_resume", "optimize_resume_content"]
