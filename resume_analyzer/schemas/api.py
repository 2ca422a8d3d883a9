from __future__ import annotations

from pydantic import BaseModel, Field

from resume_analyzer.core.config import settings

from .analysis import JobMatch, SectionAnalysis, Suggestion


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(min_length=settings.min_resume_chars, max_length=settings.max_resume_chars)
    job_description: str | None = Field(default=None, max_length=settings.max_job_description_chars)
    target_role: str | None = Field(default=None, max_length=200)
    target_industry: str | None = Field(default=None, max_length=200)
    include_suggestions: bool = True


class JobMatchRequest(BaseModel):
    resume_text: str = Field(min_length=settings.min_resume_chars, max_length=settings.max_resume_chars)
    job_description: str = Field(max_length=settings.max_job_description_chars)


class SectionsRequest(BaseModel):
    resume_text: str = Field(min_length=settings.min_resume_chars, max_length=settings.max_resume_chars)


class AnalyzeResponse(BaseModel):
    overall: int
    ats: int
    content: int
    format: int
    keyword: int
    grade: str
    recommendations: list[str] = Field(default_factory=list)
    extracted_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    sections_analysis: dict[str, SectionAnalysis] = Field(default_factory=dict)
    suggestions: list[Suggestion] = Field(default_factory=list)
    job_match: JobMatch | None = None
    degraded: bool = False
    used_draft: bool = False


class SectionsResponse(BaseModel):
    sections: dict[str, str] = Field(default_factory=dict)
    sections_analysis: dict[str, SectionAnalysis] = Field(default_factory=dict)
    degraded: bool = False
