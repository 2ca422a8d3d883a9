from .analysis import (
    PRIORITY_RANK,
    SUB_SCORE_KINDS,
    AnalysisResult,
    DraftAnalysis,
    EducationMatch,
    ExperienceMatch,
    JobMatch,
    ParsedResume,
    ResumeEntities,
    SectionAnalysis,
    SubScore,
    Suggestion,
)

__all__ = [
    "PRIORITY_RANK",
    "SUB_SCORE_KINDS",
    "AnalysisResult",
    "DraftAnalysis",
    "EducationMatch",
    "ExperienceMatch",
    "JobMatch",
    "ParsedResume",
    "ResumeEntities",
    "SectionAnalysis",
    "SubScore",
    "Suggestion",
]
