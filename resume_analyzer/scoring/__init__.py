from .grading import GRADE_THRESHOLDS, grade_for, overall_score, round_half_up
from .job_match import match_job
from .pipeline import analyze, analyze_parsed, is_degraded
from .sections_analysis import (
    CANONICAL_SECTIONS,
    assess_section_quality,
    build_sections_analysis,
    section_ats_score,
    section_recommendations,
)
from .subscores import (
    clamp_score,
    compute_sub_scores,
    score_ats,
    score_content,
    score_format,
    score_keyword,
)
from .suggestions import build_suggestions, rank_suggestions, recommendations_from, role_keywords

__all__ = [
    "GRADE_THRESHOLDS",
    "grade_for",
    "overall_score",
    "round_half_up",
    "match_job",
    "analyze",
    "analyze_parsed",
    "is_degraded",
    "CANONICAL_SECTIONS",
    "assess_section_quality",
    "build_sections_analysis",
    "section_ats_score",
    "section_recommendations",
    "clamp_score",
    "compute_sub_scores",
    "score_ats",
    "score_content",
    "score_format",
    "score_keyword",
    "build_suggestions",
    "rank_suggestions",
    "recommendations_from",
    "role_keywords",
]
