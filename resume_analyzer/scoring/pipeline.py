from __future__ import annotations

import logging

from resume_analyzer.core.config.scoring import get_scoring_int
from resume_analyzer.normalize.entities import build_parsed_resume
from resume_analyzer.normalize.sections import detected_section_names
from resume_analyzer.normalize.text import top_keywords
from resume_analyzer.schemas.analysis import (
    AnalysisResult,
    DraftAnalysis,
    ParsedResume,
    SubScore,
)
from resume_analyzer.taxonomy import TaxonomyProvider

from .grading import grade_for, overall_score
from .job_match import match_job
from .sections_analysis import build_sections_analysis
from .subscores import clamp_score, collect_skills, compute_sub_scores, find_tech_keywords
from .suggestions import build_suggestions, recommendations_from

logger = logging.getLogger(__name__)


def is_degraded(parsed: ParsedResume) -> bool:
    return not detected_section_names(parsed.sections)


def _apply_draft_scores(sub_scores: list[SubScore], draft: DraftAnalysis | None) -> list[SubScore]:
    if draft is None:
        return sub_scores
    merged: list[SubScore] = []
    for sub_score in sub_scores:
        override = draft.score_for(sub_score.kind)
        value = sub_score.value if override is None else clamp_score(override)
        merged.append(SubScore(kind=sub_score.kind, value=value))
    return merged


def _cap_degraded(sub_scores: list[SubScore]) -> list[SubScore]:
    ceiling = get_scoring_int("aggregate.degraded_ceiling", 75)
    return [SubScore(kind=score.kind, value=min(score.value, ceiling)) for score in sub_scores]


def analyze_parsed(
    parsed: ParsedResume,
    job_description: str | None = None,
    *,
    draft: DraftAnalysis | None = None,
    taxonomy: TaxonomyProvider | None = None,
    target_role: str | None = None,
) -> AnalysisResult:
    degraded = is_degraded(parsed)

    sub_scores = compute_sub_scores(parsed, taxonomy)
    if degraded:
        sub_scores = _cap_degraded(sub_scores)
    sub_scores = _apply_draft_scores(sub_scores, draft)

    if draft is not None and draft.overall_score is not None:
        overall = clamp_score(draft.overall_score)
    else:
        overall = overall_score(sub_scores)

    job_match = None
    if job_description and job_description.strip():
        job_match = match_job(parsed, job_description, taxonomy)

    suggestions = build_suggestions(parsed, job_match=job_match, taxonomy=taxonomy, target_role=target_role)
    recommendations = recommendations_from(suggestions)
    if draft is not None and draft.recommendations:
        recommendations = list(draft.recommendations)

    extracted_skills = collect_skills(parsed, taxonomy)
    keywords = [*find_tech_keywords(parsed.raw_text), *top_keywords(parsed.raw_text)]
    missing_skills = list(job_match.missing_skills) if job_match else []
    if draft is not None:
        extracted_skills.extend(draft.extracted_skills)
        keywords.extend(draft.keywords)
        missing_skills.extend(draft.missing_skills)

    result = AnalysisResult(
        overall=overall,
        sub_scores=sub_scores,
        grade=grade_for(overall),
        recommendations=recommendations,
        suggestions=suggestions,
        extracted_skills=extracted_skills,
        missing_skills=missing_skills,
        keywords=keywords,
        sections_analysis=build_sections_analysis(parsed.sections),
        job_match=job_match,
        degraded=degraded,
    )
    logger.info(
        "resume_analysis_completed overall=%s grade=%s degraded=%s suggestions=%s job_match=%s",
        result.overall,
        result.grade,
        result.degraded,
        len(result.suggestions),
        job_match.match_score if job_match else None,
    )
    return result


def analyze(
    raw_text: str | None,
    job_description: str | None = None,
    *,
    draft: DraftAnalysis | None = None,
    taxonomy: TaxonomyProvider | None = None,
    target_role: str | None = None,
) -> AnalysisResult:
    """Score resume text and build ranked suggestions.

    Raises ``InvalidInput`` when ``raw_text`` is empty or blank. Any other text,
    including text with no recognizable sections, yields a complete result;
    unstructured text is flagged ``degraded`` and scored from the base values.
    """
    parsed = build_parsed_resume(raw_text, taxonomy)
    return analyze_parsed(parsed, job_description, draft=draft, taxonomy=taxonomy, target_role=target_role)
