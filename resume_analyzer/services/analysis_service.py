from __future__ import annotations

import logging

from resume_analyzer.ai.types import DraftAnalysisProvider, DraftRequest
from resume_analyzer.core.config import settings
from resume_analyzer.core.errors import DraftAnalysisError
from resume_analyzer.normalize.entities import build_parsed_resume
from resume_analyzer.schemas.analysis import DraftAnalysis, JobMatch
from resume_analyzer.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    JobMatchRequest,
    SectionsRequest,
    SectionsResponse,
)
from resume_analyzer.scoring import analyze_parsed, build_sections_analysis, is_degraded, match_job

logger = logging.getLogger(__name__)


def get_draft_provider() -> DraftAnalysisProvider | None:
    """No model-backed provider ships with the service; deployments inject one."""
    return None


def fetch_draft(provider: DraftAnalysisProvider | None, request: DraftRequest) -> DraftAnalysis | None:
    if provider is None:
        return None

    attempts = settings.draft_max_attempts
    for attempt in range(1, attempts + 1):
        try:
            return provider.draft(request)
        except DraftAnalysisError as exc:
            logger.warning(
                "draft_analysis_failed attempt=%s/%s code=%s error=%s",
                attempt,
                attempts,
                exc.code,
                exc,
            )
        except Exception as exc:  # noqa: BLE001 - provider failures never fail the analysis
            logger.warning(
                "draft_analysis_failed attempt=%s/%s code=%s error=%s",
                attempt,
                attempts,
                type(exc).__name__,
                exc,
            )
    logger.warning("draft_analysis_unavailable attempts=%s; using heuristic scores", attempts)
    return None


def run_analysis(payload: AnalyzeRequest, provider: DraftAnalysisProvider | None = None) -> AnalyzeResponse:
    parsed = build_parsed_resume(payload.resume_text)
    draft = fetch_draft(
        provider,
        DraftRequest(
            resume_text=payload.resume_text,
            job_description=payload.job_description,
            target_role=payload.target_role,
            target_industry=payload.target_industry,
        ),
    )
    result = analyze_parsed(parsed, payload.job_description, draft=draft, target_role=payload.target_role)

    body = result.to_flat_dict(include_details=True)
    if not payload.include_suggestions:
        body["suggestions"] = []
    return AnalyzeResponse(**body, used_draft=draft is not None)


def run_job_match(payload: JobMatchRequest) -> JobMatch:
    parsed = build_parsed_resume(payload.resume_text)
    job_match = match_job(parsed, payload.job_description)
    logger.info(
        "job_match_completed match_score=%s missing_skills=%s",
        job_match.match_score,
        len(job_match.missing_skills),
    )
    return job_match


def run_section_detection(payload: SectionsRequest) -> SectionsResponse:
    parsed = build_parsed_resume(payload.resume_text)
    return SectionsResponse(
        sections=dict(parsed.sections),
        sections_analysis=build_sections_analysis(parsed.sections),
        degraded=is_degraded(parsed),
    )
