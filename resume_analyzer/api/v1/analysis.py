import asyncio

from fastapi import APIRouter, Depends, HTTPException, Request

from resume_analyzer.ai.types import DraftAnalysisProvider
from resume_analyzer.core.errors import InvalidInput
from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.schemas.analysis import JobMatch
from resume_analyzer.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    JobMatchRequest,
    SectionsRequest,
    SectionsResponse,
)
from resume_analyzer.services.analysis_service import (
    get_draft_provider,
    run_analysis,
    run_job_match,
    run_section_detection,
)

router = APIRouter()


def _raise_invalid_input(exc: InvalidInput) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analysis", response_model=AnalyzeResponse)
@rate_limit()
async def analyze_resume(
    request: Request,
    payload: AnalyzeRequest,
    provider: DraftAnalysisProvider | None = Depends(get_draft_provider),
):
    _ = request
    try:
        return await asyncio.to_thread(run_analysis, payload, provider)
    except InvalidInput as exc:
        _raise_invalid_input(exc)


@router.post("/analysis/job-match", response_model=JobMatch)
@rate_limit()
async def analyze_job_match(request: Request, payload: JobMatchRequest):
    _ = request
    try:
        return await asyncio.to_thread(run_job_match, payload)
    except InvalidInput as exc:
        _raise_invalid_input(exc)


@router.post("/analysis/sections", response_model=SectionsResponse)
@rate_limit()
async def detect_resume_sections(request: Request, payload: SectionsRequest):
    _ = request
    try:
        return await asyncio.to_thread(run_section_detection, payload)
    except InvalidInput as exc:
        _raise_invalid_input(exc)
