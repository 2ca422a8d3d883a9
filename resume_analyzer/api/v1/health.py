from fastapi import APIRouter

from resume_analyzer.core.config.scoring import get_scoring_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Service status and loaded scoring sections.")
async def health_check():
    return {"status": "healthy", "scoring_sections": sorted(get_scoring_config())}
