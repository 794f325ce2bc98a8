from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import CompanyDifficultyRequest, HeatmapRequest
from models.responses import HeatmapResponse
from models.schemas.company_difficulty import CompanyDifficultyContext
from services.company_difficulty import resolve_company_difficulty
from services.pipeline import orchestrator
from services.pipeline.competency_heatmap import HEATMAP_VERSION

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "heatmap_version": HEATMAP_VERSION,
    }


@router.post("/heatmap", response_model=HeatmapResponse)
@limiter.limit(settings.heatmap_rate_limit)
async def heatmap(request: Request, body: HeatmapRequest):
    return await orchestrator.analyze_heatmap(body)


@router.post("/company-difficulty", response_model=CompanyDifficultyContext)
@limiter.limit(settings.heatmap_rate_limit)
async def company_difficulty(request: Request, body: CompanyDifficultyRequest):
    if not body.company_name.strip():
        raise HTTPException(status_code=400, detail="company_name must not be empty")
    return resolve_company_difficulty(body.company_name, body.experience_level, body.extracted_jd)
