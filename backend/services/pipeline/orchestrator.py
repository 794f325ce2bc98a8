"""Pipeline orchestrator: difficulty resolution + competency heatmap.

Flow:
    HeatmapRequest
      ├─ company_difficulty supplied?  → use as-is
      │    else company name known?    → resolve_company_difficulty()
      │                                        ↓
      └─ competency_heatmap.predict(analysis, score_breakdown,
                                    extracted_jd, company_difficulty)
                       ↓
         HeatmapResponse(heatmap, company_difficulty)
"""

import logging

from config import settings
from models.requests import HeatmapRequest
from models.responses import HeatmapResponse
from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.competency_heatmap import CompetencyHeatmapData
from services.company_difficulty import resolve_company_difficulty
from services.pipeline.model_registry import get_model

logger = logging.getLogger(__name__)


def _difficulty_for(request: HeatmapRequest) -> CompanyDifficultyContext | None:
    if request.company_difficulty is not None:
        return request.company_difficulty
    if not settings.resolve_company_difficulty:
        return None

    company_name = request.company_name or request.extracted_jd.company_name
    if not company_name:
        return None
    return resolve_company_difficulty(
        company_name,
        request.experience_level,
        request.extracted_jd,
    )


async def analyze_heatmap(request: HeatmapRequest) -> HeatmapResponse:
    """Compute the competency heatmap for one candidate/job pairing."""
    company_difficulty = _difficulty_for(request)

    heatmap_svc = get_model("competency_heatmap")
    heatmap: CompetencyHeatmapData = heatmap_svc.predict(
        analysis=request.analysis,
        score_breakdown=request.score_breakdown,
        extracted_jd=request.extracted_jd,
        company_difficulty=company_difficulty,
    )

    logger.info(
        "Heatmap computed: seniority=%s critical=%d warning=%d pass=%d",
        heatmap.inferred_seniority.value,
        heatmap.critical_gaps,
        heatmap.warning_gaps,
        heatmap.pass_count,
    )
    return HeatmapResponse(heatmap=heatmap, company_difficulty=company_difficulty)
