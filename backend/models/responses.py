from pydantic import BaseModel, ConfigDict

from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.competency_heatmap import CompetencyHeatmapData


class ScoreWeights(BaseModel):
    hard_requirement_match: float = 0.35
    evidence_depth: float = 0.25
    round_readiness: float = 0.20
    resume_clarity: float = 0.10
    company_proxy: float = 0.10


class ScoreBreakdown(BaseModel):
    """Deterministic five-category fit scores (each 0-100)."""
    model_config = ConfigDict(allow_inf_nan=False)

    hard_requirement_match: float = 0.0
    evidence_depth: float = 0.0
    round_readiness: float = 0.0
    resume_clarity: float = 0.0
    company_proxy: float = 0.0
    weights: ScoreWeights = ScoreWeights()
    version: str = "v0.2"


class HeatmapResponse(BaseModel):
    heatmap: CompetencyHeatmapData
    company_difficulty: CompanyDifficultyContext | None = None
