"""Pydantic contracts consumed and produced by the heatmap pipeline."""

from models.schemas.company_difficulty import CompanyDifficultyContext, CompanyTier
from models.schemas.competency_heatmap import (
    CompetencyHeatmapData,
    CompetencyHeatmapEntry,
    CompetencyLevel,
    GapStatus,
    InferredSeniority,
)
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis, RiskItem, RiskSeverity

__all__ = [
    "CompanyDifficultyContext",
    "CompanyTier",
    "CompetencyHeatmapData",
    "CompetencyHeatmapEntry",
    "CompetencyLevel",
    "ExtractedJD",
    "GapStatus",
    "InferredSeniority",
    "LLMAnalysis",
    "RiskItem",
    "RiskSeverity",
]
