from pydantic import BaseModel, Field

from models.responses import ScoreBreakdown
from models.schemas.company_difficulty import CompanyDifficultyContext, ExperienceLevel
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis


class HeatmapRequest(BaseModel):
    analysis: LLMAnalysis = Field(default_factory=LLMAnalysis, description="Ranked LLM risk findings")
    score_breakdown: ScoreBreakdown = Field(..., description="Five-category deterministic scores")
    extracted_jd: ExtractedJD = Field(default_factory=ExtractedJD, description="Structured job description fields")
    company_difficulty: CompanyDifficultyContext | None = Field(
        None, description="Precomputed difficulty context; resolved from company_name when omitted"
    )
    company_name: str | None = Field(None, max_length=200)
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY


class CompanyDifficultyRequest(BaseModel):
    company_name: str = Field(..., max_length=200, description="Employer name as written in the JD")
    experience_level: ExperienceLevel = ExperienceLevel.ENTRY
    extracted_jd: ExtractedJD | None = None
