"""Company difficulty context: how selective the hiring company is."""

from enum import Enum

from pydantic import BaseModel


class CompanyTier(str, Enum):
    FAANG_PLUS = "FAANG_PLUS"
    BIG_TECH = "BIG_TECH"
    TOP_FINANCE = "TOP_FINANCE"
    UNICORN = "UNICORN"
    GROWTH = "GROWTH"
    STANDARD = "STANDARD"


class CompetitionLevel(str, Enum):
    EXTREME = "extreme"
    VERY_HIGH = "very_high"
    HIGH = "high"
    MODERATE = "moderate"


class ExperienceLevel(str, Enum):
    INTERN = "intern"
    ENTRY = "entry"
    MID = "mid"


class CompanyDifficultyContext(BaseModel):
    """Difficulty adjustment for a specific employer.

    ``adjustment_factor`` is 1.0 for the STANDARD baseline and at most 1.5;
    ``difficulty_score`` is the same factor on a 100-150 scale.
    """
    company_name: str = "Unknown"
    tier: CompanyTier = CompanyTier.STANDARD
    difficulty_score: int = 100
    is_intern: bool = False
    acceptance_rate_estimate: str = "10-20%"
    competition_level: CompetitionLevel = CompetitionLevel.MODERATE
    interview_bar_description: str = ""
    adjustment_factor: float = 1.0
    differentiation_strategies: list[str] = []
    version: str = "v0.1"
