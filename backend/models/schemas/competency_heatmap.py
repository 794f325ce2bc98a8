"""Heatmap output: per-domain competency gaps calibrated to role seniority."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class InferredSeniority(str, Enum):
    INTERN = "Intern"
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"
    STAFF_PLUS = "Staff+"
    UNKNOWN = "Unknown"


class CompetencyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    HIGH = "High"
    EXPERT = "Expert"


class GapStatus(str, Enum):
    CRITICAL = "Critical"
    WARNING = "Warning"
    PASS = "Pass"


class CompetencyHeatmapEntry(BaseModel):
    """One competency domain scored against its seniority target."""
    model_config = ConfigDict(frozen=True)

    domain: str
    raw_score: int  # 0-100
    your_level: CompetencyLevel
    target_benchmark: CompetencyLevel
    target_score: int
    gap_status: GapStatus
    gap_points: int  # max(0, target_score - raw_score)


class CompetencyHeatmapData(BaseModel):
    """Structured output of the competency heatmap engine.

    Entries are ordered Critical, Warning, Pass and by descending
    ``gap_points`` within a status; the three tallies always sum to
    ``total_domains``.
    """
    model_config = ConfigDict(frozen=True)

    entries: tuple[CompetencyHeatmapEntry, ...] = ()
    inferred_seniority: InferredSeniority = InferredSeniority.UNKNOWN
    seniority_label: str = "General Benchmark"
    total_domains: int = 0
    critical_gaps: int = 0
    warning_gaps: int = 0
    pass_count: int = 0
    version: str = "v0.1"
