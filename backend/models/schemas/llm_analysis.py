"""Upstream LLM analysis contract: category scores and ranked risk findings."""

import logging
from enum import Enum

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


class RiskSeverity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CategoryScores(BaseModel):
    """Raw LLM category scores on a 0-1 scale (informational only)."""
    hard_match: float = 0.0
    evidence_depth: float = 0.0
    round_readiness: float = 0.0
    clarity: float = 0.0
    company_proxy: float = 0.0


class RiskItem(BaseModel):
    """A single ranked risk finding about candidate fit."""
    id: str = ""
    title: str
    severity: RiskSeverity = RiskSeverity.LOW
    rationale: str = ""
    missing_evidence: str = ""
    rubric_refs: list[str] = []
    jd_refs: list[str] = []

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, value):
        # Unknown labels carry no penalty rather than failing the whole report
        if isinstance(value, RiskSeverity):
            return value
        label = str(value or "").strip().lower()
        try:
            return RiskSeverity(label)
        except ValueError:
            logger.warning("Unrecognized risk severity %r, treating as low", value)
            return RiskSeverity.LOW

    @property
    def text(self) -> str:
        """Lowercased title and rationale used for keyword matching."""
        return f"{self.title} {self.rationale}".lower()


class LLMAnalysis(BaseModel):
    """Structured LLM output consumed by the heatmap engine.

    Only ``ranked_risks`` feeds the heatmap; order is the upstream ranking
    and carries no meaning here.
    """
    category_scores: CategoryScores = CategoryScores()
    ranked_risks: list[RiskItem] = []
