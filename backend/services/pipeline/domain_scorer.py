"""Domain scorer: per-domain composite of the five category scores.

For each of the 8 competency domains:
    1. weighted sum of the configured category scores (absent categories
       contribute nothing)
    2. minus 5 per critical and 2 per high risk whose text mentions one of
       the domain's keywords
    3. times the company difficulty multiplier (non-STANDARD tiers only)
    4. rounded half up and clamped to [0, 100]
"""

import logging
import math
from enum import Enum

from models.responses import ScoreBreakdown
from models.schemas.company_difficulty import CompanyDifficultyContext, CompanyTier
from models.schemas.llm_analysis import RiskItem, RiskSeverity

logger = logging.getLogger(__name__)

CATEGORIES = (
    "hard_requirement_match",
    "evidence_depth",
    "round_readiness",
    "resume_clarity",
    "company_proxy",
)

# Weights express relative contribution; each row happens to sum to 1.0
DOMAIN_WEIGHTS: dict[str, dict[str, float]] = {
    "System Design": {
        "hard_requirement_match": 0.30, "evidence_depth": 0.25,
        "round_readiness": 0.35, "company_proxy": 0.10,
    },
    "Coding / Algorithms": {
        "hard_requirement_match": 0.50, "evidence_depth": 0.20, "round_readiness": 0.30,
    },
    "Behavioral": {
        "evidence_depth": 0.30, "resume_clarity": 0.40, "company_proxy": 0.30,
    },
    "Communication": {
        "evidence_depth": 0.20, "resume_clarity": 0.60, "company_proxy": 0.20,
    },
    "Domain Knowledge": {
        "hard_requirement_match": 0.45, "evidence_depth": 0.35, "company_proxy": 0.20,
    },
    "Technical Depth": {
        "hard_requirement_match": 0.40, "evidence_depth": 0.40, "round_readiness": 0.20,
    },
    "Problem Solving": {
        "hard_requirement_match": 0.25, "evidence_depth": 0.15,
        "round_readiness": 0.40, "resume_clarity": 0.20,
    },
    "Leadership / Collab": {
        "evidence_depth": 0.35, "resume_clarity": 0.30, "company_proxy": 0.35,
    },
}

# Plain substring match; stems like "scalab" and "articula" are intentional
DOMAIN_KEYWORDS: dict[str, list[str]] = {
    "System Design": ["system design", "architecture", "scalab", "distributed", "infra"],
    "Coding / Algorithms": ["coding", "algorithm", "data structure", "leetcode", "dsa", "implementation"],
    "Behavioral": ["behavioral", "culture", "teamwork", "conflict", "star method"],
    "Communication": ["communication", "clarity", "articula", "presentation", "explain"],
    "Domain Knowledge": ["domain", "industry", "specific knowledge", "expertise", "specializ"],
    "Technical Depth": ["technical depth", "deep understanding", "fundamentals", "core concepts"],
    "Problem Solving": ["problem solving", "analytical", "approach", "structur", "reasoning"],
    "Leadership / Collab": ["leadership", "collaborat", "mentor", "team lead", "cross-functional"],
}

COMPETENCY_DOMAINS: tuple[str, ...] = tuple(DOMAIN_WEIGHTS)

CRITICAL_RISK_PENALTY = 5
HIGH_RISK_PENALTY = 2


class AdjustmentPolarity(str, Enum):
    INVERSE = "inverse"  # score *= 2 - factor
    DIRECT = "direct"  # score *= factor


def category_scores_from_breakdown(score_breakdown: ScoreBreakdown) -> dict[str, float]:
    """Pull the five 0-100 category scores out of a breakdown."""
    scores = {cat: float(getattr(score_breakdown, cat)) for cat in CATEGORIES}
    out_of_range = {cat: v for cat, v in scores.items() if not 0 <= v <= 100}
    if out_of_range:
        logger.warning("Category scores outside 0-100 will be clamped per domain: %s", out_of_range)
    return scores


def weighted_sum(domain: str, category_scores: dict[str, float]) -> float:
    total = 0.0
    for cat, weight in DOMAIN_WEIGHTS[domain].items():
        total += category_scores.get(cat, 0.0) * weight
    return total


def count_risk_matches(domain: str, risks: list[RiskItem]) -> tuple[int, int]:
    """Count critical and high risks whose text mentions a domain keyword."""
    keywords = DOMAIN_KEYWORDS.get(domain, [])
    critical = high = 0
    for risk in risks:
        text = risk.text
        if not any(kw in text for kw in keywords):
            continue
        if risk.severity == RiskSeverity.CRITICAL:
            critical += 1
        elif risk.severity == RiskSeverity.HIGH:
            high += 1
    return critical, high


def risk_penalty(critical: int, high: int) -> float:
    return critical * CRITICAL_RISK_PENALTY + high * HIGH_RISK_PENALTY


def apply_company_adjustment(
    score: float,
    company_difficulty: CompanyDifficultyContext | None,
    polarity: AdjustmentPolarity = AdjustmentPolarity.INVERSE,
) -> float:
    """Scale a score by the company difficulty factor.

    No-op without a context or for the STANDARD tier. A factor of 1.0 is a
    no-op under either polarity.
    """
    if company_difficulty is None or company_difficulty.tier == CompanyTier.STANDARD:
        return score
    factor = company_difficulty.adjustment_factor
    if polarity == AdjustmentPolarity.DIRECT:
        return score * factor
    return score * (2 - factor)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Round into 0-100. NaN counts as 0; infinities clamp to the nearest bound."""
    if math.isnan(value):
        return 0
    return round_half_up(max(0.0, min(100.0, value)))


def compute_domain_score(
    domain: str,
    category_scores: dict[str, float],
    risks: list[RiskItem],
    company_difficulty: CompanyDifficultyContext | None = None,
    polarity: AdjustmentPolarity = AdjustmentPolarity.INVERSE,
) -> int:
    """Raw 0-100 score for a single domain."""
    score = weighted_sum(domain, category_scores)
    critical, high = count_risk_matches(domain, risks)
    score -= risk_penalty(critical, high)
    score = apply_company_adjustment(score, company_difficulty, polarity)
    raw = clamp_score(score)
    logger.debug(
        "Domain %s: critical=%d high=%d raw=%d", domain, critical, high, raw
    )
    return raw


def compute_domain_scores(
    category_scores: dict[str, float],
    risks: list[RiskItem],
    company_difficulty: CompanyDifficultyContext | None = None,
    polarity: AdjustmentPolarity = AdjustmentPolarity.INVERSE,
) -> dict[str, int]:
    """Raw scores for all domains, in declaration order."""
    return {
        domain: compute_domain_score(domain, category_scores, risks, company_difficulty, polarity)
        for domain in COMPETENCY_DOMAINS
    }
