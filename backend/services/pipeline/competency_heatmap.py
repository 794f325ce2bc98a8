"""Competency heatmap: seniority-calibrated gap report over 8 domains.

Rules engine, no trained model:
    ExtractedJD          -> infer_seniority()       -> seniority + label
    ScoreBreakdown+risks -> compute_domain_scores() -> raw score per domain
    raw score+seniority  -> classify_gap()          -> heatmap entry
    entries              -> sort_entries() + tally_gaps() -> CompetencyHeatmapData
"""

import logging
from typing import Any

from config import settings
from models.responses import ScoreBreakdown
from models.schemas.company_difficulty import CompanyDifficultyContext
from models.schemas.competency_heatmap import (
    CompetencyHeatmapData,
    CompetencyHeatmapEntry,
    GapStatus,
    InferredSeniority,
)
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import LLMAnalysis
from services.pipeline.base import BaseModelService
from services.pipeline.domain_scorer import (
    COMPETENCY_DOMAINS,
    DOMAIN_KEYWORDS,
    DOMAIN_WEIGHTS,
    AdjustmentPolarity,
    category_scores_from_breakdown,
    compute_domain_scores,
)
from services.pipeline.gap_classifier import (
    LEVEL_TO_SCORE,
    SENIORITY_BENCHMARKS,
    STATUS_RANK,
    classify_gap,
)
from services.pipeline.seniority_inferrer import infer_seniority

logger = logging.getLogger(__name__)

HEATMAP_VERSION = "v0.1"


class CompetencyHeatmapService(BaseModelService):
    model_name = "competency_heatmap"

    def __init__(self, polarity: AdjustmentPolarity | None = None) -> None:
        self.polarity = polarity or AdjustmentPolarity(settings.company_adjustment_polarity)

    def load(self) -> None:
        # Nothing to load; check the static tables agree with each other
        problems = validate_tables()
        if problems:
            raise RuntimeError("Inconsistent heatmap tables: " + "; ".join(problems))
        logger.info(
            "Competency heatmap engine ready (%d domains, polarity=%s)",
            len(COMPETENCY_DOMAINS), self.polarity.value,
        )

    def predict(self, **kwargs: Any) -> CompetencyHeatmapData:
        self.ensure_loaded()
        analysis: LLMAnalysis = kwargs["analysis"]
        score_breakdown: ScoreBreakdown = kwargs["score_breakdown"]
        extracted_jd: ExtractedJD = kwargs["extracted_jd"]
        company_difficulty: CompanyDifficultyContext | None = kwargs.get("company_difficulty")

        return compute_competency_heatmap(
            analysis,
            score_breakdown,
            extracted_jd,
            company_difficulty=company_difficulty,
            polarity=self.polarity,
        )


def validate_tables() -> list[str]:
    """Return a list of consistency problems in the static tables."""
    problems: list[str] = []
    for domain in COMPETENCY_DOMAINS:
        if not DOMAIN_WEIGHTS[domain]:
            problems.append(f"{domain}: no category weights")
        if not DOMAIN_KEYWORDS.get(domain):
            problems.append(f"{domain}: no risk keywords")
    for seniority in InferredSeniority:
        row = SENIORITY_BENCHMARKS.get(seniority)
        if row is None:
            problems.append(f"{seniority.value}: no benchmark row")
            continue
        missing = [d for d in COMPETENCY_DOMAINS if d not in row]
        if missing:
            problems.append(f"{seniority.value}: no benchmark for {', '.join(missing)}")
        for level in row.values():
            if level not in LEVEL_TO_SCORE:
                problems.append(f"{seniority.value}: level {level} has no score")
    return problems


def sort_entries(entries: list[CompetencyHeatmapEntry]) -> list[CompetencyHeatmapEntry]:
    """Critical, Warning, Pass; larger gaps first. Stable for ties."""
    return sorted(entries, key=lambda e: (STATUS_RANK[e.gap_status], -e.gap_points))


def tally_gaps(entries: list[CompetencyHeatmapEntry]) -> dict[GapStatus, int]:
    counts = {status: 0 for status in GapStatus}
    for entry in entries:
        counts[entry.gap_status] += 1
    return counts


def compute_competency_heatmap(
    analysis: LLMAnalysis,
    score_breakdown: ScoreBreakdown,
    extracted_jd: ExtractedJD,
    company_difficulty: CompanyDifficultyContext | None = None,
    polarity: AdjustmentPolarity = AdjustmentPolarity.INVERSE,
) -> CompetencyHeatmapData:
    """Build the full heatmap report. Pure: same inputs, same output."""
    seniority, seniority_label = infer_seniority(extracted_jd)

    category_scores = category_scores_from_breakdown(score_breakdown)
    raw_scores = compute_domain_scores(
        category_scores,
        analysis.ranked_risks,
        company_difficulty=company_difficulty,
        polarity=polarity,
    )

    entries = sort_entries([
        classify_gap(domain, raw_score, seniority)
        for domain, raw_score in raw_scores.items()
    ])
    counts = tally_gaps(entries)

    logger.debug(
        "Heatmap for %s: critical=%d warning=%d pass=%d",
        seniority.value, counts[GapStatus.CRITICAL],
        counts[GapStatus.WARNING], counts[GapStatus.PASS],
    )

    return CompetencyHeatmapData(
        entries=tuple(entries),
        inferred_seniority=seniority,
        seniority_label=seniority_label,
        total_domains=len(entries),
        critical_gaps=counts[GapStatus.CRITICAL],
        warning_gaps=counts[GapStatus.WARNING],
        pass_count=counts[GapStatus.PASS],
        version=HEATMAP_VERSION,
    )
