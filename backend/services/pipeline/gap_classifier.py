"""Gap classifier: domain score vs. the seniority-appropriate target."""

from models.schemas.competency_heatmap import (
    CompetencyHeatmapEntry,
    CompetencyLevel,
    GapStatus,
    InferredSeniority,
)

_B = CompetencyLevel.BEGINNER
_I = CompetencyLevel.INTERMEDIATE
_H = CompetencyLevel.HIGH
_E = CompetencyLevel.EXPERT

# Expected level per seniority per domain
SENIORITY_BENCHMARKS: dict[InferredSeniority, dict[str, CompetencyLevel]] = {
    InferredSeniority.INTERN: {
        "System Design": _B, "Coding / Algorithms": _I, "Behavioral": _B,
        "Communication": _B, "Domain Knowledge": _B, "Technical Depth": _B,
        "Problem Solving": _I, "Leadership / Collab": _B,
    },
    InferredSeniority.JUNIOR: {
        "System Design": _B, "Coding / Algorithms": _I, "Behavioral": _I,
        "Communication": _I, "Domain Knowledge": _B, "Technical Depth": _I,
        "Problem Solving": _I, "Leadership / Collab": _B,
    },
    InferredSeniority.MID_LEVEL: {
        "System Design": _I, "Coding / Algorithms": _H, "Behavioral": _I,
        "Communication": _I, "Domain Knowledge": _I, "Technical Depth": _H,
        "Problem Solving": _H, "Leadership / Collab": _I,
    },
    InferredSeniority.SENIOR: {
        "System Design": _H, "Coding / Algorithms": _H, "Behavioral": _H,
        "Communication": _H, "Domain Knowledge": _H, "Technical Depth": _H,
        "Problem Solving": _H, "Leadership / Collab": _H,
    },
    InferredSeniority.STAFF_PLUS: {
        "System Design": _E, "Coding / Algorithms": _H, "Behavioral": _E,
        "Communication": _E, "Domain Knowledge": _E, "Technical Depth": _E,
        "Problem Solving": _E, "Leadership / Collab": _E,
    },
    InferredSeniority.UNKNOWN: {
        "System Design": _I, "Coding / Algorithms": _I, "Behavioral": _I,
        "Communication": _I, "Domain Knowledge": _I, "Technical Depth": _I,
        "Problem Solving": _I, "Leadership / Collab": _I,
    },
}

# Representative score per level, used for targets only
LEVEL_TO_SCORE: dict[CompetencyLevel, int] = {
    CompetencyLevel.BEGINNER: 30,
    CompetencyLevel.INTERMEDIATE: 55,
    CompetencyLevel.HIGH: 75,
    CompetencyLevel.EXPERT: 90,
}

DEFAULT_TARGET = CompetencyLevel.INTERMEDIATE

CRITICAL_GAP_POINTS = 20
WARNING_GAP_POINTS = 8

STATUS_RANK: dict[GapStatus, int] = {
    GapStatus.CRITICAL: 0,
    GapStatus.WARNING: 1,
    GapStatus.PASS: 2,
}


def score_to_level(score: int) -> CompetencyLevel:
    """Band a raw score. Thresholds differ from LEVEL_TO_SCORE on purpose."""
    if score >= 80:
        return CompetencyLevel.EXPERT
    if score >= 60:
        return CompetencyLevel.HIGH
    if score >= 35:
        return CompetencyLevel.INTERMEDIATE
    return CompetencyLevel.BEGINNER


def target_for(seniority: InferredSeniority, domain: str) -> tuple[CompetencyLevel, int]:
    """Target level and score for a domain; Intermediate when unlisted."""
    level = SENIORITY_BENCHMARKS.get(seniority, {}).get(domain, DEFAULT_TARGET)
    return level, LEVEL_TO_SCORE[level]


def compute_gap_status(gap_points: int) -> GapStatus:
    if gap_points >= CRITICAL_GAP_POINTS:
        return GapStatus.CRITICAL
    if gap_points >= WARNING_GAP_POINTS:
        return GapStatus.WARNING
    return GapStatus.PASS


def classify_gap(domain: str, raw_score: int, seniority: InferredSeniority) -> CompetencyHeatmapEntry:
    target_level, target_score = target_for(seniority, domain)
    gap_points = max(0, target_score - raw_score)
    return CompetencyHeatmapEntry(
        domain=domain,
        raw_score=raw_score,
        your_level=score_to_level(raw_score),
        target_benchmark=target_level,
        target_score=target_score,
        gap_status=compute_gap_status(gap_points),
        gap_points=gap_points,
    )
