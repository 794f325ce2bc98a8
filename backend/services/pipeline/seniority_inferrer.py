"""Seniority inference from job-description signals and title.

Ordered rules, first match wins. Terms must stand alone: a term may not be
glued to a neighbouring letter, digit or underscore, so "lead" does not fire
inside "leadership" and "l4" does not fire inside "kernel4x" or "l4_team".
"""

import logging
import re
from typing import NamedTuple

from models.schemas.competency_heatmap import InferredSeniority
from models.schemas.jd_extracted import ExtractedJD

logger = logging.getLogger(__name__)


class SeniorityInference(NamedTuple):
    seniority: InferredSeniority
    label: str


# Priority order matters: "senior staff" is Staff+, "senior" alone is Senior
SENIORITY_RULES: list[tuple[InferredSeniority, str, list[str]]] = [
    (InferredSeniority.STAFF_PLUS, "L7+ / Staff Level",
     ["staff", "principal", "l7", "l8", "distinguished"]),
    (InferredSeniority.SENIOR, "L5-L6 / Senior Level",
     ["senior", "sr.", "l5", "l6", "lead"]),
    (InferredSeniority.MID_LEVEL, "L4 / Mid-Level",
     ["mid", "intermediate", "l4"]),
    (InferredSeniority.JUNIOR, "L3 / Junior Level",
     ["junior", "jr.", "entry", "l3", "new grad"]),
    (InferredSeniority.INTERN, "Intern Level",
     ["intern"]),
]

FALLBACK = SeniorityInference(InferredSeniority.UNKNOWN, "General Benchmark")

_COMPILED: list[tuple[re.Pattern, SeniorityInference]] = []
for _seniority, _label, _terms in SENIORITY_RULES:
    _alternation = "|".join(re.escape(t) for t in _terms)
    _COMPILED.append((
        re.compile(rf"(?<![a-z0-9_])(?:{_alternation})(?![a-z0-9_])"),
        SeniorityInference(_seniority, _label),
    ))


def combined_signal_text(extracted_jd: ExtractedJD) -> str:
    """Join seniority signals and the job title into one lowercase string."""
    parts = [s.lower() for s in extracted_jd.seniority_signals or []]
    parts.append((extracted_jd.job_title or "").lower())
    return " ".join(parts)


def infer_seniority(extracted_jd: ExtractedJD) -> SeniorityInference:
    """Classify the role's seniority. Never fails; Unknown is the fallback."""
    text = combined_signal_text(extracted_jd)
    for pattern, inference in _COMPILED:
        if pattern.search(text):
            logger.debug("Seniority %s matched in %r", inference.seniority.value, text)
            return inference
    return FALLBACK
