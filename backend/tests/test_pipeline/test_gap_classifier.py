"""Tests for level banding, target lookup and gap classification."""

import pytest
from pydantic import ValidationError

from models.schemas.competency_heatmap import (
    CompetencyHeatmapEntry,
    CompetencyLevel,
    GapStatus,
    InferredSeniority,
)
from services.pipeline.gap_classifier import (
    LEVEL_TO_SCORE,
    SENIORITY_BENCHMARKS,
    classify_gap,
    compute_gap_status,
    score_to_level,
    target_for,
)


class TestScoreToLevel:
    @pytest.mark.parametrize("score, expected", [
        (100, CompetencyLevel.EXPERT),
        (80, CompetencyLevel.EXPERT),
        (79, CompetencyLevel.HIGH),
        (60, CompetencyLevel.HIGH),
        (59, CompetencyLevel.INTERMEDIATE),
        (35, CompetencyLevel.INTERMEDIATE),
        (34, CompetencyLevel.BEGINNER),
        (0, CompetencyLevel.BEGINNER),
    ])
    def test_thresholds(self, score, expected):
        assert score_to_level(score) == expected

    def test_banding_independent_of_target_scores(self):
        # 75 is the High target score, but 75 < 80 so it bands as High, not Expert
        assert score_to_level(LEVEL_TO_SCORE[CompetencyLevel.HIGH]) == CompetencyLevel.HIGH
        # 30 is the Beginner target; 55 the Intermediate target
        assert score_to_level(LEVEL_TO_SCORE[CompetencyLevel.BEGINNER]) == CompetencyLevel.BEGINNER
        assert score_to_level(LEVEL_TO_SCORE[CompetencyLevel.EXPERT]) == CompetencyLevel.EXPERT


class TestGapStatus:
    @pytest.mark.parametrize("gap, expected", [
        (45, GapStatus.CRITICAL),
        (20, GapStatus.CRITICAL),
        (19, GapStatus.WARNING),
        (8, GapStatus.WARNING),
        (7, GapStatus.PASS),
        (0, GapStatus.PASS),
    ])
    def test_thresholds(self, gap, expected):
        assert compute_gap_status(gap) == expected


class TestTargets:
    def test_level_scores(self):
        assert LEVEL_TO_SCORE == {
            CompetencyLevel.BEGINNER: 30,
            CompetencyLevel.INTERMEDIATE: 55,
            CompetencyLevel.HIGH: 75,
            CompetencyLevel.EXPERT: 90,
        }

    def test_every_seniority_has_a_row(self):
        assert set(SENIORITY_BENCHMARKS) == set(InferredSeniority)

    def test_staff_targets(self):
        assert target_for(InferredSeniority.STAFF_PLUS, "System Design") == (CompetencyLevel.EXPERT, 90)
        assert target_for(InferredSeniority.STAFF_PLUS, "Coding / Algorithms") == (CompetencyLevel.HIGH, 75)

    def test_intern_targets(self):
        assert target_for(InferredSeniority.INTERN, "Leadership / Collab") == (CompetencyLevel.BEGINNER, 30)

    def test_unknown_domain_defaults_to_intermediate(self):
        assert target_for(InferredSeniority.SENIOR, "Underwater Basket Weaving") == (
            CompetencyLevel.INTERMEDIATE, 55,
        )


class TestClassifyGap:
    def test_critical_gap(self):
        entry = classify_gap("System Design", 40, InferredSeniority.SENIOR)
        assert isinstance(entry, CompetencyHeatmapEntry)
        assert entry.your_level == CompetencyLevel.INTERMEDIATE
        assert entry.target_benchmark == CompetencyLevel.HIGH
        assert entry.target_score == 75
        assert entry.gap_points == 35
        assert entry.gap_status == GapStatus.CRITICAL

    def test_warning_gap(self):
        entry = classify_gap("Behavioral", 45, InferredSeniority.UNKNOWN)
        assert entry.gap_points == 10
        assert entry.gap_status == GapStatus.WARNING

    def test_exceeding_target_gives_zero_gap(self):
        entry = classify_gap("Communication", 95, InferredSeniority.JUNIOR)
        assert entry.gap_points == 0
        assert entry.gap_status == GapStatus.PASS
        assert entry.your_level == CompetencyLevel.EXPERT

    def test_entry_is_immutable(self):
        entry = classify_gap("Communication", 50, InferredSeniority.JUNIOR)
        with pytest.raises(ValidationError):
            entry.raw_score = 99
