"""Tests for the standard volume ramp strategy."""

import pytest

from app.planner.volume import DEFAULT_VOLUME_STRATEGY, StandardVolumeRampStrategy, _ramp_index
from app.schemas.muscle import MuscleGroup
from app.schemas.plan_input import TrainingGoal


@pytest.fixture
def strategy() -> StandardVolumeRampStrategy:
    return StandardVolumeRampStrategy()


# ======================================================================
# calculate_volume
# ======================================================================


class TestCalculateVolume:
    def test_hypertrophy_advanced_uses_guideline_floor(self, strategy):
        rec = strategy.calculate_volume(MuscleGroup.CHEST, TrainingGoal.HYPERTROPHY, 4, False)
        assert rec.sets_per_week == 10

    def test_intermediate_factor(self, strategy):
        rec = strategy.calculate_volume(MuscleGroup.CHEST, TrainingGoal.HYPERTROPHY, 2, False)
        assert rec.sets_per_week == 9

    def test_beginner_factor_truncates(self, strategy):
        # 12 * 0.7 = 8.4
        rec = strategy.calculate_volume(MuscleGroup.SHOULDERS, TrainingGoal.HYPERTROPHY, 0, False)
        assert rec.sets_per_week == 8

    def test_emphasis(self, strategy):
        # 9 * 1.3 = 11.7
        rec = strategy.calculate_volume(MuscleGroup.CHEST, TrainingGoal.HYPERTROPHY, 2, True)
        assert rec.sets_per_week == 11

    def test_strength_baseline(self, strategy):
        # maintenance floor 4 + 2
        rec = strategy.calculate_volume(MuscleGroup.CHEST, TrainingGoal.STRENGTH, 4, False)
        assert rec.sets_per_week == 6

    def test_emphasis_never_reduces(self, strategy):
        for muscle in MuscleGroup:
            for goal in TrainingGoal:
                for age in (0, 2, 4):
                    plain = strategy.calculate_volume(muscle, goal, age, False).sets_per_week
                    emphasized = strategy.calculate_volume(muscle, goal, age, True).sets_per_week
                    assert emphasized >= plain

    @pytest.mark.parametrize(
        "goal, age, expected",
        [
            (TrainingGoal.HYPERTROPHY, 0, (8, 15, 0.65)),
            (TrainingGoal.HYPERTROPHY, 2, (5, 30, 0.70)),
            (TrainingGoal.HYPERTROPHY, 4, (5, 30, 0.75)),
            (TrainingGoal.STRENGTH, 0, (5, 12, 0.75)),
            (TrainingGoal.STRENGTH, 2, (2, 5, 0.80)),
            (TrainingGoal.STRENGTH, 4, (2, 5, 0.85)),
        ],
    )
    def test_rep_range_and_intensity(self, strategy, goal, age, expected):
        rec = strategy.calculate_volume(MuscleGroup.BACK, goal, age, False)
        assert (rec.rep_range_lower, rec.rep_range_upper, rec.intensity) == expected


# ======================================================================
# calculate_volume_for_week
# ======================================================================


class TestVolumeRamp:
    def test_maintenance_is_constant(self, strategy):
        for week in range(1, 13):
            assert strategy.calculate_volume_for_week(20, week, 12, is_maintenance=True) == 20

    def test_eight_week_phases(self, strategy):
        ramp = [strategy.calculate_volume_for_week(20, w, 8, False) for w in range(1, 9)]
        assert ramp == [12, 12, 15, 15, 18, 18, 20, 20]

    def test_monotonic_and_bounded(self, strategy):
        for total in (4, 5, 7, 8, 12, 16):
            ramp = [strategy.calculate_volume_for_week(20, w, total, False) for w in range(1, total + 1)]
            assert ramp == sorted(ramp)
            assert all(v <= 20 for v in ramp)
            assert ramp[-1] == 20

    @pytest.mark.parametrize("total", [1, 2, 3])
    def test_short_plan_flat_factor(self, strategy, total):
        for week in range(1, total + 1):
            assert strategy.calculate_volume_for_week(20, week, total, False) == 17

    def test_index_clamped_past_plan_end(self):
        assert _ramp_index(9, 10) == 3
        assert _ramp_index(40, 8) == 3
        assert _ramp_index(0, 8) == 0

    def test_default_strategy_singleton(self):
        assert isinstance(DEFAULT_VOLUME_STRATEGY, StandardVolumeRampStrategy)
