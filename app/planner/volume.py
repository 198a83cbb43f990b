"""
Volume strategy: weekly set targets and their ramp across a plan.

Model
-----

1. **Baseline** -- hypertrophy starts at the muscle's minimum productive
   (hypertrophy) volume; strength starts at minimum maintenance volume
   plus two sets, since most strength work is low-rep and the muscle
   only needs enough sets to keep its size.
2. **Experience** -- novices recover from less: ×0.7 under one year of
   training, ×0.9 under three, full volume beyond.
3. **Emphasis** -- prioritized muscles get ×1.3.
4. **Ramp** -- over a plan of four weeks or more the target is phased
   in by quarters (60 % → 75 % → 90 % → 100 %).  Shorter plans run at a
   flat 85 %.  Maintenance muscles never ramp.

Every multiplication is truncated with ``int()`` straight away, so
results are stable across implementations.
"""

from __future__ import annotations

from typing import Mapping

from app.catalog.guidelines import MUSCLE_GUIDELINES, get_guidelines
from app.planner.base import VolumeStrategy
from app.schemas.muscle import MuscleGroup, TrainingGuidelines
from app.schemas.plan_input import TrainingGoal
from app.schemas.volume import VolumeRecommendation


# ======================================================================
# Tables
# ======================================================================

_EMPHASIS_FACTOR = 1.3
_STRENGTH_EXTRA_SETS = 2

# (upper training-age bound exclusive, factor)
_EXPERIENCE_FACTORS: list[tuple[float, float]] = [
    (1.0, 0.7),
    (3.0, 0.9),
    (float("inf"), 1.0),
]

# Ramp phases, one per plan quarter.
_RAMP_FACTORS: tuple[float, ...] = (0.6, 0.75, 0.9, 1.0)
_SHORT_PLAN_WEEKS = 4
_SHORT_PLAN_FACTOR = 0.85

# goal -> per-tier (rep_lower, rep_upper, intensity); tiers are
# training age < 1, < 3, >= 3.
_REP_TABLE: dict[TrainingGoal, tuple[tuple[int, int, float], ...]] = {
    TrainingGoal.HYPERTROPHY: ((8, 15, 0.65), (5, 30, 0.70), (5, 30, 0.75)),
    TrainingGoal.STRENGTH: ((5, 12, 0.75), (2, 5, 0.80), (2, 5, 0.85)),
}


# ======================================================================
# Helpers
# ======================================================================

def _experience_factor(training_age: float) -> float:
    for bound, factor in _EXPERIENCE_FACTORS:
        if training_age < bound:
            return factor
    return 1.0


def _experience_tier(training_age: float) -> int:
    if training_age < 1:
        return 0
    if training_age < 3:
        return 1
    return 2


def _baseline_sets(guidelines: TrainingGuidelines, goal: TrainingGoal) -> int:
    if goal == TrainingGoal.HYPERTROPHY:
        return guidelines.hypertrophy_sets.minimum
    return guidelines.maintenance_sets.minimum + _STRENGTH_EXTRA_SETS


def _ramp_index(current_week: int, total_weeks: int) -> int:
    quarter_size = max(1, total_weeks // 4)
    index = (current_week - 1) // quarter_size
    return min(max(index, 0), len(_RAMP_FACTORS) - 1)


# ======================================================================
# Strategy
# ======================================================================

class StandardVolumeRampStrategy(VolumeStrategy):
    """Guideline-driven volume with a four-phase ramp."""

    def __init__(self, guidelines: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES) -> None:
        self.guidelines = guidelines

    def calculate_volume(
        self,
        muscle: MuscleGroup,
        goal: TrainingGoal,
        training_age: float,
        is_emphasized: bool,
    ) -> VolumeRecommendation:
        sets = _baseline_sets(get_guidelines(muscle, self.guidelines), goal)
        sets = int(sets * _experience_factor(training_age))
        if is_emphasized:
            sets = int(sets * _EMPHASIS_FACTOR)

        rep_lower, rep_upper, intensity = _REP_TABLE[goal][_experience_tier(training_age)]
        return VolumeRecommendation(
            sets_per_week=sets,
            rep_range_lower=rep_lower,
            rep_range_upper=rep_upper,
            intensity=intensity,
        )

    def calculate_volume_for_week(
        self,
        target_sets: int,
        current_week: int,
        total_weeks: int,
        is_maintenance: bool,
    ) -> int:
        if is_maintenance:
            return target_sets
        if total_weeks < _SHORT_PLAN_WEEKS:
            return int(target_sets * _SHORT_PLAN_FACTOR)
        return int(target_sets * _RAMP_FACTORS[_ramp_index(current_week, total_weeks)])


DEFAULT_VOLUME_STRATEGY = StandardVolumeRampStrategy()
