"""
Workout composer: fills one training day with exercises and sets.

Volume bookkeeping
------------------

For each muscle the day targets, the weekly set target (volume strategy,
ramped for the base week) is divided by the number of training days
hitting that muscle, rounded up, giving a per-workout target.  Each
chosen movement is then credited with the **1 : 0.5 rule**: primary
muscles gain the full set count, secondary muscles half of it, rounded
up.  Muscles touched only as secondaries are tracked too, against their
own per-workout target.

Selection runs in two passes bounded by the session's exercise limit:
compounds first (prioritized, then large muscles), then isolation work
for whatever is still short, largest deficit first.  Targets that cannot
be met (no movement, no slot left) are simply left short.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Callable, Mapping, Optional

from pydantic import BaseModel, Field

from app.catalog.guidelines import MUSCLE_GUIDELINES, is_large
from app.planner.base import ExerciseSelector, VolumeStrategy, WorkoutBuilder
from app.planner.selector import DEFAULT_SELECTOR
from app.planner.splits import (
    day_description,
    day_title,
    day_type_for,
    exercise_limit,
    muscles_for_day_type,
    rep_range_for,
)
from app.planner.volume import DEFAULT_VOLUME_STRATEGY
from app.schemas.movement import MovementDefinition
from app.schemas.muscle import MuscleGroup, TrainingGuidelines
from app.schemas.plan import ExerciseInstance, ExerciseSet, Workout
from app.schemas.plan_input import PlanInput, TrainingExperience, TrainingGoal

logger = logging.getLogger(__name__)

MAX_SETS_PER_MOVEMENT = 5
_HYPERTROPHY_COMPOUND_CAP = 4
_BEGINNER_COMPOUND_CAP = 3
_BEGINNER_ISOLATION_CAP = 2
_MIN_SETS_WHEN_NEEDED = 2
_PRIMARY_FOCUS_THRESHOLD = 3


# ======================================================================
# Models
# ======================================================================

class MuscleVolume(BaseModel):
    """Sets credited to a muscle so far in the workout being composed."""

    current_sets: int = Field(0, ge=0)
    target_sets: int = Field(..., ge=0)

    @property
    def remaining(self) -> int:
        return max(0, self.target_sets - self.current_sets)

    @property
    def is_met(self) -> bool:
        return self.current_sets >= self.target_sets


class ComposedWorkout(BaseModel):
    """A composed workout plus the tracking state that produced it."""

    workout: Workout
    volume: dict[MuscleGroup, MuscleVolume]


# ======================================================================
# Building blocks
# ======================================================================

def create_exercise_instance(
    movement: MovementDefinition,
    set_count: int,
    target_reps: int,
    weight: float = 0.0,
) -> ExerciseInstance:
    """A fresh, not-yet-performed exercise with *set_count* identical sets."""
    return ExerciseInstance(
        movement=movement,
        sets=[
            ExerciseSet(weight=weight, target_reps=target_reps, completed_reps=0, is_complete=False)
            for _ in range(set_count)
        ],
    )


def allocate_sets(
    movement: MovementDefinition,
    volume: dict[MuscleGroup, MuscleVolume],
    *,
    goal: TrainingGoal,
    experience: TrainingExperience,
    target_for: Callable[[MuscleGroup], int],
) -> int:
    """Decide how many sets *movement* gets and credit them to *volume*.

    Muscles the movement touches that are not tracked yet are added with
    ``target_for(muscle)`` as their target.  Returns 0 (and credits
    nothing) when no touched muscle still needs volume.
    """
    required: dict[MuscleGroup, int] = {}
    for muscle in movement.muscle_groups:
        if muscle not in volume:
            volume[muscle] = MuscleVolume(target_sets=target_for(muscle))
        required[muscle] = volume[muscle].remaining

    if not any(required.values()):
        return 0

    primary_needs = [required[m] for m in movement.primary_muscles]
    avg_primary = sum(primary_needs) // len(primary_needs)
    if avg_primary >= _PRIMARY_FOCUS_THRESHOLD:
        sets = min(MAX_SETS_PER_MOVEMENT, avg_primary)
    else:
        avg_all = sum(required.values()) // len(required)
        sets = min(MAX_SETS_PER_MOVEMENT, max(_MIN_SETS_WHEN_NEEDED, avg_all))

    if movement.is_compound and goal == TrainingGoal.HYPERTROPHY:
        sets = min(sets, _HYPERTROPHY_COMPOUND_CAP)

    if experience == TrainingExperience.BEGINNER:
        sets = min(sets, _BEGINNER_COMPOUND_CAP if movement.is_compound else _BEGINNER_ISOLATION_CAP)
    elif experience == TrainingExperience.ADVANCED:
        sets = min(sets + 1, MAX_SETS_PER_MOVEMENT)

    credit_sets(movement, sets, volume)
    return sets


def credit_sets(movement: MovementDefinition, sets: int, volume: dict[MuscleGroup, MuscleVolume]) -> None:
    """Apply the 1 : 0.5 credit rule for *sets* of *movement*."""
    if sets <= 0:
        return
    half = math.ceil(sets / 2)
    for muscle in movement.primary_muscles:
        if muscle in volume:
            volume[muscle].current_sets += sets
    for muscle in movement.secondary_muscles:
        if muscle in movement.primary_muscles:
            continue
        if muscle in volume:
            volume[muscle].current_sets += half


# ======================================================================
# Composer
# ======================================================================

class StandardWorkoutComposer(WorkoutBuilder):
    """Two-pass (compound, then isolation) workout composer."""

    def __init__(
        self,
        selector: ExerciseSelector = DEFAULT_SELECTOR,
        volume_strategy: VolumeStrategy = DEFAULT_VOLUME_STRATEGY,
        guidelines: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
    ) -> None:
        self.selector = selector
        self.volume_strategy = volume_strategy
        self.guidelines = guidelines

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------

    def weekly_target(self, muscle: MuscleGroup, plan_input: PlanInput, total_weeks: int, week: int = 1) -> int:
        """Weekly sets for *muscle* in *week* of a *total_weeks* plan (≥ 1)."""
        prioritized = plan_input.is_prioritized(muscle)
        recommendation = self.volume_strategy.calculate_volume(
            muscle,
            plan_input.goal,
            plan_input.training_experience.training_age,
            is_emphasized=prioritized,
        )
        sets = self.volume_strategy.calculate_volume_for_week(
            recommendation.sets_per_week, week, total_weeks, is_maintenance=not prioritized,
        )
        return max(1, sets)

    def per_workout_target(
        self,
        muscle: MuscleGroup,
        plan_input: PlanInput,
        total_weeks: int,
        frequency_map: Mapping[MuscleGroup, int],
    ) -> int:
        frequency = frequency_map.get(muscle, 1) or 1
        return math.ceil(self.weekly_target(muscle, plan_input, total_weeks) / frequency)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def compose(
        self,
        plan_input: PlanInput,
        day_number: int,
        *,
        total_weeks: int,
        frequency_map: Mapping[MuscleGroup, int],
        scheduled_date: Optional[datetime.date] = None,
    ) -> ComposedWorkout:
        day_type = day_type_for(plan_input.preferred_split, day_number)
        day_muscles = muscles_for_day_type(day_type)

        def target_for(muscle: MuscleGroup) -> int:
            return self.per_workout_target(muscle, plan_input, total_weeks, frequency_map)

        volume: dict[MuscleGroup, MuscleVolume] = {
            muscle: MuscleVolume(target_sets=target_for(muscle)) for muscle in day_muscles
        }
        limit = exercise_limit(plan_input.workout_duration)
        selected: list[MovementDefinition] = []
        exercises: list[ExerciseInstance] = []

        def add(movement: MovementDefinition, muscle: MuscleGroup, compound: bool) -> None:
            selected.append(movement)
            sets = allocate_sets(
                movement,
                volume,
                goal=plan_input.goal,
                experience=plan_input.training_experience,
                target_for=target_for,
            )
            if sets == 0:
                logger.debug("day %d: %s allocated 0 sets, skipped", day_number, movement.movement_id)
                return
            low, high = rep_range_for(muscle, plan_input.goal, self.guidelines)
            reps = low if compound else (low + high) // 2
            exercises.append(create_exercise_instance(movement, sets, reps))
            logger.debug("day %d: %s x%d @%d reps for %s", day_number, movement.movement_id, sets, reps, muscle.value)

        # Pass 1: compounds
        ordered = sorted(
            day_muscles,
            key=lambda m: (not plan_input.is_prioritized(m), not is_large(m, self.guidelines)),
        )
        for muscle in ordered:
            if len(selected) >= limit:
                break
            if volume[muscle].is_met:
                continue
            movement = self.selector.find_suitable_movement(
                muscle,
                available_equipment=plan_input.available_equipment,
                is_compound=True,
                excluded=selected,
            )
            if movement is not None:
                add(movement, muscle, compound=True)

        # Pass 2: isolation, largest deficit first
        short = sorted(
            (m for m in ordered if not volume[m].is_met),
            key=lambda m: -volume[m].remaining,
        )
        for muscle in short:
            if len(selected) >= limit or len(exercises) >= limit:
                break
            if volume[muscle].is_met:
                continue
            movement = self.selector.find_suitable_movement(
                muscle,
                available_equipment=plan_input.available_equipment,
                is_compound=False,
                excluded=selected,
            )
            if movement is not None:
                add(movement, muscle, compound=False)

        workout = Workout(
            title=day_title(day_type),
            description=day_description(day_type),
            scheduled_date=scheduled_date,
            day_type=day_type,
            exercises=exercises,
        )
        return ComposedWorkout(workout=workout, volume=volume)


DEFAULT_COMPOSER = StandardWorkoutComposer()
