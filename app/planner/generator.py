"""
Plan generator and progressive-overload engine.

Generation
----------

1. Plan metadata and per-muscle preferences (prioritized muscles grow,
   everything else is maintained).
2. A frequency map: how many training days of the split hit each muscle.
3. The **base week**: one composed workout per training day, dated
   ``start_date + day - 1``, then the enabled post-processing rules.
4. Weeks 2..N: every base workout is cloned (independent copy, fresh
   sets) onto ``start_date + 7 * (week - 1) + day - 1`` and progressively
   overloaded.

Progressive overload
--------------------

Only exercises whose dominant (first) primary muscle is prioritized
progress.  ``w`` is the number of weeks since the base week.

- **beginner** -- +``w`` reps per set for ``w <= 2``; afterwards
  +``(w - 2) // 2`` sets
- **intermediate** -- +``w // 2`` sets
- **advanced** -- +``min(w, 5 - sets)`` sets

Sets never exceed five per exercise.  Loaded movements additionally gain
``increment × w`` on every set (barbell, machine and cable 5.0, dumbbell
2.5); bodyweight movements progress through reps and sets only.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

from pydantic import BaseModel

from app.planner.base import ExerciseSelector, WorkoutBuilder
from app.planner.composer import DEFAULT_COMPOSER, MAX_SETS_PER_MOVEMENT
from app.planner.selector import DEFAULT_SELECTOR
from app.planner.splits import muscle_frequency_map
from app.planner.variety import (
    avoid_back_to_back,
    enforce_equipment_variety,
    enforce_movement_variety,
)
from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGoal, MuscleGroup, MuscleTrainingPreference
from app.schemas.plan import ExerciseInstance, ExerciseSet, TrainingPlan, Workout
from app.schemas.plan_input import PlanInput, TrainingExperience

logger = logging.getLogger(__name__)

# Load added per week of progression, by equipment.
WEIGHT_INCREMENTS: dict[EquipmentType, float] = {
    EquipmentType.BARBELL: 5.0,
    EquipmentType.DUMBBELL: 2.5,
    EquipmentType.MACHINE: 5.0,
    EquipmentType.CABLE: 5.0,
    EquipmentType.BODYWEIGHT: 0.0,
}

_BEGINNER_REP_WEEKS = 2


# ======================================================================
# Configuration
# ======================================================================

class PlanGenerationOptions(BaseModel):
    """Which post-processing rules run on the base week."""

    avoid_back_to_back: bool = False
    enforce_movement_variety: bool = True
    enforce_equipment_variety: bool = True


DEFAULT_OPTIONS = PlanGenerationOptions()


# ======================================================================
# Pure helpers
# ======================================================================

def scheduled_date_for(start_date: datetime.date, week: int, day: int) -> datetime.date:
    """Date of training *day* in *week* (both 1-based)."""
    return start_date + datetime.timedelta(days=7 * (week - 1) + (day - 1))


def muscle_preferences_for(prioritized: Iterable[MuscleGroup]) -> list[MuscleTrainingPreference]:
    chosen = set(prioritized)
    return [
        MuscleTrainingPreference(
            muscle_group=muscle,
            goal=MuscleGoal.GROW if muscle in chosen else MuscleGoal.MAINTAIN,
        )
        for muscle in MuscleGroup
    ]


def clone_workout(workout: Workout, new_date: Optional[datetime.date]) -> Workout:
    """Independent copy of *workout* scheduled on *new_date*.

    Sets are fresh (not completed, completed reps reset); feedback is
    not carried over.  Movement definitions are immutable and shared.
    """
    return Workout(
        title=workout.title,
        description=workout.description,
        scheduled_date=new_date,
        is_complete=False,
        day_type=workout.day_type,
        exercises=[
            ExerciseInstance(
                movement=exercise.movement,
                exercise_type=exercise.exercise_type,
                note=exercise.note,
                sets=[
                    ExerciseSet(weight=s.weight, target_reps=s.target_reps, completed_reps=0, is_complete=False)
                    for s in exercise.sets
                ],
            )
            for exercise in workout.exercises
        ],
    )


def add_progressive_set(exercise: ExerciseInstance) -> None:
    """Append a copy of the last set, not yet performed."""
    if not exercise.sets:
        return
    last = exercise.sets[-1]
    exercise.sets.append(
        ExerciseSet(weight=last.weight, target_reps=last.target_reps, completed_reps=0, is_complete=False)
    )


def _sets_to_add(experience: TrainingExperience, weeks_since_start: int, set_count: int) -> int:
    if experience == TrainingExperience.BEGINNER:
        if weeks_since_start <= _BEGINNER_REP_WEEKS:
            return 0
        return (weeks_since_start - _BEGINNER_REP_WEEKS) // 2
    if experience == TrainingExperience.INTERMEDIATE:
        return weeks_since_start // 2
    return min(weeks_since_start, MAX_SETS_PER_MOVEMENT - set_count)


def apply_progressive_overload(
    workout: Workout,
    weeks_since_start: int,
    experience: TrainingExperience,
    prioritized: Iterable[MuscleGroup],
) -> Workout:
    """Return a copy of *workout* overloaded for *weeks_since_start*."""
    result = workout.model_copy(deep=True)
    chosen = set(prioritized)
    if weeks_since_start <= 0 or not chosen:
        return result

    for exercise in result.exercises:
        if exercise.movement.primary_muscle not in chosen:
            continue

        if experience == TrainingExperience.BEGINNER and weeks_since_start <= _BEGINNER_REP_WEEKS:
            for s in exercise.sets:
                s.target_reps += weeks_since_start

        extra = _sets_to_add(experience, weeks_since_start, exercise.set_count)
        for _ in range(max(0, min(extra, MAX_SETS_PER_MOVEMENT - exercise.set_count))):
            add_progressive_set(exercise)

        increment = WEIGHT_INCREMENTS.get(exercise.movement.equipment, 0.0)
        if increment:
            for s in exercise.sets:
                s.weight += increment * weeks_since_start
    return result


# ======================================================================
# Generator
# ======================================================================

class PlanGenerator:
    """Builds multi-week training plans from a :class:`PlanInput`."""

    def __init__(
        self,
        composer: WorkoutBuilder = DEFAULT_COMPOSER,
        selector: ExerciseSelector = DEFAULT_SELECTOR,
    ) -> None:
        self.composer = composer
        self.selector = selector

    def generate_plan(
        self,
        plan_input: PlanInput,
        weeks: int,
        *,
        start_date: Optional[datetime.date] = None,
        options: PlanGenerationOptions = DEFAULT_OPTIONS,
    ) -> TrainingPlan:
        """Generate a *weeks*-long plan.

        Raises :class:`ValueError` if *weeks* is smaller than one.
        """
        if weeks < 1:
            raise ValueError(f"A plan needs at least one week, got {weeks}")

        start = start_date or datetime.date.today()
        plan = TrainingPlan(
            name=f"Custom {plan_input.goal.value.title()} Plan",
            start_date=start,
            days_per_week=plan_input.training_days_per_week,
            muscle_preferences=muscle_preferences_for(plan_input.prioritized_muscles),
            goal=plan_input.goal,
        )

        base_week = self.generate_base_week(plan_input, weeks, start, options)
        plan.weeks.append(base_week)

        for week in range(2, weeks + 1):
            plan.weeks.append([
                apply_progressive_overload(
                    clone_workout(workout, scheduled_date_for(start, week, day)),
                    week - 1,
                    plan_input.training_experience,
                    plan_input.prioritized_muscles,
                )
                for day, workout in enumerate(base_week, start=1)
            ])

        logger.info(
            "Generated '%s': %d weeks x %d days (%s split, %s)",
            plan.name, weeks, plan.days_per_week,
            plan_input.preferred_split.value, plan_input.training_experience.value,
        )
        return plan

    def generate_base_week(
        self,
        plan_input: PlanInput,
        total_weeks: int,
        start_date: datetime.date,
        options: PlanGenerationOptions = DEFAULT_OPTIONS,
    ) -> list[Workout]:
        frequency = muscle_frequency_map(plan_input.preferred_split, plan_input.training_days_per_week)
        workouts: list[Workout] = []
        for day in range(1, plan_input.training_days_per_week + 1):
            composed = self.composer.compose(
                plan_input,
                day,
                total_weeks=total_weeks,
                frequency_map=frequency,
                scheduled_date=scheduled_date_for(start_date, 1, day),
            )
            workout = composed.workout
            if options.enforce_movement_variety:
                workout = enforce_movement_variety(workout, plan_input, self.selector)
            if options.enforce_equipment_variety:
                workout = enforce_equipment_variety(workout, plan_input, self.selector)
            workouts.append(workout)

        if options.avoid_back_to_back:
            workouts = avoid_back_to_back(workouts, self.selector)
        return workouts


DEFAULT_GENERATOR = PlanGenerator()


def generate_plan(
    plan_input: PlanInput,
    weeks: int,
    *,
    start_date: Optional[datetime.date] = None,
    options: PlanGenerationOptions = DEFAULT_OPTIONS,
) -> TrainingPlan:
    """Generate a plan with the default composer and selector."""
    return DEFAULT_GENERATOR.generate_plan(plan_input, weeks, start_date=start_date, options=options)
