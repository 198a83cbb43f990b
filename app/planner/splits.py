"""
Split tables: which muscles each training day targets.

A split maps a 1-based day number to a :class:`WorkoutDayType`; each day
type has a fixed, ordered muscle list.  The order matters: it is the
tie-breaker when the composer orders muscles, and the first three names
make up the workout description.
"""

from __future__ import annotations

from typing import Mapping

from app.catalog.guidelines import MUSCLE_GUIDELINES
from app.schemas.muscle import MuscleGroup, MuscleSize, TrainingGuidelines
from app.schemas.plan import WorkoutDayType
from app.schemas.plan_input import SplitStyle, TrainingGoal, WorkoutDuration

M = MuscleGroup

_DAY_MUSCLES: dict[WorkoutDayType, tuple[MuscleGroup, ...]] = {
    WorkoutDayType.FULL_BODY: tuple(MuscleGroup),
    WorkoutDayType.UPPER: (M.CHEST, M.BACK, M.SHOULDERS, M.BICEPS, M.TRICEPS, M.FOREARMS, M.TRAPS),
    WorkoutDayType.LOWER: (M.QUADS, M.HAMSTRINGS, M.GLUTES, M.CALVES, M.ABS, M.OBLIQUES, M.LOWER_BACK),
    WorkoutDayType.PUSH: (M.CHEST, M.SHOULDERS, M.TRICEPS),
    WorkoutDayType.PULL: (M.BACK, M.BICEPS, M.FOREARMS, M.TRAPS),
    WorkoutDayType.LEGS: (M.QUADS, M.HAMSTRINGS, M.GLUTES, M.CALVES, M.LOWER_BACK),
}

_DAY_TITLES: dict[WorkoutDayType, str] = {
    WorkoutDayType.FULL_BODY: "Full Body Workout",
    WorkoutDayType.UPPER: "Upper Body Workout",
    WorkoutDayType.LOWER: "Lower Body Workout",
    WorkoutDayType.PUSH: "Push Workout",
    WorkoutDayType.PULL: "Pull Workout",
    WorkoutDayType.LEGS: "Legs Workout",
}

_EXERCISE_LIMITS: dict[WorkoutDuration, int] = {
    WorkoutDuration.SHORT: 4,
    WorkoutDuration.MEDIUM: 6,
    WorkoutDuration.LONG: 8,
}

# (goal, muscle size) -> (min reps, max reps)
_REP_RANGES: dict[tuple[TrainingGoal, MuscleSize], tuple[int, int]] = {
    (TrainingGoal.STRENGTH, MuscleSize.LARGE): (3, 6),
    (TrainingGoal.STRENGTH, MuscleSize.SMALL): (5, 8),
    (TrainingGoal.HYPERTROPHY, MuscleSize.LARGE): (6, 12),
    (TrainingGoal.HYPERTROPHY, MuscleSize.SMALL): (8, 15),
}


def day_type_for(split: SplitStyle, day_number: int) -> WorkoutDayType:
    """Day type of training day *day_number* (1-based) under *split*."""
    if split == SplitStyle.UPPER_LOWER:
        return WorkoutDayType.UPPER if day_number % 2 == 1 else WorkoutDayType.LOWER
    if split == SplitStyle.PUSH_PULL_LEGS:
        return {1: WorkoutDayType.PUSH, 2: WorkoutDayType.PULL, 0: WorkoutDayType.LEGS}[day_number % 3]
    return WorkoutDayType.FULL_BODY


def muscles_for_day_type(day_type: WorkoutDayType) -> tuple[MuscleGroup, ...]:
    return _DAY_MUSCLES[day_type]


def day_title(day_type: WorkoutDayType) -> str:
    return _DAY_TITLES[day_type]


def day_description(day_type: WorkoutDayType) -> str:
    names = [m.display_name for m in _DAY_MUSCLES[day_type][:3]]
    return "Targets: " + ", ".join(names)


def exercise_limit(duration: WorkoutDuration) -> int:
    """Maximum exercises per workout for a session length."""
    return _EXERCISE_LIMITS[duration]


def muscle_frequency_map(split: SplitStyle, days_per_week: int) -> dict[MuscleGroup, int]:
    """How many of the week's training days target each muscle.

    Muscles no day targets are omitted.
    """
    counts: dict[MuscleGroup, int] = {}
    for day in range(1, days_per_week + 1):
        for muscle in _DAY_MUSCLES[day_type_for(split, day)]:
            counts[muscle] = counts.get(muscle, 0) + 1
    return {m: counts[m] for m in MuscleGroup if counts.get(m, 0) > 0}


def rep_range_for(
    muscle: MuscleGroup,
    goal: TrainingGoal,
    guidelines: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
) -> tuple[int, int]:
    """Working rep range for *muscle* under *goal*, by muscle size."""
    return _REP_RANGES[(goal, guidelines[muscle].muscle_size)]
