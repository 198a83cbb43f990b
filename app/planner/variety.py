"""
Post-processing rules applied to composed workouts.

- **Adjacent-day conflicts** -- on consecutive calendar days, exercises
  of the second day whose primary muscles were already hit as primaries
  the day before are swapped for an alternative aimed at a fresh muscle.
- **Movement-pattern variety** -- two or more exercises of a pattern and
  none of its complement (horizontal/vertical push, horizontal/vertical
  pull, squat/hinge) trigger one swap to the complementary pattern.
- **Equipment variety** -- with more than two equipment types available,
  a type used twice or more gets one exercise moved to other equipment.

Every rule returns new workouts; inputs are left untouched.  A swap keeps
the replaced exercise's set count and target reps.  When no alternative
exists the exercise stays as it is.
"""

from __future__ import annotations

import datetime
import logging
from typing import Callable, Iterable, Optional, Sequence

from app.planner.base import ExerciseSelector
from app.planner.composer import create_exercise_instance
from app.schemas.movement import EquipmentType, MovementDefinition, MovementPattern
from app.schemas.muscle import MuscleGroup
from app.schemas.plan import ExerciseInstance, Workout
from app.schemas.plan_input import PlanInput

logger = logging.getLogger(__name__)

_DEFAULT_REPS = 10
_MIN_EXERCISES_FOR_VARIETY = 3
_MIN_EQUIPMENT_FOR_VARIETY = 3

PATTERN_PAIRS: list[tuple[MovementPattern, MovementPattern]] = [
    (MovementPattern.HORIZONTAL_PUSH, MovementPattern.VERTICAL_PUSH),
    (MovementPattern.HORIZONTAL_PULL, MovementPattern.VERTICAL_PULL),
    (MovementPattern.SQUAT, MovementPattern.HINGE),
]


# ======================================================================
# Helpers
# ======================================================================

def _replacement(exercise: ExerciseInstance, movement: MovementDefinition) -> ExerciseInstance:
    reps = exercise.sets[0].target_reps if exercise.sets else _DEFAULT_REPS
    return create_exercise_instance(movement, exercise.set_count, reps)


def _ordered_equipment(equipment: Iterable[EquipmentType]) -> list[EquipmentType]:
    chosen = set(equipment)
    return [e for e in EquipmentType if e in chosen]


def _ordered_muscles(muscles: Iterable[MuscleGroup], avoid: set[MuscleGroup]) -> list[MuscleGroup]:
    return [m for m in dict.fromkeys(muscles) if m not in avoid]


# ======================================================================
# Adjacent days
# ======================================================================

def find_alternative_exercise(
    exercise: ExerciseInstance,
    avoid: set[MuscleGroup],
    selector: ExerciseSelector,
    excluded: Sequence[MovementDefinition] = (),
) -> Optional[ExerciseInstance]:
    """Alternative to *exercise* whose primaries avoid *avoid*.

    Targets the exercise's first non-conflicting primary muscle, or, when
    every primary conflicts, its first non-conflicting secondary muscle.
    The alternative keeps the compound/isolation type and the equipment.
    """
    movement = exercise.movement
    targets = _ordered_muscles(movement.primary_muscles, avoid)
    if not targets:
        targets = _ordered_muscles(movement.secondary_muscles, avoid)
    if not targets:
        return None

    candidates = selector.select_exercises(
        targets[0],
        available_equipment=[movement.equipment],
        is_compound=movement.is_compound,
        excluded=[movement, *excluded],
    )
    for candidate in candidates:
        if not avoid.intersection(candidate.primary_muscles):
            return _replacement(exercise, candidate)
    return None


def avoid_back_to_back(workouts: Sequence[Workout], selector: ExerciseSelector) -> list[Workout]:
    """Resolve primary-muscle overlaps between consecutive calendar days.

    Workouts without a scheduled date are returned unchanged and take no
    part in the analysis.  Output order matches input order.
    """
    result = [w.model_copy(deep=True) for w in workouts]
    dated = sorted(
        (w for w in result if w.scheduled_date is not None),
        key=lambda w: w.scheduled_date,
    )
    for previous, current in zip(dated, dated[1:]):
        if current.scheduled_date - previous.scheduled_date != datetime.timedelta(days=1):
            continue
        avoid = previous.primary_muscles
        for index, exercise in enumerate(current.exercises):
            if not avoid.intersection(exercise.movement.primary_muscles):
                continue
            others = [e.movement for e in current.exercises]
            alternative = find_alternative_exercise(exercise, avoid, selector, others)
            if alternative is None:
                logger.debug(
                    "%s: no alternative for %s", current.scheduled_date, exercise.movement.movement_id,
                )
                continue
            logger.debug(
                "%s: %s -> %s (back-to-back)",
                current.scheduled_date, exercise.movement.movement_id, alternative.movement.movement_id,
            )
            current.exercises[index] = alternative
    return result


# ======================================================================
# Within-workout variety
# ======================================================================

def _swap_first(
    workout: Workout,
    candidates: Sequence[int],
    find: Callable[[ExerciseInstance], Optional[MovementDefinition]],
) -> bool:
    for index in candidates:
        exercise = workout.exercises[index]
        movement = find(exercise)
        if movement is not None:
            logger.debug(
                "%s: %s -> %s (variety)", workout.title, exercise.movement.movement_id, movement.movement_id,
            )
            workout.exercises[index] = _replacement(exercise, movement)
            return True
    return False


def enforce_movement_variety(workout: Workout, plan_input: PlanInput, selector: ExerciseSelector) -> Workout:
    """Balance complementary movement patterns inside *workout*."""
    result = workout.model_copy(deep=True)
    if len(result.exercises) < _MIN_EXERCISES_FOR_VARIETY:
        return result

    for first, second in PATTERN_PAIRS:
        for source, target in ((first, second), (second, first)):
            patterns = [e.movement.movement_pattern for e in result.exercises]
            if patterns.count(source) < 2 or patterns.count(target) > 0:
                continue

            def find(exercise: ExerciseInstance, target: MovementPattern = target) -> Optional[MovementDefinition]:
                return selector.find_suitable_movement(
                    exercise.movement.primary_muscle,
                    available_equipment=plan_input.available_equipment,
                    movement_pattern=target,
                    excluded=[e.movement for e in result.exercises],
                )

            indices = [i for i, p in enumerate(patterns) if p == source]
            _swap_first(result, indices, find)
    return result


def enforce_equipment_variety(workout: Workout, plan_input: PlanInput, selector: ExerciseSelector) -> Workout:
    """Spread exercises across equipment when enough types are available."""
    result = workout.model_copy(deep=True)
    available = _ordered_equipment(plan_input.available_equipment)
    if len(available) < _MIN_EQUIPMENT_FOR_VARIETY:
        return result

    usage = [e.movement.equipment for e in result.exercises]
    for equipment in available:
        if usage.count(equipment) < 2:
            continue
        others = [e for e in available if e != equipment]

        def find(exercise: ExerciseInstance, others: list[EquipmentType] = others) -> Optional[MovementDefinition]:
            return selector.find_suitable_movement(
                exercise.movement.primary_muscle,
                available_equipment=others,
                excluded=[e.movement for e in result.exercises],
            )

        indices = [i for i, e in enumerate(usage) if e == equipment]
        _swap_first(result, indices, find)
    return result
