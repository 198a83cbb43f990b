"""
Feedback-driven progression between two consecutive weeks.

Run once a week is finished: the feedback attached to that week's
workouts adjusts a copy of the following week.

Rules, in order
---------------

1. **Volume baseline** -- weekly sets per muscle (primary full credit,
   secondary half, rounded up).  Muscles below their hypertrophy ceiling
   are candidates for progression.
2. **Soreness** -- a muscle reported sore before a workout that trains
   it means the previous session for that muscle was too much: next week
   that session loses one set on its first exercise for the muscle, and
   the muscle does not progress.
3. **Joint pain** -- exercises touching muscles around a painful joint
   are flagged next week and those muscles do not progress.
4. **Fatigue** -- a ``completely_drained`` session loses two sets from
   its biggest exercises next week and is left out of progression.
5. **Volume progression** -- prioritized muscles gain up to two sets a
   week, never past the hypertrophy ceiling or five sets per exercise,
   starting with the exercises that have the fewest sets.  An exercise
   rated ``too_much`` loses a set instead.
6. **Load** -- intensity feedback moves the working weight
   (see :data:`_WEIGHT_STEPS`).  Loads under 5 and bodyweight movements
   are left alone.

Workouts are matched between weeks by position; exercises by movement.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping, Optional, Sequence

from app.catalog.guidelines import MUSCLE_GUIDELINES, get_guidelines
from app.planner.composer import MAX_SETS_PER_MOVEMENT
from app.planner.generator import add_progressive_set
from app.planner.stats import weekly_volume_by_muscle
from app.schemas.feedback import (
    ExerciseIntensity,
    FatigueLevel,
    JointArea,
    JointWarning,
    MuscleProgression,
    ProgressionReport,
    SetVolumeRating,
)
from app.schemas.movement import EquipmentType
from app.schemas.muscle import (
    MuscleGoal,
    MuscleGroup,
    MuscleTrainingPreference,
    TrainingGuidelines,
)
from app.schemas.plan import ExerciseInstance, TrainingPlan, Workout

logger = logging.getLogger(__name__)

M = MuscleGroup

_JOINT_MUSCLES: dict[JointArea, list[MuscleGroup]] = {
    JointArea.KNEE: [M.QUADS, M.HAMSTRINGS, M.CALVES],
    JointArea.SHOULDER: [M.CHEST, M.SHOULDERS, M.BACK, M.TRICEPS],
    JointArea.ELBOW: [M.BICEPS, M.TRICEPS, M.FOREARMS],
}

_MAX_SETS_ADDED_PER_WEEK = 2
_FATIGUE_SETS_REMOVED = 2
_MIN_PROGRESSABLE_WEIGHT = 5.0

# (intensity, is barbell) -> load change
_WEIGHT_STEPS: dict[tuple[ExerciseIntensity, bool], float] = {
    (ExerciseIntensity.TOO_EASY, True): 10.0,
    (ExerciseIntensity.TOO_EASY, False): 5.0,
    (ExerciseIntensity.MODERATE, True): 5.0,
    (ExerciseIntensity.MODERATE, False): 2.5,
    (ExerciseIntensity.FAILED, True): -5.0,
    (ExerciseIntensity.FAILED, False): -2.5,
}


# ======================================================================
# Weight helpers
# ======================================================================

def closest_weight_increment(weight: float, step: float = 2.5) -> float:
    """Round *weight* to the nearest multiple of *step* (halves round up)."""
    return math.floor(weight / step + 0.5) * step


def updated_weight(current: float, intensity: ExerciseIntensity, equipment: EquipmentType) -> float:
    """Next working weight after *intensity* feedback."""
    if current < _MIN_PROGRESSABLE_WEIGHT:
        return current
    step = _WEIGHT_STEPS.get((intensity, equipment == EquipmentType.BARBELL), 0.0)
    if not step:
        return current
    return closest_weight_increment(max(0.0, current + step))


# ======================================================================
# Helpers
# ======================================================================

def _find_exercise(workout: Workout, movement_id: str) -> Optional[ExerciseInstance]:
    for exercise in workout.exercises:
        if exercise.movement.movement_id == movement_id:
            return exercise
    return None


def _grow_muscles(preferences: Iterable[MuscleTrainingPreference]) -> set[MuscleGroup]:
    return {p.muscle_group for p in preferences if p.goal == MuscleGoal.GROW}


def _date_order(week: Sequence[Workout]) -> list[int]:
    """Indices of *week* sorted by date, undated workouts last."""
    return sorted(
        range(len(week)),
        key=lambda i: (week[i].scheduled_date is None, week[i].scheduled_date or 0),
    )


# ======================================================================
# Rules
# ======================================================================

def _process_soreness(
    current_week: Sequence[Workout],
    next_week: list[Workout],
    progressions: dict[MuscleGroup, MuscleProgression],
    log: list[str],
) -> set[MuscleGroup]:
    """Returns the muscles whose volume was reduced."""
    order = [i for i in _date_order(current_week) if current_week[i].scheduled_date is not None]
    reduced: set[MuscleGroup] = set()

    for position, index in enumerate(order):
        workout = current_week[index]
        if workout.pre_feedback is None:
            continue
        for muscle in workout.pre_feedback.sore_muscles:
            if muscle in reduced:
                continue
            if muscle not in workout.primary_muscles:
                continue
            log.append(f"SORENESS: {muscle.value} reported sore before '{workout.title}'")

            previous = [
                i for i in order[:position]
                if muscle in current_week[i].primary_muscles
                and current_week[i].scheduled_date < workout.scheduled_date
            ]
            if not previous:
                log.append(f"SORENESS: no earlier workout trains {muscle.value}")
                continue
            prev_index = previous[-1]
            if prev_index >= len(next_week):
                continue

            source = next(
                e for e in current_week[prev_index].exercises if muscle in e.movement.primary_muscles
            )
            target = _find_exercise(next_week[prev_index], source.movement.movement_id)
            if target is None:
                continue
            if target.set_count <= 1:
                log.append(f"SORENESS: cannot reduce {target.movement.name}, only one set left")
                continue

            target.sets.pop()
            reduced.add(muscle)
            if muscle in progressions:
                progressions[muscle].sets_removed += 1
            log.append(
                f"SORENESS: removed 1 set from {target.movement.name} in "
                f"'{current_week[prev_index].title}' for {muscle.value}"
            )
    return reduced


def _process_joint_pain(
    current_week: Sequence[Workout],
    next_week: list[Workout],
    log: list[str],
) -> list[JointWarning]:
    reported = {
        area for w in current_week if w.pre_feedback is not None
        for area in w.pre_feedback.joint_pain_areas
    }
    warnings: list[JointWarning] = []
    for area in JointArea:
        if area not in reported:
            continue
        affected = _JOINT_MUSCLES[area]
        warnings.append(JointWarning(pain_area=area, affected_muscles=affected))
        for workout in next_week:
            for exercise in workout.exercises:
                if set(affected).intersection(exercise.movement.muscle_groups):
                    exercise.show_joint_warning = True
                    log.append(f"JOINT PAIN: flagged {exercise.movement.name} ({area.value})")
    return warnings


def _process_fatigue(
    current_week: Sequence[Workout],
    next_week: list[Workout],
    log: list[str],
) -> list[int]:
    reduced: list[int] = []
    for index, workout in enumerate(current_week):
        if index >= len(next_week):
            continue
        if workout.post_feedback is None:
            continue
        if workout.post_feedback.session_fatigue != FatigueLevel.COMPLETELY_DRAINED:
            continue

        log.append(f"FATIGUE: '{workout.title}' reported completely drained")
        remaining = _FATIGUE_SETS_REMOVED
        for exercise in sorted(next_week[index].exercises, key=lambda e: -e.set_count):
            if remaining <= 0:
                break
            removable = min(remaining, exercise.set_count - 1)
            if removable <= 0:
                continue
            del exercise.sets[-removable:]
            remaining -= removable
            log.append(f"FATIGUE: removed {removable} set(s) from {exercise.movement.name}")
        if remaining < _FATIGUE_SETS_REMOVED:
            reduced.append(index)
    return reduced


def _apply_volume_progression(
    current_week: Sequence[Workout],
    next_week: list[Workout],
    progressions: dict[MuscleGroup, MuscleProgression],
    blocked: set[MuscleGroup],
    skipped_workouts: set[int],
    grow: set[MuscleGroup],
    guidelines: Mapping[MuscleGroup, TrainingGuidelines],
    log: list[str],
) -> None:
    trimmed: set[tuple[int, str]] = set()

    for muscle in MuscleGroup:
        progression = progressions.get(muscle)
        if progression is None:
            continue
        if muscle in blocked or progression.sets_removed > 0:
            log.append(f"VOLUME: {muscle.value} held (recovery feedback)")
            continue
        if grow and muscle not in grow:
            continue

        ceiling = get_guidelines(muscle, guidelines).hypertrophy_sets.maximum
        allowed = min(_MAX_SETS_ADDED_PER_WEEK, ceiling - progression.current_volume)
        if allowed <= 0:
            continue

        slots = [
            (w_index, exercise)
            for w_index, workout in enumerate(next_week)
            if w_index not in skipped_workouts
            for exercise in workout.exercises
            if not exercise.show_joint_warning and muscle in exercise.movement.primary_muscles
        ]
        slots.sort(key=lambda slot: slot[1].set_count)

        for w_index, exercise in slots:
            if progression.sets_added >= allowed:
                break
            if exercise.set_count >= MAX_SETS_PER_MOVEMENT:
                continue

            movement_id = exercise.movement.movement_id
            previous = _find_exercise(current_week[w_index], movement_id) if w_index < len(current_week) else None
            if previous is not None and previous.feedback is not None \
                    and previous.feedback.set_volume == SetVolumeRating.TOO_MUCH:
                if (w_index, movement_id) not in trimmed and exercise.set_count > 1:
                    exercise.sets.pop()
                    trimmed.add((w_index, movement_id))
                    log.append(f"VOLUME: {exercise.movement.name} rated too much, removed 1 set")
                continue

            add_progressive_set(exercise)
            progression.sets_added += 1
            log.append(f"VOLUME: +1 set on {exercise.movement.name} for {muscle.value}")


def _apply_weight_progression(
    current_week: Sequence[Workout],
    next_week: list[Workout],
    log: list[str],
) -> None:
    for index, workout in enumerate(current_week):
        if index >= len(next_week):
            continue
        for exercise in workout.exercises:
            if exercise.movement.equipment == EquipmentType.BODYWEIGHT:
                continue
            if exercise.feedback is None or not exercise.sets:
                continue
            following = _find_exercise(next_week[index], exercise.movement.movement_id)
            if following is None:
                continue

            for set_index, next_set in enumerate(following.sets):
                reference = exercise.sets[min(set_index, len(exercise.sets) - 1)].weight
                weight = updated_weight(reference, exercise.feedback.intensity, exercise.movement.equipment)
                if weight != reference:
                    next_set.weight = weight
                    log.append(
                        f"WEIGHT: {exercise.movement.name} set {set_index + 1} "
                        f"{reference:g} -> {weight:g}"
                    )


# ======================================================================
# Entry points
# ======================================================================

def apply_feedback_progression(
    current_week: Sequence[Workout],
    next_week: Sequence[Workout],
    *,
    muscle_preferences: Iterable[MuscleTrainingPreference] = (),
    guidelines: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
) -> tuple[list[Workout], ProgressionReport]:
    """Adjust a copy of *next_week* from the feedback in *current_week*.

    Without muscle preferences (or without any ``grow`` muscle) every
    muscle counts as prioritized.  Returns the adjusted week and a
    report; the inputs are not modified.
    """
    updated = [w.model_copy(deep=True) for w in next_week]
    if not current_week or not updated:
        return updated, ProgressionReport(log=["Need two weeks of workouts to apply progression"])

    log: list[str] = []
    volume = weekly_volume_by_muscle(current_week)
    progressions: dict[MuscleGroup, MuscleProgression] = {}
    for muscle, sets in volume.items():
        ceiling = get_guidelines(muscle, guidelines).hypertrophy_sets.maximum
        if sets < ceiling:
            progressions[muscle] = MuscleProgression(muscle=muscle, current_volume=sets)
        else:
            log.append(f"VOLUME: {muscle.value} at {sets} sets, already at ceiling {ceiling}")

    sore = _process_soreness(current_week, updated, progressions, log)
    warnings = _process_joint_pain(current_week, updated, log)
    fatigued = _process_fatigue(current_week, updated, log)

    blocked = sore | {m for w in warnings for m in w.affected_muscles}
    _apply_volume_progression(
        current_week,
        updated,
        progressions,
        blocked,
        set(fatigued),
        _grow_muscles(muscle_preferences),
        guidelines,
        log,
    )
    _apply_weight_progression(current_week, updated, log)

    for line in log:
        logger.debug(line)

    report = ProgressionReport(
        muscle_progressions=list(progressions.values()),
        joint_warnings=warnings,
        fatigue_reduced_workouts=fatigued,
        log=log,
    )
    return updated, report


def progress_plan_week(
    plan: TrainingPlan,
    week_number: int,
    guidelines: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
) -> tuple[TrainingPlan, ProgressionReport]:
    """Apply the feedback of *week_number* to the following week of *plan*.

    Raises :class:`ValueError` if *week_number* has no following week.
    """
    current = plan.week(week_number)
    following = plan.week(week_number + 1)
    updated, report = apply_feedback_progression(
        current,
        following,
        muscle_preferences=plan.muscle_preferences,
        guidelines=guidelines,
    )
    result = plan.model_copy(deep=True)
    result.weeks[week_number] = updated
    logger.info("Applied week %d feedback to week %d of '%s'", week_number, week_number + 1, plan.name)
    return result, report
