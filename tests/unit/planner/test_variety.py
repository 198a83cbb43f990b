"""Tests for adjacent-day and within-workout variety rules."""

import datetime

from app.catalog.movements import DEFAULT_CATALOG
from app.planner.composer import create_exercise_instance
from app.planner.selector import DEFAULT_SELECTOR
from app.planner.variety import (
    avoid_back_to_back,
    enforce_equipment_variety,
    enforce_movement_variety,
    find_alternative_exercise,
)
from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGroup
from app.schemas.plan import ExerciseInstance, Workout
from app.schemas.plan_input import PlanInput, SplitStyle, TrainingExperience, TrainingGoal

MONDAY = datetime.date(2026, 3, 2)


# ======================================================================
# Helpers
# ======================================================================


def _exercise(movement_id: str, sets: int = 3, reps: int = 8) -> ExerciseInstance:
    return create_exercise_instance(DEFAULT_CATALOG.get_or_raise(movement_id), sets, reps)


def _workout(*movement_ids: str, date=None) -> Workout:
    return Workout(title="Test", scheduled_date=date, exercises=[_exercise(m) for m in movement_ids])


def _ids(workout: Workout) -> list[str]:
    return [e.movement.movement_id for e in workout.exercises]


def _make_input(equipment) -> PlanInput:
    return PlanInput(
        goal=TrainingGoal.HYPERTROPHY,
        training_days_per_week=3,
        available_equipment=frozenset(equipment),
        preferred_split=SplitStyle.FULL_BODY,
        training_experience=TrainingExperience.INTERMEDIATE,
    )


# ======================================================================
# Adjacent days
# ======================================================================


class TestAvoidBackToBack:
    def test_conflict_resolved_on_consecutive_days(self):
        day1 = _workout("barbell_bench_press", date=MONDAY)
        day2 = _workout("dumbbell_bench_press", "dumbbell_row", date=MONDAY + datetime.timedelta(days=1))
        result = avoid_back_to_back([day1, day2], DEFAULT_SELECTOR)

        swapped = result[1].exercises[0]
        assert swapped.movement.movement_id == "arnold_press"
        assert swapped.set_count == 3
        assert swapped.sets[0].target_reps == 8
        assert _ids(result[1])[1] == "dumbbell_row"
        # inputs untouched
        assert _ids(day2) == ["dumbbell_bench_press", "dumbbell_row"]

    def test_alternative_keeps_equipment_and_type(self):
        day1 = _workout("barbell_bench_press", date=MONDAY)
        day2 = _workout("dumbbell_bench_press", date=MONDAY + datetime.timedelta(days=1))
        original = day2.exercises[0].movement
        swapped = avoid_back_to_back([day1, day2], DEFAULT_SELECTOR)[1].exercises[0].movement
        assert swapped.equipment == original.equipment
        assert swapped.is_compound == original.is_compound

    def test_gap_day_leaves_workouts_alone(self):
        day1 = _workout("barbell_bench_press", date=MONDAY)
        day3 = _workout("dumbbell_bench_press", date=MONDAY + datetime.timedelta(days=2))
        result = avoid_back_to_back([day1, day3], DEFAULT_SELECTOR)
        assert _ids(result[1]) == ["dumbbell_bench_press"]

    def test_undated_workouts_skipped(self):
        result = avoid_back_to_back(
            [_workout("barbell_bench_press"), _workout("dumbbell_bench_press")], DEFAULT_SELECTOR,
        )
        assert _ids(result[1]) == ["dumbbell_bench_press"]

    def test_input_order_preserved(self):
        later = _workout("dumbbell_bench_press", date=MONDAY + datetime.timedelta(days=1))
        earlier = _workout("barbell_bench_press", date=MONDAY)
        result = avoid_back_to_back([later, earlier], DEFAULT_SELECTOR)
        assert _ids(result[1]) == ["barbell_bench_press"]
        assert _ids(result[0]) == ["arnold_press"]

    def test_no_alternative_keeps_exercise(self):
        day1 = _workout("plank", date=MONDAY)
        day2 = _workout("leg_raise", date=MONDAY + datetime.timedelta(days=1))
        result = avoid_back_to_back([day1, day2], DEFAULT_SELECTOR)
        assert _ids(result[1]) == ["leg_raise"]

    def test_find_alternative_without_sets(self):
        exercise = ExerciseInstance(movement=DEFAULT_CATALOG.get_or_raise("dumbbell_bench_press"))
        alternative = find_alternative_exercise(exercise, {MuscleGroup.CHEST}, DEFAULT_SELECTOR)
        assert alternative is not None
        assert alternative.sets == []


# ======================================================================
# Movement-pattern variety
# ======================================================================


class TestMovementVariety:
    def test_duplicate_pull_pattern_swapped(self):
        workout = _workout("bent_over_row", "dumbbell_row", "barbell_back_squat")
        result = enforce_movement_variety(workout, _make_input(EquipmentType), DEFAULT_SELECTOR)
        assert _ids(result) == ["lat_pulldown", "dumbbell_row", "barbell_back_squat"]
        assert result.exercises[0].set_count == 3
        assert _ids(workout)[0] == "bent_over_row"

    def test_balanced_workout_unchanged(self):
        workout = _workout("bent_over_row", "lat_pulldown", "barbell_back_squat")
        result = enforce_movement_variety(workout, _make_input(EquipmentType), DEFAULT_SELECTOR)
        assert _ids(result) == _ids(workout)

    def test_needs_three_exercises(self):
        workout = _workout("bent_over_row", "dumbbell_row")
        result = enforce_movement_variety(workout, _make_input(EquipmentType), DEFAULT_SELECTOR)
        assert _ids(result) == ["bent_over_row", "dumbbell_row"]


# ======================================================================
# Equipment variety
# ======================================================================


class TestEquipmentVariety:
    def test_repeated_equipment_spread(self):
        equipment = [EquipmentType.BARBELL, EquipmentType.DUMBBELL, EquipmentType.CABLE]
        workout = _workout("barbell_bench_press", "barbell_back_squat", "dumbbell_row")
        result = enforce_equipment_variety(workout, _make_input(equipment), DEFAULT_SELECTOR)
        assert _ids(result) == ["dumbbell_incline_press", "barbell_back_squat", "dumbbell_row"]

    def test_two_equipment_types_is_not_enough(self):
        equipment = [EquipmentType.BARBELL, EquipmentType.DUMBBELL]
        workout = _workout("barbell_bench_press", "barbell_back_squat", "dumbbell_row")
        result = enforce_equipment_variety(workout, _make_input(equipment), DEFAULT_SELECTOR)
        assert _ids(result) == _ids(workout)
