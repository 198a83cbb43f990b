"""Tests for feedback-driven week-to-week progression.

Weeks are built by hand from catalogue movements so every rule can be
checked in isolation.
"""

import datetime
from typing import Optional

import pytest

from app.catalog.movements import DEFAULT_CATALOG
from app.planner.composer import create_exercise_instance
from app.planner.feedback import (
    apply_feedback_progression,
    closest_weight_increment,
    progress_plan_week,
    updated_weight,
)
from app.planner.generator import generate_plan
from app.schemas.feedback import (
    ExerciseFeedback,
    ExerciseIntensity,
    FatigueLevel,
    JointArea,
    PostWorkoutFeedback,
    PreWorkoutFeedback,
    SetVolumeRating,
)
from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGoal, MuscleGroup, MuscleTrainingPreference
from app.schemas.plan import ExerciseInstance, Workout
from app.schemas.plan_input import (
    PlanInput,
    SplitStyle,
    TrainingExperience,
    TrainingGoal,
)

MONDAY = datetime.date(2026, 3, 2)
CH = MuscleGroup.CHEST

GROW_CHEST = [MuscleTrainingPreference(muscle_group=CH, goal=MuscleGoal.GROW)]
GROW_BACK = [MuscleTrainingPreference(muscle_group=MuscleGroup.BACK, goal=MuscleGoal.GROW)]


# ======================================================================
# Helpers
# ======================================================================


def _ex(
    movement_id: str,
    sets: int = 3,
    weight: float = 0.0,
    intensity: Optional[ExerciseIntensity] = None,
    set_volume: SetVolumeRating = SetVolumeRating.MODERATE,
) -> ExerciseInstance:
    exercise = create_exercise_instance(DEFAULT_CATALOG.get_or_raise(movement_id), sets, 8, weight)
    if intensity is not None:
        exercise.feedback = ExerciseFeedback(intensity=intensity, set_volume=set_volume)
    return exercise


def _day(offset: int, *exercises: ExerciseInstance, pre=None, post=None) -> Workout:
    return Workout(
        title=f"Day {offset + 1}",
        scheduled_date=MONDAY + datetime.timedelta(days=offset),
        exercises=list(exercises),
        pre_feedback=pre,
        post_feedback=post,
    )


def _next_week(week: list[Workout]) -> list[Workout]:
    """Fresh copy of *week* one week later, feedback stripped."""
    result = []
    for workout in week:
        clone = workout.model_copy(deep=True)
        clone.scheduled_date = workout.scheduled_date + datetime.timedelta(days=7)
        clone.pre_feedback = None
        clone.post_feedback = None
        for exercise in clone.exercises:
            exercise.feedback = None
        result.append(clone)
    return result


def _set_counts(week: list[Workout]) -> list[list[int]]:
    return [[e.set_count for e in w.exercises] for w in week]


def _progression(report, muscle):
    return next(p for p in report.muscle_progressions if p.muscle == muscle)


# ======================================================================
# Weight helpers
# ======================================================================


class TestWeightHelpers:
    @pytest.mark.parametrize(
        "weight, expected",
        [(0.0, 0.0), (11.2, 10.0), (11.25, 12.5), (12.4, 12.5), (61.0, 60.0)],
    )
    def test_closest_weight_increment(self, weight, expected):
        assert closest_weight_increment(weight) == expected

    @pytest.mark.parametrize(
        "current, intensity, equipment, expected",
        [
            (100.0, ExerciseIntensity.TOO_EASY, EquipmentType.BARBELL, 110.0),
            (20.0, ExerciseIntensity.TOO_EASY, EquipmentType.DUMBBELL, 25.0),
            (100.0, ExerciseIntensity.MODERATE, EquipmentType.BARBELL, 105.0),
            (20.0, ExerciseIntensity.MODERATE, EquipmentType.CABLE, 22.5),
            (100.0, ExerciseIntensity.CHALLENGING, EquipmentType.BARBELL, 100.0),
            (100.0, ExerciseIntensity.FAILED, EquipmentType.BARBELL, 95.0),
            (20.0, ExerciseIntensity.FAILED, EquipmentType.MACHINE, 17.5),
            (4.0, ExerciseIntensity.TOO_EASY, EquipmentType.DUMBBELL, 4.0),
        ],
    )
    def test_updated_weight(self, current, intensity, equipment, expected):
        assert updated_weight(current, intensity, equipment) == expected

    def test_updated_weight_snaps_to_increment(self):
        assert updated_weight(21.0, ExerciseIntensity.MODERATE, EquipmentType.DUMBBELL) == 22.5


# ======================================================================
# Soreness
# ======================================================================


class TestSoreness:
    def test_previous_session_loses_a_set(self):
        week = [
            _day(0, _ex("barbell_bench_press")),
            _day(2, _ex("dumbbell_bench_press"), pre=PreWorkoutFeedback(sore_muscles=[CH])),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week))
        assert _set_counts(updated) == [[2], [3]]
        assert _progression(report, CH).sets_removed == 1
        assert any(line.startswith("SORENESS") for line in report.log)

    def test_no_earlier_session(self):
        week = [
            _day(0, _ex("barbell_bench_press"), pre=PreWorkoutFeedback(sore_muscles=[CH])),
            _day(2, _ex("dumbbell_bench_press")),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_BACK)
        assert _set_counts(updated) == [[3], [3]]
        assert _progression(report, CH).sets_removed == 0

    def test_single_set_not_removed(self):
        week = [
            _day(0, _ex("barbell_bench_press", sets=1)),
            _day(2, _ex("dumbbell_bench_press"), pre=PreWorkoutFeedback(sore_muscles=[CH])),
        ]
        updated, _ = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_BACK)
        assert updated[0].exercises[0].set_count == 1

    def test_sore_muscle_not_progressed(self):
        week = [
            _day(0, _ex("barbell_bench_press")),
            _day(2, _ex("dumbbell_bench_press"), pre=PreWorkoutFeedback(sore_muscles=[CH])),
        ]
        _, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert _progression(report, CH).sets_added == 0


# ======================================================================
# Joint pain
# ======================================================================


class TestJointPain:
    def test_knee_pain_flags_leg_exercises(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press"),
                _ex("barbell_back_squat"),
                pre=PreWorkoutFeedback(joint_pain_areas=[JointArea.KNEE]),
            ),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week))
        bench, squat = updated[0].exercises
        assert squat.show_joint_warning
        assert not bench.show_joint_warning
        assert squat.set_count == 3
        assert bench.set_count == 4

        [warning] = report.joint_warnings
        assert warning.pain_area == JointArea.KNEE
        assert warning.affected_muscles == [MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS, MuscleGroup.CALVES]


# ======================================================================
# Fatigue
# ======================================================================


class TestFatigue:
    def test_drained_session_loses_two_sets(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press", sets=4),
                _ex("dumbbell_curl", sets=2),
                post=PostWorkoutFeedback(session_fatigue=FatigueLevel.COMPLETELY_DRAINED),
            ),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week))
        assert _set_counts(updated) == [[2, 2]]
        assert report.fatigue_reduced_workouts == [0]

    def test_single_set_exercises_left_alone(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press", sets=1),
                post=PostWorkoutFeedback(session_fatigue=FatigueLevel.COMPLETELY_DRAINED),
            ),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_BACK)
        assert _set_counts(updated) == [[1]]
        assert report.fatigue_reduced_workouts == []

    def test_wiped_is_not_drained(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press", sets=4),
                post=PostWorkoutFeedback(session_fatigue=FatigueLevel.WIPED),
            ),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_BACK)
        assert _set_counts(updated) == [[4]]
        assert report.fatigue_reduced_workouts == []


# ======================================================================
# Volume progression
# ======================================================================


class TestVolumeProgression:
    def test_fewest_sets_first_up_to_two(self):
        week = [_day(0, _ex("barbell_bench_press", sets=3), _ex("dumbbell_fly", sets=2))]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert _set_counts(updated) == [[4, 3]]
        progression = _progression(report, CH)
        assert progression.sets_added == 2
        assert progression.is_progressing
        assert progression.net_change == 2

    def test_only_grow_muscles_progress(self):
        week = [_day(0, _ex("barbell_bench_press"), _ex("dumbbell_curl"))]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert _set_counts(updated) == [[4, 3]]
        assert _progression(report, MuscleGroup.BICEPS).sets_added == 0

    def test_no_preferences_means_everything_grows(self):
        week = [_day(0, _ex("barbell_bench_press"), _ex("dumbbell_curl"))]
        updated, _ = apply_feedback_progression(week, _next_week(week))
        assert _set_counts(updated) == [[4, 4]]

    def test_too_much_rating_removes_a_set(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press", intensity=ExerciseIntensity.CHALLENGING,
                    set_volume=SetVolumeRating.TOO_MUCH),
                _ex("dumbbell_fly", sets=2),
            ),
        ]
        updated, report = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert _set_counts(updated) == [[2, 3]]
        assert _progression(report, CH).sets_added == 1

    def test_exercise_set_cap(self):
        week = [_day(0, _ex("barbell_bench_press", sets=5), _ex("dumbbell_fly", sets=5))]
        updated, _ = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert _set_counts(updated) == [[5, 5]]

    def test_muscle_at_ceiling_not_tracked(self):
        week = [_day(0, _ex("back_extension", sets=5), _ex("superman", sets=5))]
        _, report = apply_feedback_progression(week, _next_week(week))
        assert MuscleGroup.LOWER_BACK not in [p.muscle for p in report.muscle_progressions]
        assert any("ceiling" in line for line in report.log)


# ======================================================================
# Weight progression
# ======================================================================


class TestWeightProgression:
    def test_intensity_moves_weights(self):
        week = [
            _day(
                0,
                _ex("barbell_bench_press", weight=60.0, intensity=ExerciseIntensity.TOO_EASY),
                _ex("dumbbell_fly", weight=10.0, intensity=ExerciseIntensity.MODERATE),
                _ex("dumbbell_curl", weight=4.0, intensity=ExerciseIntensity.TOO_EASY),
                _ex("push_ups", intensity=ExerciseIntensity.TOO_EASY),
            ),
        ]
        updated, _ = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_BACK)
        weights = [[s.weight for s in e.sets] for e in updated[0].exercises]
        assert weights == [[70.0] * 3, [12.5] * 3, [4.0] * 3, [0.0] * 3]

    def test_failed_lowers_weight(self):
        week = [_day(0, _ex("dumbbell_row", weight=20.0, intensity=ExerciseIntensity.FAILED))]
        updated, _ = apply_feedback_progression(week, _next_week(week), muscle_preferences=GROW_CHEST)
        assert all(s.weight == 17.5 for s in updated[0].exercises[0].sets)


# ======================================================================
# Entry points
# ======================================================================


class TestEntryPoints:
    def test_inputs_not_modified(self):
        week = [_day(0, _ex("barbell_bench_press", weight=60.0, intensity=ExerciseIntensity.TOO_EASY))]
        following = _next_week(week)
        apply_feedback_progression(week, following)
        assert following[0].exercises[0].set_count == 3
        assert following[0].exercises[0].sets[0].weight == 60.0

    def test_missing_week_is_not_an_error(self):
        following = [_day(7, _ex("barbell_bench_press"))]
        updated, report = apply_feedback_progression([], following)
        assert _set_counts(updated) == [[3]]
        assert report.muscle_progressions == []
        assert report.log

    def test_progress_plan_week(self):
        plan_input = PlanInput(
            goal=TrainingGoal.HYPERTROPHY,
            prioritized_muscles=frozenset({CH}),
            training_days_per_week=3,
            available_equipment=frozenset(EquipmentType),
            preferred_split=SplitStyle.PUSH_PULL_LEGS,
            training_experience=TrainingExperience.INTERMEDIATE,
        )
        plan = generate_plan(plan_input, 2, start_date=MONDAY)
        before = _set_counts(plan.week(2))

        progressed, report = progress_plan_week(plan, 1)

        assert _set_counts(plan.week(2)) == before
        assert progressed.week_count == 2
        assert _progression(report, CH).sets_added > 0
        assert sum(map(sum, _set_counts(progressed.week(2)))) > sum(map(sum, before))

    @pytest.mark.parametrize("week", [0, 2])
    def test_progress_plan_week_out_of_range(self, week):
        plan_input = PlanInput(
            goal=TrainingGoal.STRENGTH,
            training_days_per_week=2,
            available_equipment=frozenset(EquipmentType),
            preferred_split=SplitStyle.UPPER_LOWER,
            training_experience=TrainingExperience.BEGINNER,
        )
        plan = generate_plan(plan_input, 2, start_date=MONDAY)
        with pytest.raises(ValueError):
            progress_plan_week(plan, week)
