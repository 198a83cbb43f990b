"""Tests for weekly volume accounting and plan summaries."""

import datetime

from app.catalog.movements import DEFAULT_CATALOG
from app.planner.composer import create_exercise_instance
from app.planner.generator import generate_plan
from app.planner.stats import summarize_plan, weekly_volume_by_muscle
from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGroup
from app.schemas.plan import TrainingPlan, Workout
from app.schemas.plan_input import PlanInput, SplitStyle, TrainingExperience, TrainingGoal

START = datetime.date(2026, 1, 5)


def _workout(*pairs) -> Workout:
    return Workout(
        title="Test",
        exercises=[
            create_exercise_instance(DEFAULT_CATALOG.get_or_raise(movement_id), sets, 8)
            for movement_id, sets in pairs
        ],
    )


class TestWeeklyVolume:
    def test_primary_full_secondary_half(self):
        volume = weekly_volume_by_muscle([_workout(("barbell_bench_press", 4), ("chin_ups", 3))])
        assert volume == {
            MuscleGroup.CHEST: 4,
            MuscleGroup.BACK: 3,
            MuscleGroup.BICEPS: 3,
            MuscleGroup.TRICEPS: 2,
            MuscleGroup.SHOULDERS: 2,
            MuscleGroup.FOREARMS: 2,
            MuscleGroup.TRAPS: 2,
        }

    def test_keys_in_muscle_group_order(self):
        volume = weekly_volume_by_muscle([_workout(("barbell_bench_press", 4), ("chin_ups", 3))])
        assert list(volume) == [m for m in MuscleGroup if m in volume]

    def test_summed_across_workouts(self):
        volume = weekly_volume_by_muscle([
            _workout(("barbell_bench_press", 3)),
            _workout(("dumbbell_bench_press", 3)),
        ])
        assert volume[MuscleGroup.CHEST] == 6
        assert volume[MuscleGroup.SHOULDERS] == 4

    def test_empty(self):
        assert weekly_volume_by_muscle([]) == {}


class TestSummarizePlan:
    def test_generated_plan(self):
        plan_input = PlanInput(
            goal=TrainingGoal.STRENGTH,
            prioritized_muscles=frozenset({MuscleGroup.QUADS}),
            training_days_per_week=3,
            available_equipment=frozenset(EquipmentType),
            preferred_split=SplitStyle.FULL_BODY,
            training_experience=TrainingExperience.ADVANCED,
        )
        plan = generate_plan(plan_input, 4, start_date=START)
        summary = summarize_plan(plan)

        assert summary.name == plan.name
        assert summary.start_date == START
        assert summary.end_date == START + datetime.timedelta(days=23)
        assert summary.total_workouts == 12
        assert [w.week for w in summary.weeks] == [1, 2, 3, 4]
        for week_summary, week in zip(summary.weeks, plan.weeks):
            assert week_summary.workouts == 3
            assert week_summary.total_sets == sum(w.total_sets() for w in week)
        assert summary.weeks[-1].sets_by_muscle[MuscleGroup.QUADS] >= summary.weeks[0].sets_by_muscle[MuscleGroup.QUADS]

    def test_undated_plan_has_no_end_date(self):
        plan = TrainingPlan(name="Manual", start_date=START, days_per_week=1, weeks=[[_workout()]])
        summary = summarize_plan(plan)
        assert summary.end_date is None
        assert summary.weeks[0].total_sets == 0
