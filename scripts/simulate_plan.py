"""What does an 8-week push/pull/legs plan look like?

Generates a plan for an intermediate lifter prioritizing chest and back,
prints the first and last week, then feeds back a hard week 1 and shows
how the progression engine adjusts week 2.

Usage:
    python scripts/simulate_plan.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.logging import configure_logging
from app.planner.feedback import progress_plan_week
from app.planner.generator import generate_plan
from app.planner.stats import summarize_plan
from app.schemas.feedback import (
    ExerciseFeedback,
    ExerciseIntensity,
    FatigueLevel,
    PostWorkoutFeedback,
    PreWorkoutFeedback,
    SetVolumeRating,
)
from app.schemas.movement import EquipmentType
from app.schemas.muscle import MuscleGroup
from app.schemas.plan_input import (
    PlanInput,
    SplitStyle,
    TrainingExperience,
    TrainingGoal,
    WorkoutDuration,
)

START = datetime.date(2026, 1, 5)
WEEKS = 8

PLAN_INPUT = PlanInput(
    goal=TrainingGoal.HYPERTROPHY,
    prioritized_muscles=frozenset({MuscleGroup.CHEST, MuscleGroup.BACK}),
    training_days_per_week=3,
    workout_duration=WorkoutDuration.MEDIUM,
    available_equipment=frozenset({
        EquipmentType.BARBELL,
        EquipmentType.DUMBBELL,
        EquipmentType.CABLE,
        EquipmentType.BODYWEIGHT,
    }),
    preferred_split=SplitStyle.PUSH_PULL_LEGS,
    training_experience=TrainingExperience.INTERMEDIATE,
)


def print_week(plan, number):
    print(f"  Week {number}")
    print("  " + "-" * 63)
    for workout in plan.week(number):
        print(f"  {workout.scheduled_date}  {workout.title}  ({workout.total_sets()} sets)")
        for exercise in workout.exercises:
            first = exercise.sets[0] if exercise.sets else None
            reps = first.target_reps if first else 0
            weight = f"{first.weight:.1f}" if first else "--"
            print(
                f"    {exercise.movement.name:<32} {exercise.set_count} x {reps:<3} "
                f"@ {weight:>6}"
            )
    print()


def mark_week_hard(plan, number):
    """Complete a week with soreness, one drained session and "too easy" lifts."""
    week = plan.week(number)
    for workout in week:
        workout.is_complete = True
        fatigue = FatigueLevel.COMPLETELY_DRAINED if workout is week[-1] else FatigueLevel.NORMAL
        workout.post_feedback = PostWorkoutFeedback(session_fatigue=fatigue)
        for exercise in workout.exercises:
            exercise.feedback = ExerciseFeedback(
                intensity=ExerciseIntensity.TOO_EASY,
                set_volume=SetVolumeRating.TOO_EASY,
            )
            for s in exercise.sets:
                s.is_complete = True
                s.completed_reps = s.target_reps
    week[-1].pre_feedback = PreWorkoutFeedback(
        sore_muscles=[MuscleGroup.QUADS],
    )


def main():
    configure_logging("INFO")
    plan = generate_plan(PLAN_INPUT, WEEKS, start_date=START)
    summary = summarize_plan(plan)

    print()
    print("=" * 65)
    print(f"  {plan.name}: {summary.start_date} -> {summary.end_date}")
    print(f"  {summary.total_workouts} workouts over {plan.week_count} weeks")
    print("=" * 65)
    print()

    print_week(plan, 1)
    print_week(plan, WEEKS)

    print("  Weekly sets per muscle:")
    print(f"  {'Muscle':<14}" + "".join(f"{'W' + str(w.week):>5}" for w in summary.weeks))
    for muscle in MuscleGroup:
        row = [w.sets_by_muscle.get(muscle, 0) for w in summary.weeks]
        if any(row):
            print(f"  {muscle.display_name:<14}" + "".join(f"{n:>5}" for n in row))
    print()

    mark_week_hard(plan, 1)
    plan, report = progress_plan_week(plan, 1)

    print("  " + "-" * 63)
    print("  FEEDBACK APPLIED TO WEEK 2:")
    print("  " + "-" * 63)
    for line in report.log:
        print(f"  - {line}")
    print()
    print_week(plan, 2)


if __name__ == "__main__":
    main()
