"""
Volume accounting and plan summaries.

Weekly volume per muscle counts every set of an exercise in full for its
primary muscles and half (rounded up) for its secondary muscles.
"""

from __future__ import annotations

from typing import Iterable

from app.schemas.muscle import MuscleGroup
from app.schemas.plan import PlanSummary, TrainingPlan, WeekSummary, Workout


def weekly_volume_by_muscle(workouts: Iterable[Workout]) -> dict[MuscleGroup, int]:
    """Credited sets per muscle across *workouts*, in muscle-group order."""
    volume: dict[MuscleGroup, int] = {}
    for workout in workouts:
        for exercise in workout.exercises:
            sets = exercise.set_count
            movement = exercise.movement
            for muscle in movement.primary_muscles:
                volume[muscle] = volume.get(muscle, 0) + sets
            for muscle in movement.secondary_muscles:
                if muscle in movement.primary_muscles:
                    continue
                volume[muscle] = volume.get(muscle, 0) + (sets + 1) // 2
    return {m: volume[m] for m in MuscleGroup if m in volume}


def summarize_plan(plan: TrainingPlan) -> PlanSummary:
    weeks = []
    for number, workouts in enumerate(plan.weeks, start=1):
        weeks.append(WeekSummary(
            week=number,
            workouts=len(workouts),
            exercises=sum(len(w.exercises) for w in workouts),
            total_sets=sum(w.total_sets() for w in workouts),
            sets_by_muscle=weekly_volume_by_muscle(workouts),
        ))

    dates = [w.scheduled_date for w in plan.workouts if w.scheduled_date is not None]
    return PlanSummary(
        name=plan.name,
        start_date=plan.start_date,
        end_date=max(dates) if dates else None,
        total_workouts=len(plan.workouts),
        weeks=weeks,
    )
