"""
Strategy interfaces for the plan generator.

The generator only talks to these abstractions, so alternative volume
models, selectors or workout builders can be injected without touching
it:

- :class:`VolumeStrategy` -- weekly set targets and their ramp over a plan
- :class:`ExerciseSelector` -- ranks catalogue movements for a muscle slot
- :class:`WorkoutBuilder` -- composes one training day
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from typing import Iterable, Mapping, Optional

from app.schemas.movement import EquipmentType, MovementDefinition, MovementPattern
from app.schemas.muscle import MuscleGroup
from app.schemas.plan_input import PlanInput, TrainingGoal
from app.schemas.volume import VolumeRecommendation


class VolumeStrategy(ABC):
    """Weekly volume model."""

    @abstractmethod
    def calculate_volume(
        self,
        muscle: MuscleGroup,
        goal: TrainingGoal,
        training_age: float,
        is_emphasized: bool,
    ) -> VolumeRecommendation:
        """Target weekly sets, rep range and intensity for *muscle*."""
        ...

    @abstractmethod
    def calculate_volume_for_week(
        self,
        target_sets: int,
        current_week: int,
        total_weeks: int,
        is_maintenance: bool,
    ) -> int:
        """Share of *target_sets* to program in *current_week* (1-based)."""
        ...


class ExerciseSelector(ABC):
    """Picks movements for a muscle slot."""

    @abstractmethod
    def select_exercises(
        self,
        target_muscle: MuscleGroup,
        *,
        available_equipment: Iterable[EquipmentType],
        movement_pattern: Optional[MovementPattern] = None,
        is_compound: Optional[bool] = None,
        excluded: Iterable[MovementDefinition] = (),
    ) -> list[MovementDefinition]:
        """All acceptable movements for the slot, best first."""
        ...

    # ------------------------------------------------------------------
    # Optional overrides with sensible defaults
    # ------------------------------------------------------------------

    def find_suitable_movement(
        self,
        target_muscle: MuscleGroup,
        *,
        available_equipment: Iterable[EquipmentType],
        movement_pattern: Optional[MovementPattern] = None,
        is_compound: Optional[bool] = None,
        excluded: Iterable[MovementDefinition] = (),
    ) -> Optional[MovementDefinition]:
        """Best movement for the slot, or ``None`` if nothing fits.

        ``None`` is a normal outcome: the caller skips the slot.
        """
        candidates = self.select_exercises(
            target_muscle,
            available_equipment=available_equipment,
            movement_pattern=movement_pattern,
            is_compound=is_compound,
            excluded=excluded,
        )
        return candidates[0] if candidates else None


class WorkoutBuilder(ABC):
    """Builds a single training day."""

    @abstractmethod
    def compose(
        self,
        plan_input: PlanInput,
        day_number: int,
        *,
        total_weeks: int,
        frequency_map: Mapping[MuscleGroup, int],
        scheduled_date: Optional[datetime.date] = None,
    ):
        """Compose day *day_number* (1-based) of the base week.

        Returns a :class:`~app.planner.composer.ComposedWorkout`.
        """
        ...
