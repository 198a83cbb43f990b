"""
Movement definition schemas.

A :class:`MovementDefinition` is an immutable catalogue entry: which
muscles an exercise trains, with what equipment and along which movement
pattern.  ``is_compound`` is derived from the pattern and the number of
secondary muscles unless a catalogue entry states it explicitly.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.schemas.muscle import MuscleGroup


class EquipmentType(str, Enum):
    BARBELL = "barbell"
    DUMBBELL = "dumbbell"
    MACHINE = "machine"
    BODYWEIGHT = "bodyweight"
    CABLE = "cable"


class MovementPattern(str, Enum):
    SQUAT = "squat"
    HINGE = "hinge"
    LUNGE = "lunge"
    HORIZONTAL_PUSH = "horizontal_push"
    VERTICAL_PUSH = "vertical_push"
    HORIZONTAL_PULL = "horizontal_pull"
    VERTICAL_PULL = "vertical_pull"
    ADDUCTION = "adduction"
    ABDUCTION = "abduction"
    KNEE_EXTENSION = "knee_extension"
    KNEE_FLEXION = "knee_flexion"
    ELBOW_FLEXION = "elbow_flexion"
    ELBOW_EXTENSION = "elbow_extension"
    CORE = "core"
    ROTATION = "rotation"
    UNKNOWN = "unknown"


# Multi-joint, technically demanding patterns.  Used both for the
# compound derivation and as a selection tie-breaker.
COMPLEX_PATTERNS: frozenset[MovementPattern] = frozenset({
    MovementPattern.SQUAT,
    MovementPattern.HINGE,
    MovementPattern.LUNGE,
    MovementPattern.HORIZONTAL_PUSH,
    MovementPattern.VERTICAL_PUSH,
    MovementPattern.HORIZONTAL_PULL,
    MovementPattern.VERTICAL_PULL,
})


def derive_is_compound(pattern: MovementPattern, secondary_count: int) -> bool:
    """A movement is compound if its pattern is multi-joint or it
    recruits two or more secondary muscles."""
    return pattern in COMPLEX_PATTERNS or secondary_count >= 2


class MovementDefinition(BaseModel):
    """Catalogue entry for a single exercise."""

    model_config = ConfigDict(frozen=True)

    movement_id: str = Field(..., min_length=1, description="Unique slug, e.g. 'barbell_bench_press'")
    name: str
    primary_muscles: tuple[MuscleGroup, ...] = Field(..., min_length=1)
    secondary_muscles: tuple[MuscleGroup, ...] = ()
    equipment: EquipmentType
    movement_pattern: MovementPattern = MovementPattern.UNKNOWN
    is_compound: bool

    @model_validator(mode="before")
    @classmethod
    def _derive_compound(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("is_compound") is None:
            pattern = MovementPattern(data.get("movement_pattern", MovementPattern.UNKNOWN))
            secondary = data.get("secondary_muscles") or ()
            data = {**data, "is_compound": derive_is_compound(pattern, len(secondary))}
        return data

    @property
    def primary_muscle(self) -> MuscleGroup:
        """The dominant muscle (first primary)."""
        return self.primary_muscles[0]

    @property
    def muscle_groups(self) -> tuple[MuscleGroup, ...]:
        """Primary then secondary muscles, without duplicates."""
        seen: list[MuscleGroup] = []
        for muscle in self.primary_muscles + self.secondary_muscles:
            if muscle not in seen:
                seen.append(muscle)
        return tuple(seen)

    @property
    def is_complex(self) -> bool:
        return self.movement_pattern in COMPLEX_PATTERNS

    def trains(self, muscle: MuscleGroup, primary_only: bool = True) -> bool:
        if primary_only:
            return muscle in self.primary_muscles
        return muscle in self.primary_muscles or muscle in self.secondary_muscles


class MovementSuggestion(BaseModel):
    """A scored catalogue match for a set of target muscles."""

    movement: MovementDefinition
    score: float
    matched_muscles: list[MuscleGroup] = Field(default_factory=list)
