"""
Built-in muscle training guidelines.

Weekly working-set landmarks per muscle group, loosely following the
maintenance / productive-volume ranges popularised in the hypertrophy
literature.  The values are **heuristics**, declared as a module-level
table so they can be inspected and tested, and replaced by passing a
different mapping to the volume strategy.
"""

from __future__ import annotations

from typing import Mapping

from app.schemas.muscle import MuscleGroup, MuscleSize, SetRange, TrainingGuidelines


def _g(maintenance: tuple[int, int], hypertrophy: tuple[int, int], size: MuscleSize) -> TrainingGuidelines:
    return TrainingGuidelines(
        maintenance_sets=SetRange(minimum=maintenance[0], maximum=maintenance[1]),
        hypertrophy_sets=SetRange(minimum=hypertrophy[0], maximum=hypertrophy[1]),
        muscle_size=size,
    )


L = MuscleSize.LARGE
S = MuscleSize.SMALL

MUSCLE_GUIDELINES: Mapping[MuscleGroup, TrainingGuidelines] = {
    MuscleGroup.CHEST: _g((4, 8), (10, 20), L),
    MuscleGroup.BACK: _g((6, 8), (10, 22), L),
    MuscleGroup.QUADS: _g((6, 8), (10, 20), L),
    MuscleGroup.HAMSTRINGS: _g((4, 6), (8, 16), L),
    MuscleGroup.GLUTES: _g((2, 4), (6, 16), L),
    MuscleGroup.CALVES: _g((4, 6), (8, 16), S),
    MuscleGroup.BICEPS: _g((4, 6), (8, 20), S),
    MuscleGroup.TRICEPS: _g((4, 6), (8, 18), S),
    MuscleGroup.SHOULDERS: _g((6, 8), (12, 22), S),
    MuscleGroup.ABS: _g((2, 4), (8, 16), S),
    MuscleGroup.FOREARMS: _g((2, 4), (6, 12), S),
    MuscleGroup.TRAPS: _g((2, 4), (6, 16), S),
    MuscleGroup.OBLIQUES: _g((2, 4), (6, 12), S),
    MuscleGroup.LOWER_BACK: _g((2, 4), (4, 10), S),
}


def get_guidelines(
    muscle: MuscleGroup,
    table: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
) -> TrainingGuidelines:
    """Look up the guidelines for *muscle*.

    Raises :class:`KeyError` if the table has no entry for it.
    """
    try:
        return table[muscle]
    except KeyError:
        raise KeyError(f"No training guidelines for muscle '{muscle.value}'") from None


def is_large(
    muscle: MuscleGroup,
    table: Mapping[MuscleGroup, TrainingGuidelines] = MUSCLE_GUIDELINES,
) -> bool:
    return get_guidelines(muscle, table).muscle_size == MuscleSize.LARGE
