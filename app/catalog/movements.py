"""
Built-in movement catalogue.

Each entry is a :class:`~app.schemas.movement.MovementDefinition`.  The
planner never reaches for this module directly: a
:class:`MovementCatalog` is handed to the exercise selector, so tests can
inject small fixture catalogues.

``is_compound`` is left to the pattern / secondary-muscle derivation
except where an entry overrides it (e.g. face pulls are a horizontal
pull, but a light isolation movement).
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from app.schemas.movement import EquipmentType, MovementDefinition, MovementPattern
from app.schemas.muscle import MuscleGroup


# ======================================================================
# Catalogue container
# ======================================================================

class MovementCatalog:
    """Read-only, ordered collection of movements keyed by ``movement_id``.

    Insertion order is preserved; the selector relies on it as the final
    tie-breaker.
    """

    def __init__(self, movements: Iterable[MovementDefinition] = ()) -> None:
        self._movements: dict[str, MovementDefinition] = {}
        for movement in movements:
            if movement.movement_id in self._movements:
                raise ValueError(
                    f"Movement '{movement.movement_id}' already registered"
                )
            self._movements[movement.movement_id] = movement

    def __iter__(self) -> Iterator[MovementDefinition]:
        return iter(self._movements.values())

    def __len__(self) -> int:
        return len(self._movements)

    def __contains__(self, movement_id: object) -> bool:
        return movement_id in self._movements

    def get(self, movement_id: str) -> Optional[MovementDefinition]:
        """Look up a movement by its ID.  Returns ``None`` if not found."""
        return self._movements.get(movement_id)

    def get_or_raise(self, movement_id: str) -> MovementDefinition:
        """Look up a movement by its ID.

        Raises :class:`KeyError` if not found.
        """
        movement = self._movements.get(movement_id)
        if movement is None:
            raise KeyError(f"Movement '{movement_id}' not in catalogue")
        return movement

    def filter(
        self,
        muscle: Optional[MuscleGroup] = None,
        equipment: Optional[Iterable[EquipmentType]] = None,
        pattern: Optional[MovementPattern] = None,
        is_compound: Optional[bool] = None,
        primary_only: bool = True,
    ) -> list[MovementDefinition]:
        """Movements matching every given criterion, in catalogue order."""
        allowed = set(equipment) if equipment is not None else None
        result = []
        for movement in self._movements.values():
            if muscle is not None and not movement.trains(muscle, primary_only):
                continue
            if allowed is not None and movement.equipment not in allowed:
                continue
            if pattern is not None and movement.movement_pattern != pattern:
                continue
            if is_compound is not None and movement.is_compound != is_compound:
                continue
            result.append(movement)
        return result

    def movement_ids(self) -> list[str]:
        return list(self._movements.keys())


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
CH = MuscleGroup.CHEST
BK = MuscleGroup.BACK
QD = MuscleGroup.QUADS
HS = MuscleGroup.HAMSTRINGS
GL = MuscleGroup.GLUTES
CV = MuscleGroup.CALVES
BI = MuscleGroup.BICEPS
TR = MuscleGroup.TRICEPS
SH = MuscleGroup.SHOULDERS
AB = MuscleGroup.ABS
FA = MuscleGroup.FOREARMS
TP = MuscleGroup.TRAPS
OB = MuscleGroup.OBLIQUES
LB = MuscleGroup.LOWER_BACK

BB = EquipmentType.BARBELL
DB = EquipmentType.DUMBBELL
MC = EquipmentType.MACHINE
BW = EquipmentType.BODYWEIGHT
CB = EquipmentType.CABLE

P = MovementPattern


def _mv(movement_id, name, primary, secondary, equipment, pattern, is_compound=None) -> MovementDefinition:
    return MovementDefinition(
        movement_id=movement_id,
        name=name,
        primary_muscles=primary,
        secondary_muscles=secondary,
        equipment=equipment,
        movement_pattern=pattern,
        is_compound=is_compound,
    )


# ======================================================================
# Built-in movements
# ======================================================================

_MOVEMENTS: list[MovementDefinition] = [
    # ── Chest ─────────────────────────────────────────────────────
    _mv("barbell_bench_press", "Barbell Bench Press", (CH,), (SH, TR), BB, P.HORIZONTAL_PUSH),
    _mv("dumbbell_incline_press", "Dumbbell Incline Press", (CH,), (SH, TR), DB, P.HORIZONTAL_PUSH),
    _mv("push_ups", "Push-Ups", (CH,), (SH, TR), BW, P.HORIZONTAL_PUSH),
    _mv("cable_flyes", "Cable Flyes", (CH,), (SH,), CB, P.ADDUCTION),
    _mv("machine_pec_deck", "Machine Pec Deck", (CH,), (SH,), MC, P.ADDUCTION),
    _mv("dumbbell_bench_press", "Dumbbell Bench Press", (CH,), (SH, TR), DB, P.HORIZONTAL_PUSH),
    _mv("cable_chest_fly", "Cable Chest Fly", (CH,), (SH,), CB, P.ADDUCTION),
    _mv("dumbbell_fly", "Dumbbell Fly", (CH,), (SH,), DB, P.ADDUCTION),
    _mv("dips", "Dips", (CH,), (SH, TR), BW, P.HORIZONTAL_PUSH),

    # ── Back ──────────────────────────────────────────────────────
    _mv("barbell_deadlift", "Barbell Deadlift", (BK, LB), (GL, HS, FA, TP), BB, P.HINGE),
    _mv("pull_ups", "Pull-Ups", (BK,), (BI,), BW, P.VERTICAL_PULL),
    _mv("bent_over_row", "Bent Over Row", (BK,), (BI, TP, FA, LB), BB, P.HORIZONTAL_PULL),
    _mv("lat_pulldown", "Lat Pulldown", (BK,), (BI, TP, FA), MC, P.VERTICAL_PULL),
    _mv("seated_cable_row", "Seated Cable Row", (BK,), (BI, TP, FA, LB), CB, P.HORIZONTAL_PULL),
    _mv("dumbbell_row", "Dumbbell Row", (BK,), (BI, TP, FA, LB), DB, P.HORIZONTAL_PULL),
    _mv("cable_pullover", "Cable Pullover", (BK,), (AB, TP), CB, P.VERTICAL_PULL, is_compound=False),
    _mv("chin_ups", "Chin-Ups", (BK, BI), (TP, FA), BW, P.VERTICAL_PULL),
    _mv("upright_row", "Upright Row", (TP, SH), (BK, BI), BB, P.VERTICAL_PULL, is_compound=False),
    _mv("dumbbell_shrug", "Dumbbell Shrug", (TP,), (FA,), DB, P.UNKNOWN),
    _mv("superman", "Superman", (BK, LB), (), BW, P.CORE),
    _mv("back_extension", "Back Extension", (LB,), (GL, HS), BW, P.HINGE, is_compound=False),

    # ── Legs ──────────────────────────────────────────────────────
    _mv("barbell_back_squat", "Barbell Back Squat", (QD,), (GL, HS), BB, P.SQUAT),
    _mv("romanian_deadlift", "Romanian Deadlift", (HS,), (GL, BK, LB), BB, P.HINGE),
    _mv("leg_press", "Leg Press", (QD,), (GL, HS), MC, P.SQUAT),
    _mv("bulgarian_split_squat", "Bulgarian Split Squat", (QD,), (GL, HS), DB, P.LUNGE),
    _mv("standing_calf_raise", "Standing Calf Raise", (CV,), (), MC, P.UNKNOWN),
    _mv("dumbbell_calf_raise", "Dumbbell Calf Raise", (CV,), (), DB, P.UNKNOWN),
    _mv("single_leg_calf_raise", "Single-Leg Calf Raise", (CV,), (), BW, P.UNKNOWN),
    _mv("leg_extension", "Leg Extension", (QD,), (), MC, P.KNEE_EXTENSION),
    _mv("lying_leg_curl", "Lying Leg Curl", (HS,), (), MC, P.KNEE_FLEXION),
    _mv("goblet_squat", "Goblet Squat", (QD,), (GL, HS), DB, P.SQUAT),
    _mv("sled_push", "Sled Push", (QD,), (GL, CV), MC, P.SQUAT),
    _mv("barbell_front_squat", "Barbell Front Squat", (QD,), (GL, HS), BB, P.SQUAT),
    _mv("bodyweight_squat", "Bodyweight Squat", (QD, GL), (HS,), BW, P.SQUAT),
    _mv("quad_focused_lunge", "Quad-Focused Lunge", (QD,), (GL,), BW, P.LUNGE),
    _mv("glute_focused_lunge", "Glute-Focused Lunge", (GL,), (QD, HS), BW, P.LUNGE),
    _mv("pistol_squat", "Pistol Squat", (QD,), (GL,), BW, P.SQUAT),
    _mv("barbell_hip_thrust", "Barbell Hip Thrust", (GL,), (HS,), BB, P.HINGE),

    # ── Shoulders ─────────────────────────────────────────────────
    _mv("overhead_press", "Overhead Press", (SH,), (TR,), BB, P.VERTICAL_PUSH),
    _mv("lateral_raise", "Lateral Raise", (SH,), (), DB, P.ABDUCTION),
    _mv("face_pull", "Face Pull", (SH, TP), (BK,), CB, P.HORIZONTAL_PULL, is_compound=False),
    _mv("front_raise", "Front Raise", (SH,), (), DB, P.VERTICAL_PUSH, is_compound=False),
    _mv("arnold_press", "Arnold Press", (SH,), (TR,), DB, P.VERTICAL_PUSH),
    _mv("machine_lateral_raise", "Machine Lateral Raise", (SH,), (), MC, P.ABDUCTION),

    # ── Arms ──────────────────────────────────────────────────────
    _mv("barbell_curl", "Barbell Curl", (BI,), (FA,), BB, P.ELBOW_FLEXION),
    _mv("dumbbell_curl", "Dumbbell Curl", (BI,), (FA,), DB, P.ELBOW_FLEXION),
    _mv("tricep_pushdown", "Tricep Pushdown", (TR,), (), CB, P.ELBOW_EXTENSION),
    _mv("hammer_curl", "Hammer Curl", (BI,), (FA,), DB, P.ELBOW_FLEXION),
    _mv("skull_crushers", "Skull Crushers", (TR,), (), BB, P.ELBOW_EXTENSION),
    _mv("preacher_curl", "Preacher Curl", (BI,), (FA,), MC, P.ELBOW_FLEXION),
    _mv("concentration_curl", "Concentration Curl", (BI,), (FA,), DB, P.ELBOW_FLEXION),
    _mv("overhead_tricep_extension", "Overhead Tricep Extension", (TR,), (SH,), DB, P.ELBOW_EXTENSION),
    _mv("cable_curl", "Cable Curl", (BI,), (FA,), CB, P.ELBOW_FLEXION),
    _mv("chair_dips", "Chair Dips", (TR,), (CH,), BW, P.VERTICAL_PUSH),
    _mv("wrist_curl", "Wrist Curl", (FA,), (), DB, P.UNKNOWN),

    # ── Core ──────────────────────────────────────────────────────
    _mv("cable_crunch", "Cable Crunch", (AB,), (), CB, P.CORE),
    _mv("plank", "Plank", (AB,), (), BW, P.CORE),
    _mv("russian_twist", "Russian Twist", (OB,), (AB,), BW, P.ROTATION),
    _mv("cable_woodchop", "Cable Woodchop", (OB,), (AB,), CB, P.ROTATION),
    _mv("leg_raise", "Leg Raise", (AB,), (), BW, P.CORE),
    _mv("ab_rollout", "Ab Rollout", (AB,), (), MC, P.CORE),
]

DEFAULT_CATALOG = MovementCatalog(_MOVEMENTS)
