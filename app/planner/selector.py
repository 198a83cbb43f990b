"""
Exercise selection over an injected movement catalogue.

Ranking rules for a single muscle slot
--------------------------------------

Candidates must list the target among their primary muscles, use
available equipment, match the requested pattern / compound flag and not
be excluded.  They are then ordered by:

1. the target being the movement's *first* (dominant) primary muscle;
2. a technically complex pattern (squat, hinge, lunge, push, pull);
3. secondary-muscle count -- fewer first for isolation requests (more
   focused), more first otherwise (more total stimulus).

The sort is stable, so catalogue order breaks remaining ties.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from app.catalog.movements import DEFAULT_CATALOG, MovementCatalog
from app.planner.base import ExerciseSelector
from app.schemas.movement import (
    EquipmentType,
    MovementDefinition,
    MovementPattern,
    MovementSuggestion,
)
from app.schemas.muscle import MuscleGroup

logger = logging.getLogger(__name__)

# Scoring weights for multi-muscle suggestions.
_PRIMARY_HIT = 2.0
_SECONDARY_HIT = 1.0
_PRIORITY_BONUS = 1.5
_COMPOUND_BONUS = 0.5


def _rank_key(movement: MovementDefinition, target: MuscleGroup, is_compound: Optional[bool]) -> tuple:
    secondary = len(movement.secondary_muscles)
    return (
        movement.primary_muscle != target,
        not movement.is_complex,
        secondary if is_compound is False else -secondary,
    )


class CatalogExerciseSelector(ExerciseSelector):
    """Selector backed by a :class:`~app.catalog.movements.MovementCatalog`."""

    def __init__(self, catalog: MovementCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog

    def select_exercises(
        self,
        target_muscle: MuscleGroup,
        *,
        available_equipment: Iterable[EquipmentType],
        movement_pattern: Optional[MovementPattern] = None,
        is_compound: Optional[bool] = None,
        excluded: Iterable[MovementDefinition] = (),
    ) -> list[MovementDefinition]:
        equipment = set(available_equipment)
        excluded_ids = {m.movement_id for m in excluded}

        candidates = [
            m for m in self.catalog.filter(
                muscle=target_muscle,
                equipment=equipment,
                pattern=movement_pattern,
                is_compound=is_compound,
            )
            if m.movement_id not in excluded_ids
        ]
        candidates.sort(key=lambda m: _rank_key(m, target_muscle, is_compound))

        logger.debug(
            "select %s (pattern=%s compound=%s): %d candidates",
            target_muscle.value,
            movement_pattern.value if movement_pattern else None,
            is_compound,
            len(candidates),
        )
        return candidates

    def score_movements(
        self,
        targets: Iterable[MuscleGroup],
        available_equipment: Iterable[EquipmentType],
        priority: Iterable[MuscleGroup] = (),
        count: int = 5,
    ) -> list[MovementSuggestion]:
        """Score every usable movement against several target muscles.

        Primary hits are worth more than secondary hits, prioritized
        muscles earn a bonus and compounds a small one.  Movements hitting
        none of the targets are dropped.  Returns the *count* best.
        """
        target_list = list(dict.fromkeys(targets))
        priority_set = set(priority)
        equipment = set(available_equipment)

        suggestions: list[MovementSuggestion] = []
        for movement in self.catalog.filter(equipment=equipment):
            score = 0.0
            matched: list[MuscleGroup] = []
            for muscle in target_list:
                if muscle in movement.primary_muscles:
                    score += _PRIMARY_HIT
                elif muscle in movement.secondary_muscles:
                    score += _SECONDARY_HIT
                else:
                    continue
                matched.append(muscle)
                if muscle in priority_set:
                    score += _PRIORITY_BONUS
            if not matched:
                continue
            if movement.is_compound:
                score += _COMPOUND_BONUS
            suggestions.append(
                MovementSuggestion(movement=movement, score=score, matched_muscles=matched)
            )

        suggestions.sort(key=lambda s: -s.score)
        return suggestions[:count]


DEFAULT_SELECTOR = CatalogExerciseSelector()
