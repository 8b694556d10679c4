"""Creature AI.

Every creature decides on its own, with no coordination. A creature acts
only once its cooldown has elapsed. Hostile creatures within chase range
step toward the player along one randomly chosen axis, or bite when the
player is close enough. Everything else wanders one cardinal step.

Cooldowns are measured in ticks. ``now`` is the logical clock supplied by the
tick updater.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from fridays_lies.core.constants import ATTACK_RANGE, CHASE_RANGE
from fridays_lies.models.world import Coordinates, Entity, WorldState


WANDER_STEPS: tuple[tuple[int, int], ...] = (
    (0, -1),  # up
    (0, 1),  # down
    (-1, 0),  # left
    (1, 0),  # right
)


@dataclass(frozen=True)
class AIOutcome:
    """Result of one creature's turn.

    Attributes:
        entity: The creature after acting.
        damage: Damage dealt to the player's real health (0 if no bite).
        message: Log line to append, if any.
    """

    entity: Entity
    damage: int = 0
    message: str | None = None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def distance_to_player(entity: Entity, state: WorldState) -> float:
    player = state.player.pos
    return math.hypot(player.x - entity.pos.x, player.y - entity.pos.y)


def is_ready(entity: Entity, now: int) -> bool:
    return now - entity.last_move >= entity.move_speed


def update_entity(
    entity: Entity,
    state: WorldState,
    now: int,
    rng: random.Random,
    *,
    attack_cooldown: int,
) -> AIOutcome:
    """Run one AI pass for a creature.

    Args:
        entity: The creature.
        state: Current world, read for the map and the player position.
        now: Logical clock in ticks.
        rng: Random source for axis choice and wandering.
        attack_cooldown: Extra ticks a creature rests after biting.

    Returns:
        The creature's new state and any damage it dealt.
    """
    if not is_ready(entity, now):
        return AIOutcome(entity=entity)

    distance = distance_to_player(entity, state)
    if entity.is_hostile and distance < CHASE_RANGE:
        if distance <= ATTACK_RANGE:
            rested = entity.model_copy(update={"last_move": now + attack_cooldown})
            return AIOutcome(
                entity=rested,
                damage=entity.damage,
                message=f"The {entity.type.label} attacked you!",
            )
        player = state.player.pos
        if rng.random() > 0.5:
            step = (_sign(player.x - entity.pos.x), 0)
        else:
            step = (0, _sign(player.y - entity.pos.y))
    else:
        step = WANDER_STEPS[rng.randrange(len(WANDER_STEPS))]

    target: Coordinates = entity.pos.offset(*step)
    update: dict[str, object] = {"last_move": now}
    if state.is_walkable(target.x, target.y):
        update["pos"] = target
    return AIOutcome(entity=entity.model_copy(update=update))


__all__ = [
    "WANDER_STEPS",
    "AIOutcome",
    "distance_to_player",
    "is_ready",
    "update_entity",
]
