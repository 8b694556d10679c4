"""The perception layer: what the castaway believes about themselves.

Under the Red Pill the HUD is reality. Under the Blue Pill the HUD shows a
comfortable lie that only breaks once the truth is nearly fatal: health
reads 100 until real health drops under 20, hunger and thirst hover around
90 until they fall under 10, and stamina always reads full.

The layer also decides which creatures the presentation layer should draw
and how log lines are narrated.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from fridays_lies.core.constants import (
    BLUE_HEALTH_REVEAL_BELOW,
    BLUE_HEALTH_REVEAL_BONUS,
    BLUE_NEED_BASELINE,
    BLUE_NEED_FREQUENCY,
    BLUE_NEED_REVEAL_BELOW,
    BLUE_NEED_REVEAL_VALUE,
    BLUE_NEED_SWING,
    STAT_MAX,
)
from fridays_lies.models.enums import PillType
from fridays_lies.models.world import Entity, Stats, WorldState


@dataclass(frozen=True)
class PillProfile:
    """Presentation hints that follow from the chosen pill.

    Attributes:
        ui_accuracy: Fraction of truth in the HUD. At 1.0 :func:`perceive_stats`
            shows the real stats; below it the HUD shows the comfortable lie.
            Front ends may also use it to tint or desaturate the HUD.
        narrator_prefix: Prefix put in front of every log line.
    """

    ui_accuracy: float
    narrator_prefix: str


PILL_PROFILES: dict[PillType, PillProfile] = {
    PillType.RED: PillProfile(ui_accuracy=1.0, narrator_prefix="> "),
    PillType.BLUE: PillProfile(ui_accuracy=0.0, narrator_prefix="Friday: "),
}


def _deceptive_stats(real: Stats, tick: int) -> Stats:
    phase = tick * BLUE_NEED_FREQUENCY
    if real.health < BLUE_HEALTH_REVEAL_BELOW:
        health = real.health + BLUE_HEALTH_REVEAL_BONUS
    else:
        health = STAT_MAX
    if real.hunger < BLUE_NEED_REVEAL_BELOW:
        hunger = BLUE_NEED_REVEAL_VALUE
    else:
        hunger = BLUE_NEED_BASELINE + math.sin(phase) * BLUE_NEED_SWING
    if real.thirst < BLUE_NEED_REVEAL_BELOW:
        thirst = BLUE_NEED_REVEAL_VALUE
    else:
        thirst = BLUE_NEED_BASELINE + math.cos(phase) * BLUE_NEED_SWING
    return Stats(health=health, hunger=hunger, thirst=thirst, stamina=STAT_MAX)


def perceive_stats(real: Stats, pill: PillType, tick: int) -> Stats:
    """Map real stats to the stats shown on the HUD.

    Args:
        real: Ground-truth stats.
        pill: Active perception mode.
        tick: Current tick, which drives the Blue Pill's idle oscillation.

    Returns:
        The displayed stats. Under the Red Pill these equal ``real``.
    """
    if PILL_PROFILES[pill].ui_accuracy >= 1.0:
        return real.model_copy()
    return _deceptive_stats(real, tick)


def refresh_display(state: WorldState) -> WorldState:
    """Recompute the player's displayed stats from their real stats."""
    display = perceive_stats(state.player.real_stats, state.pill, state.tick)
    return state.model_copy(
        update={"player": state.player.model_copy(update={"display_stats": display})}
    )


def is_entity_visible(entity: Entity, pill: PillType) -> bool:
    """Whether the presentation layer should draw ``entity``.

    Under the Blue Pill some boars are hidden; they still move and bite.
    """
    if pill == PillType.RED:
        return True
    return entity.visible_in_blue


def visible_entities(state: WorldState) -> tuple[Entity, ...]:
    return tuple(e for e in state.entities if is_entity_visible(e, state.pill))


def narrate(state: WorldState) -> tuple[str, ...]:
    """Log lines as the HUD prints them, prefixed per pill."""
    prefix = PILL_PROFILES[state.pill].narrator_prefix
    return tuple(f"{prefix}{message}" for message in state.messages)


__all__ = [
    "PillProfile",
    "PILL_PROFILES",
    "perceive_stats",
    "refresh_display",
    "is_entity_visible",
    "visible_entities",
    "narrate",
]
