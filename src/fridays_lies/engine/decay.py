"""Periodic survival decay.

Hunger and thirst drain a little every decay interval. An empty stomach or
an empty canteen costs health; both together cost both amounts. A fed and
watered castaway slowly regains stamina.
"""

from __future__ import annotations

from fridays_lies.core.constants import (
    DECAY_INTERVAL_TICKS,
    DEHYDRATION_DAMAGE,
    HUNGER_DECAY,
    REGEN_THRESHOLD,
    STAMINA_REGEN,
    STARVATION_DAMAGE,
    STAT_MAX,
    STAT_MIN,
    THIRST_DECAY,
)
from fridays_lies.models.world import Stats


def is_decay_tick(tick: int) -> bool:
    return tick % DECAY_INTERVAL_TICKS == 0


def apply_decay(stats: Stats) -> Stats:
    """Apply one decay step.

    Health is not floored here and may come out negative; the tick's death
    check handles that.

    Args:
        stats: Real stats before decay.

    Returns:
        Real stats after decay.
    """
    hunger = max(STAT_MIN, stats.hunger - HUNGER_DECAY)
    thirst = max(STAT_MIN, stats.thirst - THIRST_DECAY)

    health = stats.health
    if hunger <= STAT_MIN:
        health -= STARVATION_DAMAGE
    if thirst <= STAT_MIN:
        health -= DEHYDRATION_DAMAGE

    stamina = stats.stamina
    if hunger > REGEN_THRESHOLD and thirst > REGEN_THRESHOLD:
        stamina = min(STAT_MAX, stamina + STAMINA_REGEN)

    return Stats(health=health, hunger=hunger, thirst=thirst, stamina=stamina)


__all__ = [
    "is_decay_tick",
    "apply_decay",
]
