"""The tick updater.

One call advances the world by one logical tick. The steps run in a fixed
order, and later steps see the results of earlier ones:

1. Advance the tick counter and the time-of-day clock.
2. Apply survival decay on every decay tick.
3. Run every creature's AI, then remove creatures with no hit points left.
4. Bound the real stats and recompute the displayed stats.
5. End the game if real health has run out.
"""

from __future__ import annotations

import random

from fridays_lies.core.config import Settings, get_settings
from fridays_lies.core.constants import (
    ATTACK_COOLDOWN_MS,
    DAY_CYCLE_LENGTH,
    DEATH_MESSAGE,
    STAT_MIN,
    ms_to_ticks,
)
from fridays_lies.core.logging import get_logger
from fridays_lies.engine.ai import update_entity
from fridays_lies.engine.decay import apply_decay, is_decay_tick
from fridays_lies.engine.perception import perceive_stats
from fridays_lies.models.enums import GameMode
from fridays_lies.models.world import Entity, Stats, WorldState, trim_messages


logger = get_logger(__name__)


def advance_clock(tick: int, time_of_day: int, day_count: int) -> tuple[int, int, int]:
    """Advance the tick counter and the cyclic day clock by one step.

    Returns:
        The new (tick, time_of_day, day_count). A day ends when the clock
        wraps back to zero.
    """
    time_of_day = (time_of_day + 1) % DAY_CYCLE_LENGTH
    if time_of_day == 0:
        day_count += 1
    return tick + 1, time_of_day, day_count


def run_creatures(
    state: WorldState,
    real: Stats,
    now: int,
    rng: random.Random,
    *,
    attack_cooldown: int,
) -> tuple[tuple[Entity, ...], Stats, list[str]]:
    """Run every creature's AI pass against the same world snapshot.

    Returns:
        The surviving creatures, the player's real stats after any bites,
        and the log lines produced.
    """
    messages: list[str] = []
    survivors: list[Entity] = []
    for entity in state.entities:
        outcome = update_entity(entity, state, now, rng, attack_cooldown=attack_cooldown)
        if outcome.damage:
            real = real.model_copy(update={"health": real.health - outcome.damage})
        if outcome.message:
            messages.append(outcome.message)
        if outcome.entity.is_dead:
            logger.debug("Creature removed", entity_id=outcome.entity.id, kind=outcome.entity.type)
            messages.append(f"The {outcome.entity.type.label} is dead.")
            continue
        survivors.append(outcome.entity)
    return tuple(survivors), real, messages


def advance_tick(
    state: WorldState,
    now: int | None = None,
    *,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> WorldState:
    """Advance the simulation by one tick.

    Args:
        state: Current world. Returned unchanged unless the game is playing.
        now: Logical clock in ticks for creature cooldowns. Defaults to the
            new tick counter.
        rng: Random source for creature decisions. When omitted a fresh
            unseeded one is used and the tick is not reproducible.
        settings: Application settings; the cached settings when omitted.

    Returns:
        The next world state.
    """
    if not state.is_playing:
        return state

    settings = settings or get_settings()
    rng = rng or random.Random()
    attack_cooldown = ms_to_ticks(ATTACK_COOLDOWN_MS, settings.simulation.ticks_per_second)

    tick, time_of_day, day_count = advance_clock(state.tick, state.time_of_day, state.day_count)
    if day_count != state.day_count:
        logger.info("New day on the island", day=day_count)
    now = tick if now is None else now

    real = state.player.real_stats
    if is_decay_tick(tick):
        real = apply_decay(real)

    entities, real, messages = run_creatures(
        state, real, now, rng, attack_cooldown=attack_cooldown
    )

    real = real.clamped()
    display = perceive_stats(real, state.pill, tick)

    mode = state.mode
    if real.health <= STAT_MIN:
        mode = GameMode.GAME_OVER
        messages.append(DEATH_MESSAGE)
        logger.info("Player died", tick=tick, day=day_count, pill=state.pill)

    player = state.player.model_copy(update={"real_stats": real, "display_stats": display})
    return state.model_copy(
        update={
            "mode": mode,
            "tick": tick,
            "time_of_day": time_of_day,
            "day_count": day_count,
            "player": player,
            "entities": entities,
            "messages": trim_messages([*state.messages, *messages]),
        }
    )


__all__ = [
    "advance_clock",
    "run_creatures",
    "advance_tick",
]
