"""World state factory.

Builds the opening snapshot of a session: the island, the castaway near its
center, crabs and boars scattered over walkable ground, and coconuts to
drink from.
"""

from __future__ import annotations

import random

from fridays_lies.core.config import Settings, get_settings
from fridays_lies.core.constants import (
    BLUE_PILL_GREETING,
    BLUE_PILL_START_HEALTH,
    BOAR_DAMAGE,
    BOAR_HP,
    BOAR_MOVE_MS,
    BOAR_VISIBILITY_THRESHOLD,
    CRAB_DAMAGE,
    CRAB_HP,
    CRAB_MOVE_MS,
    INITIAL_DAY,
    INITIAL_TIME_OF_DAY,
    RED_PILL_GREETING,
    RED_PILL_START_HEALTH,
    START_HUNGER,
    START_STAMINA,
    START_THIRST,
    WELCOME_MESSAGE,
    ms_to_ticks,
)
from fridays_lies.core.logging import get_logger
from fridays_lies.engine.mapgen import generate_map
from fridays_lies.engine.spawning import find_player_spawn, find_valid_spawn, new_id
from fridays_lies.models.enums import EntityType, Facing, GameMode, ItemType, PillType
from fridays_lies.models.world import Entity, Item, Player, Stats, WorldGrid, WorldState


logger = get_logger(__name__)


def create_crab(grid: WorldGrid, rng: random.Random, settings: Settings) -> Entity:
    """Spawn a crab: weak, slow, and always visible."""
    return Entity(
        id=new_id(rng),
        type=EntityType.CRAB,
        pos=find_valid_spawn(grid, rng, max_attempts=settings.world.max_spawn_attempts),
        hp=CRAB_HP,
        max_hp=CRAB_HP,
        damage=CRAB_DAMAGE,
        is_hostile=True,
        visible_in_blue=True,
        last_move=0,
        move_speed=ms_to_ticks(CRAB_MOVE_MS, settings.simulation.ticks_per_second),
    )


def create_boar(grid: WorldGrid, rng: random.Random, settings: Settings) -> Entity:
    """Spawn a boar. Half of them cannot be seen under the Blue Pill."""
    return Entity(
        id=new_id(rng),
        type=EntityType.BOAR,
        pos=find_valid_spawn(grid, rng, max_attempts=settings.world.max_spawn_attempts),
        hp=BOAR_HP,
        max_hp=BOAR_HP,
        damage=BOAR_DAMAGE,
        is_hostile=True,
        visible_in_blue=rng.random() > BOAR_VISIBILITY_THRESHOLD,
        last_move=0,
        move_speed=ms_to_ticks(BOAR_MOVE_MS, settings.simulation.ticks_per_second),
    )


def initial_stats(pill: PillType) -> Stats:
    """Real stats at the start of a session.

    The Red Pill castaway washes ashore hurt; the Blue Pill one feels fine.
    """
    health = RED_PILL_START_HEALTH if pill == PillType.RED else BLUE_PILL_START_HEALTH
    return Stats(health=health, hunger=START_HUNGER, thirst=START_THIRST, stamina=START_STAMINA)


def create_initial_state(
    pill: PillType,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> WorldState:
    """Create the opening world state for a session.

    Args:
        pill: Perception mode chosen by the player.
        rng: Random source. Seeded from ``settings.simulation.seed`` when omitted.
        settings: Application settings; the cached settings when omitted.

    Returns:
        A playing world state at tick 0.

    Raises:
        NoValidSpawnError: If the island has no room for the player or a spawn.
    """
    settings = settings or get_settings()
    rng = rng or random.Random(settings.simulation.seed)
    world = settings.world

    grid = generate_map(world.map_width, world.map_height, rng)
    player_pos = find_player_spawn(grid, rng, max_attempts=world.max_spawn_attempts)

    entities = [create_crab(grid, rng, settings) for _ in range(world.crab_count)]
    entities.extend(create_boar(grid, rng, settings) for _ in range(world.boar_count))

    items = tuple(
        Item(
            id=new_id(rng),
            type=ItemType.COCONUT,
            pos=find_valid_spawn(grid, rng, max_attempts=world.max_spawn_attempts),
            is_fake=False,
        )
        for _ in range(world.coconut_count)
    )

    greeting = BLUE_PILL_GREETING if pill == PillType.BLUE else RED_PILL_GREETING
    state = WorldState(
        mode=GameMode.PLAYING,
        pill=pill,
        map=grid,
        width=world.map_width,
        height=world.map_height,
        tick=0,
        player=Player(
            pos=player_pos,
            real_stats=initial_stats(pill),
            display_stats=Stats(),
            inventory=(),
            facing=Facing.RIGHT,
        ),
        entities=tuple(entities),
        items=items,
        messages=(WELCOME_MESSAGE, greeting),
        day_count=INITIAL_DAY,
        time_of_day=INITIAL_TIME_OF_DAY,
    )
    logger.info(
        "World created",
        pill=pill,
        width=world.map_width,
        height=world.map_height,
        entities=len(state.entities),
        items=len(state.items),
    )
    return state


__all__ = [
    "create_crab",
    "create_boar",
    "initial_stats",
    "create_initial_state",
]
