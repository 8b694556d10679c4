"""Friday's Lies - survival simulation core.

A castaway, an island, and a companion who may be lying. This package holds
only the simulation: procedural island generation, the tick pipeline
(decay, creature AI, perception, death), and the player's actions. Drawing,
input and menus belong to the front end, which holds a WorldState, forwards
intents, and draws what it reads back.

PERCEPTION PRINCIPLE:
- ``real_stats`` are the TRUTH and drive every rule.
- ``display_stats`` are derived each tick and may lie under the Blue Pill.

Example:
    >>> import random
    >>> from fridays_lies import PillType, create_initial_state, advance_tick, move_player
    >>>
    >>> rng = random.Random(42)
    >>> state = create_initial_state(PillType.BLUE, rng)
    >>> state = move_player(state, 1, 0)
    >>> state = advance_tick(state, rng=rng)
    >>> state.player.display_stats.health
    100.0

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Immutable pydantic snapshots and closed enums.
    engine: Map generation, spawning, tick updater, AI, perception, actions.
"""

from __future__ import annotations

# Core
from fridays_lies.core.config import Settings, get_settings
from fridays_lies.core.exceptions import (
    FridaysLiesError,
    InvalidInventoryIndexError,
    NoValidSpawnError,
)
from fridays_lies.core.logging import configure_logging, get_logger

# Engine
from fridays_lies.engine import (
    IslandSession,
    advance_tick,
    consume_item,
    create_initial_state,
    move_player,
)

# Models
from fridays_lies.models import (
    Coordinates,
    Entity,
    EntityType,
    Facing,
    GameMode,
    Item,
    ItemType,
    PillType,
    Player,
    Stats,
    TileType,
    WorldState,
)


__version__ = "0.1.0"
__all__ = [
    "__version__",
    # Core
    "FridaysLiesError",
    "InvalidInventoryIndexError",
    "NoValidSpawnError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engine
    "IslandSession",
    "create_initial_state",
    "advance_tick",
    "move_player",
    "consume_item",
    # Models
    "Coordinates",
    "Entity",
    "EntityType",
    "Facing",
    "GameMode",
    "Item",
    "ItemType",
    "PillType",
    "Player",
    "Stats",
    "TileType",
    "WorldState",
]
