"""Simulation engine: island generation, the tick pipeline and player actions.

The four pure entry points are:

- :func:`create_initial_state`
- :func:`advance_tick`
- :func:`move_player`
- :func:`consume_item`

:class:`IslandSession` wraps them for front ends that prefer to hold one
mutable handle.
"""

from __future__ import annotations

from fridays_lies.engine.actions import CONSUME_EFFECTS, consume_item, move_player
from fridays_lies.engine.ai import AIOutcome, update_entity
from fridays_lies.engine.decay import apply_decay, is_decay_tick
from fridays_lies.engine.factory import create_initial_state, initial_stats
from fridays_lies.engine.mapgen import classify_cell, count_tiles, generate_map
from fridays_lies.engine.perception import (
    PILL_PROFILES,
    PillProfile,
    is_entity_visible,
    narrate,
    perceive_stats,
    refresh_display,
    visible_entities,
)
from fridays_lies.engine.session import IslandSession
from fridays_lies.engine.spawning import find_player_spawn, find_valid_spawn
from fridays_lies.engine.tick import advance_tick


__all__ = [
    # Entry points
    "create_initial_state",
    "advance_tick",
    "move_player",
    "consume_item",
    # Session
    "IslandSession",
    # Map & spawning
    "generate_map",
    "classify_cell",
    "count_tiles",
    "find_valid_spawn",
    "find_player_spawn",
    # Rules
    "apply_decay",
    "is_decay_tick",
    "initial_stats",
    "update_entity",
    "AIOutcome",
    "CONSUME_EFFECTS",
    # Perception
    "PILL_PROFILES",
    "PillProfile",
    "perceive_stats",
    "refresh_display",
    "is_entity_visible",
    "visible_entities",
    "narrate",
]
