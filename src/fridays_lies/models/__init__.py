"""Immutable data models for the Friday's Lies simulation core."""

from __future__ import annotations

from fridays_lies.models.enums import (
    EntityType,
    Facing,
    GameMode,
    ItemType,
    PillType,
    TileType,
)
from fridays_lies.models.world import (
    Coordinates,
    Entity,
    Item,
    Player,
    Stats,
    WorldGrid,
    WorldState,
    trim_messages,
)


__all__ = [
    # Enums
    "EntityType",
    "Facing",
    "GameMode",
    "ItemType",
    "PillType",
    "TileType",
    # Models
    "Coordinates",
    "Entity",
    "Item",
    "Player",
    "Stats",
    "WorldGrid",
    "WorldState",
    # Helpers
    "trim_messages",
]
