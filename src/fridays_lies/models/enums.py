"""Enumeration types for the Friday's Lies simulation core.

Every kind of thing on the island is a closed enum. Behavior keyed on a kind
(solidity, creature labels, consume effects) is looked up in tables that
cover every member, so adding a member means extending each table.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class GameMode(StrEnum):
    """Lifecycle of a play session."""

    MENU = "MENU"
    """Before a world exists; only the presentation layer uses it."""

    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"
    VICTORY = "VICTORY"
    """Reserved. No rule in the core reaches it."""


class PillType(StrEnum):
    """The perception mode chosen at the start of a session."""

    RED = "RED"
    """Truthful: displayed stats equal real stats."""

    BLUE = "BLUE"
    """Deceptive: displayed stats are a comfortable lie."""

    @property
    def is_deceptive(self) -> bool:
        return self is PillType.BLUE


class TileType(IntEnum):
    """Terrain kinds of the island grid."""

    WATER = 0
    SAND = 1
    GRASS = 2
    TREE = 3
    WRECKAGE = 4
    ROCK = 5

    @property
    def is_solid(self) -> bool:
        """Whether the tile blocks movement for the player and creatures.

        Returns:
            True for water, trees, rocks and the wreckage.
        """
        return _SOLID_TILES[self]


_SOLID_TILES: dict[TileType, bool] = {
    TileType.WATER: True,
    TileType.SAND: False,
    TileType.GRASS: False,
    TileType.TREE: True,
    TileType.WRECKAGE: True,
    TileType.ROCK: True,
}


class EntityType(StrEnum):
    """Creatures living on the island."""

    CRAB = "CRAB"
    BOAR = "BOAR"
    BOSS = "BOSS"

    @property
    def label(self) -> str:
        """Lowercase name used in log messages ("The crab attacked you!")."""
        return self.value.lower()


class ItemType(StrEnum):
    """Things that can lie on the ground or sit in the inventory."""

    COCONUT = "COCONUT"
    MEAT = "MEAT"
    MEDKIT = "MEDKIT"
    WOOD = "WOOD"
    SPEAR = "SPEAR"
    FAKE_WATER = "FAKE_WATER"


class Facing(StrEnum):
    """Horizontal facing of the player sprite. Presentation only."""

    LEFT = "left"
    RIGHT = "right"


__all__ = [
    "GameMode",
    "PillType",
    "TileType",
    "EntityType",
    "ItemType",
    "Facing",
]
