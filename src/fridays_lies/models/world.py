"""World state models for the Friday's Lies simulation core.

This module defines the immutable snapshot that every transition consumes
and produces. All models are frozen pydantic models and all collections are
tuples, so two snapshots may safely share the grid, the entity tuple or the
player record: nothing is ever mutated in place. A transition builds its
successor with ``model_copy(update=...)``.

Models:
    Coordinates: An integer grid cell.
    Stats: Health, hunger, thirst and stamina.
    Player: Position, real and displayed stats, inventory.
    Entity: A creature with combat stats and a move cooldown.
    Item: A pickable object on the ground.
    WorldState: The aggregate root handed to and returned by transitions.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from fridays_lies.core.constants import (
    DAY_CYCLE_LENGTH,
    INITIAL_DAY,
    INITIAL_TIME_OF_DAY,
    MAX_MESSAGES,
    STAT_MAX,
    STAT_MIN,
)
from fridays_lies.core.exceptions import InvalidGameStateError
from fridays_lies.models.enums import (
    EntityType,
    Facing,
    GameMode,
    ItemType,
    PillType,
    TileType,
)


WorldGrid = tuple[tuple[TileType, ...], ...]
"""Row-major tile grid, indexed ``grid[y][x]``."""

_SNAPSHOT_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",  # Ignore computed fields when deserializing
)


def _clamp(value: float) -> float:
    return max(STAT_MIN, min(STAT_MAX, value))


# =============================================================================
# Value Types
# =============================================================================


class Coordinates(BaseModel):
    """An integer (x, y) grid cell."""

    model_config = _SNAPSHOT_CONFIG

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Coordinates:
        return Coordinates(x=self.x + dx, y=self.y + dy)


class Stats(BaseModel):
    """The four survival quantities of the player.

    Values are nominally bounded to [0, 100]. Health may dip below zero
    inside a single decay or attack step; :meth:`clamped` brings every value
    back into range and is applied before a transition returns.
    """

    model_config = _SNAPSHOT_CONFIG

    health: float = Field(default=STAT_MAX, description="Hit points; 0 means death")
    hunger: float = Field(default=STAT_MAX, description="Satiation; 0 means starving")
    thirst: float = Field(default=STAT_MAX, description="Hydration; 0 means dehydrated")
    stamina: float = Field(default=STAT_MAX, description="Energy reserve")

    def clamped(self) -> Stats:
        """Return a copy with every stat limited to [0, 100]."""
        return Stats(
            health=_clamp(self.health),
            hunger=_clamp(self.hunger),
            thirst=_clamp(self.thirst),
            stamina=_clamp(self.stamina),
        )


# =============================================================================
# Actors and Items
# =============================================================================


class Player(BaseModel):
    """The castaway.

    Attributes:
        pos: Current grid cell.
        real_stats: Ground truth, changed only by decay, attacks and consumption.
        display_stats: What the HUD shows. Derived from real_stats each tick.
        inventory: Carried item kinds in pickup order.
        facing: Sprite facing, updated by horizontal moves.
    """

    model_config = _SNAPSHOT_CONFIG

    pos: Coordinates
    real_stats: Stats
    display_stats: Stats = Field(default_factory=Stats)
    inventory: tuple[ItemType, ...] = ()
    facing: Facing = Facing.RIGHT


class Entity(BaseModel):
    """A creature on the island.

    Cooldowns are counted in ticks: the creature acts again once
    ``now - last_move >= move_speed``.
    """

    model_config = _SNAPSHOT_CONFIG

    id: str
    type: EntityType
    pos: Coordinates
    hp: int
    max_hp: Annotated[int, Field(ge=1)]
    damage: Annotated[int, Field(ge=0)]
    is_hostile: bool = True
    visible_in_blue: bool = True
    last_move: int = 0
    move_speed: Annotated[int, Field(ge=0)] = 0

    @computed_field(description="Whether the creature has no hit points left")
    @property
    def is_dead(self) -> bool:
        return self.hp <= 0


class Item(BaseModel):
    """A pickable object lying on a tile.

    An item flagged ``is_fake`` exists only in the Blue Pill illusion: it can
    be picked up but yields nothing.
    """

    model_config = _SNAPSHOT_CONFIG

    id: str
    type: ItemType
    pos: Coordinates
    is_fake: bool = False


# =============================================================================
# World State
# =============================================================================


class WorldState(BaseModel):
    """Immutable snapshot of the whole simulation.

    Attributes:
        mode: Session lifecycle; only PLAYING states advance.
        pill: Perception mode chosen at world creation.
        map: The island grid.
        width: Grid width in tiles.
        height: Grid height in tiles.
        tick: Number of ticks simulated so far.
        player: The castaway.
        entities: Creatures, in spawn order.
        items: Items lying on the ground.
        messages: Log lines, most recent last, at most five.
        day_count: Days survived, starting at 1.
        time_of_day: Cyclic clock in [0, 2400).
    """

    model_config = _SNAPSHOT_CONFIG

    mode: GameMode = GameMode.PLAYING
    pill: PillType
    map: WorldGrid
    width: Annotated[int, Field(ge=1)]
    height: Annotated[int, Field(ge=1)]
    tick: Annotated[int, Field(ge=0)] = 0
    player: Player
    entities: tuple[Entity, ...] = ()
    items: tuple[Item, ...] = ()
    messages: Annotated[tuple[str, ...], Field(max_length=MAX_MESSAGES)] = ()
    day_count: Annotated[int, Field(ge=1)] = INITIAL_DAY
    time_of_day: Annotated[int, Field(ge=0, lt=DAY_CYCLE_LENGTH)] = INITIAL_TIME_OF_DAY

    @model_validator(mode="after")
    def validate_layout(self) -> WorldState:
        """Ensure the grid matches the declared size and the player is on it.

        Returns:
            Self if validation passes.

        Raises:
            InvalidGameStateError: If the grid shape or player position is invalid.
        """
        if len(self.map) != self.height or any(len(row) != self.width for row in self.map):
            raise InvalidGameStateError(
                f"Map does not match declared size {self.width}x{self.height}",
                current_state="map_shape",
            )
        if not self.in_bounds(self.player.pos.x, self.player.pos.y):
            raise InvalidGameStateError(
                "Player is outside the map",
                current_state="player_position",
                details={"x": self.player.pos.x, "y": self.player.pos.y},
            )
        return self

    @computed_field(description="Whether transitions still change this state")
    @property
    def is_playing(self) -> bool:
        return self.mode == GameMode.PLAYING

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> TileType:
        return self.map[y][x]

    def is_walkable(self, x: int, y: int) -> bool:
        """Check whether a cell is inside the map and not solid."""
        return self.in_bounds(x, y) and not self.tile_at(x, y).is_solid

    def item_index_at(self, pos: Coordinates) -> int | None:
        """Index of the first item lying on ``pos``, or None."""
        for index, item in enumerate(self.items):
            if item.pos == pos:
                return index
        return None


def trim_messages(messages: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    """Keep only the most recent log lines."""
    return tuple(messages)[-MAX_MESSAGES:]


__all__ = [
    "WorldGrid",
    "Coordinates",
    "Stats",
    "Player",
    "Entity",
    "Item",
    "WorldState",
    "trim_messages",
]
