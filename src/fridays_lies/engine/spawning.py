"""Spawn placement on a generated island.

Two searches exist. Creatures and items use uniform rejection sampling over
the whole grid and accept sand, grass and the wreckage. The player uses a
search that starts at the map center and widens by one cell per attempt,
rejecting only water and trees.

Both searches are bounded and raise NoValidSpawnError once their budget is
spent.
"""

from __future__ import annotations

import math
import random
from uuid import UUID

from fridays_lies.core.constants import DEFAULT_MAX_SPAWN_ATTEMPTS
from fridays_lies.core.exceptions import NoValidSpawnError
from fridays_lies.core.logging import get_logger
from fridays_lies.models.enums import TileType
from fridays_lies.models.world import Coordinates, WorldGrid


logger = get_logger(__name__)

SPAWN_BLOCKERS = frozenset({TileType.WATER, TileType.TREE, TileType.ROCK})
"""Tiles rejected for creature and item spawns."""

PLAYER_SPAWN_BLOCKERS = frozenset({TileType.WATER, TileType.TREE})
"""Tiles rejected for the player spawn. Rocks and wreckage are allowed."""


def new_id(rng: random.Random) -> str:
    """Draw a UUID4 string from ``rng`` so seeded sessions get stable ids."""
    return str(UUID(int=rng.getrandbits(128), version=4))


def find_valid_spawn(
    grid: WorldGrid,
    rng: random.Random,
    *,
    max_attempts: int = DEFAULT_MAX_SPAWN_ATTEMPTS,
) -> Coordinates:
    """Sample uniformly random cells until one accepts a creature or item.

    Args:
        grid: The island grid.
        rng: Random source.
        max_attempts: Number of cells sampled before giving up.

    Returns:
        A cell that is not water, tree or rock.

    Raises:
        NoValidSpawnError: If no acceptable cell was sampled.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    if width and height:
        for _ in range(max_attempts):
            x = rng.randrange(width)
            y = rng.randrange(height)
            if grid[y][x] not in SPAWN_BLOCKERS:
                return Coordinates(x=x, y=y)

    logger.warning("Spawn placement exhausted", attempts=max_attempts, width=width, height=height)
    raise NoValidSpawnError("No walkable spawn cell found", attempts=max_attempts)


def find_player_spawn(
    grid: WorldGrid,
    rng: random.Random,
    *,
    max_attempts: int = DEFAULT_MAX_SPAWN_ATTEMPTS,
) -> Coordinates:
    """Search outward from the map center for a cell the player can start on.

    The first candidate is the center itself. Each further candidate is the
    center offset by ``floor((r - 0.5) * radius)`` on both axes, where the
    radius grows by one per attempt. Candidates off the map are clamped to
    its border.

    Args:
        grid: The island grid.
        rng: Random source.
        max_attempts: Number of candidates tried before giving up.

    Returns:
        A cell that is neither water nor a tree.

    Raises:
        NoValidSpawnError: If no acceptable candidate was found.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0
    if not (width and height):
        raise NoValidSpawnError("Cannot place the player on an empty map", attempts=0)

    center_x = width // 2
    center_y = height // 2
    x, y = center_x, center_y
    radius = 0
    for _ in range(max_attempts):
        if grid[y][x] not in PLAYER_SPAWN_BLOCKERS:
            return Coordinates(x=x, y=y)
        x = center_x + math.floor((rng.random() - 0.5) * radius)
        y = center_y + math.floor((rng.random() - 0.5) * radius)
        x = min(max(x, 0), width - 1)
        y = min(max(y, 0), height - 1)
        radius += 1

    logger.warning("Player placement exhausted", attempts=max_attempts)
    raise NoValidSpawnError("No starting cell found for the player", attempts=max_attempts)


__all__ = [
    "SPAWN_BLOCKERS",
    "PLAYER_SPAWN_BLOCKERS",
    "new_id",
    "find_valid_spawn",
    "find_player_spawn",
]
